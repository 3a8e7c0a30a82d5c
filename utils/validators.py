"""
Format checks for reference and scraped records.

UUIDs, URLs and email addresses are validated but never rewritten, so a
value that passes comes back out exactly as it went in.
"""
import re
from typing import Any
from urllib.parse import urlparse

UUID_PATTERN = re.compile(
    r'^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$'
)

EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')

WHITESPACE_PATTERN = re.compile(r"\s")


def is_uuid(value: Any) -> bool:
    """
    Check for a canonical 8-4-4-4-12 hex UUID string.

    Examples:
        >>> is_uuid("3f2b8c1e-9d4a-4e6f-8b7c-1a2b3c4d5e6f")
        True
        >>> is_uuid("3f2b8c1e9d4a4e6f8b7c1a2b3c4d5e6f")
        False
    """
    return isinstance(value, str) and bool(UUID_PATTERN.fullmatch(value))


def is_url(value: Any) -> bool:
    """
    Check for an absolute URL (scheme and host required, no whitespace).

    Examples:
        >>> is_url("https://www.carrier.com/residential/")
        True
        >>> is_url("www.carrier.com")
        False
        >>> is_url("http://:80/")
        False
    """
    if not isinstance(value, str) or not value or WHITESPACE_PATTERN.search(value):
        return False

    try:
        parsed = urlparse(value)
    except ValueError:
        return False

    return bool(parsed.scheme) and bool(parsed.hostname)


def is_email(value: Any) -> bool:
    """
    Check for a plausible email address.

    Examples:
        >>> is_email("sales@lennox.com")
        True
        >>> is_email("sales at lennox.com")
        False
    """
    return isinstance(value, str) and bool(EMAIL_PATTERN.fullmatch(value))
