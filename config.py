"""
Configuration for the HVAC Component Scraper
Input/output locations, browser and extraction oracle settings
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from component_scraper.errors import ConfigError

# Reference data and output locations (relative to the working directory)
MANUFACTURERS_FILE = "Manufacturer.json"
COMPONENT_TYPES_FILE = "component_types.json"
OUTPUT_DIR = "component_output"

# Anthropic extraction oracle
ANTHROPIC_MODEL = "claude-3-sonnet-20240229"
ORACLE_MAX_TOKENS = 1024

# Browser
NAVIGATION_TIMEOUT_MS = 30000  # 30 seconds per manufacturer homepage
BROWSER_LAUNCH_TIMEOUT_MS = 30000
PAGE_TEXT_LIMIT = 20000  # characters of visible page text sent to the oracle

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}


def _env_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}")
    if value <= 0:
        raise ConfigError(f"{name} must be positive, got {value}")
    return value


def _env_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    lowered = raw.strip().lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean, got {raw!r}")


@dataclass(frozen=True)
class ScraperConfig:
    """
    Settings for one scraper run.

    Built once at startup and passed to the extraction oracle, the page
    renderer and the component sink.
    """
    anthropic_api_key: str
    anthropic_model: str = ANTHROPIC_MODEL
    oracle_max_tokens: int = ORACLE_MAX_TOKENS
    navigation_timeout_ms: int = NAVIGATION_TIMEOUT_MS
    browser_launch_timeout_ms: int = BROWSER_LAUNCH_TIMEOUT_MS
    headless: bool = True
    page_text_limit: int = PAGE_TEXT_LIMIT
    manufacturers_file: Path = Path(MANUFACTURERS_FILE)
    component_types_file: Path = Path(COMPONENT_TYPES_FILE)
    output_dir: Path = Path(OUTPUT_DIR)

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "ScraperConfig":
        """
        Build configuration from environment variables.

        Loads a .env file first when reading the real process environment.

        Args:
            env: Mapping to read instead of os.environ (tests)

        Raises:
            ConfigError: ANTHROPIC_API_KEY missing or a setting is malformed
        """
        if env is None:
            load_dotenv()
            env = os.environ

        api_key = env.get("ANTHROPIC_API_KEY", "").strip()
        if not api_key:
            raise ConfigError("ANTHROPIC_API_KEY is required (set it in the environment or .env file)")

        return cls(
            anthropic_api_key=api_key,
            anthropic_model=env.get("ANTHROPIC_MODEL") or ANTHROPIC_MODEL,
            oracle_max_tokens=_env_int(env, "ORACLE_MAX_TOKENS", ORACLE_MAX_TOKENS),
            navigation_timeout_ms=_env_int(env, "NAVIGATION_TIMEOUT_MS", NAVIGATION_TIMEOUT_MS),
            browser_launch_timeout_ms=_env_int(env, "BROWSER_LAUNCH_TIMEOUT_MS", BROWSER_LAUNCH_TIMEOUT_MS),
            headless=_env_bool(env, "HEADLESS", True),
            page_text_limit=_env_int(env, "PAGE_TEXT_LIMIT", PAGE_TEXT_LIMIT),
            manufacturers_file=Path(env.get("MANUFACTURERS_FILE") or MANUFACTURERS_FILE),
            component_types_file=Path(env.get("COMPONENT_TYPES_FILE") or COMPONENT_TYPES_FILE),
            output_dir=Path(env.get("COMPONENT_OUTPUT_DIR") or OUTPUT_DIR),
        )
