"""
Extraction oracle adapter.

Sends a rendered manufacturer page to Claude with the allowed component-type
vocabulary and turns the reply into RawExtractedItem records. The reply is
untrusted free text: `parse_extraction_reply` is the only place it is parsed,
and it returns an ExtractionResult instead of raising.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import anthropic

from component_scraper.errors import ExtractionError
from component_scraper.models import RawExtractedItem
from component_scraper.renderer import RenderedPage

logger = logging.getLogger(__name__)

EXTRACTION_PROMPT = """\
Analyze this manufacturer's website and identify HVAC components.
For each component found, extract:
1. Product name and model number
2. Component type (match against: {type_names})
3. Technical specifications (dimensions, weight, capacity, power requirements, operating conditions)
4. Key features
5. Product description
6. Direct URL to the product page

Respond with only a JSON object, no prose and no code fences, in this shape:
{{"components": [{{"name": "...", "modelNumber": "...", "type": "...",
"specifications": {{"dimensions": "...", "weight": "...", "capacity": "...",
"powerRequirements": "...", "operatingConditions": "..."}},
"features": ["..."], "description": "...", "url": "https://..."}}]}}
If no components are found, respond with {{"components": []}}.

Page URL: {url}
Page title: {title}
Page text:
{text}
"""


@dataclass
class ExtractionResult:
    """Outcome of parsing one oracle reply: either items or an error message"""
    items: List[RawExtractedItem] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def build_extraction_prompt(page: RenderedPage, type_names: Sequence[str]) -> str:
    """Fill the fixed instruction template with the vocabulary and page context"""
    return EXTRACTION_PROMPT.format(
        type_names=", ".join(type_names),
        url=page.url,
        title=page.title,
        text=page.text,
    )


def _reject_constant(name: str):
    raise ValueError(f"non-standard JSON constant {name}")


def parse_extraction_reply(text: str) -> ExtractionResult:
    """
    Parse the oracle's reply as a JSON object with a `components` array.

    One strict attempt; surrounding whitespace is the only thing tolerated.

    Returns:
        ExtractionResult with items in reply order, or with `error` set
    """
    try:
        payload = json.loads(text, parse_constant=_reject_constant)
    except (TypeError, ValueError) as e:
        return ExtractionResult(error=f"reply is not valid JSON: {e}")

    if not isinstance(payload, dict):
        return ExtractionResult(error=f"reply must be a JSON object, got {type(payload).__name__}")

    components = payload.get("components")
    if not isinstance(components, list):
        return ExtractionResult(error="reply has no 'components' array")

    items = []
    for index, entry in enumerate(components):
        if not isinstance(entry, dict):
            return ExtractionResult(
                error=f"components[{index}] must be an object, got {type(entry).__name__}"
            )
        items.append(RawExtractedItem.from_dict(entry))

    return ExtractionResult(items=items)


class ExtractionOracle:
    """Thin wrapper around the Anthropic Messages API"""

    def __init__(self, config, client: Optional[anthropic.Anthropic] = None):
        self.config = config
        self.client = client or anthropic.Anthropic(api_key=config.anthropic_api_key)

    def complete(self, prompt: str, max_tokens: int) -> str:
        """
        Send one prompt and return the reply text.

        Raises:
            ExtractionError: API request failed
        """
        try:
            message = self.client.messages.create(
                model=self.config.anthropic_model,
                max_tokens=max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except anthropic.APIError as e:
            raise ExtractionError(f"Anthropic request failed: {e}") from e

        return "".join(
            block.text for block in message.content if getattr(block, "type", None) == "text"
        )


def extract_components(
    oracle: ExtractionOracle,
    page: RenderedPage,
    type_names: Sequence[str],
    max_tokens: int,
) -> List[RawExtractedItem]:
    """
    Ask the oracle for the components listed on `page`.

    Raises:
        ExtractionError: Request failed or the reply could not be parsed
    """
    prompt = build_extraction_prompt(page, type_names)
    reply = oracle.complete(prompt, max_tokens)

    result = parse_extraction_reply(reply)
    if not result.ok:
        raise ExtractionError(f"Unusable extraction reply: {result.error}")

    logger.debug(f"Oracle proposed {len(result.items)} components from {page.url}")
    return result.items
