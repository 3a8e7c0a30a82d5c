"""
Per-manufacturer orchestration.

Drives each manufacturer through render -> extract -> reconcile -> persist,
strictly one at a time. Every ManufacturerError is caught here, logged with
the manufacturer's name and turned into a FAILED outcome so the batch keeps
going. Any other exception is a bug and propagates.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Optional, Sequence

from component_scraper.errors import ManufacturerError
from component_scraper.extraction import extract_components
from component_scraper.models import ComponentType, Manufacturer
from component_scraper.reconciler import reconcile_components

logger = logging.getLogger(__name__)


class ManufacturerState(Enum):
    """Processing state of one manufacturer"""
    IDLE = "idle"
    RENDERING = "rendering"
    EXTRACTING = "extracting"
    RECONCILING = "reconciling"
    PERSISTED = "persisted"  # Output file written
    EMPTY = "empty"          # Nothing reconciled, no file written
    FAILED = "failed"


@dataclass
class ManufacturerOutcome:
    """Terminal state of one manufacturer's processing"""
    manufacturer: Manufacturer
    state: ManufacturerState
    component_count: int = 0
    output_path: Optional[Path] = None
    error: Optional[ManufacturerError] = None


class ComponentScraper:
    """
    Runs the component pipeline over a list of manufacturers.

    Args:
        renderer: Object whose `open_page(url)` is a context manager yielding
            a RenderedPage and releasing its browsing context on exit
        oracle: ExtractionOracle (or anything with `complete(prompt, max_tokens)`)
        sink: ComponentSink
        component_types: Loaded taxonomy
        max_tokens: Output token budget for each oracle request
    """

    def __init__(
        self,
        renderer,
        oracle,
        sink,
        component_types: Sequence[ComponentType],
        max_tokens: int,
    ):
        self.renderer = renderer
        self.oracle = oracle
        self.sink = sink
        self.component_types = list(component_types)
        self.type_names = [t.name for t in self.component_types]
        self.max_tokens = max_tokens

    def process_manufacturer(self, manufacturer: Manufacturer) -> ManufacturerOutcome:
        """Take one manufacturer from IDLE to a terminal state"""
        state = ManufacturerState.IDLE
        logger.info(f"Processing manufacturer: {manufacturer.name}")

        try:
            state = ManufacturerState.RENDERING
            with self.renderer.open_page(manufacturer.website_url) as page:
                state = ManufacturerState.EXTRACTING
                items = extract_components(self.oracle, page, self.type_names, self.max_tokens)

                state = ManufacturerState.RECONCILING
                components = reconcile_components(manufacturer, items, self.component_types)

            if not components:
                return ManufacturerOutcome(manufacturer, ManufacturerState.EMPTY)

            path = self.sink.save(manufacturer.name, components)
            return ManufacturerOutcome(
                manufacturer,
                ManufacturerState.PERSISTED,
                component_count=len(components),
                output_path=path,
            )

        except ManufacturerError as e:
            if e.manufacturer is None:
                e.manufacturer = manufacturer.name
            logger.error(f"Error processing {manufacturer.name} during {e.stage} "
                         f"({type(e).__name__}, state={state.value}): {e}")
            return ManufacturerOutcome(manufacturer, ManufacturerState.FAILED, error=e)

    def run_batch(self, manufacturers: Sequence[Manufacturer]) -> List[ManufacturerOutcome]:
        """Process every manufacturer in order; one failure never stops the batch"""
        outcomes = []
        for i, manufacturer in enumerate(manufacturers, 1):
            logger.debug(f"[{i}/{len(manufacturers)}] {manufacturer.name}")
            outcomes.append(self.process_manufacturer(manufacturer))
        return outcomes
