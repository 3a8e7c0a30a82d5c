"""
HVAC Component Scraper

Visits manufacturer websites, asks Claude to identify HVAC product listings,
reconciles them against the component-type taxonomy and writes one JSON
file per manufacturer.
"""

from component_scraper.errors import (
    ConfigError,
    DataLoadError,
    ExtractionError,
    ManufacturerError,
    PersistenceError,
    ReconciliationError,
    RenderError,
    ScraperError,
)
from component_scraper.models import (
    Component,
    ComponentType,
    Manufacturer,
    RawExtractedItem,
    Specifications,
)
from component_scraper.orchestrator import ComponentScraper, ManufacturerOutcome, ManufacturerState

__all__ = [
    "Component",
    "ComponentScraper",
    "ComponentType",
    "ConfigError",
    "DataLoadError",
    "ExtractionError",
    "Manufacturer",
    "ManufacturerError",
    "ManufacturerOutcome",
    "ManufacturerState",
    "PersistenceError",
    "RawExtractedItem",
    "ReconciliationError",
    "RenderError",
    "ScraperError",
    "Specifications",
]
