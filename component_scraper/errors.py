"""
Exception hierarchy for the component scraper.

Fatal errors (configuration, reference data) stop the run before any
manufacturer is processed. ManufacturerError subclasses are isolated to a
single manufacturer by the orchestrator.
"""

from typing import Optional


class ScraperError(Exception):
    """Base class for all component scraper errors"""


class ConfigError(ScraperError):
    """Missing credential or invalid setting"""


class DataLoadError(ScraperError):
    """Reference data file is missing, unparsable or malformed"""


class ManufacturerError(ScraperError):
    """
    Failure confined to one manufacturer's processing.

    The orchestrator fills in `manufacturer` so log lines carry context
    even when the error was raised by a lower layer that never saw it.
    """

    stage = "processing"

    def __init__(self, message: str, manufacturer: Optional[str] = None):
        super().__init__(message)
        self.manufacturer = manufacturer


class RenderError(ManufacturerError):
    """Navigation failed or timed out"""

    stage = "rendering"


class ExtractionError(ManufacturerError):
    """Extraction oracle failed or returned unusable output"""

    stage = "extraction"


class ReconciliationError(ManufacturerError):
    """Assembled component record failed validation"""

    stage = "reconciliation"


class PersistenceError(ManufacturerError):
    """Component file could not be written"""

    stage = "persistence"
