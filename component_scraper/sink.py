"""
Component persistence.

One indented JSON file per manufacturer in a flat output directory. The
document is fully serialized before the single write, and an existing
file with the same name is overwritten.
"""

import json
import logging
import re
from pathlib import Path
from typing import Sequence, Union

from component_scraper.errors import PersistenceError
from component_scraper.models import Component

logger = logging.getLogger(__name__)

OUTPUT_SUFFIX = "_components.json"


def output_filename(manufacturer_name: str) -> str:
    """
    Derive a filesystem-safe file name from a manufacturer name.

    Examples:
        >>> output_filename("Acme/Co. #1")
        'acme_co_1_components.json'
    """
    return re.sub(r'[^A-Za-z0-9]', '_', manufacturer_name).lower() + OUTPUT_SUFFIX


def ensure_output_directory(output_dir: Union[str, Path]) -> Path:
    """Create the output directory if needed. Failures are fatal for the run."""
    path = Path(output_dir)
    path.mkdir(parents=True, exist_ok=True)
    return path


class ComponentSink:
    """Writes validated components for one manufacturer at a time"""

    def __init__(self, output_dir: Union[str, Path]):
        self.output_dir = Path(output_dir)

    def path_for(self, manufacturer_name: str) -> Path:
        return self.output_dir / output_filename(manufacturer_name)

    def save(self, manufacturer_name: str, components: Sequence[Component]) -> Path:
        """
        Save components to `<output_dir>/<sanitized name>_components.json`.

        Args:
            manufacturer_name: Display name, sanitized for the file name
            components: Non-empty list of validated components

        Returns:
            Path written

        Raises:
            ValueError: components is empty
            PersistenceError: File could not be written
        """
        if not components:
            raise ValueError("refusing to write an empty component file")

        path = self.path_for(manufacturer_name)
        document = json.dumps([c.to_dict() for c in components], indent=2)

        try:
            with open(path, "w", encoding="utf-8") as f:
                f.write(document)
        except OSError as e:
            raise PersistenceError(
                f"Unable to write {path}: {e}", manufacturer=manufacturer_name
            ) from e

        logger.info(f"Saved {len(components)} components for {manufacturer_name} to {path}")
        return path
