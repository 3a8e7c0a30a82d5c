"""
Reference data loading: manufacturers and the component-type taxonomy.

Both documents are JSON arrays. Loading is all-or-nothing: one bad record
fails the whole file with DataLoadError.
"""

import json
import logging
from pathlib import Path
from typing import Any, Callable, List, TypeVar, Union

from component_scraper.errors import DataLoadError
from component_scraper.models import ComponentType, Manufacturer

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _load_records(path: Union[str, Path], build: Callable[[Any], T], label: str) -> List[T]:
    path = Path(path)

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise DataLoadError(f"{label} file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise DataLoadError(f"{label} file is not valid JSON: {path} ({e})") from e
    except (OSError, UnicodeDecodeError) as e:
        raise DataLoadError(f"Unable to read {label} file {path}: {e}") from e

    if not isinstance(data, list):
        raise DataLoadError(f"{label} file must contain a JSON array: {path}")

    records = []
    for index, item in enumerate(data):
        try:
            records.append(build(item))
        except ValueError as e:
            raise DataLoadError(f"Invalid {label} record at index {index} in {path}: {e}") from e

    logger.info(f"Loaded {len(records)} {label} records from {path}")
    return records


def load_manufacturers(path: Union[str, Path]) -> List[Manufacturer]:
    """
    Load and validate the manufacturer list.

    Args:
        path: Path to Manufacturer.json

    Returns:
        Manufacturers in file order

    Raises:
        DataLoadError: File missing, unparsable, or any record invalid
    """
    return _load_records(path, Manufacturer.from_dict, "manufacturer")


def load_component_types(path: Union[str, Path]) -> List[ComponentType]:
    """
    Load and validate the component-type taxonomy.

    Args:
        path: Path to component_types.json

    Returns:
        Component types in file order

    Raises:
        DataLoadError: File missing, unparsable, or any record invalid
    """
    return _load_records(path, ComponentType.from_dict, "component type")
