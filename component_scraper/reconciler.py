"""
Component reconciliation.

Resolves the oracle's free-text type label to a known ComponentType by
case-insensitive exact name match, then builds a validated Component.
Unmatched items are dropped. A matched item that fails validation fails
the whole manufacturer, since it means the oracle broke its output contract.
"""

import logging
from typing import Dict, List, Optional, Sequence

from component_scraper.errors import ReconciliationError
from component_scraper.models import Component, ComponentType, Manufacturer, RawExtractedItem

logger = logging.getLogger(__name__)


def build_type_index(component_types: Sequence[ComponentType]) -> Dict[str, ComponentType]:
    """
    Map lowercased type names to component types.

    The first entry wins when two types share a name.
    """
    index: Dict[str, ComponentType] = {}
    for component_type in component_types:
        index.setdefault(component_type.name.lower(), component_type)
    return index


def match_component_type(
    type_label, type_index: Dict[str, ComponentType]
) -> Optional[ComponentType]:
    """Exact, case-insensitive lookup. Non-string labels never match."""
    if not isinstance(type_label, str):
        return None
    return type_index.get(type_label.lower())


def reconcile_components(
    manufacturer: Manufacturer,
    items: Sequence[RawExtractedItem],
    component_types: Sequence[ComponentType],
) -> List[Component]:
    """
    Turn raw extracted items into validated components.

    Args:
        manufacturer: Manufacturer the items were scraped for
        items: Oracle output in reply order
        component_types: Known taxonomy

    Returns:
        Components in input order, unmatched items removed

    Raises:
        ReconciliationError: A matched item failed Component validation
    """
    type_index = build_type_index(component_types)
    components = []

    for position, item in enumerate(items):
        component_type = match_component_type(item.type, type_index)
        if component_type is None:
            logger.debug(f"{manufacturer.name}: dropping item {position} with unknown type {item.type!r}")
            continue

        record = {
            "manufacturerId": manufacturer.id,
            "typeId": component_type.type_id,
            "name": item.name,
            "modelNumber": item.model_number,
            "description": item.description,
            "specifications": item.specifications,
            "features": item.features,
            "urls": [item.url],
        }

        try:
            components.append(Component.from_dict(record))
        except ValueError as e:
            raise ReconciliationError(
                f"Item {position} ({item.name!r}) is not a valid component: {e}",
                manufacturer=manufacturer.name,
            ) from e

    return components
