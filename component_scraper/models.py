"""
Data models for manufacturers, the component-type taxonomy and scraped components.

Every record is a frozen dataclass built through `from_dict`, which checks
each field before the instance exists. A malformed field raises ValueError
naming the field, so a record that was constructed is always valid.
Wire names are camelCase to match the reference JSON documents.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from utils.validators import is_email, is_url, is_uuid


def _require_str(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise ValueError(f"'{key}' must be a string, got {type(value).__name__}")
    return value


def _optional_str(data: Dict[str, Any], key: str) -> Optional[str]:
    # Explicit null is accepted and treated the same as a missing key.
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"'{key}' must be a string when present, got {type(value).__name__}")
    return value


def _require_uuid(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    if not is_uuid(value):
        raise ValueError(f"'{key}' must be a UUID, got {value!r}")
    return value


def _optional_uuid(data: Dict[str, Any], key: str) -> Optional[str]:
    if data.get(key) is None:
        return None
    return _require_uuid(data, key)


def _require_url(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    if not is_url(value):
        raise ValueError(f"'{key}' must be a URL, got {value!r}")
    return value


def _require_mapping(data: Any, what: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError(f"{what} must be a JSON object, got {type(data).__name__}")
    return data


def _drop_none(values: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in values.items() if value is not None}


@dataclass(frozen=True)
class Manufacturer:
    """A company whose website is scraped for HVAC components."""
    id: str
    name: str
    website_url: str
    parent_id: Optional[str]
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    logo_file_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Manufacturer":
        data = _require_mapping(data, "Manufacturer")

        # parentId is nullable but not optional: the key has to be there
        if "parentId" not in data:
            raise ValueError("'parentId' is required (use null for top-level manufacturers)")

        contact_email = data.get("contactEmail")
        if contact_email is not None and not is_email(contact_email):
            raise ValueError(f"'contactEmail' must be an email address, got {contact_email!r}")

        return cls(
            id=_require_uuid(data, "id"),
            name=_require_str(data, "name"),
            website_url=_require_url(data, "websiteUrl"),
            parent_id=_optional_uuid(data, "parentId"),
            contact_email=contact_email,
            contact_phone=_optional_str(data, "contactPhone"),
            logo_file_id=_optional_uuid(data, "logoFileId"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON export"""
        data = _drop_none({
            "id": self.id,
            "name": self.name,
            "websiteUrl": self.website_url,
            "contactEmail": self.contact_email,
            "contactPhone": self.contact_phone,
            "logoFileId": self.logo_file_id,
        })
        data["parentId"] = self.parent_id
        return data


@dataclass(frozen=True)
class ComponentType:
    """Taxonomy entry for a category of HVAC product. `name` is the reconciliation key."""
    type_id: str
    name: str
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "ComponentType":
        data = _require_mapping(data, "ComponentType")
        return cls(
            type_id=_require_uuid(data, "typeId"),
            name=_require_str(data, "name"),
            description=_optional_str(data, "description"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none({
            "typeId": self.type_id,
            "name": self.name,
            "description": self.description,
        })


@dataclass(frozen=True)
class Specifications:
    """Technical specifications of a component. All fields are free text."""
    dimensions: Optional[str] = None
    weight: Optional[str] = None
    capacity: Optional[str] = None
    power_requirements: Optional[str] = None
    operating_conditions: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Specifications":
        data = _require_mapping(data, "'specifications'")
        return cls(
            dimensions=_optional_str(data, "dimensions"),
            weight=_optional_str(data, "weight"),
            capacity=_optional_str(data, "capacity"),
            power_requirements=_optional_str(data, "powerRequirements"),
            operating_conditions=_optional_str(data, "operatingConditions"),
        )

    def to_dict(self) -> Dict[str, str]:
        return _drop_none({
            "dimensions": self.dimensions,
            "weight": self.weight,
            "capacity": self.capacity,
            "powerRequirements": self.power_requirements,
            "operatingConditions": self.operating_conditions,
        })


@dataclass(frozen=True)
class RawExtractedItem:
    """
    One candidate product as returned by the extraction oracle.

    Nothing here is trusted. Fields keep whatever JSON value the oracle
    produced, and are only checked when a Component is built from them.
    """
    name: Any = None
    model_number: Any = None
    type: Any = None
    specifications: Any = None
    features: Any = None
    description: Any = None
    url: Any = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RawExtractedItem":
        return cls(
            name=data.get("name"),
            model_number=data.get("modelNumber"),
            type=data.get("type"),
            specifications=data.get("specifications"),
            features=data.get("features"),
            description=data.get("description"),
            url=data.get("url"),
        )


@dataclass(frozen=True)
class Component:
    """
    Validated component record, one entry of a manufacturer's output file.

    manufacturer_id and type_id always come from loaded reference data;
    urls is never empty and every entry is a well-formed URL.
    """
    manufacturer_id: str
    type_id: str
    name: str
    model_number: str
    description: str
    features: List[str] = field(default_factory=list)
    urls: List[str] = field(default_factory=list)
    specifications: Optional[Specifications] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Component":
        data = _require_mapping(data, "Component")

        features = data.get("features")
        if not isinstance(features, list) or not all(isinstance(f, str) for f in features):
            raise ValueError(f"'features' must be a list of strings, got {features!r}")

        urls = data.get("urls")
        if not isinstance(urls, list) or not urls:
            raise ValueError(f"'urls' must be a non-empty list, got {urls!r}")
        for url in urls:
            if not is_url(url):
                raise ValueError(f"'urls' contains an invalid URL: {url!r}")

        specifications = data.get("specifications")
        if specifications is not None:
            specifications = Specifications.from_dict(specifications)

        return cls(
            manufacturer_id=_require_uuid(data, "manufacturerId"),
            type_id=_require_uuid(data, "typeId"),
            name=_require_str(data, "name"),
            model_number=_require_str(data, "modelNumber"),
            description=_require_str(data, "description"),
            features=list(features),
            urls=list(urls),
            specifications=specifications,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON export"""
        data: Dict[str, Any] = {
            "manufacturerId": self.manufacturer_id,
            "typeId": self.type_id,
            "name": self.name,
            "modelNumber": self.model_number,
            "description": self.description,
        }
        if self.specifications is not None:
            data["specifications"] = self.specifications.to_dict()
        data["features"] = list(self.features)
        data["urls"] = list(self.urls)
        return data
