import pytest

from component_scraper.models import (
    Component,
    ComponentType,
    Manufacturer,
    RawExtractedItem,
    Specifications,
)
from conftest import CARRIER_ID, COMPRESSOR_TYPE_ID


def component_record(**overrides):
    record = {
        "manufacturerId": CARRIER_ID,
        "typeId": COMPRESSOR_TYPE_ID,
        "name": "Scroll Compressor",
        "modelNumber": "ZP54K5E",
        "description": "Residential scroll compressor",
        "specifications": {"capacity": "4.5 tons"},
        "features": ["Quiet operation"],
        "urls": ["https://www.carrier.com/products/zp54k5e"],
    }
    record.update(overrides)
    return record


def test_manufacturer_from_dict(manufacturer_records):
    """Test all fields map from camelCase wire names"""
    manufacturer = Manufacturer.from_dict(manufacturer_records[0])

    assert manufacturer.id == CARRIER_ID
    assert manufacturer.name == "Carrier"
    assert manufacturer.website_url == "https://www.carrier.com/residential/"
    assert manufacturer.contact_email == "sales@carrier.com"
    assert manufacturer.contact_phone == "(800) 227-7437"
    assert manufacturer.parent_id is None
    assert manufacturer.logo_file_id is None


def test_manufacturer_to_dict_round_trips(manufacturer_records):
    """Test serialization reproduces the input record"""
    for record in manufacturer_records:
        assert Manufacturer.from_dict(record).to_dict() == record


def test_manufacturer_requires_parent_id_key(manufacturer_records):
    """Test parentId may be null but not missing"""
    record = dict(manufacturer_records[0])
    del record["parentId"]

    with pytest.raises(ValueError, match="parentId"):
        Manufacturer.from_dict(record)


@pytest.mark.parametrize("field,value", [
    ("id", "not-a-uuid"),
    ("websiteUrl", "carrier.com"),
    ("contactEmail", "sales-at-carrier"),
    ("parentId", "123"),
    ("name", None),
])
def test_manufacturer_rejects_malformed_field(manufacturer_records, field, value):
    """Test each constrained field is checked"""
    record = dict(manufacturer_records[0])
    record[field] = value

    with pytest.raises(ValueError, match=field):
        Manufacturer.from_dict(record)


def test_manufacturer_rejects_non_object():
    """Test non-dict records fail"""
    with pytest.raises(ValueError):
        Manufacturer.from_dict(["Carrier"])


def test_component_type_from_dict(component_type_records):
    """Test optional description"""
    with_description = ComponentType.from_dict(component_type_records[0])
    without_description = ComponentType.from_dict(component_type_records[1])

    assert with_description.description == "Refrigerant compressors"
    assert without_description.description is None
    assert without_description.to_dict() == component_type_records[1]


def test_component_type_rejects_bad_type_id():
    """Test typeId must be a UUID"""
    with pytest.raises(ValueError, match="typeId"):
        ComponentType.from_dict({"typeId": "compressor", "name": "Compressor"})


def test_component_from_dict_and_to_dict():
    """Test a valid component serializes with camelCase keys"""
    component = Component.from_dict(component_record())

    assert component.specifications == Specifications(capacity="4.5 tons")
    assert component.to_dict() == {
        "manufacturerId": CARRIER_ID,
        "typeId": COMPRESSOR_TYPE_ID,
        "name": "Scroll Compressor",
        "modelNumber": "ZP54K5E",
        "description": "Residential scroll compressor",
        "specifications": {"capacity": "4.5 tons"},
        "features": ["Quiet operation"],
        "urls": ["https://www.carrier.com/products/zp54k5e"],
    }


def test_component_without_specifications():
    """Test specifications are optional and omitted from output"""
    component = Component.from_dict(component_record(specifications=None))

    assert component.specifications is None
    assert "specifications" not in component.to_dict()


def test_explicit_null_optional_fields_are_absent(manufacturer_records):
    """Test null optional values are treated as missing, not rejected"""
    record = dict(manufacturer_records[0], contactEmail=None, contactPhone=None, logoFileId=None)
    manufacturer = Manufacturer.from_dict(record)
    component = Component.from_dict(component_record(
        specifications={"capacity": "4.5 tons", "weight": None}
    ))

    assert manufacturer.contact_email is None
    assert "contactEmail" not in manufacturer.to_dict()
    assert component.to_dict()["specifications"] == {"capacity": "4.5 tons"}


def test_component_ignores_unknown_specification_keys():
    """Test unknown specification keys are dropped"""
    component = Component.from_dict(component_record(
        specifications={"weight": "80 lb", "refrigerant": "R-410A"}
    ))

    assert component.to_dict()["specifications"] == {"weight": "80 lb"}


@pytest.mark.parametrize("overrides,field", [
    ({"urls": []}, "urls"),
    ({"urls": [None]}, "urls"),
    ({"urls": ["not a url"]}, "urls"),
    ({"description": None}, "description"),
    ({"modelNumber": 54}, "modelNumber"),
    ({"features": "Quiet operation"}, "features"),
    ({"features": ["ok", 3]}, "features"),
    ({"specifications": "4.5 tons"}, "specifications"),
    ({"specifications": {"capacity": 4.5}}, "capacity"),
    ({"typeId": "compressor"}, "typeId"),
])
def test_component_rejects_invalid_records(overrides, field):
    """Test a component is never constructed from a malformed record"""
    with pytest.raises(ValueError, match=field):
        Component.from_dict(component_record(**overrides))


def test_raw_item_keeps_untrusted_values():
    """Test raw items accept anything and default missing keys to None"""
    item = RawExtractedItem.from_dict({"name": "Coil", "type": 7, "features": "many"})

    assert item.name == "Coil"
    assert item.type == 7
    assert item.features == "many"
    assert item.url is None
