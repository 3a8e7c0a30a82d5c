"""
Shared pytest fixtures and configuration for hvac-component-scraper tests
"""
import json
import sys
from contextlib import contextmanager
from pathlib import Path

import pytest

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from component_scraper.models import ComponentType, Manufacturer  # noqa: E402
from component_scraper.renderer import RenderedPage  # noqa: E402

CARRIER_ID = "6f1c2a3b-4d5e-4f60-8a71-92b3c4d5e6f7"
LENNOX_ID = "7a2d3b4c-5e6f-4a70-9b81-a3c4d5e6f708"
COMPRESSOR_TYPE_ID = "1b2c3d4e-5f60-4a71-8b92-c3d4e5f60718"
COIL_TYPE_ID = "2c3d4e5f-6071-4b82-9ca3-d4e5f6071829"
THERMOSTAT_TYPE_ID = "3d4e5f60-7182-4c93-8db4-e5f60718293a"


class FakeRenderer:
    """In-memory renderer that records every context it opens and closes"""

    def __init__(self, failures=None):
        self.failures = failures or {}
        self.opened = []
        self.closed = []
        self.shut_down = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.shut_down = True

    @contextmanager
    def open_page(self, url):
        self.opened.append(url)
        try:
            if url in self.failures:
                raise self.failures[url]
            yield RenderedPage(url=url, title="Products", text="Scroll compressors and coils")
        finally:
            self.closed.append(url)


class FakeOracle:
    """Returns a canned reply per page URL found in the prompt"""

    def __init__(self, replies):
        self.replies = replies
        self.prompts = []

    def complete(self, prompt, max_tokens):
        self.prompts.append((prompt, max_tokens))
        for url, reply in self.replies.items():
            if f"Page URL: {url}" in prompt:
                if isinstance(reply, Exception):
                    raise reply
                return reply
        return json.dumps({"components": []})


def make_reply(*items):
    return json.dumps({"components": list(items)})


def raw_item(name="Scroll Compressor", type_="Compressor", **overrides):
    item = {
        "name": name,
        "modelNumber": "ZP54K5E",
        "type": type_,
        "specifications": {"capacity": "4.5 tons", "powerRequirements": "208/230V"},
        "features": ["Quiet operation", "High efficiency"],
        "description": "Residential scroll compressor",
        "url": "https://www.carrier.com/products/zp54k5e",
    }
    item.update(overrides)
    return item


@pytest.fixture
def manufacturer_records():
    """Raw Manufacturer.json contents"""
    return [
        {
            "id": CARRIER_ID,
            "name": "Carrier",
            "websiteUrl": "https://www.carrier.com/residential/",
            "contactEmail": "sales@carrier.com",
            "contactPhone": "(800) 227-7437",
            "parentId": None,
        },
        {
            "id": LENNOX_ID,
            "name": "Lennox International",
            "websiteUrl": "https://www.lennox.com/",
            "parentId": CARRIER_ID,
            "logoFileId": "4e5f6071-8293-4da4-9ec5-f60718293a4b",
        },
    ]


@pytest.fixture
def component_type_records():
    """Raw component_types.json contents"""
    return [
        {"typeId": COMPRESSOR_TYPE_ID, "name": "compressor", "description": "Refrigerant compressors"},
        {"typeId": COIL_TYPE_ID, "name": "Evaporator Coil"},
        {"typeId": THERMOSTAT_TYPE_ID, "name": "Thermostat"},
    ]


@pytest.fixture
def manufacturers(manufacturer_records):
    return [Manufacturer.from_dict(r) for r in manufacturer_records]


@pytest.fixture
def component_types(component_type_records):
    return [ComponentType.from_dict(r) for r in component_type_records]


@pytest.fixture
def write_json(tmp_path):
    """Write an object as JSON under tmp_path and return the path"""
    def _write(name, data):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path
    return _write
