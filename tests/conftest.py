"""Pytest fixtures for schemroute tests."""

import json

import pytest

from schemroute.router import Router, RoutingRules
from schemroute.schema import ComponentKind, SchematicNode

# Two resistors on one horizontal line with a wire between facing pins,
# plus a wire that references a node that does not exist.
SAMPLE_DOCUMENT = {
    "title": "Divider",
    "description": "Two resistors in series",
    "nodes": [
        {"id": "R1", "type": "RESISTOR", "label": "R1", "value": "10k", "x": 0, "y": 0, "rotation": 0},
        {"id": "R2", "type": "RESISTOR", "label": "R2", "value": "10k", "x": 200, "y": 0, "rotation": 0},
        {"id": "GND1", "type": "GROUND", "label": "GND", "x": 300, "y": 100},
    ],
    "wires": [
        {"id": "w1", "sourceId": "R1", "sourcePin": "2", "targetId": "R2", "targetPin": "1"},
        {"id": "w2", "sourceId": "R2", "sourcePin": "2", "targetId": "GND1", "targetPin": "1"},
        {"id": "w3", "sourceId": "R1", "sourcePin": "1", "targetId": "MISSING", "targetPin": "1"},
    ],
}


@pytest.fixture
def rules():
    """Reference routing rules."""
    return RoutingRules()


@pytest.fixture
def router(rules):
    return Router(rules)


@pytest.fixture
def sample_document_data():
    """Fresh copy of the sample document as parsed JSON."""
    return json.loads(json.dumps(SAMPLE_DOCUMENT))


@pytest.fixture
def sample_document_file(tmp_path, sample_document_data):
    path = tmp_path / "divider.json"
    path.write_text(json.dumps(sample_document_data))
    return path


@pytest.fixture
def capacitor_at_50():
    """A 40x40 capacitor centered between two pins 100 units apart."""
    return SchematicNode(id="C1", kind=ComponentKind.CAPACITOR, x=50, y=0)
