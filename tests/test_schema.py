"""Tests for the schematic document model and component library."""

import json

import pytest

from schemroute.exceptions import ComponentError, FileFormatError, ValidationError
from schemroute.router.primitives import Direction, Endpoint
from schemroute.schema import (
    COMPONENT_LIBRARY,
    ComponentKind,
    PinDefinition,
    SchematicDocument,
    SchematicNode,
    SchematicWire,
    get_component_def,
    resolve_pin,
    rotate_point,
)


class TestComponentLibrary:
    def test_footprints(self):
        assert get_component_def(ComponentKind.RESISTOR).footprint == (80, 20)
        assert get_component_def(ComponentKind.VOLTAGE_SOURCE).footprint == (40, 80)
        assert get_component_def(ComponentKind.IC_GENERIC).footprint == (100, 120)

    def test_missing_kind_falls_back_to_generic_ic(self):
        assert ComponentKind.LED not in COMPONENT_LIBRARY
        assert get_component_def(ComponentKind.LED).kind is ComponentKind.IC_GENERIC

    def test_pin_lookup(self):
        npn = get_component_def(ComponentKind.TRANSISTOR_NPN)
        collector = npn.pin("C")
        assert (collector.x, collector.y) == (10, -30)
        assert collector.direction is Direction.UP
        assert npn.pin("X") is None

    def test_parse_kind(self):
        assert ComponentKind.parse("resistor") is ComponentKind.RESISTOR
        assert ComponentKind.parse("flux_capacitor") is ComponentKind.UNKNOWN
        assert ComponentKind.parse(None) is ComponentKind.UNKNOWN

    def test_parse_kind_strict(self):
        with pytest.raises(ComponentError) as exc_info:
            ComponentKind.parse("flux_capacitor", strict=True)
        assert "flux_capacitor" in str(exc_info.value)

    @pytest.mark.parametrize(
        "rotation,expected",
        [(0, (40, 0)), (90, (0, 40)), (180, (-40, 0)), (270, (0, -40))],
    )
    def test_rotate_point(self, rotation, expected):
        assert rotate_point(40, 0, rotation) == expected


class TestResolvePin:
    """Tests for turning (node, pin) into a routing endpoint."""

    def test_unrotated_pin(self):
        node = SchematicNode("R1", ComponentKind.RESISTOR, 100, 50)
        assert resolve_pin(node, "2") == Endpoint(140, 50, Direction.RIGHT)

    def test_rotation_moves_pin_and_direction(self):
        node = SchematicNode("R1", ComponentKind.RESISTOR, 100, 50, rotation=90)
        assert resolve_pin(node, "2") == Endpoint(100, 90, Direction.DOWN)
        assert resolve_pin(node, "1") == Endpoint(100, 10, Direction.UP)

    def test_unknown_pin_uses_first_pin(self):
        node = SchematicNode("R1", ComponentKind.RESISTOR, 100, 50)
        assert resolve_pin(node, "99") == Endpoint(60, 50, Direction.LEFT)

    def test_node_without_pins_resolves_to_center(self):
        node = SchematicNode("U1", ComponentKind.IC_GENERIC, 30, 40)
        endpoint = resolve_pin(node, "1")
        assert endpoint == Endpoint(30, 40)
        assert not endpoint.is_pin

    def test_custom_pins_override_library(self):
        node = SchematicNode(
            "U1",
            ComponentKind.IC_GENERIC,
            0,
            0,
            pins=[PinDefinition("VCC", -50, -40, "left", "VCC")],
        )
        assert resolve_pin(node, "VCC") == Endpoint(-50, -40, Direction.LEFT)


class TestSchematicDocument:
    def test_from_dict(self, sample_document_data):
        doc = SchematicDocument.from_dict(sample_document_data)
        assert doc.title == "Divider"
        assert [n.id for n in doc.nodes] == ["R1", "R2", "GND1"]
        assert doc.nodes[0].kind is ComponentKind.RESISTOR
        assert doc.nodes[2].rotation == 0
        assert [w.id for w in doc.wires] == ["w1", "w2", "w3"]
        assert doc.wires[0] == SchematicWire("w1", "R1", "2", "R2", "1")

    def test_defaults(self):
        doc = SchematicDocument.from_dict({"nodes": [{"id": "A", "x": 1, "y": 2, "type": "LED"}]})
        assert doc.title == ""
        assert doc.description == ""
        assert doc.wires == []
        assert doc.nodes[0].kind is ComponentKind.LED

    def test_unknown_type_is_unknown_kind(self):
        doc = SchematicDocument.from_dict({"nodes": [{"id": "A", "x": 0, "y": 0, "type": "???"}]})
        assert doc.nodes[0].kind is ComponentKind.UNKNOWN
        assert doc.nodes[0].footprint == (40, 40)

    def test_custom_pins_parsed(self):
        doc = SchematicDocument.from_dict(
            {
                "nodes": [
                    {
                        "id": "U1",
                        "type": "IC_GENERIC",
                        "x": 0,
                        "y": 0,
                        "pins": [{"id": "1", "label": "VCC", "x": -50, "y": -40, "orientation": "left"}],
                    }
                ]
            }
        )
        assert doc.nodes[0].pins == [PinDefinition("1", -50, -40, "left", "VCC")]

    def test_collects_all_validation_errors(self):
        data = {
            "nodes": [
                {"id": "A", "x": 0, "y": 0},
                {"id": "A", "x": 10, "y": 0},
                {"x": 5},
                "not a node",
                {"id": "B", "x": "left", "y": 0},
            ],
            "wires": [{"id": "w1", "sourceId": "A"}],
        }
        with pytest.raises(ValidationError) as exc_info:
            SchematicDocument.from_dict(data, source="bad.json")
        errors = exc_info.value.errors
        assert len(errors) == 5
        assert any("Duplicate node id: A" in e for e in errors)
        assert any("missing id, y" in e for e in errors)
        assert exc_info.value.context["file"] == "bad.json"

    def test_root_must_be_object(self):
        with pytest.raises(ValidationError):
            SchematicDocument.from_dict([1, 2, 3])

    def test_load(self, sample_document_file):
        doc = SchematicDocument.load(sample_document_file)
        assert len(doc.nodes) == 3

    def test_load_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{ nodes: ")
        with pytest.raises(FileFormatError) as exc_info:
            SchematicDocument.load(path)
        assert exc_info.value.context["file"] == str(path)

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(FileFormatError):
            SchematicDocument.load(tmp_path / "nope.json")

    def test_save_and_reload(self, tmp_path, sample_document_data):
        doc = SchematicDocument.from_dict(sample_document_data)
        path = tmp_path / "copy.json"
        doc.save(path)
        reloaded = SchematicDocument.load(path)
        assert reloaded == doc
        assert json.loads(path.read_text())["wires"][0]["sourceId"] == "R1"

    def test_wire_endpoints(self, sample_document_data):
        doc = SchematicDocument.from_dict(sample_document_data)
        start, end = doc.wire_endpoints(doc.wires[0])
        assert start == Endpoint(40, 0, Direction.RIGHT)
        assert end == Endpoint(160, 0, Direction.LEFT)

    def test_wire_endpoints_missing_node(self, sample_document_data):
        doc = SchematicDocument.from_dict(sample_document_data)
        with pytest.raises(ComponentError) as exc_info:
            doc.wire_endpoints(doc.wires[2])
        assert exc_info.value.context["missing"] == "MISSING"


class TestDocumentValidation:
    """Malformed documents fail with a ValidationError, never a crash later on."""

    @pytest.mark.parametrize(
        "node",
        [
            {"id": "R1", "type": "RESISTOR", "x": float("nan"), "y": 0},
            {"id": "R1", "type": "RESISTOR", "x": 0, "y": float("inf")},
            {"id": "R1", "type": "RESISTOR", "x": 0, "y": 0, "rotation": float("-inf")},
            {"id": "U1", "x": 0, "y": 0, "pins": [{"id": "1", "x": float("nan"), "y": 0}]},
        ],
    )
    def test_non_finite_values_rejected(self, node):
        with pytest.raises(ValidationError) as exc_info:
            SchematicDocument.from_dict({"nodes": [node], "wires": []})
        assert exc_info.value.errors == ["Node 0 has a non-finite position or rotation"]

    def test_nan_in_json_file_rejected(self, tmp_path):
        path = tmp_path / "nan.json"
        path.write_text('{"nodes": [{"id": "R1", "x": NaN, "y": 0}], "wires": []}')
        with pytest.raises(ValidationError):
            SchematicDocument.load(path)

    @pytest.mark.parametrize(
        "data,error",
        [
            ({"nodes": 5, "wires": []}, "nodes must be a list"),
            ({"nodes": {"id": "R1", "x": 0, "y": 0}}, "nodes must be a list"),
            ({"nodes": [], "wires": "w1"}, "wires must be a list"),
        ],
    )
    def test_nodes_and_wires_must_be_lists(self, data, error):
        with pytest.raises(ValidationError) as exc_info:
            SchematicDocument.from_dict(data)
        assert exc_info.value.errors == [error]


class TestHalfUnitRounding:
    """Half units round up, matching the editor's pin placement."""

    def test_rotate_point_rounds_halves_up(self):
        assert rotate_point(2.5, 0.5, 0) == (3, 1)
        assert rotate_point(-2.5, -0.5, 0) == (-2, 0)

    def test_pin_position_rounds_halves_up(self):
        node = SchematicNode("R1", ComponentKind.RESISTOR, 2.5, 0.5)
        assert resolve_pin(node, "2") == Endpoint(43, 1, Direction.RIGHT)
