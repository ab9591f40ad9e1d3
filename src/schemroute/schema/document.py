"""
Schematic document model.

This module provides:
- SchematicNode: A placed component
- SchematicWire: A connection between two component pins
- SchematicDocument: Nodes and wires, loadable from JSON
- resolve_pin: Turn a (node, pin id) pair into a routing Endpoint

Example::

    from schemroute.schema import SchematicDocument

    doc = SchematicDocument.load("amplifier.json")
    for wire in doc.wires:
        start, end = doc.wire_endpoints(wire)
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from schemroute.exceptions import ComponentError, FileFormatError, ValidationError
from schemroute.router.primitives import Endpoint

from .library import ComponentKind, PinDefinition, get_component_def, rotate_point


@dataclass
class SchematicNode:
    """A component placed on the canvas, centered at (x, y)."""

    id: str
    kind: ComponentKind
    x: float
    y: float
    rotation: float = 0.0
    label: str = ""
    value: str | None = None
    pins: list[PinDefinition] | None = None  # Custom pins override the library
    properties: dict[str, str] = field(default_factory=dict)

    @property
    def footprint(self) -> tuple[float, float]:
        """(width, height) of the component body, ignoring rotation."""
        return get_component_def(self.kind).footprint

    def effective_pins(self) -> list[PinDefinition]:
        if self.pins:
            return list(self.pins)
        return list(get_component_def(self.kind).pins)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SchematicNode:
        pins = data.get("pins")
        return cls(
            id=str(data["id"]),
            kind=ComponentKind.parse(data.get("type")),
            x=float(data["x"]),
            y=float(data["y"]),
            rotation=float(data.get("rotation") or 0),
            label=data.get("label", ""),
            value=data.get("value"),
            pins=(
                [
                    PinDefinition(
                        id=str(p["id"]),
                        x=float(p.get("x", 0)),
                        y=float(p.get("y", 0)),
                        orientation=p.get("orientation", ""),
                        label=p.get("label", ""),
                    )
                    for p in pins
                ]
                if pins
                else None
            ),
            properties=dict(data.get("properties") or {}),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "type": self.kind.value,
            "label": self.label,
            "x": self.x,
            "y": self.y,
            "rotation": self.rotation,
        }
        if self.value is not None:
            data["value"] = self.value
        if self.pins:
            data["pins"] = [
                {"id": p.id, "label": p.label, "x": p.x, "y": p.y, "orientation": p.orientation}
                for p in self.pins
            ]
        if self.properties:
            data["properties"] = dict(self.properties)
        return data


@dataclass
class SchematicWire:
    """A wire from one node's pin to another node's pin."""

    id: str
    source_id: str
    source_pin: str
    target_id: str
    target_pin: str
    label: str | None = None
    net_id: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SchematicWire:
        return cls(
            id=str(data["id"]),
            source_id=str(data["sourceId"]),
            source_pin=str(data.get("sourcePin", "")),
            target_id=str(data["targetId"]),
            target_pin=str(data.get("targetPin", "")),
            label=data.get("label"),
            net_id=data.get("netId"),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "sourceId": self.source_id,
            "sourcePin": self.source_pin,
            "targetId": self.target_id,
            "targetPin": self.target_pin,
        }
        if self.label is not None:
            data["label"] = self.label
        if self.net_id is not None:
            data["netId"] = self.net_id
        return data


def _is_finite(node: SchematicNode) -> bool:
    values = [node.x, node.y, node.rotation]
    for pin in node.pins or ():
        values.extend((pin.x, pin.y))
    return all(math.isfinite(v) for v in values)


def resolve_pin(node: SchematicNode, pin_id: str) -> Endpoint:
    """Resolve a pin of a node into a rotation-aware routing Endpoint.

    Unknown pin ids fall back to the node's first pin. A node without any
    pins resolves to its own center with no exit direction.
    """
    pins = node.effective_pins()
    if not pins:
        return Endpoint(node.x, node.y)

    pin = next((p for p in pins if p.id == pin_id), pins[0])
    dx, dy = rotate_point(pin.x, pin.y, node.rotation)
    return Endpoint(
        math.floor(node.x + dx + 0.5),
        math.floor(node.y + dy + 0.5),
        pin.direction.rotated(node.rotation),
    )


@dataclass
class SchematicDocument:
    """A schematic: placed nodes and the wires between them."""

    title: str = ""
    description: str = ""
    nodes: list[SchematicNode] = field(default_factory=list)
    wires: list[SchematicWire] = field(default_factory=list)

    def node(self, node_id: str) -> SchematicNode | None:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def wire_endpoints(self, wire: SchematicWire) -> tuple[Endpoint, Endpoint]:
        """Resolve both ends of a wire.

        Raises:
            ComponentError: If either end references a node that does not exist
        """
        source = self.node(wire.source_id)
        target = self.node(wire.target_id)
        missing = [
            node_id
            for node_id, node in ((wire.source_id, source), (wire.target_id, target))
            if node is None
        ]
        if missing:
            raise ComponentError(
                f"Wire {wire.id} references missing node(s)",
                context={"wire": wire.id, "missing": ", ".join(missing)},
            )
        return resolve_pin(source, wire.source_pin), resolve_pin(target, wire.target_pin)

    @classmethod
    def from_dict(cls, data: Any, source: str | None = None) -> SchematicDocument:
        """Build a document from parsed JSON, collecting all structural errors."""
        context = {"file": source} if source else None
        if not isinstance(data, dict):
            raise ValidationError(["Document root must be a JSON object"], context=context)

        errors: list[str] = []
        nodes: list[SchematicNode] = []
        wires: list[SchematicWire] = []
        seen: set[str] = set()

        raw_nodes = data.get("nodes") or []
        if not isinstance(raw_nodes, list):
            errors.append("nodes must be a list")
            raw_nodes = []
        raw_wires = data.get("wires") or []
        if not isinstance(raw_wires, list):
            errors.append("wires must be a list")
            raw_wires = []

        for i, raw in enumerate(raw_nodes):
            if not isinstance(raw, dict):
                errors.append(f"Node {i} is not an object")
                continue
            missing = [key for key in ("id", "x", "y") if key not in raw]
            if missing:
                errors.append(f"Node {i} is missing {', '.join(missing)}")
                continue
            try:
                node = SchematicNode.from_dict(raw)
            except (TypeError, ValueError, KeyError) as e:
                errors.append(f"Node {i} is malformed: {e}")
                continue
            if not _is_finite(node):
                errors.append(f"Node {i} has a non-finite position or rotation")
                continue
            if node.id in seen:
                errors.append(f"Duplicate node id: {node.id}")
                continue
            seen.add(node.id)
            nodes.append(node)

        for i, raw in enumerate(raw_wires):
            if not isinstance(raw, dict):
                errors.append(f"Wire {i} is not an object")
                continue
            missing = [key for key in ("id", "sourceId", "targetId") if key not in raw]
            if missing:
                errors.append(f"Wire {i} is missing {', '.join(missing)}")
                continue
            wires.append(SchematicWire.from_dict(raw))

        if errors:
            raise ValidationError(errors, context=context)

        return cls(
            title=data.get("title", ""),
            description=data.get("description", ""),
            nodes=nodes,
            wires=wires,
        )

    @classmethod
    def load(cls, path: str | Path) -> SchematicDocument:
        """Load a document from a JSON file."""
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise FileFormatError(
                f"Cannot read schematic document: {e}", context={"file": str(path)}
            ) from e
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise FileFormatError(
                "Schematic document is not valid JSON",
                context={"file": str(path), "line": e.lineno, "column": e.colno},
                suggestions=["Check the file was exported as a schematic JSON document"],
            ) from e
        return cls.from_dict(data, source=str(path))

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "nodes": [n.to_dict() for n in self.nodes],
            "wires": [w.to_dict() for w in self.wires],
        }

    def save(self, path: str | Path) -> None:
        Path(path).write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")
