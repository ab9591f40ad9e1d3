"""
schemroute: Orthogonal wire routing for interactive schematic editors.

Given two pin endpoints and the components placed on the canvas, the
router computes a Manhattan path that avoids component bodies, leaves
pins perpendicular to their edge, and prefers straight runs over turns.

Modules:
    router: Obstacle map, A* pathfinder, path simplification, batch routing
    schema: Schematic document model and component library
    config: TOML configuration
    cli: Command-line interface

Quick Start::

    from schemroute import SchematicDocument, route_wires

    doc = SchematicDocument.load("amplifier.json")
    result = route_wires(doc)
    for wire in result.routes:
        print(wire.wire_id, wire.polyline.to_svg_path())
"""

__version__ = "0.1.0"

# Router
from schemroute.router import (
    Direction,
    Endpoint,
    Polyline,
    Router,
    RoutingRules,
    build_obstacle_map,
    calculate_route,
    route_wires,
)

# Schema models
from schemroute.schema import (
    ComponentKind,
    SchematicDocument,
    SchematicNode,
    SchematicWire,
    resolve_pin,
)

__all__ = [
    "__version__",
    # Router
    "Direction",
    "Endpoint",
    "Polyline",
    "Router",
    "RoutingRules",
    "build_obstacle_map",
    "calculate_route",
    "route_wires",
    # Schema
    "ComponentKind",
    "SchematicDocument",
    "SchematicNode",
    "SchematicWire",
    "resolve_pin",
]
