"""
Schematic document model and component library.

These are the collaborators that feed the router: placed components
(position + kind, whose footprint comes from the library) and wires whose
pin references are resolved into routing endpoints.
"""

from .document import SchematicDocument, SchematicNode, SchematicWire, resolve_pin
from .library import (
    COMPONENT_LIBRARY,
    ComponentDefinition,
    ComponentKind,
    PinDefinition,
    get_component_def,
    rotate_point,
)

__all__ = [
    "COMPONENT_LIBRARY",
    "ComponentDefinition",
    "ComponentKind",
    "PinDefinition",
    "SchematicDocument",
    "SchematicNode",
    "SchematicWire",
    "get_component_def",
    "resolve_pin",
    "rotate_point",
]
