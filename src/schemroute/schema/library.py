"""
Built-in component library.

Maps each ComponentKind to its footprint (width, height in canvas units)
and default pin layout. Pin offsets are relative to the component center,
in unrotated y-down canvas space.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

from schemroute.exceptions import ComponentError
from schemroute.router.primitives import Direction


class ComponentKind(str, Enum):
    """Component kinds understood by the editor."""

    RESISTOR = "RESISTOR"
    CAPACITOR = "CAPACITOR"
    INDUCTOR = "INDUCTOR"
    DIODE = "DIODE"
    LED = "LED"
    TRANSISTOR_NPN = "TRANSISTOR_NPN"
    TRANSISTOR_PNP = "TRANSISTOR_PNP"
    MOSFET_N = "MOSFET_N"
    MOSFET_P = "MOSFET_P"
    IC_GENERIC = "IC_GENERIC"
    IC_555 = "IC_555"
    IC_OPAMP = "IC_OPAMP"
    MCU_GENERIC = "MCU_GENERIC"
    LOGIC_AND = "LOGIC_AND"
    LOGIC_OR = "LOGIC_OR"
    LOGIC_NOT = "LOGIC_NOT"
    LOGIC_NAND = "LOGIC_NAND"
    VOLTAGE_SOURCE = "VOLTAGE_SOURCE"
    GROUND = "GROUND"
    CONNECTOR = "CONNECTOR"
    SWITCH = "SWITCH"
    SENSOR = "SENSOR"
    REGULATOR = "REGULATOR"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def parse(cls, name: str | None, strict: bool = False) -> ComponentKind:
        """Look up a kind by name (case-insensitive).

        Unknown names map to UNKNOWN unless ``strict`` is set, in which case
        a ComponentError is raised.
        """
        key = (name or "").strip().upper()
        try:
            return cls(key)
        except ValueError:
            if strict:
                raise ComponentError(
                    f"Unknown component kind: {name!r}",
                    context={"kind": name},
                    suggestions=[f"Use one of: {', '.join(k.value for k in cls)}"],
                ) from None
            return cls.UNKNOWN


@dataclass(frozen=True)
class PinDefinition:
    """A pin on a component, relative to the component center."""

    id: str
    x: float
    y: float
    orientation: str
    label: str = ""

    @property
    def direction(self) -> Direction:
        return Direction.parse(self.orientation)


@dataclass(frozen=True)
class ComponentDefinition:
    """Footprint and default pins of a component kind."""

    kind: ComponentKind
    label: str
    category: str
    width: float
    height: float
    pins: tuple[PinDefinition, ...] = field(default_factory=tuple)

    @property
    def footprint(self) -> tuple[float, float]:
        return (self.width, self.height)

    def pin(self, pin_id: str) -> PinDefinition | None:
        for pin in self.pins:
            if pin.id == pin_id:
                return pin
        return None


def _pins(*rows: tuple) -> tuple[PinDefinition, ...]:
    return tuple(PinDefinition(*row) for row in rows)


COMPONENT_LIBRARY: dict[ComponentKind, ComponentDefinition] = {
    d.kind: d
    for d in (
        ComponentDefinition(
            ComponentKind.RESISTOR, "Resistor", "Passives", 80, 20,
            _pins(("1", -40, 0, "left"), ("2", 40, 0, "right")),
        ),
        ComponentDefinition(
            ComponentKind.CAPACITOR, "Capacitor", "Passives", 40, 40,
            _pins(("1", -20, 0, "left"), ("2", 20, 0, "right")),
        ),
        # Pins are normally supplied per node
        ComponentDefinition(
            ComponentKind.IC_GENERIC, "Generic IC", "Integrated Circuits", 100, 120
        ),
        ComponentDefinition(
            ComponentKind.TRANSISTOR_NPN, "NPN BJT", "Semiconductors", 60, 60,
            _pins(
                ("B", -30, 0, "left", "B"),
                ("C", 10, -30, "top", "C"),
                ("E", 10, 30, "bottom", "E"),
            ),
        ),
        ComponentDefinition(
            ComponentKind.REGULATOR, "Voltage Reg", "Power", 80, 60,
            _pins(
                ("IN", -40, 0, "left", "IN"),
                ("OUT", 40, 0, "right", "OUT"),
                ("GND", 0, 30, "bottom", "GND"),
            ),
        ),
        ComponentDefinition(
            ComponentKind.SWITCH, "Switch", "Logic", 60, 20,
            _pins(("1", -30, 0, "left"), ("2", 30, 0, "right")),
        ),
        ComponentDefinition(
            ComponentKind.SENSOR, "Generic Sensor", "Integrated Circuits", 60, 60,
            _pins(
                ("VCC", -30, -15, "left", "VCC"),
                ("GND", -30, 15, "left", "GND"),
                ("OUT", 30, 0, "right", "OUT"),
            ),
        ),
        ComponentDefinition(
            ComponentKind.VOLTAGE_SOURCE, "Power", "Power", 40, 80,
            _pins(("POS", 0, -40, "top", "+"), ("NEG", 0, 40, "bottom", "-")),
        ),
        ComponentDefinition(
            ComponentKind.GROUND, "Ground", "Power", 40, 40,
            _pins(("1", 0, -20, "top", "GND")),
        ),
        ComponentDefinition(ComponentKind.UNKNOWN, "Unknown", "Misc", 40, 40),
    )
}


def get_component_def(kind: ComponentKind) -> ComponentDefinition:
    """Get the definition for a kind, falling back to the generic IC."""
    return COMPONENT_LIBRARY.get(kind) or COMPONENT_LIBRARY[ComponentKind.IC_GENERIC]


def rotate_point(x: float, y: float, rotation: float) -> tuple[int, int]:
    """Rotate an offset by ``rotation`` degrees and round to integers (halves up)."""
    rad = math.radians(rotation)
    cos = math.cos(rad)
    sin = math.sin(rad)
    return (math.floor(x * cos - y * sin + 0.5), math.floor(x * sin + y * cos + 0.5))
