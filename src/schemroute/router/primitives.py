"""
Basic data structures for schematic wire routing.

This module provides:
- Direction: Mandatory exit orientation of a pin
- GridPoint: Integer (x, y) cell on the routing lattice
- Point: Continuous-space coordinate
- Endpoint: Position plus optional exit Direction
- Polyline: Ordered continuous-space path handed to renderers
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

GridPoint = Tuple[int, int]


class Direction(Enum):
    """Exit orientation of a pin, as a unit vector in y-down grid space."""

    NONE = (0, 0)
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def vector(self) -> GridPoint:
        return self.value

    @classmethod
    def parse(cls, name: Optional[str]) -> "Direction":
        """Parse a pin orientation string.

        Accepts the document vocabulary (left, right, top, bottom) as well as
        up/down/none. Anything unrecognized maps to NONE.
        """
        if not name:
            return cls.NONE
        return _ORIENTATION_NAMES.get(name.strip().lower(), cls.NONE)

    def rotated(self, rotation: float) -> "Direction":
        """Rotate by a multiple of 90 degrees (clockwise on screen)."""
        if self is Direction.NONE:
            return self
        quarter_turns = math.floor(rotation / 90.0 + 0.5) % 4
        dx, dy = self.value
        for _ in range(quarter_turns):
            dx, dy = -dy, dx
        return Direction((dx, dy))


_ORIENTATION_NAMES = {
    "none": Direction.NONE,
    "up": Direction.UP,
    "top": Direction.UP,
    "down": Direction.DOWN,
    "bottom": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


@dataclass(frozen=True)
class Point:
    """A point in continuous (canvas) space."""

    x: float
    y: float


@dataclass(frozen=True)
class Endpoint:
    """One end of a wire.

    An endpoint with a direction is a component pin and gets an escape
    segment; an endpoint without one (Direction.NONE) is a free point such
    as the cursor position while a new wire is being dragged.
    """

    x: float
    y: float
    direction: Direction = Direction.NONE

    @property
    def is_pin(self) -> bool:
        return self.direction is not Direction.NONE

    @property
    def point(self) -> Point:
        return Point(self.x, self.y)


def _fmt(value: float) -> str:
    """Format a coordinate for path strings (drop trailing .0)."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


@dataclass
class Polyline:
    """Ordered continuous-space polyline."""

    points: List[Point] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    @property
    def is_empty(self) -> bool:
        return not self.points

    def segments(self) -> List[Tuple[Point, Point]]:
        """Consecutive point pairs."""
        return list(zip(self.points, self.points[1:]))

    def commands(self) -> List[Tuple[str, float, float]]:
        """Move-to the first point, line-to each subsequent point."""
        cmds: List[Tuple[str, float, float]] = []
        for i, p in enumerate(self.points):
            cmds.append(("M" if i == 0 else "L", p.x, p.y))
        return cmds

    def to_svg_path(self) -> str:
        """Render as an SVG path ``d`` attribute."""
        return " ".join(f"{op} {_fmt(x)} {_fmt(y)}" for op, x, y in self.commands())

    def to_list(self) -> List[List[float]]:
        return [[p.x, p.y] for p in self.points]
