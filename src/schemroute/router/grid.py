"""
Routing lattice and obstacle map for schematic wire routing.

This module provides:
- to_grid / from_grid: Quantization between canvas and grid coordinates
- component_cells: Grid cells covered by one component body
- build_obstacle_map: Obstacle set for every placed component

Footprints are treated as axis-aligned regardless of component rotation.
"""

import math
from typing import FrozenSet, Iterable, Iterator, Protocol, Set, Tuple

from .primitives import GridPoint
from .rules import DEFAULT_RULES, RoutingRules

ObstacleSet = FrozenSet[GridPoint]


class PlacedComponent(Protocol):
    """Anything with a center position and a (width, height) footprint."""

    x: float
    y: float

    @property
    def footprint(self) -> Tuple[float, float]: ...


def to_grid(value: float, pitch: float) -> int:
    """Quantize a canvas coordinate to the nearest grid index (halves round up)."""
    return math.floor(value / pitch + 0.5)


def from_grid(index: int, pitch: float) -> float:
    """Convert a grid index back to a canvas coordinate."""
    return index * pitch


def point_to_grid(x: float, y: float, pitch: float) -> GridPoint:
    return (to_grid(x, pitch), to_grid(y, pitch))


def component_cells(
    x: float, y: float, width: float, height: float, pitch: float
) -> Iterator[GridPoint]:
    """Yield every grid cell inside a component's bounding box.

    Half extents are rounded up to whole cells so the obstacle never
    under-covers the body. A zero-size footprint covers its center cell.
    """
    gx = to_grid(x, pitch)
    gy = to_grid(y, pitch)
    half_w = max(0, math.ceil((width / 2) / pitch))
    half_h = max(0, math.ceil((height / 2) / pitch))

    for cx in range(gx - half_w, gx + half_w + 1):
        for cy in range(gy - half_h, gy + half_h + 1):
            yield (cx, cy)


def build_obstacle_map(
    nodes: Iterable[PlacedComponent], rules: RoutingRules = DEFAULT_RULES
) -> ObstacleSet:
    """Build the set of blocked grid cells for all placed components."""
    blocked: Set[GridPoint] = set()
    for node in nodes:
        width, height = node.footprint
        blocked.update(component_cells(node.x, node.y, width, height, rules.grid_pitch))
    return frozenset(blocked)
