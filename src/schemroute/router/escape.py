"""
Pin escape handling.

A pin must leave its component body straight along its exit direction
before the search is free to turn. This module projects the escape
target for an endpoint and carves the escape run out of the obstacle set
so a pin can always leave its own component.
"""

from typing import Iterable, List, Set

from .grid import point_to_grid
from .primitives import Direction, Endpoint, GridPoint
from .rules import RoutingRules


def escape_point(cell: GridPoint, direction: Direction, distance: int) -> GridPoint:
    """Cell ``distance`` steps from ``cell`` along ``direction``."""
    dx, dy = direction.vector
    return (cell[0] + dx * distance, cell[1] + dy * distance)


def escape_cells(cell: GridPoint, direction: Direction, distance: int) -> List[GridPoint]:
    """Cells of the escape run, from the pin cell to the escape target inclusive.

    A free point (Direction.NONE) has a single-cell run: itself.
    """
    if direction is Direction.NONE:
        return [cell]
    return [escape_point(cell, direction, i) for i in range(distance + 1)]


def endpoint_escape(endpoint: Endpoint, rules: RoutingRules) -> List[GridPoint]:
    """Escape run for an endpoint in grid space."""
    cell = point_to_grid(endpoint.x, endpoint.y, rules.grid_pitch)
    return escape_cells(cell, endpoint.direction, rules.escape_distance)


def carve_escape(obstacles: Iterable[GridPoint], *runs: List[GridPoint]) -> Set[GridPoint]:
    """Return a private copy of ``obstacles`` with every escape run removed."""
    carved = set(obstacles)
    for run in runs:
        carved.difference_update(run)
    return carved
