"""Path manipulation utilities for routing.

This module provides utilities for:
- Collinear point removal (turn-only polylines)
- Grid to canvas conversion of a cell path
- Path analysis (turns, length, search cost)
"""

from __future__ import annotations

import math
from typing import Sequence, TypeVar

from .primitives import Direction, GridPoint, Point
from .rules import RoutingRules

P = TypeVar("P", GridPoint, Point)


def _xy(p) -> tuple[float, float]:
    if isinstance(p, Point):
        return (p.x, p.y)
    return (p[0], p[1])


def _collinear(a, b, c) -> bool:
    (ax, ay), (bx, by), (cx, cy) = _xy(a), _xy(b), _xy(c)
    return (ax == bx == cx) or (ay == by == cy)


def simplify_path(points: Sequence[P]) -> list[P]:
    """Drop interior points that are collinear with their neighbours.

    Works against the last kept point so that no three consecutive points
    of the result are collinear, which makes the operation idempotent.
    The first and last points are always kept.
    """
    out: list[P] = []
    for p in points:
        while len(out) >= 2 and _collinear(out[-2], out[-1], p):
            out.pop()
        out.append(p)
    return out


def dequantize(cells: Sequence[GridPoint], pitch: float) -> list[Point]:
    """Scale grid cells back to canvas coordinates."""
    return [Point(cx * pitch, cy * pitch) for cx, cy in cells]


def count_turns(points: Sequence[P]) -> int:
    """Count direction changes along a path (zero-length steps ignored)."""
    turns = 0
    last: tuple[int, int] | None = None
    for a, b in zip(points, points[1:]):
        (ax, ay), (bx, by) = _xy(a), _xy(b)
        heading = ((bx > ax) - (bx < ax), (by > ay) - (by < ay))
        if heading == (0, 0):
            continue
        if last is not None and heading != last:
            turns += 1
        last = heading
    return turns


def path_length(points: Sequence[P]) -> float:
    """Total Euclidean length of the path."""
    total = 0.0
    for a, b in zip(points, points[1:]):
        (ax, ay), (bx, by) = _xy(a), _xy(b)
        total += math.hypot(bx - ax, by - ay)
    return total


def path_cost(
    cells: Sequence[GridPoint],
    rules: RoutingRules,
    initial_direction: Direction = Direction.NONE,
) -> float:
    """Cost of a unit-step cell path under the router's cost model.

    Every step costs ``cost_step``; a step whose direction differs from the
    previous one costs ``turn_penalty`` extra. The first step is compared
    against ``initial_direction`` unless it is NONE.
    """
    cost = 0.0
    previous = initial_direction.vector if initial_direction is not Direction.NONE else None
    for (ax, ay), (bx, by) in zip(cells, cells[1:]):
        step = (bx - ax, by - ay)
        cost += rules.cost_step
        if previous is not None and step != previous:
            cost += rules.turn_penalty
        previous = step
    return cost


def _attach(points: list[Point], exact: Point) -> list[Point]:
    first = points[0]
    if exact == first or len(points) < 2:
        return [exact] + points[1:]
    nxt = points[1]
    # Slide the first run sideways so it starts on the exact position
    if first.y == nxt.y:
        corner = Point(nxt.x, exact.y)
    else:
        corner = Point(exact.x, nxt.y)
    out = [exact]
    if corner != exact and corner != nxt:
        out.append(corner)
    out.extend(points[1:])
    return out


def attach_endpoints(points: Sequence[Point], start: Point, end: Point) -> list[Point]:
    """Replace the grid ends of a de-quantized path with exact endpoint positions.

    The first and last runs are shifted onto the endpoints with an extra
    corner where needed, so every segment stays axis-aligned even when a
    pin sits off the grid.
    """
    out = _attach(list(points), start)
    out = _attach(out[::-1], end)[::-1]
    return simplify_path(out)
