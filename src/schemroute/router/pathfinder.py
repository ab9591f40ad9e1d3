"""
A* pathfinding for schematic wire routing.

This module provides:
- AStarNode: Node for priority queue in A* search
- RouteResult: Routed polyline plus search diagnostics
- Router: Turn-penalized A* over the 4-connected grid with pin escapes
- calculate_route: Route one wire against a list of placed components

The search runs from the start pin's escape target to the end pin's escape
target. If the target cannot be reached within the expansion bound, the
router falls back to a direct elbow that ignores obstacles, so callers
always get something drawable.
"""

import heapq
import itertools
import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from .escape import carve_escape, endpoint_escape
from .grid import PlacedComponent, build_obstacle_map
from .heuristics import DEFAULT_HEURISTIC, Heuristic, HeuristicContext
from .path import attach_endpoints, dequantize, simplify_path
from .primitives import Direction, Endpoint, GridPoint, Point, Polyline
from .rules import DEFAULT_RULES, RoutingRules

logger = logging.getLogger(__name__)


@dataclass(order=True)
class AStarNode:
    """Node for A* priority queue.

    Ties on f_score are broken by insertion order so that the search is
    deterministic for a given obstacle set and endpoints.
    """

    f_score: float
    sequence: int
    g_score: float = field(compare=False)
    x: int = field(compare=False)
    y: int = field(compare=False)
    direction: Tuple[int, int] = field(compare=False, default=(0, 0))  # (dx, dy) from parent


@dataclass
class RouteResult:
    """Outcome of routing one wire."""

    polyline: Polyline
    cells: Optional[List[GridPoint]] = None  # unit-step grid path, None on fallback
    fallback: bool = False
    expansions: int = 0
    cost: Optional[float] = None

    @property
    def success(self) -> bool:
        return not self.fallback


class Router:
    """Turn-penalized A* router for orthogonal schematic wires.

    The router holds no per-call state; every call to :meth:`route` builds
    its own carved obstacle set, cost map and back-pointer map, so one
    Router may be shared between threads.
    """

    # Up, Down, Left, Right
    NEIGHBORS: Tuple[Tuple[int, int], ...] = ((0, -1), (0, 1), (-1, 0), (1, 0))

    def __init__(
        self,
        rules: Optional[RoutingRules] = None,
        heuristic: Optional[Heuristic] = None,
    ):
        """
        Args:
            rules: Routing rules (default: RoutingRules())
            heuristic: Heuristic for A* search (default: ManhattanHeuristic)
        """
        self.rules = rules or DEFAULT_RULES
        self.heuristic = heuristic or DEFAULT_HEURISTIC

    def route(
        self, start: Endpoint, end: Endpoint, obstacles: Iterable[GridPoint]
    ) -> RouteResult:
        """Route from ``start`` to ``end`` around ``obstacles``.

        Never raises for unroutable input: an unreachable target produces
        the elbow fallback.
        """
        start_run = endpoint_escape(start, self.rules)
        end_run = endpoint_escape(end, self.rules)

        start_cell, p1 = start_run[0], start_run[-1]
        end_cell, p2 = end_run[0], end_run[-1]

        if start_cell == end_cell:
            # Coincident pins: nothing to draw but the point itself
            return RouteResult(polyline=Polyline([start.point]), cells=[start_cell], cost=0.0)

        blocked = carve_escape(obstacles, start_run, end_run)

        search_cells, cost, expansions = self._search(p1, p2, blocked, start.direction)
        if search_cells is None:
            logger.debug(
                "No path from %s to %s after %d expansions, using elbow fallback",
                p1,
                p2,
                expansions,
            )
            return RouteResult(
                polyline=self.elbow(start, end),
                fallback=True,
                expansions=expansions,
            )

        logger.debug("Routed %s -> %s in %d expansions (cost %.1f)", p1, p2, expansions, cost)

        cells = start_run[:-1] + search_cells + list(reversed(end_run))[1:]
        points = dequantize(simplify_path(cells), self.rules.grid_pitch)
        points = attach_endpoints(points, start.point, end.point)
        return RouteResult(
            polyline=Polyline(points),
            cells=cells,
            expansions=expansions,
            cost=cost,
        )

    def _search(
        self,
        source: GridPoint,
        target: GridPoint,
        blocked: set,
        initial_direction: Direction,
    ) -> Tuple[Optional[List[GridPoint]], float, int]:
        """A* from source to target.

        Returns:
            (cells from source to target or None, cost, expansion count)
        """
        rules = self.rules
        context = HeuristicContext(goal_x=target[0], goal_y=target[1], rules=rules)
        counter = itertools.count()

        open_set: List[AStarNode] = []
        g_scores: Dict[GridPoint, float] = {source: 0.0}
        came_from: Dict[GridPoint, GridPoint] = {}

        start_h = self.heuristic.estimate(source[0], source[1], context)
        heapq.heappush(
            open_set,
            AStarNode(start_h, next(counter), 0.0, source[0], source[1], initial_direction.vector),
        )

        expansions = 0
        while open_set and expansions < rules.max_expansions:
            expansions += 1
            current = heapq.heappop(open_set)
            current_key = (current.x, current.y)

            # Stale entry superseded by a cheaper arrival
            if current.g_score > g_scores.get(current_key, float("inf")):
                continue

            if current_key == target:
                return self._reconstruct(came_from, source, target), current.g_score, expansions

            for dx, dy in self.NEIGHBORS:
                neighbor_key = (current.x + dx, current.y + dy)
                if neighbor_key in blocked:
                    continue

                # Turn penalty if direction changes; the first step is checked
                # against the pin's exit direction
                new_direction = (dx, dy)
                turn_cost = 0.0
                if current.direction != (0, 0) and current.direction != new_direction:
                    turn_cost = rules.turn_penalty

                new_g = current.g_score + rules.cost_step + turn_cost

                if neighbor_key not in g_scores or new_g < g_scores[neighbor_key]:
                    g_scores[neighbor_key] = new_g
                    came_from[neighbor_key] = current_key
                    h = self.heuristic.estimate(neighbor_key[0], neighbor_key[1], context)
                    heapq.heappush(
                        open_set,
                        AStarNode(
                            new_g + h,
                            next(counter),
                            new_g,
                            neighbor_key[0],
                            neighbor_key[1],
                            new_direction,
                        ),
                    )

        return None, 0.0, expansions

    @staticmethod
    def _reconstruct(
        came_from: Dict[GridPoint, GridPoint], source: GridPoint, target: GridPoint
    ) -> List[GridPoint]:
        cells = [target]
        current = target
        while current != source:
            current = came_from[current]
            cells.append(current)
        cells.reverse()
        return cells

    @staticmethod
    def elbow(start: Endpoint, end: Endpoint) -> Polyline:
        """Direct two-segment route through (end.x, start.y); ignores obstacles."""
        points = [start.point, Point(end.x, start.y), end.point]
        return Polyline(simplify_path(points))


def calculate_route(
    start: Endpoint,
    end: Endpoint,
    nodes: Iterable[PlacedComponent],
    rules: Optional[RoutingRules] = None,
) -> Polyline:
    """Route a single wire against every placed component.

    Example::

        path = calculate_route(
            Endpoint(0, 0, Direction.RIGHT),
            Endpoint(100, 0, Direction.LEFT),
            doc.nodes,
        )
        svg_d = path.to_svg_path()
    """
    rules = rules or DEFAULT_RULES
    obstacles = build_obstacle_map(nodes, rules)
    return Router(rules).route(start, end, obstacles).polyline
