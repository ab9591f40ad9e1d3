"""
Schematic wire router.

Provides orthogonal A* wire routing with:
- Obstacle maps built from component footprints
- Pin escape segments so wires leave pins perpendicular to their edge
- Turn penalties that favour long straight runs
- An elbow fallback when no clean path exists

Example::

    from schemroute.router import Direction, Endpoint, Router, build_obstacle_map

    obstacles = build_obstacle_map(doc.nodes)
    result = Router().route(
        Endpoint(0, 0, Direction.RIGHT),
        Endpoint(100, 0, Direction.LEFT),
        obstacles,
    )
    print(result.polyline.to_svg_path())
"""

from .batch import BatchRoutingResult, WireRoute, route_wires
from .escape import carve_escape, escape_cells, escape_point
from .grid import ObstacleSet, build_obstacle_map, component_cells, from_grid, to_grid
from .heuristics import DEFAULT_HEURISTIC, Heuristic, HeuristicContext, ManhattanHeuristic
from .path import attach_endpoints, count_turns, dequantize, path_cost, path_length, simplify_path
from .pathfinder import AStarNode, RouteResult, Router, calculate_route
from .primitives import Direction, Endpoint, GridPoint, Point, Polyline
from .rules import DEFAULT_RULES, RoutingRules

__all__ = [
    # Primitives
    "Direction",
    "Endpoint",
    "GridPoint",
    "Point",
    "Polyline",
    # Rules
    "DEFAULT_RULES",
    "RoutingRules",
    # Obstacle map
    "ObstacleSet",
    "build_obstacle_map",
    "component_cells",
    "from_grid",
    "to_grid",
    # Escape
    "carve_escape",
    "escape_cells",
    "escape_point",
    # Heuristics
    "DEFAULT_HEURISTIC",
    "Heuristic",
    "HeuristicContext",
    "ManhattanHeuristic",
    # Pathfinding
    "AStarNode",
    "RouteResult",
    "Router",
    "calculate_route",
    # Batch
    "BatchRoutingResult",
    "WireRoute",
    "route_wires",
    # Path utilities
    "attach_endpoints",
    "count_turns",
    "dequantize",
    "path_cost",
    "path_length",
    "simplify_path",
]
