"""
Pluggable heuristics for A* pathfinding.

This module provides:
- Heuristic: Abstract base class for A* heuristics
- HeuristicContext: Context passed to heuristics
- ManhattanHeuristic: Manhattan distance to the goal (default)

Usage:
    from schemroute.router.heuristics import ManhattanHeuristic

    router = Router(rules, heuristic=ManhattanHeuristic())
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from .rules import RoutingRules


@dataclass
class HeuristicContext:
    """Goal and cost parameters for heuristic computation."""

    goal_x: int
    goal_y: int
    rules: RoutingRules


class Heuristic(ABC):
    """Abstract base class for A* heuristics.

    Heuristics estimate the cost from a cell to the goal. They should be
    admissible (never overestimate) for the search to prefer short paths.
    """

    @property
    def name(self) -> str:
        """Human-readable name for this heuristic."""
        return self.__class__.__name__

    @abstractmethod
    def estimate(self, x: int, y: int, context: HeuristicContext) -> float:
        """Estimate cost from grid cell (x, y) to the goal."""


class ManhattanHeuristic(Heuristic):
    """Manhattan distance scaled by the per-step cost.

    Cost = (|dx| + |dy|) * cost_step
    """

    @property
    def name(self) -> str:
        return "Manhattan"

    def estimate(self, x: int, y: int, context: HeuristicContext) -> float:
        dx = abs(x - context.goal_x)
        dy = abs(y - context.goal_y)
        return (dx + dy) * context.rules.cost_step


DEFAULT_HEURISTIC = ManhattanHeuristic()
