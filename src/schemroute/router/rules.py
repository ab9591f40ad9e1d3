"""
Routing rules for the schematic wire router.

This module provides:
- RoutingRules: Grid pitch, escape distance, and A* costs
"""

from dataclasses import dataclass

from schemroute.exceptions import ConfigurationError


@dataclass(frozen=True)
class RoutingRules:
    """Parameters of the routing lattice and cost model."""

    grid_pitch: float = 10.0  # canvas units per grid cell
    escape_distance: int = 2  # forced straight run out of a pin, in cells

    # Costs for A* (tune these for routing style)
    cost_step: float = 1.0
    turn_penalty: float = 10.0  # Penalty for changing direction (bends)

    # Termination guard for enclosed / unreachable targets
    max_expansions: int = 3000

    def __post_init__(self) -> None:
        errors = []
        if self.grid_pitch <= 0:
            errors.append(f"grid_pitch must be positive, got {self.grid_pitch}")
        if self.escape_distance < 0:
            errors.append(f"escape_distance must be >= 0, got {self.escape_distance}")
        if self.cost_step <= 0:
            errors.append(f"cost_step must be positive, got {self.cost_step}")
        if self.turn_penalty < 0:
            errors.append(f"turn_penalty must be >= 0, got {self.turn_penalty}")
        if self.max_expansions <= 0:
            errors.append(f"max_expansions must be positive, got {self.max_expansions}")
        if errors:
            raise ConfigurationError(
                "Invalid routing rules: " + "; ".join(errors),
                context={"rules": repr(self)},
                suggestions=["Check the [route] section of your config file"],
            )


DEFAULT_RULES = RoutingRules()
