"""
Batch routing of every wire in a schematic.

Each wire is routed independently against the same component obstacles,
so wires can be routed concurrently with a ThreadPoolExecutor. Results
are returned in document wire order regardless of completion order.
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from schemroute.exceptions import ComponentError, ConfigurationError

from .grid import ObstacleSet, build_obstacle_map
from .pathfinder import RouteResult, Router
from .rules import DEFAULT_RULES, RoutingRules

if TYPE_CHECKING:
    from schemroute.schema.document import SchematicDocument, SchematicWire

logger = logging.getLogger(__name__)


@dataclass
class WireRoute:
    """Routed geometry for one document wire."""

    wire_id: str
    result: RouteResult

    @property
    def polyline(self):
        return self.result.polyline

    @property
    def fallback(self) -> bool:
        return self.result.fallback


@dataclass
class BatchRoutingResult:
    """Result of routing all wires of a document."""

    routes: list[WireRoute] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)  # wires with missing nodes
    total_time_ms: float = 0.0

    @property
    def fallback_wires(self) -> list[str]:
        return [r.wire_id for r in self.routes if r.fallback]

    def by_wire(self) -> dict[str, WireRoute]:
        return {r.wire_id: r for r in self.routes}


def _route_one(
    router: Router, document: SchematicDocument, wire: SchematicWire, obstacles: ObstacleSet
) -> WireRoute | None:
    try:
        start, end = document.wire_endpoints(wire)
    except ComponentError as e:
        logger.warning("Skipping wire %s: %s", wire.id, e.message)
        return None
    return WireRoute(wire.id, router.route(start, end, obstacles))


def route_wires(
    document: SchematicDocument,
    rules: RoutingRules | None = None,
    max_workers: int | None = 1,
) -> BatchRoutingResult:
    """Route every wire in ``document``.

    Args:
        document: Schematic with nodes and wires
        rules: Routing rules (default: RoutingRules())
        max_workers: Thread count; 1 routes sequentially, None lets the
            executor choose

    Returns:
        BatchRoutingResult with routes in wire order and skipped wire ids

    Raises:
        ConfigurationError: If max_workers is below 1
    """
    if max_workers is not None and max_workers < 1:
        raise ConfigurationError(f"max_workers must be at least 1, got {max_workers}")

    rules = rules or DEFAULT_RULES
    router = Router(rules)
    start_time = time.perf_counter()

    # Read-only; each route call carves its own copy
    obstacles = build_obstacle_map(document.nodes, rules)

    if max_workers == 1 or len(document.wires) <= 1:
        outcomes = [_route_one(router, document, w, obstacles) for w in document.wires]
    else:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = [
                executor.submit(_route_one, router, document, w, obstacles)
                for w in document.wires
            ]
            outcomes = [f.result() for f in futures]

    result = BatchRoutingResult()
    for wire, outcome in zip(document.wires, outcomes):
        if outcome is None:
            result.skipped.append(wire.id)
        else:
            result.routes.append(outcome)
    result.total_time_ms = (time.perf_counter() - start_time) * 1000

    logger.info(
        "Routed %d wire(s), skipped %d, %d fell back to elbows (%.1f ms)",
        len(result.routes),
        len(result.skipped),
        len(result.fallback_wires),
        result.total_time_ms,
    )
    return result
