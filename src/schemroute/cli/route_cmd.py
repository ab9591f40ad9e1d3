"""Route command: route every wire of a schematic document.

Usage:
    schemroute route amplifier.json
    schemroute route amplifier.json --format json
    schemroute route amplifier.json --format svg > amplifier.svg
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from xml.sax.saxutils import quoteattr

from rich.console import Console
from rich.table import Table

from schemroute.config import Config, ConfigError
from schemroute.exceptions import SchemRouteError
from schemroute.router import BatchRoutingResult, count_turns, path_length, route_wires
from schemroute.schema import SchematicDocument


def _route_config(args: argparse.Namespace, config: Config):
    """Apply CLI overrides on top of the [route] config section."""
    overrides = {
        "grid_pitch": args.grid_pitch,
        "escape_distance": args.escape_distance,
        "turn_penalty": args.turn_penalty,
        "max_expansions": args.max_expansions,
        "max_workers": args.workers,
    }
    return replace(config.route, **{k: v for k, v in overrides.items() if v is not None})


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def run_route(args: argparse.Namespace) -> int:
    try:
        config = Config.load()
        # -v on the command line wins over [defaults] verbose
        _configure_logging(args.verbose or (1 if config.defaults.verbose else 0))
        route_config = _route_config(args, config)
        rules = route_config.to_rules()
        document = SchematicDocument.load(args.document)
        result = route_wires(document, rules, max_workers=route_config.max_workers)
    except (SchemRouteError, ConfigError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    output_format = args.format or config.defaults.format
    if output_format == "json":
        print(json.dumps(format_json(result), indent=2))
    elif output_format == "svg":
        print(format_svg(result))
    else:
        print_table(result, quiet=config.defaults.quiet)
    return 0


def format_json(result: BatchRoutingResult) -> list[dict]:
    return [
        {
            "id": r.wire_id,
            "points": r.polyline.to_list(),
            "path": r.polyline.to_svg_path(),
            "fallback": r.fallback,
        }
        for r in result.routes
    ]


def format_svg(result: BatchRoutingResult, margin: float = 20.0) -> str:
    points = [p for r in result.routes for p in r.polyline]
    if points:
        min_x = min(p.x for p in points) - margin
        min_y = min(p.y for p in points) - margin
        width = max(p.x for p in points) + margin - min_x
        height = max(p.y for p in points) + margin - min_y
    else:
        min_x = min_y = 0.0
        width = height = 2 * margin

    lines = [
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="{min_x:g} {min_y:g} {width:g} {height:g}">'
    ]
    for r in result.routes:
        lines.append(
            f'  <path id={quoteattr(r.wire_id)} d="{r.polyline.to_svg_path()}"'
            ' fill="none" stroke="black"/>'
        )
    lines.append("</svg>")
    return "\n".join(lines)


def print_table(result: BatchRoutingResult, quiet: bool = False) -> None:
    console = Console()
    table = Table(title="Wire routes")
    table.add_column("Wire")
    table.add_column("Points", justify="right")
    table.add_column("Turns", justify="right")
    table.add_column("Length", justify="right")
    table.add_column("Fallback")

    for r in result.routes:
        points = r.polyline.points
        table.add_row(
            r.wire_id,
            str(len(points)),
            str(count_turns(points)),
            f"{path_length(points):.1f}",
            "yes" if r.fallback else "",
        )

    console.print(table)
    if not quiet:
        console.print(
            f"{len(result.routes)} routed, {len(result.skipped)} skipped, "
            f"{len(result.fallback_wires)} fallback ({result.total_time_ms:.1f} ms)"
        )
