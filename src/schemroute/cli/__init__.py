"""
Command-line interface for schemroute.

Provides CLI commands via the `schemroute` command:

    schemroute route <document.json>   - Route every wire in a schematic
    schemroute config                  - Show or initialize configuration

Examples:
    schemroute route amplifier.json
    schemroute route amplifier.json --format svg > amplifier.svg
    schemroute route amplifier.json --turn-penalty 20 --workers 4
    schemroute config --init
"""

import argparse
import sys
from typing import List, Optional

from schemroute import __version__

__all__ = ["main"]


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for schemroute CLI."""
    parser = argparse.ArgumentParser(
        prog="schemroute",
        description="Orthogonal wire routing for schematics",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--version", action="version", version=f"schemroute {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    route_parser = subparsers.add_parser("route", help="Route every wire in a schematic")
    route_parser.add_argument("document", help="Path to schematic JSON document")
    route_parser.add_argument("--format", choices=["table", "json", "svg"], default=None)
    route_parser.add_argument("--grid-pitch", type=float, help="Routing lattice spacing")
    route_parser.add_argument(
        "--escape-distance", type=int, help="Straight run out of a pin, in grid cells"
    )
    route_parser.add_argument("--turn-penalty", type=float, help="Extra cost per bend")
    route_parser.add_argument(
        "--max-expansions", type=int, help="Search bound before elbow fallback"
    )
    route_parser.add_argument("--workers", type=int, help="Routing threads")
    route_parser.add_argument("-v", "--verbose", action="count", default=0)

    config_parser = subparsers.add_parser("config", help="Manage configuration")
    group = config_parser.add_mutually_exclusive_group()
    group.add_argument("--show", action="store_true", help="Show effective configuration")
    group.add_argument("--init", action="store_true", help="Create template config file")
    group.add_argument("--paths", action="store_true", help="Show config file paths")
    config_parser.add_argument(
        "--user", action="store_true", help="Use the user config path for --init"
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "route":
        from .route_cmd import run_route

        return run_route(args)

    if args.command == "config":
        from .config_cmd import run_config

        return run_config(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
