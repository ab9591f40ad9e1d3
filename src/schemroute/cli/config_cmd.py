"""
Config command for schemroute CLI.

Usage:
    schemroute config --show     Show effective configuration with sources
    schemroute config --init     Create template config file
    schemroute config --paths    Show config file paths
"""

import argparse
import sys
from pathlib import Path

from schemroute.config import (
    CONFIG_FILENAMES,
    USER_CONFIG_PATH,
    Config,
    ConfigError,
    generate_template,
    get_config_paths,
)


def run_config(args: argparse.Namespace) -> int:
    try:
        if args.init:
            return _init_config(args.user)
        if args.paths:
            return _show_paths()
        return _show_config()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def _show_config() -> int:
    """Show effective configuration with sources."""
    config = Config.load()

    print("# Effective schemroute configuration")
    print()
    print("[defaults]")
    for key in ("format", "verbose", "quiet"):
        _print_value(key, getattr(config.defaults, key), config.get_source(f"defaults.{key}"))
    print()
    print("[route]")
    for key in ("grid_pitch", "escape_distance", "turn_penalty", "max_expansions", "max_workers"):
        _print_value(key, getattr(config.route, key), config.get_source(f"route.{key}"))
    return 0


def _print_value(key: str, value, source: str) -> None:
    if isinstance(value, str):
        rendered = f'"{value}"'
    elif isinstance(value, bool):
        rendered = str(value).lower()
    else:
        rendered = str(value)
    print(f"{key} = {rendered}  # {source}")


def _init_config(user: bool) -> int:
    """Write the template config file."""
    path = USER_CONFIG_PATH if user else Path.cwd() / CONFIG_FILENAMES[0]
    if path.exists():
        print(f"Config file already exists: {path}", file=sys.stderr)
        return 1
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(generate_template())
    print(f"Created {path}")
    return 0


def _show_paths() -> int:
    paths = get_config_paths()
    print(f"user:    {paths['user'] or '(none)'}")
    print(f"project: {paths['project'] or '(none)'}")
    return 0
