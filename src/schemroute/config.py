"""
Configuration file support for schemroute.

Provides hierarchical configuration loading from:
1. Project config: .schemroute.toml or schemroute.toml in project root
2. User config: ~/.config/schemroute/config.toml

CLI arguments override config file values, and project config overrides user config.
"""

import sys
import warnings
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomli as tomllib
    except ImportError:
        tomllib = None  # type: ignore[assignment]

from schemroute.exceptions import ConfigurationError
from schemroute.router.rules import RoutingRules

# Config file names to search for in project directories
CONFIG_FILENAMES = [".schemroute.toml", "schemroute.toml"]

# User-level config path
USER_CONFIG_PATH = Path.home() / ".config" / "schemroute" / "config.toml"

# All known config keys for validation
KNOWN_KEYS = {
    "defaults": {"format", "verbose", "quiet"},
    "route": {
        "grid_pitch",
        "escape_distance",
        "turn_penalty",
        "max_expansions",
        "max_workers",
    },
}

# Expected value types for the [route] section
_ROUTE_TYPES = {
    "grid_pitch": ((int, float), "a number"),
    "escape_distance": (int, "an integer"),
    "turn_penalty": ((int, float), "a number"),
    "max_expansions": (int, "an integer"),
    "max_workers": (int, "an integer"),
}


@dataclass
class DefaultsConfig:
    """Default options for CLI commands."""

    format: str = "table"
    verbose: bool = False
    quiet: bool = False


@dataclass
class RouteConfig:
    """Routing configuration."""

    grid_pitch: float = 10.0
    escape_distance: int = 2
    turn_penalty: float = 10.0
    max_expansions: int = 3000
    max_workers: int = 1

    def to_rules(self) -> RoutingRules:
        """Build RoutingRules from this section.

        Raises:
            ConfigurationError: If a value has the wrong type or is out of range
        """
        errors = []
        for key, (kinds, expected) in _ROUTE_TYPES.items():
            value = getattr(self, key)
            if isinstance(value, bool) or not isinstance(value, kinds):
                errors.append(f"{key} must be {expected}, got {value!r}")
        if not errors and self.max_workers < 1:
            errors.append(f"max_workers must be at least 1, got {self.max_workers}")
        if errors:
            raise ConfigurationError(
                "Invalid [route] configuration: " + "; ".join(errors),
                suggestions=["Check the [route] section of your config file"],
            )
        return RoutingRules(
            grid_pitch=self.grid_pitch,
            escape_distance=self.escape_distance,
            turn_penalty=self.turn_penalty,
            max_expansions=self.max_expansions,
        )


@dataclass
class Config:
    """Merged configuration from all sources."""

    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)
    route: RouteConfig = field(default_factory=RouteConfig)

    # Track which file each setting came from (for --show)
    _sources: dict = field(default_factory=dict, repr=False)

    @classmethod
    def load(cls, start_dir: Path | None = None) -> "Config":
        """
        Load configuration with precedence: project > user > defaults.

        Args:
            start_dir: Directory to start searching from (default: current directory)

        Returns:
            Merged configuration object
        """
        if start_dir is None:
            start_dir = Path.cwd()

        config = cls()
        sources: dict[str, str] = {}

        # Load user config first (lower precedence)
        if USER_CONFIG_PATH.exists():
            user_data = _load_toml_file(USER_CONFIG_PATH)
            if user_data:
                _merge_config(config, user_data, str(USER_CONFIG_PATH), sources)

        # Load project config (higher precedence)
        project_config = _find_project_config(start_dir)
        if project_config:
            project_data = _load_toml_file(project_config)
            if project_data:
                _merge_config(config, project_data, str(project_config), sources)

        config._sources = sources
        return config

    def get_source(self, key: str) -> str:
        """Get the source file for a config key."""
        return self._sources.get(key, "default")


class ConfigError(Exception):
    """Configuration-related errors."""

    pass


def _find_project_config(start_dir: Path) -> Path | None:
    """
    Find project config by walking up the directory tree.

    Stops at .git directory or filesystem root.
    """
    current = start_dir.resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        # Stop at .git directory (project root)
        if (current / ".git").exists():
            break

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def _load_toml_file(path: Path) -> dict[str, Any] | None:
    """
    Load a TOML file safely.

    Returns:
        Parsed TOML data or None if no TOML parser is available

    Raises:
        ConfigError: If TOML is invalid
    """
    if tomllib is None:
        warnings.warn(
            "tomli package not installed. Config file support requires 'pip install tomli' for Python < 3.11.",
            stacklevel=2,
        )
        return None

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e


def _merge_section(
    target: Any,
    data: dict[str, Any],
    section: str,
    source: str,
    sources: dict[str, str],
) -> None:
    _warn_unknown_keys(data, KNOWN_KEYS[section], section, source)
    for key in KNOWN_KEYS[section]:
        if key in data:
            setattr(target, key, data[key])
            sources[f"{section}.{key}"] = source


def _merge_config(
    config: Config, data: dict[str, Any], source: str, sources: dict[str, str]
) -> None:
    """
    Merge loaded config data into Config object.

    Args:
        config: Config object to update
        data: Raw config data from TOML
        source: Source file path (for tracking)
        sources: Dict to update with source info
    """
    for key in data:
        if key not in KNOWN_KEYS:
            warnings.warn(f"Unknown config key '{key}' in {source}", stacklevel=3)

    if "defaults" in data:
        _merge_section(config.defaults, data["defaults"], "defaults", source, sources)

    if "route" in data:
        _merge_section(config.route, data["route"], "route", source, sources)


def _warn_unknown_keys(data: dict[str, Any], known: set[str], section: str, source: str) -> None:
    """Warn about unknown keys in a config section."""
    for key in data:
        if key not in known:
            warnings.warn(f"Unknown config key '{section}.{key}' in {source}", stacklevel=4)


def generate_template() -> str:
    """
    Generate a template config file with all options documented.

    Returns:
        Template TOML string
    """
    return """# schemroute configuration file
# Place as .schemroute.toml in project root or ~/.config/schemroute/config.toml for user defaults

[defaults]
# Output format: table, json, svg
# format = "table"

# Enable verbose output by default
# verbose = false

# Enable quiet mode by default
# quiet = false

[route]
# Spacing of the routing lattice in canvas units
# grid_pitch = 10.0

# Forced straight run out of a pin, in grid cells
# escape_distance = 2

# Extra cost per direction change
# turn_penalty = 10.0

# Search expansions before falling back to an elbow wire
# max_expansions = 3000

# Worker threads for routing a whole document
# max_workers = 1
"""


def get_config_paths() -> dict[str, Path | None]:
    """
    Get paths to config files that would be loaded.

    Returns:
        Dict with 'user' and 'project' keys
    """
    project_config = _find_project_config(Path.cwd())

    return {
        "user": USER_CONFIG_PATH if USER_CONFIG_PATH.exists() else None,
        "project": project_config,
    }
