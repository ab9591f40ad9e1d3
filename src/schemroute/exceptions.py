"""
Custom exception hierarchy for schemroute.

Provides consistent error handling with context, suggestions, and actionable guidance.
All exceptions include:
- Context information (file paths, node ids, etc.)
- Suggestions for how to fix the issue

The routing engine itself never raises for unroutable geometry; these
exceptions cover document loading, the component library and configuration.

Example::

    from schemroute.exceptions import FileFormatError, ValidationError

    raise FileFormatError(
        "Schematic document is not valid JSON",
        context={"file": "amp.json", "line": 12},
        suggestions=["Check for a trailing comma"]
    )

    errors = ["Node 3 is missing 'id'", "Duplicate node id: R1"]
    raise ValidationError(errors, context={"file": "amp.json"})
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional


class SchemRouteError(Exception):
    """
    Base exception for all schemroute errors.

    Attributes:
        context: Dictionary of contextual information (file, node, etc.)
        suggestions: List of actionable suggestions for fixing the error
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        self.message = message
        self.context = context or {}
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context and suggestions."""
        parts = [self.message]

        if self.context:
            parts.append("\n\nContext:")
            for key, value in self.context.items():
                parts.append(f"\n  {key}: {value}")

        if self.suggestions:
            parts.append("\n\nSuggestions:")
            for suggestion in self.suggestions:
                parts.append(f"\n  - {suggestion}")

        return "".join(parts)

    def __str__(self) -> str:
        return self._format_message()


class ValidationError(SchemRouteError):
    """
    Data validation failed with one or more errors.

    Collects all validation errors instead of failing on the first one.

    Attributes:
        errors: List of individual validation error messages
    """

    def __init__(
        self,
        errors: List[str],
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        self.errors = errors
        message = f"Validation failed with {len(errors)} error(s):\n"
        message += "\n".join(f"  {i + 1}. {e}" for i, e in enumerate(errors))
        super().__init__(message, context, suggestions)


class FileFormatError(SchemRouteError):
    """
    File format not recognized or corrupted.

    Raised when a schematic document cannot be read or is not JSON.
    """

    pass


class ComponentError(SchemRouteError):
    """
    Component or pin related error.

    Raised for lookups that cannot be satisfied even with fallbacks,
    e.g. an unknown component kind name passed to the library by name.
    """

    pass


class ConfigurationError(SchemRouteError):
    """
    Configuration or settings error.

    Raised when routing rules are invalid.
    """

    pass


__all__ = [
    "SchemRouteError",
    "ValidationError",
    "FileFormatError",
    "ComponentError",
    "ConfigurationError",
]
