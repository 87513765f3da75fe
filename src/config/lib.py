"""Centralized environment configuration management for mailframe.

Provides a unified interface for all environment variables with:
- Single `get_environment()` function for all configuration
- Type-safe enum with metadata (default, type, description)
- Consistent resolution: override > environment > default

Example:
    >>> from src.config import EnvVar, get_environment
    >>>
    >>> # Get values with automatic type conversion
    >>> width = get_environment(EnvVar.CANVAS_WIDTH)  # Returns int
    >>> template = get_environment(EnvVar.ICON_URL_TEMPLATE)  # Returns str
    >>>
    >>> # Override at runtime
    >>> width = get_environment(EnvVar.CANVAS_WIDTH, override=640)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, overload

# =============================================================================
# Environment Variable Configuration
# =============================================================================

DEFAULT_ICON_URL_TEMPLATE = (
    "https://iconify.pagenflow.com/api/image/"
    "{{height}}/{{color}}/{{rotate}}-{{rotate-orientation}}/{{icon-full-name}}.png"
)


@dataclass(frozen=True)
class EnvConfig:
    """Metadata for an environment variable.

    Attributes:
        name: Environment variable name (e.g., "MAILFRAME_CANVAS_WIDTH").
        default: Default value if not set in environment.
        var_type: Python type for value conversion (str, int, bool, Path).
        description: Human-readable description.
        category: Grouping category for documentation.
    """

    name: str
    default: Any
    var_type: type
    description: str = ""
    category: str = "general"


class EnvVar(Enum):
    """All environment variables used by mailframe.

    Each member contains an EnvConfig with name, default, type, and description.
    Use with `get_environment()` for type-safe access.

    Categories:
        - render: Canvas geometry and document defaults
        - icons: Icon image URL templating
        - logging: Log verbosity
    """

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------
    CANVAS_WIDTH = EnvConfig(
        name="MAILFRAME_CANVAS_WIDTH",
        default=600,
        var_type=int,
        description="Baseline canvas width (px) for full-width containers",
        category="render",
    )
    MOBILE_BREAKPOINT = EnvConfig(
        name="MAILFRAME_MOBILE_BREAKPOINT",
        default=768,
        var_type=int,
        description="Viewport width (px) below which layouts stack",
        category="render",
    )
    DOCUMENT_TITLE = EnvConfig(
        name="MAILFRAME_DOCUMENT_TITLE",
        default="Email Preview",
        var_type=str,
        description="Default <title> for rendered documents",
        category="render",
    )

    # -------------------------------------------------------------------------
    # Icons
    # -------------------------------------------------------------------------
    ICON_URL_TEMPLATE = EnvConfig(
        name="MAILFRAME_ICON_URL_TEMPLATE",
        default=DEFAULT_ICON_URL_TEMPLATE,
        var_type=str,
        description="Icon image URL template ({{height}}, {{color}}, ...)",
        category="icons",
    )

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    LOG_LEVEL = EnvConfig(
        name="MAILFRAME_LOG_LEVEL",
        default="INFO",
        var_type=str,
        description="Log level for the CLI (DEBUG, INFO, WARNING, ERROR)",
        category="logging",
    )


# =============================================================================
# Type Conversion Helpers
# =============================================================================


def _parse_bool(value: str) -> bool | None:
    """Parse string to boolean.

    Recognizes: true/false, 1/0, yes/no (case-insensitive).
    Returns None for unrecognized values.
    """
    normalized = value.lower().strip()
    if normalized in ("true", "1", "yes"):
        return True
    if normalized in ("false", "0", "no"):
        return False
    return None


def _convert_value(value: str | None, var_type: type, default: Any) -> Any:
    """Convert string value to target type.

    Args:
        value: Raw string value from environment (or None).
        var_type: Target Python type.
        default: Default value if conversion fails or value is None.

    Returns:
        Converted value or default.
    """
    if value is None:
        return default

    if var_type is str:
        return value

    if var_type is int:
        try:
            return int(value)
        except ValueError:
            return default

    if var_type is bool:
        result = _parse_bool(value)
        return result if result is not None else default

    if var_type is Path:
        return Path(value)

    # Unknown type, return as-is
    return value


# =============================================================================
# Main Interface
# =============================================================================


@overload
def get_environment(env_var: EnvVar, override: int) -> int: ...
@overload
def get_environment(env_var: EnvVar, override: str) -> str: ...
@overload
def get_environment(env_var: EnvVar, override: bool) -> bool: ...
@overload
def get_environment(env_var: EnvVar, override: Path) -> Path: ...
@overload
def get_environment(env_var: EnvVar, override: None = None) -> Any: ...


def get_environment(env_var: EnvVar, override: Any = None) -> Any:
    """Get environment variable value with type conversion.

    Resolution priority:
        1. Explicit override parameter (highest)
        2. Environment variable value
        3. Default from EnvConfig (lowest)

    Args:
        env_var: Environment variable enum member.
        override: Optional override value (bypasses env lookup).

    Returns:
        Value converted to the appropriate type (str, int, bool, or Path).

    Example:
        >>> get_environment(EnvVar.CANVAS_WIDTH)
        600
        >>> get_environment(EnvVar.CANVAS_WIDTH, override=640)
        640
    """
    config: EnvConfig = env_var.value

    # Override takes highest priority
    if override is not None:
        return override

    raw_value = os.environ.get(config.name)
    return _convert_value(raw_value, config.var_type, config.default)


def get_environment_info(env_var: EnvVar) -> EnvConfig:
    """Get metadata for an environment variable.

    Args:
        env_var: Environment variable enum member.

    Returns:
        EnvConfig with name, default, type, and description.
    """
    return env_var.value


# =============================================================================
# Convenience Functions
# =============================================================================


def get_canvas_width(override: int | None = None) -> int:
    """Get the baseline canvas width in pixels."""
    return get_environment(EnvVar.CANVAS_WIDTH, override)


def get_mobile_breakpoint(override: int | None = None) -> int:
    """Get the responsive breakpoint in pixels."""
    return get_environment(EnvVar.MOBILE_BREAKPOINT, override)


def get_document_title(override: str | None = None) -> str:
    """Get the default document title."""
    return get_environment(EnvVar.DOCUMENT_TITLE, override)


def get_icon_url_template(override: str | None = None) -> str:
    """Get the icon URL template.

    An empty environment value falls back to the built-in template.
    """
    template = get_environment(EnvVar.ICON_URL_TEMPLATE, override)
    return template or DEFAULT_ICON_URL_TEMPLATE


def get_log_level(override: str | None = None) -> str:
    """Get the configured log level name (upper-cased)."""
    return str(get_environment(EnvVar.LOG_LEVEL, override)).upper()


def list_environment_variables(category: str | None = None) -> list[EnvVar]:
    """List all environment variables, optionally filtered by category.

    Args:
        category: Filter by category (render, icons, logging).
                 None returns all variables.

    Returns:
        List of EnvVar enum members.
    """
    if category is None:
        return list(EnvVar)

    return [var for var in EnvVar if var.value.category == category]


__all__ = [
    # Core types
    "EnvConfig",
    "EnvVar",
    "DEFAULT_ICON_URL_TEMPLATE",
    # Main interface
    "get_environment",
    "get_environment_info",
    # Convenience functions
    "get_canvas_width",
    "get_mobile_breakpoint",
    "get_document_title",
    "get_icon_url_template",
    "get_log_level",
    # Introspection
    "list_environment_variables",
]
