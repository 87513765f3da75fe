"""Centralized configuration management for mailframe.

Provides unified access to all configuration via the `get_environment()` function.

Example:
    >>> from src.config import EnvVar, get_environment
    >>>
    >>> width = get_environment(EnvVar.CANVAS_WIDTH)  # Returns int: 600
    >>> width = get_environment(EnvVar.CANVAS_WIDTH, override=640)
    >>>
    >>> for var in list_environment_variables("render"):
    ...     info = get_environment_info(var)
    ...     print(f"{info.name}: {info.description}")

Environment Variable Categories:
    render: Canvas width, responsive breakpoint, document title
    icons: Icon image URL template
    logging: CLI log level
"""

from .lib import (
    DEFAULT_ICON_URL_TEMPLATE,
    EnvConfig,
    EnvVar,
    get_canvas_width,
    get_document_title,
    get_environment,
    get_environment_info,
    get_icon_url_template,
    get_log_level,
    get_mobile_breakpoint,
    list_environment_variables,
)

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
