"""Width distribution engine for containers."""

from .lib import (
    DEFAULT_CANVAS_WIDTH,
    WidthPlan,
    content_space,
    distribute,
    plan_widths,
    ratio_is_valid,
    resolve_container_width,
    resolve_gap,
)

__all__ = [
    "DEFAULT_CANVAS_WIDTH",
    "resolve_container_width",
    "resolve_gap",
    "content_space",
    "distribute",
    "ratio_is_valid",
    "WidthPlan",
    "plan_widths",
]
