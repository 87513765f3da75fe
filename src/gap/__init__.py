"""Gap-to-structure translator (spacer cells and rows)."""

from .lib import (
    DESKTOP_GAP_CLASS,
    MOBILE_GAP_CLASS,
    STACK_CELL_CLASS,
    has_gap,
    horizontal_cells,
    horizontal_spacer,
    interleave,
    mobile_spacer,
    vertical_rows,
    vertical_spacer,
)

__all__ = [
    "STACK_CELL_CLASS",
    "DESKTOP_GAP_CLASS",
    "MOBILE_GAP_CLASS",
    "has_gap",
    "interleave",
    "horizontal_spacer",
    "vertical_spacer",
    "mobile_spacer",
    "horizontal_cells",
    "vertical_rows",
]
