"""Markup tree model for table-based email output."""

from .lib import (
    CONDITIONAL_MARKERS,
    NBSP,
    PRESENTATION_ATTRS,
    VOID_TAGS,
    Branch,
    Conditional,
    Element,
    Node,
    Raw,
    Text,
    iter_elements,
    layout_table,
    legacy,
    render_markup,
    single_cell_table,
    standard,
    table_cell,
    table_row,
)

__all__ = [
    "VOID_TAGS",
    "PRESENTATION_ATTRS",
    "CONDITIONAL_MARKERS",
    "Branch",
    "Text",
    "Raw",
    "NBSP",
    "Element",
    "Conditional",
    "Node",
    "iter_elements",
    "legacy",
    "standard",
    "render_markup",
    "table_cell",
    "table_row",
    "layout_table",
    "single_cell_table",
]
