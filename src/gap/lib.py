"""Gap-to-structure translator.

Table markup has no native gap, so a logical gap becomes structural spacer
elements placed between children (never after the last one):

- horizontal layouts get a fixed-width spacer cell
- vertical layouts get a fixed-height spacer row

Spacers carry a 1px line-height and font-size so renderers do not add
phantom vertical space around the ``&nbsp;`` filler.

A stacking layout also gets a hidden vertical spacer inside each non-last
child cell. The responsive stylesheet reveals it and hides the horizontal
spacer cell on narrow viewports.
"""

from collections.abc import Callable, Sequence
from typing import TypeVar

from src.markup import NBSP, Element, table_cell, table_row
from src.units import html_length, is_zero_length

STACK_CELL_CLASS = "stack-td"
DESKTOP_GAP_CLASS = "desktop-gap-column"
MOBILE_GAP_CLASS = "mobile-gap-spacer"

T = TypeVar("T")


def has_gap(gap: str | None) -> bool:
    """A gap is present when it is set and not zero."""
    return not is_zero_length(gap)


def interleave(items: Sequence[T], make_spacer: Callable[[int], T]) -> list[T]:
    """Place ``make_spacer(index)`` after every item except the last."""
    result: list[T] = []
    last = len(items) - 1
    for index, item in enumerate(items):
        result.append(item)
        if index < last:
            result.append(make_spacer(index))
    return result


def horizontal_spacer(gap: str) -> Element:
    """Fixed-width spacer cell for side-by-side layouts."""
    return table_cell(
        NBSP,
        attrs={"class": DESKTOP_GAP_CLASS, "width": html_length(gap)},
        style={"width": gap, "line-height": "1px", "font-size": "1px"},
    )


def vertical_spacer(gap: str) -> Element:
    """Fixed-height spacer row for stacked layouts."""
    return table_row(
        table_cell(
            NBSP,
            attrs={"height": html_length(gap)},
            style={
                "height": gap,
                "line-height": "1px",
                "font-size": "1px",
                "width": "100%",
            },
        )
    )


def mobile_spacer(gap: str) -> Element:
    """Hidden vertical spacer revealed when a row stacks."""
    return Element(
        "div",
        {"class": MOBILE_GAP_CLASS},
        {"display": "none", "font-size": "0", "line-height": "0", "height": gap},
        (NBSP,),
    )


def horizontal_cells(
    cells: Sequence[Element], gap: str | None, stacking: bool = False
) -> list[Element]:
    """Interleave spacer cells between side-by-side child cells.

    Args:
        cells: One ``td`` per child, in visual order.
        gap: Configured gap (no spacers when absent or zero).
        stacking: Whether the layout stacks on narrow viewports.

    Returns:
        The row's cells, with ``len(cells) - 1`` spacers when a gap is set.
    """
    if not has_gap(gap):
        return list(cells)
    if stacking:
        last = len(cells) - 1
        cells = [
            cell.append(mobile_spacer(gap)) if index < last else cell
            for index, cell in enumerate(cells)
        ]
    return interleave(cells, lambda _: horizontal_spacer(gap))


def vertical_rows(rows: Sequence[Element], gap: str | None) -> list[Element]:
    """Interleave spacer rows between stacked child rows."""
    if not has_gap(gap):
        return list(rows)
    return interleave(rows, lambda _: vertical_spacer(gap))


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
