"""Alignment mapping.

Fixed lookup tables from the abstract ``start|center|end`` vocabulary to
the concrete table attributes understood by every renderer.
"""

from src.schema import Alignment, CellAlign, CellValign

HORIZONTAL: dict[str, str] = {
    Alignment.START.value: CellAlign.LEFT.value,
    Alignment.CENTER.value: CellAlign.CENTER.value,
    Alignment.END.value: CellAlign.RIGHT.value,
}

VERTICAL: dict[str, str] = {
    Alignment.START.value: CellValign.TOP.value,
    Alignment.CENTER.value: CellValign.MIDDLE.value,
    Alignment.END.value: CellValign.BOTTOM.value,
}


def to_horizontal(value: Alignment | str | None, default: str = "left") -> str:
    """Map an alignment to ``left|center|right``; unknown values use default."""
    if isinstance(value, Alignment):
        value = value.value
    return HORIZONTAL.get(value, default)


def to_vertical(value: Alignment | str | None, default: str = "top") -> str:
    """Map an alignment to ``top|middle|bottom``; unknown values use default."""
    if isinstance(value, Alignment):
        value = value.value
    return VERTICAL.get(value, default)


__all__ = ["HORIZONTAL", "VERTICAL", "to_horizontal", "to_vertical"]
