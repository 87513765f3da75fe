"""Alignment mapper (abstract alignment to table attributes)."""

from .lib import HORIZONTAL, VERTICAL, to_horizontal, to_vertical

__all__ = ["HORIZONTAL", "VERTICAL", "to_horizontal", "to_vertical"]
