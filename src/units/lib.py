"""Unit parsing and formatting helpers.

Config records carry CSS-ish length strings ("20px", "12px 24px", "100%").
The compiler only ever does arithmetic on pixel values; everything else is
passed through to the markup untouched.
"""

import re

_PX_PATTERN = re.compile(r"^\s*(-?\d+(?:\.\d+)?)\s*px\s*$", re.IGNORECASE)
_LEADING_NUMBER = re.compile(r"^\s*(-?\d+(?:\.\d+)?)")
_SHORT_HEX = re.compile(r"^#([0-9a-fA-F]{3})$")

Length = str | int | float | None


def parse_px(value: Length) -> float | None:
    """Parse a pixel length.

    Bare numbers are treated as pixels. Strings count only when they carry
    an explicit ``px`` suffix.

    Args:
        value: Raw length value.

    Returns:
        The pixel value, or None if the value is not pixel-valued.

    Example:
        >>> parse_px("20px")
        20.0
        >>> parse_px("50%") is None
        True
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    match = _PX_PATTERN.match(value)
    if match is None:
        return None
    return float(match.group(1))


def leading_number(value: Length, default: float = 0.0) -> float:
    """Numeric prefix of the first token of a shorthand value.

    Example:
        >>> leading_number("12px 24px")
        12.0
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        return float(value)
    match = _LEADING_NUMBER.match(value)
    if match is None:
        return default
    return float(match.group(1))


def format_number(value: float) -> str:
    """Format a number rounded to two decimals without trailing zeros."""
    rounded = round(float(value), 2)
    if rounded == 0:
        return "0"
    text = f"{rounded:.2f}".rstrip("0").rstrip(".")
    return text


def format_px(value: float) -> str:
    """Format a pixel value, e.g. ``186.666 -> "186.67px"``."""
    return f"{format_number(value)}px"


def normalize_hex(color: str | None, default: str = "#000000") -> str:
    """Normalise a colour for legacy vector shapes.

    Strips whitespace, prefixes ``#`` when missing and expands 3-digit hex.
    Malformed input is prefixed rather than rejected.
    """
    if color is None or not color.strip():
        return default
    value = color.strip()
    if not value.startswith("#"):
        value = f"#{value}"
    short = _SHORT_HEX.match(value)
    if short:
        value = "#" + "".join(ch * 2 for ch in short.group(1))
    return value


def is_zero_length(value: Length) -> bool:
    """Check whether a length is absent or zero."""
    if value is None:
        return True
    if isinstance(value, (int, float)):
        return value == 0
    stripped = value.strip()
    if not stripped:
        return True
    px = parse_px(stripped)
    if px is not None:
        return px == 0
    return stripped == "0"


def to_length(value: Length) -> str | None:
    """Render a length for a style record (ints become px strings)."""
    if value is None:
        return None
    if isinstance(value, (int, float)):
        return format_px(value)
    return value


def html_length(value: Length) -> str | None:
    """Render a length for an HTML dimension attribute.

    Pixel values lose their unit (``"20px" -> "20"``); anything else, such
    as a percentage, is kept verbatim.
    """
    if value is None or value == "":
        return None
    px = parse_px(value)
    if px is not None:
        return format_number(px)
    return str(value)


__all__ = [
    "Length",
    "parse_px",
    "leading_number",
    "format_number",
    "format_px",
    "normalize_hex",
    "is_zero_length",
    "to_length",
    "html_length",
]
