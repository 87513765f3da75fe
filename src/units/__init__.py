"""Length and colour helpers shared by the resolvers."""

from .lib import (
    Length,
    format_number,
    format_px,
    html_length,
    is_zero_length,
    leading_number,
    normalize_hex,
    parse_px,
    to_length,
)

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
