"""Layout validation utilities."""

from src.validation.lib import ValidationError, is_valid, validate_layout

__all__ = [
    "ValidationError",
    "validate_layout",
    "is_valid",
]
