"""Core utilities shared across mailframe packages."""

from .log import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
