"""Output generation module for layout review.

Provides human-readable text representation of layouts
alongside their rendered markup.
"""

from src.output.lib import (
    LayoutOutput,
    OutputGenerator,
    format_layout_tree,
)

__all__ = [
    "format_layout_tree",
    "LayoutOutput",
    "OutputGenerator",
]
