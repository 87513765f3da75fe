"""mailframe: layout compiler for table-based email HTML."""

from src.compose import RenderOptions, compose, render_html
from src.document import RenderedDocument, build_stylesheet, render_document
from src.mid import (
    EmailDocument,
    GlobalConfig,
    LayoutNode,
    export_json_schema,
    parse_layout,
)
from src.schema import NodeKind
from src.validation import ValidationError, is_valid, validate_layout

__all__ = [
    # Model
    "LayoutNode",
    "NodeKind",
    "EmailDocument",
    "GlobalConfig",
    "parse_layout",
    "export_json_schema",
    # Rendering
    "RenderOptions",
    "compose",
    "render_html",
    "RenderedDocument",
    "build_stylesheet",
    "render_document",
    # Validation
    "validate_layout",
    "is_valid",
    "ValidationError",
]
