"""Document assembly: head, stylesheet and body around a composed layout."""

from .lib import (
    BODY_FONT_FAMILY,
    DOCTYPE,
    OFFICE_NAMESPACE,
    XHTML_NAMESPACE,
    RenderedDocument,
    Rule,
    build_stylesheet,
    render_body,
    render_document,
)

__all__ = [
    "DOCTYPE",
    "XHTML_NAMESPACE",
    "OFFICE_NAMESPACE",
    "BODY_FONT_FAMILY",
    "Rule",
    "build_stylesheet",
    "RenderedDocument",
    "render_body",
    "render_document",
]
