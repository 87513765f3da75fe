"""Root pytest configuration and fixtures.

This module provides:
- Environment setup (loads .env)
- Editor-shaped layout fixtures (camelCase JSON mappings)
- Global test configuration
"""

from __future__ import annotations

from typing import Any

import pytest
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


# =============================================================================
# Test Configuration
# =============================================================================


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]):
    """Mark tests without an explicit marker as unit tests."""
    for item in items:
        if not any(item.iter_markers(name="unit")):
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch):
    """Keep a developer's .env from changing rendering defaults under test."""
    for name in (
        "MAILFRAME_CANVAS_WIDTH",
        "MAILFRAME_MOBILE_BREAKPOINT",
        "MAILFRAME_DOCUMENT_TITLE",
        "MAILFRAME_ICON_URL_TEMPLATE",
    ):
        monkeypatch.delenv(name, raising=False)


# =============================================================================
# Layout Fixtures
# =============================================================================


@pytest.fixture
def sample_layout() -> dict[str, Any]:
    """Create a simple layout mapping for testing.

    Returns:
        A fixed-width container holding a text block and a button.
    """
    return {
        "id": "root",
        "kind": "container",
        "config": {"widthType": "fixed", "width": "600px", "gap": "20px"},
        "children": [
            {"id": "intro", "kind": "text", "config": {"text": "<p>Hello</p>"}},
            {
                "id": "cta",
                "kind": "button",
                "config": {"href": "https://example.com", "text": "Open"},
            },
        ],
    }


@pytest.fixture
def complex_layout() -> dict[str, Any]:
    """Create a nested layout mapping for testing.

    Returns:
        A section holding a header row and a two-column body container.
    """
    return {
        "id": "root",
        "kind": "section",
        "config": {"sectionType": "content", "gap": "16px", "padding": "24px"},
        "children": [
            {
                "id": "header",
                "kind": "row",
                "config": {"justifyContent": "center"},
                "children": [
                    {
                        "id": "logo",
                        "kind": "image",
                        "config": {
                            "src": "https://example.com/logo.png",
                            "alt": "Logo",
                            "width": "120px",
                        },
                    },
                ],
            },
            {
                "id": "body",
                "kind": "container",
                "config": {
                    "widthType": "full",
                    "gap": "20px",
                    "shouldWrap": True,
                    "childrenConstraints": {
                        "widthDistributionType": "ratio",
                        "ratio": {"mainChildIndex": 0, "value": [2, 3]},
                    },
                },
                "children": [
                    {
                        "id": "copy",
                        "kind": "column",
                        "config": {"gap": "10px"},
                        "children": [
                            {
                                "id": "title",
                                "kind": "heading",
                                "config": {"text": "Welcome", "level": "h2"},
                            },
                            {
                                "id": "lead",
                                "kind": "text",
                                "config": {"text": "Thanks for joining."},
                            },
                        ],
                    },
                    {
                        "id": "aside",
                        "kind": "icon",
                        "config": {"iconIdentifier": "mdi:star", "color": "#ffaa00"},
                    },
                ],
            },
            {"id": "rule", "kind": "divider", "config": {}},
        ],
    }


@pytest.fixture
def sample_document(sample_layout: dict[str, Any]) -> dict[str, Any]:
    """Create a full document mapping (title, global config and root)."""
    return {
        "title": "Welcome",
        "config": {"backgroundColor": "#f4f4f4", "color": "#333333"},
        "root": sample_layout,
    }
