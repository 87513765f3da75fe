"""Unit tests for validation module."""

import pytest

from src.mid import LayoutNode
from src.validation import ValidationError, is_valid, validate_layout


def text(node_id: str | None = None, content: str = "Hello") -> dict:
    return {"id": node_id, "kind": "text", "config": {"text": content}}


def container(*children: dict, node_id: str = "root", **config) -> LayoutNode:
    return LayoutNode.model_validate(
        {"id": node_id, "kind": "container", "config": config, "children": children}
    )


class TestValidateLayout:
    """Tests for validate_layout function."""

    @pytest.mark.unit
    def test_valid_tree(self, sample_layout):
        """Well-formed tree passes validation."""
        assert validate_layout(LayoutNode.model_validate(sample_layout)) == []

    @pytest.mark.unit
    def test_complex_tree_valid(self, complex_layout):
        assert validate_layout(LayoutNode.model_validate(complex_layout)) == []

    @pytest.mark.unit
    def test_duplicate_ids(self):
        """Duplicate IDs are detected."""
        errors = validate_layout(container(text("dupe"), text("dupe")))
        assert len(errors) == 1
        assert errors[0].error_type == "duplicate_id"
        assert "dupe" in errors[0].message

    @pytest.mark.unit
    def test_multiple_duplicate_ids(self):
        """Multiple duplicate ID groups are detected."""
        errors = validate_layout(
            container(text("dupe_a"), text("dupe_a"), text("dupe_b"), text("dupe_b"))
        )
        assert {e.node_id for e in errors} == {"dupe_a", "dupe_b"}

    @pytest.mark.unit
    def test_deeply_nested_duplicates(self):
        """Duplicates in deeply nested trees are detected."""
        node = LayoutNode.model_validate(
            {
                "id": "root",
                "kind": "section",
                "children": [
                    {
                        "id": "level1",
                        "kind": "column",
                        "children": [text("root")],
                    }
                ],
            }
        )
        errors = validate_layout(node)
        assert len(errors) == 1
        assert errors[0].node_id == "root"

    @pytest.mark.unit
    def test_missing_ids_not_duplicates(self):
        assert validate_layout(container(text(), text())) == []

    @pytest.mark.unit
    def test_children_on_leaf(self):
        node = LayoutNode.model_validate(
            {
                "id": "gap",
                "kind": "spacer",
                "config": {"height": "10px"},
                "children": [text("orphan")],
            }
        )
        errors = validate_layout(node)
        assert [e.error_type for e in errors] == ["constraint_violation"]
        assert errors[0].node_id == "gap"

    @pytest.mark.unit
    def test_invalid_ratio(self):
        node = container(
            text("a"),
            text("b"),
            childrenConstraints={
                "widthDistributionType": "ratio",
                "ratio": {"mainChildIndex": 5, "value": [1, 2]},
            },
        )
        (error,) = validate_layout(node)
        assert error.error_type == "invalid_ratio"
        assert error.node_id == "root"

    @pytest.mark.unit
    def test_ratio_with_single_child(self):
        node = container(
            text("a"),
            childrenConstraints={
                "widthDistributionType": "ratio",
                "ratio": {"mainChildIndex": 0, "value": [1, 2]},
            },
        )
        assert [e.error_type for e in validate_layout(node)] == ["invalid_ratio"]

    @pytest.mark.unit
    def test_ratio_counts_children_rendering_nothing(self):
        """Empty children keep their position, matching rendering."""
        node = container(
            {"id": "empty", "kind": "image", "config": {}},
            text("a"),
            childrenConstraints={
                "widthDistributionType": "ratio",
                "ratio": {"mainChildIndex": 1, "value": [1, 2]},
            },
        )
        assert [e.error_type for e in validate_layout(node)] == ["missing_content"]

    @pytest.mark.unit
    def test_manual_mismatch(self):
        node = container(
            text("a"),
            text("b"),
            childrenConstraints={
                "widthDistributionType": "manual",
                "widths": ["100px"],
            },
        )
        (error,) = validate_layout(node)
        assert error.error_type == "manual_width_mismatch"
        assert "1 manual widths for 2 children" in error.message

    @pytest.mark.unit
    def test_missing_content(self):
        node = container(
            text("empty", content=""),
            {"id": "cta", "kind": "button", "config": {"text": "Go"}},
            {"id": "pic", "kind": "image", "config": {}},
            {"id": "star", "kind": "icon", "config": {}},
        )
        errors = validate_layout(node)
        assert {e.node_id for e in errors} == {"empty", "cta", "pic", "star"}
        assert {e.error_type for e in errors} == {"missing_content"}

    @pytest.mark.unit
    def test_button_typed_link_counts(self):
        node = container(
            {
                "kind": "button",
                "config": {
                    "text": "Call",
                    "innerLink": {"type": "phone", "phone": "+15550100"},
                },
            }
        )
        assert validate_layout(node) == []

    @pytest.mark.unit
    def test_unnamed_node_uses_kind(self):
        node = container({"kind": "image", "config": {}})
        (error,) = validate_layout(node)
        assert error.node_id == "image"


class TestIsValid:
    """Tests for is_valid convenience function."""

    @pytest.mark.unit
    def test_valid_returns_true(self):
        """Valid tree returns True."""
        assert is_valid(container(text("a"))) is True

    @pytest.mark.unit
    def test_invalid_returns_false(self):
        """Invalid tree returns False."""
        assert is_valid(container(text("root"))) is False


class TestValidationError:
    """Tests for ValidationError dataclass."""

    @pytest.mark.unit
    def test_error_attributes(self):
        """ValidationError has expected attributes."""
        error = ValidationError(
            node_id="test",
            message="Test error",
            error_type="test_type",
        )
        assert error.node_id == "test"
        assert error.message == "Test error"
        assert error.error_type == "test_type"
