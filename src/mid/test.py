"""Tests for the MID layout model."""

import json

import pytest
from pydantic import ValidationError

from src.schema import NodeKind

from .lib import (
    BorderConfig,
    BorderSide,
    ButtonConfig,
    ContainerConfig,
    EmailDocument,
    GlobalConfig,
    LayoutNode,
    SpacerConfig,
    TextConfig,
    export_json_schema,
    parse_layout,
)


class TestConfigModels:
    """Tests for configuration records."""

    @pytest.mark.unit
    def test_camel_case_aliases(self):
        """Editor JSON keys are accepted."""
        config = ContainerConfig.model_validate(
            {
                "widthType": "fixed",
                "width": "600px",
                "childrenConstraints": {
                    "widthDistributionType": "ratio",
                    "ratio": {"mainChildIndex": 0, "value": [2, 3]},
                },
            }
        )
        assert config.width_type == "fixed"
        assert config.children_constraints.width_distribution_type == "ratio"
        assert config.children_constraints.ratio.main_child_index == 0
        assert config.children_constraints.ratio.value == (2, 3)

    @pytest.mark.unit
    def test_snake_case_names(self):
        config = ContainerConfig(width_type="fixed", width="480px")
        assert config.width == "480px"

    @pytest.mark.unit
    def test_container_defaults(self):
        config = ContainerConfig()
        assert config.width_type == "full"
        assert config.children_constraints.width_distribution_type == "equals"
        assert config.should_wrap is False

    @pytest.mark.unit
    def test_button_defaults(self):
        config = ButtonConfig(href="https://example.com", text="Go")
        assert config.background_color == "#007bff"
        assert config.padding == "12px 24px"
        assert config.border_radius == "3px"
        assert config.font_family == "Arial, sans-serif"

    @pytest.mark.unit
    def test_frozen(self):
        config = SpacerConfig(height="10px")
        with pytest.raises(ValidationError):
            config.height = "20px"

    @pytest.mark.unit
    def test_unknown_keys_ignored(self):
        config = TextConfig.model_validate({"text": "Hi", "editorOnly": True})
        assert config.text == "Hi"

    @pytest.mark.unit
    def test_invalid_enum_rejected(self):
        with pytest.raises(ValidationError):
            ContainerConfig.model_validate({"widthType": "stretch"})


class TestBorderSide:
    """Tests for border completeness."""

    @pytest.mark.unit
    def test_complete(self):
        side = BorderSide(width="1px", style="solid", color="#000")
        assert side.is_complete
        assert side.to_css() == "1px solid #000"

    @pytest.mark.unit
    def test_partial(self):
        assert not BorderSide(width="1px", style="solid").is_complete

    @pytest.mark.unit
    def test_sides(self):
        border = BorderConfig.model_validate(
            {"top": {"width": "2px", "style": "dashed", "color": "red"}}
        )
        assert border.sides()["top"].is_complete
        assert border.sides()["left"] is None
        assert not border.is_complete


class TestLayoutNode:
    """Tests for the recursive LayoutNode model."""

    @pytest.mark.unit
    def test_config_coerced_by_kind(self):
        node = LayoutNode.model_validate(
            {"kind": "spacer", "config": {"height": "20px"}}
        )
        assert isinstance(node.config, SpacerConfig)
        assert node.kind == NodeKind.SPACER.value

    @pytest.mark.unit
    def test_children_parsed_recursively(self, sample_layout):
        node = LayoutNode.model_validate(sample_layout)
        assert node.kind == "container"
        assert isinstance(node.config, ContainerConfig)
        assert [child.kind for child in node.children] == ["text", "button"]

    @pytest.mark.unit
    def test_missing_config_uses_defaults(self):
        node = LayoutNode.model_validate({"kind": "divider"})
        assert node.config.color == "#cccccc"

    @pytest.mark.unit
    def test_invalid_config_raises(self):
        with pytest.raises(ValidationError):
            LayoutNode.model_validate({"kind": "spacer", "config": {}})

    @pytest.mark.unit
    def test_unknown_kind_raises(self):
        with pytest.raises(ValidationError):
            LayoutNode.model_validate({"kind": "carousel", "config": {}})

    @pytest.mark.unit
    def test_model_instance_config(self):
        node = LayoutNode(kind="text", config=TextConfig(text="Hello"))
        assert node.config.text == "Hello"

    @pytest.mark.unit
    def test_walk_is_preorder(self, complex_layout):
        node = LayoutNode.model_validate(complex_layout)
        ids = [n.id for n in node.walk() if n.id]
        assert ids[0] == "root"
        assert ids.index("header") < ids.index("logo")

    @pytest.mark.unit
    def test_round_trip_by_alias(self):
        node = LayoutNode.model_validate(
            {"kind": "container", "config": {"widthType": "fixed", "width": "600px"}}
        )
        data = node.model_dump(by_alias=True, mode="json")
        assert data["config"]["widthType"] == "fixed"


class TestDocument:
    """Tests for document parsing."""

    @pytest.mark.unit
    def test_parse_full_document(self, sample_document):
        document = parse_layout(sample_document)
        assert isinstance(document, EmailDocument)
        assert document.title == "Welcome"
        assert document.config.background_color == "#f4f4f4"

    @pytest.mark.unit
    def test_parse_bare_node(self, sample_layout):
        document = parse_layout(sample_layout)
        assert document.title is None
        assert document.config == GlobalConfig()
        assert document.root.kind == "container"

    @pytest.mark.unit
    @pytest.mark.parametrize("payload", [42, "layout", [{"kind": "divider"}], None])
    def test_non_object_rejected(self, payload):
        """Top-level JSON that is not an object is a validation error."""
        with pytest.raises(ValidationError):
            parse_layout(payload)

    @pytest.mark.unit
    def test_global_defaults(self):
        config = GlobalConfig()
        assert config.font_size == "16px"
        assert config.line_height == "1.4"


class TestJsonSchema:
    """Tests for schema export."""

    @pytest.mark.unit
    def test_export(self):
        text = json.dumps(export_json_schema())
        assert "LayoutNode" in text
        assert "ContainerConfig" in text
        assert "widthDistributionType" in text
