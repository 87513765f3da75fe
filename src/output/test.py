"""Tests for output module."""

import pytest

from src.compose import RenderOptions
from src.memo import RenderCache
from src.mid import LayoutNode
from src.output import LayoutOutput, OutputGenerator, format_layout_tree


@pytest.fixture
def tree(complex_layout) -> LayoutNode:
    return LayoutNode.model_validate(complex_layout)


@pytest.fixture
def options() -> RenderOptions:
    return RenderOptions(canvas_width=600)


class TestFormatLayoutTree:
    """Tests for format_layout_tree function."""

    @pytest.mark.unit
    def test_single_node(self):
        """Test formatting single node."""
        node = LayoutNode.model_validate({"kind": "spacer", "config": {"height": "8px"}})
        assert format_layout_tree(node) == "Spacer [spacer, 8px]"

    @pytest.mark.unit
    def test_container_summary(self, sample_layout):
        result = format_layout_tree(LayoutNode.model_validate(sample_layout))
        first_line = result.splitlines()[0]
        assert first_line == "root [container, fixed 600px, equals, gap 20px]"

    @pytest.mark.unit
    def test_nested_tree(self, tree):
        """Test formatting nested tree."""
        lines = format_layout_tree(tree).splitlines()
        assert lines[0] == "root [section, content, gap 16px]"
        assert lines[1] == "├── header [row, justify center]"
        assert lines[2] == '│   └── logo [image, "Logo"]'
        assert lines[3] == "├── body [container, full, ratio 2:3 @0, gap 20px, wrap]"
        assert lines[-1] == "└── rule [divider, 1px]"

    @pytest.mark.unit
    def test_text_snippets(self, tree):
        result = format_layout_tree(tree)
        assert 'title [heading, h2, "Welcome"]' in result
        assert 'lead [text, "Thanks for joining."]' in result
        assert "aside [icon, mdi:star]" in result

    @pytest.mark.unit
    def test_snippet_strips_tags_and_truncates(self):
        node = LayoutNode.model_validate(
            {
                "kind": "text",
                "config": {"text": "<p>A fairly long paragraph of welcome copy</p>"},
            }
        )
        result = format_layout_tree(node)
        assert "<p>" not in result
        assert result.endswith('…"]')

    @pytest.mark.unit
    def test_manual_widths(self):
        node = LayoutNode.model_validate(
            {
                "kind": "container",
                "config": {
                    "childrenConstraints": {
                        "widthDistributionType": "manual",
                        "widths": ["25%", "75%"],
                    }
                },
            }
        )
        assert format_layout_tree(node) == "Container [container, full, manual 25%/75%]"


class TestOutputGenerator:
    """Tests for OutputGenerator class."""

    @pytest.mark.unit
    def test_generate(self, tree, options):
        output = OutputGenerator(options).generate(tree)
        assert isinstance(output, LayoutOutput)
        assert output.node == tree
        assert output.text_tree.startswith("root [section")
        assert output.html.startswith("<table")

    @pytest.mark.unit
    def test_shared_cache(self, tree, options):
        cache = RenderCache()
        generator = OutputGenerator(options, cache)
        first = generator.generate(tree)
        second = generator.generate(tree)
        assert first.html == second.html
        assert cache.hits > 0
