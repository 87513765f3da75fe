"""Tests for the authoritative schema module."""

import pytest

from .lib import (
    COMPONENT_REGISTRY,
    ComponentCategory,
    NodeKind,
    get_component_meta,
    is_layout_kind,
    list_components,
)


class TestComponentRegistry:
    """Tests for component metadata coverage."""

    @pytest.mark.unit
    def test_every_kind_registered(self):
        """Each NodeKind has a metadata entry."""
        assert set(COMPONENT_REGISTRY) == set(NodeKind)

    @pytest.mark.unit
    def test_meta_kind_matches_key(self):
        """Registry keys agree with the metadata they hold."""
        for kind, meta in COMPONENT_REGISTRY.items():
            assert meta.kind == kind

    @pytest.mark.unit
    def test_to_dict(self):
        """Metadata exports a plain dictionary."""
        data = get_component_meta(NodeKind.CONTAINER).to_dict()
        assert data["kind"] == "container"
        assert data["category"] == "layout"
        assert data["can_have_children"] is True

    @pytest.mark.unit
    def test_unknown_kind_raises(self):
        with pytest.raises(ValueError):
            get_component_meta("carousel")


class TestLayoutKinds:
    """Tests for child ownership."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "kind", [NodeKind.ROW, NodeKind.COLUMN, NodeKind.CONTAINER, NodeKind.SECTION]
    )
    def test_layout_kinds_have_children(self, kind):
        assert is_layout_kind(kind)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "kind", [NodeKind.TEXT, NodeKind.BUTTON, NodeKind.SPACER, NodeKind.DIVIDER]
    )
    def test_leaf_kinds_have_no_children(self, kind):
        assert not is_layout_kind(kind)

    @pytest.mark.unit
    def test_accepts_string_values(self):
        assert is_layout_kind("section")
        assert not is_layout_kind("image")


class TestListComponents:
    """Tests for component listing."""

    @pytest.mark.unit
    def test_list_all(self):
        assert len(list_components()) == len(NodeKind)

    @pytest.mark.unit
    def test_filter_spacing(self):
        kinds = {meta.kind for meta in list_components(ComponentCategory.SPACING)}
        assert kinds == {NodeKind.DIVIDER, NodeKind.SPACER}

    @pytest.mark.unit
    def test_filter_by_string(self):
        layout = list_components("layout")
        assert all(meta.can_have_children for meta in layout)
        assert len(layout) == 4
