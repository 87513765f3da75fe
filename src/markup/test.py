"""Tests for the markup tree."""

import pytest

from .lib import (
    NBSP,
    Branch,
    Element,
    Raw,
    Text,
    layout_table,
    legacy,
    render_markup,
    single_cell_table,
    standard,
    table_cell,
    table_row,
)


class TestRenderMarkup:
    """Tests for serialisation."""

    @pytest.mark.unit
    def test_element_with_attrs_and_style(self):
        node = Element("td", {"width": 20, "class": None}, {"font-size": "1px"}, (NBSP,))
        assert render_markup(node) == '<td width="20" style="font-size: 1px">&nbsp;</td>'

    @pytest.mark.unit
    def test_text_is_escaped(self):
        assert render_markup(Text("a < b & c")) == "a &lt; b &amp; c"

    @pytest.mark.unit
    def test_raw_is_verbatim(self):
        assert render_markup(Raw("<b>hi</b>")) == "<b>hi</b>"

    @pytest.mark.unit
    def test_attribute_escaping(self):
        node = Element("a", {"href": 'https://x.test/?a=1&b="2"'})
        assert render_markup(node) == '<a href="https://x.test/?a=1&amp;b=&quot;2&quot;"></a>'

    @pytest.mark.unit
    def test_void_tags(self):
        assert render_markup(Element("img", {"src": "a.png"})) == '<img src="a.png" />'
        assert render_markup(Element("w:anchorlock")) == "<w:anchorlock />"

    @pytest.mark.unit
    def test_none(self):
        assert render_markup(None) == ""


class TestConditional:
    """Tests for renderer-branch markers."""

    @pytest.mark.unit
    def test_legacy(self):
        assert render_markup(legacy(Raw("x"))) == "<!--[if mso]>x<![endif]-->"

    @pytest.mark.unit
    def test_standard(self):
        assert render_markup(standard(Raw("y"))) == "<!--[if !mso]><!-->y<!--<![endif]-->"

    @pytest.mark.unit
    def test_branch_coerced(self):
        assert legacy().branch is Branch.LEGACY


class TestElement:
    """Tests for element helpers."""

    @pytest.mark.unit
    def test_append_returns_copy(self):
        base = Element("tr")
        grown = base.append(Element("td"))
        assert base.children == ()
        assert len(grown.children) == 1

    @pytest.mark.unit
    def test_children_list_normalised(self):
        assert Element("tr", children=[Element("td")]).children == (Element("td"),)

    @pytest.mark.unit
    def test_find_all_crosses_conditionals(self):
        tree = Element("div", children=(legacy(Element("span", {"class": "a b"})),))
        assert len(tree.find_all("span")) == 1
        assert len(tree.find_all("span", "b")) == 1
        assert tree.find_all("span", "c") == []


class TestTableHelpers:
    """Tests for table helpers."""

    @pytest.mark.unit
    def test_layout_table(self):
        table = layout_table(table_row(table_cell(Text("x"))), label="Box")
        assert render_markup(table) == (
            '<table aria-label="Box" role="presentation" cellpadding="0" '
            'cellspacing="0" border="0"><tbody><tr><td>x</td></tr></tbody></table>'
        )

    @pytest.mark.unit
    def test_attrs_override(self):
        table = layout_table(attrs={"width": 600, "align": "center"})
        assert table.attrs["width"] == 600
        assert table.attrs["role"] == "presentation"

    @pytest.mark.unit
    def test_single_cell_table(self):
        table = single_cell_table(Text("x"), cell_attrs={"align": "center"})
        cells = table.find_all("td")
        assert len(cells) == 1
        assert cells[0].attrs["align"] == "center"
