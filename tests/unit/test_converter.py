#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for TreeConverter, independent of any parser."""

import pytest

from html2vdom.ast import ParseComment, ParseElement, ParseText
from html2vdom.converter import TreeConverter
from html2vdom.options import ConvertOptions
from html2vdom.vdom import Element


@pytest.mark.unit
class TestTreeConverter:
    """Tests for TreeConverter."""

    def test_single_root_unwrapped(self):
        result = TreeConverter().convert([ParseElement("p", (), (ParseText("hi"),))])
        assert result == Element("p", {}, ("hi",), 0)

    def test_multiple_roots_list(self):
        result = TreeConverter().convert([ParseElement("b"), ParseText(" "), ParseElement("i")])
        assert result == [Element("b", {}, (), 0), " ", Element("i", {}, (), 2)]

    def test_empty_input(self):
        assert TreeConverter().convert([]) == []

    def test_only_comment(self):
        assert TreeConverter().convert([ParseComment("x")]) == []

    def test_keys_count_dropped_siblings(self):
        tree = ParseElement("ul", (), (ParseElement("li"), ParseComment("c"), ParseElement("li")))
        result = TreeConverter().convert([tree])
        assert [child.key for child in result.children] == [0, 2]

    def test_text_decoded(self):
        result = TreeConverter().convert([ParseElement("p", (), (ParseText("a &amp; b&nbsp;"),))])
        assert result.children == ("a & b\xa0",)

    def test_raw_text_parent_not_decoded(self):
        result = TreeConverter().convert([ParseElement("script", (), (ParseText("a &amp;&amp; b"),))])
        assert result.children == ("a &amp;&amp; b",)

    def test_table_whitespace_elided(self):
        tree = ParseElement("tr", (), (ParseText("\n "), ParseElement("td", (), (ParseText(" "),)), ParseText("\n")))
        result = TreeConverter().convert([tree])
        assert result == Element("tr", {}, (Element("td", {}, (" ",), 1),), 0)

    def test_style_parsed(self):
        result = TreeConverter().convert([ParseElement("div", (("style", "color: red; TITLE_2"),))])
        assert result.props == {"style": {"color": "red"}}

    def test_invalid_style_dropped(self):
        result = TreeConverter().convert([ParseElement("div", (("style", "TITLE_2"),))])
        assert "style" not in result.props

    def test_dangerous_children(self):
        tree = ParseElement("pre", (), (ParseText("\n"), ParseElement("b", (), (ParseText("x &lt; y"),)), ParseText(" ")))
        result = TreeConverter(ConvertOptions(dangerously_set_children=["pre"])).convert([tree])
        assert result == Element("pre", {"dangerouslySetInnerHTML": {"__html": "<b>x &lt; y</b>"}}, (), 0)

    def test_dangerous_tag_without_children(self):
        result = TreeConverter().convert([ParseElement("style")])
        assert result == Element("style", {}, (), 0)

    def test_unknown_node_type(self):
        with pytest.raises(TypeError):
            TreeConverter().convert([object()])
