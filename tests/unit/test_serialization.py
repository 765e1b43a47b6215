#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for parse tree serialization."""

import pytest

from html2vdom.ast import (
    ParseComment,
    ParseElement,
    ParseText,
    encode_text,
    escape_attribute,
    escape_text,
    serialize_nodes,
)


@pytest.mark.unit
class TestEscaping:
    """Tests for text and attribute escaping."""

    def test_escape_text(self):
        assert escape_text('a & b < c > d "e"\xa0') == 'a &amp; b &lt; c &gt; d "e"&nbsp;'

    def test_escape_attribute(self):
        assert escape_attribute('a & "b" <c>') == 'a &amp; &quot;b&quot; <c>'

    def test_raw_text_parent_not_escaped(self):
        assert encode_text("a < b && c", "script") == "a < b && c"
        assert encode_text("a < b", "STYLE") == "a < b"
        assert encode_text("a < b", "div") == "a &lt; b"
        assert encode_text("a < b", None) == "a &lt; b"


@pytest.mark.unit
class TestSerializeNodes:
    """Tests for inner markup serialization."""

    def test_nested(self):
        nodes = (
            ParseElement("b", (("class", "x"),), (ParseText("1 &amp; 2"),)),
            ParseText(" "),
            ParseElement("br"),
            ParseComment(" note "),
        )
        assert serialize_nodes(nodes) == '<b class="x">1 &amp; 2</b> <br><!-- note -->'

    def test_empty(self):
        assert serialize_nodes(()) == ""
