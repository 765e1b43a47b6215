#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Integration tests running the same HTML through both parsing backends."""

import re

import pytest
from hypothesis import given
from hypothesis import strategies as st
from utils import assert_backends_agree, convert_both

from html2vdom import (
    ConvertOptions,
    Element,
    InputTypeError,
    TextNode,
    create_element,
    render_to_static_markup,
    to_element,
)


def _wrap_text(node):
    if isinstance(node, TextNode):
        return create_element("span", None, node.text, key=node.key)
    return node.to_element()


@pytest.mark.integration
class TestCore:
    """Basic conversion behavior."""

    def test_it_works(self, backend):
        assert to_element("<p>This is cool</p>", backend=backend) == Element("p", {}, ("This is cool",), 0)

    @pytest.mark.parametrize("fixture", [None, [], {}, 1, True])
    def test_html_must_be_string(self, backend, fixture):
        with pytest.raises(InputTypeError, match="^Expected HTML string$"):
            to_element(fixture, backend=backend)

    def test_type_error_compatible(self, backend):
        with pytest.raises(TypeError):
            to_element(b"<p>bytes</p>", backend=backend)

    def test_self_closing_component(self):
        markup = assert_backends_agree('<div><img src="https://www.google.com/logo.png" /></div>')
        assert markup == '<div><img src="https://www.google.com/logo.png"/></div>'

    def test_multi_children(self, backend):
        result = to_element("<p>Multi</p><p>Component</p>", backend=backend)
        assert result == [Element("p", {}, ("Multi",), 0), Element("p", {}, ("Component",), 1)]

    def test_element_inside_text_node(self, backend):
        result = to_element("what are <strong>you</strong> doing?", backend=backend)
        assert result == ["what are ", Element("strong", {}, ("you",), 1), " doing?"]

    def test_surrounding_whitespace_ignored(self, backend):
        assert to_element("\n   <p>x</p>\n  ", backend=backend) == Element("p", {}, ("x",), 0)

    def test_empty_input(self, backend):
        assert to_element("", backend=backend) == []
        assert to_element("   ", backend=backend) == []

    def test_plain_text(self, backend):
        assert to_element("just text", backend=backend) == "just text"

    def test_ignore_comment(self, backend):
        result = to_element("<!-- comment should be ignored--><div>no comment</div>", backend=backend)
        assert isinstance(result, Element)
        assert result.type == "div"
        assert result.children == ("no comment",)

    def test_ignore_multiline_comment(self, backend):
        html = "<!--<div>\n<p>multiline</p> \t</div>--><div>no multiline comment</div>"
        result = to_element(html, backend=backend)
        assert render_to_static_markup(result) == "<div>no multiline comment</div>"

    def test_nested_comment_advances_keys(self, backend):
        result = to_element("<ul><li>a</li><!-- c --><li>b</li></ul>", backend=backend)
        assert [child.key for child in result.children] == [0, 2]


@pytest.mark.integration
class TestAttributes:
    """Attribute and style conversion."""

    def test_map_html_attributes_to_props(self):
        html = (
            "<div>"
            '<label class="input-text" for="name"></label>'
            '<div id="test" data-type="calendar" aria-describedby="info" spellcheck="true" contenteditable></div>'
            '<link xml:lang="en" xlink:actuate="other" />'
            '<svg viewbox="0 0 24 24" fill-rule="evenodd" color-interpolation-filters="sRGB">'
            '<path fill="#ffa0"></path>'
            "</svg>"
            '<img srcset="https://img.src" crossorigin="true"></img>'
            '<iframe srcdoc="<p>html</p>" allowfullscreen></iframe>'
            '<input autocomplete="on" autofocus readonly="readonly" maxlength="10" />'
            '<button accesskey="s">Stress reliever</button>'
            '<time datetime="2018-07-07">July 7</time>'
            "</div>"
        )
        assert_backends_agree(html)
        standalone, document = convert_both(html)
        assert standalone == document

        label, div, link, svg, img, iframe, input_, button, time = standalone.children
        assert label.props == {"className": "input-text", "htmlFor": "name"}
        assert div.props == {
            "id": "test",
            "data-type": "calendar",
            "aria-describedby": "info",
            "spellCheck": "true",
            "contentEditable": True,
        }
        assert link.props == {"xmlLang": "en", "xlinkActuate": "other"}
        assert svg.props == {"viewBox": "0 0 24 24", "fillRule": "evenodd", "colorInterpolationFilters": "sRGB"}
        assert img.props == {"srcSet": "https://img.src", "crossOrigin": "true"}
        assert iframe.props == {"srcDoc": "<p>html</p>", "allowFullScreen": True}
        assert input_.props == {"autoComplete": "on", "autoFocus": True, "readOnly": True, "maxLength": "10"}
        assert button.props == {"accessKey": "s"}
        assert time.props == {"dateTime": "2018-07-07"}

    def test_boolean_attribute_renders_empty(self, backend):
        result = to_element("<iframe allowfullscreen />", backend=backend)
        assert result.props == {"allowFullScreen": True}
        assert render_to_static_markup(result) == '<iframe allowfullscreen=""></iframe>'

    def test_convert_style_values(self, backend):
        html = '<div style="margin: 0 auto; padding: 0 10px"><span style="font-size: 12"></span></div>'
        result = to_element(html, backend=backend)
        assert result.props["style"] == {"margin": "0 auto", "padding": "0 10px"}
        assert result.children[0].props["style"] == {"fontSize": "12"}

    def test_css_vendor_prefixes(self, backend):
        html = '<div style="-ms-text-size-adjust: 100%; -webkit-text-size-adjust: 100%">prefix</div>'
        result = to_element(html, backend=backend)
        assert result.props["style"] == {"MsTextSizeAdjust": "100%", "WebkitTextSizeAdjust": "100%"}
        assert render_to_static_markup(result) == (
            '<div style="-ms-text-size-adjust:100%;-webkit-text-size-adjust:100%">prefix</div>'
        )

    def test_css_html_entities(self, backend):
        html = '<div style="font-family: Consolas, &quot;Liberation Mono &quot;"></div>'
        result = to_element(html, backend=backend)
        assert result.props["style"] == {"fontFamily": 'Consolas, "Liberation Mono "'}

    def test_ignore_invalid_style(self, backend):
        html = '<div class="component-overflow" style="TITLE_2">Explore Categories</div>'
        result = to_element(html, backend=backend)
        assert result == Element("div", {"className": "component-overflow"}, ("Explore Categories",), 0)

    def test_ignore_partially_invalid_style(self, backend):
        html = "<div class=\"component-overflow\" style=\"TITLE_2; color:'red'\">Explore Categories</div>"
        result = to_element(html, backend=backend)
        assert result.props == {"className": "component-overflow", "style": {"color": "'red'"}}

    def test_style_with_url_and_protocol(self, backend):
        html = (
            '<div class="tera-promo-card--header" '
            'style="background-image:url(https://d1nabgopwop1kh.cloudfront.net/xx);"></div>'
        )
        result = to_element(html, backend=backend)
        assert result.props["style"] == {"backgroundImage": "url(https://d1nabgopwop1kh.cloudfront.net/xx)"}

    def test_preserve_child_of_style_tag(self, backend):
        html = """
      <style>
        ul > li {
          list-style: none
        }

        div[data-id="test"]:not(.y) {
          display: none;
        }
      </style>
    """
        result = to_element(html, backend=backend)
        assert result.type == "style"
        assert result.children == ()
        inner = result.props["dangerouslySetInnerHTML"]["__html"]
        assert inner.startswith("ul > li {")
        assert 'div[data-id="test"]:not(.y)' in inner
        assert inner.endswith("}")

    def test_style_tag_consistent(self):
        assert_backends_agree("<style>a > b { color: red; }</style><p>x</p>")


@pytest.mark.integration
class TestEncoding:
    """Entity decoding."""

    def test_unescape_html_entities(self, backend):
        result = to_element('<div class="entities">&amp; and &</div>', backend=backend)
        assert result.children == ("& and &",)

    def test_decode_entities_with_default_transform(self, backend):
        def default(node):
            if isinstance(node, TextNode):
                return node.text
            return create_element("p", None, *node.children, key=node.key)

        result = to_element('<div class="entities">&amp; and &</div>', backend=backend, transform={"_": default})
        assert result == Element("p", {}, ("& and &",), 0)

    def test_decode_html_attributes(self, backend):
        result = to_element('<a href="https://www.google.com/?a=b&amp;c=d">test</a>', backend=backend)
        assert result.props == {"href": "https://www.google.com/?a=b&c=d"}

    def test_no_double_decoding(self, backend):
        result = to_element('<p title="&amp;lt;">&amp;lt;&nbsp;</p>', backend=backend)
        assert result.props == {"title": "&lt;"}
        assert result.children == ("&lt;\xa0",)

    def test_script_text_not_decoded(self, backend):
        result = to_element("<script>if (a &amp;&amp; b < c) {}</script>", backend=backend)
        assert result.children == ("if (a &amp;&amp; b < c) {}",)


@pytest.mark.integration
class TestTransform:
    """Transform overrides."""

    def test_custom_component(self, backend):
        def Paragraph(props):
            children = props.pop("children")
            return create_element("p", {**props, "className": "css-x243s"}, *children)

        html = '<p data-custom="true">Custom component</p>'
        result = to_element(
            html, backend=backend, transform={"p": lambda node: Element(Paragraph, node.props, node.children, node.key)}
        )
        assert result.type is Paragraph
        assert render_to_static_markup(result) == '<p data-custom="true" class="css-x243s">Custom component</p>'

    def test_default_mapping(self, backend):
        def default(node):
            if isinstance(node, TextNode):
                return create_element("span", None, node.text, key=node.key)
            return create_element("div", node.props, *node.children, key=node.key)

        result = to_element("<article> <p>Default mapping</p> </article>", backend=backend, transform={"_": default})
        assert result == Element(
            "div",
            {},
            (
                Element("span", {}, (" ",), 0),
                Element("div", {}, (Element("span", {}, ("Default mapping",), 0),), 1),
                Element("span", {}, (" ",), 2),
            ),
            0,
        )

    def test_string_transform_renames(self, backend):
        result = to_element('<p><b class="x">bold</b></p>', backend=backend, transform={"b": "strong"})
        assert result.children == (Element("strong", {"className": "x"}, ("bold",), 0),)

    def test_none_drops_node(self, backend):
        result = to_element("<div><script>x</script><p>a</p></div>", backend=backend, transform={"script": lambda n: None})
        assert result == Element("div", {}, (Element("p", {}, ("a",), 1),), 0)

    def test_transform_errors_propagate(self, backend):
        def broken(node):
            raise KeyError("boom")

        with pytest.raises(KeyError):
            to_element("<p>x</p>", backend=backend, transform={"p": broken})

    def test_transform_cannot_mutate_props(self, backend):
        def mutate(node):
            node.props["id"] = "x"

        with pytest.raises(TypeError):
            to_element("<p>x</p>", backend=backend, transform={"p": mutate})


@pytest.mark.integration
class TestPreserveAttributes:
    """Preserved attribute names."""

    def test_allow_preserve_some_attributes(self, backend):
        html = """
        <div ng-if="x">
          <div tv-abc="d" tv-xxx="y" class="z"></div>
        </div>
        """
        result = to_element(html, backend=backend, preserve_attributes=["ng-if", re.compile("tv-")])
        assert result.props == {"ng-if": "x"}
        inner = [child for child in result.children if isinstance(child, Element)][0]
        assert inner.props == {"tv-abc": "d", "tv-xxx": "y", "className": "z"}


@pytest.mark.integration
class TestDangerouslySetChildren:
    """Raw inner markup passthrough."""

    def test_dangerously_set_html_for_required_tags(self, backend):
        html = """
        <pre>
          &lt;a href=&quot;/&quot;&gt;Test&lt;/a&gt;
        </pre>
      """
        result = to_element(html, backend=backend, dangerously_set_children=["pre"])
        assert result == Element("pre", {"dangerouslySetInnerHTML": {"__html": '&lt;a href="/"&gt;Test&lt;/a&gt;'}}, (), 0)

    def test_nested_markup_not_converted(self, backend):
        result = to_element("<pre><b>x</b> &amp; y</pre>", backend=backend, dangerously_set_children=["pre"])
        assert result.props == {"dangerouslySetInnerHTML": {"__html": "<b>x</b> &amp; y"}}
        assert result.children == ()

    def test_no_dangerously_render_script_tag(self):
        html = """<script data-cfasync="false" type="text/javascript">
          var gtm4wp_datalayer_name = "dataLayer";
          var dataLayer = dataLayer || [];
          dataLayer.push({"pagePostType":"post","pageCategory":["kalender-cuti"]});
        </script>"""
        standalone, document = convert_both(html)
        assert standalone == document
        assert standalone.props == {"data-cfasync": "false", "type": "text/javascript"}
        assert "dangerouslySetInnerHTML" not in standalone.props
        assert 'var dataLayer = dataLayer || [];' in standalone.children[0]

    def test_dangerously_render_script(self, backend):
        result = to_element("<script>if (a < b && c) {}</script>", backend=backend, dangerously_set_children=["script"])
        assert result.props == {"dangerouslySetInnerHTML": {"__html": "if (a < b && c) {}"}}

    def test_dangerously_render_empty_script_tag(self, backend):
        result = to_element(
            '<script type="text/javascript"></script>', backend=backend, dangerously_set_children=["script"]
        )
        assert result == Element("script", {"type": "text/javascript"}, (), 0)

    def test_replacing_default_disables_style_passthrough(self, backend):
        result = to_element("<style>a{}</style>", backend=backend, dangerously_set_children=["pre"])
        assert result.children == ("a{}",)
        assert "dangerouslySetInnerHTML" not in result.props


@pytest.mark.integration
class TestWhitespace:
    """Whitespace handling."""

    def test_allow_whitespace_only_text_nodes(self, backend):
        result = to_element("<span>Hello</span> <span>World</span>", backend=backend)
        assert result == [Element("span", {}, ("Hello",), 0), " ", Element("span", {}, ("World",), 2)]

    def test_allow_newline_text_node_between_tags(self, backend):
        result = to_element("<pre><span>Hello</span>\n<span>World</span></pre>", backend=backend)
        assert result.children[1] == "\n"
        assert len(result.children) == 3

    def test_pre_text_preserved(self, backend):
        result = to_element("<pre>a\n  b\n</pre>", backend=backend)
        assert result.children == ("a\n  b\n",)

    def test_remove_whitespace_on_table_elements(self, backend):
        html = """
      <table>
        <tbody>
          <tr>
            <th> title</th>
          </tr>
          <tr>
            <td>entry </td>
          </tr>
        </tbody>
      </table>
    """
        table = to_element(html, backend=backend)
        (tbody,) = table.children
        assert tbody.type == "tbody"
        first_row, second_row = tbody.children
        assert [cell.type for cell in first_row.children] == ["th"]
        assert first_row.children[0].children == (" title",)
        assert second_row.children[0].children == ("entry ",)
        assert render_to_static_markup(table) == (
            "<table><tbody><tr><th> title</th></tr><tr><td>entry </td></tr></tbody></table>"
        )


@pytest.mark.integration
class TestConsistency:
    """The standalone and document backends agree."""

    @pytest.mark.parametrize(
        "html",
        [
            "<p>This is cool</p>",
            "<p>Multi</p><p>Component</p>",
            "what are <strong>you</strong> doing?",
            "<ul><li>one</li><li>two<ul><li>three</li></ul></li></ul>",
            '<a href="/x?a=1&amp;b=2" title="&quot;q&quot;">link &lt;here&gt;</a>',
            "<p>unclosed <b>bold <i>both</b> italic</i>",
            "<table><tr><td>implicit tbody</td></tr></table>",
            '<svg viewBox="0 0 10 10"><clipPath id="c"><rect width="10"></rect></clipPath></svg>',
            "<select><option selected>a</option><option disabled>b</option></select>",
            "<p>a&nbsp;b</p>",
            '<div class="entities">&amp; and &</div>',
            "<!-- x --> <div>y</div>",
            "<!-- header -->\n<div>y</div>",
            "<noscript><p>x</p></noscript>",
        ],
    )
    def test_backends_render_identically(self, html):
        assert_backends_agree(html)
        standalone, document = convert_both(html)
        assert standalone == document

    @pytest.mark.parametrize("html", ["<!-- x --> <div>y</div>", "<!-- header -->\n<div>y</div>"])
    def test_whitespace_after_leading_comment_kept(self, html):
        standalone, document = convert_both(html)
        assert standalone == document
        assert standalone == [html[html.index(">") + 1 : html.index("<div")], Element("div", {}, ("y",), 2)]

    def test_noscript_children_parsed_as_markup(self):
        standalone, document = convert_both("<noscript><p>x</p></noscript>")
        assert standalone == document == Element("noscript", {}, (Element("p", {}, ("x",), 0),), 0)

    def test_character_reference_does_not_split_text(self, backend):
        result = to_element("<p>a &amp;b</p>", backend=backend)
        assert result == Element("p", {}, ("a &b",), 0)

    def test_character_references_with_text_transform(self):
        html = "<p>x &lt; y &amp; z</p>"
        markup = assert_backends_agree(html, transform={"_": _wrap_text})
        assert markup == "<p><span>x &lt; y &amp; z</span></p>"
        standalone, document = convert_both(html, transform={"_": _wrap_text})
        assert standalone == document

    @given(
        st.lists(
            st.sampled_from(
                [
                    "<!-- c -->",
                    " ",
                    "\n",
                    "<b>x</b>",
                    "a &amp; b",
                    "<p>t &lt; u</p>",
                    "<noscript><p>n</p></noscript>",
                    "<span>s</span>",
                ]
            ),
            max_size=8,
        )
    )
    def test_mixed_fragments_consistent(self, pieces):
        html = "".join(pieces)
        assert_backends_agree(html, transform={"_": _wrap_text})
        standalone, document = convert_both(html, transform={"_": _wrap_text})
        assert standalone == document

    @given(st.text(alphabet="abcXYZ019 &;#\"'", max_size=40))
    def test_text_content_consistent(self, text):
        assert_backends_agree(f"<p>{text}</p>")

    def test_html_parser_builder_on_well_formed_input(self):
        html = '<p class="a">x &amp; y <b>z</b></p>'
        standalone, document = convert_both(html, html_parser="html.parser")
        assert standalone == document
        assert standalone == Element("p", {"className": "a"}, ("x & y ", Element("b", {}, ("z",), 1)), 0)

    def test_options_object_shared(self):
        options = ConvertOptions(transform={"p": "section"}, preserve_attributes=["class"])
        standalone, document = convert_both('<p class="a">x</p>', options=options)
        assert standalone == document == Element("section", {"class": "a"}, ("x",), 0)
