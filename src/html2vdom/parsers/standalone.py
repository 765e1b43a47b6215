#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2vdom/parsers/standalone.py
"""Standalone backend: parse with BeautifulSoup, no live document.

The soup is walked once and projected onto ``ParseNode``s. With the
``html5lib`` tree builder (the default) the tree is built by the same
HTML5 algorithm the document backend uses; ``html.parser`` and ``lxml`` are
available for speed but may disagree with it on malformed markup.

The document builders parse a whole document, so the markup is prefixed
with ``<body>``. Tree construction then starts in the "in body" insertion
mode, the same mode html5lib uses for a fragment, and head-only content
(``<noscript>``, ``<style>``, leading comments and whitespace) stays where
the document backend puts it.

"""

from __future__ import annotations

import logging
from typing import Any, Optional

from html2vdom.ast import ParseComment, ParseElement, ParseNode, ParseText, encode_text, escape_attribute
from html2vdom.constants import DEPS_HTML_PARSER, DEPS_STANDALONE
from html2vdom.converter import ConversionResult
from html2vdom.exceptions import DependencyError, ParsingError
from html2vdom.options import ConvertOptions
from html2vdom.parsers.base import BaseAdapter, merge_adjacent_text, merge_options, validate_html_input
from html2vdom.utils.decorators import ensure_dependencies, requires_dependencies

logger = logging.getLogger(__name__)

# Containers html5lib and lxml wrap a fragment in when building a document
_DOCUMENT_SECTIONS = ("head", "body")
_BODY_START_TAG = "<body>"


def _attribute_text(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return " ".join(str(item) for item in value)
    return str(value)


class StandaloneAdapter(BaseAdapter):
    """Convert HTML using a BeautifulSoup parse tree.

    Parameters
    ----------
    options : ConvertOptions or None, default = None
        Conversion options; ``html_parser`` selects the tree builder

    """

    backend_name = "standalone"

    @requires_dependencies("standalone", DEPS_STANDALONE)
    def build_parse_tree(self, html: str) -> list[ParseNode]:
        """Parse ``html`` with BeautifulSoup and project the fragment roots."""
        ensure_dependencies("standalone", DEPS_HTML_PARSER[self.options.html_parser])

        from bs4 import BeautifulSoup
        from bs4.exceptions import FeatureNotFound, ParserRejectedMarkup

        try:
            soup = BeautifulSoup(self._prepare_markup(html), self.options.html_parser, multi_valued_attributes=None)
        except FeatureNotFound as e:
            raise DependencyError(
                converter_name="standalone",
                missing_packages=[(self.options.html_parser, "")],
                message=f"Selected ConvertOptions.html_parser not found: {e}.",
            ) from e
        except (ParserRejectedMarkup, AssertionError, TypeError, ValueError) as e:
            raise ParsingError(f"BeautifulSoup failed to parse input: {e}", "standalone", e) from e

        nodes = []
        for child in self._fragment_roots(soup):
            projected = self._project(child, None)
            if projected is not None:
                nodes.append(projected)
        return merge_adjacent_text(nodes)

    def _prepare_markup(self, html: str) -> str:
        if self.options.html_parser == "html.parser":
            return html
        return _BODY_START_TAG + html

    def _fragment_roots(self, soup: Any) -> list[Any]:
        """Return the fragment's top-level nodes, unwrapping document scaffolding.

        The html5lib and lxml builders always produce ``<html><head><body>``;
        the fragment is the head contents followed by the body contents.
        Anything the builder placed outside ``<html>`` keeps its position.
        """
        from bs4.element import Tag

        if self.options.html_parser == "html.parser":
            return list(soup.contents)

        roots: list[Any] = []
        for node in soup.contents:
            if not (isinstance(node, Tag) and node.name == "html"):
                roots.append(node)
                continue
            for section in node.contents:
                if isinstance(section, Tag) and section.name in _DOCUMENT_SECTIONS:
                    roots.extend(section.contents)
                else:
                    roots.append(section)
        return roots

    def _project(self, node: Any, parent_tag: Optional[str]) -> Optional[ParseNode]:
        from bs4.element import Comment, NavigableString, PreformattedString, Tag

        if isinstance(node, Tag):
            attributes = tuple((str(name), escape_attribute(_attribute_text(value))) for name, value in node.attrs.items())
            children = []
            for child in node.contents:
                projected = self._project(child, node.name)
                if projected is not None:
                    children.append(projected)
            return ParseElement(tag=node.name, attributes=attributes, children=tuple(merge_adjacent_text(children)))
        if isinstance(node, Comment):
            return ParseComment(str(node))
        if isinstance(node, PreformattedString):
            logger.debug("Skipping %s node", type(node).__name__)
            return None
        if isinstance(node, NavigableString):
            return ParseText(encode_text(str(node), parent_tag))
        return None


def to_element(html: Any, options: ConvertOptions | None = None, **kwargs: Any) -> ConversionResult:
    """Convert HTML to elements with the standalone (BeautifulSoup) backend.

    Parameters
    ----------
    html : str
        HTML fragment
    options : ConvertOptions or None, default = None
        Conversion options
    **kwargs : Any
        ``ConvertOptions`` field overrides

    Returns
    -------
    Element, str or list
        Converted node, or list of nodes for multi-root fragments

    Examples
    --------
        >>> to_element("<p class='lead'>Hi</p>")
        Element(type='p', props=mappingproxy({'className': 'lead'}), children=('Hi',), key=0)

    """
    html = validate_html_input(html)
    return StandaloneAdapter(merge_options(options, **kwargs)).to_element(html)
