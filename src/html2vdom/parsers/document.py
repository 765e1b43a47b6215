#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2vdom/parsers/document.py
"""Document backend: parse into a live W3C DOM and walk it.

html5lib builds the fragment into an ``xml.dom.minidom`` document, the same
node model a browser exposes (``nodeType``, ``tagName``, ``attributes``,
``childNodes``). The DOM is projected onto ``ParseNode``s and converted by
the shared ``TreeConverter``.

"""

from __future__ import annotations

import logging
from typing import Any, Optional
from xml.dom import Node as DomNode

from html2vdom.ast import ParseComment, ParseElement, ParseNode, ParseText, encode_text, escape_attribute
from html2vdom.constants import DEPS_DOCUMENT
from html2vdom.converter import ConversionResult
from html2vdom.exceptions import ParsingError
from html2vdom.options import ConvertOptions
from html2vdom.parsers.base import BaseAdapter, merge_options, validate_html_input
from html2vdom.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)


class DocumentAdapter(BaseAdapter):
    """Convert HTML using an html5lib-built DOM fragment.

    Parameters
    ----------
    options : ConvertOptions or None, default = None
        Conversion options; ``html_parser`` is ignored by this backend

    """

    backend_name = "document"

    @requires_dependencies("document", DEPS_DOCUMENT)
    def build_parse_tree(self, html: str) -> list[ParseNode]:
        """Parse ``html`` into a DOM fragment and project its child nodes.

        The html5lib DOM builder leaves a separate text node at every character
        reference; ``normalize`` joins them as a browser DOM holds them.
        """
        import html5lib

        try:
            fragment = html5lib.parseFragment(html, treebuilder="dom")
        except (AssertionError, TypeError, ValueError) as e:
            raise ParsingError(f"html5lib failed to parse input: {e}", "document", e) from e

        fragment.normalize()

        nodes = []
        for child in fragment.childNodes:
            projected = self._project(child, None)
            if projected is not None:
                nodes.append(projected)
        return nodes

    def _project(self, node: Any, parent_tag: Optional[str]) -> Optional[ParseNode]:
        if node.nodeType == DomNode.ELEMENT_NODE:
            attributes = tuple((name, escape_attribute(value)) for name, value in node.attributes.items())
            children = []
            for child in node.childNodes:
                projected = self._project(child, node.tagName)
                if projected is not None:
                    children.append(projected)
            return ParseElement(tag=node.tagName, attributes=attributes, children=tuple(children))
        if node.nodeType == DomNode.TEXT_NODE:
            return ParseText(encode_text(node.data, parent_tag))
        if node.nodeType == DomNode.COMMENT_NODE:
            return ParseComment(node.data)
        logger.debug("Skipping DOM node of type %s", node.nodeType)
        return None


def to_element(html: Any, options: ConvertOptions | None = None, **kwargs: Any) -> ConversionResult:
    """Convert HTML to elements with the document (W3C DOM) backend.

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

    """
    html = validate_html_input(html)
    return DocumentAdapter(merge_options(options, **kwargs)).to_element(html)
