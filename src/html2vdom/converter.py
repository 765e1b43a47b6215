#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2vdom/converter.py
"""Parse tree to element tree conversion.

``TreeConverter`` is the single conversion path used by every backend
adapter. It walks a sequence of ``ParseNode``s depth-first and, per node:

1. drops comments;
2. maps element attributes and parses inline ``style``;
3. either converts children recursively or, for pass-through tags, replays
   their inner markup as ``dangerouslySetInnerHTML``;
4. decodes text and applies the whitespace policy;
5. hands the result to the transform dispatcher.

"""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Union

from html2vdom.ast import ParseComment, ParseElement, ParseNode, ParseText, serialize_nodes
from html2vdom.constants import (
    DANGEROUS_INNER_HTML_KEY,
    DANGEROUS_INNER_HTML_PROP,
    RAW_TEXT_ELEMENTS,
    STYLE_PROP,
)
from html2vdom.options import ConvertOptions
from html2vdom.transforms import TransformDispatcher
from html2vdom.utils import decode_entities, map_attributes, parse_style, should_keep
from html2vdom.vdom import Element, Node

logger = logging.getLogger(__name__)

ConversionResult = Union[Node, list[Node]]


class TreeConverter:
    """Convert parse nodes into ``Element`` trees.

    A converter holds only immutable configuration, so one instance may be
    reused across calls and threads; every call builds a fresh tree.

    Parameters
    ----------
    options : ConvertOptions or None, default = None
        Conversion options

    """

    def __init__(self, options: ConvertOptions | None = None):
        """Initialize the converter and its transform dispatcher."""
        self.options: ConvertOptions = options or ConvertOptions()
        self._dispatcher = TransformDispatcher(self.options.transform)

    def convert(self, nodes: Sequence[ParseNode]) -> ConversionResult:
        """Convert the top-level nodes of a fragment.

        Parameters
        ----------
        nodes : sequence of ParseNode
            Fragment root nodes in document order

        Returns
        -------
        Element, str or list
            The single converted node when exactly one survives, otherwise
            a list (possibly empty) of converted nodes

        """
        converted = self.convert_children(nodes, parent_tag=None)
        if len(converted) == 1:
            return converted[0]
        return converted

    def convert_children(self, nodes: Sequence[ParseNode], parent_tag: Optional[str]) -> list[Node]:
        """Convert sibling nodes, skipping the ones that produce nothing.

        Each node's key is its index among ``nodes``, so comments and elided
        whitespace still advance it.
        """
        children: list[Node] = []
        for index, node in enumerate(nodes):
            converted = self.convert_node(node, parent_tag, index)
            if converted is not None:
                children.append(converted)
        return children

    def convert_node(self, node: ParseNode, parent_tag: Optional[str], key: int) -> Optional[Node]:
        """Convert one parse node; returns None when the node is dropped."""
        if isinstance(node, ParseElement):
            return self._convert_element(node, key)
        if isinstance(node, ParseText):
            return self._convert_text(node, parent_tag, key)
        if isinstance(node, ParseComment):
            logger.debug("Dropping comment node")
            return None
        raise TypeError(f"Unsupported parse node: {type(node).__name__}")

    def _convert_text(self, node: ParseText, parent_tag: Optional[str], key: int) -> Optional[Node]:
        if parent_tag is not None and parent_tag.lower() in RAW_TEXT_ELEMENTS:
            text = node.raw
        else:
            text = decode_entities(node.raw)

        if not should_keep(text, parent_tag):
            logger.debug("Eliding whitespace-only text inside <%s>", parent_tag)
            return None
        return self._dispatcher.apply_text(text, key)

    def _convert_element(self, node: ParseElement, key: int) -> Optional[Node]:
        props = map_attributes(node.tag, node.attributes, self.options.preserve_rules)

        if STYLE_PROP in props:
            style = parse_style(props[STYLE_PROP])
            if style:
                props[STYLE_PROP] = style
            else:
                logger.debug("Dropping style attribute on <%s> with no valid declarations", node.tag)
                del props[STYLE_PROP]

        children: list[Node]
        if node.tag.lower() in self.options.dangerously_set_children:
            children = []
            if node.children:
                props[DANGEROUS_INNER_HTML_PROP] = {DANGEROUS_INNER_HTML_KEY: serialize_nodes(node.children).strip()}
        else:
            children = self.convert_children(node.children, node.tag)

        default = Element(type=node.tag, props=props, children=tuple(children), key=key)
        return self._dispatcher.apply_element(node.tag, props, children, key, default)
