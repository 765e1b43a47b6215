#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2vdom/ast/serialization.py
"""Encoding helpers following the HTML fragment serialization algorithm.

Adapters use ``escape_text`` and ``escape_attribute`` to store parser output
in serialized form; the converter uses ``serialize_nodes`` to turn the
children of a pass-through element back into their inner markup.

"""

from __future__ import annotations

from typing import Iterable

from html2vdom.ast.nodes import ParseComment, ParseElement, ParseNode, ParseText
from html2vdom.constants import RAW_TEXT_ELEMENTS, VOID_ELEMENTS


def escape_text(value: str) -> str:
    """Escape a decoded text node for serialization."""
    return value.replace("&", "&amp;").replace("\xa0", "&nbsp;").replace("<", "&lt;").replace(">", "&gt;")


def escape_attribute(value: str) -> str:
    """Escape a decoded attribute value for serialization."""
    return value.replace("&", "&amp;").replace("\xa0", "&nbsp;").replace('"', "&quot;")


def encode_text(value: str, parent_tag: str | None) -> str:
    """Store a decoded text value the way its parent serializes it.

    Children of raw-text elements (``script``, ``style``...) are written
    verbatim; everything else is escaped.
    """
    if parent_tag is not None and parent_tag.lower() in RAW_TEXT_ELEMENTS:
        return value
    return escape_text(value)


def serialize_node(node: ParseNode) -> str:
    """Serialize a single parse node back to markup."""
    if isinstance(node, ParseText):
        return node.raw
    if isinstance(node, ParseComment):
        return f"<!--{node.raw}-->"

    attributes = "".join(f' {name}="{value}"' for name, value in node.attributes)
    if node.tag.lower() in VOID_ELEMENTS:
        return f"<{node.tag}{attributes}>"
    return f"<{node.tag}{attributes}>{serialize_nodes(node.children)}</{node.tag}>"


def serialize_nodes(nodes: Iterable[ParseNode]) -> str:
    """Serialize a sequence of sibling nodes (an element's inner markup)."""
    return "".join(serialize_node(node) for node in nodes)
