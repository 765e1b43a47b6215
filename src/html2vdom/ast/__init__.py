#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Parse tree model shared by every parsing backend."""

from html2vdom.ast.nodes import ParseComment, ParseElement, ParseNode, ParseText
from html2vdom.ast.serialization import (
    encode_text,
    escape_attribute,
    escape_text,
    serialize_node,
    serialize_nodes,
)

__all__ = [
    "ParseComment",
    "ParseElement",
    "ParseNode",
    "ParseText",
    "encode_text",
    "escape_attribute",
    "escape_text",
    "serialize_node",
    "serialize_nodes",
]
