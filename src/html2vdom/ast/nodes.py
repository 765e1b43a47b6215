#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2vdom/ast/nodes.py
"""Parse tree nodes handed from a backend adapter to the tree converter.

Every backend (BeautifulSoup, the html5lib DOM) is walked once and projected
onto these three node types, so the converter only ever sees one shape of
input regardless of which parser produced it.

Text and attribute values are held in serialized markup form: exactly what
the HTML fragment serialization algorithm would write for them. Converting
them back to plain strings is the job of the entity decoder, and replaying
them verbatim reproduces the original inner markup.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class ParseElement:
    """An element in the parse tree.

    Parameters
    ----------
    tag : str
        Tag name as reported by the parser (lowercase for HTML elements,
        case-adjusted for SVG elements such as ``clipPath``)
    attributes : tuple of (str, str)
        Attribute names and serialized values in source order
    children : tuple of ParseNode
        Child nodes in document order

    """

    tag: str
    attributes: tuple[tuple[str, str], ...] = ()
    children: tuple[ParseNode, ...] = ()


@dataclass(frozen=True)
class ParseText:
    """A text node in serialized markup form."""

    raw: str


@dataclass(frozen=True)
class ParseComment:
    """A comment; kept in the parse tree but never converted."""

    raw: str


ParseNode = Union[ParseElement, ParseText, ParseComment]
