#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2vdom/transforms/dispatcher.py
"""Per-tag transform dispatch.

A transform table maps tag names, plus the default key ``"_"``, to either a
replacement tag name or a callable. Callables receive an explicit, tagged
input so the two call shapes cannot be confused:

- ``TextNode(text, key)`` for a surviving text node
- ``ElementNode(tag, props, children, key)`` for a converted element

and return the node to use in place of the default conversion: an
``Element``, a string, or ``None`` to drop the node. The dispatcher merges
nothing into that result.

Examples
--------
Wrap bare text in keyed spans and turn every other element into a div:

    >>> def default(node):
    ...     if isinstance(node, TextNode):
    ...         return create_element("span", None, node.text, key=node.key)
    ...     return create_element("div", node.props, *node.children, key=node.key)
    >>> dispatcher = TransformDispatcher({"_": default})

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional, Sequence, Union

from html2vdom.constants import DEFAULT_TRANSFORM_KEY
from html2vdom.vdom.elements import Element, Key, Node, freeze_props

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TextNode:
    """Transform input for a text node.

    Parameters
    ----------
    text : str
        Entity-decoded text content
    key : str, int or None
        Index of the node among its source siblings

    """

    text: str
    key: Optional[Key] = None


@dataclass(frozen=True)
class ElementNode:
    """Transform input for an element node.

    Parameters
    ----------
    tag : str
        Source tag name
    props : Mapping[str, Any]
        Already-mapped properties (read-only view of a private copy)
    children : tuple of Element or str
        Already-converted children
    key : str, int or None
        Index of the node among its source siblings

    """

    tag: str
    props: Mapping[str, Any]
    children: tuple[Node, ...] = ()
    key: Optional[Key] = None

    def to_element(self) -> Element:
        """Build the element the default conversion would have produced."""
        return Element(type=self.tag, props=self.props, children=self.children, key=self.key)


TransformInput = Union[TextNode, ElementNode]
TransformFn = Callable[[TransformInput], Any]
TransformEntry = Union[TransformFn, str]


class TransformDispatcher:
    """Resolve and apply transform overrides for converted nodes.

    Parameters
    ----------
    table : Mapping[str, TransformFn | str] or None
        Transform overrides keyed by tag name or ``"_"``; copied on init

    """

    def __init__(self, table: Optional[Mapping[str, TransformEntry]] = None):
        """Initialize the dispatcher with a private read-only copy of ``table``."""
        self._table: Mapping[str, TransformEntry] = MappingProxyType(dict(table or {}))

    def resolve(self, tag: str) -> Optional[TransformEntry]:
        """Return the override for ``tag``: exact name first, then the default key."""
        entry = self._table.get(tag)
        if entry is None:
            entry = self._table.get(DEFAULT_TRANSFORM_KEY)
        return entry

    def resolve_text(self) -> Optional[TransformFn]:
        """Return the default override if it can be applied to text."""
        entry = self._table.get(DEFAULT_TRANSFORM_KEY)
        return entry if callable(entry) else None

    def apply_element(
        self,
        tag: str,
        props: Mapping[str, Any],
        children: Sequence[Node],
        key: Optional[Key],
        default: Element,
    ) -> Any:
        """Apply the override for an element, or return ``default`` unchanged.

        Parameters
        ----------
        tag : str
            Source tag name used for lookup
        props : Mapping[str, Any]
            Mapped properties; the callable sees a read-only copy
        children : sequence of Element or str
            Converted children; the callable sees a tuple
        key : str, int or None
            Sibling index
        default : Element
            Structural conversion result, used when no override exists

        Returns
        -------
        Any
            The replacement node as returned by the override

        """
        entry = self.resolve(tag)
        if entry is None:
            return default
        if isinstance(entry, str):
            logger.debug("Renaming <%s> to <%s>", tag, entry)
            return Element(type=entry, props=props, children=tuple(children), key=key)
        return entry(ElementNode(tag=tag, props=freeze_props(props), children=tuple(children), key=key))

    def apply_text(self, text: str, key: Optional[Key]) -> Any:
        """Apply the default override to a text node, or return ``text`` unchanged."""
        transform = self.resolve_text()
        if transform is None:
            return text
        return transform(TextNode(text=text, key=key))
