#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2vdom/vdom/elements.py
"""Output element model.

An ``Element`` is an immutable description of one UI node: its type (a tag
name or a component callable), a read-only ordered property mapping and a
tuple of children, each of which is another ``Element`` or a plain string.
Elements are created fresh for every conversion and never share mutable
state with the parse tree or with the caller.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Iterable, Mapping, Optional, Union

ElementType = Union[str, Callable[..., Any]]
Key = Union[str, int]


def _freeze_value(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({name: _freeze_value(item) for name, item in value.items()})
    if isinstance(value, list):
        return tuple(value)
    return value


def freeze_props(props: Optional[Mapping[str, Any]]) -> Mapping[str, Any]:
    """Copy ``props`` into a read-only mapping, freezing nested mappings too."""
    if not props:
        return MappingProxyType({})
    return MappingProxyType({name: _freeze_value(value) for name, value in props.items()})


def _thaw_value(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {name: _thaw_value(item) for name, item in value.items()}
    if isinstance(value, tuple):
        return list(value)
    return value


@dataclass(frozen=True)
class Element:
    """A node of the output UI tree.

    Parameters
    ----------
    type : str or callable
        Tag name, or a component called with its props at render time
    props : Mapping[str, Any], default = empty mapping
        Element properties in insertion order. Stored as a read-only copy.
    children : tuple of Element or str, default = ()
        Child elements and text
    key : str, int or None, default = None
        Sibling identity used by list-rendering frameworks; never rendered

    """

    type: ElementType
    props: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    children: tuple[Node, ...] = ()
    key: Optional[Key] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "props", freeze_props(self.props))
        object.__setattr__(self, "children", tuple(self.children))

    @property
    def type_name(self) -> str:
        """Tag name, or the component's ``__name__``."""
        if isinstance(self.type, str):
            return self.type
        return getattr(self.type, "__name__", type(self.type).__name__)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible snapshot of this element and its subtree."""
        return {
            "type": self.type_name,
            "key": self.key,
            "props": {name: _thaw_value(value) for name, value in self.props.items()},
            "children": [child.to_dict() if isinstance(child, Element) else child for child in self.children],
        }


Node = Union[Element, str]


def _flatten_children(children: Iterable[Any]) -> list[Node]:
    flattened: list[Node] = []
    for child in children:
        if child is None or isinstance(child, bool):
            continue
        if isinstance(child, (list, tuple)):
            flattened.extend(_flatten_children(child))
        elif isinstance(child, Element):
            flattened.append(child)
        else:
            flattened.append(str(child))
    return flattened


def create_element(
    type: ElementType, props: Optional[Mapping[str, Any]] = None, *children: Any, key: Optional[Key] = None
) -> Element:
    """Create an ``Element``, copying ``props`` and flattening ``children``.

    Nested lists and tuples of children are flattened; ``None`` and booleans
    are skipped; any other non-element child is converted with ``str``.

    Parameters
    ----------
    type : str or callable
        Tag name or component
    props : Mapping[str, Any], optional
        Element properties; never mutated and never aliased
    *children : Any
        Child elements or text
    key : str or int, optional
        Sibling identity

    Returns
    -------
    Element
        The new element

    Examples
    --------
        >>> create_element("p", {"className": "lead"}, "Hello ", create_element("b", None, "world"))
        Element(type='p', ...)

    """
    return Element(type=type, props=freeze_props(props), children=tuple(_flatten_children(children)), key=key)
