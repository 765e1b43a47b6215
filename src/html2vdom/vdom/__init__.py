#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Output element tree types."""

from html2vdom.vdom.elements import Element, ElementType, Key, Node, create_element, freeze_props

__all__ = ["Element", "ElementType", "Key", "Node", "create_element", "freeze_props"]
