#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Transform overrides applied to converted nodes."""

from html2vdom.transforms.dispatcher import (
    ElementNode,
    TextNode,
    TransformDispatcher,
    TransformEntry,
    TransformFn,
    TransformInput,
)

__all__ = [
    "ElementNode",
    "TextNode",
    "TransformDispatcher",
    "TransformEntry",
    "TransformFn",
    "TransformInput",
]
