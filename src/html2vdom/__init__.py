"""html2vdom - Convert HTML strings into typed UI element trees.

html2vdom parses an HTML fragment and converts it into an immutable tree of
``Element`` nodes, the same shape a component framework's
``create_element`` builds: tag or component type, a props mapping with
framework-style property names, and children.

Two interchangeable backends share one conversion engine:

- **standalone** parses with BeautifulSoup (html5lib tree builder by
  default) and needs no document
- **document** builds a W3C DOM with html5lib and walks it

For the same input and options both produce the same tree.

Key Features
------------
- Attribute renaming (``class`` -> ``className``, ``for`` -> ``htmlFor``,
  SVG presentation attributes to camelCase) with boolean attributes as ``True``
- Inline ``style`` parsed into a camelCase mapping, tolerating bad declarations
- Whitespace elision inside table structure
- Per-tag and default transforms
- Raw passthrough of ``<style>`` (or any configured tag) contents
- Static markup rendering for server-side output and comparisons

Examples
--------
    >>> from html2vdom import to_element, render_to_static_markup
    >>> tree = to_element('<iframe allowfullscreen src="x"></iframe>')
    >>> render_to_static_markup(tree)
    '<iframe allowfullscreen="" src="x"></iframe>'

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from html2vdom.api import available_backends, to_element
from html2vdom.exceptions import (
    DependencyError,
    Html2VdomError,
    InputTypeError,
    InvalidOptionsError,
    ParsingError,
    ValidationError,
)
from html2vdom.options import ConvertOptions, MarkupRendererOptions
from html2vdom.renderers import MarkupRenderer, render_to_static_markup
from html2vdom.transforms import ElementNode, TextNode, TransformDispatcher
from html2vdom.vdom import Element, create_element

__version__ = "0.1.0"

__all__ = [
    "ConvertOptions",
    "DependencyError",
    "Element",
    "ElementNode",
    "Html2VdomError",
    "InputTypeError",
    "InvalidOptionsError",
    "MarkupRenderer",
    "MarkupRendererOptions",
    "ParsingError",
    "TextNode",
    "TransformDispatcher",
    "ValidationError",
    "__version__",
    "available_backends",
    "create_element",
    "render_to_static_markup",
    "to_element",
]
