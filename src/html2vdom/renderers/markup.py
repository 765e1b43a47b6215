#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2vdom/renderers/markup.py
"""Static HTML rendering of element trees.

``MarkupRenderer`` turns an ``Element`` tree back into an HTML string the
way a UI framework's server-side string renderer would: property names are
mapped back to attribute names, ``True`` becomes an empty attribute, style
objects become declaration lists and ``dangerouslySetInnerHTML`` is written
unescaped. Keys are never rendered.

"""

from __future__ import annotations

import html
import logging
import re
from typing import Any, Mapping, Optional

from html2vdom.constants import (
    DANGEROUS_INNER_HTML_KEY,
    DANGEROUS_INNER_HTML_PROP,
    PROPERTY_TO_ATTRIBUTE,
    STYLE_PROP,
    VOID_ELEMENTS,
)
from html2vdom.exceptions import InvalidOptionsError
from html2vdom.options import MarkupRendererOptions
from html2vdom.vdom import Element

logger = logging.getLogger(__name__)

_UPPERCASE_PATTERN = re.compile(r"([A-Z])")


def hyphenate_style_name(name: str) -> str:
    """Convert a style-object key back to a CSS property name.

    Examples
    --------
        >>> hyphenate_style_name("fontSize")
        'font-size'
        >>> hyphenate_style_name("WebkitTextSizeAdjust")
        '-webkit-text-size-adjust'

    """
    if name.startswith("--"):
        return name
    return _UPPERCASE_PATTERN.sub(r"-\1", name).lower()


def render_style(style: Mapping[str, Any]) -> str:
    """Render a style mapping as ``prop:value;prop:value``."""
    return ";".join(
        f"{hyphenate_style_name(name)}:{value}" for name, value in style.items() if value is not None and value != ""
    )


class MarkupRenderer:
    """Render ``Element`` trees to static HTML.

    Parameters
    ----------
    options : MarkupRendererOptions or None, default = None
        Rendering options

    """

    def __init__(self, options: MarkupRendererOptions | None = None):
        """Initialize the renderer with validated options."""
        if options is not None and not isinstance(options, MarkupRendererOptions):
            raise InvalidOptionsError(
                converter_name="markup", expected_type=MarkupRendererOptions, received_type=type(options)
            )
        self.options: MarkupRendererOptions = options or MarkupRendererOptions()

    def render_to_string(self, node: Any) -> str:
        """Render a node, a string, or a (nested) list of them.

        Parameters
        ----------
        node : Element, str, list or None
            Conversion result to render

        Returns
        -------
        str
            HTML markup

        """
        parts: list[str] = []
        self._render(node, parts)
        return "".join(parts)

    def _render(self, node: Any, parts: list[str]) -> None:
        if node is None or isinstance(node, bool):
            return
        if isinstance(node, (list, tuple)):
            for child in node:
                self._render(child, parts)
            return
        if isinstance(node, Element):
            if isinstance(node.type, str):
                self._render_tag(node, parts)
            else:
                self._render_component(node, parts)
            return
        parts.append(html.escape(str(node), quote=False))

    def _render_component(self, node: Element, parts: list[str]) -> None:
        logger.debug("Rendering component %s", node.type_name)
        props = dict(node.props)
        props["children"] = list(node.children)
        self._render(node.type(props), parts)

    def _render_tag(self, node: Element, parts: list[str]) -> None:
        tag = str(node.type)
        parts.append(f"<{tag}")
        inner_html: Optional[str] = None
        for name, value in node.props.items():
            if name == DANGEROUS_INNER_HTML_PROP:
                if isinstance(value, Mapping):
                    inner_html = value.get(DANGEROUS_INNER_HTML_KEY)
                continue
            attribute = self._render_attribute(name, value)
            if attribute:
                parts.append(attribute)

        if tag.lower() in VOID_ELEMENTS and inner_html is None and not node.children:
            parts.append("/>" if self.options.self_close_void_elements else ">")
            return

        parts.append(">")
        if inner_html is not None:
            parts.append(str(inner_html))
        else:
            self._render(node.children, parts)
        parts.append(f"</{tag}>")

    def _render_attribute(self, name: str, value: Any) -> str:
        if value is None or value is False or callable(value):
            return ""
        if name == STYLE_PROP and isinstance(value, Mapping):
            value = render_style(value)
            if not value:
                return ""
        attribute = PROPERTY_TO_ATTRIBUTE.get(name, name)
        if value is True:
            return f' {attribute}=""'
        return f' {attribute}="{html.escape(str(value))}"'


def render_to_static_markup(node: Any, options: MarkupRendererOptions | None = None) -> str:
    """Render a conversion result to an HTML string.

    Examples
    --------
        >>> render_to_static_markup(create_element("iframe", {"allowFullScreen": True}))
        '<iframe allowfullscreen=""></iframe>'

    """
    return MarkupRenderer(options).render_to_string(node)
