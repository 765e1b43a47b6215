#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers for element trees."""

from html2vdom.renderers.markup import MarkupRenderer, hyphenate_style_name, render_style, render_to_static_markup

__all__ = ["MarkupRenderer", "hyphenate_style_name", "render_style", "render_to_static_markup"]
