#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for html2vdom.

Options are frozen dataclasses; use ``create_updated`` to derive a modified
copy.
"""

from html2vdom.options.base import CloneFrozenMixin
from html2vdom.options.convert import ConvertOptions
from html2vdom.options.markup import MarkupRendererOptions

__all__ = ["CloneFrozenMixin", "ConvertOptions", "MarkupRendererOptions"]
