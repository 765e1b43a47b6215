#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for rendering element trees to static markup."""

from __future__ import annotations

from dataclasses import dataclass, field

from html2vdom.options.base import CloneFrozenMixin


# src/html2vdom/options/markup.py
@dataclass(frozen=True)
class MarkupRendererOptions(CloneFrozenMixin):
    """Configuration options for ``MarkupRenderer``.

    Parameters
    ----------
    self_close_void_elements : bool, default True
        Write void elements as ``<img src="x"/>``. When False they are
        written as ``<img src="x">``.

    """

    self_close_void_elements: bool = field(
        default=True,
        metadata={"help": "Write void elements in self-closing form", "importance": "advanced"},
    )
