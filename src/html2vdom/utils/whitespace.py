#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2vdom/utils/whitespace.py
"""Whitespace policy for text nodes."""

from __future__ import annotations

from typing import Optional

from html2vdom.constants import TABLE_ELEMENTS

# Matches the HTML definition of ASCII whitespace (no NBSP)
_HTML_WHITESPACE = " \t\n\r\f"


def is_whitespace_only(text: str) -> bool:
    """Return True when ``text`` consists solely of HTML whitespace."""
    return not text.strip(_HTML_WHITESPACE)


def should_keep(text: str, parent_tag: Optional[str]) -> bool:
    """Decide whether a decoded text node survives conversion.

    Whitespace-only text directly inside table structure (``table``,
    ``tbody``, ``tr``...) is dropped, since those elements cannot hold text
    children. Everywhere else, including ``pre`` and the fragment root,
    text is kept verbatim.

    Parameters
    ----------
    text : str
        Decoded text content
    parent_tag : str or None
        Tag name of the parent element, or None at the fragment root

    Returns
    -------
    bool
        False if the node should be elided

    """
    if parent_tag is None or not is_whitespace_only(text):
        return True
    return parent_tag.lower() not in TABLE_ELEMENTS
