#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2vdom/utils/styles.py
"""Inline CSS declaration parsing.

``parse_style`` turns the value of a ``style`` attribute into an ordered
dict of camelCase property names to values. Parsing is forgiving: a
declaration that cannot be understood is skipped on its own and never
prevents its siblings from being recognized.

"""

from __future__ import annotations

import logging
import re

from html2vdom.utils.entities import decode_entities

logger = logging.getLogger(__name__)

_PROPERTY_PATTERN = re.compile(r"^(?:--[A-Za-z0-9_-]+|-?[A-Za-z_][A-Za-z0-9_-]*)$")
_HYPHEN_PATTERN = re.compile(r"-([a-z0-9])")


def split_top_level(text: str, delimiter: str, maxsplit: int = -1) -> list[str]:
    """Split ``text`` on ``delimiter`` outside parentheses and quoted strings.

    Parameters
    ----------
    text : str
        Text to split
    delimiter : str
        Single separator character
    maxsplit : int, default -1
        Maximum number of splits; negative means no limit

    Returns
    -------
    list[str]
        The pieces, including empty ones

    Examples
    --------
        >>> split_top_level("background:url(http://x/y.png)", ":", 1)
        ['background', 'url(http://x/y.png)']

    """
    parts: list[str] = []
    depth = 0
    quote: str | None = None
    start = 0
    index = 0
    while index < len(text):
        char = text[index]
        if quote is not None:
            if char == "\\":
                index += 1
            elif char == quote:
                quote = None
        elif char in "\"'":
            quote = char
        elif char == "(":
            depth += 1
        elif char == ")":
            depth = max(depth - 1, 0)
        elif char == delimiter and depth == 0:
            parts.append(text[start:index])
            start = index + 1
            if 0 <= maxsplit == len(parts):
                break
        index += 1
    parts.append(text[start:])
    return parts


def normalize_property_name(name: str) -> str:
    """Convert a CSS property name to its style-object key.

    Standard properties become camelCase (``font-size`` -> ``fontSize``).
    Vendor-prefixed ones keep a capitalized prefix segment
    (``-webkit-text-size-adjust`` -> ``WebkitTextSizeAdjust``,
    ``-ms-text-size-adjust`` -> ``MsTextSizeAdjust``). Custom properties
    (``--accent``) are returned unchanged.
    """
    if name.startswith("--"):
        return name
    return _HYPHEN_PATTERN.sub(lambda match: match.group(1).upper(), name.lower())


def parse_style(raw: str) -> dict[str, str]:
    """Parse a serialized ``style`` attribute value.

    Parameters
    ----------
    raw : str
        The attribute value as it appears in markup; entities such as
        ``&quot;`` are decoded here before splitting

    Returns
    -------
    dict[str, str]
        Normalized property names to values, in declaration order. Empty
        if no declaration is valid.

    Examples
    --------
        >>> parse_style("margin: 0 auto; padding: 0 10px")
        {'margin': '0 auto', 'padding': '0 10px'}
        >>> parse_style("TITLE_2; color:'red'")
        {'color': "'red'"}

    """
    style: dict[str, str] = {}
    for declaration in split_top_level(decode_entities(raw), ";"):
        if not declaration.strip():
            continue

        pieces = split_top_level(declaration, ":", maxsplit=1)
        if len(pieces) != 2:
            logger.debug("Skipping style declaration without a colon: %r", declaration)
            continue

        name, value = pieces[0].strip(), pieces[1].strip()
        if not _PROPERTY_PATTERN.match(name) or not value:
            logger.debug("Skipping invalid style declaration: %r", declaration)
            continue

        style[normalize_property_name(name)] = value
    return style
