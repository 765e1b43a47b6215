#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2vdom/utils/entities.py
"""HTML character reference decoding."""

from __future__ import annotations

import html


def decode_entities(value: str) -> str:
    """Decode HTML5 named and numeric character references in ``value``.

    Bare ampersands and unknown or malformed references are left as they
    are, so decoding never raises and decoding already-plain text is a
    no-op.

    Parameters
    ----------
    value : str
        Serialized text or attribute value

    Returns
    -------
    str
        The decoded string

    Examples
    --------
        >>> decode_entities("&amp; and &")
        '& and &'
        >>> decode_entities("&bogus; &#x41;")
        '&bogus; A'

    """
    if "&" not in value:
        return value
    return html.unescape(value)
