#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2vdom/utils/attributes.py
"""Attribute mapping from HTML attribute names to element properties.

Renaming uses the read-only ``ATTRIBUTE_TO_PROPERTY`` table; boolean
attributes become ``True``; names matched by a preserve rule keep their
original spelling. Everything else passes through unchanged so unknown and
future attributes (``data-*``, ``aria-*``, framework directives) survive.

"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Iterable, Sequence, Union

from html2vdom.constants import (
    ATTRIBUTE_TO_PROPERTY,
    BOOLEAN_PROPERTIES,
    BOOLEANISH_PROPERTIES,
    STYLE_PROP,
)
from html2vdom.utils.entities import decode_entities

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExactName:
    """Preserve rule matching one attribute name exactly."""

    name: str

    def matches(self, attribute: str) -> bool:
        return attribute == self.name


@dataclass(frozen=True)
class PatternName:
    """Preserve rule matching attribute names with a regular expression search."""

    pattern: re.Pattern[str]

    def matches(self, attribute: str) -> bool:
        return self.pattern.search(attribute) is not None


PreserveRule = Union[ExactName, PatternName]


def compile_preserve_rules(entries: Iterable[Union[str, re.Pattern[str], PreserveRule]]) -> tuple[PreserveRule, ...]:
    """Turn user-facing preserve entries into ``ExactName``/``PatternName`` rules.

    Parameters
    ----------
    entries : iterable of str, re.Pattern or PreserveRule
        Exact attribute names or compiled patterns

    Returns
    -------
    tuple of PreserveRule
        Rules in the order given

    Raises
    ------
    ValueError
        If an entry is neither a string nor a compiled pattern

    """
    rules: list[PreserveRule] = []
    for entry in entries:
        if isinstance(entry, (ExactName, PatternName)):
            rules.append(entry)
        elif isinstance(entry, str):
            rules.append(ExactName(entry))
        elif isinstance(entry, re.Pattern):
            rules.append(PatternName(entry))
        else:
            raise ValueError(f"preserve_attributes entries must be str or re.Pattern, got {type(entry).__name__}")
    return tuple(rules)


def is_preserved(name: str, rules: Sequence[PreserveRule]) -> bool:
    """Return True if any rule matches the attribute ``name``."""
    return any(rule.matches(name) for rule in rules)


def map_attribute_name(name: str) -> str:
    """Return the property name for an HTML attribute name."""
    return ATTRIBUTE_TO_PROPERTY.get(name.lower(), name)


def map_attributes(
    tag: str, attributes: Iterable[tuple[str, str]], preserve_rules: Sequence[PreserveRule] = ()
) -> dict[str, Any]:
    """Map serialized attributes of one element to a property dict.

    Values are entity-decoded, except ``style``, which is returned in its
    serialized form so the style parser decodes it exactly once.

    Parameters
    ----------
    tag : str
        Tag name of the element owning the attributes
    attributes : iterable of (str, str)
        Attribute names and serialized values in source order
    preserve_rules : sequence of PreserveRule, default = ()
        Rules for attributes that must keep their original names

    Returns
    -------
    dict[str, Any]
        Property names to decoded strings (or ``True`` for boolean attributes)

    """
    props: dict[str, Any] = {}
    for name, raw_value in attributes:
        if name.lower() == STYLE_PROP:
            props[STYLE_PROP] = raw_value
            continue

        if preserve_rules and is_preserved(name, preserve_rules):
            logger.debug("Preserving attribute %r on <%s>", name, tag)
            props[name] = decode_entities(raw_value)
            continue

        prop = map_attribute_name(name)
        value = decode_entities(raw_value)
        if prop in BOOLEAN_PROPERTIES or (prop in BOOLEANISH_PROPERTIES and value == ""):
            props[prop] = True
        else:
            props[prop] = value
    return props
