#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Attribute, style, entity and whitespace helpers used by the converter."""

from html2vdom.utils.attributes import (
    ExactName,
    PatternName,
    PreserveRule,
    compile_preserve_rules,
    map_attribute_name,
    map_attributes,
)
from html2vdom.utils.entities import decode_entities
from html2vdom.utils.styles import normalize_property_name, parse_style
from html2vdom.utils.whitespace import is_whitespace_only, should_keep

__all__ = [
    "ExactName",
    "PatternName",
    "PreserveRule",
    "compile_preserve_rules",
    "decode_entities",
    "is_whitespace_only",
    "map_attribute_name",
    "map_attributes",
    "normalize_property_name",
    "parse_style",
    "should_keep",
]
