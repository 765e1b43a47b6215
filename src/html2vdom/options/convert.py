#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for converting HTML to an element tree.

The same ``ConvertOptions`` instance drives both parsing backends, which is
what lets them agree on their output.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Collection, Mapping, Union

from html2vdom.constants import (
    DEFAULT_DANGEROUSLY_SET_CHILDREN,
    DEFAULT_HTML_PARSER,
    DEFAULT_TRANSFORM_KEY,
    HtmlParser,
)
from html2vdom.options.base import CloneFrozenMixin
from html2vdom.utils.attributes import ExactName, PreserveRule, compile_preserve_rules

if TYPE_CHECKING:
    from html2vdom.transforms.dispatcher import TransformFn

_HTML_PARSER_CHOICES = ("html5lib", "html.parser", "lxml")


# src/html2vdom/options/convert.py
@dataclass(frozen=True)
class ConvertOptions(CloneFrozenMixin):
    """Configuration options for HTML to element tree conversion.

    Parameters
    ----------
    transform : Mapping[str, TransformFn | str], default empty
        Per-tag overrides. Keys are tag names, or ``"_"`` for the default
        override applied to every other tag and to text. A callable receives
        a ``TextNode`` or ``ElementNode`` and returns the replacement node
        (an ``Element``, a string, or ``None`` to drop it). A string value
        replaces the tag name and keeps props and children.
    preserve_attributes : sequence of str or re.Pattern, default ()
        Attribute names that bypass renaming. Strings match exactly;
        patterns match with ``re.search``. Stored as compiled
        ``ExactName``/``PatternName`` rules.
    dangerously_set_children : collection of str, default ("style",)
        Tags whose inner markup is passed through as raw
        ``dangerouslySetInnerHTML`` instead of being converted. Supplying a
        value replaces the default.
    html_parser : {"html5lib", "html.parser", "lxml"}, default "html5lib"
        BeautifulSoup tree builder used by the standalone backend. Only
        "html5lib" runs the same tree construction as the document backend.

    Examples
    --------
    Replace paragraphs and keep Angular directives:
        >>> options = ConvertOptions(
        ...     transform={"p": lambda node: create_element("section", node.props, *node.children)},
        ...     preserve_attributes=["ng-if", re.compile(r"^tv-")],
        ... )

    """

    transform: Mapping[str, Union[TransformFn, str]] = field(
        default_factory=dict,
        metadata={"help": "Per-tag transform overrides; '_' is the default override", "importance": "core"},
    )
    preserve_attributes: tuple[Union[str, re.Pattern[str], PreserveRule], ...] = field(
        default=(),
        metadata={"help": "Attribute names or patterns that keep their original names", "importance": "core"},
    )
    dangerously_set_children: Collection[str] = field(
        default=DEFAULT_DANGEROUSLY_SET_CHILDREN,
        metadata={"help": "Tags whose inner markup is passed through unconverted", "importance": "advanced"},
    )
    html_parser: HtmlParser = field(
        default=DEFAULT_HTML_PARSER,
        metadata={
            "help": (
                "BeautifulSoup parser for the standalone backend: 'html5lib' (matches the document backend), "
                "'html.parser' (built-in, may differ on malformed markup), 'lxml' (fast, requires C library)"
            ),
            "choices": list(_HTML_PARSER_CHOICES),
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Normalize collection fields and validate values.

        Raises
        ------
        ValueError
            If a transform entry, preserve entry or parser name is invalid.

        """
        if not isinstance(self.transform, Mapping):
            raise ValueError(f"transform must be a mapping, got {type(self.transform).__name__}")
        for key, value in self.transform.items():
            if not isinstance(key, str):
                raise ValueError(f"transform keys must be tag names or '{DEFAULT_TRANSFORM_KEY}', got {key!r}")
            if not (isinstance(value, str) or callable(value)):
                raise ValueError(f"transform['{key}'] must be callable or a tag name, got {type(value).__name__}")
        object.__setattr__(self, "transform", MappingProxyType(dict(self.transform)))

        if isinstance(self.preserve_attributes, (str, re.Pattern)):
            raise ValueError("preserve_attributes must be a sequence of names or patterns")
        object.__setattr__(self, "preserve_attributes", compile_preserve_rules(self.preserve_attributes))

        if isinstance(self.dangerously_set_children, str):
            raise ValueError("dangerously_set_children must be a collection of tag names")
        object.__setattr__(
            self, "dangerously_set_children", frozenset(tag.lower() for tag in self.dangerously_set_children)
        )

        if self.html_parser not in _HTML_PARSER_CHOICES:
            raise ValueError(f"html_parser must be one of {', '.join(_HTML_PARSER_CHOICES)}, got {self.html_parser!r}")

    @property
    def preserve_rules(self) -> tuple[PreserveRule, ...]:
        """Compiled preserve rules, in the order given."""
        return self.preserve_attributes  # type: ignore[return-value]

    def to_dict(self) -> dict[str, Any]:
        """Return a plain-dict view of the options, for logging and debugging."""
        return {
            "transform": sorted(self.transform),
            "preserve_attributes": [
                rule.name if isinstance(rule, ExactName) else rule.pattern.pattern for rule in self.preserve_rules
            ],
            "dangerously_set_children": sorted(self.dangerously_set_children),
            "html_parser": self.html_parser,
        }
