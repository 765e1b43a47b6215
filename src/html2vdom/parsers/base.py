#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2vdom/parsers/base.py
"""Base class for the parsing backends.

Each backend adapter turns an HTML string into ``ParseNode``s with its own
parser and then hands them to the shared ``TreeConverter``. Input
validation, option handling and timing live here so every backend behaves
identically up to the point where its parser takes over.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Optional

from html2vdom.ast import ParseNode, ParseText
from html2vdom.converter import ConversionResult, TreeConverter
from html2vdom.exceptions import InputTypeError, InvalidOptionsError
from html2vdom.options import ConvertOptions
from html2vdom.utils.decorators import debug_timer

logger = logging.getLogger(__name__)


def validate_html_input(html: Any) -> str:
    """Return ``html`` if it is a string, otherwise raise ``InputTypeError``.

    Raises
    ------
    InputTypeError
        For ``None``, lists, dicts, numbers, booleans and any other non-string

    """
    if not isinstance(html, str):
        raise InputTypeError(html)
    return html


def merge_options(options: Optional[ConvertOptions], **kwargs: Any) -> ConvertOptions:
    """Combine an options object with keyword overrides.

    Parameters
    ----------
    options : ConvertOptions or None
        Base options; defaults are used when None
    **kwargs : Any
        Field overrides applied with ``create_updated``

    Returns
    -------
    ConvertOptions
        The merged options

    """
    if options is not None and not isinstance(options, ConvertOptions):
        raise InvalidOptionsError(
            converter_name="to_element", expected_type=ConvertOptions, received_type=type(options)
        )
    options = options or ConvertOptions()
    return options.create_updated(**kwargs) if kwargs else options


def merge_adjacent_text(nodes: list[ParseNode]) -> list[ParseNode]:
    """Join consecutive text nodes, as a DOM would hold them after normalization."""
    merged: list[ParseNode] = []
    for node in nodes:
        if isinstance(node, ParseText) and merged and isinstance(merged[-1], ParseText):
            merged[-1] = ParseText(merged[-1].raw + node.raw)
        else:
            merged.append(node)
    return merged


class BaseAdapter(ABC):
    """Abstract base class for parsing backends.

    Parameters
    ----------
    options : ConvertOptions or None, default = None
        Conversion options shared with the tree converter

    """

    backend_name: ClassVar[str] = "base"

    def __init__(self, options: ConvertOptions | None = None):
        """Initialize the adapter with validated options."""
        self._validate_options_type(options, ConvertOptions, self.backend_name)
        self.options: ConvertOptions = options or ConvertOptions()
        self._converter = TreeConverter(self.options)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Initialized %s adapter with options %s", self.backend_name, self.options.to_dict())

    @staticmethod
    def _validate_options_type(options: Any, expected_type: type, adapter_name: str) -> None:
        """Validate that options are of the correct type for this adapter.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=adapter_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    def to_element(self, html: Any) -> ConversionResult:
        """Convert an HTML string to an element, or a list of them.

        Parameters
        ----------
        html : str
            HTML fragment; leading and trailing whitespace is ignored

        Returns
        -------
        Element, str or list
            A single node when the fragment has exactly one top-level node
            after conversion, otherwise a list

        Raises
        ------
        InputTypeError
            If ``html`` is not a string (checked before parsing)
        DependencyError
            If the backend's parser is not installed
        ParsingError
            If the backend's parser fails

        """
        html = validate_html_input(html)
        with debug_timer(logger, f"Conversion ({self.backend_name})"):
            nodes = self.build_parse_tree(html.strip())
            return self._converter.convert(nodes)

    @abstractmethod
    def build_parse_tree(self, html: str) -> list[ParseNode]:
        """Parse ``html`` and project the backend tree onto ``ParseNode``s.

        Implementations must store text and attribute values in serialized
        form (see ``html2vdom.ast.serialization``).
        """
        raise NotImplementedError
