"""The exported API functions for HTML to element conversion."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/html2vdom/api.py
import logging
from types import MappingProxyType
from typing import Any, Mapping, Optional

from html2vdom.constants import DEFAULT_BACKEND, BackendName
from html2vdom.converter import ConversionResult
from html2vdom.exceptions import ValidationError
from html2vdom.options import ConvertOptions
from html2vdom.parsers import BaseAdapter, DocumentAdapter, StandaloneAdapter, merge_options, validate_html_input
from html2vdom.renderers import render_to_static_markup

logger = logging.getLogger(__name__)

# Backend name -> adapter class
BACKENDS: Mapping[str, type[BaseAdapter]] = MappingProxyType(
    {
        StandaloneAdapter.backend_name: StandaloneAdapter,
        DocumentAdapter.backend_name: DocumentAdapter,
    }
)


def available_backends() -> list[str]:
    """Return the names of the registered parsing backends."""
    return list(BACKENDS)


def get_adapter_class(backend: str) -> type[BaseAdapter]:
    """Look up the adapter class registered for ``backend``.

    Raises
    ------
    ValidationError
        If no backend with that name is registered

    """
    try:
        return BACKENDS[backend]
    except (KeyError, TypeError) as e:
        raise ValidationError(
            f"Unknown backend {backend!r}; expected one of {', '.join(BACKENDS)}",
            parameter_name="backend",
            parameter_value=backend,
        ) from e


def to_element(
    html: Any,
    options: Optional[ConvertOptions] = None,
    *,
    backend: BackendName = DEFAULT_BACKEND,
    **kwargs: Any,
) -> ConversionResult:
    """Convert an HTML string into an element tree.

    Parameters
    ----------
    html : str
        HTML fragment. Leading and trailing whitespace is ignored.
    options : ConvertOptions, optional
        Conversion options. Keyword arguments override individual fields.
    backend : {"standalone", "document"}, default "standalone"
        Parsing backend. Both produce the same tree for the same input.
    **kwargs : Any
        ``ConvertOptions`` field overrides, e.g. ``transform`` or
        ``preserve_attributes``

    Returns
    -------
    Element, str or list
        The single top-level node, or a list when the fragment has zero or
        several top-level nodes

    Raises
    ------
    InputTypeError
        If ``html`` is not a string
    ValidationError
        If ``backend`` is unknown
    DependencyError
        If the backend's parser is not installed

    Examples
    --------
    Basic conversion:
        >>> to_element('<p class="lead">Hello</p>')
        Element(type='p', props=mappingproxy({'className': 'lead'}), children=('Hello',), key=0)

    With a transform and the document backend:
        >>> to_element("<p>Hi</p>", backend="document", transform={"p": "section"})
        Element(type='section', props=mappingproxy({}), children=('Hi',), key=0)

    """
    html = validate_html_input(html)
    adapter_class = get_adapter_class(backend)
    options = merge_options(options, **kwargs)
    logger.debug("Converting HTML with the %s backend", backend)
    return adapter_class(options).to_element(html)


__all__ = ["BACKENDS", "available_backends", "get_adapter_class", "render_to_static_markup", "to_element"]
