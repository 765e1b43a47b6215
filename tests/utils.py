"""Test utilities shared across the html2vdom test suite."""

from html2vdom import render_to_static_markup
from html2vdom.parsers.document import to_element as document_to_element
from html2vdom.parsers.standalone import to_element as standalone_to_element


def convert_both(html, **kwargs):
    """Convert ``html`` with both backends and return ``(standalone, document)``."""
    return standalone_to_element(html, **kwargs), document_to_element(html, **kwargs)


def assert_backends_agree(html, **kwargs):
    """Assert both backends render ``html`` to identical markup and return it."""
    standalone, document = convert_both(html, **kwargs)
    standalone_markup = render_to_static_markup(standalone)
    document_markup = render_to_static_markup(document)
    assert standalone_markup == document_markup, f"Backends disagree for {html!r}"
    return standalone_markup
