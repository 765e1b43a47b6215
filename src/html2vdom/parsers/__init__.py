#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Parsing backends.

Both backends project their parser's tree onto ``ParseNode``s and share one
``TreeConverter``, so for the same input and options they produce the same
element tree.

- ``StandaloneAdapter``: BeautifulSoup, no live document
- ``DocumentAdapter``: html5lib-built W3C DOM
"""

from html2vdom.parsers.base import BaseAdapter, merge_options, validate_html_input
from html2vdom.parsers.document import DocumentAdapter
from html2vdom.parsers.standalone import StandaloneAdapter

__all__ = [
    "BaseAdapter",
    "DocumentAdapter",
    "StandaloneAdapter",
    "merge_options",
    "validate_html_input",
]
