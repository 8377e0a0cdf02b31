"""
sandblast - extract the title and readable text of an HTML document.
Removes navigation, link lists, forms, media and other boilerplate.
"""

__version__ = "0.3.0"

from .errors import SandblastError, RootNotFound, FetchError
from .options import ExtractOptions
from .pipeline import ExtractResult, extract, extract_ex, extract_html, parse_html
from .element import debug_string
from .renderer import render

__all__ = [
    'SandblastError',
    'RootNotFound',
    'FetchError',
    'ExtractOptions',
    'ExtractResult',
    'extract',
    'extract_ex',
    'extract_html',
    'parse_html',
    'debug_string',
    'render'
]
