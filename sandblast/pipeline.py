"""Pipeline entry points: find the document root and title, run the stages."""
from __future__ import annotations
import itertools
import logging
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from bs4 import BeautifulSoup
from bs4.element import Tag

from .clean import clean
from .config import get_config
from .element import Node, clone
from .errors import RootNotFound
from .flatten import flatten
from .options import ExtractOptions
from .renderer import render
from .simplify import is_text_node, simplify

logger = logging.getLogger(__name__)


@dataclass
class ExtractResult:
    """Extracted title and text, plus the trees of each stage for debugging."""
    title: str
    text: str
    simplified: Optional[Node]
    flattened: Optional[Node]
    cleaned: Optional[Node]


def _is_element(node, name: str) -> bool:
    return isinstance(node, Tag) and not isinstance(node, BeautifulSoup) and node.name.lower() == name


def find_root(document) -> Optional[Tag]:
    """First <html> element in document order, or None."""
    if document is None:
        return None
    nodes = itertools.chain([document], document.descendants) if isinstance(document, Tag) else [document]
    for node in nodes:
        if _is_element(node, "html"):
            return node
    return None


def find_child(node: Optional[Tag], name: str) -> Optional[Tag]:
    if node is None:
        return None
    name = name.lower()
    for child in node.children:
        if _is_element(child, name):
            return child
    return None


def get_title(root: Tag) -> str:
    """Text of <html><head><title>, with outer whitespace trimmed."""
    title = find_child(find_child(root, "head"), "title")
    if title is None:
        return ""
    return "".join(str(child) for child in title.children if is_text_node(child)).strip()


def run_stages(root: Tag, destructive: bool = False) -> Tuple[Optional[Node], Optional[Node], Optional[Node]]:
    """Simplify, flatten and clean; returns the tree after each stage."""
    simplified = simplify(root)
    flattened = flatten(simplified if destructive else clone(simplified))
    cleaned = clean(flattened if destructive else clone(flattened))
    return simplified, flattened, cleaned


def extract_ex(document, options: Optional[ExtractOptions] = None) -> ExtractResult:
    """Extract title and body text, keeping the intermediate trees.

    Raises RootNotFound when the document holds no <html> element.
    """
    options = options or ExtractOptions()
    root = find_root(document)
    if root is None:
        raise RootNotFound()

    title = get_title(root)
    simplified, flattened, cleaned = run_stages(root, options.destructive)
    text = render(cleaned, options)
    logger.debug(f"Extracted {len(text)} characters, title {title!r}")
    return ExtractResult(title, text, simplified, flattened, cleaned)


def extract(document, options: Optional[ExtractOptions] = None) -> Tuple[str, str]:
    """Extract (title, text) from a parsed document."""
    options = replace(options or ExtractOptions(), destructive=True)
    result = extract_ex(document, options)
    return result.title, result.text


def parse_html(markup, parser: Optional[str] = None) -> BeautifulSoup:
    """Parse markup with BeautifulSoup using the configured parser.

    The default html5lib builder always creates <html>, <head> and <body>,
    so pages that omit the optional tags still have a root.
    """
    parser = parser or get_config().get('extract.parser', 'html5lib')
    return BeautifulSoup(markup, parser)


def extract_html(markup, options: Optional[ExtractOptions] = None, parser: Optional[str] = None) -> Tuple[str, str]:
    """Parse markup and extract (title, text) in one call."""
    return extract(parse_html(markup, parser), options)
