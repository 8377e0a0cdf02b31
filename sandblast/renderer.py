"""Serialize a tree to plain text."""
from __future__ import annotations
import logging
from typing import List, Optional

from .element import GAP, Leaf, Node
from .options import ExtractOptions
from .text import LINK_END, strip_markers

logger = logging.getLogger(__name__)


class LinkContext:
    """Pairs link-end markers with hrefs in document order while rendering."""

    def __init__(self, keep_links: bool):
        self.keep_links = keep_links
        self.markers = 0
        self.hrefs: List[str] = []

    def add_leaf(self, leaf: Leaf) -> str:
        text = leaf.content.strip()
        self.hrefs.extend(leaf.hrefs)
        if LINK_END not in text:
            return text
        if not self.keep_links:
            self.markers += text.count(LINK_END)
            return strip_markers(text)

        out = []
        for ch in text:
            if ch == LINK_END:
                self.markers += 1
                out.append(f"[{self.markers}]")
            else:
                out.append(ch)
        return "".join(out)

    def footnotes(self) -> str:
        return "\n".join(f"[{i}] {href}" for i, href in enumerate(self.hrefs, 1))

    def mismatch(self) -> Optional[str]:
        if self.markers == len(self.hrefs):
            return None
        return f"[sandblast: link marker mismatch: {self.markers} markers, {len(self.hrefs)} hrefs]"


def render(node: Optional[Node], options: Optional[ExtractOptions] = None) -> str:
    """Render a tree as paragraphs separated by newlines.

    A run of deleted blocks between two kept ones becomes a blank line.
    """
    if node is None:
        return ""
    options = options or ExtractOptions()
    links = LinkContext(options.keep_links)
    parts: List[str] = []
    _render(node, links, parts)

    sections = ["".join(parts).strip()]
    if options.keep_links and links.hrefs:
        sections.append("\n" + links.footnotes())
    problem = links.mismatch()
    if problem:
        logger.warning(problem)
        sections.append(problem)
    return "\n".join(section for section in sections if section)


def _render(node: Node, links: LinkContext, parts: List[str]) -> None:
    if isinstance(node, Leaf):
        parts.append(links.add_leaf(node))
        parts.append("\n")
        return

    parts.append("\n")
    sep = True
    for child in node.children:
        if child is GAP:
            if not sep:
                parts.append("\n")
                sep = True
        else:
            _render(child, links, parts)
            sep = False
    parts.append("\n")
