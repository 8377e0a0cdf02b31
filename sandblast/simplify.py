"""First stage: turn a parsed document into a reduced tree of Leaf/Block nodes."""
from __future__ import annotations
import html
import logging
from typing import List, Optional

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag

from .element import (
    HEADING, TEXT, TEXTDIV, Block, Entry, Leaf, Node, Transient,
    is_text_leaf, merge_leaves, merge_text,
)
from .taxonomy import NodeKind, classify
from .text import LINK_END, normalize_text

logger = logging.getLogger(__name__)

# Deeper subtrees are dropped
MAX_PROCESSING_DEPTH = 100


def is_text_node(node) -> bool:
    # Comments, doctypes, CDATA and friends are all PreformattedString
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def get_href(node: Tag) -> str:
    for key, value in node.attrs.items():
        if key.lower() == "href":
            if isinstance(value, (list, tuple)):
                return " ".join(value)
            return value or ""
    return ""


def push_text(children: List[Entry], raw: str) -> None:
    """Normalize a raw text run and add it to children."""
    text = normalize_text(html.unescape(raw))
    if not text:
        return
    if not merge_text(children, text, 0.0, []):
        children.append(Leaf(TEXT, text))


def push_element(children: List[Entry], child: Node) -> None:
    """Add a simplified child, splicing transient wrappers and fusing text."""
    entries = child.children if isinstance(child, Transient) else [child]
    for entry in entries:
        if isinstance(entry, Leaf) and entry.tag == TEXT:
            if merge_text(children, entry.content, entry.link_part, entry.hrefs):
                continue
        children.append(entry)


def simplify(node, depth: int = 0) -> Optional[Node]:
    """Simplify a bs4 node. Returns None when nothing of it survives."""
    if depth > MAX_PROCESSING_DEPTH:
        logger.debug(f"Depth limit {MAX_PROCESSING_DEPTH} reached, dropping subtree")
        return None

    if isinstance(node, BeautifulSoup):
        return None
    if isinstance(node, NavigableString):
        if not is_text_node(node):
            return None
        text = normalize_text(html.unescape(str(node)))
        return Leaf(TEXT, text) if text else None
    if not isinstance(node, Tag):
        return None

    name = node.name.lower()
    kind = classify(name)
    if kind is NodeKind.SUPPRESSED:
        return None

    children: List[Entry] = []
    for child_node in node.children:
        if is_text_node(child_node):
            push_text(children, str(child_node))
        else:
            child = simplify(child_node, depth + 1)
            if child is not None:
                push_element(children, child)

    if not children:
        return None

    if kind in (NodeKind.CONTAINER, NodeKind.KOT_CONTAINER):
        if len(children) == 1:
            only = children[0]
            if isinstance(only, Leaf) and only.tag == TEXT:
                if kind is NodeKind.KOT_CONTAINER:
                    only.original_tag = HEADING
                only.tag = TEXTDIV
            return only

    elif kind is NodeKind.FORMATTING:
        if len(children) == 1:
            return children[0]

    elif kind is NodeKind.INLINE:
        if len(children) == 1:
            only = children[0]
            if name == "a" and is_text_leaf(only):
                only.link_part = 1.0
                href = get_href(node)
                if href:
                    only.content += LINK_END
                    only.hrefs.append(href)
            return only

    elif kind is NodeKind.TO_DESTRUCTURE:
        if name == "tr" and all(isinstance(c, Leaf) and c.tag == TEXTDIV for c in children):
            return merge_leaves(TEXTDIV, children)
        return Transient(children)

    return Block(name, children)
