"""Tree nodes produced and consumed by the extraction stages.

Three node variants exist:

* ``Leaf``      - a run of text, with its link ratio and link targets
* ``Block``     - an element kept under its own tag, with children
* ``Transient`` - a transparent wrapper whose children are spliced into
  the parent sequence, never rendered as a node of its own

After cleaning, a child sequence may also hold ``GAP`` entries standing for
deleted blocks; they only influence paragraph breaks when rendering.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Union

from .text import LINK_END, visible_length

# Synthetic tags
TEXT = "~text"
TEXTDIV = "~textdiv"
TRANSIENT = "~transient"
HEADER = "~header"
LINKLIST = "~linklist"
LINKBLOB = "~linkblob"
TEXTBLOCK = "~textblock"

TEXT_TAGS = (TEXT, TEXTDIV)

# originalTag stamped on text coming out of h1/h2/h3
HEADING = "h"

LINK_LIST_MIN_CHILDREN = 5
LINK_LIST_MIN_LINKS = 2
LINK_LIST_SHARE = 0.75
LINK_RATIO = 0.70
OK_TEXT_LENGTH = 50

INDENT = "   "


class Gap:
    """Placeholder for a block deleted by the cleaner."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "GAP"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


GAP = Gap()


@dataclass
class Leaf:
    tag: str = TEXT
    content: str = ""
    original_tag: str = ""
    link_part: float = 0.0
    hrefs: List[str] = field(default_factory=list)

    @property
    def length(self) -> int:
        return visible_length(self.content)

    def clone(self) -> "Leaf":
        return Leaf(self.tag, self.content, self.original_tag, self.link_part, list(self.hrefs))


@dataclass
class Block:
    tag: str
    children: List["Entry"] = field(default_factory=list)

    def clone(self) -> "Block":
        return Block(self.tag, [child.clone() if child is not GAP else GAP for child in self.children])


@dataclass
class Transient:
    children: List["Entry"] = field(default_factory=list)

    tag = TRANSIENT

    def clone(self) -> "Transient":
        return Transient([child.clone() if child is not GAP else GAP for child in self.children])


Node = Union[Leaf, Block, Transient]
Entry = Union[Leaf, Block, Transient, Gap]


def clone(node):
    """Deep copy of a tree; the copy shares nothing with the original."""
    if node is None or node is GAP:
        return node
    return node.clone()


def merge_text(children: List[Entry], content: str, link_part: float, hrefs: List[str]) -> bool:
    """Fuse a text run into the trailing ~text leaf of children.

    Returns False when children does not end with a ~text leaf.
    """
    if not children:
        return False
    last = children[-1]
    if not isinstance(last, Leaf) or last.tag != TEXT:
        return False
    weighted = visible_length(content) * link_part + last.length * last.link_part
    last.content += " " + content
    last.link_part = _ratio(weighted, last.length)
    last.hrefs.extend(hrefs)
    return True


def _ratio(weighted: float, length: int) -> float:
    if length <= 0:
        return 0.0
    return min(1.0, max(0.0, weighted / length))


def merge_leaves(tag: str, leaves: List[Leaf]) -> Leaf:
    """Concatenate leaves into one, averaging link_part by length."""
    content = "".join(leaf.content for leaf in leaves)
    weighted = sum(leaf.length * leaf.link_part for leaf in leaves)
    hrefs = [href for leaf in leaves for href in leaf.hrefs]
    return Leaf(tag, content, link_part=_ratio(weighted, visible_length(content)), hrefs=hrefs)


def is_text_leaf(node) -> bool:
    return isinstance(node, Leaf) and node.tag in TEXT_TAGS


def is_header(node) -> bool:
    return is_text_leaf(node) and node.original_tag == HEADING


def is_link_list(node) -> bool:
    """A container of at least five text leaves, mostly links (or a <select>)."""
    if isinstance(node, Leaf):
        return False
    count = len(node.children)
    if count < LINK_LIST_MIN_CHILDREN:
        return False
    if node.tag == "select":
        return True

    nlinks = 0
    for child in node.children:
        if not is_text_leaf(child):
            return False
        if child.link_part > LINK_RATIO:
            nlinks += 1
    if nlinks < LINK_LIST_MIN_LINKS:
        return False
    return nlinks >= count - 2 or nlinks > int(count * LINK_LIST_SHARE)


def is_link_blob(node) -> bool:
    return is_text_leaf(node) and node.link_part > LINK_RATIO


def ok_text(entry) -> bool:
    """A plain text block long enough to count as content."""
    return isinstance(entry, Leaf) and entry.tag == TEXTBLOCK and entry.length > OK_TEXT_LENGTH


def debug_string(node) -> str:
    """Verbose dump of a tree, one node per line, for debugging."""
    out: List[str] = []
    if node is None:
        return "<nil>\n"
    _debug_lines(node, 0, out)
    return "".join(out)


def _debug_lines(node: Node, depth: int, out: List[str]) -> None:
    header = f"{INDENT * depth}<{node.tag}"
    if isinstance(node, Leaf):
        if node.original_tag:
            header += f":{node.original_tag}"
        if node.link_part > 0.001:
            header += f":{node.link_part:g}"
        content = node.content.replace(LINK_END, "[/a]")
        line = f"{header}>[{content}({node.length})]"
        if node.hrefs:
            line += " {" + " ".join(node.hrefs) + "}"
        out.append(line + "\n")
        return

    out.append(f"{header}>[{len(node.children)}]\n")
    sep = False
    for child in node.children:
        if child is GAP:
            if not sep:
                out.append("\n")
                sep = True
            out.append(f"{INDENT * (depth + 1)}<gap>\n")
        else:
            _debug_lines(child, depth + 1, out)
            sep = False
