"""Third stage: drop low-value blocks from the flattened sequence."""
from __future__ import annotations
import logging
from typing import Optional

from .element import GAP, HEADER, LINKBLOB, LINKLIST, TEXTBLOCK, Leaf, Node, ok_text

logger = logging.getLogger(__name__)

# Text blocks this short (or without a space) are fragments
MIN_TEXTBLOCK_LENGTH = 15


def clean(node: Optional[Node]) -> Optional[Node]:
    """Replace boilerplate children of node with GAP, in place.

    Only the immediate children are examined; the flattener leaves no
    deeper nesting worth cleaning.
    """
    if node is None or isinstance(node, Leaf):
        return node

    children = node.children

    for i, child in enumerate(children):
        if child is GAP:
            continue
        if child.tag in (LINKBLOB, LINKLIST):
            children[i] = GAP
        elif child.tag == TEXTBLOCK:
            if child.length <= MIN_TEXTBLOCK_LENGTH or " " not in child.content:
                children[i] = GAP

    for i, child in enumerate(children):
        if child is GAP:
            continue
        following = children[i + 1] if i + 1 < len(children) else GAP
        preceding = children[i - 1] if i > 0 else GAP

        if child.tag == HEADER:
            if not ok_text(following):
                children[i] = GAP
        elif not ok_text(child):
            if not ok_text(following) and not ok_text(preceding):
                children[i] = GAP

    removed = sum(1 for child in children if child is GAP)
    logger.debug(f"Cleaner kept {len(children) - removed} of {len(children)} blocks")
    return node
