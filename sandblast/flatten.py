"""Second stage: reclassify the simplified tree into a flat run of blocks."""
from __future__ import annotations
import logging
from typing import List, Optional

from .element import (
    GAP, HEADER, LINKBLOB, LINKLIST, TEXTBLOCK, Block, Entry, Leaf, Node, Transient,
    is_header, is_link_blob, is_link_list,
)

logger = logging.getLogger(__name__)


def flatten(node: Optional[Node]) -> Optional[Node]:
    """Classify leaves as header, link blob or text block; find link lists.

    Containers that are not link lists dissolve: their flattened children are
    spliced into the parent, and the node itself comes back as a Transient.
    Leaves and link lists are updated in place.
    """
    if node is None:
        return None

    if is_header(node):
        node.tag = HEADER
        return node

    if is_link_list(node):
        logger.debug(f"Link list with {len(node.children)} entries under <{node.tag}>")
        if isinstance(node, Transient):
            return Block(LINKLIST, node.children)
        node.tag = LINKLIST
        return node

    if is_link_blob(node):
        node.tag = LINKBLOB
        return node

    if isinstance(node, Leaf):
        node.tag = TEXTBLOCK
        return node

    children: List[Entry] = []
    for child in node.children:
        if child is GAP:
            children.append(child)
            continue
        flat = flatten(child)
        if isinstance(flat, Transient):
            children.extend(flat.children)
        else:
            children.append(flat)
    return Transient(children)
