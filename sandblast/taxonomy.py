"""Tag taxonomy: how each HTML element is treated by the simplifier."""
from __future__ import annotations
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class NodeKind(Enum):
    SUPPRESSED = "suppressed"
    TO_DESTRUCTURE = "to_destructure"
    CONTAINER = "container"
    KOT_CONTAINER = "keep_original_tag_container"
    FORMATTING = "formatting"
    INLINE = "inline"


def _kinds(kind: NodeKind, names: str) -> dict:
    return {name: kind for name in names.split()}


_table = {}

# Dropped together with their whole subtree
_table.update(_kinds(NodeKind.SUPPRESSED, """
    head base link meta title
    script noscript style
    input label textarea button isindex
    object applet img map
    address basefont
    colgroup col caption
    br hr
    canvas audio video source track embed
    datalist keygen output command progress
    ruby rt rp
"""))

# Children are promoted into the parent
_table.update(_kinds(NodeKind.TO_DESTRUCTURE, """
    html
    tbody thead tfoot tr th
    form fieldset optgroup
    iframe
    legend bdo
    abbr acronym
    figure figcaption
"""))

_table.update(_kinds(NodeKind.CONTAINER, """
    div span
    select option
    table td
    dir dl dt dd
    menu ul ol li
    blockquote p cite pre
    h4 h5 h6
    header hgroup main article aside footer details summary
    nav section dialog
"""))

_table.update(_kinds(NodeKind.KOT_CONTAINER, "h1 h2 h3"))

_table.update(_kinds(NodeKind.FORMATTING, """
    tt small big s strike center
    dfn del kbd samp var code q ins
    sub sup font
    mark time bdi wbr meter
"""))

_table.update(_kinds(NodeKind.INLINE, "strong b i em u a"))

# Read-only view, shared by every pipeline in the process
ELEMENTS: Mapping[str, NodeKind] = MappingProxyType(_table)
del _table

DEFAULT_KIND = NodeKind.CONTAINER


def classify(tag_name: str) -> NodeKind:
    """Return the kind of an element by tag name (case-insensitive)."""
    return ELEMENTS.get(tag_name.lower(), DEFAULT_KIND)
