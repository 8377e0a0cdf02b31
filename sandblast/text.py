"""Text normalization applied to every raw text run before it enters the tree.

The three cleaners run in a fixed order (see normalize_text):
whitespace collapse, ASCII-art removal, control character stripping.
"""
from __future__ import annotations
import unicodedata
from enum import Enum
from typing import Tuple

# Marks the end of an anchor's text inside leaf content. It is a non-whitespace
# control character, so clean_control guarantees document text never carries it.
LINK_END = "\x03"

# Information separators: Python treats these as whitespace, the tree
# builder treats them as control characters.
_SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")

# Punctuation runs up to this length survive ("...", "--", "(!)")
MAX_PUNCTUATION_RUN = 3


def is_space(ch: str) -> bool:
    return ch.isspace() and ch not in _SEPARATORS


def is_control(ch: str) -> bool:
    return unicodedata.category(ch) == "Cc"


def is_ascii_art(ch: str) -> bool:
    """Anything that is neither a letter nor a number."""
    return unicodedata.category(ch)[0] not in ("L", "N")


def collapse_whitespace(text: str) -> str:
    """Collapse whitespace runs to a single space and drop leading whitespace."""
    out = []
    space_seen = True
    for ch in text:
        if is_space(ch):
            if not space_seen:
                out.append(" ")
                space_seen = True
        else:
            out.append(ch)
            space_seen = False
    return "".join(out)


class ScanState(Enum):
    IN_SPACE = "in_space"
    IN_TEXT = "in_text"
    IN_PUNCTUATION = "in_punctuation"


class ScanAction(Enum):
    EMIT = "emit"
    START_RUN = "start_run"
    EXTEND_RUN = "extend_run"
    END_RUN_AT_SPACE = "end_run_at_space"
    END_RUN_AT_TEXT = "end_run_at_text"


def ascii_art_transition(state: ScanState, ch: str) -> Tuple[ScanState, ScanAction]:
    """Transition function of the ASCII-art scanner."""
    if state is ScanState.IN_SPACE:
        if is_space(ch):
            return ScanState.IN_SPACE, ScanAction.EMIT
        if is_ascii_art(ch):
            return ScanState.IN_PUNCTUATION, ScanAction.START_RUN
        return ScanState.IN_TEXT, ScanAction.EMIT

    if state is ScanState.IN_TEXT:
        if is_space(ch):
            return ScanState.IN_SPACE, ScanAction.EMIT
        return ScanState.IN_TEXT, ScanAction.EMIT

    if is_space(ch):
        return ScanState.IN_SPACE, ScanAction.END_RUN_AT_SPACE
    if is_ascii_art(ch):
        return ScanState.IN_PUNCTUATION, ScanAction.EXTEND_RUN
    return ScanState.IN_TEXT, ScanAction.END_RUN_AT_TEXT


def clean_ascii_art(text: str) -> str:
    """Remove long punctuation runs that stand alone between whitespace.

    A run of non-alphanumeric characters that starts after whitespace and is
    closed by whitespace is deleted when it is longer than
    MAX_PUNCTUATION_RUN (the closing whitespace is kept). A run glued to a
    following letter or digit is kept verbatim. A run still open at the end
    of the text is dropped.
    """
    out = []
    run = []
    state = ScanState.IN_SPACE
    for ch in text:
        state, action = ascii_art_transition(state, ch)
        if action is ScanAction.EMIT:
            out.append(ch)
        elif action is ScanAction.START_RUN:
            run = [ch]
        elif action is ScanAction.EXTEND_RUN:
            run.append(ch)
        elif action is ScanAction.END_RUN_AT_SPACE:
            if len(run) <= MAX_PUNCTUATION_RUN:
                out.extend(run)
            out.append(ch)
            run = []
        else:
            out.extend(run)
            out.append(ch)
            run = []
    return "".join(out)


def clean_control(text: str) -> str:
    """Strip control characters that are not whitespace."""
    if not any(is_control(ch) and not is_space(ch) for ch in text):
        return text
    return "".join(ch for ch in text if not is_control(ch) or is_space(ch))


def normalize_text(text: str) -> str:
    return clean_control(clean_ascii_art(collapse_whitespace(text)))


def visible_length(content: str) -> int:
    """Length of leaf content, not counting link-end markers."""
    return len(content) - content.count(LINK_END)


def strip_markers(content: str) -> str:
    return content.replace(LINK_END, "")
