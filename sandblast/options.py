"""Extraction options."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from .config import SandblastConfig, get_config


@dataclass(frozen=True)
class ExtractOptions:
    """Independent switches for an extraction run.

    keep_links: render link markers as [n] and append a numbered table of
        link targets after the text.
    destructive: let each stage reuse the previous stage's nodes instead of
        working on a copy. The extracted text is the same either way, but the
        intermediate trees returned by extract_ex are no longer meaningful.
    """
    keep_links: bool = False
    destructive: bool = False

    @classmethod
    def from_config(cls, config: Optional[SandblastConfig] = None) -> "ExtractOptions":
        section = (config or get_config()).get_section('extract')
        return cls(
            keep_links=bool(section.get('keep_links', False)),
            destructive=bool(section.get('destructive', False)),
        )
