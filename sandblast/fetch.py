"""Fetch a page over HTTP and decode it to text, detecting the charset."""
from __future__ import annotations
import logging
import re
from dataclasses import dataclass
from typing import Optional, Tuple

import requests
from bs4 import UnicodeDammit

from .config import get_config
from .errors import FetchError

logger = logging.getLogger(__name__)

USER_AGENT_FALLBACK = "Sandblast/0.3"

_CHARSET_RE = re.compile(r'charset\s*=\s*["\']?([\w.:-]+)', re.IGNORECASE)


@dataclass
class FetchResult:
    body: str
    status: int
    encoding: str


def charset_from_content_type(content_type: str) -> Optional[str]:
    match = _CHARSET_RE.search(content_type or "")
    return match.group(1).lower() if match else None


def decode_body(content: bytes, content_type: str = "") -> Tuple[str, str]:
    """Decode a response body, trusting a charset in Content-Type first."""
    declared = charset_from_content_type(content_type)
    dammit = UnicodeDammit(content, known_definite_encodings=[declared] if declared else [], is_html=True)
    if dammit.unicode_markup is None:
        logger.warning("Could not detect encoding, decoding as utf-8 with replacement")
        return content.decode("utf-8", errors="replace"), "utf-8"
    return dammit.unicode_markup, dammit.original_encoding or "ascii"


def make_session() -> requests.Session:
    config = get_config()
    session = requests.Session()
    session.headers.update({"User-Agent": config.get('fetch.user_agent') or USER_AGENT_FALLBACK})
    return session


def fetch_url(url: str, session: Optional[requests.Session] = None, timeout: Optional[float] = None) -> FetchResult:
    """GET url and return its decoded body, status code and encoding."""
    session = session or make_session()
    if timeout is None:
        timeout = get_config().get('fetch.timeout_seconds', 20)
    try:
        resp = session.get(url, timeout=timeout)
    except requests.RequestException as e:
        raise FetchError(url, str(e)) from e

    body, encoding = decode_body(resp.content, resp.headers.get('Content-Type', ''))
    logger.debug(f"Fetched {url}: status {resp.status_code}, {len(resp.content)} bytes, {encoding}")
    return FetchResult(body, resp.status_code, encoding)
