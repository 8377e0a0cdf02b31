"""Exceptions raised by the extraction pipeline and its fetch helper."""
from typing import Optional


class SandblastError(Exception):
    """Base class for all sandblast errors."""


class RootNotFound(SandblastError):
    """No <html> element is reachable from the input document."""

    def __init__(self, message: str = "Could not find root"):
        super().__init__(message)


class FetchError(SandblastError):
    """A page could not be retrieved."""

    def __init__(self, url: str, reason: str, status: Optional[int] = None):
        self.url = url
        self.status = status
        if status is not None:
            message = f"Could not fetch {url} (status {status}): {reason}"
        else:
            message = f"Could not fetch {url}: {reason}"
        super().__init__(message)
