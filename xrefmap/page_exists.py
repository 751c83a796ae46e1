"""Capability interface for checking that a documentation page exists."""

from typing import Protocol


class PageExists(Protocol):
    """Answers whether a URL points at an existing page."""

    def exists(self, url: str) -> bool:
        """Return True if ``url`` answers with HTTP 200."""
        ...
