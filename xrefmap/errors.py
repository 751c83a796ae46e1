"""Exception classes for xref map generation."""

from pathlib import Path


class XRefMapError(Exception):
    """Base exception for all xref map errors."""


class TransientProbeError(XRefMapError):
    """Raised when a page probe fails in a way that is worth retrying.

    Covers timeouts, connection failures, 5xx responses and rate limiting.
    """

    def __init__(self, url: str, reason: str) -> None:
        """Initialize the exception with the probed URL and the failure reason."""
        super().__init__(f"{reason}: {url}")
        self.url = url
        self.reason = reason


class MetadataError(XRefMapError):
    """Raised when a metadata file cannot be read or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        """Initialize the exception with the offending file and the failure reason."""
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason
