"""Utilities for DocFX YAML MIME header lines."""

from pathlib import Path

YAML_MIME_PREFIX = "### YamlMime:"
MANAGED_REFERENCE_HEADER = f"{YAML_MIME_PREFIX}ManagedReference"
XREF_MAP_HEADER = f"{YAML_MIME_PREFIX}XRefMap"


def strip_yaml_mime_header(text: str) -> str:
    """Remove the DocFX YAML MIME header from the content."""
    lines = text.splitlines()
    if lines and lines[0].startswith(YAML_MIME_PREFIX):
        return "\n".join(lines[1:]).lstrip("\n")
    return text


def is_managed_reference(path: Path) -> bool:
    """Check whether the file's first line marks a ManagedReference document.

    Files whose first line is not UTF-8 text cannot carry the marker.
    """
    try:
        with path.open(encoding="utf-8") as f:
            first_line = f.readline()
    except UnicodeDecodeError:
        return False
    return first_line.rstrip("\r\n") == MANAGED_REFERENCE_HEADER
