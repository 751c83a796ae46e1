"""Logic for loading managed reference YAML files."""

import re
from pathlib import Path
from typing import Any

import yaml

from xrefmap.errors import MetadataError
from xrefmap.strip_yaml_mime_header import strip_yaml_mime_header

# Unquoted VB operator names ("name.vb: =") are not valid YAML scalars
VB_EQUALS_RE = re.compile(r"^(\s*[\w\.]+\.vb:\s+)(=$)", re.MULTILINE)


def load_managed_reference(path: Path) -> dict[str, Any]:
    """Load and parse a DocFX ManagedReference YAML file.

    Returns an empty mapping for documents without a top-level mapping.
    Raises ``MetadataError`` when the file cannot be decoded or parsed.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise MetadataError(path, "not valid UTF-8") from exc
    raw = VB_EQUALS_RE.sub(r"\1'='", strip_yaml_mime_header(text))
    try:
        doc = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise MetadataError(path, f"invalid YAML: {exc}") from exc
    if not isinstance(doc, dict):
        return {}
    return doc
