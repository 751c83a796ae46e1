"""Logic for writing DocFX XRefMap files."""

import logging
from collections.abc import Sequence
from pathlib import Path

import yaml

from xrefmap.reference_record import ReferenceRecord
from xrefmap.strip_yaml_mime_header import XREF_MAP_HEADER

logger = logging.getLogger(__name__)

XREF_MAP_FILENAME = "xrefmap.yml"


def output_file_for_version(output_dir: Path, version: str) -> Path:
    """Return ``<output_dir>/<version>/xrefmap.yml``."""
    return output_dir / version / XREF_MAP_FILENAME


def render_xref_map(records: Sequence[ReferenceRecord]) -> str:
    """Render references as an XRefMap YAML document."""
    body = yaml.safe_dump(
        {"sorted": True, "references": [r.to_dict() for r in records]},
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
        width=4096,
    )
    return f"{XREF_MAP_HEADER}\n{body}"


def write_xref_map(
    records: Sequence[ReferenceRecord], output_dir: Path, version: str
) -> Path:
    """Write the map for ``version`` and return the file written."""
    out_file = output_file_for_version(output_dir, version)
    out_file.parent.mkdir(parents=True, exist_ok=True)
    out_file.write_text(render_xref_map(records), encoding="utf-8")
    logger.info("Wrote %d references to %s", len(records), out_file)
    return out_file
