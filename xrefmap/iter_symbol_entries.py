"""Utility for iterating over the symbol entries of a metadata document."""

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from xrefmap.resolution_report import ResolutionReport
from xrefmap.symbol_entry import SymbolEntry

logger = logging.getLogger(__name__)


def iter_symbol_entries(
    doc: dict[str, Any], file: Path, report: ResolutionReport | None = None
) -> Iterable[SymbolEntry]:
    """Iterate over the items in a DocFX YAML document that can be resolved.

    Items without a ``uid`` or ``commentId`` cannot be classified; they are
    logged, recorded on the report and skipped.
    """
    items = doc.get("items") or []
    for it in items:
        if not isinstance(it, dict):
            continue
        uid = it.get("uid")
        comment_id = it.get("commentId")
        if not uid or not comment_id:
            reason = "missing uid" if not uid else "missing commentId"
            logger.warning("Skipping item in %s: %s (uid=%s)", file, reason, uid)
            if report is not None:
                report.add_skipped(file, reason, str(uid) if uid else None)
            continue
        uid = str(uid)
        name = str(it.get("name") or uid)
        yield SymbolEntry(
            uid=uid,
            comment_id=str(comment_id),
            name=name,
            full_name=str(it.get("fullName") or uid),
            name_with_type=str(it.get("nameWithType") or name),
            file=file,
        )
