"""Building the xref map for one Unity version from DocFX metadata."""

import logging
from collections.abc import Iterable
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path

from xrefmap.errors import MetadataError
from xrefmap.href_resolver import HrefResolver
from xrefmap.iter_symbol_entries import iter_symbol_entries
from xrefmap.load_managed_reference import load_managed_reference
from xrefmap.normalize_text import normalize_text
from xrefmap.reference_record import ReferenceRecord
from xrefmap.resolution_report import ResolutionReport
from xrefmap.resolution_result import RUNG_INDEX, HrefResolution
from xrefmap.strip_yaml_mime_header import is_managed_reference
from xrefmap.symbol_entry import SymbolEntry

logger = logging.getLogger(__name__)

DEFAULT_MAX_WORKERS = 8


def find_metadata_files(metadata_dir: Path) -> list[Path]:
    """Return the ManagedReference ``*.yml`` files directly under ``metadata_dir``."""
    if not metadata_dir.is_dir():
        return []
    return [f for f in sorted(metadata_dir.glob("*.yml")) if is_managed_reference(f)]


def collect_symbol_entries(
    files: Iterable[Path], report: ResolutionReport | None = None
) -> list[SymbolEntry]:
    """Load every file and gather its symbol entries.

    A file that cannot be read or parsed is logged, recorded as skipped and
    left out; the remaining files are still collected.
    """
    entries: list[SymbolEntry] = []
    for f in files:
        try:
            doc = load_managed_reference(f)
        except (MetadataError, OSError) as exc:
            logger.error("Skipping unreadable metadata file %s: %s", f, exc)
            if report is not None:
                report.add_skipped(f, "unreadable file")
            continue
        found = list(iter_symbol_entries(doc, f, report))
        if not found:
            logger.info("No items found in %s", f)
            continue
        logger.debug("Processing %d items from %s", len(found), f)
        entries.extend(found)
    return entries


def build_reference(entry: SymbolEntry, resolution: HrefResolution) -> ReferenceRecord:
    """Assemble the reference record for a resolved symbol."""
    return ReferenceRecord(
        uid=entry.uid,
        name=normalize_text(entry.name),
        href=resolution.url,
        comment_id=entry.comment_id,
        full_name=normalize_text(entry.full_name),
        name_with_type=entry.name_with_type,
    )


def _resolve_entry(
    resolver: HrefResolver, entry: SymbolEntry, version: str
) -> HrefResolution:
    return resolver.resolve_detailed(entry.uid, entry.comment_id, version)


def _collect_result(
    future: "Future[HrefResolution]",
    entry: SymbolEntry,
    resolver: HrefResolver,
    version: str,
) -> HrefResolution:
    """Return the future's result, degrading to the index page if it raised."""
    try:
        return future.result()
    except Exception:
        logger.exception("Failed to resolve %s; linking to the index", entry.uid)
        return HrefResolution(entry.uid, resolver.index_url(version), RUNG_INDEX)


def sort_unique(records: Iterable[ReferenceRecord]) -> list[ReferenceRecord]:
    """Keep the first record per uid and sort ascending by uid."""
    by_uid: dict[str, ReferenceRecord] = {}
    for r in records:
        if r.uid in by_uid:
            logger.warning("Duplicate uid %s; keeping the first occurrence", r.uid)
            continue
        by_uid[r.uid] = r
    return [by_uid[uid] for uid in sorted(by_uid)]


def generate_xref_map(
    version: str,
    metadata_dir: Path,
    resolver: HrefResolver,
    *,
    max_workers: int = DEFAULT_MAX_WORKERS,
    report: ResolutionReport | None = None,
) -> list[ReferenceRecord] | None:
    """Resolve every symbol of ``version`` and return its sorted references.

    Returns None when the metadata directory is missing or holds no
    ManagedReference files; the version is then skipped entirely.
    """
    files = find_metadata_files(metadata_dir)
    if not files:
        logger.warning(
            "No ManagedReference metadata under %s; skipping %s", metadata_dir, version
        )
        return None

    entries = collect_symbol_entries(files, report)
    logger.info(
        "Resolving %d symbols from %d files for %s", len(entries), len(files), version
    )

    records: list[ReferenceRecord] = []
    resolutions: dict[str, HrefResolution] = {}
    with ThreadPoolExecutor(max_workers=max(1, max_workers)) as pool:
        futures = [
            (entry, pool.submit(_resolve_entry, resolver, entry, version))
            for entry in entries
        ]
        for entry, future in futures:
            resolution = _collect_result(future, entry, resolver, version)
            resolutions.setdefault(entry.uid, resolution)
            records.append(build_reference(entry, resolution))

    unique = sort_unique(records)
    if report is not None:
        # Only records that made it into the map are counted.
        for r in unique:
            report.add_result(resolutions[r.uid])
    return unique
