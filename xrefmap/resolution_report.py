"""Logic for reporting on href resolution for a single xref map run."""

import json
import logging
import time
from pathlib import Path
from typing import Any

from xrefmap.resolution_result import HrefResolution

logger = logging.getLogger(__name__)


class ResolutionReport:
    """Collects resolution outcomes and skipped metadata entries."""

    def __init__(self, version: str) -> None:
        """Initialize the report for one documentation version."""
        self.version = version
        self.results: list[HrefResolution] = []
        self.skipped: list[dict[str, str]] = []
        self.start_time = time.time()

    def add_result(self, result: HrefResolution) -> None:
        """Add a single resolution result to the report."""
        self.results.append(result)

    def add_skipped(self, file: Path, reason: str, uid: str | None = None) -> None:
        """Record a metadata item that could not be turned into a reference."""
        self.skipped.append({"file": str(file), "uid": uid or "", "reason": reason})

    def summary(self) -> dict[str, int]:
        """Return the number of results per ladder rung, plus skipped entries."""
        counts: dict[str, int] = {}
        for r in self.results:
            counts[r.rung] = counts.get(r.rung, 0) + 1
        counts["skipped"] = len(self.skipped)
        return counts

    def write(self, path: Path) -> None:
        """Write the report to a JSON file."""
        probes = sum(r.probes for r in self.results)
        report: dict[str, Any] = {
            "meta": {
                "version": self.version,
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "total_items": len(self.results),
                "total_probes": probes,
            },
            "results": [
                {"uid": r.uid, "url": r.url, "rung": r.rung, "probes": r.probes}
                for r in sorted(self.results, key=lambda r: r.uid)
            ],
            "skipped": self.skipped,
            "stats": self.summary(),
        }
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(report, indent=2), encoding="utf-8")
        logger.info("Wrote resolution report to %s", path)
