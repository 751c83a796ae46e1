"""Orchestration logic for generating a Unity xref map."""

import argparse
import logging
from typing import Any

from xrefmap.generate_xref_map import generate_xref_map
from xrefmap.href_resolver import HrefResolver
from xrefmap.http_page_probe import HttpPageProbe, ProbeSettings
from xrefmap.load_config import load_config
from xrefmap.page_exists import PageExists
from xrefmap.resolution_report import ResolutionReport
from xrefmap.write_xref_map import output_file_for_version, write_xref_map

logger = logging.getLogger(__name__)


def run_generation(
    args: argparse.Namespace, page_exists: PageExists | None = None
) -> int:
    """Execute the full generation pipeline for one version."""
    config = _init_config(args)
    probe = page_exists or HttpPageProbe(ProbeSettings.from_config(config))
    resolver = HrefResolver.from_config(probe, config)
    report = ResolutionReport(args.version)

    records = generate_xref_map(
        args.version,
        args.metadata_dir,
        resolver,
        max_workers=config["workers"]["max_workers"],
        report=report,
    )
    if records is None:
        print(f"No metadata found for {args.version} under: {args.metadata_dir}")
        return 1

    if args.report:
        report.write(args.report)

    stats = ", ".join(f"{k}={v}" for k, v in sorted(report.summary().items()))
    if args.dry_run:
        target = output_file_for_version(args.output_dir, args.version)
        print(f"Dry run: {len(records)} references for {target} ({stats})")
        return 0

    out_file = write_xref_map(records, args.output_dir, args.version)
    print(f"Unity {args.version} XRef Map generated successfully: {out_file} ({stats})")
    return 0


def _init_config(args: argparse.Namespace) -> dict[str, Any]:
    """Load configuration and apply command-line overrides."""
    config = load_config(args.config)
    if args.max_workers is not None:
        config["workers"]["max_workers"] = args.max_workers
    if args.site_root:
        config["site"]["root"] = args.site_root
    return config
