"""Generate a DocFX xref map pointing at the Unity Scripting Reference.

This module reads the ManagedReference YAML emitted by ``docfx metadata`` for
one Unity version, resolves each symbol to a page on docs.unity3d.com and
writes ``<output_dir>/<version>/xrefmap.yml``.
"""

import argparse
import logging
from pathlib import Path

from xrefmap.run_generation import run_generation

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    ap = argparse.ArgumentParser(
        description="Generate a Unity Scripting Reference xref map from DocFX metadata",
    )
    ap.add_argument(
        "version",
        help="Unity version as it appears in docs URLs, e.g. 2022.3",
    )
    ap.add_argument(
        "metadata_dir",
        type=Path,
        help="Directory containing DocFX *.yml (ManagedReference) files",
    )
    ap.add_argument(
        "output_dir",
        type=Path,
        help="Output root; the map is written to <output_dir>/<version>/xrefmap.yml",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument(
        "--max-workers",
        type=int,
        help="Number of symbols resolved concurrently (default: from config)",
    )
    ap.add_argument(
        "--site-root",
        help="Documentation site root (default: https://docs.unity3d.com)",
    )
    ap.add_argument(
        "--report",
        type=Path,
        help="Write a JSON resolution report to this path",
    )
    ap.add_argument(
        "--dry-run",
        action="store_true",
        help="Resolve all symbols without writing the xref map",
    )
    ap.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: INFO)",
    )
    return ap


def main(argv: list[str] | None = None) -> int:
    """Run the xref map generation."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)
    return run_generation(args)


if __name__ == "__main__":
    raise SystemExit(main())
