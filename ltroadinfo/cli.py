"""Command line entry point that downloads road information as GPX files."""

from __future__ import annotations

import argparse
import logging
import os
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Optional

from .client import DataError
from .gpx import GPXError
from .restrictions import download_restrictions
from .speed_control import download_speed_control_sections

PROG = "lt-road-info"
RESTRICTIONS_FILE = "lt-road-restrictions.gpx"
SPEED_CONTROL_FILE = "lt-speed-control.gpx"

HELP = f"""Lithuanian Road Information GPX Downloader

This tool downloads current road information from Lithuanian traffic systems
and converts it to GPX format for use in navigation applications.

Usage:
  {PROG} [flags]

Flags:
  -help
    \tShow help message
  -output string
    \tOutput directory for GPX files (default ".")
  -type string
    \tType of data to download: all, restrictions, speed-control (default "all")
  -verbose
    \tEnable verbose logging

Examples:
  # Download all data to current directory
  {PROG}

  # Download only road restrictions
  {PROG} -type restrictions

  # Download to specific directory with verbose output
  {PROG} -output /path/to/gpx -verbose"""

log = logging.getLogger("ltroadinfo")


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=PROG, add_help=False, allow_abbrev=False)
    parser.add_argument("-output", "--output", dest="output", default=".")
    parser.add_argument("-type", "--type", dest="data_type", default="all")
    parser.add_argument("-verbose", "--verbose", dest="verbose", action="store_true")
    parser.add_argument("-help", "--help", "-h", dest="help", action="store_true")
    return parser


def _download(
    label: str, filename: str, fetch: Callable[[Path], None], output_dir: Path
) -> bool:
    """Run one download; log the outcome and return whether it succeeded."""
    output_path = output_dir / filename
    log.info("Downloading %s to %s...", label, output_path)
    try:
        fetch(output_path)
    except (DataError, GPXError) as exc:
        log.error("Failed to download %s: %s", label, exc)
        return False
    log.info("Successfully downloaded %s to %s", label, output_path)
    return True


_RESTRICTIONS = ("road restrictions", RESTRICTIONS_FILE, download_restrictions)
_SPEED_CONTROL = (
    "speed control sections",
    SPEED_CONTROL_FILE,
    download_speed_control_sections,
)

_DOWNLOADS = {
    "all": (_RESTRICTIONS, _SPEED_CONTROL),
    "restrictions": (_RESTRICTIONS,),
    "speed-control": (_SPEED_CONTROL,),
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the downloader; returns the process exit status."""
    args = _parser().parse_args(argv)

    if args.help:
        print(HELP)
        return 0

    fmt = "%(asctime)s %(message)s"
    if args.verbose:
        fmt = "%(asctime)s %(filename)s:%(lineno)d: %(message)s"
    logging.basicConfig(format=fmt, datefmt="%Y/%m/%d %H:%M:%S")
    log.setLevel(logging.INFO)

    output_dir = Path(args.output)
    try:
        os.makedirs(output_dir, mode=0o755, exist_ok=True)
    except OSError as exc:
        log.error("Failed to create output directory: %s", exc)
        return 1

    steps = _DOWNLOADS.get(args.data_type)
    if steps is None:
        log.error(
            "Unknown data type: %s. Use 'all', 'restrictions', or 'speed-control'",
            args.data_type,
        )
        return 1

    for label, filename, fetch in steps:
        if not _download(label, filename, fetch, output_dir):
            return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())