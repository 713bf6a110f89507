"""Checks that downloaded GPX tracks land in Lithuania."""

from __future__ import annotations

import argparse
import math
import tempfile
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .client import DataError
from .gpx import GPXError, PathLike, parse_gpx
from .restrictions import download_restrictions
from .speed_control import download_speed_control_sections

REQUIRED_PERCENT = 90.0


def is_in_lithuania(lat: float, lon: float) -> bool:
    """Whether a point lies inside Lithuania's approximate bounding box."""
    return 53.5 <= lat <= 56.5 and 20.5 <= lon <= 27.0


def is_in_abu_dhabi_area(lat: float, lon: float) -> bool:
    """Whether a point lies where swapped Lithuanian coordinates would end up."""
    return 24.0 <= lat <= 25.0 and 54.0 <= lon <= 56.0


def validate_gpx_coordinates(file_path: PathLike, track_type: str) -> bool:
    """Report on a GPX file's points; True when at least 90% are in Lithuania.

    Raises ``GPXError`` when the file cannot be read or has no tracks.
    """
    tracks = parse_gpx(file_path)
    if not tracks:
        raise GPXError("no tracks found in GPX file")

    valid_count = 0
    total_count = 0
    samples: list[str] = []

    points = (point for track in tracks for segment in track.segments for point in segment)
    for point in points:
        total_count += 1
        lat, lon = point.latitude, point.longitude
        if is_in_lithuania(lat, lon):
            valid_count += 1
            if len(samples) < 3:
                samples.append(f"[{lat:.6f}, {lon:.6f}]")
        elif is_in_abu_dhabi_area(lat, lon):
            print(
                f"❌ {track_type} coordinate [{lat:.6f}, {lon:.6f}] is in Abu Dhabi"
                " - lat/lon mixup detected!"
            )
            return False
        else:
            print(f"⚠️  {track_type} coordinate [{lat:.6f}, {lon:.6f}] is outside Lithuania")

    valid_percent = valid_count / total_count * 100 if total_count else math.nan

    print(
        f"   📊 {track_type}: {valid_count}/{total_count} coordinates in Lithuania"
        f" ({valid_percent:.1f}%)"
    )
    if samples:
        print(f"   📍 Sample coordinates: [{' '.join(samples)}]")

    if valid_percent < REQUIRED_PERCENT:
        print(
            f"❌ Only {valid_percent:.1f}% of coordinates are in Lithuania (expected >90%)"
        )
        return False

    print(f"✅ {track_type} coordinates validation passed")
    return True


@dataclass(frozen=True)
class _Check:
    heading: str
    filename: str
    download: Callable[[PathLike], None]
    label: str
    download_label: str
    title: str


_CHECKS = (
    _Check(
        "\n📍 Testing road restrictions...",
        "test-restrictions.gpx",
        download_restrictions,
        "restrictions",
        "restrictions",
        "Restrictions",
    ),
    _Check(
        "\n🚗 Testing speed control sections...",
        "test-speed.gpx",
        download_speed_control_sections,
        "speed control",
        "speed control",
        "Speed control",
    ),
)


def _run(check: _Check, directory: Path) -> bool:
    print(check.heading)
    path = directory / check.filename
    try:
        check.download(path)
    except (DataError, GPXError) as exc:
        print(f"❌ Failed to download {check.download_label}: {exc}")
        return False
    try:
        valid = validate_gpx_coordinates(path, check.label)
    except GPXError as exc:
        print(f"❌ Error validating {check.label}: {exc}")
        return False
    if not valid:
        print(f"❌ {check.title} validation failed")
        return False
    return True


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Download both data sets and check their coordinates; returns the exit status."""
    argparse.ArgumentParser(
        prog="verify-coords",
        description="Download road data and verify its coordinates are in Lithuania.",
    ).parse_args(argv)

    print("🔍 Verifying coordinate transformations...")
    with tempfile.TemporaryDirectory(prefix="lt-road-verify-") as tmp:
        directory = Path(tmp)
        if not all(_run(check, directory) for check in _CHECKS):
            return 1

    print("\n✅ All coordinate transformations are correct!")
    print("🇱🇹 All GPX tracks are properly located in Lithuania")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())