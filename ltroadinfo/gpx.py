"""Conversion of road data to GPX tracks, and reading them back."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Union

from .models import ArcGISFeature, EALLayer, EALRestriction
from .transform import lks94_to_wgs84

GPX_NAMESPACE = "http://www.topografix.com/GPX/1/1"
CREATOR = "lt-road-info"

PathLike = Union[str, Path]


class GPXError(Exception):
    """Raised when a GPX file cannot be written or read."""


@dataclass(frozen=True)
class TrackPoint:
    latitude: float
    longitude: float


@dataclass
class Track:
    name: str
    segments: list[list[TrackPoint]] = field(default_factory=list)


def _segment(path: Iterable[list[float]]) -> list[TrackPoint]:
    return [
        TrackPoint(*lks94_to_wgs84(coord[0], coord[1])) for coord in path if len(coord) >= 2
    ]


def _track(name: str, paths: Iterable[Iterable[list[float]]]) -> Track:
    return Track(name=name, segments=[seg for seg in map(_segment, paths) if seg])


def _decimal(value: float) -> str:
    text = repr(float(value))
    if "e" in text or "E" in text:
        text = f"{value:.12f}".rstrip("0").rstrip(".")
    return text


def _save(name: str, tracks: Iterable[Track], output_path: PathLike) -> None:
    root = ET.Element("gpx", {"xmlns": GPX_NAMESPACE, "version": "1.1", "creator": CREATOR})
    metadata = ET.SubElement(root, "metadata")
    ET.SubElement(metadata, "name").text = name
    ET.SubElement(metadata, "time").text = (
        datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")
    )
    for track in tracks:
        if not track.segments:
            continue
        trk = ET.SubElement(root, "trk")
        ET.SubElement(trk, "name").text = track.name
        for segment in track.segments:
            trkseg = ET.SubElement(trk, "trkseg")
            for point in segment:
                ET.SubElement(
                    trkseg,
                    "trkpt",
                    {"lat": _decimal(point.latitude), "lon": _decimal(point.longitude)},
                )
    ET.indent(root, space="  ")
    document = '<?xml version="1.0" encoding="UTF-8"?>\n' + ET.tostring(root, encoding="unicode")
    try:
        Path(output_path).write_text(document + "\n", encoding="utf-8")
    except OSError as exc:
        raise GPXError(f"failed to write GPX file: {exc}") from exc


def restriction_description(restriction: EALRestriction) -> str:
    """Describe a restriction by its icon and, when positive, its value."""
    desc = f"Restriction {restriction.icon}"
    if restriction.icon_value > 0:
        desc += f" ({restriction.icon_value:.0f})"
    return desc


def _format_attribute(value: Any) -> str:
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return str(value)


def arcgis_feature_description(feature: ArcGISFeature) -> str:
    """Describe a speed control section from its road name, number and limit."""
    attrs = feature.attributes
    desc = ""
    road_name = attrs.get("road_name")
    if isinstance(road_name, str) and road_name:
        desc = road_name

    road_number = attrs.get("road_number")
    if isinstance(road_number, str) and road_number:
        desc = f"{desc} ({road_number})" if desc else f"Road {road_number}"

    if "speed_limit" in attrs:
        if desc:
            desc += " - "
        desc += f"Speed limit: {_format_attribute(attrs['speed_limit'])} km/h"
    return desc


def _eal_tracks(layers: Iterable[EALLayer]) -> Iterator[Track]:
    for layer in layers:
        for feature in layer.features:
            for restriction in feature.restrictions:
                name = f"{feature.name} - {restriction_description(restriction)}"
                yield _track(name, restriction.lines.paths)


def _arcgis_tracks(features: Iterable[ArcGISFeature]) -> Iterator[Track]:
    for number, feature in enumerate(features, start=1):
        name = f"Speed Control Section {number}"
        desc = arcgis_feature_description(feature)
        if desc:
            name = f"{name} - {desc}"
        yield _track(name, feature.geometry.paths)


def eal_to_gpx(layers: Iterable[EALLayer], output_path: PathLike) -> None:
    """Write road restrictions as GPX tracks to ``output_path``."""
    _save("Lithuanian Road Restrictions", _eal_tracks(layers), output_path)


def arcgis_to_gpx(features: Iterable[ArcGISFeature], output_path: PathLike) -> None:
    """Write speed control sections as GPX tracks to ``output_path``."""
    _save("Lithuanian Speed Control Sections", _arcgis_tracks(features), output_path)


def _local(tag: str) -> str:
    return tag.rpartition("}")[2]


def _children(element: ET.Element, name: str) -> Iterator[ET.Element]:
    return (child for child in element if _local(child.tag) == name)


def parse_gpx(path: PathLike) -> list[Track]:
    """Read the tracks of a GPX file."""
    try:
        root = ET.parse(path).getroot()
    except (OSError, ET.ParseError) as exc:
        raise GPXError(f"failed to parse GPX: {exc}") from exc
    if _local(root.tag) != "gpx":
        raise GPXError(f"failed to parse GPX: unexpected root element {_local(root.tag)!r}")

    tracks = []
    for trk in _children(root, "trk"):
        name = next((child.text or "" for child in _children(trk, "name")), "")
        track = Track(name=name)
        for trkseg in _children(trk, "trkseg"):
            try:
                track.segments.append(
                    [
                        TrackPoint(float(pt.attrib["lat"]), float(pt.attrib["lon"]))
                        for pt in _children(trkseg, "trkpt")
                    ]
                )
            except (KeyError, ValueError) as exc:
                raise GPXError(f"failed to parse GPX: bad track point: {exc}") from exc
        tracks.append(track)
    return tracks