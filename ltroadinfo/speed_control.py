"""Download of speed control sections as a GPX file."""

from __future__ import annotations

from typing import Optional

import requests

from .client import Client
from .gpx import PathLike, arcgis_to_gpx


def download_speed_control_sections(
    output_path: PathLike, session: Optional[requests.Session] = None
) -> None:
    """Fetch all speed control sections and write them as GPX to ``output_path``.

    Raises ``DataError`` when the service cannot be read and ``GPXError`` when
    the file cannot be written.
    """
    features = Client(session).fetch_arcgis_data()
    arcgis_to_gpx(features, output_path)