"""Download of road restrictions as a GPX file."""

from __future__ import annotations

from typing import Optional

import requests

from .client import Client
from .gpx import PathLike, eal_to_gpx


def download_restrictions(
    output_path: PathLike, session: Optional[requests.Session] = None
) -> None:
    """Fetch current road restrictions and write them as GPX to ``output_path``.

    Raises ``DataError`` when the service cannot be read and ``GPXError`` when
    the file cannot be written.
    """
    layers = Client(session).fetch_eal_data()
    eal_to_gpx(layers, output_path)