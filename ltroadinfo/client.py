"""HTTP client for the Lithuanian road information services."""

from __future__ import annotations

import json
from email.message import Message
from typing import Any, Optional, Union

import requests

from .models import ArcGISFeature, ArcGISQueryResponse, ArcGISServiceInfo, EALLayer

EAL_URL = "https://eismoinfo.lt/eismoinfo-backend/layer-dynamic-features/EAL?lks=true"
ARCGIS_SERVICE_URL = "https://gis.ktvis.lt/arcgis/rest/services/PUB/PUB_ITS/MapServer/13"
ARCGIS_QUERY_URL = ARCGIS_SERVICE_URL + "/query"
DEFAULT_MAX_RECORDS = 1000


class DataError(Exception):
    """Raised when data cannot be fetched or understood."""


def _charset(content_type: Optional[str]) -> Optional[str]:
    if not content_type:
        return None
    message = Message()
    message["content-type"] = content_type
    return message.get_content_charset()


def _decode(body: bytes, content_type: Optional[str]) -> Union[str, bytes]:
    charset = _charset(content_type)
    if charset:
        try:
            return body.decode(charset)
        except (LookupError, UnicodeDecodeError):
            pass
    return body


class Client:
    """Fetches road restrictions and speed control sections."""

    def __init__(self, session: Optional[requests.Session] = None) -> None:
        self.session = session if session is not None else requests.Session()

    def _get(self, url: str) -> requests.Response:
        return self.session.get(url)

    def fetch_eal_data(self) -> list[EALLayer]:
        """Fetch road restriction layers."""
        try:
            response = self._get(EAL_URL)
            body = response.content
        except requests.RequestException as exc:
            raise DataError(f"failed to fetch EAL data: {exc}") from exc

        text = _decode(body, response.headers.get("Content-Type"))
        try:
            raw = json.loads(text)
            if not isinstance(raw, list):
                raise ValueError(f"expected an array, got {type(raw).__name__}")
            return [EALLayer.from_dict(item) for item in raw]
        except ValueError as exc:
            raise DataError(f"failed to parse JSON: {exc}") from exc

    def fetch_arcgis_data(self) -> list[ArcGISFeature]:
        """Fetch all speed control sections, page by page."""
        try:
            max_records = self._max_record_count()
        except (requests.RequestException, ValueError) as exc:
            raise DataError(f"failed to get service info: {exc}") from exc
        return self._fetch_all_features(max_records)

    def _max_record_count(self) -> int:
        response = self._get(ARCGIS_SERVICE_URL + "?f=json")
        info = ArcGISServiceInfo.from_dict(self._json(response))
        return info.max_record_count if info.max_record_count > 0 else DEFAULT_MAX_RECORDS

    @staticmethod
    def _json(response: requests.Response) -> Any:
        raw = json.loads(response.content)
        if not isinstance(raw, dict):
            raise ValueError(f"expected an object, got {type(raw).__name__}")
        return raw

    def _fetch_all_features(self, max_records: int) -> list[ArcGISFeature]:
        features: list[ArcGISFeature] = []
        offset = 0
        while True:
            batch = self._fetch_batch(offset, max_records)
            features.extend(batch.features)
            if not batch.exceeded_transfer_limit or not batch.features:
                return features
            offset += len(batch.features)

    def _fetch_batch(self, offset: int, limit: int) -> ArcGISQueryResponse:
        url = (
            f"{ARCGIS_QUERY_URL}?where=1=1&outFields=*&returnGeometry=true&f=json"
            f"&resultOffset={offset}&resultRecordCount={limit}&outSR=3346"
        )
        try:
            response = self._get(url)
            return ArcGISQueryResponse.from_dict(self._json(response))
        except requests.RequestException as exc:
            raise DataError(f"failed to fetch speed control data: {exc}") from exc
        except ValueError as exc:
            raise DataError(f"failed to parse speed control data: {exc}") from exc