import json
import re

import pytest
import requests
import responses

from ltroadinfo.client import DataError
from ltroadinfo.gpx import parse_gpx
from ltroadinfo.restrictions import download_restrictions

EAL = re.compile(r"https://eismoinfo\.lt/")


def _layers(name, coords):
    return [
        {
            "layer": "EAL",
            "name": "Test Layer",
            "features": [
                {
                    "id": "test-1",
                    "name": name,
                    "restrictions": [
                        {
                            "id": "restriction-1",
                            "icon": "76",
                            "iconValue": 50,
                            "lines": {"paths": [coords]},
                        }
                    ],
                }
            ],
        }
    ]


KNOWN = _layers("Test Road Work", [[581234, 6095678], [568123, 6062456]])


def _in_lithuania(lat, lon):
    return 53.5 <= lat <= 56.5 and 20.5 <= lon <= 27.0


def _close(a, b, tolerance=0.0001):
    return abs(a - b) <= tolerance


@pytest.fixture
def mocked():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


def test_download_with_mocked_api(mocked, tmp_path):
    mocked.add(responses.GET, EAL, body=json.dumps(KNOWN), content_type="application/json")
    output = tmp_path / "test_restrictions.gpx"

    download_restrictions(output, requests.Session())

    tracks = parse_gpx(output)
    assert tracks
    ours = [t for t in tracks if "Test Road Work" in t.name]
    assert ours
    points = [p for t in ours for seg in t.segments for p in seg]
    assert all(_in_lithuania(p.latitude, p.longitude) for p in points)
    assert any(_close(p.latitude, 54.990387) and _close(p.longitude, 25.269384) for p in points)


@pytest.mark.parametrize(
    "easting, northing, expected_lat, expected_lon",
    [
        (581234, 6095678, 54.990387, 25.269384),
        (568123, 6062456, 54.693908, 25.056723),
    ],
)
def test_coordinate_transformation_regression(
    mocked, tmp_path, easting, northing, expected_lat, expected_lon
):
    body = json.dumps(_layers("Test Road Work", [[easting, northing]]))
    mocked.add(responses.GET, EAL, body=body, content_type="application/json")
    output = tmp_path / "restrictions.gpx"

    download_restrictions(output)

    point = parse_gpx(output)[0].segments[0][0]
    assert 53.5 <= point.latitude <= 56.5
    assert 20.5 <= point.longitude <= 27.0
    assert _close(point.latitude, expected_lat)
    assert _close(point.longitude, expected_lon)


def test_track_name_describes_restriction(mocked, tmp_path):
    mocked.add(responses.GET, EAL, body=json.dumps(KNOWN), content_type="application/json")
    output = tmp_path / "restrictions.gpx"

    download_restrictions(output)

    assert [t.name for t in parse_gpx(output)] == ["Test Road Work - Restriction 76 (50)"]


def test_declared_charset_is_honoured(mocked, tmp_path):
    body = json.dumps(_layers("Kelio darbai Šiauliai", [[486789, 6179234]]), ensure_ascii=False)
    mocked.add(
        responses.GET,
        EAL,
        body=body.encode("cp1257"),
        content_type="application/json; charset=windows-1257",
    )
    output = tmp_path / "restrictions.gpx"

    download_restrictions(output)

    assert "Kelio darbai Šiauliai" in parse_gpx(output)[0].name


def test_invalid_json_raises_and_writes_nothing(mocked, tmp_path):
    mocked.add(responses.GET, EAL, body="<html>oops</html>", status=500)
    output = tmp_path / "restrictions.gpx"

    with pytest.raises(DataError, match="failed to parse JSON"):
        download_restrictions(output)
    assert not output.exists()


def test_connection_failure_raises(mocked, tmp_path):
    mocked.add(responses.GET, EAL, body=requests.ConnectionError("unreachable"))

    with pytest.raises(DataError, match="failed to fetch EAL data"):
        download_restrictions(tmp_path / "restrictions.gpx")