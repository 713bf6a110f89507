import json
import re
from urllib.parse import urlsplit

import pytest
import requests
import responses

from ltroadinfo.cli import RESTRICTIONS_FILE, SPEED_CONTROL_FILE, main
from ltroadinfo.gpx import parse_gpx

EAL = re.compile(r"https://eismoinfo\.lt/")
ARCGIS = re.compile(r"https://gis\.ktvis\.lt/")

EAL_BODY = [
    {
        "layer": "EAL",
        "name": "Test Layer",
        "features": [
            {
                "id": "test-1",
                "name": "Test Road Work",
                "restrictions": [
                    {"id": "r-1", "icon": "76", "lines": {"paths": [[[581234, 6095678]]]}}
                ],
            }
        ],
    }
]

QUERY_BODY = {
    "features": [
        {
            "attributes": {"road_name": "Test Highway A1"},
            "geometry": {"paths": [[[568123, 6062456]]]},
        }
    ],
    "exceededTransferLimit": False,
}


@pytest.fixture
def mocked():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


def _serve_all(rsps):
    rsps.add(responses.GET, EAL, body=json.dumps(EAL_BODY), content_type="application/json")

    def arcgis(request):
        if urlsplit(request.url).path.endswith("/query"):
            return 200, {}, json.dumps(QUERY_BODY)
        return 200, {}, json.dumps({"maxRecordCount": 1000})

    rsps.add_callback(responses.GET, ARCGIS, callback=arcgis, content_type="application/json")


def test_help_prints_usage(capsys):
    assert not main(["-help"])
    out = capsys.readouterr().out
    assert "Usage:" in out
    assert "lt-road-info -type restrictions" in out
    assert "-output string" in out


def test_all_downloads_both_files(mocked, tmp_path):
    _serve_all(mocked)

    assert not main(["-output", str(tmp_path)])

    restrictions = parse_gpx(tmp_path / RESTRICTIONS_FILE)
    speed = parse_gpx(tmp_path / SPEED_CONTROL_FILE)
    assert "Test Road Work" in restrictions[0].name
    assert "Test Highway A1" in speed[0].name


def test_restrictions_only(mocked, tmp_path):
    _serve_all(mocked)

    assert not main(["-type", "restrictions", "-output", str(tmp_path)])

    assert (tmp_path / RESTRICTIONS_FILE).exists()
    assert not (tmp_path / SPEED_CONTROL_FILE).exists()


def test_speed_control_only_with_double_dash_flags(mocked, tmp_path):
    _serve_all(mocked)

    assert not main(["--type", "speed-control", "--output", str(tmp_path), "--verbose"])

    assert (tmp_path / SPEED_CONTROL_FILE).exists()
    assert not (tmp_path / RESTRICTIONS_FILE).exists()


def test_output_directory_is_created(mocked, tmp_path):
    _serve_all(mocked)
    target = tmp_path / "nested" / "gpx"

    assert not main(["-type", "restrictions", "-output", str(target)])

    assert (target / RESTRICTIONS_FILE).is_file()


def test_unknown_type_fails(tmp_path):
    assert main(["-type", "weather", "-output", str(tmp_path)])
    assert list(tmp_path.iterdir()) == []


def test_download_failure_fails(mocked, tmp_path):
    mocked.add(responses.GET, EAL, body=requests.ConnectionError("unreachable"))

    assert main(["-type", "restrictions", "-output", str(tmp_path)])
    assert not (tmp_path / RESTRICTIONS_FILE).exists()


def test_unknown_flag_exits_with_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        main(["-bogus"])
    assert excinfo.value.code == 2