# ltroadinfo

Fetches current road information from Lithuanian traffic services and writes it as GPX 1.1 files, ready to load into navigation apps.

Two data sets are available:

- **Road restrictions**: road works and other restrictions, written to `lt-road-restrictions.gpx`.
- **Speed control sections**: average-speed control sections, written to `lt-speed-control.gpx`.

Both services publish their coordinates in LKS-94 (EPSG:3346). The package converts them to WGS84 latitude/longitude before it writes the GPX tracks.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

Download everything into the current directory. Restrictions are fetched first, then speed control sections:

```
lt-road-info
```

Download only one data set:

```
lt-road-info -type restrictions
lt-road-info -type speed-control
```

Write to a chosen directory and add the source file and line to each log message:

```
lt-road-info -output /path/to/gpx -verbose
```

Flags (each may also be given with two dashes):

| Flag | Default | Meaning |
|------|---------|---------|
| `-output` | `.` | Directory the GPX files are written to. It is created if it does not exist. |
| `-type` | `all` | `all`, `restrictions` or `speed-control` |
| `-verbose` | off | Include source file and line in log messages |
| `-help`, `-h` | | Show help |

Progress is logged to standard error. The command exits with status 1 if the output directory cannot be created, if the type is unknown, or as soon as a download fails.

### Checking coordinates

```
lt-road-verify-coords
```

This downloads both data sets into a temporary directory and reads the files back. For each file it reports how many track points fall inside Lithuania's approximate bounding box and prints up to three sample points. A file fails if fewer than 90% of its points are inside Lithuania, or if any point falls in the area where swapped latitude and longitude would put it. The command exits with status 1 on the first failure, and 0 when both files pass.

## Library use

```python
from ltroadinfo.transform import lks94_to_wgs84
from ltroadinfo.restrictions import download_restrictions
from ltroadinfo.speed_control import download_speed_control_sections
from ltroadinfo.gpx import parse_gpx

lat, lon = lks94_to_wgs84(581234, 6095678)   # about (54.990387, 25.269384)

download_restrictions("restrictions.gpx")
download_speed_control_sections("speed.gpx")

for track in parse_gpx("speed.gpx"):
    print(track.name, sum(len(segment) for segment in track.segments))
```

The download functions also take an optional `requests.Session`, so you can supply your own headers, proxies or test adapters.

### Modules

- `ltroadinfo.transform`: `lks94_to_wgs84(easting, northing)` returns `(latitude, longitude)` in degrees.
- `ltroadinfo.client`: `Client(session=None)` with `fetch_eal_data()` for restriction layers and `fetch_arcgis_data()` for speed control sections. The speed control query is paged using the service's `maxRecordCount` (1000 when the service does not give a positive value), and paging continues while the service reports that its transfer limit was exceeded.
- `ltroadinfo.models`: dataclasses for the service responses (`EALLayer`, `EALFeature`, `EALPoint`, `EALRestriction`, `EALLines`, `ArcGISFeature`, `ArcGISGeometry`, `ArcGISQueryResponse`, `ArcGISServiceInfo`), each built with `from_dict`. Missing or null fields take empty defaults, and fields of the wrong type raise `ValueError`.
- `ltroadinfo.gpx`: `eal_to_gpx(layers, output_path)`, `arcgis_to_gpx(features, output_path)`, `parse_gpx(path)`, and the `Track` and `TrackPoint` records. Track names are built by `restriction_description` and `arcgis_feature_description`:
  - restrictions: `<feature name> - Restriction <icon>`, with ` (<value>)` added when the icon value is positive;
  - speed control: `Speed Control Section <n>`, followed by the road name, road number and speed limit when the section's attributes hold them.

  Coordinates with fewer than two values are skipped, and tracks without any points are left out.
- `ltroadinfo.verify`: `is_in_lithuania`, `is_in_abu_dhabi_area` and `validate_gpx_coordinates(file_path, track_type)`, which prints its report and returns whether the file passed.

### Errors

- `ltroadinfo.client.DataError` is raised when a service cannot be reached or its response cannot be understood.
- `ltroadinfo.gpx.GPXError` is raised when a GPX file cannot be written or read, and by `validate_gpx_coordinates` when a file has no tracks.