"""Conversion of LKS-94 (EPSG:3346) grid coordinates to WGS84 (EPSG:4326)."""

from __future__ import annotations

import math

_A = 6378137.0
_F_GRS80 = 1.0 / 298.257222101
_F_WGS84 = 1.0 / 298.257223563
_E2_GRS80 = _F_GRS80 * (2.0 - _F_GRS80)
_E2_WGS84 = _F_WGS84 * (2.0 - _F_WGS84)

# LKS-94: transverse Mercator on GRS80, central meridian 24°, k0 0.9998, FE 500000.
_LON0 = math.radians(24.0)
_K0 = 0.9998
_FALSE_EASTING = 500000.0

_N = _F_GRS80 / (2.0 - _F_GRS80)
_RECTIFYING_RADIUS = _A / (1.0 + _N) * (1.0 + _N**2 / 4.0 + _N**4 / 64.0)
_BETA = (
    _N / 2.0 - 2.0 / 3.0 * _N**2 + 37.0 / 96.0 * _N**3 - 1.0 / 360.0 * _N**4,
    1.0 / 48.0 * _N**2 + 1.0 / 15.0 * _N**3 - 437.0 / 1440.0 * _N**4,
    17.0 / 480.0 * _N**3 - 37.0 / 840.0 * _N**4,
    4397.0 / 161280.0 * _N**4,
)
_DELTA = (
    2.0 * _N - 2.0 / 3.0 * _N**2 - 2.0 * _N**3 + 116.0 / 45.0 * _N**4,
    7.0 / 3.0 * _N**2 - 8.0 / 5.0 * _N**3 - 227.0 / 45.0 * _N**4,
    56.0 / 15.0 * _N**3 - 136.0 / 35.0 * _N**4,
    4279.0 / 630.0 * _N**4,
)


def _inverse_mercator(easting: float, northing: float) -> tuple[float, float]:
    """Return GRS80 longitude and latitude in radians (Krüger series)."""
    scale = _K0 * _RECTIFYING_RADIUS
    xi = northing / scale
    eta = (easting - _FALSE_EASTING) / scale
    terms = list(enumerate(_BETA, start=1))
    xi_p = xi - sum(b * math.sin(2 * j * xi) * math.cosh(2 * j * eta) for j, b in terms)
    eta_p = eta - sum(b * math.cos(2 * j * xi) * math.sinh(2 * j * eta) for j, b in terms)
    chi = math.asin(math.sin(xi_p) / math.cosh(eta_p))
    lat = chi + sum(d * math.sin(2 * j * chi) for j, d in enumerate(_DELTA, start=1))
    lon = _LON0 + math.atan2(math.sinh(eta_p), math.cos(xi_p))
    return lon, lat


def _to_geocentric(lon: float, lat: float) -> tuple[float, float, float]:
    n = _A / math.sqrt(1.0 - _E2_GRS80 * math.sin(lat) ** 2)
    return (
        n * math.cos(lat) * math.cos(lon),
        n * math.cos(lat) * math.sin(lon),
        n * (1.0 - _E2_GRS80) * math.sin(lat),
    )


def _from_geocentric(x: float, y: float, z: float) -> tuple[float, float]:
    p = math.hypot(x, y)
    lat = math.atan2(z, p * (1.0 - _E2_WGS84))
    for _ in range(20):
        n = _A / math.sqrt(1.0 - _E2_WGS84 * math.sin(lat) ** 2)
        height = p / math.cos(lat) - n
        updated = math.atan2(z, p * (1.0 - _E2_WGS84 * n / (n + height)))
        if abs(updated - lat) < 1e-15:
            lat = updated
            break
        lat = updated
    return math.atan2(y, x), lat


def lks94_to_wgs84(easting: float, northing: float) -> tuple[float, float]:
    """Transform LKS-94 easting/northing to WGS84 (latitude, longitude) in degrees."""
    lon, lat = _from_geocentric(*_to_geocentric(*_inverse_mercator(easting, northing)))
    return math.degrees(lat), math.degrees(lon)