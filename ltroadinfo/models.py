"""Records returned by the road restriction and speed control services."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

Path = list[list[float]]


def _check(value: Any, kinds: tuple[type, ...], default: Any, what: str) -> Any:
    """Return value if it is of one of kinds, default for null, else raise ValueError."""
    if value is None:
        return default
    if bool not in kinds and isinstance(value, bool) or not isinstance(value, kinds):
        raise ValueError(f"{what}: unexpected {type(value).__name__}")
    return value


def _object(data: Any, what: str) -> Mapping[str, Any]:
    return _check(data, (Mapping,), {}, what)


def _number(value: Any, what: str) -> float:
    return float(_check(value, (int, float), 0.0, what))


def _integer(value: Any, what: str) -> int:
    value = _check(value, (int, float), 0, what)
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"{what}: expected an integer, got {value!r}")
    return int(value)


def _array(value: Any, what: str) -> list[Any]:
    return _check(value, (list,), [], what)


def _numbers(value: Any, what: str) -> list[float]:
    return [_number(item, what) for item in _array(value, what)]


def _paths(value: Any, what: str) -> list[Path]:
    return [[_numbers(c, what) for c in _array(p, what)] for p in _array(value, what)]


@dataclass
class EALLines:
    """Geometry lines of a restriction."""

    paths: list[Path] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> EALLines:
        return cls(paths=_paths(_object(data, "lines").get("paths"), "lines.paths"))


@dataclass
class EALRestriction:
    """A single restriction with its geometry."""

    id: str = ""
    icon: str = ""
    icon_value: float = 0.0
    lines: EALLines = field(default_factory=EALLines)

    @classmethod
    def from_dict(cls, data: Any) -> EALRestriction:
        obj = _object(data, "restriction")
        return cls(
            id=_check(obj.get("id"), (str,), "", "restriction.id"),
            icon=_check(obj.get("icon"), (str,), "", "restriction.icon"),
            icon_value=_number(obj.get("iconValue"), "restriction.iconValue"),
            lines=EALLines.from_dict(obj.get("lines")),
        )


@dataclass
class EALPoint:
    """A point with min/max values."""

    min: int = 0
    max: int = 0
    point: list[float] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> EALPoint:
        obj = _object(data, "point")
        return cls(
            min=_integer(obj.get("min"), "point.min"),
            max=_integer(obj.get("max"), "point.max"),
            point=_numbers(obj.get("point"), "point.point"),
        )


@dataclass
class EALFeature:
    """A road restriction feature."""

    id: str = ""
    name: str = ""
    details: bool = False
    icon: str = ""
    points: list[EALPoint] = field(default_factory=list)
    restrictions: list[EALRestriction] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> EALFeature:
        obj = _object(data, "feature")
        return cls(
            id=_check(obj.get("id"), (str,), "", "feature.id"),
            name=_check(obj.get("name"), (str,), "", "feature.name"),
            details=_check(obj.get("details"), (bool,), False, "feature.details"),
            icon=_check(obj.get("icon"), (str,), "", "feature.icon"),
            points=[EALPoint.from_dict(p) for p in _array(obj.get("points"), "feature.points")],
            restrictions=[
                EALRestriction.from_dict(r)
                for r in _array(obj.get("restrictions"), "feature.restrictions")
            ],
        )


@dataclass
class EALLayer:
    """A layer of the road restriction service response."""

    layer: str = ""
    name: str = ""
    features: list[EALFeature] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> EALLayer:
        obj = _object(data, "layer")
        return cls(
            layer=_check(obj.get("layer"), (str,), "", "layer.layer"),
            name=_check(obj.get("name"), (str,), "", "layer.name"),
            features=[
                EALFeature.from_dict(f) for f in _array(obj.get("features"), "layer.features")
            ],
        )


@dataclass
class ArcGISGeometry:
    """Polyline geometry of a speed control section."""

    paths: list[Path] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> ArcGISGeometry:
        return cls(paths=_paths(_object(data, "geometry").get("paths"), "geometry.paths"))


@dataclass
class ArcGISFeature:
    """A speed control section."""

    attributes: dict[str, Any] = field(default_factory=dict)
    geometry: ArcGISGeometry = field(default_factory=ArcGISGeometry)

    @classmethod
    def from_dict(cls, data: Any) -> ArcGISFeature:
        obj = _object(data, "feature")
        return cls(
            attributes=dict(_object(obj.get("attributes"), "feature.attributes")),
            geometry=ArcGISGeometry.from_dict(obj.get("geometry")),
        )


@dataclass
class ArcGISQueryResponse:
    """One page of a feature query."""

    features: list[ArcGISFeature] = field(default_factory=list)
    exceeded_transfer_limit: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> ArcGISQueryResponse:
        obj = _object(data, "query response")
        return cls(
            features=[ArcGISFeature.from_dict(f) for f in _array(obj.get("features"), "features")],
            exceeded_transfer_limit=_check(
                obj.get("exceededTransferLimit"), (bool,), False, "exceededTransferLimit"
            ),
        )


@dataclass
class ArcGISServiceInfo:
    """Service metadata."""

    max_record_count: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> ArcGISServiceInfo:
        obj = _object(data, "service info")
        return cls(max_record_count=_integer(obj.get("maxRecordCount"), "maxRecordCount"))