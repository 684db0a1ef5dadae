"""The projection extension."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar

from stacfile.extensions.base import (
    Extension,
    _as_float,
    _as_object,
    _as_str,
    _as_uint,
    _check_mapping,
    _list_of,
    _optional,
    _required,
    _without_none,
)


@dataclass
class Centroid:
    """The centroid of an item's geometry, in latitude and longitude."""

    lat: float
    lon: float

    def to_dict(self) -> dict[str, float]:
        return {"lat": self.lat, "lon": self.lon}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Centroid:
        data = _check_mapping(data, "centroid")
        return cls(
            lat=_required(data, "lat", _as_float),
            lon=_required(data, "lon", _as_float),
        )


def _as_centroid(field: Any, key: str) -> Centroid:
    return Centroid.from_dict(_check_mapping(field, f'field "{key}"'))


@dataclass
class Projection(Extension):
    """The projection extension fields."""

    IDENTIFIER: ClassVar[str] = (
        "https://stac-extensions.github.io/projection/v2.0.0/schema.json"
    )
    PREFIX: ClassVar[str] = "proj"

    code: str | None = None
    wkt2: str | None = None
    projjson: dict[str, Any] | None = None
    geometry: dict[str, Any] | None = None
    bbox: list[float] | None = None
    centroid: Centroid | None = None
    shape: list[int] | None = None
    transform: list[float] | None = None

    def is_empty(self) -> bool:
        """Return True if no field is set."""
        return not self.to_fields()

    def to_fields(self) -> dict[str, Any]:
        return _without_none(
            {
                "code": self.code,
                "wkt2": self.wkt2,
                "projjson": copy.deepcopy(self.projjson),
                "geometry": copy.deepcopy(self.geometry),
                "bbox": None if self.bbox is None else list(self.bbox),
                "centroid": None if self.centroid is None else self.centroid.to_dict(),
                "shape": None if self.shape is None else list(self.shape),
                "transform": None if self.transform is None else list(self.transform),
            }
        )

    @classmethod
    def from_fields(cls, fields: Mapping[str, Any]) -> Projection:
        fields = _check_mapping(fields, "projection fields")
        return cls(
            code=_optional(fields, "code", _as_str),
            wkt2=_optional(fields, "wkt2", _as_str),
            projjson=_optional(fields, "projjson", _as_object),
            geometry=_optional(fields, "geometry", _as_object),
            bbox=_optional(fields, "bbox", _list_of(_as_float)),
            centroid=_optional(fields, "centroid", _as_centroid),
            shape=_optional(fields, "shape", _list_of(_as_uint)),
            transform=_optional(fields, "transform", _list_of(_as_float)),
        )