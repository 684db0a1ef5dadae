"""The raster extension: per-band information about raster assets."""

from __future__ import annotations

import copy
import enum
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar

from stacfile.errors import StacError
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


class Sampling(enum.Enum):
    """Whether a pixel samples its whole area or the point at its center."""

    AREA = "area"
    POINT = "point"


def _as_sampling(value: Any, key: str) -> Sampling:
    try:
        return Sampling(value)
    except ValueError:
        raise StacError(f'field "{key}" must be "area" or "point"') from None


@dataclass
class Histogram:
    """The distribution of a band's pixel values, sampled in buckets."""

    count: int
    min: float
    max: float
    buckets: list[int]

    def to_dict(self) -> dict[str, Any]:
        return {
            "count": self.count,
            "min": self.min,
            "max": self.max,
            "buckets": list(self.buckets),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Histogram:
        data = _check_mapping(data, "histogram")
        return cls(
            count=_required(data, "count", _as_uint),
            min=_required(data, "min", _as_float),
            max=_required(data, "max", _as_float),
            buckets=_required(data, "buckets", _list_of(_as_uint)),
        )


def _as_histogram(value: Any, key: str) -> Histogram:
    return Histogram.from_dict(_check_mapping(value, f'field "{key}"'))


@dataclass
class Band:
    """One band of a raster asset."""

    nodata: float | None = None
    sampling: Sampling | None = None
    data_type: str | None = None
    bits_per_sample: int | None = None
    spatial_resolution: float | None = None
    statistics: dict[str, Any] | None = None
    unit: str | None = None
    scale: float | None = None
    offset: float | None = None
    histogram: Histogram | None = None

    def to_dict(self) -> dict[str, Any]:
        return _without_none(
            {
                "nodata": self.nodata,
                "sampling": None if self.sampling is None else self.sampling.value,
                "data_type": self.data_type,
                "bits_per_sample": self.bits_per_sample,
                "spatial_resolution": self.spatial_resolution,
                "statistics": copy.deepcopy(self.statistics),
                "unit": self.unit,
                "scale": self.scale,
                "offset": self.offset,
                "histogram": None if self.histogram is None else self.histogram.to_dict(),
            }
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Band:
        data = _check_mapping(data, "band")
        return cls(
            nodata=_optional(data, "nodata", _as_float),
            sampling=_optional(data, "sampling", _as_sampling),
            data_type=_optional(data, "data_type", _as_str),
            bits_per_sample=_optional(data, "bits_per_sample", _as_uint),
            spatial_resolution=_optional(data, "spatial_resolution", _as_float),
            statistics=_optional(data, "statistics", _as_object),
            unit=_optional(data, "unit", _as_str),
            scale=_optional(data, "scale", _as_float),
            offset=_optional(data, "offset", _as_float),
            histogram=_optional(data, "histogram", _as_histogram),
        )


def _as_band(value: Any, key: str) -> Band:
    return Band.from_dict(_check_mapping(value, f'field "{key}"'))


@dataclass
class Raster(Extension):
    """The raster extension fields."""

    IDENTIFIER: ClassVar[str] = (
        "https://stac-extensions.github.io/raster/v1.1.0/schema.json"
    )
    PREFIX: ClassVar[str] = "raster"

    bands: list[Band] = field(default_factory=list)

    def is_empty(self) -> bool:
        """Return True if there are no bands."""
        return not self.bands

    def to_fields(self) -> dict[str, Any]:
        return {"bands": [band.to_dict() for band in self.bands]}

    @classmethod
    def from_fields(cls, fields: Mapping[str, Any]) -> Raster:
        fields = _check_mapping(fields, "raster fields")
        return cls(bands=_required(fields, "bands", _list_of(_as_band)))