"""The electro-optical extension: spectral bands and cover estimates."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar

from stacfile.extensions.base import (
    Extension,
    _as_float,
    _as_str,
    _check_mapping,
    _list_of,
    _optional,
    _without_none,
)


@dataclass
class Band:
    """A spectral band of an asset."""

    name: str | None = None
    common_name: str | None = None
    description: str | None = None
    center_wavelength: float | None = None
    full_width_half_max: float | None = None
    solar_illumination: float | None = None

    def to_dict(self) -> dict[str, Any]:
        return _without_none(
            {
                "name": self.name,
                "common_name": self.common_name,
                "description": self.description,
                "center_wavelength": self.center_wavelength,
                "full_width_half_max": self.full_width_half_max,
                "solar_illumination": self.solar_illumination,
            }
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Band:
        data = _check_mapping(data, "band")
        return cls(
            name=_optional(data, "name", _as_str),
            common_name=_optional(data, "common_name", _as_str),
            description=_optional(data, "description", _as_str),
            center_wavelength=_optional(data, "center_wavelength", _as_float),
            full_width_half_max=_optional(data, "full_width_half_max", _as_float),
            solar_illumination=_optional(data, "solar_illumination", _as_float),
        )


def _as_band(value: Any, key: str) -> Band:
    return Band.from_dict(_check_mapping(value, f'field "{key}"'))


@dataclass
class ElectroOptical(Extension):
    """The electro-optical extension fields."""

    IDENTIFIER: ClassVar[str] = "https://stac-extensions.github.io/eo/v1.1.0/schema.json"
    PREFIX: ClassVar[str] = "eo"

    bands: list[Band] = field(default_factory=list)
    cloud_cover: float | None = None
    snow_cover: float | None = None

    def to_fields(self) -> dict[str, Any]:
        return _without_none(
            {
                "bands": [band.to_dict() for band in self.bands] if self.bands else None,
                "cloud_cover": self.cloud_cover,
                "snow_cover": self.snow_cover,
            }
        )

    @classmethod
    def from_fields(cls, fields: Mapping[str, Any]) -> ElectroOptical:
        fields = _check_mapping(fields, "electro-optical fields")
        return cls(
            bands=_optional(fields, "bands", _list_of(_as_band)) or [],
            cloud_cover=_optional(fields, "cloud_cover", _as_float),
            snow_cover=_optional(fields, "snow_cover", _as_float),
        )