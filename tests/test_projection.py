import pytest

from stacfile.errors import StacError
from stacfile.extensions.base import get_extension, has_extension, set_extension
from stacfile.extensions.projection import Centroid, Projection
from stacfile.value import value_from_dict


def proj_example_item():
    return value_from_dict(
        {
            "type": "Feature",
            "stac_version": "1.1.0",
            "stac_extensions": [
                "https://stac-extensions.github.io/projection/v2.0.0/schema.json"
            ],
            "id": "proj-example",
            "geometry": None,
            "properties": {
                "datetime": "2018-10-01T01:08:32.033000Z",
                "proj:code": "EPSG:32614",
                "proj:shape": [8391, 8311],
                "proj:centroid": {"lat": 34.595302, "lon": -101.344483},
            },
            "links": [],
            "assets": {},
        }
    )


def test_example():
    item = proj_example_item()
    projection = get_extension(item, Projection)
    assert projection.code == "EPSG:32614"


def test_example_has_extension():
    assert has_extension(proj_example_item(), Projection)


def test_default_is_empty():
    assert Projection().is_empty()
    assert Projection().to_fields() == {}


def test_with_code_is_not_empty():
    assert not Projection(code="EPSG:4326").is_empty()


def test_set_centroid_round_trip():
    item = proj_example_item()
    projection = get_extension(item, Projection)
    projection.centroid = Centroid(lat=34.595302, lon=-101.344483)
    set_extension(item, projection)
    assert item.data["properties"]["proj:centroid"] == {"lat": 34.595302, "lon": -101.344483}
    assert get_extension(item, Projection) == projection


def test_to_fields_skips_unset():
    projection = Projection(code="EPSG:4326", bbox=[1.0, 2.0, 3.0, 4.0])
    assert projection.to_fields() == {"code": "EPSG:4326", "bbox": [1.0, 2.0, 3.0, 4.0]}


def test_from_fields_round_trip():
    projection = Projection(
        code="EPSG:32614",
        projjson={"type": "ProjectedCRS"},
        geometry={"type": "Point", "coordinates": [1.0, 2.0]},
        shape=[10, 20],
        transform=[30.0, 0.0, 1.0, 0.0, -30.0, 2.0],
    )
    assert Projection.from_fields(projection.to_fields()) == projection


def test_from_fields_ignores_unknown():
    assert Projection.from_fields({"code": "EPSG:4326", "extra": 1}) == Projection(
        code="EPSG:4326"
    )


def test_from_fields_wrong_type():
    with pytest.raises(StacError):
        Projection.from_fields({"code": 4326})


def test_centroid_requires_lat():
    with pytest.raises(StacError):
        Projection.from_fields({"centroid": {"lon": 1.0}})


def test_shape_must_be_non_negative():
    with pytest.raises(StacError):
        Projection.from_fields({"shape": [-1, 2]})