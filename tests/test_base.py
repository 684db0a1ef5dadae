import pytest

from stacfile.errors import IncorrectTypeError
from stacfile.extensions.base import (
    add_extension,
    fields_with_prefix,
    get_extension,
    has_extension,
    identifier_prefix,
    remove_extension,
    remove_fields_with_prefix,
    set_extension,
)
from stacfile.extensions.projection import Projection
from stacfile.extensions.raster import Raster
from stacfile.value import item_collection_from_items, value_from_dict


def make_item(properties=None, extensions=None):
    data = {
        "type": "Feature",
        "stac_version": "1.0.0",
        "id": "an-id",
        "geometry": None,
        "properties": properties or {},
        "links": [],
        "assets": {},
    }
    if extensions is not None:
        data["stac_extensions"] = extensions
    return value_from_dict(data)


def make_catalog():
    return value_from_dict(
        {
            "type": "Catalog",
            "stac_version": "1.0.0",
            "id": "an-id",
            "description": "a description",
            "links": [],
        }
    )


def test_identifier_prefix():
    assert identifier_prefix(Raster.IDENTIFIER) == "https://stac-extensions.github.io/raster/"
    assert (
        identifier_prefix(Projection.IDENTIFIER)
        == "https://stac-extensions.github.io/projection/"
    )


def test_identifier_prefix_rejects_other_sites():
    with pytest.raises(ValueError):
        identifier_prefix("https://schemas.stacspec.org/v1.0.0/item.json")


def test_remove_extension():
    item = make_item(
        properties={"proj:code": "EPSG:4326"},
        extensions=["https://stac-extensions.github.io/projection/v2.0.0/schema.json"],
    )
    assert has_extension(item, Projection)
    remove_extension(item, Projection)
    assert not has_extension(item, Projection)
    assert item.data["stac_extensions"] == []
    assert item.data["properties"] == {}


def test_new_item_has_no_extension():
    item = make_item()
    assert not has_extension(item, Projection)


def test_set_extension_then_has_extension():
    item = make_item()
    set_extension(item, Projection(code="EPSG:4326"))
    assert has_extension(item, Projection)
    assert item.data["properties"]["proj:code"] == "EPSG:4326"
    assert item.data["stac_extensions"] == [Projection.IDENTIFIER]


def test_set_extension_replaces_old_fields():
    item = make_item(properties={"proj:wkt2": "old", "other": 1})
    set_extension(item, Projection(code="EPSG:4326"))
    assert item.data["properties"] == {"other": 1, "proj:code": "EPSG:4326"}


def test_add_extension_deduplicates():
    item = make_item()
    add_extension(item, Projection)
    add_extension(item, Projection)
    assert item.data["stac_extensions"] == [Projection.IDENTIFIER]


def test_fields_with_prefix_strips_prefix():
    item = make_item(properties={"proj:code": "EPSG:32614", "eo:cloud_cover": 3})
    assert fields_with_prefix(item, "proj") == {"code": "EPSG:32614"}


def test_remove_fields_with_prefix_keeps_others():
    item = make_item(properties={"proj:code": "EPSG:32614", "eo:cloud_cover": 3})
    remove_fields_with_prefix(item, "proj")
    assert item.data["properties"] == {"eo:cloud_cover": 3}


def test_get_extension_round_trip():
    item = make_item()
    set_extension(item, Projection(code="EPSG:32614", shape=[10, 20]))
    assert get_extension(item, Projection) == Projection(code="EPSG:32614", shape=[10, 20])


def test_catalog_fields_are_top_level():
    catalog = make_catalog()
    set_extension(catalog, Projection(code="EPSG:4326"))
    assert catalog.data["proj:code"] == "EPSG:4326"
    remove_extension(catalog, Projection)
    assert "proj:code" not in catalog.data
    assert not has_extension(catalog, Projection)


def test_item_collection_rejected():
    collection = item_collection_from_items([make_item()])
    with pytest.raises(IncorrectTypeError):
        set_extension(collection, Projection(code="EPSG:4326"))


def test_plain_dict_supported():
    data = {"type": "Feature", "id": "x", "properties": {}}
    set_extension(data, Projection(code="EPSG:4326"))
    assert data["properties"] == {"proj:code": "EPSG:4326"}
    assert has_extension(data, Projection)