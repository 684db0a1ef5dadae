# stacfile

`stacfile` reads, writes and inspects STAC objects: items, catalogs, collections and item collections. It also handles a few common STAC extensions.

It uses only the Python standard library.

## Installation

```
pip install stacfile
```

## Reading and writing

`read` picks the format from the file extension:

- `.json` and `.geojson` are read as JSON.
- `.ndjson` is read as newline-delimited JSON.
- Any other extension, or none at all, is read as JSON.

`write` picks the format in the same way.

```python
from stacfile.formats import read, write

value = read("item.json")
print(value.type_name())      # "Item"
item = value.into_item()      # the item as a dict

write("copy.json", value)
write("items.ndjson", value)
```

Reading from a local path resolves the path and stores the absolute path in `value.self_href`. The file must exist; a missing file raises `FileNotFoundError`. Once the file has been found, any other failure to read it is raised as `FromPathError`.

`file://` URLs are read as local paths. `http://` and `https://` URLs are fetched with `urllib`, using the `User-Agent` header that `user_agent()` returns. Any other URL scheme raises `FeatureNotEnabledError`.

### Choosing a format

To choose the format yourself, use a `Format`:

```python
from stacfile.formats import Format, FormatKind, parse_format

fmt = parse_format("json-pretty")
data = fmt.to_bytes(value)
same = fmt.from_bytes(data)

ndjson = Format(FormatKind.NDJSON)
ndjson.write("items.ndjson", value)
```

`parse_format` accepts these names, in any case:

| Name | Format |
| --- | --- |
| `json`, `geojson` | compact JSON |
| `json-pretty`, `geojson-pretty` | JSON indented by two spaces |
| `ndjson` | newline-delimited JSON |

Any other name raises `UnsupportedFormatError`.

`infer_format(href)` returns the format for an href's extension, or `None` if the extension is not recognised.

### Newline-delimited JSON

When newline-delimited JSON is read, blank lines are skipped. The result depends on how many lines remain:

- A single line gives that value.
- Any other number of lines gives an item collection. In that case every line must be an item.

When newline-delimited JSON is written:

- An item collection is written one feature per line.
- A list is written one element per line.
- Any other object is written as a single line.

The lower-level functions are in `stacfile.jsonio`:

- `from_json_bytes` and `to_json_bytes`
- `from_ndjson_bytes` and `to_ndjson_bytes`
- `from_json_path` and `to_json_path`
- `from_ndjson_path` and `to_ndjson_path`

## Values

`value_from_dict` turns a parsed JSON object into a `Value`, choosing the kind from its `type` field:

| `type` field | Kind |
| --- | --- |
| `Feature` | item |
| `Catalog` | catalog |
| `Collection` | collection |
| `FeatureCollection` | item collection |

An unknown `type`, or a `type` that is not a string, raises `StacError`.

```python
from stacfile.value import value_from_dict

value = value_from_dict({
    "type": "Catalog",
    "stac_version": "1.0.0",
    "id": "an-id",
    "description": "a description",
    "links": [],
})
assert value.is_catalog()
assert value.type_name() == "Catalog"
```

Each `Value` has a `kind` (a `ValueType`), a `data` dict and a `self_href`.

- `to_dict()` returns a deep copy of the data.
- `links()` returns the list of links itself, so changing it changes the value.
- `as_item()`, `as_catalog()` and `as_collection()` return the data, or `None` when the value is of another kind.
- `into_item()`, `into_catalog()` and `into_collection()` raise `IncorrectTypeError` when the value is of another kind.
- `into_item_collection()` returns an item collection as it is, and wraps a single item in a new one.

`item_collection_from_items` builds an item collection from items given as `Value` objects or as dicts.

## STAC versions

```python
from stacfile.version import Version, parse_version

version = parse_version("1.1.0")
version.is_known()          # True
str(version)                # "1.1.0"
version == Version.V1_1_0   # True
```

The known versions are `1.0.0`, `1.1.0-beta.1` and `1.1.0`. Any other string becomes an unknown version.

Known versions sort in release order, and they sort before every unknown version.

## Extensions

The functions in `stacfile.extensions.base` take either a `Value` or a plain dict. They accept an item, a catalog or a collection.

For items, the extension fields are read from and written to `properties`. The schema identifiers are kept in `stac_extensions`.

```python
from stacfile.extensions.base import get_extension, has_extension, remove_extension, set_extension
from stacfile.extensions.projection import Projection

if has_extension(item, Projection):
    projection = get_extension(item, Projection)
    print(projection.code)

set_extension(item, Projection(code="EPSG:4326"))
remove_extension(item, Projection)
```

What each function does:

- `has_extension` matches any version of the extension's schema.
- `set_extension` replaces all of the extension's prefixed fields and records its identifier.
- `remove_extension` deletes the fields and every version of the identifier.
- `add_extension` only records the identifier.

The supported extensions are:

| Extension | Module | Class | Field prefix |
| --- | --- | --- | --- |
| Projection | `stacfile.extensions.projection` | `Projection` | `proj` |
| Raster | `stacfile.extensions.raster` | `Raster` | `raster` |
| Electro-optical | `stacfile.extensions.electro_optical` | `ElectroOptical` | `eo` |
| Authentication | `stacfile.extensions.authentication` | `Authentication` | `auth` |

## What it does not do

`stacfile` does not do the following:

- It does not validate objects against the STAC JSON schemas.
- It does not read or write stac-geoparquet.
- It does not talk to cloud object stores.
- It does not migrate objects between specification versions.
- It does not provide a command-line tool.

## Errors

Every error raised for bad STAC data or unsupported formats derives from `stacfile.errors.StacError`.