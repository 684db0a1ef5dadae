"""Reading and writing STAC values as JSON and newline-delimited JSON."""

from __future__ import annotations

import json
import os
from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Union

from stacfile.errors import ScalarJsonError, StacError
from stacfile.value import Value, ValueType, item_collection_from_items, value_from_dict

PathLike = Union[str, "os.PathLike[str]"]


def _decode(data: bytes | str) -> Any:
    try:
        return json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as error:
        raise StacError(f"invalid JSON: {error}") from error


def _jsonable(value: Any) -> Any:
    return value.data if isinstance(value, Value) else value


def _dumps(obj: Any, pretty: bool = False) -> str:
    if pretty:
        return json.dumps(obj, indent=2, ensure_ascii=False)
    return json.dumps(obj, separators=(",", ":"), ensure_ascii=False)


def _values_into_value(values: list[Value]) -> Value:
    if len(values) == 1:
        return values[0]
    return item_collection_from_items(values)


def _ndjson_lines(data: bytes | str) -> Iterator[str]:
    text = data.decode("utf-8") if isinstance(data, (bytes, bytearray)) else data
    for line in text.splitlines():
        if line.strip():
            yield line


def from_json_bytes(data: bytes | str) -> Value:
    """Parse a STAC value from JSON text."""
    return value_from_dict(_decode(data))


def from_ndjson_bytes(data: bytes | str) -> Value:
    """Parse newline-delimited JSON.

    A single line gives that value; any other number of lines gives an item
    collection, and then every line must be an item.
    """
    try:
        lines = list(_ndjson_lines(data))
    except UnicodeDecodeError as error:
        raise StacError(f"invalid JSON: {error}") from error
    return _values_into_value([from_json_bytes(line) for line in lines])


def to_json_bytes(value: Any, pretty: bool = False) -> bytes:
    """Serialize a value (a Value or plain JSON data) to JSON bytes."""
    return _dumps(_jsonable(value), pretty).encode("utf-8")


def _ndjson_objects(value: Any) -> Iterable[Any]:
    if isinstance(value, Value):
        if value.kind is ValueType.ITEM_COLLECTION:
            return value.data.get("features", [])
        return [value.data]
    if isinstance(value, Mapping):
        if value.get("type") == "FeatureCollection":
            return value.get("features", [])
        return [value]
    if isinstance(value, list):
        return value
    raise ScalarJsonError(value)


def to_ndjson_bytes(value: Any) -> bytes:
    """Serialize a value as newline-delimited JSON.

    Item collections and arrays are written one element per line; any other
    object is written as a single line.
    """
    return "".join(_dumps(obj) + "\n" for obj in _ndjson_objects(value)).encode("utf-8")


def from_json_path(path: PathLike) -> Value:
    """Read a JSON file, setting the value's self href to the path."""
    with open(path, "rb") as file:
        data = file.read()
    value = from_json_bytes(data)
    value.self_href = os.fspath(path)
    return value


def from_ndjson_path(path: PathLike) -> Value:
    """Read a newline-delimited JSON file, setting the value's self href to the path."""
    with open(path, "rb") as file:
        data = file.read()
    value = from_ndjson_bytes(data)
    value.self_href = os.fspath(path)
    return value


def to_json_path(value: Any, path: PathLike, pretty: bool = False) -> None:
    """Write a value to a path as JSON."""
    data = to_json_bytes(value, pretty)
    with open(path, "wb") as file:
        file.write(data)


def to_ndjson_path(value: Any, path: PathLike) -> None:
    """Write a value to a path as newline-delimited JSON."""
    data = to_ndjson_bytes(value)
    with open(path, "wb") as file:
        file.write(data)