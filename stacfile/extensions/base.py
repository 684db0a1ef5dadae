"""Reading and writing STAC extension data on items, catalogs and collections."""

from __future__ import annotations

import abc
import copy
import itertools
from collections.abc import Callable, Mapping, MutableMapping
from typing import Any, ClassVar, TypeVar, Union

from stacfile.errors import IncorrectTypeError, StacError
from stacfile.value import Value

_EXTENSIONS_SITE = "https://stac-extensions.github.io/"

E = TypeVar("E", bound="Extension")
Target = Union[Value, MutableMapping[str, Any]]


def identifier_prefix(identifier: str) -> str:
    """Return everything in a schema identifier up to its version segment."""
    if not identifier.startswith(_EXTENSIONS_SITE):
        raise ValueError(f"not a stac-extensions identifier: {identifier}")
    index = identifier.find("/", len(_EXTENSIONS_SITE))
    if index < 0:
        raise ValueError(f"identifier has no first path segment: {identifier}")
    return identifier[: index + 1]


class Extension(abc.ABC):
    """Data belonging to one STAC extension, stored under a field prefix."""

    IDENTIFIER: ClassVar[str]
    PREFIX: ClassVar[str]

    @abc.abstractmethod
    def to_fields(self) -> dict[str, Any]:
        """Return the extension's fields as JSON, without their prefix."""

    @classmethod
    @abc.abstractmethod
    def from_fields(cls: type[E], fields: Mapping[str, Any]) -> E:
        """Build the extension from unprefixed JSON fields."""


def _document(value: Target) -> MutableMapping[str, Any]:
    if isinstance(value, Value):
        data: MutableMapping[str, Any] = value.data
    elif isinstance(value, MutableMapping):
        data = value
    else:
        raise TypeError(f"cannot hold extensions: {type(value).__name__}")
    if data.get("type") == "FeatureCollection":
        raise IncorrectTypeError(
            actual="ItemCollection", expected="Item, Catalog or Collection"
        )
    return data


def _fields(value: Target) -> MutableMapping[str, Any]:
    data = _document(value)
    if data.get("type") != "Feature":
        return data
    properties = data.setdefault("properties", {})
    if not isinstance(properties, MutableMapping):
        raise StacError('item "properties" must be an object')
    return properties


def _extension_list(value: Target) -> list[str]:
    data = _document(value)
    extensions = data.setdefault("stac_extensions", [])
    if not isinstance(extensions, list):
        raise StacError('"stac_extensions" must be an array')
    return extensions


def _dedup(items: list[str]) -> None:
    items[:] = [key for key, _ in itertools.groupby(items)]


def fields_with_prefix(value: Target, prefix: str) -> dict[str, Any]:
    """Return copies of the fields named ``prefix:...``, with the prefix removed."""
    marker = f"{prefix}:"
    return {
        key[len(marker):]: copy.deepcopy(field)
        for key, field in _fields(value).items()
        if key.startswith(marker)
    }


def remove_fields_with_prefix(value: Target, prefix: str) -> None:
    """Delete every field named ``prefix:...``."""
    marker = f"{prefix}:"
    fields = _fields(value)
    for key in [key for key in fields if key.startswith(marker)]:
        del fields[key]


def _set_fields_with_prefix(value: Target, prefix: str, new_fields: Mapping[str, Any]) -> None:
    fields = _fields(value)
    for key, field in new_fields.items():
        fields[f"{prefix}:{key}"] = copy.deepcopy(field)


def has_extension(value: Target, extension_type: type[Extension]) -> bool:
    """Return True if any listed extension has the extension type's identifier prefix."""
    prefix = identifier_prefix(extension_type.IDENTIFIER)
    extensions = _document(value).get("stac_extensions") or []
    return any(isinstance(ext, str) and ext.startswith(prefix) for ext in extensions)


def get_extension(value: Target, extension_type: type[E]) -> E:
    """Read an extension's data from the object's prefixed fields."""
    return extension_type.from_fields(fields_with_prefix(value, extension_type.PREFIX))


def add_extension(value: Target, extension_type: type[Extension]) -> None:
    """Add the extension's schema identifier to the object's extension list."""
    extensions = _extension_list(value)
    extensions.append(extension_type.IDENTIFIER)
    _dedup(extensions)


def set_extension(value: Target, extension: Extension) -> None:
    """Replace the extension's fields on the object and record its identifier."""
    prefix = type(extension).PREFIX
    add_extension(value, type(extension))
    remove_fields_with_prefix(value, prefix)
    _set_fields_with_prefix(value, prefix, extension.to_fields())


def remove_extension(value: Target, extension_type: type[Extension]) -> None:
    """Remove the extension's fields and every version of its identifier."""
    remove_fields_with_prefix(value, extension_type.PREFIX)
    prefix = identifier_prefix(extension_type.IDENTIFIER)
    extensions = _extension_list(value)
    extensions[:] = [ext for ext in extensions if not ext.startswith(prefix)]


# Field parsers shared by the extension modules.

Parser = Callable[[Any, str], Any]


def _as_str(field: Any, key: str) -> str:
    if not isinstance(field, str):
        raise StacError(f'field "{key}" must be a string')
    return field


def _as_float(field: Any, key: str) -> float:
    if isinstance(field, bool) or not isinstance(field, (int, float)):
        raise StacError(f'field "{key}" must be a number')
    return float(field)


def _as_uint(field: Any, key: str) -> int:
    if isinstance(field, bool) or not isinstance(field, int) or field < 0:
        raise StacError(f'field "{key}" must be a non-negative integer')
    return field


def _as_object(field: Any, key: str) -> dict[str, Any]:
    if not isinstance(field, Mapping):
        raise StacError(f'field "{key}" must be an object')
    return copy.deepcopy(dict(field))


def _list_of(parse: Parser) -> Parser:
    def parse_list(field: Any, key: str) -> list[Any]:
        if not isinstance(field, list):
            raise StacError(f'field "{key}" must be an array')
        return [parse(element, key) for element in field]

    return parse_list


def _check_mapping(fields: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(fields, Mapping):
        raise StacError(f"{what} must be a JSON object")
    return fields


def _optional(fields: Mapping[str, Any], key: str, parse: Parser) -> Any:
    field = fields.get(key)
    return None if field is None else parse(field, key)


def _required(fields: Mapping[str, Any], key: str, parse: Parser) -> Any:
    field = fields.get(key)
    if field is None:
        raise StacError(f'missing field "{key}"')
    return parse(field, key)


def _without_none(fields: Mapping[str, Any]) -> dict[str, Any]:
    return {key: field for key, field in fields.items() if field is not None}