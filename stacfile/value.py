"""A container that can hold any kind of STAC object."""

from __future__ import annotations

import copy
import enum
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Union

from stacfile.errors import IncorrectTypeError, StacError


class ValueType(enum.Enum):
    """The kinds of STAC object, named as they are reported to users."""

    ITEM = "Item"
    CATALOG = "Catalog"
    COLLECTION = "Collection"
    ITEM_COLLECTION = "ItemCollection"

    @property
    def type_field(self) -> str:
        """The value of the JSON ``type`` field for this kind."""
        return _TYPE_FIELDS[self]


_TYPE_FIELDS = {
    ValueType.ITEM: "Feature",
    ValueType.CATALOG: "Catalog",
    ValueType.COLLECTION: "Collection",
    ValueType.ITEM_COLLECTION: "FeatureCollection",
}
_BY_TYPE_FIELD = {field: kind for kind, field in _TYPE_FIELDS.items()}


@dataclass
class Value:
    """A STAC Item, Catalog, Collection or ItemCollection as a JSON object."""

    kind: ValueType
    data: dict[str, Any]
    self_href: str | None = None

    def is_item(self) -> bool:
        return self.kind is ValueType.ITEM

    def is_catalog(self) -> bool:
        return self.kind is ValueType.CATALOG

    def is_collection(self) -> bool:
        return self.kind is ValueType.COLLECTION

    def is_item_collection(self) -> bool:
        return self.kind is ValueType.ITEM_COLLECTION

    def type_name(self) -> str:
        """Return "Item", "Catalog", "Collection" or "ItemCollection"."""
        return self.kind.value

    def links(self) -> list[dict[str, Any]]:
        """Return the object's link list; changes to it change the object."""
        return self.data.setdefault("links", [])

    def to_dict(self) -> dict[str, Any]:
        """Return a deep copy of the JSON object."""
        return copy.deepcopy(self.data)

    def as_item(self) -> dict[str, Any] | None:
        return self.data if self.is_item() else None

    def as_catalog(self) -> dict[str, Any] | None:
        return self.data if self.is_catalog() else None

    def as_collection(self) -> dict[str, Any] | None:
        return self.data if self.is_collection() else None

    def _into(self, kind: ValueType) -> dict[str, Any]:
        if self.kind is not kind:
            raise IncorrectTypeError(actual=self.type_name(), expected=kind.value)
        return self.data

    def into_item(self) -> dict[str, Any]:
        """Return the item, or raise IncorrectTypeError."""
        return self._into(ValueType.ITEM)

    def into_catalog(self) -> dict[str, Any]:
        """Return the catalog, or raise IncorrectTypeError."""
        return self._into(ValueType.CATALOG)

    def into_collection(self) -> dict[str, Any]:
        """Return the collection, or raise IncorrectTypeError."""
        return self._into(ValueType.COLLECTION)

    def into_item_collection(self) -> Value:
        """Return an item collection; a single item is wrapped into one."""
        if self.is_item_collection():
            return self
        if self.is_item():
            return item_collection_from_items([self])
        raise IncorrectTypeError(actual=self.type_name(), expected="ItemCollection")


def _check_object(data: dict[str, Any], kind: ValueType) -> None:
    if not isinstance(data.get("id"), str):
        raise StacError(f'{kind.value} requires a string "id" field')
    links = data.get("links", [])
    if not isinstance(links, list):
        raise StacError(f'{kind.value} "links" must be an array')


def value_from_dict(data: Mapping[str, Any]) -> Value:
    """Build a Value from a parsed JSON object, dispatching on its ``type``."""
    if not isinstance(data, Mapping):
        raise StacError("a STAC value must be a JSON object")
    type_field = data.get("type")
    if not isinstance(type_field, str):
        raise StacError('a STAC value requires a string "type" field')
    kind = _BY_TYPE_FIELD.get(type_field)
    if kind is None:
        raise StacError(f"unknown STAC type: {type_field}")
    body = copy.deepcopy(dict(data))
    if kind is ValueType.ITEM_COLLECTION:
        features = body.setdefault("features", [])
        if not isinstance(features, list):
            raise StacError('ItemCollection "features" must be an array')
        body["features"] = [value_from_dict(feature).into_item() for feature in features]
    else:
        _check_object(body, kind)
    return Value(kind, body)


def item_collection_from_items(items: Iterable[Union[Value, Mapping[str, Any]]]) -> Value:
    """Build an ItemCollection value from items given as Values or dicts."""
    features = []
    for item in items:
        value = item if isinstance(item, Value) else value_from_dict(item)
        features.append(copy.deepcopy(value.into_item()))
    return Value(
        ValueType.ITEM_COLLECTION,
        {"type": "FeatureCollection", "features": features},
    )