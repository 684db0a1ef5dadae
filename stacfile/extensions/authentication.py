"""The authentication extension: how to access assets and links."""

from __future__ import annotations

import copy
import enum
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, Union

from stacfile.errors import StacError
from stacfile.extensions.base import (
    Extension,
    _as_object,
    _as_str,
    _check_mapping,
    _list_of,
    _optional,
    _required,
    _without_none,
)


class In(enum.Enum):
    """Where an API key or parameter is carried."""

    QUERY = "query"
    HEADER = "header"
    COOKIE = "cookie"


def _as_in(value: Any, key: str) -> In:
    try:
        return In(value)
    except ValueError:
        raise StacError(f'field "{key}" must be "query", "header" or "cookie"') from None


def _as_bool(value: Any, key: str) -> bool:
    if not isinstance(value, bool):
        raise StacError(f'field "{key}" must be a boolean')
    return value


def _dict_of(parse: Callable[[Any, str], Any]) -> Callable[[Any, str], dict[str, Any]]:
    def parse_dict(value: Any, key: str) -> dict[str, Any]:
        mapping = _check_mapping(value, f'field "{key}"')
        return {name: parse(element, f"{key}.{name}") for name, element in mapping.items()}

    return parse_dict


@dataclass
class Parameter:
    """A request parameter for a signed URL authorization API."""

    in_: str
    required: bool
    schema: dict[str, Any]
    description: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _without_none(
            {
                "in": self.in_,
                "required": self.required,
                "description": self.description,
                "schema": copy.deepcopy(self.schema),
            }
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Parameter:
        data = _check_mapping(data, "parameter")
        return cls(
            in_=_required(data, "in", _as_str),
            required=_required(data, "required", _as_bool),
            description=_optional(data, "description", _as_str),
            schema=_required(data, "schema", _as_object),
        )


def _as_parameter(value: Any, key: str) -> Parameter:
    return Parameter.from_dict(_check_mapping(value, f'field "{key}"'))


@dataclass
class OAuth2Flow:
    """An OAuth2 flow, following the OpenAPI OAuth flow object."""

    scopes: dict[str, str] = field(default_factory=dict)
    authorization_url: str | None = None
    token_url: str | None = None
    refresh_url: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _without_none(
            {
                "authorizationUrl": self.authorization_url,
                "tokenUrl": self.token_url,
                "scopes": dict(self.scopes),
                "refreshUrl": self.refresh_url,
            }
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> OAuth2Flow:
        data = _check_mapping(data, "flow")
        return cls(
            authorization_url=_optional(data, "authorizationUrl", _as_str),
            token_url=_optional(data, "tokenUrl", _as_str),
            scopes=_required(data, "scopes", _dict_of(_as_str)),
            refresh_url=_optional(data, "refreshUrl", _as_str),
        )


@dataclass
class SignedUrlFlow:
    """A signed URL flow."""

    method: str
    parameters: dict[str, Parameter] = field(default_factory=dict)
    authorization_api: str | None = None
    response_field: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _without_none(
            {
                "method": self.method,
                "authorizationApi": self.authorization_api,
                "parameters": (
                    {name: p.to_dict() for name, p in self.parameters.items()}
                    if self.parameters
                    else None
                ),
                "responseField": self.response_field,
            }
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SignedUrlFlow:
        data = _check_mapping(data, "flow")
        return cls(
            method=_required(data, "method", _as_str),
            authorization_api=_optional(data, "authorizationApi", _as_str),
            parameters=_required(data, "parameters", _dict_of(_as_parameter)),
            response_field=_optional(data, "responseField", _as_str),
        )


Flow = Union[OAuth2Flow, SignedUrlFlow]


def parse_flow(data: Mapping[str, Any]) -> Flow:
    """Parse a flow object, trying an OAuth2 flow first and then a signed URL flow."""
    data = _check_mapping(data, "flow")
    errors = []
    for flow_type in (OAuth2Flow, SignedUrlFlow):
        try:
            return flow_type.from_dict(data)
        except StacError as error:
            errors.append(str(error))
    raise StacError(
        "flow matches neither an OAuth2 flow nor a signed URL flow: " + "; ".join(errors)
    )


def _as_flow(value: Any, key: str) -> Flow:
    return parse_flow(_check_mapping(value, f'field "{key}"'))


@dataclass
class Scheme:
    """An authentication scheme, extending the OpenAPI security scheme object."""

    type: str
    description: str | None = None
    name: str | None = None
    in_: In | None = None
    scheme: str | None = None
    flows: dict[str, Flow] = field(default_factory=dict)
    open_id_connect_url: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the scheme as a JSON object."""
        return _without_none(
            {
                "type": self.type,
                "description": self.description,
                "name": self.name,
                "in": None if self.in_ is None else self.in_.value,
                "scheme": self.scheme,
                "flows": (
                    {name: flow.to_dict() for name, flow in self.flows.items()}
                    if self.flows
                    else None
                ),
                "openIdConnectUrl": self.open_id_connect_url,
            }
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Scheme:
        """Build a scheme from a JSON object."""
        data = _check_mapping(data, "scheme")
        return cls(
            type=_required(data, "type", _as_str),
            description=_optional(data, "description", _as_str),
            name=_optional(data, "name", _as_str),
            in_=_optional(data, "in", _as_in),
            scheme=_optional(data, "scheme", _as_str),
            flows=_optional(data, "flows", _dict_of(_as_flow)) or {},
            open_id_connect_url=_optional(data, "openIdConnectUrl", _as_str),
        )


def _as_scheme(value: Any, key: str) -> Scheme:
    return Scheme.from_dict(_check_mapping(value, f'field "{key}"'))


@dataclass
class Authentication(Extension):
    """The authentication extension fields."""

    IDENTIFIER: ClassVar[str] = (
        "https://stac-extensions.github.io/authentication/v1.1.0/schema.json"
    )
    PREFIX: ClassVar[str] = "auth"

    schemes: dict[str, Scheme] = field(default_factory=dict)
    refs: list[str] = field(default_factory=list)

    def to_fields(self) -> dict[str, Any]:
        fields: dict[str, Any] = {}
        if self.schemes:
            fields["schemes"] = {name: s.to_dict() for name, s in self.schemes.items()}
        if self.refs:
            fields["refs"] = list(self.refs)
        return fields

    @classmethod
    def from_fields(cls, fields: Mapping[str, Any]) -> Authentication:
        fields = _check_mapping(fields, "authentication fields")
        return cls(
            schemes=_optional(fields, "schemes", _dict_of(_as_scheme)) or {},
            refs=_optional(fields, "refs", _list_of(_as_str)) or [],
        )