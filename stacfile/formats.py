"""Formats for STAC data, and reading and writing by href."""

from __future__ import annotations

import enum
import os
import urllib.error
import urllib.parse
import urllib.request
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Union

from stacfile.errors import FeatureNotEnabledError, FromPathError, StacError, UnsupportedFormatError
from stacfile.jsonio import (
    from_json_bytes,
    from_json_path,
    from_ndjson_bytes,
    from_ndjson_path,
    to_json_bytes,
    to_json_path,
    to_ndjson_bytes,
    to_ndjson_path,
)
from stacfile.value import Value

_VERSION = "0.1.0"

Href = Union[str, "os.PathLike[str]"]


class FormatKind(enum.Enum):
    """The encodings STAC data can be stored in."""

    JSON = "json"
    NDJSON = "ndjson"


@dataclass(frozen=True)
class Format:
    """A STAC data format; JSON may be pretty-printed on write."""

    kind: FormatKind = FormatKind.JSON
    pretty: bool = False

    def __post_init__(self) -> None:
        if self.pretty and self.kind is not FormatKind.JSON:
            raise ValueError("only JSON can be pretty-printed")

    def extension(self) -> str:
        """Return the file extension for this format."""
        return self.kind.value

    def __str__(self) -> str:
        if self.kind is FormatKind.JSON and self.pretty:
            return "json-pretty"
        return self.kind.value

    def from_bytes(self, data: bytes | str) -> Value:
        """Parse a STAC value from data in this format."""
        if self.kind is FormatKind.JSON:
            return from_json_bytes(data)
        return from_ndjson_bytes(data)

    def to_bytes(self, value: Any) -> bytes:
        """Serialize a value in this format."""
        if self.kind is FormatKind.JSON:
            return to_json_bytes(value, self.pretty)
        return to_ndjson_bytes(value)

    def from_path(self, path: Href) -> Value:
        """Read a local file in this format.

        Failures to read the file, once it is found, are raised as FromPathError.
        """
        resolved = Path(path).resolve(strict=True)
        try:
            if self.kind is FormatKind.JSON:
                return from_json_path(resolved)
            return from_ndjson_path(resolved)
        except OSError as error:
            raise FromPathError(error, str(resolved)) from error

    def read(self, href: Href) -> Value:
        """Read a value from a local path or an http(s) URL, setting its self href."""
        target = realize_href(href)
        if isinstance(target, Path):
            resolved = target.resolve(strict=True)
            value = self.from_path(resolved)
            value.self_href = str(resolved)
        else:
            value = self.from_bytes(_fetch(target))
            value.self_href = target
        return value

    def write(self, path: Href, value: Any) -> None:
        """Write a value to a local path in this format."""
        if self.kind is FormatKind.JSON:
            to_json_path(value, path, self.pretty)
        else:
            to_ndjson_path(value, path)


def parse_format(text: str) -> Format:
    """Parse a format name such as "json", "json-pretty" or "ndjson"."""
    name = text.lower()
    if name in ("json", "geojson"):
        return Format(FormatKind.JSON)
    if name in ("json-pretty", "geojson-pretty"):
        return Format(FormatKind.JSON, pretty=True)
    if name == "ndjson":
        return Format(FormatKind.NDJSON)
    raise UnsupportedFormatError(text)


def infer_format(href: str) -> Format | None:
    """Infer a format from an href's file extension, or return None."""
    _, dot, extension = str(href).rpartition(".")
    if not dot:
        return None
    try:
        return parse_format(extension)
    except UnsupportedFormatError:
        return None


def realize_href(href: Href) -> Path | str:
    """Turn an href into a local Path, or a URL string for remote hrefs.

    ``file://`` URLs become paths.
    """
    if isinstance(href, os.PathLike):
        return Path(href)
    parts = urllib.parse.urlsplit(href)
    if parts.scheme == "file":
        return Path(urllib.request.url2pathname(parts.path))
    if len(parts.scheme) > 1 and "://" in href:
        return href
    return Path(href)


def _fetch(url: str) -> bytes:
    scheme = urllib.parse.urlsplit(url).scheme
    if scheme not in ("http", "https"):
        raise FeatureNotEnabledError(scheme)
    request = urllib.request.Request(url, headers={"User-Agent": user_agent()})
    try:
        with urllib.request.urlopen(request) as response:
            return response.read()
    except urllib.error.URLError as error:
        raise StacError(f"error when getting href={url}: {error}") from error


def read(href: Href) -> Value:
    """Read a value, inferring the format from the href (JSON by default)."""
    fmt = infer_format(os.fspath(href)) or Format()
    return fmt.read(href)


def write(path: Href, value: Any) -> None:
    """Write a value, inferring the format from the path (JSON by default)."""
    fmt = infer_format(os.fspath(path)) or Format()
    fmt.write(path, value)


def user_agent() -> str:
    """Return a string suitable for an HTTP User-Agent header."""
    return f"stacfile/{_VERSION}"