"""Exceptions raised while reading, writing and converting STAC values."""

from __future__ import annotations

from typing import Any


class StacError(Exception):
    """Base class for every error raised by this package."""


class IncorrectTypeError(StacError, TypeError):
    """A STAC value was not of the type that was asked for."""

    def __init__(self, actual: str, expected: str) -> None:
        super().__init__(f"incorrect type: expected={expected}, actual={actual}")
        self.actual = actual
        self.expected = expected


class UnsupportedFormatError(StacError, ValueError):
    """A format name or file extension is not one that is supported."""

    def __init__(self, format_name: str) -> None:
        super().__init__(f"unsupported format: {format_name}")
        self.format_name = format_name


class FeatureNotEnabledError(StacError):
    """An operation needs a capability that is not available."""

    def __init__(self, feature: str) -> None:
        super().__init__(f"{feature} is not enabled")
        self.feature = feature


class MissingFieldError(StacError):
    """A required field is absent from a JSON object."""

    def __init__(self, field: str) -> None:
        super().__init__(f'no "{field}" field in the JSON object')
        self.field = field


class ScalarJsonError(StacError):
    """A JSON scalar was given where an object or an array was expected."""

    def __init__(self, value: Any) -> None:
        super().__init__("json value is not an object or an array")
        self.value = value


class FromPathError(StacError):
    """Reading a STAC value from a local path failed."""

    def __init__(self, io: OSError, path: str) -> None:
        super().__init__(f"{io}: {path}")
        self.io = io
        self.path = path