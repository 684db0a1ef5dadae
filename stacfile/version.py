"""Versions of the STAC specification."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import ClassVar

_KNOWN = ("1.0.0", "1.1.0-beta.1", "1.1.0")


@functools.total_ordering
@dataclass(frozen=True)
class Version:
    """A STAC specification version, known or not.

    Known versions sort in release order and before every unknown version;
    unknown versions sort by their text.
    """

    text: str

    V1_0_0: ClassVar[Version]
    V1_1_0_BETA_1: ClassVar[Version]
    V1_1_0: ClassVar[Version]

    def is_known(self) -> bool:
        """Return True if this is one of the recognised specification versions."""
        return self.text in _KNOWN

    def _sort_key(self) -> tuple[int, str]:
        if self.is_known():
            return (_KNOWN.index(self.text), "")
        return (len(_KNOWN), self.text)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __str__(self) -> str:
        return self.text


Version.V1_0_0 = Version("1.0.0")
Version.V1_1_0_BETA_1 = Version("1.1.0-beta.1")
Version.V1_1_0 = Version("1.1.0")


def parse_version(text: str) -> Version:
    """Parse a version string; unrecognised strings become unknown versions."""
    if isinstance(text, Version):
        return text
    return Version(str(text))