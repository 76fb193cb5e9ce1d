# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2024-2026 GMLSurface Team

"""
Identity types shared by all GML objects.

``Id`` has two construction paths that are intentionally kept apart:

- ``Id.parse`` interprets an identifier string found in a document and
  returns ``None`` when the string is not usable.
- ``Id.from_hashed_u64`` turns a content hash into an identifier and never
  fails.
"""

from dataclasses import dataclass
from typing import Optional

_U64_MASK = 0xFFFFFFFFFFFFFFFF


@dataclass(frozen=True)
class Id:
    """Opaque identifier of a GML object."""

    value: str

    @classmethod
    def parse(cls, text: Optional[str]) -> Optional['Id']:
        """Interpret ``text`` as an identifier.

        A usable identifier is a non-empty string without whitespace.

        Returns:
            The Id, or None if ``text`` is missing or not a valid identifier
        """
        if not text or not isinstance(text, str):
            return None
        if any(ch.isspace() for ch in text):
            return None
        return cls(text)

    @classmethod
    def from_hashed_u64(cls, value: int) -> 'Id':
        """Build an identifier from a 64-bit hash value (16 lowercase hex digits)."""
        return cls(format(value & _U64_MASK, "016x"))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Gml:
    """Properties common to every GML object."""

    id: Id
