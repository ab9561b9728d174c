"""Shared types for the configuration and migration system."""
from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import Tuple


@total_ordering
@dataclass(frozen=True, slots=True)
class FormatVersion:
    """Dotted plugin version stamped into export envelopes.

    Versions of different lengths compare as if padded with zeros, so
    ``1.3.2`` equals ``1.3.2.0``.
    """
    parts: Tuple[int, ...] = (0,)

    def __str__(self) -> str:
        return ".".join(str(p) for p in self.parts)

    def _key(self) -> Tuple[int, ...]:
        key = list(self.parts)
        while len(key) > 1 and key[-1] == 0:
            key.pop()
        return tuple(key)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FormatVersion):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __lt__(self, other: 'FormatVersion') -> bool:
        return self._key() < other._key()

    @classmethod
    def from_string(cls, version_str: str) -> 'FormatVersion':
        """Create FormatVersion from a string like '1.3.2.0'."""
        try:
            parts = tuple(int(p) for p in version_str.strip().split('.'))
        except (AttributeError, ValueError) as e:
            raise ValueError(f"Invalid version string '{version_str}': {e}") from e
        if any(p < 0 for p in parts):
            raise ValueError(f"Invalid version string '{version_str}': negative component")
        return cls(parts)

    @classmethod
    def parse_lenient(cls, version_str: str) -> 'FormatVersion':
        """Like :meth:`from_string`, but garbled or missing versions count as oldest."""
        try:
            return cls.from_string(version_str)
        except ValueError:
            return cls()


__all__ = ['FormatVersion']
