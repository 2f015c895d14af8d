"""Dependency detection data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator


class DependencySource(str, Enum):
    GEMFILE_LOCK = "gemfile_lock"
    DATABASE = "database"
    IMPORTMAP = "importmap"
    CDN = "cdn"


def normalize_name(name: str) -> str:
    return name.strip().lower()


class DependencySet:
    """Normalized set of detected dependency names; lookups are case-insensitive."""

    def __init__(self, names: Iterable[str] = ()) -> None:
        normalized = (normalize_name(name) for name in names)
        self._names = frozenset(name for name in normalized if name)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        return name.lower() in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._names))

    def __len__(self) -> int:
        return len(self._names)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DependencySet):
            return self._names == other._names
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._names)

    def __repr__(self) -> str:
        return f"DependencySet({sorted(self._names)!r})"

    def missing(self, required: Iterable[str]) -> list[str]:
        return [name for name in required if name not in self]


@dataclass(frozen=True)
class DetectionReport:
    contributions: dict[DependencySource, list[str]] = field(default_factory=dict)

    @property
    def dependencies(self) -> DependencySet:
        names: list[str] = []
        for items in self.contributions.values():
            names.extend(items)
        return DependencySet(names)

    def counts(self) -> dict[DependencySource, int]:
        return {source: len(items) for source, items in self.contributions.items()}
