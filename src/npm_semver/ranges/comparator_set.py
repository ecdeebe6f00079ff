"""Conjunction of comparators."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from functools import cached_property

from ..version import SemanticVersion
from .comparators import Comparator, PrimitiveComparator, satisfies_all


@dataclass(frozen=True)
class ComparatorSet:
    """Comparators that must all match, e.g. ``>=1.2.7 <1.3.0``.

    A pre-release version only matches when at least one comparator in the
    set targets a pre-release of the same major.minor.patch, so
    ``>1.2.3-alpha.3`` admits ``1.2.3-alpha.7`` but not ``3.4.5-alpha.9``.
    An empty set matches every release but no pre-release, unless
    ``include_pre_releases`` is set.
    """

    comparators: tuple[Comparator, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "comparators", tuple(self.comparators))

    @classmethod
    def of(cls, comparators: Iterable[Comparator]) -> ComparatorSet:
        return cls(tuple(comparators))

    @cached_property
    def primitives(self) -> tuple[PrimitiveComparator, ...]:
        return tuple(
            primitive for comparator in self.comparators for primitive in comparator.to_primitives()
        )

    def is_satisfied_by(self, version: SemanticVersion, include_pre_releases: bool = False) -> bool:
        return satisfies_all(self.primitives, version, include_pre_releases)

    def __contains__(self, version: object) -> bool:
        return isinstance(version, SemanticVersion) and self.is_satisfied_by(version)

    def __iter__(self):
        return iter(self.comparators)

    def __len__(self) -> int:
        return len(self.comparators)

    def __str__(self) -> str:
        return " ".join(str(comparator) for comparator in self.comparators)
