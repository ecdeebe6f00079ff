"""Disjunction of comparator sets: the full npm range expression."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import ClassVar

from ..errors import InvalidRangeError, SemanticErrorCode
from ..options import SemanticOptions
from ..version import SemanticVersion
from .comparator_set import ComparatorSet
from .comparators import XRange
from .partial import PartialVersion


@dataclass(frozen=True)
class VersionRange:
    """Comparator sets joined with ``||``; a version matches if any set does.

    A range with no sets matches nothing.
    """

    sets: tuple[ComparatorSet, ...] = ()

    ALL: ClassVar[VersionRange]
    NONE: ClassVar[VersionRange]

    def __post_init__(self) -> None:
        object.__setattr__(self, "sets", tuple(self.sets))

    @classmethod
    def of(cls, sets: Iterable[ComparatorSet]) -> VersionRange:
        return cls(tuple(sets))

    @classmethod
    def parse(cls, text: str, options: SemanticOptions = SemanticOptions.STRICT) -> VersionRange:
        """Parse an npm range expression such as ``^1.2.3 || >=2.0.0 <3``.

        Raises:
            InvalidRangeError: If ``text`` is not a valid range under ``options``.
        """
        from .parser import parse_range

        result = parse_range(text, options)
        if isinstance(result, SemanticErrorCode):
            raise InvalidRangeError(result, text)
        return result

    @classmethod
    def try_parse(
        cls, text: str, options: SemanticOptions = SemanticOptions.STRICT
    ) -> VersionRange | None:
        from .parser import parse_range

        result = parse_range(text, options)
        return None if isinstance(result, SemanticErrorCode) else result

    def is_satisfied_by(self, version: SemanticVersion, include_pre_releases: bool = False) -> bool:
        return any(item.is_satisfied_by(version, include_pre_releases) for item in self.sets)

    def __contains__(self, version: object) -> bool:
        return isinstance(version, SemanticVersion) and self.is_satisfied_by(version)

    def satisfying(
        self, versions: Iterable[SemanticVersion], include_pre_releases: bool = False
    ) -> Iterator[SemanticVersion]:
        return (version for version in versions if self.is_satisfied_by(version, include_pre_releases))

    def max_satisfying(
        self, versions: Iterable[SemanticVersion], include_pre_releases: bool = False
    ) -> SemanticVersion | None:
        return max(self.satisfying(versions, include_pre_releases), default=None)

    def min_satisfying(
        self, versions: Iterable[SemanticVersion], include_pre_releases: bool = False
    ) -> SemanticVersion | None:
        return min(self.satisfying(versions, include_pre_releases), default=None)

    def __iter__(self):
        return iter(self.sets)

    def __len__(self) -> int:
        return len(self.sets)

    def __str__(self) -> str:
        return " || ".join(str(item) for item in self.sets)


VersionRange.ALL = VersionRange((ComparatorSet((XRange(PartialVersion()),)),))
VersionRange.NONE = VersionRange(())
