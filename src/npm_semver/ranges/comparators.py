"""Comparators: primitive relational tests and the shorthand forms that reduce to them."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from functools import cached_property
from typing import ClassVar

from ..prerelease import SemanticPreRelease
from ..scanner import MAX_NUMBER
from ..version import SemanticVersion
from .partial import PartialVersion

LOGGER = logging.getLogger(__name__)


def _same_triple(left: SemanticVersion, right: SemanticVersion) -> bool:
    return (left.major, left.minor, left.patch) == (right.major, right.minor, right.patch)


def satisfies_all(
    primitives: Sequence[PrimitiveComparator],
    version: SemanticVersion,
    include_pre_releases: bool = False,
) -> bool:
    """AND the primitives together, then apply the pre-release visibility rule.

    A pre-release version only matches when some primitive has a pre-release
    comparand on the same major.minor.patch, unless ``include_pre_releases``.
    """
    if not all(primitive.matches(version) for primitive in primitives):
        return False
    if include_pre_releases or not version.pre_releases:
        return True
    return any(
        primitive.operand.pre_releases and _same_triple(primitive.operand, version)
        for primitive in primitives
    )


class Comparator(ABC):
    """A predicate over concrete versions."""

    @abstractmethod
    def is_satisfied_by(self, version: SemanticVersion, include_pre_releases: bool = False) -> bool:
        """Return True if ``version`` matches this comparator."""

    @abstractmethod
    def to_primitives(self) -> tuple[PrimitiveComparator, ...]:
        """Return the one or two primitive comparators this comparator is equivalent to."""

    def __contains__(self, version: object) -> bool:
        return isinstance(version, SemanticVersion) and self.is_satisfied_by(version)


@dataclass(frozen=True)
class PrimitiveComparator(Comparator):
    operand: SemanticVersion

    operator: ClassVar[str] = ""

    @abstractmethod
    def matches(self, version: SemanticVersion) -> bool:
        """Apply the relational operator without the pre-release rule."""

    def is_satisfied_by(self, version: SemanticVersion, include_pre_releases: bool = False) -> bool:
        if include_pre_releases or not version.pre_releases:
            return self.matches(version)
        operand = self.operand
        return bool(operand.pre_releases) and _same_triple(operand, version) and self.matches(version)

    def to_primitives(self) -> tuple[PrimitiveComparator, ...]:
        return (self,)

    def __str__(self) -> str:
        return f"{self.operator}{self.operand}"


class EqualTo(PrimitiveComparator):
    operator = ""

    def matches(self, version: SemanticVersion) -> bool:
        return version == self.operand


class GreaterThan(PrimitiveComparator):
    operator = ">"

    def matches(self, version: SemanticVersion) -> bool:
        return version > self.operand


class LessThan(PrimitiveComparator):
    operator = "<"

    def matches(self, version: SemanticVersion) -> bool:
        return version < self.operand


class GreaterThanOrEqualTo(PrimitiveComparator):
    operator = ">="

    def matches(self, version: SemanticVersion) -> bool:
        return version >= self.operand


class LessThanOrEqualTo(PrimitiveComparator):
    operator = "<="

    def matches(self, version: SemanticVersion) -> bool:
        return version <= self.operand


PRIMITIVES: dict[str, type[PrimitiveComparator]] = {
    "": EqualTo,
    "=": EqualTo,
    ">": GreaterThan,
    "<": LessThan,
    ">=": GreaterThanOrEqualTo,
    "<=": LessThanOrEqualTo,
}

Bounds = tuple[PrimitiveComparator, "PrimitiveComparator | None"]

_ZERO = SemanticVersion(0, 0, 0)
ANY_BOUNDS: Bounds = (GreaterThanOrEqualTo(_ZERO), None)
NO_BOUNDS: Bounds = (LessThan(SemanticVersion.MIN_VALUE), None)


def _floor(partial: PartialVersion) -> SemanticVersion:
    """Partial version with omitted and wildcard components read as 0, no metadata."""
    return SemanticVersion.from_partial(partial).without_metadata()


def below_next_major(major: int) -> LessThan | None:
    """``<(major+1).0.0-0``, or None when no such version exists."""
    if major >= MAX_NUMBER:
        return None
    return LessThan(SemanticVersion(major + 1, 0, 0, (SemanticPreRelease.ZERO,)))


def below_next_minor(major: int, minor: int) -> LessThan | None:
    if minor >= MAX_NUMBER:
        return below_next_major(major)
    return LessThan(SemanticVersion(major, minor + 1, 0, (SemanticPreRelease.ZERO,)))


def below_next_patch(major: int, minor: int, patch: int) -> LessThan | None:
    if patch >= MAX_NUMBER:
        return below_next_minor(major, minor)
    return LessThan(SemanticVersion(major, minor, patch + 1, (SemanticPreRelease.ZERO,)))


def _below_next(partial: PartialVersion) -> LessThan | None:
    """Upper bound excluding everything past the last numeric component."""
    if partial.minor.is_numeric:
        return below_next_minor(partial.major.value, partial.minor.value)
    return below_next_major(partial.major.value)


class AdvancedComparator(Comparator):
    """A shorthand comparator that reduces to a lower and an optional upper bound.

    The reduction is computed on first use and cached on the instance. It is
    a pure function of the frozen operands, so a racing first access only
    ever stores an identical result.
    """

    @abstractmethod
    def _reduce(self) -> Bounds:
        ...

    @cached_property
    def bounds(self) -> Bounds:
        bounds = self._reduce()
        LOGGER.debug("Reduced %s to %s", self, " ".join(str(item) for item in bounds if item))
        return bounds

    @property
    def lower(self) -> PrimitiveComparator:
        return self.bounds[0]

    @property
    def upper(self) -> PrimitiveComparator | None:
        return self.bounds[1]

    @cached_property
    def primitives(self) -> tuple[PrimitiveComparator, ...]:
        lower, upper = self.bounds
        return (lower,) if upper is None else (lower, upper)

    def to_primitives(self) -> tuple[PrimitiveComparator, ...]:
        return self.primitives

    def is_satisfied_by(self, version: SemanticVersion, include_pre_releases: bool = False) -> bool:
        return satisfies_all(self.primitives, version, include_pre_releases)


def _display(partial: PartialVersion) -> str:
    return str(partial) or "*"


@dataclass(frozen=True)
class HyphenRange(AdvancedComparator):
    """``A - B``: at least ``A`` and no further than ``B`` allows."""

    begin: PartialVersion
    end: PartialVersion

    def _reduce(self) -> Bounds:
        lower = GreaterThanOrEqualTo(_floor(self.begin))
        end = self.end
        if not end.major.is_numeric:
            return (lower, None)
        if not end.patch.is_numeric:
            return (lower, _below_next(end))
        return (lower, LessThanOrEqualTo(_floor(end)))

    def __str__(self) -> str:
        return f"{_display(self.begin)} - {_display(self.end)}"


@dataclass(frozen=True)
class CaretRange(AdvancedComparator):
    """``^A``: changes that do not modify the left-most non-zero component."""

    partial: PartialVersion

    def _reduce(self) -> Bounds:
        partial = self.partial
        if not partial.major.is_numeric:
            return ANY_BOUNDS
        lower = GreaterThanOrEqualTo(_floor(partial))
        major, minor, patch = partial.major, partial.minor, partial.patch
        if major.value > 0 or not minor.is_numeric:
            return (lower, below_next_major(major.value))
        if minor.value > 0 or not patch.is_numeric:
            return (lower, below_next_minor(0, minor.value))
        return (lower, below_next_patch(0, 0, patch.value))

    def __str__(self) -> str:
        return f"^{_display(self.partial)}"


@dataclass(frozen=True)
class TildeRange(AdvancedComparator):
    """``~A``: patch-level changes, or minor-level when only the major is given."""

    partial: PartialVersion

    def _reduce(self) -> Bounds:
        partial = self.partial
        if not partial.major.is_numeric:
            return ANY_BOUNDS
        return (GreaterThanOrEqualTo(_floor(partial)), _below_next(partial))

    def __str__(self) -> str:
        return f"~{_display(self.partial)}"


@dataclass(frozen=True)
class XRange(AdvancedComparator):
    """A partial version, optionally behind a relational operator.

    Omitted and wildcard components are treated alike:

    - ``1.2.x`` and ``=1.2`` mean ``>=1.2.0 <1.3.0-0``
    - ``>1`` means ``>=2.0.0`` and ``>=1.2`` means ``>=1.2.0``
    - ``<1.2`` means ``<1.2.0-0`` and ``<=1.2`` means ``<1.3.0-0``
    - ``*`` and ``>=*`` match everything; ``<*`` and ``>*`` match nothing
    """

    partial: PartialVersion
    operator: str = ""

    def __post_init__(self) -> None:
        if self.operator not in PRIMITIVES:
            raise ValueError(f"Unknown comparison operator: {self.operator!r}")
        if self.operator == "=":
            object.__setattr__(self, "operator", "")

    def _reduce(self) -> Bounds:
        partial, operator = self.partial, self.operator
        if not partial.is_partial:
            return (PRIMITIVES[operator](SemanticVersion.from_partial(partial)), None)
        if not partial.major.is_numeric:
            return NO_BOUNDS if operator in ("<", ">") else ANY_BOUNDS

        floor = _floor(partial)
        if operator == "":
            return (GreaterThanOrEqualTo(floor), _below_next(partial))
        if operator == ">=":
            return (GreaterThanOrEqualTo(floor), None)
        if operator == "<":
            return (LessThan(floor.to_builder().append_pre_release(0).to_version()), None)
        upper = _below_next(partial)
        if operator == "<=":
            return ANY_BOUNDS if upper is None else (upper, None)
        # ">" excludes everything the bare partial covers.
        if upper is None:
            return NO_BOUNDS
        ceiling = upper.operand
        return (GreaterThanOrEqualTo(SemanticVersion(ceiling.major, ceiling.minor, ceiling.patch)), None)

    def __str__(self) -> str:
        return f"{self.operator}{_display(self.partial)}"
