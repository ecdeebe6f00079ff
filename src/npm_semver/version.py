"""Immutable semantic version value."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from functools import total_ordering
from typing import TYPE_CHECKING, ClassVar

from . import errors
from .errors import InvalidVersionError, SemanticErrorCode
from .options import SemanticOptions
from .prerelease import SemanticPreRelease
from .scanner import MAX_NUMBER, is_identifier_char

if TYPE_CHECKING:
    from .builder import IncrementType, SemanticVersionBuilder
    from .ranges.partial import PartialVersion


_COMPONENT_ERRORS = {
    "major": (errors.MAJOR_NEGATIVE, SemanticErrorCode.MAJOR_TOO_BIG),
    "minor": (errors.MINOR_NEGATIVE, SemanticErrorCode.MINOR_TOO_BIG),
    "patch": (errors.PATCH_NEGATIVE, SemanticErrorCode.PATCH_TOO_BIG),
}


def validate_component(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"The {name} version component must be an int")
    negative, too_big = _COMPONENT_ERRORS[name]
    if value < 0:
        raise ValueError(negative)
    if value > MAX_NUMBER:
        raise ValueError(too_big.message)
    return value


def validate_build_metadata(identifier: str) -> str:
    if not identifier:
        raise ValueError(errors.BUILD_METADATA_EMPTY)
    if not all(is_identifier_char(ch) for ch in identifier):
        raise ValueError(errors.BUILD_METADATA_INVALID)
    return identifier


def identifier_sequence(name: str, identifiers: Iterable) -> Iterable:
    """Reject a bare string, which would otherwise split into one identifier per character."""
    if isinstance(identifiers, str):
        raise TypeError(f"{name} must be a sequence of identifiers, not a str")
    return identifiers


@total_ordering
@dataclass(frozen=True, repr=False)
class SemanticVersion:
    """A SemVer 2.0.0 version.

    Build metadata is carried for display but excluded from equality, hashing
    and ordering. Use :mod:`npm_semver.comparers` when metadata must count.
    """

    major: int
    minor: int
    patch: int
    pre_releases: tuple[SemanticPreRelease, ...] = ()
    build_metadata: tuple[str, ...] = field(default=(), compare=False)

    MIN_VALUE: ClassVar[SemanticVersion]
    MAX_VALUE: ClassVar[SemanticVersion]

    def __post_init__(self) -> None:
        validate_component("major", self.major)
        validate_component("minor", self.minor)
        validate_component("patch", self.patch)
        pre_releases = identifier_sequence("pre_releases", self.pre_releases)
        build_metadata = identifier_sequence("build_metadata", self.build_metadata)
        pre_releases = tuple(SemanticPreRelease.coerce(item) for item in pre_releases)
        build_metadata = tuple(validate_build_metadata(item) for item in build_metadata)
        object.__setattr__(self, "pre_releases", pre_releases)
        object.__setattr__(self, "build_metadata", build_metadata)

    @property
    def is_pre_release(self) -> bool:
        return bool(self.pre_releases)

    @property
    def is_release(self) -> bool:
        return not self.pre_releases

    @property
    def precedence_key(self) -> tuple:
        """Sort key implementing SemVer precedence (release after its pre-releases)."""
        return (
            self.major,
            self.minor,
            self.patch,
            not self.pre_releases,
            tuple(item.sort_key for item in self.pre_releases),
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.precedence_key < other.precedence_key

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.pre_releases:
            text += "-" + ".".join(str(item) for item in self.pre_releases)
        if self.build_metadata:
            text += "+" + ".".join(self.build_metadata)
        return text

    def __repr__(self) -> str:
        return f"SemanticVersion({str(self)!r})"

    def __format__(self, format_spec: str) -> str:
        return self.format(format_spec)

    def format(self, fmt: str | None = None) -> str:
        """Render the version with the ``M.m.p`` format mini-language."""
        from .formatting import format_version

        return format_version(self, fmt)

    def without_metadata(self) -> SemanticVersion:
        if not self.build_metadata:
            return self
        return SemanticVersion(self.major, self.minor, self.patch, self.pre_releases)

    def to_builder(self) -> SemanticVersionBuilder:
        from .builder import SemanticVersionBuilder

        return SemanticVersionBuilder.from_version(self)

    def increment(
        self,
        kind: IncrementType,
        identifier: SemanticPreRelease | int | str | None = None,
    ) -> SemanticVersion:
        """Return a new version bumped by ``kind``; this instance is unchanged."""
        return self.to_builder().increment(kind, identifier).to_version()

    @classmethod
    def from_partial(cls, partial: PartialVersion) -> SemanticVersion:
        """Convert a partial version, reading omitted and wildcard components as 0."""
        return cls(
            partial.major.numeric_or_zero,
            partial.minor.numeric_or_zero,
            partial.patch.numeric_or_zero,
            partial.pre_releases,
            partial.build_metadata,
        )

    @classmethod
    def of(
        cls,
        major: int,
        minor: int = 0,
        patch: int = 0,
        pre_releases: Iterable[SemanticPreRelease | int | str] = (),
        build_metadata: Iterable[str] = (),
    ) -> SemanticVersion:
        return cls(
            major,
            minor,
            patch,
            tuple(identifier_sequence("pre_releases", pre_releases)),
            tuple(identifier_sequence("build_metadata", build_metadata)),
        )

    @classmethod
    def parse(cls, text: str, options: SemanticOptions = SemanticOptions.STRICT) -> SemanticVersion:
        """Parse ``text`` into a version.

        Args:
            text: The version string.
            options: Relaxations of the strict grammar to allow.

        Returns:
            The parsed version.

        Raises:
            InvalidVersionError: If ``text`` is not a valid version under ``options``.
        """
        from .parser import parse_version

        result = parse_version(text, options)
        if isinstance(result, SemanticErrorCode):
            raise InvalidVersionError(result, text)
        return result

    @classmethod
    def try_parse(
        cls, text: str, options: SemanticOptions = SemanticOptions.STRICT
    ) -> SemanticVersion | None:
        from .parser import parse_version

        result = parse_version(text, options)
        return None if isinstance(result, SemanticErrorCode) else result


SemanticVersion.MIN_VALUE = SemanticVersion(0, 0, 0, (SemanticPreRelease.ZERO,))
SemanticVersion.MAX_VALUE = SemanticVersion(MAX_NUMBER, MAX_NUMBER, MAX_NUMBER)
