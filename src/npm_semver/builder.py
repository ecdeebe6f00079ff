"""Mutable scratch version used to apply increments."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from .errors import IncrementOverflowError, SemanticErrorCode
from .options import SemanticOptions
from .prerelease import SemanticPreRelease
from .scanner import MAX_NUMBER
from .version import SemanticVersion, identifier_sequence, validate_build_metadata, validate_component

Identifier = SemanticPreRelease | int | str | None


class IncrementType(Enum):
    """The seven ways a version can be bumped."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    PRE_MAJOR = "premajor"
    PRE_MINOR = "preminor"
    PRE_PATCH = "prepatch"
    PRE_RELEASE = "prerelease"


def _bump(value: int, code: SemanticErrorCode) -> int:
    if value >= MAX_NUMBER:
        raise IncrementOverflowError(code.message)
    return value + 1


def _coerce_identifier(identifier: Identifier) -> SemanticPreRelease:
    if identifier is None:
        return SemanticPreRelease.ZERO
    return SemanticPreRelease.coerce(identifier)


def _pre_release_start(identifier: SemanticPreRelease) -> list[SemanticPreRelease]:
    if identifier == SemanticPreRelease.ZERO:
        return [SemanticPreRelease.ZERO]
    return [identifier, SemanticPreRelease.ZERO]


class SemanticVersionBuilder:
    """Mutable major, minor, patch, pre-release and build metadata fields.

    Every operation mutates the builder in place and returns it so calls can
    be chained. Operations are all-or-nothing: if one raises, the builder is
    left exactly as it was. Not safe to share between threads.
    """

    def __init__(
        self,
        major: int = 0,
        minor: int = 0,
        patch: int = 0,
        pre_releases: Iterable[SemanticPreRelease | int | str] = (),
        build_metadata: Iterable[str] = (),
    ) -> None:
        self._major = validate_component("major", major)
        self._minor = validate_component("minor", minor)
        self._patch = validate_component("patch", patch)
        self.pre_releases: list[SemanticPreRelease] = [
            SemanticPreRelease.coerce(item) for item in identifier_sequence("pre_releases", pre_releases)
        ]
        self.build_metadata: list[str] = [
            validate_build_metadata(item) for item in identifier_sequence("build_metadata", build_metadata)
        ]

    def __repr__(self) -> str:
        return f"SemanticVersionBuilder({str(self.to_version())!r})"

    @classmethod
    def from_version(cls, version: SemanticVersion) -> SemanticVersionBuilder:
        return cls(
            version.major,
            version.minor,
            version.patch,
            version.pre_releases,
            version.build_metadata,
        )

    @classmethod
    def parse(cls, text: str, options: SemanticOptions = SemanticOptions.STRICT) -> SemanticVersionBuilder:
        return cls.from_version(SemanticVersion.parse(text, options))

    @property
    def major(self) -> int:
        return self._major

    @major.setter
    def major(self, value: int) -> None:
        self._major = validate_component("major", value)

    @property
    def minor(self) -> int:
        return self._minor

    @minor.setter
    def minor(self, value: int) -> None:
        self._minor = validate_component("minor", value)

    @property
    def patch(self) -> int:
        return self._patch

    @patch.setter
    def patch(self, value: int) -> None:
        self._patch = validate_component("patch", value)

    def to_version(self) -> SemanticVersion:
        return SemanticVersion(
            self._major,
            self._minor,
            self._patch,
            tuple(self.pre_releases),
            tuple(self.build_metadata),
        )

    def append_pre_release(self, identifier: SemanticPreRelease | int | str) -> SemanticVersionBuilder:
        self.pre_releases.append(SemanticPreRelease.coerce(identifier))
        return self

    def append_build_metadata(self, identifier: str) -> SemanticVersionBuilder:
        self.build_metadata.append(validate_build_metadata(identifier))
        return self

    def clear_pre_releases(self) -> SemanticVersionBuilder:
        self.pre_releases.clear()
        return self

    def clear_build_metadata(self) -> SemanticVersionBuilder:
        self.build_metadata.clear()
        return self

    def increment_major(self) -> SemanticVersionBuilder:
        """``1.2.3`` becomes ``2.0.0``; ``1.0.0-alpha`` becomes ``1.0.0``."""
        major = self._major
        if self._minor != 0 or self._patch != 0 or not self.pre_releases:
            major = _bump(major, SemanticErrorCode.MAJOR_TOO_BIG)
        self._major, self._minor, self._patch = major, 0, 0
        self.pre_releases.clear()
        return self

    def increment_minor(self) -> SemanticVersionBuilder:
        """``1.2.3`` becomes ``1.3.0``; ``1.2.0-alpha`` becomes ``1.2.0``."""
        minor = self._minor
        if self._patch != 0 or not self.pre_releases:
            minor = _bump(minor, SemanticErrorCode.MINOR_TOO_BIG)
        self._minor, self._patch = minor, 0
        self.pre_releases.clear()
        return self

    def increment_patch(self) -> SemanticVersionBuilder:
        """``1.2.3`` becomes ``1.2.4``; ``1.2.3-alpha`` becomes ``1.2.3``."""
        if not self.pre_releases:
            self._patch = _bump(self._patch, SemanticErrorCode.PATCH_TOO_BIG)
        self.pre_releases.clear()
        return self

    def increment_pre_major(self, identifier: Identifier = None) -> SemanticVersionBuilder:
        start = _pre_release_start(_coerce_identifier(identifier))
        self._major = _bump(self._major, SemanticErrorCode.MAJOR_TOO_BIG)
        self._minor = self._patch = 0
        self.pre_releases[:] = start
        return self

    def increment_pre_minor(self, identifier: Identifier = None) -> SemanticVersionBuilder:
        start = _pre_release_start(_coerce_identifier(identifier))
        self._minor = _bump(self._minor, SemanticErrorCode.MINOR_TOO_BIG)
        self._patch = 0
        self.pre_releases[:] = start
        return self

    def increment_pre_patch(self, identifier: Identifier = None) -> SemanticVersionBuilder:
        start = _pre_release_start(_coerce_identifier(identifier))
        self._patch = _bump(self._patch, SemanticErrorCode.PATCH_TOO_BIG)
        self.pre_releases[:] = start
        return self

    def increment_pre_release(self, identifier: Identifier = None) -> SemanticVersionBuilder:
        """Advance the pre-release.

        - ``1.2.3`` with ``beta`` becomes ``1.2.4-beta.0``
        - ``1.2.3-beta.4`` with ``beta`` (or no identifier) becomes ``1.2.3-beta.5``
        - ``1.2.3-beta`` with no identifier becomes ``1.2.3-beta.0``
        - ``1.2.3-alpha.4`` with ``beta`` becomes ``1.2.3-beta.0``
        """
        ident = _coerce_identifier(identifier)
        current = self.pre_releases

        if not current:
            start = _pre_release_start(ident)
            self._patch = _bump(self._patch, SemanticErrorCode.PATCH_TOO_BIG)
            current[:] = start
            return self

        if ident == SemanticPreRelease.ZERO:
            if not self._bump_last_number(0):
                current.append(SemanticPreRelease.ZERO)
        elif ident == current[0]:
            if not self._bump_last_number(1):
                current[:] = [ident, SemanticPreRelease.ZERO]
        else:
            current[:] = [ident, SemanticPreRelease.ZERO]
        return self

    def _bump_last_number(self, first: int) -> bool:
        current = self.pre_releases
        for index in range(len(current) - 1, first - 1, -1):
            item = current[index]
            if item.is_numeric:
                number = _bump(item.value, SemanticErrorCode.PRE_RELEASE_TOO_BIG)
                current[index] = SemanticPreRelease(number)
                return True
        return False

    def increment(self, kind: IncrementType | str, identifier: Identifier = None) -> SemanticVersionBuilder:
        """Dispatch to the increment method for ``kind``.

        Raises:
            ValueError: If ``kind`` is not a known increment type.
            IncrementOverflowError: If the increment would overflow.
        """
        kind = IncrementType(kind)
        if kind is IncrementType.MAJOR:
            return self.increment_major()
        if kind is IncrementType.MINOR:
            return self.increment_minor()
        if kind is IncrementType.PATCH:
            return self.increment_patch()
        if kind is IncrementType.PRE_MAJOR:
            return self.increment_pre_major(identifier)
        if kind is IncrementType.PRE_MINOR:
            return self.increment_pre_minor(identifier)
        if kind is IncrementType.PRE_PATCH:
            return self.increment_pre_patch(identifier)
        return self.increment_pre_release(identifier)
