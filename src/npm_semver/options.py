"""Flags controlling how permissive the version parsers are."""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntFlag


class SemanticOptions(IntFlag):
    """Independently composable relaxations of the strict SemVer grammar."""

    STRICT = 0

    ALLOW_VERSION_PREFIX = 1
    ALLOW_EQUALS_PREFIX = 1 << 1
    ALLOW_LEADING_WHITE = 1 << 2
    ALLOW_TRAILING_WHITE = 1 << 3
    ALLOW_INNER_WHITE = 1 << 4
    ALLOW_LEADING_ZEROES = 1 << 5
    OPTIONAL_MINOR = 1 << 6
    OPTIONAL_PATCH = 1 << 7
    OPTIONAL_PRE_RELEASE_SEPARATOR = 1 << 8
    ALLOW_LEFTOVERS = 1 << 9
    REMOVE_EMPTY_PRE_RELEASES = 1 << 10
    REMOVE_EMPTY_BUILD_METADATA = 1 << 11

    ALLOW_WHITE = ALLOW_LEADING_WHITE | ALLOW_TRAILING_WHITE | ALLOW_INNER_WHITE
    OPTIONAL_COMPONENTS = OPTIONAL_MINOR | OPTIONAL_PATCH
    LOOSE = (
        ALLOW_VERSION_PREFIX
        | ALLOW_EQUALS_PREFIX
        | ALLOW_WHITE
        | ALLOW_LEADING_ZEROES
        | OPTIONAL_COMPONENTS
        | OPTIONAL_PRE_RELEASE_SEPARATOR
        | ALLOW_LEFTOVERS
        | REMOVE_EMPTY_PRE_RELEASES
        | REMOVE_EMPTY_BUILD_METADATA
    )

    @classmethod
    def from_names(cls, names: Iterable[str]) -> SemanticOptions:
        """Combine flags given by name, e.g. ``["allow-version-prefix", "optional_patch"]``.

        Raises:
            ValueError: If a name does not match any flag.
        """
        result = cls.STRICT
        for name in names:
            key = name.strip().upper().replace("-", "_")
            try:
                result |= cls[key]
            except KeyError:
                raise ValueError(f"Unknown parsing option: {name!r}") from None
        return result
