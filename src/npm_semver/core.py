"""String-in, string-out helpers mirroring the npm ``semver`` package API.

These wrap the value types for callers that hold plain strings, such as
lockfile and manifest scanners. Invalid versions give ``None`` or ``False``
instead of raising, except where an ordering is requested.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .builder import IncrementType
from .comparers import compare as _compare
from .errors import IncrementOverflowError
from .options import SemanticOptions
from .ranges import VersionRange
from .version import SemanticVersion

LOGGER = logging.getLogger(__name__)

_CLEAN_OPTIONS = (
    SemanticOptions.ALLOW_LEADING_WHITE
    | SemanticOptions.ALLOW_TRAILING_WHITE
    | SemanticOptions.ALLOW_EQUALS_PREFIX
    | SemanticOptions.ALLOW_VERSION_PREFIX
)


def _options(loose: bool) -> SemanticOptions:
    return SemanticOptions.LOOSE if loose else SemanticOptions.STRICT


def _parse_many(versions: Iterable[str], options: SemanticOptions) -> list[SemanticVersion]:
    parsed = []
    for text in versions:
        version = SemanticVersion.try_parse(text, options)
        if version is None:
            LOGGER.debug("Skipping invalid version %r", text)
            continue
        parsed.append(version)
    return parsed


def valid(text: str, loose: bool = False) -> str | None:
    """Return the canonical form of ``text``, or None if it is not a version."""
    version = SemanticVersion.try_parse(text, _options(loose))
    return None if version is None else str(version)


def clean(text: str) -> str | None:
    """Strip surrounding whitespace and ``=``/``v`` prefixes, e.g. ``" =v1.2.3 "``."""
    version = SemanticVersion.try_parse(text, _CLEAN_OPTIONS)
    return None if version is None else str(version)


def satisfies(
    installed: str,
    expr: str,
    *,
    loose: bool = False,
    include_pre_releases: bool = False,
) -> bool:
    """Return True if the installed version falls inside the range expression."""
    options = _options(loose)
    version = SemanticVersion.try_parse(installed, options)
    if version is None:
        LOGGER.debug("Invalid version %r", installed)
        return False
    version_range = VersionRange.try_parse(expr, options)
    if version_range is None:
        LOGGER.debug("Invalid range %r", expr)
        return False
    return version_range.is_satisfied_by(version, include_pre_releases)


def compare(left: str, right: str, loose: bool = False) -> int:
    """Return -1, 0 or 1.

    Raises:
        InvalidVersionError: If either string is not a valid version.
    """
    options = _options(loose)
    return _compare(SemanticVersion.parse(left, options), SemanticVersion.parse(right, options))


def increment(
    text: str,
    kind: IncrementType | str,
    identifier: str | None = None,
    loose: bool = False,
) -> str | None:
    """Return ``text`` bumped by ``kind`` without build metadata, or None if that is impossible.

    Raises:
        ValueError: If ``kind`` is not a known increment type.
    """
    kind = IncrementType(kind)
    version = SemanticVersion.try_parse(text, _options(loose))
    if version is None:
        LOGGER.debug("Invalid version %r", text)
        return None
    try:
        builder = version.to_builder().increment(kind, identifier)
    except (IncrementOverflowError, ValueError) as exc:
        LOGGER.debug("Cannot increment %s: %s", version, exc)
        return None
    return str(builder.clear_build_metadata().to_version())


def sort_versions(versions: Iterable[str], loose: bool = False, reverse: bool = False) -> list[str]:
    """Sort version strings by precedence.

    Raises:
        InvalidVersionError: If any string is not a valid version.
    """
    options = _options(loose)
    parsed = [SemanticVersion.parse(text, options) for text in versions]
    return [str(version) for version in sorted(parsed, reverse=reverse)]


def max_satisfying(
    versions: Iterable[str],
    expr: str,
    *,
    loose: bool = False,
    include_pre_releases: bool = False,
) -> str | None:
    options = _options(loose)
    version_range = VersionRange.try_parse(expr, options)
    if version_range is None:
        return None
    best = version_range.max_satisfying(_parse_many(versions, options), include_pre_releases)
    return None if best is None else str(best)


def min_satisfying(
    versions: Iterable[str],
    expr: str,
    *,
    loose: bool = False,
    include_pre_releases: bool = False,
) -> str | None:
    options = _options(loose)
    version_range = VersionRange.try_parse(expr, options)
    if version_range is None:
        return None
    best = version_range.min_satisfying(_parse_many(versions, options), include_pre_releases)
    return None if best is None else str(best)
