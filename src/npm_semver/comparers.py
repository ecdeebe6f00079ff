"""Ordering helpers, including a comparer that takes build metadata into account."""

from __future__ import annotations

from .version import SemanticVersion


def _sign(left: tuple, right: tuple) -> int:
    return (left > right) - (left < right)


def compare(left: SemanticVersion, right: SemanticVersion) -> int:
    """Return -1, 0 or 1 by SemVer precedence, ignoring build metadata."""
    return _sign(left.precedence_key, right.precedence_key)


def metadata_sort_key(version: SemanticVersion) -> tuple:
    """Sort key that orders by precedence, then by build metadata.

    A version without metadata sorts after the same version with metadata.
    """
    return (version.precedence_key, not version.build_metadata, version.build_metadata)


def compare_with_metadata(left: SemanticVersion, right: SemanticVersion) -> int:
    return _sign(metadata_sort_key(left), metadata_sort_key(right))


def equals_with_metadata(left: SemanticVersion, right: SemanticVersion) -> bool:
    return left == right and left.build_metadata == right.build_metadata


def hash_with_metadata(version: SemanticVersion) -> int:
    return hash((version, version.build_metadata))
