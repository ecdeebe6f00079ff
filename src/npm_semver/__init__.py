"""npm-semver package.

Parses, orders, formats and increments semantic versions, and evaluates npm
style version ranges against them.
"""

from __future__ import annotations

from .builder import IncrementType, SemanticVersionBuilder
from .errors import IncrementOverflowError, InvalidRangeError, InvalidVersionError, SemanticErrorCode
from .options import SemanticOptions
from .prerelease import SemanticPreRelease
from .ranges import ComparatorSet, PartialComponent, PartialVersion, VersionRange
from .version import SemanticVersion

__all__ = [
    "ComparatorSet",
    "IncrementOverflowError",
    "IncrementType",
    "InvalidRangeError",
    "InvalidVersionError",
    "PartialComponent",
    "PartialVersion",
    "SemanticErrorCode",
    "SemanticOptions",
    "SemanticPreRelease",
    "SemanticVersion",
    "SemanticVersionBuilder",
    "VersionRange",
]
