"""npm range syntax: partial versions, comparators, comparator sets and ranges."""

from __future__ import annotations

from .comparator_set import ComparatorSet
from .comparators import (
    AdvancedComparator,
    CaretRange,
    Comparator,
    EqualTo,
    GreaterThan,
    GreaterThanOrEqualTo,
    HyphenRange,
    LessThan,
    LessThanOrEqualTo,
    PrimitiveComparator,
    TildeRange,
    XRange,
)
from .partial import ComponentKind, PartialComponent, PartialVersion
from .version_range import VersionRange

__all__ = [
    "AdvancedComparator",
    "CaretRange",
    "Comparator",
    "ComparatorSet",
    "ComponentKind",
    "EqualTo",
    "GreaterThan",
    "GreaterThanOrEqualTo",
    "HyphenRange",
    "LessThan",
    "LessThanOrEqualTo",
    "PartialComponent",
    "PartialVersion",
    "PrimitiveComparator",
    "TildeRange",
    "VersionRange",
    "XRange",
]
