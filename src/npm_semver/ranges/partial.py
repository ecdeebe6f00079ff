"""Partial versions: the ``1``, ``1.2``, ``1.x`` and ``*`` operands of range syntax."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import IntEnum
from functools import total_ordering
from typing import ClassVar

from ..errors import InvalidVersionError, SemanticErrorCode
from ..formatting import render
from ..options import SemanticOptions
from ..parser import (
    MAJOR_CODES,
    MINOR_CODES,
    PATCH_CODES,
    classify_number,
    read_suffixes,
    skip_prefixes,
)
from ..prerelease import SemanticPreRelease
from ..scanner import MAX_NUMBER, TextScanner, is_digit, is_whitespace
from ..version import identifier_sequence, validate_build_metadata

WILDCARD_GLYPHS = "xX*"


class ComponentKind(IntEnum):
    """Component kinds, in ascending sort order."""

    OMITTED = 0
    WILDCARD = 1
    NUMERIC = 2


@total_ordering
@dataclass(frozen=True, slots=True)
class PartialComponent:
    """One component of a partial version.

    Wildcards compare equal whatever glyph they were written with; the glyph
    is only kept so the component renders the way it was parsed.
    """

    kind: ComponentKind
    value: int = 0
    glyph: str = field(default="", compare=False)

    OMITTED: ClassVar[PartialComponent]
    WILDCARD: ClassVar[PartialComponent]
    ZERO: ClassVar[PartialComponent]

    def __post_init__(self) -> None:
        kind = ComponentKind(self.kind)
        object.__setattr__(self, "kind", kind)
        if kind is ComponentKind.NUMERIC:
            if isinstance(self.value, bool) or not isinstance(self.value, int):
                raise TypeError("Numeric partial components must hold an int")
            if self.value < 0:
                raise ValueError("The partial version component cannot be less than 0.")
            if self.value > MAX_NUMBER:
                raise ValueError("The partial version component cannot be greater than 2147483647.")
            object.__setattr__(self, "glyph", "")
            return
        if self.value != 0:
            raise ValueError(f"A {kind.name.lower()} partial component cannot hold a value")
        if kind is ComponentKind.WILDCARD:
            glyph = self.glyph or "x"
            if glyph not in WILDCARD_GLYPHS:
                raise ValueError(f"Invalid wildcard character: {glyph!r}")
            object.__setattr__(self, "glyph", glyph)
        else:
            object.__setattr__(self, "glyph", "")

    @classmethod
    def numeric(cls, value: int) -> PartialComponent:
        return cls(ComponentKind.NUMERIC, value)

    @classmethod
    def wildcard(cls, glyph: str = "x") -> PartialComponent:
        return cls(ComponentKind.WILDCARD, 0, glyph)

    @classmethod
    def coerce(cls, value: PartialComponent | int | str | None) -> PartialComponent:
        if isinstance(value, PartialComponent):
            return value
        if value is None:
            return cls.OMITTED
        if isinstance(value, int):
            return cls.numeric(value)
        return cls.parse(value)

    @classmethod
    def parse(cls, text: str) -> PartialComponent:
        """Parse ``""``, a wildcard glyph, or a number without leading zeroes."""
        if not text:
            return cls.OMITTED
        if text in WILDCARD_GLYPHS and len(text) == 1:
            return cls.wildcard(text)
        if all(is_digit(ch) for ch in text):
            number = classify_number(text, MAJOR_CODES, False)
            if not isinstance(number, SemanticErrorCode):
                return cls.numeric(number)
        raise ValueError(f"Invalid partial version component: {text!r}")

    @property
    def is_numeric(self) -> bool:
        return self.kind is ComponentKind.NUMERIC

    @property
    def is_wildcard(self) -> bool:
        return self.kind is ComponentKind.WILDCARD

    @property
    def is_omitted(self) -> bool:
        return self.kind is ComponentKind.OMITTED

    @property
    def numeric_or_zero(self) -> int:
        return self.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PartialComponent):
            return NotImplemented
        return (self.kind, self.value) < (other.kind, other.value)

    def __str__(self) -> str:
        if self.kind is ComponentKind.NUMERIC:
            return str(self.value)
        return self.glyph

    def format(self, rules: str | None = None) -> str:
        """Render the component using comma-separated two-character rules.

        Each rule is a specifier followed by its replacement. Specifiers are
        ``0`` (zero), ``x``, ``X``, ``*`` (that wildcard glyph), ``_``
        (omitted) and ``w`` (any wildcard); a ``_`` replacement renders
        nothing. Positive numbers ignore the rules. ``"0_,wx"`` omits zeroes
        and writes every wildcard as ``x``.

        Raises:
            ValueError: If ``rules`` is malformed.
        """
        if self.kind is ComponentKind.NUMERIC and self.value > 0:
            return str(self.value)
        if rules is None or rules in ("G", "g"):
            return str(self)
        if self.kind is ComponentKind.NUMERIC:
            mine = "0"
        elif self.kind is ComponentKind.OMITTED:
            mine = "_"
        else:
            mine = self.glyph

        if rules and (len(rules) - 2) % 3 != 0:
            raise ValueError(f"Invalid component format: {rules!r}")
        for index in range(0, len(rules), 3):
            specifier, replacer = rules[index], rules[index + 1]
            if index + 2 < len(rules) and rules[index + 2] != ",":
                raise ValueError(f"Expected a comma between component format rules: {rules!r}")
            if specifier == mine or (specifier == "w" and self.is_wildcard):
                return "" if replacer == "_" else replacer
        return "" if mine == "_" else mine


PartialComponent.OMITTED = PartialComponent(ComponentKind.OMITTED)
PartialComponent.WILDCARD = PartialComponent(ComponentKind.WILDCARD, 0, "x")
PartialComponent.ZERO = PartialComponent(ComponentKind.NUMERIC, 0)

ComponentLike = PartialComponent | int | str | None


@dataclass(frozen=True, repr=False)
class PartialVersion:
    """A version whose trailing components may be omitted or wildcards.

    Once a component is omitted the ones after it are omitted too, and once
    a component is not numeric the ones after it are not numeric either.
    Pre-release and build metadata need a numeric patch.
    """

    major: PartialComponent = PartialComponent.OMITTED
    minor: PartialComponent = PartialComponent.OMITTED
    patch: PartialComponent = PartialComponent.OMITTED
    pre_releases: tuple[SemanticPreRelease, ...] = ()
    build_metadata: tuple[str, ...] = field(default=(), compare=False)

    def __post_init__(self) -> None:
        major = PartialComponent.coerce(self.major)
        minor = PartialComponent.coerce(self.minor)
        patch = PartialComponent.coerce(self.patch)
        for name, previous, current in (("minor", major, minor), ("patch", minor, patch)):
            if previous.is_omitted and not current.is_omitted:
                raise ValueError(f"The {name} component must be omitted when the one before it is.")
            if not previous.is_numeric and current.is_numeric:
                raise ValueError(f"The {name} component cannot be numeric after a wildcard.")
        pre_releases = identifier_sequence("pre_releases", self.pre_releases)
        build_metadata = identifier_sequence("build_metadata", self.build_metadata)
        pre_releases = tuple(SemanticPreRelease.coerce(item) for item in pre_releases)
        build_metadata = tuple(validate_build_metadata(item) for item in build_metadata)
        if (pre_releases or build_metadata) and not patch.is_numeric:
            raise ValueError("Pre-release and build metadata require a numeric patch component.")
        object.__setattr__(self, "major", major)
        object.__setattr__(self, "minor", minor)
        object.__setattr__(self, "patch", patch)
        object.__setattr__(self, "pre_releases", pre_releases)
        object.__setattr__(self, "build_metadata", build_metadata)

    @classmethod
    def of(
        cls,
        major: ComponentLike = None,
        minor: ComponentLike = None,
        patch: ComponentLike = None,
        pre_releases: Iterable[SemanticPreRelease | int | str] = (),
        build_metadata: Iterable[str] = (),
    ) -> PartialVersion:
        return cls(
            major,
            minor,
            patch,
            tuple(identifier_sequence("pre_releases", pre_releases)),
            tuple(identifier_sequence("build_metadata", build_metadata)),
        )

    @property
    def is_partial(self) -> bool:
        """True unless all three components are numbers."""
        return not self.patch.is_numeric

    @property
    def is_any(self) -> bool:
        return not self.major.is_numeric

    def __str__(self) -> str:
        parts = []
        for component in (self.major, self.minor, self.patch):
            if component.is_omitted:
                break
            parts.append(str(component))
        text = ".".join(parts)
        if self.pre_releases:
            text += "-" + ".".join(str(item) for item in self.pre_releases)
        if self.build_metadata:
            text += "+" + ".".join(self.build_metadata)
        return text

    def __repr__(self) -> str:
        return f"PartialVersion({str(self)!r})"

    def __format__(self, format_spec: str) -> str:
        return self.format(format_spec)

    def format(self, fmt: str | None = None) -> str:
        """Render with the version format tokens; ``M:rules`` formats a component."""
        if fmt is None or fmt in ("", "G", "g"):
            return str(self)

        def render_token(token: str, rules: str | None) -> str:
            if token == "mmm":
                return ".".join(self.build_metadata)
            if token == "ppp":
                return ".".join(str(item) for item in self.pre_releases)
            component = {"M": self.major, "m": self.minor, "p": self.patch}[token[0]]
            if rules is None and len(token) == 2:
                rules = "0_"
            return component.format(rules)

        return render(fmt, render_token, allow_rules=True)

    @classmethod
    def parse(cls, text: str, options: SemanticOptions = SemanticOptions.STRICT) -> PartialVersion:
        """Parse ``text`` as a partial version.

        Raises:
            InvalidVersionError: If ``text`` is not a valid partial version.
        """
        result = parse_partial(text, options)
        if isinstance(result, SemanticErrorCode):
            raise InvalidVersionError(result, text)
        return result

    @classmethod
    def try_parse(
        cls, text: str, options: SemanticOptions = SemanticOptions.STRICT
    ) -> PartialVersion | None:
        result = parse_partial(text, options)
        return None if isinstance(result, SemanticErrorCode) else result


def _read_component(
    scanner: TextScanner, codes, allow_leading_zeroes: bool
) -> PartialComponent | SemanticErrorCode:
    current = scanner.peek()
    if is_digit(current):
        number = classify_number(scanner.read_while(is_digit), codes, allow_leading_zeroes)
        if isinstance(number, SemanticErrorCode):
            return number
        return PartialComponent.numeric(number)
    if current and current in WILDCARD_GLYPHS:
        scanner.position += 1
        return PartialComponent.wildcard(current)
    return PartialComponent.OMITTED


def read_partial(scanner: TextScanner, options: SemanticOptions) -> PartialVersion | SemanticErrorCode:
    """Read a partial version at the scanner's position, leaving the rest unread.

    A number written after a wildcard (``1.x.3``) is read as that wildcard.
    The pre-release and build metadata suffix is only read straight after a
    numeric patch, so ``1.2.3 - 2.0.0`` keeps its hyphen for the range parser.
    """
    inner_white = options & SemanticOptions.ALLOW_INNER_WHITE
    allow_leading_zeroes = bool(options & SemanticOptions.ALLOW_LEADING_ZEROES)
    skip_prefixes(scanner, options)

    components: list[PartialComponent] = []
    for codes in (MAJOR_CODES, MINOR_CODES, PATCH_CODES):
        if components:
            if components[-1].is_omitted or not scanner.skip("."):
                break
            if inner_white:
                scanner.skip_whitespace()
        component = _read_component(scanner, codes, allow_leading_zeroes)
        if isinstance(component, SemanticErrorCode):
            return component
        if component.is_numeric and components and not components[-1].is_numeric:
            component = components[-1]
        components.append(component)
        if component.is_omitted:
            break
        if inner_white:
            scanner.skip_whitespace()
    components.extend([PartialComponent.OMITTED] * (3 - len(components)))
    major, minor, patch = components

    pre_releases: list[SemanticPreRelease] = []
    build_metadata: list[str] = []
    if patch.is_numeric and not is_whitespace(scanner.peek_back()):
        suffixes = read_suffixes(scanner, options)
        if isinstance(suffixes, SemanticErrorCode):
            return suffixes
        pre_releases, build_metadata = suffixes

    return PartialVersion(major, minor, patch, tuple(pre_releases), tuple(build_metadata))


def parse_partial(text: str, options: SemanticOptions = SemanticOptions.STRICT) -> PartialVersion | SemanticErrorCode:
    scanner = TextScanner(text)
    if options & SemanticOptions.ALLOW_LEADING_WHITE:
        scanner.skip_whitespace()
    result = read_partial(scanner, options)
    if isinstance(result, SemanticErrorCode):
        return result
    if options & SemanticOptions.ALLOW_TRAILING_WHITE:
        scanner.skip_whitespace()
    if not scanner.at_end and not options & SemanticOptions.ALLOW_LEFTOVERS:
        return SemanticErrorCode.LEFTOVERS
    return result
