"""Pre-release identifiers: numeric or alphanumeric, with SemVer precedence."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import ClassVar

from . import errors
from .errors import InvalidVersionError, SemanticErrorCode
from .options import SemanticOptions
from .scanner import MAX_NUMBER, fold_digits, is_digit, is_identifier_char


def parse_identifier(
    text: str, allow_leading_zeroes: bool = False
) -> SemanticPreRelease | SemanticErrorCode:
    """Classify an identifier slice that only holds ``[0-9A-Za-z-]`` characters.

    Returns the identifier, or the error code explaining why it was rejected.
    """
    if not text:
        return SemanticErrorCode.PRE_RELEASE_NOT_FOUND
    if not all(is_digit(ch) for ch in text):
        return SemanticPreRelease(text)
    if not allow_leading_zeroes and text[0] == "0" and len(text) > 1:
        return SemanticErrorCode.PRE_RELEASE_LEADING_ZEROES
    number = fold_digits(text)
    if number is None:
        return SemanticErrorCode.PRE_RELEASE_TOO_BIG
    return SemanticPreRelease(number)


@total_ordering
@dataclass(frozen=True, slots=True)
class SemanticPreRelease:
    """A single dot-separated pre-release identifier.

    Numeric identifiers always precede text identifiers; numbers compare by
    value and text compares by ordinal. A digit-only string passed to the
    constructor is stored as a number.
    """

    value: int | str

    ZERO: ClassVar[SemanticPreRelease]

    def __post_init__(self) -> None:
        value = self.value
        if isinstance(value, bool):
            raise TypeError("Pre-release identifier must be an int or str, not bool")
        if isinstance(value, int):
            if value < 0:
                raise ValueError(errors.PRE_RELEASE_NEGATIVE)
            if value > MAX_NUMBER:
                raise ValueError(SemanticErrorCode.PRE_RELEASE_TOO_BIG.message)
            return
        if not isinstance(value, str):
            raise TypeError(f"Pre-release identifier must be an int or str, not {type(value).__name__}")
        if not value:
            raise ValueError(errors.PRE_RELEASE_EMPTY)
        if not all(is_identifier_char(ch) for ch in value):
            raise ValueError(errors.PRE_RELEASE_INVALID)
        if all(is_digit(ch) for ch in value):
            if value[0] == "0" and len(value) > 1:
                raise ValueError(SemanticErrorCode.PRE_RELEASE_LEADING_ZEROES.message)
            number = fold_digits(value)
            if number is None:
                raise ValueError(SemanticErrorCode.PRE_RELEASE_TOO_BIG.message)
            object.__setattr__(self, "value", number)

    @property
    def is_numeric(self) -> bool:
        return isinstance(self.value, int)

    @property
    def sort_key(self) -> tuple[int, int | str]:
        if isinstance(self.value, int):
            return (0, self.value)
        return (1, self.value)

    def __str__(self) -> str:
        return str(self.value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SemanticPreRelease):
            return NotImplemented
        return self.sort_key < other.sort_key

    @classmethod
    def coerce(cls, value: SemanticPreRelease | int | str) -> SemanticPreRelease:
        if isinstance(value, SemanticPreRelease):
            return value
        return cls(value)

    @classmethod
    def parse(
        cls, text: str, options: SemanticOptions = SemanticOptions.STRICT
    ) -> SemanticPreRelease:
        """Parse a single identifier.

        Raises:
            InvalidVersionError: If ``text`` is not a valid identifier.
        """
        result = cls._parse(text, options)
        if isinstance(result, SemanticErrorCode):
            raise InvalidVersionError(result, text)
        return result

    @classmethod
    def try_parse(
        cls, text: str, options: SemanticOptions = SemanticOptions.STRICT
    ) -> SemanticPreRelease | None:
        result = cls._parse(text, options)
        return None if isinstance(result, SemanticErrorCode) else result

    @classmethod
    def _parse(cls, text: str, options: SemanticOptions) -> SemanticPreRelease | SemanticErrorCode:
        if options & SemanticOptions.ALLOW_LEADING_WHITE:
            text = text.lstrip()
        if options & SemanticOptions.ALLOW_TRAILING_WHITE:
            text = text.rstrip()
        if not all(is_identifier_char(ch) for ch in text):
            return SemanticErrorCode.LEFTOVERS
        return parse_identifier(text, bool(options & SemanticOptions.ALLOW_LEADING_ZEROES))


SemanticPreRelease.ZERO = SemanticPreRelease(0)
