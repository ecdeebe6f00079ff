"""Exceptions and error codes raised by the version and range parsers."""

from __future__ import annotations

from enum import Enum


class SemanticErrorCode(Enum):
    """Reason a version string was rejected."""

    MAJOR_NOT_FOUND = "Expected a major version component."
    MAJOR_LEADING_ZEROES = "The major version component cannot contain leading zeroes."
    MAJOR_TOO_BIG = "The major version component cannot be greater than 2147483647."
    MINOR_NOT_FOUND = "Expected a minor version component."
    MINOR_LEADING_ZEROES = "The minor version component cannot contain leading zeroes."
    MINOR_TOO_BIG = "The minor version component cannot be greater than 2147483647."
    PATCH_NOT_FOUND = "Expected a patch version component."
    PATCH_LEADING_ZEROES = "The patch version component cannot contain leading zeroes."
    PATCH_TOO_BIG = "The patch version component cannot be greater than 2147483647."
    PRE_RELEASE_NOT_FOUND = "Expected a pre-release identifier."
    PRE_RELEASE_LEADING_ZEROES = "The pre-release numeric identifier cannot contain leading zeroes."
    PRE_RELEASE_TOO_BIG = "The pre-release numeric identifier cannot be greater than 2147483647."
    BUILD_METADATA_NOT_FOUND = "Expected a build metadata identifier."
    LEFTOVERS = "Encountered an unexpected character at the end of the string."

    @property
    def message(self) -> str:
        return self.value


# Construction-time validation messages.
MAJOR_NEGATIVE = "The major version component cannot be less than 0."
MINOR_NEGATIVE = "The minor version component cannot be less than 0."
PATCH_NEGATIVE = "The patch version component cannot be less than 0."
PRE_RELEASE_EMPTY = "The pre-release identifier cannot be empty."
PRE_RELEASE_INVALID = "The pre-release identifier must only contain [0-9A-Za-z-] characters."
PRE_RELEASE_NEGATIVE = "The pre-release numeric identifier cannot be less than 0."
BUILD_METADATA_EMPTY = "The build metadata identifier cannot be empty."
BUILD_METADATA_INVALID = "The build metadata identifier must only contain [0-9A-Za-z-] characters."


class InvalidVersionError(ValueError):
    """Raised when text cannot be parsed as a version."""

    def __init__(self, code: SemanticErrorCode, text: str) -> None:
        super().__init__(code.message)
        self.code = code
        self.text = text


class InvalidRangeError(InvalidVersionError):
    """Raised when text cannot be parsed as a version range."""


class IncrementOverflowError(OverflowError):
    """Raised when an increment would push a number past 2147483647."""
