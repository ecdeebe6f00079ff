"""Version grammar: a strict fast path and the flag-driven general path.

Both paths return either a :class:`SemanticVersion` or the
:class:`SemanticErrorCode` describing the first problem found, so the
throwing and non-throwing entry points share one routine.
"""

from __future__ import annotations

from typing import NamedTuple

from .errors import SemanticErrorCode
from .options import SemanticOptions
from .prerelease import SemanticPreRelease, parse_identifier
from .scanner import TextScanner, fold_digits, is_digit, is_identifier_char, is_letter
from .version import SemanticVersion


class ComponentCodes(NamedTuple):
    not_found: SemanticErrorCode
    leading_zeroes: SemanticErrorCode
    too_big: SemanticErrorCode


MAJOR_CODES = ComponentCodes(
    SemanticErrorCode.MAJOR_NOT_FOUND,
    SemanticErrorCode.MAJOR_LEADING_ZEROES,
    SemanticErrorCode.MAJOR_TOO_BIG,
)
MINOR_CODES = ComponentCodes(
    SemanticErrorCode.MINOR_NOT_FOUND,
    SemanticErrorCode.MINOR_LEADING_ZEROES,
    SemanticErrorCode.MINOR_TOO_BIG,
)
PATCH_CODES = ComponentCodes(
    SemanticErrorCode.PATCH_NOT_FOUND,
    SemanticErrorCode.PATCH_LEADING_ZEROES,
    SemanticErrorCode.PATCH_TOO_BIG,
)

VersionOrError = SemanticVersion | SemanticErrorCode


def parse_version(text: str, options: SemanticOptions = SemanticOptions.STRICT) -> VersionOrError:
    if options == SemanticOptions.STRICT:
        return parse_strict(text)
    return parse_flexible(text, options)


def classify_number(digits: str, codes: ComponentCodes, allow_leading_zeroes: bool) -> int | SemanticErrorCode:
    if not digits:
        return codes.not_found
    if not allow_leading_zeroes and digits[0] == "0" and len(digits) > 1:
        return codes.leading_zeroes
    number = fold_digits(digits)
    if number is None:
        return codes.too_big
    return number


def parse_strict(text: str) -> VersionOrError:
    """Parse the strict grammar with plain index arithmetic."""
    length = len(text)
    pos = 0
    components: list[int] = []

    for codes in (MAJOR_CODES, MINOR_CODES, PATCH_CODES):
        if components:
            if pos >= length or text[pos] != ".":
                return codes.not_found
            pos += 1
        start = pos
        while pos < length and is_digit(text[pos]):
            pos += 1
        number = classify_number(text[start:pos], codes, False)
        if isinstance(number, SemanticErrorCode):
            return number
        components.append(number)

    pre_releases: list[SemanticPreRelease] = []
    if pos < length and text[pos] == "-":
        while True:
            pos += 1
            start = pos
            while pos < length and is_identifier_char(text[pos]):
                pos += 1
            identifier = parse_identifier(text[start:pos])
            if isinstance(identifier, SemanticErrorCode):
                return identifier
            pre_releases.append(identifier)
            if pos >= length or text[pos] != ".":
                break

    build_metadata: list[str] = []
    if pos < length and text[pos] == "+":
        while True:
            pos += 1
            start = pos
            while pos < length and is_identifier_char(text[pos]):
                pos += 1
            if pos == start:
                return SemanticErrorCode.BUILD_METADATA_NOT_FOUND
            build_metadata.append(text[start:pos])
            if pos >= length or text[pos] != ".":
                break

    if pos < length:
        return SemanticErrorCode.LEFTOVERS

    major, minor, patch = components
    return SemanticVersion(major, minor, patch, tuple(pre_releases), tuple(build_metadata))


def skip_prefixes(scanner: TextScanner, options: SemanticOptions) -> None:
    """Skip the optional ``=`` and ``v`` prefixes, in that order."""
    inner_white = options & SemanticOptions.ALLOW_INNER_WHITE
    if options & SemanticOptions.ALLOW_EQUALS_PREFIX and scanner.skip("="):
        if inner_white:
            scanner.skip_whitespace()
    if options & SemanticOptions.ALLOW_VERSION_PREFIX and scanner.skip_any("vV"):
        if inner_white:
            scanner.skip_whitespace()


def read_pre_releases(
    scanner: TextScanner, options: SemanticOptions
) -> list[SemanticPreRelease] | SemanticErrorCode:
    """Read dot-separated pre-release identifiers after a consumed ``-``."""
    inner_white = options & SemanticOptions.ALLOW_INNER_WHITE
    remove_empty = options & SemanticOptions.REMOVE_EMPTY_PRE_RELEASES
    allow_leading_zeroes = bool(options & SemanticOptions.ALLOW_LEADING_ZEROES)
    identifiers: list[SemanticPreRelease] = []
    while True:
        if inner_white:
            scanner.skip_whitespace()
        text = scanner.read_while(is_identifier_char)
        if inner_white:
            scanner.skip_whitespace()
        if text or not remove_empty:
            identifier = parse_identifier(text, allow_leading_zeroes)
            if isinstance(identifier, SemanticErrorCode):
                return identifier
            identifiers.append(identifier)
        if not scanner.skip("."):
            return identifiers


def read_joined_pre_releases(
    scanner: TextScanner, options: SemanticOptions
) -> list[SemanticPreRelease] | SemanticErrorCode:
    """Read a pre-release written directly after the patch, e.g. ``1.2.3beta5``.

    Alternating digit and letter runs each become one identifier. A ``.``
    after the run continues with regular dot-separated identifiers.
    """
    allow_leading_zeroes = bool(options & SemanticOptions.ALLOW_LEADING_ZEROES)
    identifiers: list[SemanticPreRelease] = []
    while True:
        current = scanner.peek()
        if is_digit(current):
            text = scanner.read_while(is_digit)
        elif is_letter(current):
            text = scanner.read_while(is_letter)
        else:
            break
        identifier = parse_identifier(text, allow_leading_zeroes)
        if isinstance(identifier, SemanticErrorCode):
            return identifier
        identifiers.append(identifier)

    if options & SemanticOptions.ALLOW_INNER_WHITE:
        scanner.skip_whitespace()
    if scanner.skip("."):
        rest = read_pre_releases(scanner, options)
        if isinstance(rest, SemanticErrorCode):
            return rest
        identifiers.extend(rest)
    return identifiers


def read_build_metadata(scanner: TextScanner, options: SemanticOptions) -> list[str] | SemanticErrorCode:
    """Read dot-separated build metadata identifiers after a consumed ``+``."""
    inner_white = options & SemanticOptions.ALLOW_INNER_WHITE
    remove_empty = options & SemanticOptions.REMOVE_EMPTY_BUILD_METADATA
    identifiers: list[str] = []
    while True:
        if inner_white:
            scanner.skip_whitespace()
        text = scanner.read_while(is_identifier_char)
        if inner_white:
            scanner.skip_whitespace()
        if text:
            identifiers.append(text)
        elif not remove_empty:
            return SemanticErrorCode.BUILD_METADATA_NOT_FOUND
        if not scanner.skip("."):
            return identifiers


def read_suffixes(
    scanner: TextScanner, options: SemanticOptions
) -> tuple[list[SemanticPreRelease], list[str]] | SemanticErrorCode:
    pre_releases: list[SemanticPreRelease] = []
    if scanner.skip("-"):
        result = read_pre_releases(scanner, options)
        if isinstance(result, SemanticErrorCode):
            return result
        pre_releases = result
    elif options & SemanticOptions.OPTIONAL_PRE_RELEASE_SEPARATOR:
        current = scanner.peek()
        if is_digit(current) or is_letter(current):
            result = read_joined_pre_releases(scanner, options)
            if isinstance(result, SemanticErrorCode):
                return result
            pre_releases = result

    build_metadata: list[str] = []
    if scanner.skip("+"):
        metadata = read_build_metadata(scanner, options)
        if isinstance(metadata, SemanticErrorCode):
            return metadata
        build_metadata = metadata
    return pre_releases, build_metadata


def parse_flexible(text: str, options: SemanticOptions) -> VersionOrError:
    """Parse ``text`` honouring every flag in ``options`` independently."""
    scanner = TextScanner(text)
    inner_white = options & SemanticOptions.ALLOW_INNER_WHITE
    allow_leading_zeroes = bool(options & SemanticOptions.ALLOW_LEADING_ZEROES)

    if options & SemanticOptions.ALLOW_LEADING_WHITE:
        scanner.skip_whitespace()
    skip_prefixes(scanner, options)

    major = classify_number(scanner.read_while(is_digit), MAJOR_CODES, allow_leading_zeroes)
    if isinstance(major, SemanticErrorCode):
        return major
    if inner_white:
        scanner.skip_whitespace()

    components = [major]
    for codes, flag in (
        (MINOR_CODES, SemanticOptions.OPTIONAL_MINOR),
        (PATCH_CODES, SemanticOptions.OPTIONAL_PATCH),
    ):
        optional = options & flag
        if scanner.skip("."):
            if inner_white:
                scanner.skip_whitespace()
            if optional and not is_digit(scanner.peek()):
                components.append(0)
                continue
            number = classify_number(scanner.read_while(is_digit), codes, allow_leading_zeroes)
            if isinstance(number, SemanticErrorCode):
                return number
            components.append(number)
            if inner_white:
                scanner.skip_whitespace()
        elif optional:
            components.append(0)
        else:
            return codes.not_found

    suffixes = read_suffixes(scanner, options)
    if isinstance(suffixes, SemanticErrorCode):
        return suffixes
    pre_releases, build_metadata = suffixes

    if options & SemanticOptions.ALLOW_TRAILING_WHITE:
        scanner.skip_whitespace()
    if not scanner.at_end and not options & SemanticOptions.ALLOW_LEFTOVERS:
        return SemanticErrorCode.LEFTOVERS

    major, minor, patch = components
    return SemanticVersion(major, minor, patch, tuple(pre_releases), tuple(build_metadata))
