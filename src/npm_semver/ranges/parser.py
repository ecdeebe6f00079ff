"""Range grammar.

::

    range       ::= set ( '||' set )*
    set         ::= hyphen | simple ( ' ' simple )* | ''
    hyphen      ::= partial ' - ' partial
    simple      ::= operator? partial | '^' partial | '~' '>'? partial
    operator    ::= '<' | '>' | '<=' | '>=' | '='

Whitespace is allowed around ``||`` and after operators.
"""

from __future__ import annotations

import logging

from ..errors import SemanticErrorCode
from ..options import SemanticOptions
from ..scanner import TextScanner, is_whitespace
from ..version import SemanticVersion
from .comparator_set import ComparatorSet
from .comparators import PRIMITIVES, CaretRange, Comparator, HyphenRange, TildeRange, XRange
from .partial import PartialVersion, read_partial
from .version_range import VersionRange

LOGGER = logging.getLogger(__name__)

# Whitespace and leftovers are handled by the range grammar itself.
_RANGE_ONLY = (
    SemanticOptions.ALLOW_LEADING_WHITE
    | SemanticOptions.ALLOW_TRAILING_WHITE
    | SemanticOptions.ALLOW_LEFTOVERS
)


def _at_separator(scanner: TextScanner) -> bool:
    return scanner.text.startswith("||", scanner.position)


def _read_operator(scanner: TextScanner) -> str:
    for operator in (">=", "<=", ">", "<", "="):
        if scanner.skip_sequence(operator):
            return operator
    return ""


def _read_hyphen_end(scanner: TextScanner, options: SemanticOptions) -> PartialVersion | SemanticErrorCode | None:
    """Read ``- B`` after a hyphen range's lower bound, or rewind and return None."""
    start = scanner.position
    scanner.skip_whitespace()
    if is_whitespace(scanner.peek_back()) and scanner.skip("-") and is_whitespace(scanner.peek()):
        scanner.skip_whitespace()
        end_start = scanner.position
        end = read_partial(scanner, options)
        if not isinstance(end, SemanticErrorCode) and scanner.position == end_start:
            return SemanticErrorCode.LEFTOVERS
        return end
    scanner.position = start
    return None


def _read_comparator(scanner: TextScanner, options: SemanticOptions) -> Comparator | SemanticErrorCode:
    if scanner.skip("^"):
        scanner.skip_whitespace()
        partial = read_partial(scanner, options)
        return partial if isinstance(partial, SemanticErrorCode) else CaretRange(partial)

    if scanner.skip("~"):
        scanner.skip(">")
        scanner.skip_whitespace()
        partial = read_partial(scanner, options)
        return partial if isinstance(partial, SemanticErrorCode) else TildeRange(partial)

    operator = _read_operator(scanner)
    if operator:
        scanner.skip_whitespace()
    partial = read_partial(scanner, options)
    if isinstance(partial, SemanticErrorCode):
        return partial

    if not operator:
        end = _read_hyphen_end(scanner, options)
        if isinstance(end, SemanticErrorCode):
            return end
        if end is not None:
            return HyphenRange(partial, end)

    if partial.is_partial:
        return XRange(partial, operator)
    return PRIMITIVES[operator](SemanticVersion.from_partial(partial))


def _read_set(scanner: TextScanner, options: SemanticOptions) -> ComparatorSet | SemanticErrorCode:
    comparators: list[Comparator] = []
    scanner.skip_whitespace()
    while not scanner.at_end and not _at_separator(scanner):
        start = scanner.position
        comparator = _read_comparator(scanner, options)
        if isinstance(comparator, SemanticErrorCode):
            return comparator
        if scanner.position == start:
            return SemanticErrorCode.LEFTOVERS
        comparators.append(comparator)
        if not scanner.skip_whitespace() and not is_whitespace(scanner.peek_back()):
            if not scanner.at_end and not _at_separator(scanner):
                return SemanticErrorCode.LEFTOVERS
    if not comparators:
        comparators.append(XRange(PartialVersion()))
    return ComparatorSet(tuple(comparators))


def parse_range(text: str, options: SemanticOptions = SemanticOptions.STRICT) -> VersionRange | SemanticErrorCode:
    scanner = TextScanner(text)
    options = SemanticOptions(options & ~int(_RANGE_ONLY))
    sets: list[ComparatorSet] = []
    while True:
        result = _read_set(scanner, options)
        if isinstance(result, SemanticErrorCode):
            LOGGER.debug("Rejected range %r at index %d: %s", text, scanner.position, result.message)
            return result
        sets.append(result)
        if not scanner.skip_sequence("||"):
            break

    version_range = VersionRange(tuple(sets))
    LOGGER.debug("Parsed range %r as %r", text, str(version_range))
    return version_range
