"""Forward-only text cursor shared by the version and range parsers."""

from __future__ import annotations

from collections.abc import Callable

CharPredicate = Callable[[str], bool]


def is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def is_letter(ch: str) -> bool:
    return "a" <= ch <= "z" or "A" <= ch <= "Z"


def is_identifier_char(ch: str) -> bool:
    """Return True for characters allowed in pre-release and build identifiers."""
    return is_digit(ch) or is_letter(ch) or ch == "-"


def is_whitespace(ch: str) -> bool:
    return ch.isspace()


class TextScanner:
    """Single-pass cursor over a string.

    ``peek`` returns an empty string once the end has been reached, so
    predicates never see ``None``.
    """

    __slots__ = ("text", "position")

    def __init__(self, text: str, position: int = 0) -> None:
        self.text = text
        self.position = position

    def __repr__(self) -> str:
        return f"TextScanner({self.text!r}, position={self.position})"

    @property
    def at_end(self) -> bool:
        return self.position >= len(self.text)

    def peek(self) -> str:
        if self.position < len(self.text):
            return self.text[self.position]
        return ""

    def peek_back(self) -> str:
        if 0 < self.position <= len(self.text):
            return self.text[self.position - 1]
        return ""

    def skip(self, ch: str) -> bool:
        if self.peek() == ch:
            self.position += 1
            return True
        return False

    def skip_any(self, chars: str) -> str | None:
        """Consume one character if it is any of ``chars`` and return it."""
        current = self.peek()
        if current and current in chars:
            self.position += 1
            return current
        return None

    def skip_sequence(self, sequence: str) -> bool:
        if self.text.startswith(sequence, self.position):
            self.position += len(sequence)
            return True
        return False

    def skip_while(self, predicate: CharPredicate) -> int:
        start = self.position
        text = self.text
        end = len(text)
        pos = start
        while pos < end and predicate(text[pos]):
            pos += 1
        self.position = pos
        return pos - start

    def skip_until(self, predicate: CharPredicate) -> int:
        return self.skip_while(lambda ch: not predicate(ch))

    def skip_all(self, ch: str) -> int:
        return self.skip_while(lambda current: current == ch)

    def skip_whitespace(self) -> int:
        return self.skip_while(is_whitespace)

    def read_while(self, predicate: CharPredicate) -> str:
        start = self.position
        self.skip_while(predicate)
        return self.text[start : self.position]

    def read_until(self, predicate: CharPredicate) -> str:
        start = self.position
        self.skip_until(predicate)
        return self.text[start : self.position]

    def read_remaining(self) -> str:
        start = self.position
        self.position = len(self.text)
        return self.text[start:]


MAX_NUMBER = 2147483647


def fold_digits(digits: str) -> int | None:
    """Accumulate a run of ASCII digits, or return None past ``MAX_NUMBER``."""
    result = 0
    for ch in digits:
        result = result * 10 + (ord(ch) - 48)
        if result > MAX_NUMBER:
            return None
    return result
