"""Custom version rendering.

Tokens:
- ``M`` major, ``MM`` major unless it is zero
- ``m`` minor, ``mm`` minor unless it is zero, ``mmm`` build metadata
- ``p`` patch, ``pp`` patch unless it is zero, ``ppp`` pre-release identifiers

The separators ``.``, ``-``, ``+`` and space are only written when the token
after them renders something. ``\\`` escapes the next character.

Partial versions additionally accept component rules after a colon, e.g.
``M:wx,_x`` (see :meth:`PartialComponent.format`).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .version import SemanticVersion

TokenRenderer = Callable[[str, "str | None"], str]

_SEPARATORS = ".-+ "
_MAX_RUN = {"M": 2, "m": 3, "p": 3}
_RULE_CHARS = frozenset("0xX*_w,")


def render(fmt: str, render_token: TokenRenderer, allow_rules: bool = False) -> str:
    """Expand ``fmt``, delegating each token (and its optional rules) to ``render_token``."""
    out: list[str] = []
    pending: str | None = None
    index = 0
    length = len(fmt)
    while index < length:
        ch = fmt[index]
        if ch in _MAX_RUN:
            end = index + 1
            while end < length and end - index < _MAX_RUN[ch] and fmt[end] == ch:
                end += 1
            token = fmt[index:end]
            rules = None
            if allow_rules and len(token) < 3 and end < length and fmt[end] == ":":
                start = end = end + 1
                while end < length and fmt[end] in _RULE_CHARS:
                    end += 1
                rules = fmt[start:end]
            rendered = render_token(token, rules)
            if rendered:
                if pending:
                    out.append(pending)
                out.append(rendered)
            pending = None
            index = end
            continue

        if pending:
            out.append(pending)
            pending = None
        if ch in _SEPARATORS:
            pending = ch
        elif ch == "\\":
            index += 1
            out.append(fmt[index] if index < length else "\\")
        else:
            out.append(ch)
        index += 1

    return "".join(out)


def _optional(value: int) -> str:
    return str(value) if value else ""


def format_version(version: SemanticVersion, fmt: str | None) -> str:
    if fmt is None or fmt in ("", "G", "g"):
        return str(version)

    def render_token(token: str, rules: str | None) -> str:
        if token == "M":
            return str(version.major)
        if token == "MM":
            return _optional(version.major)
        if token == "m":
            return str(version.minor)
        if token == "mm":
            return _optional(version.minor)
        if token == "mmm":
            return ".".join(version.build_metadata)
        if token == "p":
            return str(version.patch)
        if token == "pp":
            return _optional(version.patch)
        return ".".join(str(item) for item in version.pre_releases)

    return render(fmt, render_token)
