"""Normal mode scanner mixin: the ordered pattern dispatch table."""

from __future__ import annotations

import re
from collections.abc import Iterator

from lexlua.state import MultilineKind, Quote
from lexlua.tokens import Kind, SubKind, Token

_WHITESPACE = re.compile(r"\s+", re.ASCII)
_NAME = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_DIGIT = re.compile(r"[0-9]")
_COMMENT_START = re.compile(r"--")
_QUOTE = re.compile(r"[\"']")
_LONG_BRACKET_OPEN = re.compile(r"\[=*\[")
_VARARG = re.compile(r"\.\.\.")
_CONCAT = re.compile(r"\.\.")
_DOT_DIGIT = re.compile(r"\.[0-9]")
_TWO_CHAR_OPERATOR = re.compile(r"::|~=|>>|>=|==|<=|<<|//")
_OPERATOR = re.compile(r"[-,;:.()\[\]{}*/&#^+<=>|~%]")
_INVALID_RUN = re.compile(r"[^0-9A-Za-z\s_\"'\-,;:.()\[\]{}*/&#^+<=>|~%]+", re.ASCII)
_ANY = re.compile(r".", re.DOTALL)

_LINE_CONTENT = re.compile(r"[^\r\n]+")


class DispatchScannerMixin:
    """Mixin providing normal mode scanning logic.

    Walks an ordered rule table against the remaining input; the first
    pattern that matches at the current position wins and its handler
    emits one or more tokens. The final rule matches any character, so
    every step makes progress.

    Order matters where patterns share a prefix: ``...`` before ``..``
    before ``.digit`` before the single ``.`` operator, and two-character
    operators before the single-character class.

    """

    # (pattern, handler method name), first match wins
    _RULES: tuple[tuple[re.Pattern[str], str], ...] = (
        (_WHITESPACE, "_scan_whitespace"),
        (_NAME, "_scan_name"),
        (_DIGIT, "_scan_numeral"),
        (_COMMENT_START, "_scan_comment"),
        (_QUOTE, "_open_string"),
        (_LONG_BRACKET_OPEN, "_open_long_string"),
        (_VARARG, "_scan_operator"),
        (_CONCAT, "_scan_operator"),
        (_DOT_DIGIT, "_scan_numeral"),
        (_TWO_CHAR_OPERATOR, "_scan_operator"),
        (_OPERATOR, "_scan_operator"),
        (_INVALID_RUN, "_scan_invalid"),
        (_ANY, "_scan_invalid"),
    )

    # These will be set by the Lexer class
    _code: str
    _pos: int

    def _emit(self, text: str, kind: Kind, sub_kind: SubKind | None = None) -> Token:
        """Create a token and advance past it. Implemented by Lexer."""
        raise NotImplementedError

    def _classify_name(self, name: str) -> tuple[Kind, SubKind | None]:
        raise NotImplementedError

    def _classify_numeral(self) -> str:
        raise NotImplementedError

    def _open_long_bracket(self, kind: MultilineKind, opener: str) -> Iterator[Token]:
        raise NotImplementedError

    def _open_string(self, quote: Quote) -> Iterator[Token]:
        raise NotImplementedError

    def _scan_normal(self) -> Iterator[Token]:
        """Apply the first dispatch rule matching at the current position."""
        code = self._code
        pos = self._pos
        for pattern, handler in self._RULES:
            match = pattern.match(code, pos)
            if match is not None:
                yield from getattr(self, handler)(match.group())
                return

    def _scan_whitespace(self, whitespace: str) -> Iterator[Token]:
        yield self._emit(whitespace, Kind.WHITESPACE)

    def _scan_name(self, name: str) -> Iterator[Token]:
        kind, sub_kind = self._classify_name(name)
        yield self._emit(name, kind, sub_kind)

    def _scan_numeral(self, _prefix: str) -> Iterator[Token]:
        yield self._emit(self._classify_numeral(), Kind.NUMBER)

    def _scan_operator(self, operator: str) -> Iterator[Token]:
        yield self._emit(operator, Kind.OPERATOR)

    def _scan_invalid(self, chars: str) -> Iterator[Token]:
        yield self._emit(chars, Kind.INVALID)

    def _scan_comment(self, dashes: str) -> Iterator[Token]:
        """Scan a comment after its ``--`` marker.

        A long bracket opener right after the marker starts a long comment.
        Otherwise the rest of the physical line is the comment; the line
        terminator is left for the whitespace rule.
        """
        yield self._emit(dashes, Kind.COMMENT, SubKind.CONTENT)

        opener = _LONG_BRACKET_OPEN.match(self._code, self._pos)
        if opener is not None:
            yield from self._open_long_bracket(MultilineKind.COMMENT, opener.group())
            return

        content = _LINE_CONTENT.match(self._code, self._pos)
        if content is not None:
            yield self._emit(content.group(), Kind.COMMENT, SubKind.CONTENT)

    def _open_long_string(self, opener: str) -> Iterator[Token]:
        yield from self._open_long_bracket(MultilineKind.STRING, opener)
