"""Quoted string mode scanner mixin."""

from __future__ import annotations

import re
from collections.abc import Iterator

from lexlua.state import Quote, State
from lexlua.tokens import Kind, SubKind, Token
from lexlua.utils.logger import get_logger

logger = get_logger(__name__)

_CONTENT: dict[str, re.Pattern[str]] = {
    "'": re.compile(r"[^\\\r\n']+"),
    '"': re.compile(r'[^\\\r\n"]+'),
}

# Decimal, \u{XXX}, backslash-CRLF, then any one character (or none, for
# a backslash that ends the chunk)
_ESCAPE = re.compile(r"\\(?:[0-9]{1,3}|u\{[0-9a-fA-F]+\}|\r\n|.?)", re.DOTALL)

# Escapes after which the string goes on in the next chunk
_LINE_CONTINUATIONS = frozenset({"\\", "\\\r", "\\\n", "\\\r\n"})


class StringScannerMixin:
    """Mixin providing quoted string scanning logic.

    Emits CONTENT runs and ESCAPE sequences until the closing QUOTE. A
    backslash followed by a line break, or a backslash that ends the
    chunk, pauses the string: continuation state is recorded and the next
    chunk resumes in the content loop.

    """

    # These will be set by the Lexer class
    _code: str
    _pos: int
    _state: State

    def _emit(self, text: str, kind: Kind, sub_kind: SubKind | None = None) -> Token:
        """Create a token and advance past it. Implemented by Lexer."""
        raise NotImplementedError

    def _open_string(self, quote: Quote) -> Iterator[Token]:
        """Emit the opening quote, then scan the string body."""
        yield self._emit(quote, Kind.STRING, SubKind.QUOTE)
        yield from self._continue_string(quote)

    def _continue_string(self, quote: Quote) -> Iterator[Token]:
        """Scan a quoted string body from the current position.

        Every loop iteration either emits a non-empty token or leaves the
        loop, so the scan always terminates.
        """
        code = self._code
        content = _CONTENT[quote]

        while not code.startswith(quote, self._pos):
            match = content.match(code, self._pos)
            if match is not None:
                yield self._emit(match.group(), Kind.STRING, SubKind.CONTENT)
                continue

            match = _ESCAPE.match(code, self._pos)
            if match is None:
                # Bare line break or end of chunk: the string is unterminated
                # and ends here. Whatever follows is scanned afresh.
                logger.debug("unterminated %s-quoted string at offset %d", quote, self._pos)
                return

            escape = match.group()
            yield self._emit(escape, Kind.STRING, SubKind.ESCAPE)
            if escape in _LINE_CONTINUATIONS:
                self._state.open_string(quote)
                return

        yield self._emit(quote, Kind.STRING, SubKind.QUOTE)
