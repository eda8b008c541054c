"""Long bracket mode scanner mixin."""

from collections.abc import Iterator

from lexlua.state import MultilineKind, State
from lexlua.tokens import Kind, SubKind, Token

_TOKEN_KIND = {
    MultilineKind.COMMENT: Kind.COMMENT,
    MultilineKind.STRING: Kind.STRING,
}


class LongBracketScannerMixin:
    """Mixin providing long comment and long string scanning.

    A long bracket opens with ``[`` + level x ``=`` + ``[`` and closes only
    with ``]`` + the same number of ``=`` + ``]``. Closers of any other
    level are ordinary content.

    """

    # These will be set by the Lexer class
    _code: str
    _pos: int
    _state: State

    def _emit(self, text: str, kind: Kind, sub_kind: SubKind | None = None) -> Token:
        """Create a token and advance past it. Implemented by Lexer."""
        raise NotImplementedError

    def _open_long_bracket(self, kind: MultilineKind, opener: str) -> Iterator[Token]:
        """Emit the opening delimiter, then scan the body."""
        yield self._emit(opener, _TOKEN_KIND[kind], SubKind.LONGBRACKET)
        yield from self._continue_long_bracket(kind, len(opener) - 2)

    def _continue_long_bracket(self, kind: MultilineKind, level: int) -> Iterator[Token]:
        """Scan a long bracket body from the current position.

        Used both right after an opener and when a chunk resumes inside
        an open construct.

        Yields:
            CONTENT up to the closer and the LONGBRACKET closer itself, or,
            when the chunk ends first, CONTENT for the rest of the chunk.
        """
        token_kind = _TOKEN_KIND[kind]
        closer = "]" + "=" * level + "]"
        end = self._code.find(closer, self._pos)

        if end == -1:
            # Runs past the chunk: the next chunk resumes here
            self._state.open_long_bracket(kind, level)
            rest = self._code[self._pos :]
            if rest:
                yield self._emit(rest, token_kind, SubKind.CONTENT)
            return

        self._state.clear()
        if end > self._pos:
            yield self._emit(self._code[self._pos : end], token_kind, SubKind.CONTENT)
        yield self._emit(closer, token_kind, SubKind.LONGBRACKET)
