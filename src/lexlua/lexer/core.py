"""Resumable Lua tokenizer.

Classifies one chunk of Lua source (typically a line of editor text) into
tokens, resuming from and producing a continuation State so long comments,
long strings and backslash-newline continued strings can span chunks.

Each step either resumes the construct named by the continuation state or
walks the ordered dispatch table once. The dispatch table ends with a
catch-all rule, so every step consumes input.

Thread Safety:
Lexer instances are single-use. Create one per chunk.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from lexlua.config import get_lex_config
from lexlua.errors import SchemaError, StateError
from lexlua.lexer.classifiers import KeywordClassifierMixin, NumeralClassifierMixin
from lexlua.lexer.modes import LexerMode, mode_for
from lexlua.lexer.scanners import (
    DispatchScannerMixin,
    LongBracketScannerMixin,
    StringScannerMixin,
)
from lexlua.profiling import get_tokenize_accumulator
from lexlua.state import State
from lexlua.tokens import Kind, SubKind, Token, is_valid_token
from lexlua.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer(
    # Classifiers (pure logic, no position mutation)
    KeywordClassifierMixin,
    NumeralClassifierMixin,
    # Scanners (mode-specific scanning logic)
    LongBracketScannerMixin,
    StringScannerMixin,
    DispatchScannerMixin,
):
    """Resumable tokenizer for one chunk of Lua source.

    The lexer works on a private copy of the supplied State. The caller's
    State is overwritten with the final continuation only once the token
    sequence is exhausted; abandoning the sequence early leaves it exactly
    as it was supplied.

    Usage:
        >>> state = State.new()
        >>> for token in Lexer("s = [[long", state).tokenize():
        ...     print(token)
        Token(identifier, 's')
        Token(whitespace, ' ')
        Token(operator, '=')
        Token(whitespace, ' ')
        Token(string.longbracket, '[[')
        Token(string.content, 'long')
        >>> state.bracket_level
        0

    Thread Safety:
        Lexer instances are single-use. Create one per chunk.

    """

    __slots__ = (
        "_code",
        "_code_len",  # Cached len(code)
        "_pos",
        "_state",  # Working copy, mutated while scanning
        "_caller_state",  # Caller's object, updated on exhaustion
        "_finished",
        "_token_count",
        "_check_schema",
    )

    def __init__(self, code: str, state: State | None = None) -> None:
        """Initialize lexer with a chunk and its incoming continuation state.

        Args:
            code: Chunk of Lua source
            state: Continuation state from the previous chunk, updated in
                place once tokenize() is exhausted. A fresh State if None.

        Raises:
            StateError: If state violates the continuation invariant.
        """
        if state is None:
            state = State.new()
        state.validate()

        self._code = code
        self._code_len = len(code)
        self._pos = 0
        self._caller_state = state
        self._state = state.copy()
        self._finished = False
        self._token_count = 0
        self._check_schema = get_lex_config().check_schema

    @property
    def state(self) -> State:
        """Continuation state after this chunk (an independent copy).

        Raises:
            StateError: If the token sequence has not been exhausted yet.
        """
        if not self._finished:
            raise StateError("tokenize() must be exhausted before reading the final state")
        return self._state.copy()

    def tokenize(self) -> Iterator[Token]:
        """Tokenize the chunk into a token stream.

        Yields:
            Token objects one at a time, in source order

        Complexity: O(n) where n = len(code)
        """
        code_len = self._code_len
        while self._pos < code_len:
            yield from self._dispatch_mode()
        self._commit()

    def _dispatch_mode(self) -> Iterator[Token]:
        """Resume the open construct, or dispatch on fresh input.

        Yields:
            Token objects from the mode-specific scanner.
        """
        state = self._state
        mode = mode_for(state)
        if mode == LexerMode.NORMAL:
            yield from self._scan_normal()
        elif mode == LexerMode.LONG_BRACKET:
            assert state.multiline_kind is not None and state.bracket_level is not None
            yield from self._continue_long_bracket(state.multiline_kind, state.bracket_level)
        elif mode == LexerMode.QUOTED_STRING:
            quote = state.quote
            assert quote is not None
            state.clear()
            yield from self._continue_string(quote)

    def _emit(self, text: str, kind: Kind, sub_kind: SubKind | None = None) -> Token:
        """Create a token for text at the current position and advance past it."""
        if self._check_schema and not is_valid_token(kind, sub_kind):
            raise SchemaError(kind, sub_kind, text)
        self._pos += len(text)
        self._token_count += 1
        return Token(text, kind, sub_kind)

    def _commit(self) -> None:
        """Publish the final continuation state to the caller."""
        self._finished = True
        self._caller_state.update(self._state)

        if self._state.pending:
            logger.debug(
                "chunk ended inside %s (bracket_level=%r, quote=%r)",
                self._state.multiline_kind.value,
                self._state.bracket_level,
                self._state.quote,
            )

        acc = get_tokenize_accumulator()
        if acc is not None:
            acc.record_chunk(char_count=self._code_len, token_count=self._token_count)
