"""
lexlua — Resumable Lua Tokenizer for Syntax Highlighting

Classifies Lua source into (text, kind, sub_kind) tokens one chunk at a
time. A continuation State carries open long comments, long strings and
backslash-newline continued strings from one chunk to the next, so an
editor can re-tokenize any single line from a bookmarked state.
Malformed input is never rejected; it is classified as ``invalid``.

Quick Start:
    >>> from lexlua import tokenize
    >>> [(t.text, t.kind.value) for t in tokenize("x = 1")]
    [('x', 'identifier'), (' ', 'whitespace'), ('=', 'operator'), (' ', 'whitespace'), ('1', 'number')]

Line by line:
    >>> from lexlua import State, tokenize
    >>> state = State.new()
    >>> for line in ["--[[ a long", "comment ]] x"]:
    ...     tokens = list(tokenize(line, state))  # drain before reusing state
    >>> state.pending
    False

Installation:
    pip install lexlua               # Zero runtime dependencies
"""

from collections.abc import Iterator

from lexlua.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from lexlua.errors import LexLuaError, SchemaError, StateError
from lexlua.highlighting import LuaHighlighter
from lexlua.lexer import KEYWORDS, Lexer
from lexlua.profiling import TokenizeAccumulator, get_tokenize_accumulator, profiled_tokenize
from lexlua.serialization import state_from_json, state_to_json, tokens_to_json
from lexlua.state import MultilineKind, State
from lexlua.tokens import TOKENS, Kind, SubKind, Token, is_valid_token, iter_token_styles
from lexlua.utils.lines import split_lines

__version__ = "0.1.0"


def tokenize(code: str, state: State | None = None) -> Iterator[Token]:
    """Tokenize a chunk of Lua source.

    Args:
        code: Chunk of Lua source, typically one line including its terminator
        state: Continuation state from the previous chunk. It is updated in
            place once the returned iterator is exhausted, and left untouched
            if the iterator is abandoned early. A fresh State if None.

    Returns:
        Iterator of Token in source order

    Raises:
        StateError: If state violates the continuation invariant.

    Example:
        >>> state = State.new()
        >>> kinds = [t.sub_kind.value for t in tokenize("'line1\\\\\\n", state)]
        >>> kinds
        ['quote', 'content', 'escape']
        >>> state.quote
        "'"
    """
    return Lexer(code, state).tokenize()


def tokenize_chunk(code: str, state: State | None = None) -> tuple[list[Token], State]:
    """Tokenize a chunk and return its tokens with the resulting state.

    The state argument is never modified, so the same bookmarked state can
    seed any number of speculative re-tokenizations.

    Args:
        code: Chunk of Lua source
        state: Continuation state to start from (fresh if None)

    Returns:
        (tokens, state after the chunk)

    """
    lexer = Lexer(code, state.copy() if state is not None else None)
    tokens = list(lexer.tokenize())
    return tokens, lexer.state


def tokenize_lines(source: str, state: State | None = None) -> Iterator[list[Token]]:
    """Tokenize source one physical line at a time, carrying state.

    Lines keep their terminators (LF, CR or CRLF), so the tokens of all
    lines together reconstruct the source.

    Args:
        source: Lua source text
        state: Continuation state before the first line, updated after
            each line (fresh if None)

    Yields:
        The token list for each line

    """
    if state is None:
        state = State.new()
    for line in split_lines(source):
        yield list(tokenize(line, state))


__all__ = [
    # Core API
    "tokenize",
    "tokenize_chunk",
    "tokenize_lines",
    "Lexer",
    "State",
    "MultilineKind",
    # Schema
    "TOKENS",
    "KEYWORDS",
    "Kind",
    "SubKind",
    "Token",
    "is_valid_token",
    "iter_token_styles",
    # Configuration
    "LexConfig",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
    # Errors
    "LexLuaError",
    "SchemaError",
    "StateError",
    # Highlighting
    "LuaHighlighter",
    # Profiling
    "TokenizeAccumulator",
    "get_tokenize_accumulator",
    "profiled_tokenize",
    # Serialization
    "state_from_json",
    "state_to_json",
    "tokens_to_json",
    # Version
    "__version__",
]
