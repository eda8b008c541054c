"""Token, Kind and SubKind definitions for the lexlua tokenizer.

The tokenizer produces a stream of Token tuples. Each Token carries the
literal text it covers, a coarse Kind and, for comments, keywords and
strings, a finer SubKind.

TOKENS is the published classification schema: every (kind, sub_kind)
pair the engine may emit. Colorizers can enumerate it to build a style
table, and the engine validates against it when schema checking is on.

Thread Safety:
Token is an immutable NamedTuple and safe to share across threads.
TOKENS is a read-only mapping of frozensets, built once at import.

"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from enum import Enum
from types import MappingProxyType
from typing import NamedTuple


class Kind(Enum):
    """Coarse token classification."""

    COMMENT = "comment"
    IDENTIFIER = "identifier"
    INVALID = "invalid"
    KEYWORD = "keyword"
    NUMBER = "number"
    OPERATOR = "operator"
    STRING = "string"
    WHITESPACE = "whitespace"


class SubKind(Enum):
    """Fine-grained classification, meaningful for comment, keyword and string.

    - comment: CONTENT, LONGBRACKET
    - keyword: FLOW, OPERATOR, VALUE
    - string: CONTENT, ESCAPE, LONGBRACKET, QUOTE

    """

    CONTENT = "content"
    ESCAPE = "escape"
    FLOW = "flow"
    LONGBRACKET = "longbracket"
    OPERATOR = "operator"
    QUOTE = "quote"
    VALUE = "value"


class Token(NamedTuple):
    """A classified slice of Lua source.

    Concatenating the text of every token produced for a chunk gives back
    the consumed prefix of that chunk.

    Attributes:
        text: The literal source text
        kind: Coarse classification
        sub_kind: Fine classification, or None for kinds without one

    """

    text: str
    kind: Kind
    sub_kind: SubKind | None = None

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        text = self.text
        if len(text) > 20:
            text = text[:17] + "..."
        if self.sub_kind is None:
            return f"Token({self.kind.value}, {text!r})"
        return f"Token({self.kind.value}.{self.sub_kind.value}, {text!r})"


# An empty set means the kind is emitted without a sub-kind.
TOKENS: Mapping[Kind, frozenset[SubKind]] = MappingProxyType(
    {
        Kind.COMMENT: frozenset({SubKind.CONTENT, SubKind.LONGBRACKET}),
        Kind.IDENTIFIER: frozenset(),
        Kind.INVALID: frozenset(),
        Kind.KEYWORD: frozenset({SubKind.FLOW, SubKind.OPERATOR, SubKind.VALUE}),
        Kind.NUMBER: frozenset(),
        Kind.OPERATOR: frozenset(),
        Kind.STRING: frozenset(
            {SubKind.CONTENT, SubKind.ESCAPE, SubKind.LONGBRACKET, SubKind.QUOTE}
        ),
        Kind.WHITESPACE: frozenset(),
    }
)


def is_valid_token(kind: Kind, sub_kind: SubKind | None) -> bool:
    """Return True if (kind, sub_kind) appears in the TOKENS schema."""
    allowed = TOKENS.get(kind)
    if allowed is None:
        return False
    if sub_kind is None:
        return not allowed
    return sub_kind in allowed


def iter_token_styles() -> Iterator[tuple[Kind, SubKind | None]]:
    """Yield every valid (kind, sub_kind) pair in a stable order.

    Kinds come in declaration order; sub-kinds are sorted by value.
    """
    for kind in Kind:
        sub_kinds = TOKENS[kind]
        if not sub_kinds:
            yield kind, None
            continue
        for sub_kind in sorted(sub_kinds, key=lambda s: s.value):
            yield kind, sub_kind
