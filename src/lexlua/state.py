"""Continuation state carried between tokenizer calls.

A whole line is the most atomic piece of Lua that can be tokenized on its
own. Long comments, long strings and backslash-newline continued quoted
strings can span lines; State records which of those is open at the end of
a chunk so the next chunk resumes inside it.

Two mechanisms exist, and at most one is active:

- long bracket: ``multiline_kind`` (comment or string) + ``bracket_level``
- quoted string: ``multiline_kind`` == STRING + ``quote``

Usage:
    >>> from lexlua import State, tokenize
    >>> state = State.new()
    >>> tokens = list(tokenize("--[[ open", state))
    >>> state
    State(multiline_kind=<MultilineKind.COMMENT: 'comment'>, bracket_level=0, quote=None)

Thread Safety:
State is a small mutable value owned by the caller. Use copy() to branch
re-tokenization from a bookmarked point without sharing the live object.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal, TypeAlias

from lexlua.errors import StateError

Quote: TypeAlias = Literal["'", '"']

QUOTES: frozenset[str] = frozenset({"'", '"'})


class MultilineKind(Enum):
    """Which multi-line construct is open."""

    COMMENT = "comment"
    STRING = "string"


@dataclass(slots=True)
class State:
    """Tokenizer continuation state.

    A fresh state has every field unset.

    Attributes:
        multiline_kind: Open construct, or None
        bracket_level: Number of ``=`` in the open long bracket delimiter
        quote: Open quote character of a continued quoted string

    """

    multiline_kind: MultilineKind | None = None
    bracket_level: int | None = None
    quote: Quote | None = None

    @classmethod
    def new(cls) -> State:
        """Create a fresh state with all fields unset."""
        return cls()

    def copy(self) -> State:
        """Return an independent snapshot of this state."""
        return State(self.multiline_kind, self.bracket_level, self.quote)

    @property
    def pending(self) -> bool:
        """True if a construct is open and the next chunk resumes inside it."""
        return self.multiline_kind is not None

    def clear(self) -> None:
        """Unset every field."""
        self.multiline_kind = None
        self.bracket_level = None
        self.quote = None

    def open_long_bracket(self, kind: MultilineKind, level: int) -> None:
        """Record an unclosed long comment or long string."""
        self.multiline_kind = kind
        self.bracket_level = level
        self.quote = None

    def open_string(self, quote: Quote) -> None:
        """Record a quoted string paused after an escaped line break."""
        self.multiline_kind = MultilineKind.STRING
        self.bracket_level = None
        self.quote = quote

    def update(self, other: State) -> None:
        """Overwrite this state in place with the fields of other."""
        self.multiline_kind = other.multiline_kind
        self.bracket_level = other.bracket_level
        self.quote = other.quote

    def validate(self) -> None:
        """Check the single-mechanism invariant.

        Raises:
            StateError: If fields are set in a combination the tokenizer
                cannot resume from.
        """
        kind = self.multiline_kind
        level = self.bracket_level
        quote = self.quote

        if kind is None:
            if level is not None or quote is not None:
                raise StateError("continuation fields set without multiline_kind", self)
            return

        if not isinstance(kind, MultilineKind):
            raise StateError(f"unknown multiline_kind {kind!r}", self)

        if level is not None and quote is not None:
            raise StateError("long bracket and quoted string both open", self)

        if level is not None:
            if isinstance(level, bool) or not isinstance(level, int) or level < 0:
                raise StateError(f"bracket_level must be a non-negative int, got {level!r}", self)
            return

        if quote is None:
            raise StateError("multiline_kind set without bracket_level or quote", self)
        if kind is not MultilineKind.STRING:
            raise StateError("quote continuation requires multiline_kind STRING", self)
        if quote not in QUOTES:
            raise StateError(f"unknown quote {quote!r}", self)
