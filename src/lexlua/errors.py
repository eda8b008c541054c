"""Exception classes for lexlua.

Malformed Lua source never raises: it is classified as ``invalid``.
These exceptions cover misuse of the engine itself.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lexlua.tokens import Kind, SubKind


class LexLuaError(Exception):
    """Base exception for all lexlua errors.

    Subclass this for specific error categories.
    """

    pass


class StateError(LexLuaError):
    """Continuation state is invalid or not yet available.

    Raised when a State violates its invariant (both continuation
    mechanisms set, or one set only partially), and when a Lexer's
    final state is read before its token sequence is exhausted.
    """

    def __init__(self, message: str, state: object | None = None) -> None:
        """Initialize state error.

        Args:
            message: Description of the problem
            state: The offending State, if any
        """
        self.message = message
        self.state = state
        if state is not None:
            message = f"{message}: {state!r}"
        super().__init__(message)


class SchemaError(LexLuaError):
    """The engine produced a (kind, sub_kind) pair outside TOKENS.

    Only raised when schema checking is enabled in LexConfig.
    """

    def __init__(self, kind: Kind, sub_kind: SubKind | None, text: str) -> None:
        self.kind = kind
        self.sub_kind = sub_kind
        self.text = text
        pair = kind.value if sub_kind is None else f"{kind.value}.{sub_kind.value}"
        super().__init__(f"Token {text!r} classified as unknown pair '{pair}'")
