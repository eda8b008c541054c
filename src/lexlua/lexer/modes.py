"""Lexer operating modes and constants.

This module defines the modes the lexer switches between and the fixed
Lua keyword table.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum, auto
from types import MappingProxyType

from lexlua.state import State
from lexlua.tokens import SubKind


class LexerMode(Enum):
    """Lexer operating modes.

    The lexer picks a mode from the continuation state before every step:
    - NORMAL: No construct open, walk the dispatch table
    - LONG_BRACKET: Inside a long comment or long string
    - QUOTED_STRING: Inside a quoted string continued by backslash-newline

    """

    NORMAL = auto()
    LONG_BRACKET = auto()
    QUOTED_STRING = auto()


def mode_for(state: State) -> LexerMode:
    """Return the mode a (validated) state resumes in."""
    if state.multiline_kind is None:
        return LexerMode.NORMAL
    if state.bracket_level is not None:
        return LexerMode.LONG_BRACKET
    return LexerMode.QUOTED_STRING


# Lua 5.2+ reserved words
KEYWORDS: Mapping[str, SubKind] = MappingProxyType(
    {
        "and": SubKind.OPERATOR,
        "break": SubKind.FLOW,
        "do": SubKind.FLOW,
        "else": SubKind.FLOW,
        "elseif": SubKind.FLOW,
        "end": SubKind.FLOW,
        "false": SubKind.VALUE,
        "for": SubKind.FLOW,
        "function": SubKind.FLOW,
        "goto": SubKind.FLOW,
        "if": SubKind.FLOW,
        "in": SubKind.FLOW,
        "local": SubKind.VALUE,
        "nil": SubKind.VALUE,
        "not": SubKind.OPERATOR,
        "or": SubKind.OPERATOR,
        "repeat": SubKind.FLOW,
        "return": SubKind.FLOW,
        "then": SubKind.FLOW,
        "true": SubKind.VALUE,
        "until": SubKind.FLOW,
        "while": SubKind.FLOW,
    }
)
