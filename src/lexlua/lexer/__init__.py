"""Resumable state-machine lexer for Lua source.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, LexerMode
├── core.py              # Lexer class (mixin composition + orchestration)
├── modes.py             # LexerMode enum, keyword table
├── classifiers/         # Pure classification mixins
│   ├── keyword.py       # Reserved words vs identifiers
│   └── numeral.py       # Lua numeral shapes
└── scanners/            # Mode-specific scanners
    ├── dispatch.py      # Normal mode (ordered dispatch table)
    ├── long_bracket.py  # Long comments and long strings
    └── string.py        # Quoted strings and escapes

Usage:
    >>> from lexlua.lexer import Lexer
    >>> for token in Lexer("local x = 1").tokenize():
    ...     print(token)
    Token(keyword.value, 'local')
    Token(whitespace, ' ')
    Token(identifier, 'x')
    Token(whitespace, ' ')
    Token(operator, '=')
    Token(whitespace, ' ')
    Token(number, '1')

"""

from lexlua.lexer.core import Lexer
from lexlua.lexer.modes import KEYWORDS, LexerMode

__all__ = ["KEYWORDS", "Lexer", "LexerMode"]
