"""Mode-specific scanners for the lexlua lexer.

Each scanner is a mixin that provides scanning logic for a specific
lexer mode (NORMAL, LONG_BRACKET, QUOTED_STRING).
"""

from __future__ import annotations

from lexlua.lexer.scanners.dispatch import DispatchScannerMixin
from lexlua.lexer.scanners.long_bracket import LongBracketScannerMixin
from lexlua.lexer.scanners.string import StringScannerMixin

__all__ = [
    "DispatchScannerMixin",
    "LongBracketScannerMixin",
    "StringScannerMixin",
]
