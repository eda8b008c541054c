"""Classification mixins for the lexlua lexer.

Classifiers are pure logic: they inspect text and never move the
lexer position.
"""

from __future__ import annotations

from lexlua.lexer.classifiers.keyword import KeywordClassifierMixin
from lexlua.lexer.classifiers.numeral import NumeralClassifierMixin

__all__ = [
    "KeywordClassifierMixin",
    "NumeralClassifierMixin",
]
