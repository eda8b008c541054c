"""Keyword classifier mixin."""

from __future__ import annotations

from lexlua.lexer.modes import KEYWORDS
from lexlua.tokens import Kind, SubKind


class KeywordClassifierMixin:
    """Mixin separating reserved words from identifiers."""

    def _classify_name(self, name: str) -> tuple[Kind, SubKind | None]:
        """Classify an identifier-shaped run.

        Returns:
            (KEYWORD, sub-kind) for a reserved word, else (IDENTIFIER, None)
        """
        sub_kind = KEYWORDS.get(name)
        if sub_kind is None:
            return Kind.IDENTIFIER, None
        return Kind.KEYWORD, sub_kind
