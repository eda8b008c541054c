"""Numeral classifier mixin."""

from __future__ import annotations

import re

# Tried in order, longest and most specific shape first. The last
# alternative matches any single digit, so a digit always classifies.
_NUMERAL = re.compile(
    r"0[xX][0-9a-fA-F]*\.[0-9a-fA-F]+[pP][+-]?[0-9]+"  # hex float, exponent
    r"|0[xX][0-9a-fA-F]+[pP][+-]?[0-9]+"  # hex integer, exponent
    r"|0[xX][0-9a-fA-F]*\.[0-9a-fA-F]+"  # hex float
    r"|0[xX][0-9a-fA-F]+"  # hex integer
    r"|[0-9]*\.[0-9]+[eE][+-]?[0-9]+"  # decimal float, exponent
    r"|[0-9]+\.?[eE][+-]?[0-9]+"  # decimal integer, optional dot, exponent
    r"|[0-9]*\.[0-9]+"  # decimal float
    r"|[0-9]+\.?"  # decimal integer, optional trailing dot
)


class NumeralClassifierMixin:
    """Mixin classifying Lua numerals.

    Pure logic: reads the source at the current position, never moves it.

    """

    _code: str
    _pos: int

    def _classify_numeral(self) -> str:
        """Return the numeral starting at the current position.

        The caller guarantees the position holds a digit or a dot followed
        by a digit.
        """
        match = _NUMERAL.match(self._code, self._pos)
        if match is None:
            raise AssertionError(f"numeral expected at offset {self._pos}")
        return match.group()
