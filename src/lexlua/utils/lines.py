"""Physical line splitting.

Lua recognizes LF, CR and CRLF as line terminators. str.splitlines also
breaks on form feed, vertical tab and Unicode separators, which Lua treats
as ordinary characters, so it cannot be used here.
"""

from __future__ import annotations

import re

_LINE = re.compile(r"[^\r\n]*(?:\r\n|\r|\n)|[^\r\n]+")


def split_lines(source: str) -> list[str]:
    """Split source into physical lines, keeping each line's terminator.

    Example:
        >>> split_lines("a\\r\\nb\\rc\\n\\nd")
        ['a\\r\\n', 'b\\r', 'c\\n', '\\n', 'd']
        >>> split_lines("")
        []
    """
    return _LINE.findall(source)
