"""HTML syntax highlighting for Lua built on the lexlua tokenizer.

Maps every (kind, sub_kind) pair in TOKENS to CSS classes and renders
code as ``<span>`` markup. Source is tokenized line by line with carried
continuation state, exactly as an editor would.

Protocol:
    LuaHighlighter implements the common highlighter interface used by
    Markdown renderers:
    - highlight(code, language, hl_lines, show_linenos) -> str
    - supports_language(language) -> bool

Usage:
    from lexlua.highlighting import LuaHighlighter

    html = LuaHighlighter().highlight("local x = 1", "lua")

    # Stylesheet scaffolding
    from lexlua.highlighting import style_classes
    for cls in style_classes():
        print(f".{cls} {{ }}")
"""

from __future__ import annotations

from html import escape as html_escape

from lexlua.config import get_lex_config
from lexlua.state import State
from lexlua.tokens import Kind, SubKind, Token, iter_token_styles

_LANGUAGES = frozenset({"lua"})


def css_class(kind: Kind, sub_kind: SubKind | None = None, prefix: str | None = None) -> str:
    """Return the CSS class attribute value for a token classification.

    Args:
        kind: Token kind
        sub_kind: Token sub-kind, if any
        prefix: Class prefix (defaults to LexConfig.css_prefix)

    Returns:
        Space-separated classes, e.g. ``"lua-string lua-string-escape"``

    """
    if prefix is None:
        prefix = get_lex_config().css_prefix
    base = f"{prefix}-{kind.value}"
    if sub_kind is None:
        return base
    return f"{base} {base}-{sub_kind.value}"


def style_classes(prefix: str | None = None) -> list[str]:
    """Return the most specific CSS class for every valid token pair."""
    return [css_class(kind, sub_kind, prefix).split()[-1] for kind, sub_kind in iter_token_styles()]


def render_tokens(tokens: list[Token], prefix: str | None = None) -> str:
    """Render tokens as HTML spans. Whitespace is emitted bare."""
    parts: list[str] = []
    for text, kind, sub_kind in tokens:
        escaped = html_escape(text, quote=False)
        if kind is Kind.WHITESPACE:
            parts.append(escaped)
        else:
            parts.append(f'<span class="{css_class(kind, sub_kind, prefix)}">{escaped}</span>')
    return "".join(parts)


class LuaHighlighter:
    """Lua syntax highlighter implementing the highlighter interface.

    Thread Safety:
        Stateless apart from the immutable prefix; every call tokenizes
        with its own continuation State.
    """

    __slots__ = ("_prefix",)

    def __init__(self, prefix: str | None = None) -> None:
        """Initialize highlighter.

        Args:
            prefix: CSS class prefix (defaults to LexConfig.css_prefix at
                highlight time)
        """
        self._prefix = prefix

    def highlight(
        self,
        code: str,
        language: str = "lua",
        *,
        hl_lines: list[int] | None = None,
        show_linenos: bool = False,
        state: State | None = None,
    ) -> str:
        """Highlight code with syntax colors.

        Args:
            code: Source code to highlight
            language: Language identifier; non-Lua input is escaped verbatim
            hl_lines: 1-indexed line numbers to emphasize (optional)
            show_linenos: Include line numbers in output
            state: Continuation state to start from, updated to the state
                after the last line

        Returns:
            HTML markup with highlighting

        """
        if not self.supports_language(language):
            lang_class = f' class="language-{html_escape(language)}"' if language else ""
            return f"<pre><code{lang_class}>{html_escape(code)}</code></pre>"

        from lexlua import tokenize_lines

        prefix = self._prefix if self._prefix is not None else get_lex_config().css_prefix
        emphasized = set(hl_lines) if hl_lines else set()

        lines: list[str] = []
        for lineno, tokens in enumerate(tokenize_lines(code, state), start=1):
            line = render_tokens(tokens, prefix)
            if show_linenos:
                line = f'<span class="{prefix}-lineno">{lineno}</span>{line}'
            if lineno in emphasized:
                line = f'<span class="{prefix}-hll">{line}</span>'
            lines.append(line)

        body = "".join(lines)
        return f'<pre class="{prefix}-highlight"><code class="language-lua">{body}</code></pre>'

    def supports_language(self, language: str) -> bool:
        """Check if highlighter supports the given language."""
        return language.lower() in _LANGUAGES
