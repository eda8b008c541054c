"""Tests for normal mode dispatch: whitespace, names, numerals, operators, invalid runs."""

from __future__ import annotations

import pytest

from lexlua import KEYWORDS, Kind, SubKind, Token, tokenize


def _lex(code: str) -> list[tuple[str, Kind, SubKind | None]]:
    return [tuple(t) for t in tokenize(code)]


class TestWhitespace:
    """Whitespace runs are maximal."""

    def test_mixed_run_is_one_token(self) -> None:
        assert _lex(" \t\r\n\f\v ") == [(" \t\r\n\f\v ", Kind.WHITESPACE, None)]

    def test_statement(self) -> None:
        assert _lex("local x = 1") == [
            ("local", Kind.KEYWORD, SubKind.VALUE),
            (" ", Kind.WHITESPACE, None),
            ("x", Kind.IDENTIFIER, None),
            (" ", Kind.WHITESPACE, None),
            ("=", Kind.OPERATOR, None),
            (" ", Kind.WHITESPACE, None),
            ("1", Kind.NUMBER, None),
        ]


class TestKeywords:
    """Reserved words map to their keyword sub-kind."""

    @pytest.mark.parametrize(("word", "sub_kind"), sorted(KEYWORDS.items()))
    def test_each_keyword_alone(self, word: str, sub_kind: SubKind) -> None:
        assert list(tokenize(word)) == [Token(word, Kind.KEYWORD, sub_kind)]

    def test_keyword_table_contents(self) -> None:
        assert len(KEYWORDS) == 22
        assert {w for w, s in KEYWORDS.items() if s is SubKind.OPERATOR} == {"and", "not", "or"}
        assert {w for w, s in KEYWORDS.items() if s is SubKind.VALUE} == {
            "false",
            "local",
            "nil",
            "true",
        }

    def test_keyword_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            KEYWORDS["continue"] = SubKind.FLOW  # type: ignore[index]

    @pytest.mark.parametrize("name", ["foo", "_", "_bar9", "Local", "END", "ends", "nil_", "iff"])
    def test_identifiers(self, name: str) -> None:
        assert list(tokenize(name)) == [Token(name, Kind.IDENTIFIER)]


class TestNumerals:
    """Each Lua numeral shape is a single number token."""

    @pytest.mark.parametrize(
        "numeral",
        [
            "0x1.8p3",
            "0XA.8P-2",
            "0x10p+4",
            "0x.8",
            "0xFF",
            "3.14e10",
            ".5e-3",
            "1e5",
            "1.e5",
            "5E+3",
            "42",
            ".5",
            "10.",
            "007",
        ],
    )
    def test_single_number_token(self, numeral: str) -> None:
        assert list(tokenize(numeral)) == [Token(numeral, Kind.NUMBER)]

    def test_hex_prefix_without_fraction_digits(self) -> None:
        assert _lex("0x1.") == [("0x1", Kind.NUMBER, None), (".", Kind.OPERATOR, None)]

    def test_numeral_followed_by_name(self) -> None:
        assert _lex("3xyz") == [("3", Kind.NUMBER, None), ("xyz", Kind.IDENTIFIER, None)]

    def test_concat_before_digit_is_operator(self) -> None:
        assert _lex("..5") == [("..", Kind.OPERATOR, None), ("5", Kind.NUMBER, None)]


class TestOperators:
    """Longest operator wins where shorter ones are prefixes."""

    @pytest.mark.parametrize("op", ["...", "..", "::", "~=", ">>", ">=", "==", "<=", "<<", "//"])
    def test_multi_char_operators(self, op: str) -> None:
        assert list(tokenize(op)) == [Token(op, Kind.OPERATOR)]

    @pytest.mark.parametrize("op", list("-,;:.()[]{}*/&#^+<=>|~%"))
    def test_single_char_operators(self, op: str) -> None:
        assert list(tokenize(op)) == [Token(op, Kind.OPERATOR)]

    def test_field_access(self) -> None:
        assert _lex("a.b") == [
            ("a", Kind.IDENTIFIER, None),
            (".", Kind.OPERATOR, None),
            ("b", Kind.IDENTIFIER, None),
        ]

    def test_label(self) -> None:
        assert [t.text for t in tokenize("::top::")] == ["::", "top", "::"]

    def test_bracket_without_long_opener(self) -> None:
        assert _lex("[=") == [("[", Kind.OPERATOR, None), ("=", Kind.OPERATOR, None)]

    def test_three_equals(self) -> None:
        assert [t.text for t in tokenize("===")] == ["==", "="]


class TestInvalid:
    """Unrecognized characters become invalid tokens."""

    def test_run_of_two(self) -> None:
        assert list(tokenize("@@")) == [Token("@@", Kind.INVALID)]

    def test_run_stops_at_identifier(self) -> None:
        assert list(tokenize("@x")) == [Token("@", Kind.INVALID), Token("x", Kind.IDENTIFIER)]

    def test_mixed_run(self) -> None:
        assert list(tokenize("$?!`\\")) == [Token("$?!`\\", Kind.INVALID)]

    def test_non_ascii(self) -> None:
        assert _lex("é x") == [
            ("é", Kind.INVALID, None),
            (" ", Kind.WHITESPACE, None),
            ("x", Kind.IDENTIFIER, None),
        ]

    def test_run_stops_at_operator(self) -> None:
        assert [t.kind for t in tokenize("a!=b")] == [
            Kind.IDENTIFIER,
            Kind.INVALID,
            Kind.OPERATOR,
            Kind.IDENTIFIER,
        ]


class TestComments:
    """Line comments and the ``--`` marker."""

    def test_line_comment(self) -> None:
        assert _lex("-- hi") == [
            ("--", Kind.COMMENT, SubKind.CONTENT),
            (" hi", Kind.COMMENT, SubKind.CONTENT),
        ]

    def test_bare_marker(self) -> None:
        assert _lex("--") == [("--", Kind.COMMENT, SubKind.CONTENT)]

    def test_line_terminator_is_whitespace(self) -> None:
        assert _lex("-- x\r\ny") == [
            ("--", Kind.COMMENT, SubKind.CONTENT),
            (" x", Kind.COMMENT, SubKind.CONTENT),
            ("\r\n", Kind.WHITESPACE, None),
            ("y", Kind.IDENTIFIER, None),
        ]

    def test_extra_dash_is_content(self) -> None:
        assert [t.text for t in tokenize("---")] == ["--", "-"]

    def test_minus_is_operator(self) -> None:
        assert _lex("a-b")[1] == ("-", Kind.OPERATOR, None)

    def test_incomplete_opener_is_line_comment(self) -> None:
        assert _lex("--[=x") == [
            ("--", Kind.COMMENT, SubKind.CONTENT),
            ("[=x", Kind.COMMENT, SubKind.CONTENT),
        ]

    def test_long_comment_closed_on_same_line(self) -> None:
        assert _lex("--[[ c ]] x") == [
            ("--", Kind.COMMENT, SubKind.CONTENT),
            ("[[", Kind.COMMENT, SubKind.LONGBRACKET),
            (" c ", Kind.COMMENT, SubKind.CONTENT),
            ("]]", Kind.COMMENT, SubKind.LONGBRACKET),
            (" ", Kind.WHITESPACE, None),
            ("x", Kind.IDENTIFIER, None),
        ]

    def test_long_comment_level_must_match(self) -> None:
        assert _lex("--[==[ a ]] b ]==]") == [
            ("--", Kind.COMMENT, SubKind.CONTENT),
            ("[==[", Kind.COMMENT, SubKind.LONGBRACKET),
            (" a ]] b ", Kind.COMMENT, SubKind.CONTENT),
            ("]==]", Kind.COMMENT, SubKind.LONGBRACKET),
        ]


class TestStrings:
    """Quoted and long strings closed within one chunk."""

    def test_escaped_quote(self) -> None:
        assert _lex('"a\\"b"') == [
            ('"', Kind.STRING, SubKind.QUOTE),
            ("a", Kind.STRING, SubKind.CONTENT),
            ('\\"', Kind.STRING, SubKind.ESCAPE),
            ("b", Kind.STRING, SubKind.CONTENT),
            ('"', Kind.STRING, SubKind.QUOTE),
        ]

    def test_other_quote_is_content(self) -> None:
        assert [t.text for t in tokenize("'a\"b'")] == ["'", 'a"b', "'"]

    def test_empty_string(self) -> None:
        assert _lex("''") == [("'", Kind.STRING, SubKind.QUOTE), ("'", Kind.STRING, SubKind.QUOTE)]

    def test_escape_forms(self) -> None:
        tokens = list(tokenize("'\\65\\u{48}\\z\\1234'"))
        assert [(t.text, t.sub_kind) for t in tokens] == [
            ("'", SubKind.QUOTE),
            ("\\65", SubKind.ESCAPE),
            ("\\u{48}", SubKind.ESCAPE),
            ("\\z", SubKind.ESCAPE),
            ("\\123", SubKind.ESCAPE),
            ("4", SubKind.CONTENT),
            ("'", SubKind.QUOTE),
        ]

    def test_unicode_escape_without_digits(self) -> None:
        assert [t.text for t in tokenize("'\\u{}'")] == ["'", "\\u", "{}", "'"]

    def test_long_string(self) -> None:
        assert _lex("[[a]]") == [
            ("[[", Kind.STRING, SubKind.LONGBRACKET),
            ("a", Kind.STRING, SubKind.CONTENT),
            ("]]", Kind.STRING, SubKind.LONGBRACKET),
        ]

    def test_empty_long_string_has_no_content_token(self) -> None:
        assert _lex("[=[]=]") == [
            ("[=[", Kind.STRING, SubKind.LONGBRACKET),
            ("]=]", Kind.STRING, SubKind.LONGBRACKET),
        ]

    def test_index_expression_is_not_long_string(self) -> None:
        assert [t.kind for t in tokenize("t[i]")] == [
            Kind.IDENTIFIER,
            Kind.OPERATOR,
            Kind.IDENTIFIER,
            Kind.OPERATOR,
        ]
