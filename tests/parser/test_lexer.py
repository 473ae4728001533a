from __future__ import annotations

import pytest

from langdef.errors import LexicalError
from langdef.parser.grammar import Lexer, TokenType, tokenize


def _types(source: str):
    return [token.type for token in tokenize(source)]


def test_tokenizes_simple_block() -> None:
    tokens = tokenize('language Foo { name: "bar"; }')

    assert [t.type for t in tokens] == [
        TokenType.LANGUAGE,
        TokenType.IDENTIFIER,
        TokenType.LBRACE,
        TokenType.IDENTIFIER,
        TokenType.COLON,
        TokenType.STRING,
        TokenType.SEMICOLON,
        TokenType.RBRACE,
        TokenType.EOF,
    ]
    assert tokens[1].value == "Foo"
    assert tokens[5].value == "bar"


def test_token_positions() -> None:
    tokens = tokenize('language Foo { name: "bar"; }')

    name = tokens[1]
    assert (name.start.offset, name.start.line, name.start.column) == (9, 1, 10)
    assert name.end.offset == 12

    string = tokens[5]
    assert string.start.offset == 21
    assert string.end.offset == 26

    eof = tokens[-1]
    assert eof.start.offset == 29
    assert eof.start == eof.end


def test_positions_track_lines() -> None:
    tokens = tokenize("language A {\n  key: 1;\n}")

    key = tokens[3]
    assert key.value == "key"
    assert (key.line, key.column) == (2, 3)

    closing = tokens[-2]
    assert closing.type is TokenType.RBRACE
    assert (closing.line, closing.column) == (3, 1)


def test_whitespace_and_comments_only_yield_eof() -> None:
    source = "  // first\n\t\n// second // still a comment\r\n   "
    assert _types(source) == [TokenType.EOF]


def test_comment_runs_to_end_of_line() -> None:
    tokens = tokenize("language // trailing { } [ ]\nX")
    assert [t.type for t in tokens] == [TokenType.LANGUAGE, TokenType.IDENTIFIER, TokenType.EOF]
    assert tokens[1].line == 2


@pytest.mark.parametrize(
    "word, expected",
    [
        ("language", TokenType.LANGUAGE),
        ("true", TokenType.TRUE),
        ("false", TokenType.FALSE),
        ("languages", TokenType.IDENTIFIER),
        ("truely", TokenType.IDENTIFIER),
        ("False", TokenType.IDENTIFIER),
        ("_false", TokenType.IDENTIFIER),
    ],
)
def test_keywords_match_whole_identifier_text(word: str, expected: TokenType) -> None:
    tokens = tokenize(word)
    assert tokens[0].type is expected
    assert tokens[0].value == word


def test_identifier_stops_at_digit() -> None:
    tokens = tokenize("abc123")
    assert [(t.type, t.value) for t in tokens[:2]] == [
        (TokenType.IDENTIFIER, "abc"),
        (TokenType.INTEGER, "123"),
    ]


def test_integer_keeps_leading_zeros() -> None:
    tokens = tokenize("007")
    assert tokens[0].type is TokenType.INTEGER
    assert tokens[0].value == "007"


def test_string_keeps_escaped_quote_verbatim() -> None:
    tokens = tokenize(r'"he said \"hi\""')
    assert tokens[0].type is TokenType.STRING
    assert tokens[0].value == r'he said \"hi\"'
    assert tokens[1].type is TokenType.EOF


def test_string_content_is_not_trivia() -> None:
    tokens = tokenize('"  // not a comment  "')
    assert tokens[0].value == "  // not a comment  "


def test_string_may_span_lines() -> None:
    tokens = tokenize('"a\nb" x')
    assert tokens[0].value == "a\nb"
    assert (tokens[1].line, tokens[1].column) == (2, 4)


def test_lone_backslash_is_plain_content() -> None:
    tokens = tokenize(r'"C:\path"')
    assert tokens[0].value == r"C:\path"


def test_backslash_before_closing_quote_escapes_it() -> None:
    # A backslash does not escape another backslash, so the final quote here
    # is escaped and the string never closes.
    with pytest.raises(LexicalError) as exc_info:
        tokenize('"a\\\\"')
    assert exc_info.value.char == '"'
    assert exc_info.value.offset == 0


def test_double_backslash_then_quote_pair() -> None:
    tokens = tokenize('"a\\\\" "')
    assert tokens[0].value == 'a\\\\" '


def test_unterminated_string_reports_opening_quote() -> None:
    with pytest.raises(LexicalError) as exc_info:
        tokenize('language A {\n  name: "open;\n}')

    error = exc_info.value
    assert error.char == '"'
    assert (error.line, error.column) == (2, 9)
    assert "Unterminated" in error.message


@pytest.mark.parametrize("char", [",", "=", "-", "#", "'", "(", "/", "é", "\\"])
def test_unrecognized_character(char: str) -> None:
    with pytest.raises(LexicalError) as exc_info:
        tokenize(f"language A {char}")

    error = exc_info.value
    assert error.char == char
    assert error.position.offset == 11
    assert error.code == "LEXICAL_ERROR"


def test_non_ascii_letters_are_not_identifiers() -> None:
    with pytest.raises(LexicalError) as exc_info:
        tokenize("naïve")
    assert exc_info.value.char == "ï"
    assert exc_info.value.column == 3


def test_iter_tokens_is_lazy() -> None:
    lexer = Lexer("language A { } @")
    stream = lexer.iter_tokens()

    assert next(stream).type is TokenType.LANGUAGE
    assert next(stream).type is TokenType.IDENTIFIER
    assert next(stream).type is TokenType.LBRACE
    assert next(stream).type is TokenType.RBRACE
    with pytest.raises(LexicalError):
        next(stream)


def test_errors_carry_path() -> None:
    with pytest.raises(LexicalError) as exc_info:
        tokenize("%", path="bad.langdef")
    assert exc_info.value.path == "bad.langdef"
    assert "bad.langdef" in str(exc_info.value)
