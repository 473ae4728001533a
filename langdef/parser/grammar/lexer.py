"""Lexical analyzer (tokenizer) for langdef source.

Converts source text into a lazy stream of tokens. Whitespace and ``//``
line comments are skipped and never reach the parser.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, List, Optional
import string

from langdef.ast.source_location import Position, Span
from langdef.errors import LexicalError


class TokenType(Enum):
    """Token types for langdef."""

    # Literals
    STRING = auto()
    INTEGER = auto()

    # Identifiers and keywords
    IDENTIFIER = auto()
    LANGUAGE = auto()
    TRUE = auto()
    FALSE = auto()

    # Punctuation
    LBRACE = auto()
    RBRACE = auto()
    LBRACKET = auto()
    RBRACKET = auto()
    COLON = auto()
    SEMICOLON = auto()

    EOF = auto()

    def describe(self) -> str:
        """Human-readable name used in error messages."""
        return TOKEN_DESCRIPTIONS[self]


TOKEN_DESCRIPTIONS = {
    TokenType.STRING: "string",
    TokenType.INTEGER: "integer",
    TokenType.IDENTIFIER: "identifier",
    TokenType.LANGUAGE: "'language'",
    TokenType.TRUE: "'true'",
    TokenType.FALSE: "'false'",
    TokenType.LBRACE: "'{'",
    TokenType.RBRACE: "'}'",
    TokenType.LBRACKET: "'['",
    TokenType.RBRACKET: "']'",
    TokenType.COLON: "':'",
    TokenType.SEMICOLON: "';'",
    TokenType.EOF: "end of input",
}


@dataclass(frozen=True)
class Token:
    """A single token with its source span."""

    type: TokenType
    value: str
    start: Position
    end: Position

    @property
    def line(self) -> int:
        return self.start.line

    @property
    def column(self) -> int:
        return self.start.column

    @property
    def span(self) -> Span:
        return Span(self.start, self.end)

    def describe(self) -> str:
        """Describe the token as written, for error messages."""
        if self.type is TokenType.EOF:
            return "end of input"
        if self.type is TokenType.STRING:
            return f'string "{self.value}"'
        if self.type is TokenType.INTEGER:
            return f"integer {self.value}"
        if self.type is TokenType.IDENTIFIER:
            return f"identifier '{self.value}'"
        return f"'{self.value}'"

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.start})"


# Keyword mapping, applied to text matched by the identifier pattern
KEYWORDS = {
    "language": TokenType.LANGUAGE,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
}

PUNCTUATION = {
    '{': TokenType.LBRACE,
    '}': TokenType.RBRACE,
    '[': TokenType.LBRACKET,
    ']': TokenType.RBRACKET,
    ':': TokenType.COLON,
    ';': TokenType.SEMICOLON,
}

IDENTIFIER_CHARS = frozenset(string.ascii_letters + "_")
DIGIT_CHARS = frozenset(string.digits)


class Lexer:
    """Tokenizer for langdef source code."""

    def __init__(self, source: str, path: str = ""):
        self.source = source
        self.path = path
        self.pos = 0
        self.line = 1
        self.column = 1

    def position(self) -> Position:
        return Position(self.pos, self.line, self.column)

    def error(self, message: str, char: Optional[str], position: Optional[Position] = None) -> LexicalError:
        """Create a lexer error."""
        return LexicalError(
            message=message,
            path=self.path,
            position=position or self.position(),
            char=char,
        )

    def peek(self, offset: int = 0) -> Optional[str]:
        """Peek at character without consuming."""
        pos = self.pos + offset
        if pos < len(self.source):
            return self.source[pos]
        return None

    def advance(self) -> Optional[str]:
        """Consume and return current character."""
        if self.pos >= len(self.source):
            return None

        char = self.source[self.pos]
        self.pos += 1

        if char == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        return char

    def skip_trivia(self) -> None:
        """Skip any run of whitespace and ``//`` comments."""
        while True:
            char = self.peek()
            if char is not None and char.isspace():
                self.advance()
            elif char == '/' and self.peek(1) == '/':
                # The newline itself is left for the whitespace branch
                while self.peek() is not None and self.peek() != '\n':
                    self.advance()
            else:
                return

    def read_string(self) -> str:
        """Read a string literal, returning its content without the quotes."""
        opening = self.position()
        self.advance()  # "
        chars = []

        while True:
            char = self.peek()
            if char is None:
                raise self.error("Unterminated string literal", '"', opening)
            if char == '\\' and self.peek(1) == '"':
                chars.append(self.advance())
                chars.append(self.advance())
                continue
            if char == '"':
                self.advance()
                break
            chars.append(self.advance())

        return ''.join(chars)

    def read_while(self, allowed: frozenset) -> str:
        chars = []
        while self.peek() is not None and self.peek() in allowed:
            chars.append(self.advance())
        return ''.join(chars)

    def next_token(self) -> Token:
        """Scan and return the next token, or EOF."""
        self.skip_trivia()
        start = self.position()
        char = self.peek()

        if char is None:
            return Token(TokenType.EOF, '', start, start)

        if char == '"':
            value = self.read_string()
            return Token(TokenType.STRING, value, start, self.position())

        if char in DIGIT_CHARS:
            value = self.read_while(DIGIT_CHARS)
            return Token(TokenType.INTEGER, value, start, self.position())

        if char in IDENTIFIER_CHARS:
            value = self.read_while(IDENTIFIER_CHARS)
            token_type = KEYWORDS.get(value, TokenType.IDENTIFIER)
            return Token(token_type, value, start, self.position())

        if char in PUNCTUATION:
            self.advance()
            return Token(PUNCTUATION[char], char, start, self.position())

        raise self.error(f"Unexpected character: {char!r}", char)

    def iter_tokens(self) -> Iterator[Token]:
        """Lazily yield tokens, ending with a single EOF token."""
        while True:
            token = self.next_token()
            yield token
            if token.type is TokenType.EOF:
                return

    def tokenize(self) -> List[Token]:
        """Tokenize the entire source."""
        return list(self.iter_tokens())


def tokenize(source: str, path: str = "") -> List[Token]:
    """Tokenize langdef source code."""
    lexer = Lexer(source, path)
    return lexer.tokenize()


__all__ = ["Token", "TokenType", "Lexer", "tokenize", "KEYWORDS"]
