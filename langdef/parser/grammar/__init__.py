"""Token definitions and the lexer."""

from .lexer import KEYWORDS, Lexer, Token, TokenType, tokenize

__all__ = ["Token", "TokenType", "Lexer", "tokenize", "KEYWORDS"]
