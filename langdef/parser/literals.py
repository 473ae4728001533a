"""Literal parsing methods for Parser.

Each literal variant has a distinct first token, so dispatch needs only the
lookahead. Lists recurse into ``parse_literal``; the recursion depth is the
list nesting depth, which is bounded by ``ParserConfig.max_nesting_depth``.
"""

from typing import List

from langdef.ast import BooleanLiteral, IntegerLiteral, ListLiteral, Literal, StringLiteral
from langdef.errors import NestingLimitExceeded

from .grammar.lexer import TokenType

LITERAL_START = (
    TokenType.STRING,
    TokenType.INTEGER,
    TokenType.TRUE,
    TokenType.FALSE,
    TokenType.LBRACKET,
)


class LiteralParsingMixin:
    """Mixin with the literal rules."""

    def parse_literal(self, depth: int) -> Literal:
        """
        Parse a literal value.

        Grammar:
            literal := STRING | INT | "true" | "false" | list ;

        ``depth`` is the number of lists already open around this literal.
        """
        token = self.current()

        if token.type is TokenType.STRING:
            self.advance()
            return StringLiteral(content=token.value, span=token.span)

        if token.type is TokenType.INTEGER:
            self.advance()
            return IntegerLiteral(digits=token.value, span=token.span)

        if token.type in (TokenType.TRUE, TokenType.FALSE):
            self.advance()
            return BooleanLiteral(value=token.type is TokenType.TRUE, span=token.span)

        if token.type is TokenType.LBRACKET:
            return self.parse_list(depth + 1)

        raise self.unexpected([t.describe() for t in LITERAL_START])

    def parse_list(self, depth: int) -> ListLiteral:
        """
        Parse a list literal.

        Grammar:
            list := "[" literal* "]" ;
        """
        opening = self.current()
        limit = self.config.max_nesting_depth
        if depth > limit:
            raise NestingLimitExceeded(
                message=f"List nesting exceeds the limit of {limit}",
                path=self.path,
                position=opening.start,
                limit=limit,
            )
        self.advance()  # [

        items: List[Literal] = []
        while not self.match(TokenType.RBRACKET):
            if not self.match(*LITERAL_START):
                raise self.unexpected(
                    [t.describe() for t in LITERAL_START] + [TokenType.RBRACKET.describe()]
                )
            items.append(self.parse_literal(depth))
        self.advance()  # ]

        return ListLiteral(items=tuple(items), span=self.span_from(opening))
