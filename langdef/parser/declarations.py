"""Block and pair parsing methods for Parser."""

import logging
from typing import List

from langdef.ast import Identifier, LanguageBlock, Pair

from .grammar.lexer import TokenType

logger = logging.getLogger(__name__)

# Every keyword matches the identifier pattern and none is reserved where a
# name is expected, so ``language language { ... }`` is a valid block.
WORD_TOKENS = (TokenType.IDENTIFIER, TokenType.LANGUAGE, TokenType.TRUE, TokenType.FALSE)


class DeclarationParsingMixin:
    """Mixin with the ``language`` block and ``pair`` rules."""

    def parse_identifier(self) -> Identifier:
        token = self.expect(*WORD_TOKENS, expected=[TokenType.IDENTIFIER.describe()])
        return Identifier(name=token.value, span=token.span)

    def parse_language_block(self) -> LanguageBlock:
        """
        Parse a language block.

        Grammar:
            language := "language" IDENT "{" pair* "}" ;
        """
        keyword = self.expect(TokenType.LANGUAGE)
        name = self.parse_identifier()
        self.expect(TokenType.LBRACE)

        pairs: List[Pair] = []
        while not self.match(TokenType.RBRACE):
            if not self.match(*WORD_TOKENS):
                raise self.unexpected([TokenType.IDENTIFIER.describe(), TokenType.RBRACE.describe()])
            pairs.append(self.parse_pair())
        self.advance()  # }

        block = LanguageBlock(name=name, pairs=tuple(pairs), span=self.span_from(keyword))
        duplicates = block.duplicate_keys()
        if duplicates:
            # Kept as written; callers decide what repeated keys mean
            logger.debug("Block '%s' repeats key(s): %s", name.name, ", ".join(duplicates))
        return block

    def parse_pair(self) -> Pair:
        """
        Parse a key/value pair.

        Grammar:
            pair := IDENT ":" literal ";" ;
        """
        start = self.current()
        key = self.parse_identifier()
        self.expect(TokenType.COLON)
        value = self.parse_literal(depth=0)
        self.expect(TokenType.SEMICOLON)
        return Pair(key=key, value=value, span=self.span_from(start))
