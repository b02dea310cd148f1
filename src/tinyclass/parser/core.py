"""Parser core: token manipulation, error handling, and parse() entry point."""

import logging

from ..ast_nodes import Program
from ..errors import ParseError
from ..tokens import Token, TokenType

logger = logging.getLogger(__name__)


class ParserBase:
    def __init__(self, tokens: list[Token]):
        self.tokens = tokens
        self.pos = 0

    def parse(self) -> Program | None:
        """Parse the whole token list; ``None`` if it is not a valid program.

        Parsing is all-or-nothing: the first structural mismatch abandons
        the tree and is reported through the log.
        """
        try:
            return self.parse_or_raise()
        except ParseError as e:
            logger.error("Parse error: %s", e)
            return None

    def parse_or_raise(self) -> Program:
        self.pos = 0
        classes = []
        while self._check_keyword("class"):
            classes.append(self._parse_class_def())
        statements = []
        while not self._at_end():
            statements.append(self._parse_statement())
        return Program(classes=classes, statements=statements)

    # ---- Token helpers ----

    def _peek(self, offset: int = 0) -> Token | None:
        pos = self.pos + offset
        if pos < len(self.tokens):
            return self.tokens[pos]
        return None

    def _advance(self) -> Token:
        tok = self.tokens[self.pos]
        self.pos += 1
        return tok

    def _at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def _check(self, *types: TokenType, offset: int = 0) -> bool:
        tok = self._peek(offset)
        return tok is not None and tok.type in types

    def _check_keyword(self, word: str) -> bool:
        tok = self._peek()
        return tok is not None and tok.is_keyword(word)

    def _check_op(self, *ops: str) -> bool:
        tok = self._peek()
        return tok is not None and tok.type == TokenType.OP and tok.value in ops

    def _match(self, *types: TokenType) -> Token | None:
        if self._check(*types):
            return self._advance()
        return None

    def _expect(self, token_type: TokenType, msg: str = "") -> Token:
        if self._check(token_type):
            return self._advance()
        raise self._error(f"Expected {msg or token_type.name}")

    def _expect_keyword(self, word: str) -> Token:
        if self._check_keyword(word):
            return self._advance()
        raise self._error(f"Expected '{word}'")

    def _expect_type_name(self, msg: str) -> Token:
        """A type position accepts a built-in type name or a class name."""
        tok = self._match(TokenType.TYPE, TokenType.IDENTIFIER)
        if tok is None:
            raise self._error(f"Expected {msg}")
        return tok

    def _error(self, msg: str) -> ParseError:
        tok = self._peek()
        if tok is None:
            last = self.tokens[-1] if self.tokens else None
            line, col = (last.line, last.col) if last else (0, 0)
            return ParseError(f"{msg}, got end of input", line, col)
        return ParseError(f"{msg}, got {tok.type.name} '{tok.value}'", tok.line, tok.col)
