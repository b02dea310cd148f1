"""Lexer for the tinyclass language.

A single left-to-right scan. From the start state the class of the current
character selects a run-length scan (identifier, integer, symbol or string)
that emits exactly one token for the whole run. The lexer is total: input
it cannot make sense of is logged and skipped, never raised.
"""

import logging
from enum import Enum, auto

from .tokens import SYMBOLS, TWO_CHAR_SYMBOLS, Token, TokenType, word_token_type

logger = logging.getLogger(__name__)


class CharClass(Enum):
    ALPHABET = auto()
    NUMBER = auto()
    SPACE = auto()
    SYMBOL = auto()
    QUOTE = auto()


_SYMBOL_CHARS = frozenset("+-*/=(){};,.!<>:|[]")


def classify(ch: str) -> CharClass | None:
    if ch.isascii() and (ch.isalpha() or ch == "_"):
        return CharClass.ALPHABET
    if ch.isascii() and ch.isdigit():
        return CharClass.NUMBER
    if ch.isspace():
        return CharClass.SPACE
    if ch in _SYMBOL_CHARS:
        return CharClass.SYMBOL
    if ch in ("'", '"'):
        return CharClass.QUOTE
    return None


class Lexer:
    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.line = 1
        self.col = 1
        self.tokens: list[Token] = []

    def tokenize(self) -> list[Token]:
        while self.pos < len(self.source):
            ch = self._peek()
            kind = classify(ch)

            if kind is CharClass.SPACE:
                self._advance()
            elif kind is CharClass.ALPHABET:
                self._read_word()
            elif kind is CharClass.NUMBER:
                self._read_integer()
            elif kind is CharClass.QUOTE:
                self._read_string()
            elif kind is CharClass.SYMBOL:
                if ch == "/" and self._peek(1) == "/":
                    self._skip_line_comment()
                else:
                    self._read_symbol()
            else:
                logger.warning("Skipping unsupported character %r at %d:%d",
                               ch, self.line, self.col)
                self._advance()
        return self.tokens

    # --- Character helpers ---

    def _peek(self, offset: int = 0) -> str:
        pos = self.pos + offset
        if pos < len(self.source):
            return self.source[pos]
        return '\0'

    def _advance(self) -> str:
        ch = self.source[self.pos]
        self.pos += 1
        if ch == '\n':
            self.line += 1
            self.col = 1
        else:
            self.col += 1
        return ch

    def _emit(self, token_type: TokenType, value: str, line: int, col: int):
        self.tokens.append(Token(token_type, value, line, col))

    def _skip_line_comment(self):
        while self.pos < len(self.source) and self._peek() != '\n':
            self._advance()

    # --- Runs ---

    def _read_word(self):
        line, col = self.line, self.col
        start = self.pos
        self._advance()
        while self.pos < len(self.source) and classify(self._peek()) in (
                CharClass.ALPHABET, CharClass.NUMBER):
            self._advance()
        value = self.source[start:self.pos]
        self._emit(word_token_type(value), value, line, col)

    def _read_integer(self):
        line, col = self.line, self.col
        start = self.pos
        while self.pos < len(self.source) and classify(self._peek()) is CharClass.NUMBER:
            self._advance()
        self._emit(TokenType.INTEGER_LITERAL, self.source[start:self.pos], line, col)

    def _read_symbol(self):
        line, col = self.line, self.col
        value = self._advance()
        if value + self._peek() in TWO_CHAR_SYMBOLS:
            value += self._advance()
        self._emit(SYMBOLS[value], value, line, col)

    def _read_string(self):
        line, col = self.line, self.col
        delimiter = self._advance()
        chars: list[str] = []
        while self.pos < len(self.source):
            ch = self._advance()
            if ch == delimiter:
                self._emit(TokenType.STRING_LITERAL, ''.join(chars), line, col)
                return
            chars.append(ch)
        logger.warning("Unterminated string literal starting at %d:%d", line, col)


def tokenize(source: str) -> list[Token]:
    return Lexer(source).tokenize()
