"""Token type definitions for the tinyclass language.

Reserved words and built-in type names are fixed tables; reclassifying an
identifier run is a pure function of the lexeme.
"""

from enum import Enum, auto
from dataclasses import dataclass


class TokenType(Enum):
    # Words and literals
    IDENTIFIER = auto()
    KEYWORD = auto()
    TYPE = auto()
    INTEGER_LITERAL = auto()
    STRING_LITERAL = auto()

    # Delimiters
    L_PAREN = auto()                # (
    R_PAREN = auto()                # )
    L_CURLY_BRACKET = auto()        # {
    R_CURLY_BRACKET = auto()        # }
    L_BRACKET = auto()              # [
    R_BRACKET = auto()              # ]
    COMMA = auto()                  # ,
    DOT = auto()                    # .
    COLON = auto()                  # :
    SEMICOLON = auto()              # ;

    # Comparison / logical (lexed, not consumed by the grammar)
    EQUALS = auto()                 # =
    EQUALS_EQUALS = auto()          # ==
    NOT_EQUALS = auto()             # !=
    LESS_THAN = auto()              # <
    LESS_THAN_OR_EQUAL = auto()     # <=
    GREATER_THAN = auto()           # >
    GREATER_THAN_OR_EQUAL = auto()  # >=
    PIPE = auto()                   # |
    LOGICAL_OR = auto()             # ||

    # Arithmetic: + - * /
    OP = auto()

    # A recognised symbol character with no dedicated kind (a lone '!')
    SYMBOL = auto()


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: str
    line: int = 0
    col: int = 0

    def __repr__(self):
        return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.col})"

    def is_keyword(self, word: str) -> bool:
        return self.type == TokenType.KEYWORD and self.value == word


KEYWORDS: frozenset[str] = frozenset({
    "if", "while", "else", "break", "return",
    "true", "false", "println", "new", "for",
    "method", "struct", "class", "init", "extends", "super",
})

TYPE_NAMES: frozenset[str] = frozenset({"Int", "Void", "Boolean"})

# Symbol lexeme -> token type. Two-character entries are matched by peeking
# one character ahead.
SYMBOLS: dict[str, TokenType] = {
    "(": TokenType.L_PAREN,
    ")": TokenType.R_PAREN,
    "{": TokenType.L_CURLY_BRACKET,
    "}": TokenType.R_CURLY_BRACKET,
    "[": TokenType.L_BRACKET,
    "]": TokenType.R_BRACKET,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    ":": TokenType.COLON,
    ";": TokenType.SEMICOLON,
    "=": TokenType.EQUALS,
    "==": TokenType.EQUALS_EQUALS,
    "!=": TokenType.NOT_EQUALS,
    "<": TokenType.LESS_THAN,
    "<=": TokenType.LESS_THAN_OR_EQUAL,
    ">": TokenType.GREATER_THAN,
    ">=": TokenType.GREATER_THAN_OR_EQUAL,
    "|": TokenType.PIPE,
    "||": TokenType.LOGICAL_OR,
    "+": TokenType.OP,
    "-": TokenType.OP,
    "*": TokenType.OP,
    "/": TokenType.OP,
    "!": TokenType.SYMBOL,
}

TWO_CHAR_SYMBOLS: frozenset[str] = frozenset(s for s in SYMBOLS if len(s) == 2)


def word_token_type(lexeme: str) -> TokenType:
    """Reclassify an identifier-class run as keyword, type name or identifier."""
    if lexeme in KEYWORDS:
        return TokenType.KEYWORD
    if lexeme in TYPE_NAMES:
        return TokenType.TYPE
    return TokenType.IDENTIFIER
