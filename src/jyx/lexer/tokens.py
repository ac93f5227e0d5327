"""Token kinds, the reserved-word table and the Token record for the jyx lexer."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType


class TokenType(Enum):
    """Every distinct token the jyx scanner can produce."""

    # Single-character punctuation
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    LEFT_BRACE = auto()
    RIGHT_BRACE = auto()
    COMMA = auto()
    DOT = auto()
    MINUS = auto()
    PLUS = auto()
    SEMICOLON = auto()
    SLASH = auto()
    STAR = auto()

    # One or two character operators
    BANG = auto()
    BANG_EQUAL = auto()         # !=
    EQUAL = auto()
    EQUAL_EQUAL = auto()        # ==
    GREATER = auto()
    GREATER_EQUAL = auto()      # >=
    LESS = auto()
    LESS_EQUAL = auto()         # <=

    # Literals
    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()

    # Keywords
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    EOF = auto()


# Map reserved words to token types. Read-only after import.
KEYWORDS: Mapping[str, TokenType] = MappingProxyType({
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
})

# Decoded token payload: NUMBER -> float, STRING -> str, everything else -> None.
Literal = float | str | None


@dataclass(frozen=True, slots=True)
class Token:
    """A single token produced by the scanner.

    ``lexeme`` is the exact slice of source text that was matched (empty only
    for EOF). ``literal`` holds the decoded value for NUMBER and STRING tokens.
    ``line`` is the 1-based source line used for diagnostics.
    """

    type: TokenType
    lexeme: str
    literal: Literal
    line: int

    def __repr__(self) -> str:
        if self.literal is None:
            return f"Token({self.type.name}, {self.lexeme!r}, line {self.line})"
        return f"Token({self.type.name}, {self.lexeme!r}, {self.literal!r}, line {self.line})"

    def __str__(self) -> str:
        literal = "null" if self.literal is None else self.literal
        return f"{self.type.name} {self.lexeme} {literal}"
