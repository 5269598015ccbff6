"""Token definitions for the lexer.

This module defines the `TokenType` enum for all token kinds recognized by
the lexer and a small frozen `Token` dataclass that holds a token type, an
optional value and the source position where the token starts. Tokens are
the atomic units produced by the lexer and consumed by the parser.

Token types fall into three disjoint families (keywords, operators, and
literals/identifiers) plus the terminal `EOF`.
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional


class TokenType(Enum):
    # Literals
    INTEGER = auto()
    IDENTIFIER = auto()

    # Keywords
    LET = auto()
    AND_KW = auto()
    IN = auto()
    IF = auto()
    THEN = auto()
    ELSE = auto()
    RECUR = auto()
    LOOP = auto()
    END = auto()

    # Grouping
    LPAREN = auto()
    RPAREN = auto()

    # Arithmetic operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    MOD = auto()

    # Comparison operators
    LT = auto()
    EQ = auto()
    NEQ = auto()

    # Logical operators
    NOT = auto()
    AND = auto()
    OR = auto()

    ASSIGN = auto()

    # Special
    EOF = auto()

    def __str__(self) -> str:
        return self.name

    @property
    def is_keyword(self) -> bool:
        return self in KEYWORD_NAMES

    @property
    def is_operator(self) -> bool:
        return self in OPERATOR_SYMBOLS


KEYWORDS = {
    "let": TokenType.LET,
    "and": TokenType.AND_KW,
    "in": TokenType.IN,
    "if": TokenType.IF,
    "then": TokenType.THEN,
    "else": TokenType.ELSE,
    "recur": TokenType.RECUR,
    "loop": TokenType.LOOP,
    "end": TokenType.END,
}

KEYWORD_NAMES = {tt: word for word, tt in KEYWORDS.items()}

OPERATOR_SYMBOLS = {
    TokenType.LPAREN: "(",
    TokenType.RPAREN: ")",
    TokenType.PLUS: "+",
    TokenType.MINUS: "-",
    TokenType.STAR: "*",
    TokenType.SLASH: "/",
    TokenType.MOD: "%",
    TokenType.LT: "<",
    TokenType.EQ: "==",
    TokenType.NEQ: "!=",
    TokenType.NOT: "!",
    TokenType.AND: "&&",
    TokenType.OR: "||",
    TokenType.ASSIGN: "=",
}


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: Optional[str | int] = None
    line: int = 0
    column: int = 0

    def __repr__(self) -> str:
        return f"Token({self.type}, {repr(self.value)})"

    def describe(self) -> str:
        """Human-readable description used in error messages."""
        if self.type == TokenType.EOF:
            return "end of input"
        if self.type.is_keyword:
            return f"keyword '{KEYWORD_NAMES[self.type]}'"
        if self.type.is_operator:
            return f"operator '{OPERATOR_SYMBOLS[self.type]}'"
        if self.type == TokenType.INTEGER:
            return f"integer {self.value}"
        return f"identifier '{self.value}'"
