"""
Lexer for the simplang expression language.

Overview:
- This module implements a small hand-written lexical analyzer (scanner) that
    transforms an input source string into a stream of `Token` objects defined
    in `tokens.py`, one token per call to `get_next_token()`.
- It recognizes the reserved words (`let`, `and`, `in`, `if`, `then`,
    `else`, `recur`, `loop`, `end`), identifiers, integer literals, single-
    and two-character operators (e.g. `==`, `!=`, `&&`, `||`) and parentheses,
    and skips whitespace and single-line comments starting with `//`.

Examples:
    Input:  "if x < 10 then 1 else 2 end"
    Tokens: [IF, IDENTIFIER('x'), LT, INTEGER(10), THEN, INTEGER(1), ELSE, ...]

Implementation notes:
- The lexer is a simple stateful scanner using `self.pos` and `self.current_char`.
- Two-character operators are checked first (e.g. `==`, `!=`, `&&`, `||`)
    to avoid splitting them into two tokens.
- Identifiers are ASCII letters, digits and underscores, not starting with
    a digit. They are scanned and then mapped to keywords using `KEYWORDS`.
- Integer literals must fit in a signed 64-bit integer.
- Once the input is exhausted every call returns an `EOF` token.
"""

from __future__ import annotations
from typing import Optional, List
from tokens import Token, TokenType, KEYWORDS
from errors import MalformedNumberError, UnexpectedCharError

INT64_MAX = 2**63 - 1

TWO_CHAR_OPERATORS = {
    "==": TokenType.EQ,
    "!=": TokenType.NEQ,
    "&&": TokenType.AND,
    "||": TokenType.OR,
}


def is_ident_start(ch: str) -> bool:
    """Identifiers start with an ASCII letter or underscore."""
    return ch.isascii() and (ch.isalpha() or ch == "_")


def is_ident_char(ch: str) -> bool:
    return ch.isascii() and (ch.isalnum() or ch == "_")


class Lexer:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.line = 1
        self.column = 1
        self.current_char = self.text[self.pos] if self.text else None

    def advance(self) -> None:
        """Advance to next character."""
        # Newlines reset the column and increment the line number.
        if self.current_char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        self.pos += 1
        if self.pos < len(self.text):
            self.current_char = self.text[self.pos]
        else:
            self.current_char = None

    def peek_char(self) -> Optional[str]:
        """Look at next character without consuming it."""
        next_pos = self.pos + 1
        if next_pos < len(self.text):
            return self.text[next_pos]
        return None

    def skip_whitespace(self) -> None:
        while self.current_char is not None and self.current_char.isspace():
            self.advance()

    def skip_comment(self) -> None:
        """Skip a `//` comment up to and including the end of the line."""
        while self.current_char is not None and self.current_char != "\n":
            self.advance()

        if self.current_char == "\n":
            self.advance()

    def integer(self) -> int:
        """Parse a multi-digit integer."""
        result = []
        line, column = self.line, self.column

        while self.current_char is not None and "0" <= self.current_char <= "9":
            result.append(self.current_char)
            self.advance()

        text = "".join(result)
        # `12ab` is neither a number nor an identifier.
        if self.current_char is not None and is_ident_start(self.current_char):
            while self.current_char is not None and is_ident_char(self.current_char):
                text += self.current_char
                self.advance()
            raise MalformedNumberError(text, line, column, "letters after digits")

        value = int(text)
        if value > INT64_MAX:
            raise MalformedNumberError(text, line, column, "out of 64-bit range")
        return value

    def identifier(self) -> str:
        """Parse an identifier or keyword."""
        result = [self.current_char]
        self.advance()

        while self.current_char is not None and is_ident_char(self.current_char):
            result.append(self.current_char)
            self.advance()

        return "".join(result)

    def get_next_token(self) -> Token:
        """Lexical analyzer that returns tokens one at a time."""
        while self.current_char is not None:
            if self.current_char.isspace():
                self.skip_whitespace()
                continue

            if self.current_char == "/" and self.peek_char() == "/":
                self.skip_comment()
                continue

            line, column = self.line, self.column

            pair = self.current_char + (self.peek_char() or "")
            if pair in TWO_CHAR_OPERATORS:
                self.advance()
                self.advance()
                return Token(TWO_CHAR_OPERATORS[pair], pair, line, column)

            match self.current_char:
                case "+":
                    self.advance()
                    return Token(TokenType.PLUS, "+", line, column)
                case "-":
                    self.advance()
                    return Token(TokenType.MINUS, "-", line, column)
                case "*":
                    self.advance()
                    return Token(TokenType.STAR, "*", line, column)
                case "/":
                    self.advance()
                    return Token(TokenType.SLASH, "/", line, column)
                case "%":
                    self.advance()
                    return Token(TokenType.MOD, "%", line, column)
                case "(":
                    self.advance()
                    return Token(TokenType.LPAREN, "(", line, column)
                case ")":
                    self.advance()
                    return Token(TokenType.RPAREN, ")", line, column)
                case "<":
                    self.advance()
                    return Token(TokenType.LT, "<", line, column)
                case "!":
                    self.advance()
                    return Token(TokenType.NOT, "!", line, column)
                case "=":
                    self.advance()
                    return Token(TokenType.ASSIGN, "=", line, column)

            if "0" <= self.current_char <= "9":
                value = self.integer()
                return Token(TokenType.INTEGER, value, line, column)

            if is_ident_start(self.current_char):
                ident = self.identifier()
                token_type = KEYWORDS.get(ident, TokenType.IDENTIFIER)
                return Token(token_type, ident, line, column)

            raise UnexpectedCharError(self.current_char, line, column)

        return Token(TokenType.EOF, None, self.line, self.column)

    def tokenize(self) -> List[Token]:
        """Return all tokens from the input string, ending with one EOF."""
        tokens = []
        while True:
            token = self.get_next_token()
            tokens.append(token)
            if token.type == TokenType.EOF:
                break
        return tokens
