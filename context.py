"""Scan context shared by the lexer and the parser.

A `Context` owns the source text, the `Lexer` positioned inside it, and a
single pending-token slot. The parser looks at the next token with `peek()`,
consumes it with `next_token()`, and may hand one consumed token back with
`push_back()`. There is never more than one token of lookahead.

Each source gets its own context; nothing here is global.
"""

from __future__ import annotations
from typing import Optional
from lexer import Lexer
from tokens import Token
from errors import SourceIOError


class Context:
    def __init__(self, text: str, path: Optional[str] = None):
        self.text = text
        self.path = path
        self.lexer = Lexer(text)
        self.pending: Optional[Token] = None

    @classmethod
    def from_file(cls, path: str) -> Context:
        """Read `path` as UTF-8 and return a context positioned at its start."""
        try:
            with open(path, "r", encoding="utf-8") as fh:
                text = fh.read()
        except (OSError, UnicodeDecodeError) as e:
            raise SourceIOError(path, str(e)) from e
        return cls(text, path)

    def next_token(self) -> Token:
        """Consume and return the next token."""
        if self.pending is not None:
            token, self.pending = self.pending, None
            return token
        return self.lexer.get_next_token()

    def peek(self) -> Token:
        """Return the next token without consuming it."""
        if self.pending is None:
            self.pending = self.lexer.get_next_token()
        return self.pending

    def push_back(self, token: Token) -> None:
        """Return a consumed token so the next `next_token()` yields it again."""
        if self.pending is not None:
            raise RuntimeError(
                f"lookahead slot already holds {self.pending!r}; cannot push back {token!r}"
            )
        self.pending = token
