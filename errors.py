"""Exception hierarchy for the simplang pipeline.

Every stage raises a subclass of `SimplangError`. Errors carry the source
position (0 when unknown, as for hand-built trees) and the offending value
so the driver can print a readable message. Nothing in the pipeline catches
these; the first error aborts the run.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tokens import Token


class SimplangError(Exception):
    kind = "Simplang"

    def __init__(self, message: str, line: int = 0, column: int = 0):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column

    def __str__(self) -> str:
        if self.line and self.column:
            return f"{self.line}:{self.column}: {self.message}"
        return self.message


class SourceIOError(SimplangError):
    kind = "IO"

    def __init__(self, path: str, reason: str):
        super().__init__(f"cannot read '{path}': {reason}")
        self.path = path


# Lexical errors
class LexError(SimplangError):
    kind = "Lexical"


class UnexpectedCharError(LexError):
    def __init__(self, char: str, line: int, column: int):
        super().__init__(f"unexpected character {char!r}", line, column)
        self.char = char


class MalformedNumberError(LexError):
    def __init__(self, text: str, line: int, column: int, reason: str):
        super().__init__(f"malformed number '{text}': {reason}", line, column)
        self.text = text


# Syntax errors
class ParseError(SimplangError):
    kind = "Syntax"


class UnexpectedTokenError(ParseError):
    def __init__(self, token: Token, production: str):
        super().__init__(
            f"unexpected {token.describe()} in {production}", token.line, token.column
        )
        self.token = token
        self.production = production


# Evaluation errors
class EvalError(SimplangError):
    kind = "Evaluation"


class DivisionByZeroError(EvalError):
    def __init__(self, operator: str, line: int = 0, column: int = 0):
        super().__init__(f"division by zero in '{operator}'", line, column)
        self.operator = operator


class ArithmeticOverflowError(EvalError):
    def __init__(self, operator: str, line: int = 0, column: int = 0):
        super().__init__(f"result of '{operator}' does not fit in 64 bits", line, column)
        self.operator = operator


class UnboundIdentifierError(EvalError):
    def __init__(self, name: str, line: int = 0, column: int = 0):
        super().__init__(f"unbound identifier '{name}'", line, column)
        self.name = name
