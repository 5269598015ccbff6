"""
Parser for the simplang expression language.

Overview and approach:
- This parser is a small hand-written recursive-descent parser that pulls
    tokens from a `Context` one at a time. Binary expressions use precedence
    climbing with a precedence table stored in `self.precedence`, which keeps
    expression parsing concise while handling precedence and associativity.

Grammar (lowest to highest precedence):

    expression := unary (binop unary)*
    unary      := ("-" | "!")* primary
    primary    := INTEGER | IDENTIFIER | "(" expression ")"
                | "if" expression "then" expression "else" expression "end"

Key points:
- `parse_binary_expression()` consumes one operator token, looks up its
    precedence and, when it does not bind at the current level, pushes it
    back into the context. That single pending token is the only lookahead
    the parser ever holds.
- All binary operators are left-associative: the right operand is parsed
    with a minimum precedence one above the operator's own.
- `if ... end` is closed by its `end` keyword, so it is a primary and can be
    an operand anywhere without parentheses: `1 + if c then 1 else 2 end`.
- The first token that cannot start or continue the active production
    raises `UnexpectedTokenError`; there is no recovery.

Examples:
    `1 + 2 * 3`   -> BINARY(+, 1, BINARY(*, 2, 3))
    `10 - 3 - 2`  -> BINARY(-, BINARY(-, 10, 3), 2)
    `if c then 1 else 2 end + 1` -> BINARY(+, IF(c, 1, 2), 1)
"""

from __future__ import annotations
from typing import Dict, List
from tokens import Token, TokenType
from ast_nodes import *
from context import Context
from errors import UnexpectedTokenError


class Parser:
    def __init__(self, context: Context):
        self.context = context

        # Operator precedence table (higher = tighter binding)
        self.precedence: Dict[TokenType, int] = {
            TokenType.OR: 1,
            TokenType.AND: 2,
            TokenType.EQ: 3,
            TokenType.NEQ: 3,
            TokenType.LT: 4,
            TokenType.PLUS: 5,
            TokenType.MINUS: 5,
            TokenType.STAR: 6,
            TokenType.SLASH: 6,
            TokenType.MOD: 6,
        }

    @property
    def current(self) -> Token:
        return self.context.peek()

    def advance(self) -> Token:
        """Consume the current token and return it."""
        return self.context.next_token()

    def expect(self, expected_type: TokenType, production: str) -> Token:
        """Expect and consume token of given type."""
        if self.current.type == expected_type:
            return self.advance()
        raise UnexpectedTokenError(self.current, production)

    def get_precedence(self, token_type: TokenType) -> int:
        """Get precedence for operator token type; 0 for non-operators."""
        return self.precedence.get(token_type, 0)

    def parse_primary(self) -> Expr:
        """Parse primary expressions (literals, identifiers, parenthesized, `if`)."""
        token = self.current

        match token.type:
            case TokenType.INTEGER:
                self.advance()
                return IntegerNode(value=token.value, line=token.line, column=token.column)

            case TokenType.IDENTIFIER:
                self.advance()
                return IdentifierNode(name=token.value, line=token.line, column=token.column)

            case TokenType.LPAREN:
                self.advance()  # Consume '('
                expr = self.parse_expression()
                self.expect(TokenType.RPAREN, "parenthesized expression")
                return expr

            case TokenType.IF:
                return self.parse_if()

            case _:
                raise UnexpectedTokenError(token, "primary")

    def parse_unary(self) -> Expr:
        """Parse prefix `-` and `!`, which bind tighter than any binary operator.

        A run of prefix operators is collected first and applied inside-out,
        so `- - - 7` needs no recursion.
        """
        prefixes: List[Token] = []
        while self.current.type in (TokenType.MINUS, TokenType.NOT):
            prefixes.append(self.advance())

        expr = self.parse_primary()
        for token in reversed(prefixes):
            expr = UnaryNode(
                operator=token.value,
                operand=expr,
                line=token.line,
                column=token.column,
            )
        return expr

    def parse_binary_expression(self, left: Expr, min_precedence: int = 1) -> Expr:
        """Parse binary expressions by precedence climbing."""
        while True:
            token = self.advance()
            precedence = self.get_precedence(token.type)
            if precedence == 0 or precedence < min_precedence:
                self.context.push_back(token)
                break

            # Parse right operand with higher precedence
            right = self.parse_binary_expression(self.parse_unary(), precedence + 1)
            left = BinaryNode(
                operator=token.value,
                left=left,
                right=right,
                line=token.line,
                column=token.column,
            )

        return left

    def parse_if(self) -> IfNode:
        """Parse `if <cond> then <expr> else <expr> end`."""
        if_token = self.expect(TokenType.IF, "if")
        condition = self.parse_expression()
        self.expect(TokenType.THEN, "if")
        consequent = self.parse_expression()
        self.expect(TokenType.ELSE, "if")
        alternative = self.parse_expression()
        self.expect(TokenType.END, "if")
        return IfNode(
            condition=condition,
            consequent=consequent,
            alternative=alternative,
            line=if_token.line,
            column=if_token.column,
        )

    def parse_expression(self) -> Expr:
        """Parse one complete expression, leaving the context just past it."""
        return self.parse_binary_expression(self.parse_unary())

    def parse(self) -> Expr:
        """Parse one expression that must span the whole input."""
        expr = self.parse_expression()
        if self.current.type != TokenType.EOF:
            raise UnexpectedTokenError(self.current, "end of input")
        return expr
