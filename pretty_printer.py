"""Pretty-printer for tokens and expression trees.

Provides the textual dumps used by the driver's `--scan` and `--parse`
modes:

- `PrettyPrinter.print_token(token)` renders one token as
    `keyword if`, `operator +`, `integer 42` or `identifier x`.
- `PrettyPrinter.print_ast(node)` renders a tree in pre-order, one node per
    line, with two spaces of indentation per nesting level.
- `PrettyPrinter.print_surface(node)` renders a tree on one line with every
    compound sub-expression parenthesized.

Examples:
    PrettyPrinter.print_ast(parse_text("1 + 2 * 3"))
    +
      1
      *
        2
        3
"""

from __future__ import annotations
from typing import List, Tuple, assert_never
from ast_nodes import *
from tokens import Token, TokenType, KEYWORD_NAMES, OPERATOR_SYMBOLS

INDENT_UNIT = "  "


class PrettyPrinter:
    @staticmethod
    def print_token(token: Token) -> str:
        if token.type.is_keyword:
            return f"keyword {KEYWORD_NAMES[token.type]}"
        if token.type.is_operator:
            return f"operator {OPERATOR_SYMBOLS[token.type]}"
        if token.type == TokenType.INTEGER:
            return f"integer {token.value}"
        if token.type == TokenType.IDENTIFIER:
            return f"identifier {token.value}"
        return "eof"

    @staticmethod
    def print_ast(node: Expr, indent: int = 0) -> str:
        """Pretty print a tree and return it as a string.

        The walk is iterative so long operator chains do not hit the
        interpreter's recursion limit.
        """
        lines: List[str] = []
        stack: List[Tuple[Expr, int]] = [(node, indent)]

        while stack:
            current, level = stack.pop()
            indent_str = INDENT_UNIT * level

            match current:
                case IntegerNode(value=v):
                    lines.append(f"{indent_str}{v}")
                case IdentifierNode(name=n):
                    lines.append(f"{indent_str}{n}")
                case IfNode():
                    lines.append(f"{indent_str}if")
                case UnaryNode(operator=op) | BinaryNode(operator=op):
                    lines.append(f"{indent_str}{op}")
                case _:
                    assert_never(current)

            # Push in reverse so the first child is printed next.
            for child in reversed(children(current)):
                stack.append((child, level + 1))

        return "\n".join(lines)

    @staticmethod
    def print_surface(node: Expr) -> str:
        """Return a compact, surface-syntax-like one-line representation of a tree.

        Compound operands are wrapped in parentheses so the grouping the parser
        chose is visible, e.g. `1 + (2 * 3)`.
        """

        def _p(child: Expr, text: str) -> str:
            if isinstance(child, (BinaryNode, IfNode)):
                return f"({text})"
            return text

        parts: List[str] = []
        # (node, operands_ready): a node is visited once to schedule its
        # children and once more to join their renderings.
        work: List[Tuple[Expr, bool]] = [(node, False)]

        while work:
            current, ready = work.pop()
            kids = children(current)

            if not ready and kids:
                work.append((current, True))
                for child in reversed(kids):
                    work.append((child, False))
                continue

            operands = [_p(c, s) for c, s in zip(kids, parts[len(parts) - len(kids):])]
            del parts[len(parts) - len(kids):]

            match current:
                case IntegerNode(value=v):
                    parts.append(str(v))
                case IdentifierNode(name=n):
                    parts.append(n)
                case IfNode():
                    cond, then, other = operands
                    parts.append(f"if {cond} then {then} else {other} end")
                case UnaryNode(operator=op):
                    parts.append(f"{op}{operands[0]}")
                case BinaryNode(operator=op):
                    parts.append(f"{operands[0]} {op} {operands[1]}")
                case _:
                    assert_never(current)

        return parts.pop()
