"""AST node definitions for the simplang expression language.

This module defines the expression node dataclasses produced by the parser
and consumed by the printer and the evaluator. The `NodeType` enum identifies
node kinds; `Expr` is the closed union of all node classes.

Conventions:
- All nodes inherit from `ASTNode`, which records the node kind (`NodeType`)
    and the source `line`/`column` of the token that started the node.
- Nodes are frozen and their children are required keyword arguments, so a
    node is always fully formed and never changes after the parser builds it.
- Operators are stored as their source symbol (`"+"`, `"=="`, `"!"`, ...).
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Union


class NodeType(Enum):
    INTEGER = auto()
    IDENTIFIER = auto()
    IF = auto()
    UNARY = auto()
    BINARY = auto()

    def __str__(self) -> str:
        return self.name


# Base AST Node
@dataclass(frozen=True, kw_only=True)
class ASTNode:
    type: NodeType
    line: int = 0
    column: int = 0


@dataclass(frozen=True, kw_only=True)
class IntegerNode(ASTNode):
    type: NodeType = NodeType.INTEGER
    value: int


@dataclass(frozen=True, kw_only=True)
class IdentifierNode(ASTNode):
    type: NodeType = NodeType.IDENTIFIER
    name: str


@dataclass(frozen=True, kw_only=True)
class IfNode(ASTNode):
    type: NodeType = NodeType.IF
    condition: Expr
    consequent: Expr
    alternative: Expr


@dataclass(frozen=True, kw_only=True)
class UnaryNode(ASTNode):
    type: NodeType = NodeType.UNARY
    operator: str
    operand: Expr


@dataclass(frozen=True, kw_only=True)
class BinaryNode(ASTNode):
    type: NodeType = NodeType.BINARY
    operator: str
    left: Expr
    right: Expr


Expr = Union[IntegerNode, IdentifierNode, IfNode, UnaryNode, BinaryNode]

UNARY_OPERATORS = ("-", "!")
BINARY_OPERATORS = ("||", "&&", "==", "!=", "<", "+", "-", "*", "/", "%")


def children(node: Expr) -> tuple[Expr, ...]:
    """Return the child nodes of `node` in evaluation order."""
    match node:
        case IfNode(condition=c, consequent=t, alternative=e):
            return (c, t, e)
        case UnaryNode(operand=o):
            return (o,)
        case BinaryNode(left=l, right=r):
            return (l, r)
        case _:
            return ()
