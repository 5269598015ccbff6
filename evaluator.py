"""Tree-walking evaluator for simplang expressions.

`evaluate(expr)` reduces a tree to a signed 64-bit integer. Arithmetic
semantics are fixed here rather than inherited from Python's unbounded ints:

- `+`, `-`, `*` and unary `-` wrap around in two's complement.
- `/` truncates toward zero and `%` takes the sign of the dividend. A zero
    divisor raises `DivisionByZeroError`; `-2**63 / -1` (and `% -1`) raises
    `ArithmeticOverflowError`.
- Comparisons and logical operators yield 1 or 0. `&&`, `||` and `if`
    evaluate only the operand or branch that decides the result.
- Identifiers have no bindings and raise `UnboundIdentifierError`.

Operands are evaluated left to right. The walk uses an explicit work stack
instead of Python recursion, so tree depth is bounded only by memory.
"""

from enum import Enum, auto
from typing import List, Tuple, assert_never
from ast_nodes import *
from errors import ArithmeticOverflowError, DivisionByZeroError, UnboundIdentifierError

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class Step(Enum):
    EVAL = auto()  # push the node's value
    APPLY = auto()  # operands are on the value stack
    BRANCH = auto()  # condition is on the value stack
    SHORT_CIRCUIT = auto()  # left operand of && / || is on the value stack
    TRUTH = auto()  # normalize the top value to 0 or 1


def wrap_int64(value: int) -> int:
    """Reduce `value` modulo 2**64 into the signed 64-bit range."""
    return (value + 2**63) % 2**64 - 2**63


def _divide(node: BinaryNode, lv: int, rv: int) -> int:
    if rv == 0:
        raise DivisionByZeroError(node.operator, node.line, node.column)
    if lv == INT64_MIN and rv == -1:
        raise ArithmeticOverflowError(node.operator, node.line, node.column)
    quotient = abs(lv) // abs(rv)
    if (lv < 0) != (rv < 0):
        quotient = -quotient
    if node.operator == "/":
        return quotient
    return lv - quotient * rv


def _apply_unary(node: UnaryNode, val: int) -> int:
    match node.operator:
        case "-":
            return wrap_int64(-val)
        case "!":
            return 1 if val == 0 else 0
        case _:
            raise RuntimeError(f"Unsupported unary operator: {node.operator}")


def _apply_binary(node: BinaryNode, lv: int, rv: int) -> int:
    match node.operator:
        case "+":
            return wrap_int64(lv + rv)
        case "-":
            return wrap_int64(lv - rv)
        case "*":
            return wrap_int64(lv * rv)
        case "/" | "%":
            return _divide(node, lv, rv)
        case "<":
            return 1 if lv < rv else 0
        case "==":
            return 1 if lv == rv else 0
        case "!=":
            return 1 if lv != rv else 0
        case _:
            raise RuntimeError(f"Unsupported binary operator: {node.operator}")


def _push_children(node: Expr, work: List[Tuple[Step, Expr]]) -> None:
    """Schedule the evaluation of `node`; values land on the value stack."""
    match node:
        case IfNode(condition=cond):
            work.append((Step.BRANCH, node))
            work.append((Step.EVAL, cond))
        case UnaryNode(operand=operand):
            work.append((Step.APPLY, node))
            work.append((Step.EVAL, operand))
        case BinaryNode(operator="&&" | "||", left=left):
            work.append((Step.SHORT_CIRCUIT, node))
            work.append((Step.EVAL, left))
        case BinaryNode(left=left, right=right):
            # Last pushed runs first: left before right.
            work.append((Step.APPLY, node))
            work.append((Step.EVAL, right))
            work.append((Step.EVAL, left))


def evaluate(root: Expr) -> int:
    """Evaluate an expression tree to a signed 64-bit integer."""
    values: List[int] = []
    work: List[Tuple[Step, Expr]] = [(Step.EVAL, root)]

    while work:
        step, node = work.pop()
        match step:
            case Step.EVAL:
                match node:
                    case IntegerNode(value=v):
                        values.append(v)
                    case IdentifierNode(name=n):
                        raise UnboundIdentifierError(n, node.line, node.column)
                    case IfNode() | UnaryNode() | BinaryNode():
                        _push_children(node, work)
                    case _:
                        assert_never(node)

            case Step.BRANCH:
                taken = node.consequent if values.pop() != 0 else node.alternative
                work.append((Step.EVAL, taken))

            case Step.SHORT_CIRCUIT:
                lv = values.pop()
                if node.operator == "&&" and lv == 0:
                    values.append(0)
                elif node.operator == "||" and lv != 0:
                    values.append(1)
                else:
                    work.append((Step.TRUTH, node))
                    work.append((Step.EVAL, node.right))

            case Step.TRUTH:
                values.append(1 if values.pop() != 0 else 0)

            case Step.APPLY:
                if isinstance(node, UnaryNode):
                    values.append(_apply_unary(node, values.pop()))
                else:
                    rv = values.pop()
                    lv = values.pop()
                    values.append(_apply_binary(node, lv, rv))

    return values.pop()
