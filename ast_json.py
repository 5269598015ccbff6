"""Convert expression trees into JSON-serializable structures.

This module provides `ast_to_json(node)` which returns a nested structure
of dicts describing the tree: each node records its kind, its source
position and its fields. The tree is walked with an explicit stack, so the
depth of the input is not limited by Python's recursion limit.
"""

from typing import Any, Dict, List, Optional, Tuple
from ast_nodes import *

CHILD_KEYS = {
    NodeType.IF: ("condition", "consequent", "alternative"),
    NodeType.UNARY: ("operand",),
    NodeType.BINARY: ("left", "right"),
}


def _fields(node: Expr) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "node_type": node.type.name,
        "line": node.line,
        "column": node.column,
    }
    match node:
        case IntegerNode(value=v):
            data["value"] = v
        case IdentifierNode(name=n):
            data["name"] = n
        case UnaryNode(operator=op) | BinaryNode(operator=op):
            data["operator"] = op
    return data


def ast_to_json(node: Expr) -> Dict[str, Any]:
    root: Dict[str, Any] = {}
    # (node, parent dict, key under which the node's dict is stored)
    stack: List[Tuple[Expr, Optional[Dict[str, Any]], str]] = [(node, None, "")]
    while stack:
        current, parent, key = stack.pop()
        data = _fields(current)
        if parent is None:
            root = data
        else:
            parent[key] = data
        pairs = list(zip(children(current), CHILD_KEYS.get(current.type, ())))
        # Reversed so keys are inserted in field order.
        for child, child_key in reversed(pairs):
            stack.append((child, data, child_key))
    return root
