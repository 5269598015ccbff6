"""Graphviz visualization helpers for expression trees.

Provides `render_ast_dot(expr)` which returns a `graphviz.Digraph` object
(not rendered). `write_and_render` writes the rendered file to disk, which
requires the Graphviz binaries; building the `Digraph` does not.

Each node is a box labelled with its operator, keyword or value. Edges run
from a node to its children in evaluation order and are labelled with the
child's role (`cond`, `then`, `else`, `left`, `right`).
"""

from typing import List, Tuple
from graphviz import Digraph
from ast_nodes import *

EDGE_LABELS = {
    NodeType.IF: ("cond", "then", "else"),
    NodeType.UNARY: ("",),
    NodeType.BINARY: ("left", "right"),
}


def _node_label(node: Expr) -> str:
    match node:
        case IntegerNode(value=v):
            return str(v)
        case IdentifierNode(name=n):
            return n
        case IfNode():
            return "if"
        case UnaryNode(operator=op) | BinaryNode(operator=op):
            return op
    return str(node.type)


def render_ast_dot(expr: Expr, title: str = "") -> Digraph:
    """Return a graphviz.Digraph for the given tree.

    The caller may call `dot.source` to inspect the dot text, or call
    `dot.render(filename, format=...)` to write files (requires Graphviz installed).
    """
    dot = Digraph(format="svg")
    dot.attr("graph", rankdir="TB")
    if title:
        dot.attr("graph", label=title, labelloc="t")
    dot.attr("node", shape="box", fontname="monospace")

    # Walk the tree iteratively, assigning node ids in pre-order.
    counter = 0
    stack: List[Tuple[Expr, str, str]] = [(expr, "", "")]
    while stack:
        node, parent_id, edge_label = stack.pop()
        node_id = f"n{counter}"
        counter += 1

        dot.node(
            node_id,
            label=_node_label(node),
            tooltip=f"{node.line}:{node.column}",
            shape="ellipse" if isinstance(node, (IntegerNode, IdentifierNode)) else "box",
        )
        if parent_id:
            dot.edge(parent_id, node_id, label=edge_label)

        kids = children(node)
        labels = EDGE_LABELS.get(node.type, ())
        # Push in reverse so the leftmost child gets the next id.
        for child, label in reversed(list(zip(kids, labels))):
            stack.append((child, node_id, label))

    return dot


def write_and_render(expr: Expr, out_path: str, fmt: str = "svg") -> str:
    """Write and render the tree to the given path (without extension).

    Example: write_and_render(expr, 'out/tree', fmt='png') will create
    out/tree.png (requires Graphviz). Returns the path of the rendered file.
    """
    dot = render_ast_dot(expr)
    dot.format = fmt
    # Note: render will append extension automatically
    return dot.render(out_path, cleanup=True)
