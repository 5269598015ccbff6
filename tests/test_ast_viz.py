"""Tests for ast_viz: ensure a Digraph is produced with one node per tree node."""

from ast_viz import render_ast_dot
from tests.utils import parse_text


def test_ast_viz_dot_source():
    dot = render_ast_dot(parse_text("1 + 2 * 3"))
    src = dot.source
    # Pre-order ids: n0 '+', n1 '1', n2 '*', n3 '2', n4 '3'
    for node_id in ("n0", "n1", "n2", "n3", "n4"):
        assert node_id in src
    assert "n5" not in src
    assert "n0 -> n1" in src
    assert "n0 -> n2" in src
    assert "n2 -> n4" in src


def test_ast_viz_labels_if_edges():
    dot = render_ast_dot(parse_text("if 1 then 2 else 3 end"), title="demo")
    src = dot.source
    assert "cond" in src and "then" in src and "else" in src
    assert "demo" in src


def test_ast_viz_tooltip_is_source_position():
    src = render_ast_dot(parse_text("1 +\n  2")).source
    assert 'tooltip="1:3"' in src
    assert 'tooltip="2:3"' in src


def test_ast_viz_long_flat_sum():
    terms = 3000
    src = render_ast_dot(parse_text(" + ".join(["1"] * terms))).source
    last = 2 * terms - 2
    assert f"n{last}" in src
    assert f"n{last + 1}" not in src
