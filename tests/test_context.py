"""Tests for context.py: lookahead, pushback and file loading."""

import pytest
from context import Context
from tokens import TokenType
from errors import SourceIOError


def test_peek_does_not_consume():
    ctx = Context("1 2")
    assert ctx.peek().value == 1
    assert ctx.peek().value == 1
    assert ctx.next_token().value == 1
    assert ctx.next_token().value == 2


def test_push_back_returns_token_on_next_read():
    ctx = Context("a b")
    first = ctx.next_token()
    ctx.push_back(first)
    assert ctx.peek() is first
    assert ctx.next_token() is first
    assert ctx.next_token().value == "b"


def test_only_one_token_can_be_pending():
    ctx = Context("a b")
    first = ctx.next_token()
    ctx.peek()
    with pytest.raises(RuntimeError):
        ctx.push_back(first)


def test_next_token_after_eof_keeps_returning_eof():
    ctx = Context("")
    for _ in range(3):
        assert ctx.next_token().type == TokenType.EOF


def test_from_file_reads_source(tmp_path):
    path = tmp_path / "prog.sl"
    path.write_text("1 + 2\n", encoding="utf-8")
    ctx = Context.from_file(str(path))
    assert ctx.path == str(path)
    assert ctx.text == "1 + 2\n"


def test_from_file_missing_raises_source_io_error(tmp_path):
    missing = tmp_path / "nope.sl"
    with pytest.raises(SourceIOError) as exc:
        Context.from_file(str(missing))
    assert exc.value.path == str(missing)
