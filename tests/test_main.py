"""End-to-end tests for the driver: entry points and the three modes."""

import json
import os
import logging
import pytest
import main
from lexer import Lexer
from tokens import TokenType
from errors import SourceIOError


@pytest.fixture
def source(tmp_path):
    def write(text):
        path = tmp_path / "prog.sl"
        path.write_text(text, encoding="utf-8")
        return str(path)

    return write


def test_entry_points_pipeline(source):
    ctx = main.init(source("2 * (3 + 4)"))
    expr = main.parse_expression(ctx)
    assert main.evaluate(expr) == 14
    assert main.next_token(ctx).type == TokenType.EOF


def test_init_missing_file_raises(tmp_path):
    with pytest.raises(SourceIOError):
        main.init(str(tmp_path / "missing.sl"))


def test_text_helpers():
    assert [t.type for t in main.lex("1 + 2")][-1] == TokenType.EOF
    assert main.lex("a && 3") == Lexer("a && 3").tokenize()
    assert main.eval_text("if 1 < 2 then 10 else 20 end") == 10


def test_scan_mode(source, capsys):
    assert main.main(["--scan", source("if x then 1 else 2 end")]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == [
        "keyword if",
        "identifier x",
        "keyword then",
        "integer 1",
        "keyword else",
        "integer 2",
        "keyword end",
    ]


def test_parse_mode_is_default(source, capsys):
    assert main.main([source("10 - 3 - 2")]) == 0
    assert capsys.readouterr().out == "-\n  -\n    10\n    3\n  2\n"


def test_eval_mode(source, capsys):
    assert main.main(["--eval", source("1 + 2 * 3")]) == 0
    assert capsys.readouterr().out == "7\n"


def test_errors_exit_nonzero_with_message(source, capsys):
    assert main.main(["--eval", source("1 / 0")]) == 1
    err = capsys.readouterr().err
    assert err.startswith("Evaluation error: 1:3: division by zero")

    assert main.main(["--parse", source("1 +")]) == 1
    assert "Syntax error" in capsys.readouterr().err

    assert main.main(["--scan", source("1 @ 2")]) == 1
    assert "Lexical error" in capsys.readouterr().err


def test_missing_file_reports_io_error(tmp_path, capsys):
    assert main.main([str(tmp_path / "missing.sl")]) == 1
    assert capsys.readouterr().err.startswith("IO error: cannot read")


def test_dump_ast_writes_json(source, tmp_path, capsys):
    out_path = tmp_path / "tree.json"
    assert main.main(["--dump-ast", str(out_path), source("-5")]) == 0
    data = json.loads(out_path.read_text(encoding="utf-8"))
    assert data["node_type"] == "UNARY"
    assert data["operand"]["value"] == 5


def test_dump_ast_requires_parse_mode(source):
    with pytest.raises(SystemExit):
        main.main(["--eval", "--dump-ast", "x.json", source("1")])


def test_verbose_logs_debug(source, caplog):
    with caplog.at_level(logging.DEBUG, logger="simplang"):
        assert main.main(["-v", "--scan", source("1 2")]) == 0
    assert "Scanned 2 tokens" in caplog.text


def test_example_programs(capsys):
    root = os.path.dirname(os.path.dirname(__file__))
    assert main.main(["--eval", f"{root}/examples/precedence.sl"]) == 0
    assert main.main(["--eval", f"{root}/examples/conditional.sl"]) == 0
    assert capsys.readouterr().out == "7\n10\n"


def test_eval_and_parse_long_flat_sum(source, capsys):
    path = source(" + ".join(["1"] * 3000))
    assert main.main(["--eval", path]) == 0
    assert capsys.readouterr().out == "3000\n"
    assert main.main(["--parse", path]) == 0
    assert len(capsys.readouterr().out.splitlines()) == 5999


def test_if_as_operand_through_driver(source, capsys):
    assert main.main(["--eval", source("1 + if 0 then 1 else 2 end * 10")]) == 0
    assert capsys.readouterr().out == "21\n"


def test_too_deeply_parenthesized_input_is_reported(source, capsys):
    depth = 5000
    assert main.main(["--eval", source("(" * depth + "1" + ")" * depth)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "nested too deeply" in captured.err
