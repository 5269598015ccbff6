from __future__ import annotations
import json
import logging
import sys
from typing import List, Optional
from graphviz import ExecutableNotFound
from context import Context
from lexer import Lexer
from tokens import Token, TokenType
from ast_nodes import Expr
from parser import Parser
from evaluator import evaluate
from errors import SimplangError
from pretty_printer import PrettyPrinter
from ast_json import ast_to_json
from ast_viz import write_and_render

LOG = logging.getLogger("simplang")

__all__ = [
    "init",
    "next_token",
    "parse_expression",
    "evaluate",
    "lex",
    "parse_text",
    "eval_text",
    "main",
]


def init(source_path: str) -> Context:
    """Read `source_path` and return a context ready for lexing or parsing."""
    ctx = Context.from_file(source_path)
    LOG.debug("Read %d characters from %s", len(ctx.text), source_path)
    return ctx


def next_token(context: Context) -> Token:
    """Consume and return the next token of `context`."""
    return context.next_token()


def parse_expression(context: Context) -> Expr:
    """Parse one expression from `context`, leaving it just past the expression."""
    return Parser(context).parse_expression()


def lex(text: str) -> List[Token]:
    """Tokenize input string."""
    lexer = Lexer(text)
    return lexer.tokenize()


def parse_text(text: str) -> Expr:
    """Parse a complete source string into a tree."""
    return Parser(Context(text)).parse()


def eval_text(text: str) -> int:
    """Parse and evaluate a complete source string."""
    return evaluate(parse_text(text))


def scan_main(ctx: Context) -> None:
    count = 0
    while True:
        token = next_token(ctx)
        if token.type == TokenType.EOF:
            break
        print(PrettyPrinter.print_token(token))
        count += 1
    LOG.debug("Scanned %d tokens", count)


def parse_main(
    ctx: Context,
    *,
    dump_ast_path: Optional[str] = None,
    viz_path: Optional[str] = None,
    viz_format: str = "svg",
) -> Expr:
    expr = Parser(ctx).parse()
    if LOG.isEnabledFor(logging.DEBUG):
        LOG.debug("Parsed %s", PrettyPrinter.print_surface(expr))
    print(PrettyPrinter.print_ast(expr))

    if dump_ast_path:
        with open(dump_ast_path, "w", encoding="utf-8") as fh:
            json.dump(ast_to_json(expr), fh, indent=2)
        LOG.info("Wrote AST JSON to %s", dump_ast_path)

    if viz_path:
        rendered = write_and_render(expr, viz_path, fmt=viz_format)
        LOG.info("Wrote AST visualization to %s", rendered)

    return expr


def eval_main(ctx: Context) -> int:
    expr = Parser(ctx).parse()
    if LOG.isEnabledFor(logging.DEBUG):
        LOG.debug("Evaluating %s", PrettyPrinter.print_surface(expr))
    result = evaluate(expr)
    print(result)
    return result


def main(argv: Optional[List[str]] = None) -> int:
    import argparse

    parser = argparse.ArgumentParser(
        prog="simplang",
        description="Scan, parse or evaluate a simplang source file",
    )
    parser.add_argument("file", help="Path to source file to process")
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--scan",
        dest="mode",
        action="store_const",
        const="scan",
        help="Print one line per token",
    )
    group.add_argument(
        "--parse",
        dest="mode",
        action="store_const",
        const="parse",
        help="Print the parsed tree (default)",
    )
    group.add_argument(
        "--eval",
        dest="mode",
        action="store_const",
        const="eval",
        help="Print the value of the expression",
    )
    parser.set_defaults(mode="parse")
    parser.add_argument(
        "--dump-ast", dest="dump_ast", help="Path to write the parsed tree as JSON"
    )
    parser.add_argument(
        "--viz",
        dest="viz",
        help="Path (without extension) to write a Graphviz rendering of the tree",
    )
    parser.add_argument(
        "--viz-format",
        dest="viz_format",
        default="svg",
        help="Format for Graphviz output (svg, png, pdf, etc)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Verbose logging"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(message)s")
    if args.verbose:
        LOG.setLevel(logging.DEBUG)
        LOG.debug("Verbose mode enabled")

    if args.mode != "parse" and (args.dump_ast or args.viz):
        parser.error("--dump-ast and --viz require --parse")

    try:
        ctx = init(args.file)
        if args.mode == "scan":
            scan_main(ctx)
        elif args.mode == "eval":
            eval_main(ctx)
        else:
            parse_main(
                ctx,
                dump_ast_path=args.dump_ast,
                viz_path=args.viz,
                viz_format=args.viz_format,
            )
    except SimplangError as e:
        print(f"{e.kind} error: {e}", file=sys.stderr)
        return 1
    except RecursionError:
        # Parenthesized nesting and JSON export still recurse per level.
        print("Error: expression nested too deeply to process", file=sys.stderr)
        return 1
    except (OSError, ExecutableNotFound) as e:
        LOG.error("Failed to write output: %s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
