from lexer import Lexer
from context import Context
from parser import Parser
from evaluator import evaluate


def lex(text: str):
    """Return a list of tokens for the given source text."""
    return Lexer(text).tokenize()


def parse_text(text: str):
    """Convenience: lex+parse a source text into a tree."""
    return Parser(Context(text)).parse()


def eval_text(text: str):
    """Parse and evaluate a source text."""
    return evaluate(parse_text(text))
