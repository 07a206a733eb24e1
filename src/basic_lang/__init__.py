"""
Basic arithmetic interpreter

Reads one line of arithmetic (e.g., 2*3+4), tokenizes it, parses it into an
expression tree and evaluates it to a float.
"""

from .errors import InvalidLiteralError, LexError, ParseError, UnexpectedCharacterError
from .lexer import Lexer, tokenize
from .main import LineResult, run_line, run_lines
from .parser import Parser, parse

__version__ = "0.1.0"
__all__ = [
    "Lexer", "Parser", "tokenize", "parse",
    "run_line", "run_lines", "LineResult",
    "LexError", "UnexpectedCharacterError", "InvalidLiteralError", "ParseError",
]
