from .errors import LexError, ParseError
from .lexer import tokenize
from .parser import parse


# Result of running the pipeline on one line of input
class LineResult:
    def __init__(self, line, source, tokens=None, tree=None, value=None, error=None):
        self.line = line      # Line number (1-based) within its input
        self.source = source  # Line text as given
        self.tokens = tokens  # Tokens, or None when lexing failed
        self.tree = tree      # Expression tree, or None
        self.value = value    # Evaluated float, or None
        self.error = error    # Error message, or None

    @property
    def ok(self):
        return self.error is None

    def __repr__(self):
        if self.error is not None:
            return f"LineResult(line={self.line}, error={self.error!r})"
        return f"LineResult(line={self.line}, value={self.value!r})"


def run_line(text, source_name="stdin", strict=False, debug=False, line=1):
    """Run one line of arithmetic through lexer, parser and evaluator.

    Args:
        text (str): The line to evaluate
        source_name (str): Name reported in lexical errors
        strict (bool): If True, tokens after the expression are an error
        debug (bool): If True, prints each stage as it runs
        line (int): Line number recorded on the result

    Returns:
        LineResult: The tokens, tree and value, or the error message
    """
    if debug:
        print(f"Input: {text!r}")

    try:
        tokens = tokenize(source_name, text)
        if debug:
            print("Tokens:", tokens)

        tree = parse(tokens, strict=strict)
        if debug:
            print("Tree:", tree)
    except (LexError, ParseError) as e:
        if debug:
            print(f"Error: {type(e).__name__}: {e}")
        return LineResult(line, text, error=str(e))

    value = tree.evaluate() if tree is not None else None
    return LineResult(line, text, tokens, tree, value)


def run_lines(lines, source_name="stdin", strict=False, debug=False):
    """Runs each line independently and returns one LineResult per line."""
    return [
        run_line(text.rstrip('\r\n'), source_name, strict=strict, debug=debug, line=number)
        for number, text in enumerate(lines, start=1)
    ]
