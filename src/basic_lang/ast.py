# Abstract Syntax Tree (AST) node classes
# A parsed line is either a single Number or a BinaryOp over two subtrees
import math
import operator
from enum import Enum

from .token import TokenType


# Binary operators, named the way their tokens are rendered
class Operator(Enum):
    ADD = 'PLUS'
    SUB = 'MINUS'
    MUL = 'MUL'
    DIV = 'DIV'

    @classmethod
    def from_token(cls, token):
        return cls(token.type.value)

    def apply(self, left, right):
        return OPERATIONS[self](left, right)

    def __str__(self):
        return self.value


ADDITIVE = (TokenType.PLUS, TokenType.MINUS)
MULTIPLICATIVE = (TokenType.MUL, TokenType.DIV)


def divide(left, right):
    """Floating point division that returns inf or nan for a zero divisor."""
    if right != 0:
        return left / right
    if left == 0 or math.isnan(left):
        return math.nan
    return math.copysign(math.inf, left) * math.copysign(1.0, right)


OPERATIONS = {
    Operator.ADD: operator.add,
    Operator.SUB: operator.sub,
    Operator.MUL: operator.mul,
    Operator.DIV: divide,
}


class Node:
    def evaluate(self):
        raise NotImplementedError


# Represents a numeric literal (e.g., 12 or 3.5), always held as a float
class Number(Node):
    def __init__(self, value, kind=TokenType.FLOAT):
        self.value = float(value)  # Widened numeric value
        self.kind = kind           # INT or FLOAT, kept for rendering

    @classmethod
    def from_token(cls, token):
        return cls(token.value, token.type)

    def evaluate(self):
        return self.value

    def __eq__(self, other):
        return isinstance(other, Number) and self.value == other.value

    def __str__(self):
        if self.kind == TokenType.INT:
            return f"{self.kind.value}:{int(self.value)}"
        return f"{self.kind.value}:{self.value:.3f}"

    def __repr__(self):
        return f"Number({self.value!r})"


# Represents a binary operation (e.g., 2 * 3)
class BinaryOp(Node):
    def __init__(self, left, op, right):
        self.left = left    # Left operand
        self.op = op        # Operator
        self.right = right  # Right operand

    def evaluate(self):
        left = self.left.evaluate()
        right = self.right.evaluate()
        return self.op.apply(left, right)

    def __eq__(self, other):
        return (isinstance(other, BinaryOp) and self.op == other.op
                and self.left == other.left and self.right == other.right)

    def __str__(self):
        return f"({self.left},{self.op},{self.right})"

    def __repr__(self):
        return f"BinaryOp({self.left!r}, {self.op.name}, {self.right!r})"


def format_value(value):
    """Renders an evaluated result, dropping '.0' from whole numbers."""
    if math.isfinite(value) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)
