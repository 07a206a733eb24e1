from .ast import ADDITIVE, MULTIPLICATIVE, BinaryOp, Number, Operator
from .errors import ParseError


# Parser builds an expression tree from tokens with two precedence levels:
#
#   expression := term ((PLUS | MINUS) term)?
#   term       := factor ((MUL | DIV) factor)?
#   factor     := INT | FLOAT
#
# Each level takes at most one operator; parentheses are not parsed.
class Parser:
    def __init__(self, tokens, strict=False):
        self.tokens = tokens
        self.strict = strict  # Reject tokens left over after the expression
        self.pos = 0

    def parse(self):
        """Parses the token sequence.

        Returns:
            Node: The expression tree, or None when there are no tokens
        """
        if not self.tokens:
            return None
        node = self._expression()
        if self.strict and self.pos < len(self.tokens):
            raise ParseError(self._error("Unexpected token"), self.pos)
        return node

    def _expression(self):
        left = self._term()
        if self._match(ADDITIVE):
            op = Operator.from_token(self._advance())
            right = self._term()
            return BinaryOp(left, op, right)
        return left

    def _term(self):
        left = self._factor()
        if self._match(MULTIPLICATIVE):
            op = Operator.from_token(self._advance())
            right = self._factor()
            return BinaryOp(left, op, right)
        return left

    def _factor(self):
        if self.pos < len(self.tokens) and self.tokens[self.pos].is_number():
            return Number.from_token(self._advance())
        raise ParseError(self._error("Expected number"), self.pos)

    def _advance(self):
        token = self.tokens[self.pos]
        self.pos += 1
        return token

    def _match(self, types):
        return self.pos < len(self.tokens) and self.tokens[self.pos].type in types

    def _error(self, message):
        if self.pos < len(self.tokens):
            token = self.tokens[self.pos]
            return f"{message} at token {self.pos + 1} ({token})"
        return f"{message} at end of input"


def parse(tokens, strict=False):
    return Parser(tokens, strict=strict).parse()
