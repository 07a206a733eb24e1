from decimal import Decimal
from enum import Enum


# Kinds of tokens produced by the lexer
class TokenType(Enum):
    INT = 'INT'
    FLOAT = 'FLOAT'
    PLUS = 'PLUS'
    MINUS = 'MINUS'
    MUL = 'MUL'
    DIV = 'DIV'
    LP = 'LP'
    RP = 'RP'


# Source characters for the single-character tokens
SYMBOLS = {
    '+': TokenType.PLUS,
    '-': TokenType.MINUS,
    '*': TokenType.MUL,
    '/': TokenType.DIV,
    '(': TokenType.LP,
    ')': TokenType.RP,
}

NUMBER_TYPES = (TokenType.INT, TokenType.FLOAT)


def float_source(value):
    """Writes a float as a plain decimal literal that reads back to the same value."""
    text = repr(value)
    if 'e' in text:
        text = format(Decimal(text), 'f')
    if '.' not in text:
        text += '.0'
    return text


# Token is a single lexical unit; value is only set for INT and FLOAT
class Token:
    __slots__ = ('type', 'value')

    def __init__(self, type, value=None):
        object.__setattr__(self, 'type', type)
        object.__setattr__(self, 'value', value)

    def __setattr__(self, name, value):
        raise AttributeError("Token is immutable")

    def is_number(self):
        return self.type in NUMBER_TYPES

    def to_source(self):
        """Returns the token as it could appear in source text."""
        if self.type == TokenType.INT:
            return str(self.value)
        if self.type == TokenType.FLOAT:
            return float_source(self.value)
        for char, token_type in SYMBOLS.items():
            if token_type == self.type:
                return char

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.value == other.value

    def __hash__(self):
        return hash((self.type, self.value))

    def __str__(self):
        if self.value is None:
            return self.type.value
        if self.type == TokenType.FLOAT:
            return f"{self.type.value}:{self.value:.3f}"
        return f"{self.type.value}:{self.value}"

    def __repr__(self):
        if self.value is None:
            return f"Token({self.type.value})"
        return f"Token({self.type.value}, {self.value!r})"


# Tokens is the ordered token list for one line of input
class Tokens(list):
    def add(self, *tokens):
        self.extend(tokens)
        return self

    def to_source(self):
        return ' '.join(token.to_source() for token in self)

    def __str__(self):
        return ' '.join(str(token) for token in self)
