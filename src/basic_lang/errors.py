# Errors raised while turning a line of text into a value.
# Both families derive from SyntaxError and are reported per line.


class LexError(SyntaxError):
    """A line could not be split into tokens."""

    def __init__(self, message, source_name=None, line=None, column=None):
        super().__init__(message)
        self.source_name = source_name
        self.line = line
        self.column = column


class UnexpectedCharacterError(LexError):
    def __init__(self, char, source_name, line, column):
        super().__init__(
            f"Unexpected character {char!r} in {source_name} at line {line}, column {column}",
            source_name, line, column)
        self.char = char


class InvalidLiteralError(LexError):
    def __init__(self, literal, source_name, line, column):
        super().__init__(
            f"Invalid number literal {literal!r} in {source_name} at line {line}, column {column}",
            source_name, line, column)
        self.literal = literal


class ParseError(SyntaxError):
    """The token sequence does not form an expression."""

    def __init__(self, message, index=None):
        super().__init__(message)
        self.index = index
