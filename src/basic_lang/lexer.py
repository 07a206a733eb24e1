from .errors import InvalidLiteralError, UnexpectedCharacterError
from .position import Position
from .token import SYMBOLS, Token, Tokens, TokenType

WHITESPACE = ' \t'
DIGITS = '0123456789'
INT_MAX = 2**31 - 1


# Lexer breaks one line of source text into tokens
class Lexer:
    def __init__(self, source_name, text):
        self.text = text                                       # Source text to tokenize
        self.pos = Position(-1, 0, -1, source_name, text)      # Starts one before the text
        self.current = ' '                                     # Character under the cursor
        self.advance()

    def advance(self):
        """Moves the cursor one character; returns False past the end of the text."""
        self.pos.advance(self.current)
        if self.pos.index < len(self.text):
            self.current = self.text[self.pos.index]
            return True
        self.current = ' '
        return False

    def at_end(self):
        return self.pos.index >= len(self.text)

    # Main tokenization method that processes the whole line
    def tokenize(self):
        tokens = Tokens()
        while not self.at_end():
            char = self.current
            if char in WHITESPACE:
                self.advance()
            elif char in SYMBOLS:
                tokens.add(Token(SYMBOLS[char]))
                self.advance()
            elif char in DIGITS:
                # _number leaves the cursor on the first character after the literal
                tokens.add(self._number())
            else:
                raise UnexpectedCharacterError(
                    char, self.pos.source_name, self.pos.line, self.pos.column)
        return tokens

    def _number(self):
        start = self.pos.copy()
        result = ''
        dot_count = 0
        while not self.at_end():
            if self.current in DIGITS:
                result += self.current
            elif self.current == '.' and dot_count == 0:
                result += '.'
                dot_count += 1
            else:
                break
            self.advance()

        if dot_count == 0:
            # Anything longer than ten significant digits is past INT_MAX
            if len(result.lstrip('0')) > len(str(INT_MAX)) or int(result) > INT_MAX:
                raise InvalidLiteralError(result, start.source_name, start.line, start.column)
            return Token(TokenType.INT, int(result))

        try:
            value = float(result)
        except ValueError:
            raise InvalidLiteralError(result, start.source_name, start.line, start.column)
        if value in (float('inf'), float('-inf')):
            raise InvalidLiteralError(result, start.source_name, start.line, start.column)
        return Token(TokenType.FLOAT, value)


def tokenize(source_name, text):
    """Tokenizes one line of text.

    Args:
        source_name (str): Name used in error messages (e.g., "stdin")
        text (str): The line to tokenize

    Returns:
        Tokens: The tokens in source order

    Raises:
        UnexpectedCharacterError: A character matches no token
        InvalidLiteralError: A number literal is out of range
    """
    return Lexer(source_name, text).tokenize()
