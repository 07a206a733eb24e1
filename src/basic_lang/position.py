# Position tracks where the lexer is in the source text
# Only the lexer advances it; error messages read line and column from it
class Position:
    def __init__(self, index, line, column, source_name, source_text):
        self.index = index              # Offset of the current character
        self.line = line                # Line number (0-based)
        self.column = column            # Column number (0-based)
        self.source_name = source_name  # Name of the input (e.g., "stdin")
        self.source_text = source_text  # Full text being tokenized

    def advance(self, current_char):
        """Moves past current_char, updating line and column."""
        self.index += 1
        if current_char == '\n':
            self.column = 0
            self.line += 1
        else:
            self.column += 1

    def copy(self):
        return Position(self.index, self.line, self.column,
                        self.source_name, self.source_text)

    def __repr__(self):
        return f"Position({self.source_name}, line={self.line}, col={self.column})"
