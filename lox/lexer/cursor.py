"""
Character cursor over the source text.

Holds the (start, current, line) triple and the one- and two-character
lookahead primitives. The scanner never indexes the source directly.

Author: xwest
"""


class Cursor:
    """
    Cursor over an immutable source string.

    Invariant: 0 <= start <= current <= len(source). `line` increments
    exactly once per newline consumed.
    """

    def __init__(self, source: str):
        self.source = source
        self.start = 0
        self.current = 0
        self.line = 1
        self.start_line = 1

    def at_end(self) -> bool:
        """Check whether every character has been consumed."""
        return self.current >= len(self.source)

    def peek(self) -> str:
        """Return the next unconsumed character, or '' at end of input."""
        if self.at_end():
            return ""
        return self.source[self.current]

    def peek_next(self) -> str:
        """Return the character after peek(), or '' past end of input."""
        if self.current + 1 >= len(self.source):
            return ""
        return self.source[self.current + 1]

    def advance(self) -> str:
        """Consume and return one character, tracking newlines."""
        if self.at_end():
            raise IndexError("advance past end of source")
        char = self.source[self.current]
        self.current += 1
        if char == "\n":
            self.line += 1
        return char

    def match(self, expected: str) -> bool:
        """Consume the next character only if it equals `expected`."""
        if self.at_end() or self.peek() != expected:
            return False
        self.advance()
        return True

    def mark(self) -> None:
        """Begin a new lexeme at the current position."""
        self.start = self.current
        self.start_line = self.line

    def lexeme(self) -> str:
        return self.source[self.start:self.current]
