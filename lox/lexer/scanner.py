"""
Lox Scanner - turns source text into a flat list of tokens

Single pass, one character of dispatch plus at most two characters of
lookahead. Malformed input is reported to the Diagnostics collaborator and
scanning carries on with the next character, so one run can surface every
lexical error in the file.

Token lines are the line on which the lexeme starts, which matters for
strings spanning several lines.

xwest
"""

import logging
from typing import List, Optional

from .tokens import (
    Token, TokenKind, Literal, SINGLE_CHAR_TOKENS, TWO_CHAR_TOKENS, WHITESPACE
)
from .cursor import Cursor
from .literals import is_digit, decode_number, decode_string
from .errors import (
    Diagnostics, DiagnosticCollector, LexerError,
    UNEXPECTED_CHARACTER, UNTERMINATED_STRING, INVALID_NUMBER_FORMAT
)

logger = logging.getLogger(__name__)


class Scanner:
    """
    Lox lexical analyzer.

    Built from one source string, run once with scan_tokens(), then
    discarded.
    """

    def __init__(self, source: str, diagnostics: Optional[Diagnostics] = None):
        """
        Initialize the scanner with source code.

        Args:
            source: Fully decoded source text
            diagnostics: Collaborator receiving report(line, message) calls.
                A fresh DiagnosticCollector is used when omitted.
        """
        self.diagnostics = diagnostics if diagnostics is not None else DiagnosticCollector()
        self.tokens: List[Token] = []
        self._cursor = Cursor(source)
        self._errors = 0
        self._done = False

    @property
    def line(self) -> int:
        return self._cursor.line

    def scan_tokens(self) -> List[Token]:
        """
        Scan the entire source.

        Returns:
            List of tokens, always ending with exactly one END token
        """
        if self._done:
            raise RuntimeError("Scanner instances are single-use")
        self._done = True

        cursor = self._cursor
        while not cursor.at_end():
            cursor.mark()
            self._scan_token()

        self.tokens.append(Token(TokenKind.END, "", None, cursor.line))

        logger.debug("scanned %d tokens over %d lines with %d errors",
                     len(self.tokens), cursor.line, self._errors)
        return self.tokens

    def _scan_token(self):
        cursor = self._cursor
        char = cursor.advance()

        if char in SINGLE_CHAR_TOKENS:
            self._add_token(SINGLE_CHAR_TOKENS[char])
        elif char in TWO_CHAR_TOKENS:
            short, extended = TWO_CHAR_TOKENS[char]
            self._add_token(extended if cursor.match("=") else short)
        elif char == "/":
            if cursor.match("/"):
                # A comment goes until the end of the line
                while cursor.peek() != "\n" and not cursor.at_end():
                    cursor.advance()
            else:
                self._add_token(TokenKind.SLASH)
        elif char in WHITESPACE or char == "\n":
            # Cursor.advance already counted the newline
            pass
        elif char == '"':
            self._string()
        elif is_digit(char):
            self._number()
        else:
            self._error(cursor.line, UNEXPECTED_CHARACTER)

    def _string(self):
        cursor = self._cursor
        while cursor.peek() != '"' and not cursor.at_end():
            cursor.advance()

        if cursor.at_end():
            self._error(cursor.line, UNTERMINATED_STRING)
            return

        cursor.advance()  # closing quote
        self._add_token(TokenKind.STRING, decode_string(cursor.lexeme()))

    def _number(self):
        cursor = self._cursor
        while is_digit(cursor.peek()):
            cursor.advance()

        # Look for a fractional part
        if cursor.peek() == ".":
            if not is_digit(cursor.peek_next()):
                # The dot is left for the next token
                self._error(cursor.line, INVALID_NUMBER_FORMAT)
                return
            cursor.advance()
            while is_digit(cursor.peek()):
                cursor.advance()

        self._add_token(TokenKind.NUMBER, decode_number(cursor.lexeme()))

    def _add_token(self, kind: TokenKind, literal: Optional[Literal] = None):
        cursor = self._cursor
        self.tokens.append(Token(kind, cursor.lexeme(), literal, cursor.start_line))

    def _error(self, line: int, message: str):
        self._errors += 1
        logger.debug("line %d: %s (lexeme %r)", line, message, self._cursor.lexeme())
        self.diagnostics.report(line, message)


def scan(source: str, diagnostics: Optional[Diagnostics] = None) -> List[Token]:
    """
    Scan source text into tokens.

    Args:
        source: Source code string
        diagnostics: Collaborator for lexical errors

    Returns:
        List of tokens ending with END
    """
    return Scanner(source, diagnostics).scan_tokens()


def tokenize_string(source: str) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string

    Returns:
        List of tokens

    Raises:
        LexerError: If any lexical error was reported
    """
    collector = DiagnosticCollector()
    tokens = scan(source, collector)

    if collector.has_errors():
        raise LexerError(collector.diagnostics)

    return tokens


def tokenize_file(filepath: str, encoding: str = "utf-8") -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Args:
        filepath: Path to source file
        encoding: Text encoding of the file

    Returns:
        List of tokens

    Raises:
        LexerError: If any lexical error was reported
        OSError: If file cannot be read
    """
    with open(filepath, 'r', encoding=encoding) as f:
        source = f.read()

    return tokenize_string(source)
