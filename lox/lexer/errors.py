"""
Error reporting for the Lox lexer.

The scanner never raises on malformed input. It reports each problem to a
Diagnostics collaborator and keeps going, so several errors can surface in
one pass. Aggregation and exit-code decisions belong to the caller.

Author: xwest
"""

import sys
from typing import Optional, List, Protocol, TextIO
from dataclasses import dataclass


# Messages reported by the scanner
UNEXPECTED_CHARACTER = "Unexpected character."
UNTERMINATED_STRING = "Unterminated string."
INVALID_NUMBER_FORMAT = "Invalid number format."

# Common error codes for categorization
ERROR_CODES = {
    "L001": UNEXPECTED_CHARACTER,
    "L002": UNTERMINATED_STRING,
    "L003": INVALID_NUMBER_FORMAT,
}

HELP_TEXT = {
    "L001": "Only punctuation, operators, numbers and strings are recognized.",
    "L002": "String literals must be closed with a matching '\"'.",
    "L003": "A decimal point must be followed by at least one digit.",
}


def code_for(message: str) -> Optional[str]:
    """Return the error code for a scanner message, or None if unknown."""
    for code, known in ERROR_CODES.items():
        if known == message:
            return code
    return None


class Diagnostics(Protocol):
    """The single hook the scanner calls into when it finds malformed input."""

    def report(self, line: int, message: str) -> None:
        ...


@dataclass(frozen=True)
class Diagnostic:
    """A single recorded lexer diagnostic."""
    message: str
    line: int
    severity: str = "error"
    code: Optional[str] = None
    help_text: Optional[str] = None

    def __str__(self) -> str:
        result = f"[line {self.line}] {self.severity.capitalize()}: {self.message}"
        if self.help_text:
            result += f"\n  help: {self.help_text}"
        return result


class DiagnosticCollector:
    """
    Diagnostics collaborator that records every report in order.

    Used as the scanner's default and as the recording double in tests.
    """

    def __init__(self):
        self.diagnostics: List[Diagnostic] = []

    def report(self, line: int, message: str) -> None:
        code = code_for(message)
        self.diagnostics.append(Diagnostic(
            message=message,
            line=line,
            code=code,
            help_text=HELP_TEXT.get(code),
        ))

    def has_errors(self) -> bool:
        """Check if any error was reported."""
        return len(self.diagnostics) > 0

    def clear(self) -> None:
        self.diagnostics.clear()

    def __len__(self) -> int:
        return len(self.diagnostics)

    def __iter__(self):
        return iter(self.diagnostics)


class ConsoleDiagnostics:
    """Writes each report to a stream as ``[line N] Error: message``."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stderr
        self.had_error = False

    def report(self, line: int, message: str) -> None:
        self.had_error = True
        print(f"[line {line}] Error: {message}", file=self.stream)


class LexerError(Exception):
    """
    Raised by the convenience front-ends when a scan reported errors.

    The scanner itself never raises this; it is the caller's way of
    halting before the parser runs.
    """

    def __init__(self, diagnostics: List[Diagnostic]):
        self.diagnostics = list(diagnostics)
        first = self.diagnostics[0] if self.diagnostics else None
        message = str(first) if first else "lexical error"
        if len(self.diagnostics) > 1:
            message += f" (and {len(self.diagnostics) - 1} more)"
        super().__init__(message)
