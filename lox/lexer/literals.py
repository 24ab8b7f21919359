"""
Literal decoding for the Lox lexer.

Pure functions, kept apart from token assembly so that numeric and string
edge cases can be tested without running the scanner.

Author: xwest
"""

import re

# digits, optionally followed by '.' and at least one digit
NUMBER_PATTERN = re.compile(r'[0-9]+(?:\.[0-9]+)?')


def is_digit(char: str) -> bool:
    """Check for an ASCII decimal digit ('' and Unicode digits are not)."""
    return len(char) == 1 and "0" <= char <= "9"


def decode_number(text: str) -> float:
    """
    Decode a number lexeme into a double.

    Args:
        text: Lexeme matching digits ('.' digits)?

    Returns:
        The decimal value as a float

    Raises:
        ValueError: If text is not a well-formed number lexeme
    """
    if not NUMBER_PATTERN.fullmatch(text):
        raise ValueError(f"Invalid number literal: {text!r}")
    return float(text)


def decode_string(lexeme: str) -> str:
    """
    Strip the surrounding quotes from a string lexeme.

    Backslashes have no special meaning; the body is returned verbatim.
    """
    if len(lexeme) < 2 or lexeme[0] != '"' or lexeme[-1] != '"':
        raise ValueError(f"Invalid string literal: {lexeme!r}")
    return lexeme[1:-1]
