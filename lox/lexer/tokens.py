"""
Token definitions for the Lox lexer.

This module defines the closed set of token kinds produced by the scanner:
- Single-character punctuation
- One or two character operators
- Literals (strings and numbers)
- The terminal END marker

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional, Union


class TokenKind(Enum):
    """
    Enumeration of all token kinds in Lox.

    Fixed at import time; the scanner never creates new kinds.
    """

    # ========================================================================
    # Single-character tokens
    # ========================================================================
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }
    COMMA = auto()                  # ,
    DOT = auto()                    # .
    MINUS = auto()                  # -
    PLUS = auto()                   # +
    SEMICOLON = auto()              # ;
    STAR = auto()                   # *
    SLASH = auto()                  # /

    # ========================================================================
    # One or two character tokens
    # ========================================================================
    BANG = auto()                   # !
    BANG_EQUAL = auto()             # !=
    EQUAL = auto()                  # =
    EQUAL_EQUAL = auto()            # ==
    LESS = auto()                   # <
    LESS_EQUAL = auto()             # <=
    GREATER = auto()                # >
    GREATER_EQUAL = auto()          # >=

    # ========================================================================
    # Literals
    # ========================================================================
    STRING = auto()                 # "hello"
    NUMBER = auto()                 # 42, 3.14

    # ========================================================================
    # Special Tokens
    # ========================================================================
    END = auto()                    # End of input


Literal = Union[float, str]


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the Lox language.

    Contains the token kind, lexeme (raw text), decoded literal value
    and the line on which the lexeme starts.
    """
    kind: TokenKind
    lexeme: str                     # Raw text from source
    literal: Optional[Literal]      # float for NUMBER, str for STRING
    line: int                       # 1-based

    def __str__(self) -> str:
        if self.literal is not None:
            return f"{self.kind.name}({self.lexeme!r} -> {self.literal!r})"
        return f"{self.kind.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return (f"Token({self.kind.name}, {self.lexeme!r}, "
                f"{self.literal!r}, {self.line})")

    @property
    def is_literal(self) -> bool:
        """Check if this token carries a literal value."""
        return self.kind in LITERAL_KINDS


LITERAL_KINDS = frozenset({TokenKind.STRING, TokenKind.NUMBER})

# Lookup tables used by the scanner for single-character dispatch

# Characters that always form a token on their own
SINGLE_CHAR_TOKENS = {
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
    ",": TokenKind.COMMA,
    ".": TokenKind.DOT,
    "-": TokenKind.MINUS,
    "+": TokenKind.PLUS,
    ";": TokenKind.SEMICOLON,
    "*": TokenKind.STAR,
}

# Characters that become a longer operator when followed by '='
# Maps char -> (kind alone, kind with '=')
TWO_CHAR_TOKENS = {
    "!": (TokenKind.BANG, TokenKind.BANG_EQUAL),
    "=": (TokenKind.EQUAL, TokenKind.EQUAL_EQUAL),
    "<": (TokenKind.LESS, TokenKind.LESS_EQUAL),
    ">": (TokenKind.GREATER, TokenKind.GREATER_EQUAL),
}

# Discarded without producing a token or changing the line
WHITESPACE = frozenset({" ", "\r", "\t"})
