"""
Lox Lexer Package

Implements the lexical scanner for the Lox scripting language: source text
in, a flat list of tokens out, ready for a downstream parser.

Key Features:
- Maximal-munch one/two character operators
- Line comments, multi-line string literals
- Integer and fractional number literals
- Error recovery: every lexical error is reported, none aborts the scan
- Injectable diagnostics collaborator

Author: xwest
"""

from .tokens import Token, TokenKind
from .scanner import Scanner, scan, tokenize_string, tokenize_file
from .errors import (
    Diagnostic, Diagnostics, DiagnosticCollector, ConsoleDiagnostics, LexerError
)

__all__ = [
    "Scanner",
    "scan",
    "tokenize_string",
    "tokenize_file",
    "Token",
    "TokenKind",
    "Diagnostic",
    "Diagnostics",
    "DiagnosticCollector",
    "ConsoleDiagnostics",
    "LexerError",
]
