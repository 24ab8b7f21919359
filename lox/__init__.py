"""
Lox Package

Front end of the Lox scripting language. Only lexical analysis lives here;
the parser and interpreter consume the token list produced by `lox.lexer`.

Architecture:
    lox/
    ├── lexer/           # Tokenization and lexical analysis
    └── cli.py           # lox-scan command line entry point

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__email__ = "xwest@users.noreply.github.com"
__license__ = "MIT"

from .lexer import Scanner, Token, TokenKind, scan

__all__ = [
    # Core classes
    "Scanner",
    "Token",
    "TokenKind",
    "scan",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
