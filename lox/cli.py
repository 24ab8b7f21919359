"""
Command line entry point for the Lox scanner.

Scans a source file (or stdin) and prints the token stream, one token per
line, or as JSON. Lexical errors go to stderr.

Author: xwest
"""

import sys
import json
import argparse
import logging
from typing import List, Optional

from . import __version__
from .lexer import ConsoleDiagnostics, Scanner, Token

logger = logging.getLogger(__name__)

# sysexits.h codes, as used by jlox
EX_OK = 0
EX_DATAERR = 65
EX_NOINPUT = 66


def format_token(token: Token) -> str:
    """Render a token as `LINE KIND LEXEME [LITERAL]`."""
    text = f"{token.line:4d} {token.kind.name:<14} {token.lexeme!r}"
    if token.literal is not None:
        text += f" {token.literal!r}"
    return text


def tokens_to_json(tokens: List[Token]) -> str:
    return json.dumps([
        {
            "kind": token.kind.name,
            "lexeme": token.lexeme,
            "literal": token.literal,
            "line": token.line,
        }
        for token in tokens
    ], indent=2)


def read_source(path: Optional[str], encoding: str) -> str:
    if path is None or path == "-":
        return sys.stdin.read()
    with open(path, 'r', encoding=encoding) as f:
        return f.read()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lox-scan",
        description="Tokenize a Lox source file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    lox-scan script.lox               # Print tokens
    lox-scan --json script.lox        # Print tokens as JSON
    echo '1 + 2' | lox-scan           # Read from stdin
        """
    )
    parser.add_argument('file', nargs='?', default=None,
                        help='Source file to scan (default: stdin)')
    parser.add_argument('--json', action='store_true',
                        help='Output tokens in JSON format')
    parser.add_argument('--encoding', default='utf-8',
                        help='Source file encoding (default: utf-8)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    parser.add_argument('--version', action='version',
                        version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for lox-scan"""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        source = read_source(args.file, args.encoding)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("cannot read %s: %s", args.file, e)
        return EX_NOINPUT

    diagnostics = ConsoleDiagnostics(sys.stderr)
    tokens = Scanner(source, diagnostics).scan_tokens()

    if args.json:
        print(tokens_to_json(tokens))
    else:
        for token in tokens:
            print(format_token(token))

    return EX_DATAERR if diagnostics.had_error else EX_OK


if __name__ == "__main__":
    sys.exit(main())
