"""
minic - Lexer for a Small C-like Language
=========================================

This package converts minic source text into a list of classified,
positioned tokens. It is the first of three front-end stages (lexing,
parsing, evaluation); only lexing lives here.

Main Components
---------------
- **tokens**: TokenKind, Token and the keyword table
- **patterns**: the ordered recognizer registry
- **position**: line/column cursor arithmetic
- **lexer**: the lexing driver (lex_str, scan, Lexer)
- **cli**: the ``mclex`` token dump tool

Quick Start
-----------
    >>> from minic import lex_str
    >>> lex_str("return 0;")
    [Token(KEYWORD, 'return', 1:1), Token(INT_LITERAL, 0, 1:8), Token(SEMICOLON, 1:9)]

Errors are raised, never returned:
    >>> from minic import lex_str, UnrecognizedInputError
    >>> try:
    ...     lex_str("foo $ bar")
    ... except UnrecognizedInputError as e:
    ...     print(e.line, e.column)
    1 5

Or use the command-line tool:
    $ mclex main.c
"""

__version__ = "0.1.0"

# =============================================================================
# Public API Exports
# =============================================================================

from minic.errors import (
    MinicError,
    SourceLocation,
    LexError,
    UnrecognizedInputError,
    IntLiteralOverflowError,
)
from minic.tokens import Token, TokenKind, KEYWORDS
from minic.lexer import Lexer, LexerOptions, lex_str, scan

__all__ = [
    "__version__",
    # Errors
    "MinicError",
    "SourceLocation",
    "LexError",
    "UnrecognizedInputError",
    "IntLiteralOverflowError",
    # Tokens
    "Token",
    "TokenKind",
    "KEYWORDS",
    # Lexer
    "Lexer",
    "LexerOptions",
    "lex_str",
    "scan",
]
