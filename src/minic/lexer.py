"""
minic Lexer
===========

This module turns source text into a list of positioned tokens. It is
the first stage of the minic front end; a parser consumes its output.

The driver repeatedly applies the pattern registry (see
``minic.patterns``) at the cursor. Whitespace matches move the cursor
but are not emitted. Lexing stops at the first character no pattern
recognizes, and the whole call fails: there is no recovery and no
partial result.

Example Usage
-------------
>>> from minic.lexer import lex_str
>>> for token in lex_str("int main() { return 42; }"):
...     print(token)
Token(KEYWORD, 'int', 1:1)
Token(IDENTIFIER, 'main', 1:5)
Token(OPEN_PAREN, 1:9)
Token(CLOSE_PAREN, 1:10)
Token(OPEN_BRACE, 1:12)
Token(KEYWORD, 'return', 1:14)
Token(INT_LITERAL, 42, 1:21)
Token(SEMICOLON, 1:23)
Token(CLOSE_BRACE, 1:25)
"""

import logging
from dataclasses import dataclass
from typing import Iterator

from minic.errors import (
    IntLiteralOverflowError,
    SourceLocation,
    UnrecognizedInputError,
)
from minic.patterns import INT_LITERAL, next_match
from minic.position import advance_position
from minic.tokens import Token, TokenKind

logger = logging.getLogger(__name__)


# =============================================================================
# Options
# =============================================================================

@dataclass
class LexerOptions:
    """
    Lexer configuration options.

    Attributes:
        filename: Name reported in token locations and error messages
        line_number: Line number of the first line of the source. Useful
            when the text is a fragment of a larger file.
    """
    filename: str = "<input>"
    line_number: int = 1

    def __post_init__(self):
        if self.line_number < 1:
            raise ValueError(f"line_number must be >= 1, got {self.line_number}")


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Tokenizes minic source code.

    A Lexer holds only its options, so one instance can lex any number
    of sources, from any number of threads.

    Usage:
        lexer = Lexer(LexerOptions(filename="main.c"))
        tokens = lexer.tokenize(source)
    """

    def __init__(self, options: LexerOptions | None = None):
        self.options = options or LexerOptions()

    def tokenize(self, source: str) -> list[Token]:
        """
        Lex the whole source, dropping whitespace.

        Returns:
            Tokens in source order

        Raises:
            UnrecognizedInputError: If some input matches no pattern
            IntLiteralOverflowError: If an integer literal exceeds 32 bits
        """
        tokens = [t for t in self.scan(source) if t.kind is not TokenKind.WHITESPACE]
        logger.debug(f"Lexed {len(tokens)} tokens from {self.options.filename}")
        return tokens

    def scan(self, source: str) -> Iterator[Token]:
        """
        Generate every token, whitespace included.

        The concatenated ``text`` of all yielded tokens equals the
        consumed prefix of ``source``; when the generator finishes
        without raising, it equals ``source``.

        Raises:
            UnrecognizedInputError: When the cursor reaches input no
                pattern matches (after yielding everything before it)
            IntLiteralOverflowError: If an integer literal exceeds 32 bits
        """
        filename = self.options.filename
        pos = 0
        line = self.options.line_number
        column = 1
        line_start = 0

        while pos < len(source):
            try:
                match = next_match(source, pos)
            except OverflowError as e:
                text = INT_LITERAL.pattern.match(source, pos).group()
                logger.debug(f"Integer literal overflow at {filename}:{line}:{column}")
                raise IntLiteralOverflowError(
                    text,
                    SourceLocation(filename, line, column),
                    _line_text(source, line_start),
                ) from e

            if match is None:
                break

            yield Token(
                kind=match.kind,
                value=match.value,
                line=line,
                column=column,
                text=match.text,
                offset=pos,
                filename=filename,
            )

            last_newline = match.text.rfind("\n")
            if last_newline != -1:
                line_start = pos + last_newline + 1
            line, column = advance_position(line, column, match.text)
            pos = match.end

        if pos < len(source):
            logger.debug(f"Unrecognized input at {filename}:{line}:{column}")
            raise UnrecognizedInputError(
                source[pos],
                SourceLocation(filename, line, column),
                _line_text(source, line_start),
            )


def _line_text(source: str, line_start: int) -> str:
    """Return the full source line beginning at ``line_start``."""
    line_end = source.find("\n", line_start)
    if line_end == -1:
        line_end = len(source)
    return source[line_start:line_end].rstrip("\r")


# =============================================================================
# Convenience Functions
# =============================================================================

def lex_str(source: str, filename: str = "<input>", line_number: int = 1) -> list[Token]:
    """
    Lex source text into tokens, whitespace elided.

    Args:
        source: The source text
        filename: Name used in locations and error messages
        line_number: Line number of the first line

    Returns:
        Tokens in source order

    Raises:
        UnrecognizedInputError: If some input matches no pattern
        IntLiteralOverflowError: If an integer literal exceeds 32 bits
    """
    return Lexer(LexerOptions(filename=filename, line_number=line_number)).tokenize(source)


def scan(source: str, filename: str = "<input>", line_number: int = 1) -> Iterator[Token]:
    """Generate every token of ``source``, whitespace included."""
    return Lexer(LexerOptions(filename=filename, line_number=line_number)).scan(source)
