"""
minic Error Hierarchy
=====================

This module defines the exception hierarchy for the minic lexer.
All exceptions inherit from MinicError, allowing callers to catch every
error raised by the package with a single except clause.

Exception Hierarchy
-------------------
MinicError (base)
└── LexError - tokenization failed
    ├── UnrecognizedInputError - no pattern matches at the cursor
    └── IntLiteralOverflowError - integer literal outside 32-bit range

Error Message Format
--------------------
Every LexError carries its source location and renders as:

    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)

Example:
    main.c:1:5: error: unrecognized input '$'
        foo $ bar
            ^
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class MinicError(Exception):
    """
    Base exception for all minic errors.

        try:
            tokens = lex_str(source)
        except MinicError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Lexer Exceptions
# =============================================================================

class LexError(MinicError):
    """
    Base exception for tokenization failures.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The source text of the offending line (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    @property
    def line(self) -> Optional[int]:
        """Line of the error, or None when no location is known."""
        return self.location.line if self.location else None

    @property
    def column(self) -> Optional[int]:
        """Column of the error, or None when no location is known."""
        return self.location.column if self.location else None

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            main.c:3:12: error: integer literal '99999999999' out of range
                    return 99999999999;
                           ^
            hint: integer literals must fit in a signed 32-bit integer
        """
        parts = []

        # Location prefix
        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        # Source context with caret pointer
        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class UnrecognizedInputError(LexError):
    """
    No pattern matches the remaining input.

    Raised when the lexer is blocked with input left over. The location
    points at the first character that could not be tokenized; lexing
    stops there and no partial token list is returned.

    Example:
        foo $ bar    # '$' is not part of the language
    """

    def __init__(
        self,
        char: str,
        location: SourceLocation,
        source_line: Optional[str] = None,
    ):
        self.char = char
        if char.isprintable():
            message = f"unrecognized input '{char}'"
        else:
            message = f"unrecognized input (U+{ord(char):04X})"
        super().__init__(message, location=location, source_line=source_line)


class IntLiteralOverflowError(LexError):
    """
    Integer literal does not fit in a signed 32-bit integer.

    Literals are unsigned digit runs, so only the upper bound
    (2147483647) can be exceeded.
    """

    def __init__(
        self,
        text: str,
        location: SourceLocation,
        source_line: Optional[str] = None,
    ):
        self.text = text
        super().__init__(
            f"integer literal '{text}' out of range",
            location=location,
            hint="integer literals must fit in a signed 32-bit integer",
            source_line=source_line,
        )
