"""
minic Token Model
=================

Token kinds, the keyword table and the immutable Token record produced
by the lexer.

Token Kinds
-----------
| Kind         | Source        | value          |
|--------------|---------------|----------------|
| WHITESPACE   | spaces, tabs, newlines | matched text (never emitted by lex_str) |
| OPEN_BRACE   | {             | None           |
| CLOSE_BRACE  | }             | None           |
| OPEN_PAREN   | (             | None           |
| CLOSE_PAREN  | )             | None           |
| SEMICOLON    | ;             | None           |
| KEYWORD      | return, int   | keyword text   |
| IDENTIFIER   | main, x1      | identifier text |
| INT_LITERAL  | 42            | int value      |
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from minic.errors import SourceLocation


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(Enum):
    """Closed set of token categories recognized by the lexer."""

    # === Layout ===
    WHITESPACE = auto()     # Consumed for position tracking only

    # === Symbols ===
    OPEN_BRACE = auto()     # {
    CLOSE_BRACE = auto()    # }
    OPEN_PAREN = auto()     # (
    CLOSE_PAREN = auto()    # )
    SEMICOLON = auto()      # ;

    # === Words and Literals ===
    KEYWORD = auto()        # reserved word
    IDENTIFIER = auto()     # any other identifier-shaped word
    INT_LITERAL = auto()    # decimal digit run


# =============================================================================
# Keyword Table
# =============================================================================

KEYWORDS: frozenset[str] = frozenset({
    "return",
    "int",
})

# One-to-one symbol mapping
SYMBOLS: dict[str, TokenKind] = {
    "{": TokenKind.OPEN_BRACE,
    "}": TokenKind.CLOSE_BRACE,
    "(": TokenKind.OPEN_PAREN,
    ")": TokenKind.CLOSE_PAREN,
    ";": TokenKind.SEMICOLON,
}

# Signed 32-bit range for INT_LITERAL values
INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single classified span of source text.

    Attributes:
        kind: The TokenKind classification
        value: Payload (text for words and whitespace, int for literals,
            None for symbols)
        line: Line of the first character (1-indexed)
        column: Column of the first character (1-indexed)
        text: The exact matched source text
        offset: Index of the first character in the source string
        filename: Name of the source (for error reporting)
    """
    kind: TokenKind
    value: str | int | None
    line: int
    column: int
    text: str
    offset: int
    filename: str = "<input>"

    def __repr__(self) -> str:
        if self.value is None:
            return f"Token({self.kind.name}, {self.line}:{self.column})"
        return f"Token({self.kind.name}, {self.value!r}, {self.line}:{self.column})"

    @property
    def location(self) -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(self.filename, self.line, self.column)

    @property
    def end_offset(self) -> int:
        """Index one past the last character of the span."""
        return self.offset + len(self.text)

    def is_keyword(self, word: str) -> bool:
        """Return True if this token is the given keyword."""
        return self.kind is TokenKind.KEYWORD and self.value == word

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "kind": self.kind.name,
            "value": self.value,
            "line": self.line,
            "column": self.column,
            "text": self.text,
            "offset": self.offset,
        }
