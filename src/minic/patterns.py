"""
Pattern Registry
================

The ordered list of recognizers the lexer tries at each position.

Each recognizer pairs a compiled regular expression with a transformer
that turns the matched text into a (TokenKind, value) pair. Patterns are
matched with ``Pattern.match(source, pos)``, which anchors them at the
cursor without slicing the source.

Priority
--------
Recognizers are tried in this fixed order and the first match wins:

1. whitespace
2. identifier or keyword
3. symbol
4. integer literal

This is priority selection, not longest match across rules. The rules
are currently disjoint on their first character, so the order never
changes the result; a new rule that overlaps an existing one must be
placed deliberately.
"""

import re
from dataclasses import dataclass
from typing import Callable, Optional

from minic.tokens import INT_MAX, INT_MIN, KEYWORDS, SYMBOLS, TokenKind


Transformer = Callable[[str], tuple[TokenKind, "str | int | None"]]


# =============================================================================
# Match Records
# =============================================================================

@dataclass(frozen=True)
class Recognizer:
    """
    One lexical rule.

    Attributes:
        name: Short rule name for logging and diagnostics
        pattern: Compiled regex; must only match non-empty text
        transformer: Builds (kind, value) from the matched text
    """
    name: str
    pattern: re.Pattern
    transformer: Transformer


@dataclass(frozen=True)
class Match:
    """
    Successful application of a recognizer.

    Attributes:
        text: The matched span
        kind: Token kind built by the transformer
        value: Token payload built by the transformer
        end: Offset where the new remainder starts
    """
    text: str
    kind: TokenKind
    value: str | int | None
    end: int


# =============================================================================
# Transformers
# =============================================================================

def classify_whitespace(text: str) -> tuple[TokenKind, str]:
    return TokenKind.WHITESPACE, text


def classify_identifier(text: str) -> tuple[TokenKind, str]:
    """Split identifier-shaped words into keywords and identifiers."""
    if text in KEYWORDS:
        return TokenKind.KEYWORD, text
    return TokenKind.IDENTIFIER, text


def classify_symbol(text: str) -> tuple[TokenKind, None]:
    return SYMBOLS[text], None


def parse_int_literal(text: str) -> int:
    """
    Parse a decimal digit run as a signed 32-bit integer.

    Raises:
        OverflowError: If the value does not fit in 32 bits
    """
    value = int(text, 10)
    if not INT_MIN <= value <= INT_MAX:
        raise OverflowError(f"integer literal '{text}' out of range")
    return value


def classify_int_literal(text: str) -> tuple[TokenKind, int]:
    return TokenKind.INT_LITERAL, parse_int_literal(text)


# =============================================================================
# Registry
# =============================================================================

# Unicode White_Space; excludes the U+001C-U+001F information separators
WHITESPACE = Recognizer("whitespace", re.compile(r"[^\S\x1c-\x1f]+"), classify_whitespace)
IDENTIFIER = Recognizer(
    "identifier", re.compile(r"[A-Za-z][A-Za-z0-9_]*"), classify_identifier
)
SYMBOL = Recognizer("symbol", re.compile(r"[{}();]"), classify_symbol)
INT_LITERAL = Recognizer("int_literal", re.compile(r"[0-9]+"), classify_int_literal)

# Priority order; first match wins
PATTERNS: tuple[Recognizer, ...] = (WHITESPACE, IDENTIFIER, SYMBOL, INT_LITERAL)


def try_match(recognizer: Recognizer, source: str, pos: int = 0) -> Optional[Match]:
    """
    Apply a single recognizer at ``pos``.

    Returns:
        A Match, or None if the rule does not match at ``pos``

    Raises:
        OverflowError: If an integer literal is out of range
    """
    found = recognizer.pattern.match(source, pos)
    if found is None:
        return None

    text = found.group()
    kind, value = recognizer.transformer(text)
    return Match(text=text, kind=kind, value=value, end=found.end())


def next_match(
    source: str,
    pos: int = 0,
    patterns: tuple[Recognizer, ...] = PATTERNS,
) -> Optional[Match]:
    """
    Try every recognizer in priority order at ``pos``.

    Returns:
        The first Match, or None if the remainder is unrecognized
    """
    for recognizer in patterns:
        match = try_match(recognizer, source, pos)
        if match is not None:
            return match
    return None
