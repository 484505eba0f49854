# =============================================================================
# test_patterns.py - Pattern Registry Tests
# =============================================================================
# Tests for the individual recognizers and the priority-ordered registry
# (minic.patterns), below the level of the lexing driver.
# =============================================================================

import re

import pytest
from minic.patterns import (
    IDENTIFIER,
    INT_LITERAL,
    PATTERNS,
    SYMBOL,
    WHITESPACE,
    Recognizer,
    classify_identifier,
    classify_symbol,
    next_match,
    parse_int_literal,
    try_match,
)
from minic.tokens import KEYWORDS, TokenKind


# =============================================================================
# Single Recognizer Tests
# =============================================================================

class TestTryMatch:
    """Test applying one recognizer at a position."""

    def test_identifier_consumes_word(self):
        """An identifier match consumes the whole word."""
        match = try_match(IDENTIFIER, "test")
        assert match.text == "test"
        assert match.end == 4
        assert match.kind == TokenKind.IDENTIFIER
        assert match.value == "test"

    def test_anchored_at_position(self):
        """Recognizers never skip ahead to find a match."""
        assert try_match(IDENTIFIER, "  test") is None
        assert try_match(IDENTIFIER, "  test", 2).text == "test"

    def test_no_match_returns_none(self):
        """A failed rule returns None rather than raising."""
        assert try_match(SYMBOL, "abc") is None
        assert try_match(INT_LITERAL, "x1") is None
        assert try_match(WHITESPACE, "x ") is None

    def test_match_at_end_of_input(self):
        """Nothing matches past the end of the source."""
        assert try_match(WHITESPACE, "ab", 2) is None

    def test_symbol_matches_single_character(self):
        """Symbols are exactly one character."""
        match = try_match(SYMBOL, "((")
        assert match.text == "("
        assert match.end == 1

    def test_int_literal_value(self):
        """Integer transformer parses the digit run."""
        match = try_match(INT_LITERAL, "0420;")
        assert match.text == "0420"
        assert match.value == 420

    def test_whitespace_run(self):
        """Whitespace consumes the full run, newlines included."""
        match = try_match(WHITESPACE, " \t\n x")
        assert match.text == " \t\n "
        assert match.kind == TokenKind.WHITESPACE

    def test_unicode_whitespace(self):
        """Vertical tab, form feed, NBSP and line separator are whitespace."""
        for char in ["\v", "\f", "\u00a0", "\u2028"]:
            match = try_match(WHITESPACE, char + "x")
            assert match.text == char
            assert match.kind == TokenKind.WHITESPACE

    def test_information_separators_not_whitespace(self):
        """U+001C-U+001F are not whitespace."""
        for char in ["\x1c", "\x1d", "\x1e", "\x1f"]:
            assert try_match(WHITESPACE, char) is None
            assert next_match(char) is None

    def test_int_overflow_raises(self):
        """Out-of-range literals raise OverflowError."""
        with pytest.raises(OverflowError):
            try_match(INT_LITERAL, "99999999999")


# =============================================================================
# Registry Tests
# =============================================================================

class TestNextMatch:
    """Test the priority-ordered registry."""

    def test_whitespace_then_identifier(self):
        """Successive matches walk the source."""
        first = next_match("  test")
        assert first.text == "  "
        assert first.kind == TokenKind.WHITESPACE
        assert first.end == 2

        second = next_match("  test", first.end)
        assert second.text == "test"
        assert second.kind == TokenKind.IDENTIFIER
        assert second.end == 6

    def test_unrecognized_returns_none(self):
        """No rule matching yields None."""
        assert next_match("$") is None
        assert next_match("ok $", 3) is None

    def test_registry_order(self):
        """Rules are tried whitespace, identifier, symbol, literal."""
        assert [r.name for r in PATTERNS] == [
            "whitespace",
            "identifier",
            "symbol",
            "int_literal",
        ]

    def test_priority_beats_longest_match(self):
        """The first matching rule wins even when a later one is longer."""
        short = Recognizer("short", re.compile(r"ab"), lambda s: (TokenKind.IDENTIFIER, s))
        match = next_match("abcd", patterns=(short, IDENTIFIER))
        assert match.text == "ab"

    def test_every_symbol(self):
        """Every symbol character is recognized by the registry."""
        for char, kind in [
            ("{", TokenKind.OPEN_BRACE),
            ("}", TokenKind.CLOSE_BRACE),
            ("(", TokenKind.OPEN_PAREN),
            (")", TokenKind.CLOSE_PAREN),
            (";", TokenKind.SEMICOLON),
        ]:
            match = next_match(char)
            assert match.kind == kind
            assert match.value is None


# =============================================================================
# Transformer Tests
# =============================================================================

class TestTransformers:
    """Test the text-to-kind transformers."""

    def test_keyword_table(self):
        """Only 'return' and 'int' are reserved."""
        assert KEYWORDS == frozenset({"return", "int"})

    def test_classify_identifier(self):
        """Keyword membership decides the kind."""
        assert classify_identifier("return") == (TokenKind.KEYWORD, "return")
        assert classify_identifier("int") == (TokenKind.KEYWORD, "int")
        assert classify_identifier("main") == (TokenKind.IDENTIFIER, "main")

    def test_classify_symbol(self):
        assert classify_symbol(";") == (TokenKind.SEMICOLON, None)

    def test_parse_int_literal_bounds(self):
        """Values up to 2**31 - 1 are accepted."""
        assert parse_int_literal("0") == 0
        assert parse_int_literal("2147483647") == 2147483647
        with pytest.raises(OverflowError):
            parse_int_literal("2147483648")
