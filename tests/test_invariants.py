"""Property-based tests for lexer invariants using Hypothesis.

These tests check properties that must hold for any input: token spans
match the source, positions agree with offsets, and scanning always ends in
a terminal status.
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from minilex.config import LexerConfig
from minilex.lexer import Lexer, TokenType
from minilex.lexer.tokens import KEYWORDS

SOURCE_ALPHABET = 'abif_19.;"\\ \t\n=<>!&|+-*/(){}[]@'

NO_COMMENTS = LexerConfig(comments=False)


def expected_position(source: str, offset: int):
    line = source.count("\n", 0, offset)
    col = offset - (source.rfind("\n", 0, offset) + 1)
    return (line, col)


class TestSpanInvariants:
    """Token text and positions always describe the source exactly."""

    @given(st.text(alphabet=SOURCE_ALPHABET, max_size=200))
    @settings(max_examples=200)
    def test_text_matches_source_slice(self, source: str) -> None:
        for token in Lexer(source):
            assert source[token.offset:token.end_offset] == token.text

    @given(st.text(alphabet=SOURCE_ALPHABET, max_size=200))
    @settings(max_examples=200)
    def test_position_matches_offset(self, source: str) -> None:
        for token in Lexer(source):
            assert token.pos == expected_position(source, token.offset)

    @given(st.text(alphabet=SOURCE_ALPHABET, max_size=200))
    @settings(max_examples=200)
    def test_gaps_are_whitespace(self, source: str) -> None:
        """Without comments, only whitespace separates consecutive tokens."""
        cursor = 0
        for token in Lexer(source, config=NO_COMMENTS):
            assert token.offset >= cursor
            assert source[cursor:token.offset].strip() == ""
            assert token.text
            cursor = token.end_offset


class TestTerminalInvariants:
    """Scanning is finite and terminal states are final."""

    @given(st.text(max_size=300))
    @settings(max_examples=200)
    def test_ends_in_terminal_status(self, source: str) -> None:
        lexer = Lexer(source)
        tokens = lexer.tokenize()
        status = lexer.status()

        assert status.is_terminal
        assert lexer.next_token() is None
        assert lexer.status() == status
        assert len(tokens) <= len(source)

    @given(st.text(alphabet=" \t\r\n\f\v", max_size=50))
    def test_whitespace_only(self, source: str) -> None:
        lexer = Lexer(source)
        assert lexer.next_token() is None
        assert lexer.status().is_end_of_stream

    @given(st.text(alphabet=SOURCE_ALPHABET, max_size=200))
    @settings(max_examples=100)
    def test_end_of_stream_consumes_everything(self, source: str) -> None:
        lexer = Lexer(source, config=NO_COMMENTS)
        lexer.tokenize()
        if lexer.status().is_end_of_stream:
            assert lexer.position[0] == len(source)


class TestSingleTokens:
    """Single words and numbers scan to exactly one token."""

    @given(st.from_regex(r"[A-Za-z_][A-Za-z0-9_]*", fullmatch=True))
    def test_identifier_shaped_words(self, word: str) -> None:
        tokens = Lexer(word).tokenize()
        expected = TokenType.KEYWORD if word in KEYWORDS else TokenType.IDENTIFIER
        assert [(t.type_, t.text) for t in tokens] == [(expected, word)]

    @given(st.integers(min_value=0), st.integers(min_value=0))
    def test_numbers(self, whole: int, fraction: int) -> None:
        for text in (str(whole), f"{whole}.{fraction}"):
            tokens = Lexer(text).tokenize()
            assert [(t.type_, t.text) for t in tokens] == [(TokenType.NUMERIC_LITERAL, text)]

    @pytest.mark.parametrize("keyword", sorted(KEYWORDS))
    def test_keyword_with_surrounding_whitespace(self, keyword: str) -> None:
        tokens = Lexer(f"  {keyword}\n").tokenize()
        assert [(t.type_, t.text) for t in tokens] == [(TokenType.KEYWORD, keyword)]
        assert tokens[0].pos == (0, 2)
