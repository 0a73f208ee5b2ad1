"""
Tests for the token model, lookup tables, status and diagnostics.

Author: xwest
"""

import dataclasses
import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from minilex.config import DEFAULT_CONFIG, LexerConfig
from minilex.lexer.tokens import (
    Token, TokenType, SourceLocation, KEYWORDS, OPERATORS, GROUPING,
    MAX_OPERATOR_LENGTH, unescape
)
from minilex.lexer.status import LexerStatus, StatusKind
from minilex.lexer.errors import (
    ERROR_CODES, create_invalid_character_error, create_invalid_escape_error,
    create_unterminated_string_error
)
from minilex.utils.logger import get_logger


class TestToken(unittest.TestCase):

    def test_token_is_immutable(self):
        token = Token(TokenType.IDENTIFIER, "x", 0, 0)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            token.text = "y"

    def test_token_str(self):
        token = Token(TokenType.KEYWORD, "if", 2, 4, 17)
        self.assertEqual(str(token), "KEYWORD('if')")
        self.assertEqual(token.pos, (2, 4))
        self.assertEqual(token.end_offset, 19)

    def test_literal_flags(self):
        self.assertTrue(Token(TokenType.NUMERIC_LITERAL, "1", 0, 0).is_literal)
        self.assertTrue(Token(TokenType.STRING_LITERAL, '""', 0, 0).is_literal)
        self.assertFalse(Token(TokenType.OPERATOR, "+", 0, 0).is_literal)
        self.assertTrue(Token(TokenType.KEYWORD, "for", 0, 0).is_keyword)

    def test_source_location_str(self):
        location = SourceLocation("main.src", 3, 7, 42)
        self.assertEqual(str(location), "main.src:3:7")


class TestTables(unittest.TestCase):

    def test_keyword_set(self):
        self.assertEqual(set(KEYWORDS), {"if", "else", "for", "while"})

    def test_max_operator_length(self):
        self.assertEqual(MAX_OPERATOR_LENGTH, 2)
        self.assertIn("==", OPERATORS)
        self.assertIn("=", OPERATORS)

    def test_grouping_table(self):
        self.assertEqual(GROUPING["["], TokenType.LPAREN)
        self.assertEqual(GROUPING["}"], TokenType.RPAREN)


class TestUnescape(unittest.TestCase):

    def test_decodes_documented_escapes(self):
        self.assertEqual(unescape('"a\\"b"'), 'a"b')
        self.assertEqual(unescape('"c:\\\\tmp"'), 'c:\\tmp')
        self.assertEqual(unescape('""'), '')

    def test_rejects_unknown_escape(self):
        with self.assertRaises(ValueError):
            unescape('"a\\tb"')

    def test_rejects_unquoted(self):
        with self.assertRaises(ValueError):
            unescape('abc')


class TestStatus(unittest.TestCase):

    def test_constructors(self):
        self.assertEqual(LexerStatus.running().kind, StatusKind.RUNNING)
        self.assertTrue(LexerStatus.end_of_stream().is_terminal)
        self.assertIsNone(LexerStatus.end_of_stream().description)

    def test_failed_status_carries_error(self):
        error = create_unterminated_string_error(SourceLocation("<string>", 4, 1, 30))
        status = LexerStatus.failed(error)
        self.assertTrue(status.is_error)
        self.assertIs(status.error, error)
        self.assertEqual(status.description,
                         "Unterminated string literal at line 4, column 1")
        self.assertEqual(str(status), f"Error({status.description})")


class TestDiagnostics(unittest.TestCase):

    def test_error_codes_are_known(self):
        location = SourceLocation("<string>", 0, 0, 0)
        for error in [
            create_invalid_character_error("@", location),
            create_invalid_escape_error("n", location),
            create_unterminated_string_error(location),
        ]:
            self.assertIn(error.code, ERROR_CODES)

    def test_non_printable_character_help(self):
        error = create_invalid_character_error("\x07", SourceLocation("<string>", 0, 0, 0))
        self.assertIn("U+0007", error.diagnostic.help_text)

    def test_diagnostic_rendering(self):
        error = create_invalid_character_error("$", SourceLocation("a.src", 1, 2, 9))
        rendered = str(error)
        self.assertTrue(rendered.startswith("ERROR[L001]: Unrecognized character '$'"))
        self.assertIn("--> a.src:1:2", rendered)


class TestConfig(unittest.TestCase):

    def test_default_config(self):
        self.assertTrue(DEFAULT_CONFIG.comments)
        self.assertEqual(DEFAULT_CONFIG.keywords, frozenset(KEYWORDS))

    def test_with_keywords_copies(self):
        config = DEFAULT_CONFIG.with_keywords("fn", "let")
        self.assertIn("fn", config.keywords)
        self.assertNotIn("fn", DEFAULT_CONFIG.keywords)
        self.assertIsInstance(config, LexerConfig)


class TestLogger(unittest.TestCase):

    def test_logger_namespace(self):
        self.assertEqual(get_logger("scanner").name, "minilex.scanner")
        self.assertEqual(get_logger("minilex.lexer").name, "minilex.lexer")


if __name__ == "__main__":
    unittest.main()
