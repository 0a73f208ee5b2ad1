"""
minilex Lexer Package

Implements a hand-written, single-pass lexical scanner.

Key Features:
- Keywords, identifiers, operators, grouping symbols and semicolons
- Integer and decimal numeric literals
- Double-quoted string literals with \" and \\ escapes, kept raw
- Longest-match operator recognition from static tables
- 0-based line/column tracking for every token
- Errors reported through the lexer status rather than raised

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation, unescape
from .errors import LexerError, Diagnostic
from .status import LexerStatus, StatusKind
from .lexer import Lexer, tokenize_string

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "SourceLocation",
    "LexerError",
    "Diagnostic",
    "LexerStatus",
    "StatusKind",
    "tokenize_string",
    "unescape",
]
