"""
minilex

A small hand-written lexical scanner that converts source text into
classified, positioned tokens.

Architecture:
    minilex/
    ├── lexer/           # Tokens, status, diagnostics and the scanner
    ├── config.py        # Scanner configuration
    └── utils/           # Logging helpers

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__license__ = "MIT"

from .lexer import (
    Lexer, Token, TokenType, SourceLocation, LexerError, LexerStatus,
    StatusKind, tokenize_string, unescape,
)
from .config import LexerConfig, DEFAULT_CONFIG

__all__ = [
    # Core classes
    "Lexer",
    "Token",
    "TokenType",
    "SourceLocation",
    "LexerError",
    "LexerStatus",
    "StatusKind",
    "LexerConfig",
    "DEFAULT_CONFIG",

    # Helpers
    "tokenize_string",
    "unescape",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
