"""
Token definitions for the minilex scanner.

This module defines the token kinds the scanner produces and the static
lookup tables it dispatches on:
- Keywords (a fixed set of reserved words)
- Operators (longest match, multi-character first)
- Grouping symbols and punctuation
- String escape sequences

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Dict, FrozenSet, Tuple


class TokenType(Enum):
    """
    Enumeration of all token kinds produced by the scanner.

    Openers and closers of every bracket style share LPAREN / RPAREN.
    """

    # ========================================================================
    # Words
    # ========================================================================
    KEYWORD = auto()                # if, else, for, while
    IDENTIFIER = auto()             # foo_var, _tmp, x1

    # ========================================================================
    # Literals
    # ========================================================================
    STRING_LITERAL = auto()         # "hello", "with \"escapes\""
    NUMERIC_LITERAL = auto()        # 0, 42, 12.5

    # ========================================================================
    # Symbols
    # ========================================================================
    OPERATOR = auto()               # = == + - * / < <= ...
    LPAREN = auto()                 # ( [ {
    RPAREN = auto()                 # ) ] }
    SEMICOLON = auto()              # ;

    # ========================================================================
    # Error
    # ========================================================================
    UNKNOWN = auto()                # Unscannable input (reported via status, never emitted)


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source text.

    Lines and columns are 0-based; columns count characters, not bytes.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of text

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    A classified, positioned span of the source text.

    ``text`` is the exact raw span consumed, so string literals keep their
    quotes and escape sequences. Tokens are never mutated once produced.
    """
    type_: TokenType
    text: str                       # Raw text from source
    line: int                       # 0-based line of the first character
    col: int                        # 0-based column of the first character
    offset: int = 0                 # Character offset of the first character

    def __str__(self) -> str:
        return f"{self.type_.name}({self.text!r})"

    def __repr__(self) -> str:
        return (f"Token({self.type_.name}, {self.text!r}, "
                f"{self.line}, {self.col})")

    @property
    def pos(self) -> Tuple[int, int]:
        """Line and column of the start of the token text."""
        return (self.line, self.col)

    @property
    def end_offset(self) -> int:
        return self.offset + len(self.text)

    def location(self, filename: str = "<string>") -> SourceLocation:
        """Build a SourceLocation for the start of this token."""
        return SourceLocation(filename, self.line, self.col, self.offset)

    @property
    def is_keyword(self) -> bool:
        return self.type_ == TokenType.KEYWORD

    @property
    def is_literal(self) -> bool:
        """Check if this token is a string or numeric literal."""
        return self.type_ in {TokenType.STRING_LITERAL, TokenType.NUMERIC_LITERAL}

    @property
    def is_grouping(self) -> bool:
        return self.type_ in {TokenType.LPAREN, TokenType.RPAREN}


# Lookup tables for token recognition
# The lexer dispatches on these instead of per-call conditional chains

KEYWORDS: Dict[str, TokenType] = {
    "if": TokenType.KEYWORD,
    "else": TokenType.KEYWORD,
    "for": TokenType.KEYWORD,
    "while": TokenType.KEYWORD,
}

GROUPING: Dict[str, TokenType] = {
    "(": TokenType.LPAREN,
    "[": TokenType.LPAREN,
    "{": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "]": TokenType.RPAREN,
    "}": TokenType.RPAREN,
}

PUNCTUATION: Dict[str, TokenType] = {
    ";": TokenType.SEMICOLON,
}

OPERATORS: Dict[str, TokenType] = {
    # Comparison
    "==": TokenType.OPERATOR,
    "!=": TokenType.OPERATOR,
    "<=": TokenType.OPERATOR,
    ">=": TokenType.OPERATOR,
    "<": TokenType.OPERATOR,
    ">": TokenType.OPERATOR,

    # Logical
    "&&": TokenType.OPERATOR,
    "||": TokenType.OPERATOR,
    "!": TokenType.OPERATOR,

    # Assignment
    "=": TokenType.OPERATOR,
    "+=": TokenType.OPERATOR,
    "-=": TokenType.OPERATOR,
    "*=": TokenType.OPERATOR,
    "/=": TokenType.OPERATOR,

    # Arithmetic
    "+": TokenType.OPERATOR,
    "-": TokenType.OPERATOR,
    "*": TokenType.OPERATOR,
    "/": TokenType.OPERATOR,
    "%": TokenType.OPERATOR,
}

MAX_OPERATOR_LENGTH = max(len(op) for op in OPERATORS)

OPERATOR_START_CHARS: FrozenSet[str] = frozenset(op[0] for op in OPERATORS)

# ASCII only: other Unicode digits classify as identifier characters
DIGITS: FrozenSet[str] = frozenset("0123456789")

# Escape character (after the backslash) to decoded value
ESCAPE_SEQUENCES: Dict[str, str] = {
    '"': '"',
    '\\': '\\',
}


def unescape(text: str) -> str:
    """
    Decode the raw text of a STRING_LITERAL token.

    The scanner leaves escapes untouched; consumers that need the string
    value call this on ``token.text``.

    Raises:
        ValueError: If the text is not a well-formed quoted literal
    """
    if len(text) < 2 or text[0] != '"' or text[-1] != '"':
        raise ValueError(f"Not a quoted string literal: {text!r}")

    body = text[1:-1]
    value_parts = []
    i = 0
    while i < len(body):
        ch = body[i]
        if ch == '\\':
            if i + 1 >= len(body) or body[i + 1] not in ESCAPE_SEQUENCES:
                raise ValueError(f"Invalid escape sequence in {text!r}")
            value_parts.append(ESCAPE_SEQUENCES[body[i + 1]])
            i += 2
        else:
            value_parts.append(ch)
            i += 1

    return ''.join(value_parts)
