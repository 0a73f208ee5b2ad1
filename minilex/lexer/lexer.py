"""
minilex Lexer - turns source text into tokens

Single pass, no backtracking. Each next_token() call skips whitespace and
comments, then dispatches on the first remaining character and consumes
exactly one token. Errors don't raise, they move the lexer into an ERROR
status and it stops producing tokens.

xwest
"""

from typing import Iterator, List, Optional, Tuple

from ..config import DEFAULT_CONFIG, LexerConfig
from ..utils.logger import get_logger
from .tokens import (
    Token, TokenType, SourceLocation, GROUPING, PUNCTUATION, OPERATORS,
    MAX_OPERATOR_LENGTH, OPERATOR_START_CHARS, DIGITS, ESCAPE_SEQUENCES
)
from .errors import (
    LexerError, create_invalid_character_error, create_unterminated_string_error,
    create_invalid_number_error, create_invalid_escape_error,
    create_unterminated_comment_error
)
from .status import LexerStatus

logger = get_logger(__name__)


class Lexer:
    """
    minilex lexical analyzer.

    Pull-based: call ``next_token()`` repeatedly, or iterate. The sequence is
    finite and forward-only; construct a new Lexer to rescan. After the
    tokens run out, ``status()`` tells a clean end of input apart from an
    error.
    """

    def __init__(self, source: str, filename: str = "<string>",
                 config: Optional[LexerConfig] = None):
        """
        Initialize the lexer with source text.

        Args:
            source: Source text to scan
            filename: Name used in error locations
            config: Scanner configuration (defaults to DEFAULT_CONFIG)
        """
        self.source = source
        self.filename = filename
        self.config = config if config is not None else DEFAULT_CONFIG
        self.pos = 0
        self.line = 0
        self.column = 0
        self._status = LexerStatus.running()

        logger.debug("Created lexer for %s (%d chars)", filename, len(source))

    def status(self) -> LexerStatus:
        """
        Return the status after the most recent ``next_token()`` call.

        Call this after the lexer stops producing tokens to find out whether
        it scanned the full text or hit an error along the way.
        """
        return self._status

    @property
    def position(self) -> Tuple[int, int, int]:
        """Cursor as (offset, line, column)."""
        return (self.pos, self.line, self.column)

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    def tokenize(self) -> List[Token]:
        """
        Drain the remaining tokens into a list.

        Returns:
            Tokens produced up to end of input or the first error
        """
        return list(self)

    def next_token(self) -> Optional[Token]:
        """
        Produce the next token, or None once the scan has stopped.

        None means either end of input or a lexical error; check ``status()``.
        """
        if not self._status.is_running:
            return None

        if not self._skip_whitespace_and_comments():
            return None

        if self.pos >= len(self.source):
            self._finish()
            return None

        start_pos = self.pos
        start_line = self.line
        start_column = self.column

        current_char = self.source[self.pos]

        # Identifiers and keywords
        if self._is_identifier_start(current_char):
            return self._tokenize_identifier_or_keyword(start_line, start_column, start_pos)

        # Numbers
        if current_char in DIGITS:
            return self._tokenize_number(start_line, start_column, start_pos)

        # String literals
        if current_char == '"':
            return self._tokenize_string(start_line, start_column, start_pos)

        # Grouping and punctuation are always one character
        single = GROUPING.get(current_char) or PUNCTUATION.get(current_char)
        if single is not None:
            self._advance()
            return Token(single, current_char, start_line, start_column, start_pos)

        if current_char in OPERATOR_START_CHARS:
            return self._tokenize_operator(start_line, start_column, start_pos)

        return self._fail(create_invalid_character_error(
            current_char,
            SourceLocation(self.filename, start_line, start_column, start_pos)
        ))

    def _tokenize_identifier_or_keyword(self, line: int, column: int, offset: int) -> Token:
        """Tokenize an identifier or keyword."""
        # First character is already validated as identifier start
        self._advance()

        while self.pos < len(self.source) and self._is_identifier_continue(self.source[self.pos]):
            self._advance()

        lexeme = self.source[offset:self.pos]
        if lexeme in self.config.keywords:
            token_type = TokenType.KEYWORD
        else:
            token_type = TokenType.IDENTIFIER

        return Token(token_type, lexeme, line, column, offset)

    def _tokenize_number(self, line: int, column: int, offset: int) -> Optional[Token]:
        """Tokenize an integer or decimal literal (digits, optionally '.' digits)."""
        self._advance_digits()

        if self._current() == '.':
            if self._peek() not in DIGITS:
                return self._fail(create_invalid_number_error(
                    self.source[offset:self.pos + 1],
                    self._location(),
                    "A decimal point must be followed by at least one digit."
                ))
            self._advance()  # Skip decimal point
            self._advance_digits()

            if self._current() == '.':
                return self._fail(create_invalid_number_error(
                    self.source[offset:self.pos + 1],
                    self._location(),
                    "A numeric literal may contain only one decimal point."
                ))

        lexeme = self.source[offset:self.pos]
        return Token(TokenType.NUMERIC_LITERAL, lexeme, line, column, offset)

    def _tokenize_string(self, line: int, column: int, offset: int) -> Optional[Token]:
        """
        Tokenize a string literal.

        The token keeps the raw span, quotes and escapes included. A
        backslash always consumes exactly one following character.
        """
        self._advance()  # Skip opening quote

        while self.pos < len(self.source):
            current_char = self.source[self.pos]

            if current_char == '"':
                self._advance()  # Skip closing quote
                lexeme = self.source[offset:self.pos]
                return Token(TokenType.STRING_LITERAL, lexeme, line, column, offset)

            if current_char == '\\':
                if self.pos + 1 >= len(self.source):
                    break
                escape_char = self.source[self.pos + 1]
                if escape_char not in ESCAPE_SEQUENCES:
                    return self._fail(create_invalid_escape_error(escape_char, self._location()))
                self._advance_by(2)
                continue

            self._advance()

        return self._fail(create_unterminated_string_error(
            SourceLocation(self.filename, line, column, offset)
        ))

    def _tokenize_operator(self, line: int, column: int, offset: int) -> Optional[Token]:
        """Tokenize an operator using longest match."""
        for op_len in range(MAX_OPERATOR_LENGTH, 0, -1):
            potential_op = self.source[self.pos:self.pos + op_len]
            if len(potential_op) == op_len and potential_op in OPERATORS:
                self._advance_by(op_len)
                return Token(OPERATORS[potential_op], potential_op, line, column, offset)

        # A character like '&' only starts multi-character operators
        return self._fail(create_invalid_character_error(
            self.source[self.pos],
            SourceLocation(self.filename, line, column, offset)
        ))

    def _is_identifier_start(self, char: str) -> bool:
        """Check if character can start an identifier."""
        return char.isalpha() or char == '_'

    def _is_identifier_continue(self, char: str) -> bool:
        """Check if character can continue an identifier."""
        return char.isalnum() or char == '_'

    def _skip_whitespace_and_comments(self) -> bool:
        """
        Skip whitespace and comments.

        Returns False if an unterminated block comment stopped the scan.
        """
        while self.pos < len(self.source):
            # Skip whitespace
            if self.source[self.pos].isspace():
                self._advance()
                continue

            if not self.config.comments:
                break

            # Skip line comments //
            if self.source.startswith('//', self.pos):
                while self.pos < len(self.source) and self.source[self.pos] != '\n':
                    self._advance()
                continue

            # Skip block comments /* */
            if self.source.startswith('/*', self.pos):
                start = self._location()
                self._advance_by(2)
                while (self.pos < len(self.source) and
                       not self.source.startswith('*/', self.pos)):
                    self._advance()
                if self.pos >= len(self.source):
                    self._fail(create_unterminated_comment_error(start))
                    return False
                self._advance_by(2)  # Skip closing */
                continue

            break

        return True

    def _finish(self) -> None:
        self._status = LexerStatus.end_of_stream()
        logger.debug("End of stream in %s at line %d", self.filename, self.line)

    def _fail(self, error: LexerError) -> None:
        """Stop the scan with ``error``. Returns None so callers can return it."""
        self._status = LexerStatus.failed(error)
        logger.debug("Lexer error in %s: %s", self.filename, error.description)
        return None

    def _location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line, self.column, self.pos)

    def _advance(self):
        """Advance position by one character, updating line/column."""
        if self.pos < len(self.source):
            if self.source[self.pos] == '\n':
                self.line += 1
                self.column = 0
            else:
                self.column += 1
            self.pos += 1

    def _advance_by(self, count: int):
        """Advance position by multiple characters."""
        for _ in range(count):
            self._advance()

    def _advance_digits(self):
        while self.pos < len(self.source) and self.source[self.pos] in DIGITS:
            self._advance()

    def _current(self) -> str:
        """Character under the cursor, or '' at end of input."""
        if self.pos < len(self.source):
            return self.source[self.pos]
        return ''

    def _peek(self, offset: int = 1) -> str:
        """Peek at character ahead without advancing ('' past the end)."""
        peek_pos = self.pos + offset
        if peek_pos < len(self.source):
            return self.source[peek_pos]
        return ''


def tokenize_string(source: str, filename: str = "<string>",
                    config: Optional[LexerConfig] = None) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source text
        filename: Filename for error reporting
        config: Scanner configuration

    Returns:
        List of tokens

    Raises:
        LexerError: If scanning stopped on a lexical error
    """
    lexer = Lexer(source, filename, config)
    tokens = lexer.tokenize()

    status = lexer.status()
    if status.is_error:
        raise status.error

    return tokens
