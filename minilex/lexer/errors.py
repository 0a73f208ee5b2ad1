"""
Error reporting for the minilex scanner.

Lexical errors are never raised while scanning. The lexer stores the
LexerError in its status and stops; callers inspect it afterwards, or use
``tokenize_string`` which raises it.

Author: xwest
"""

from typing import Optional
from dataclasses import dataclass
from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """A single lexer diagnostic with its source location."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}"
        if self.code:
            result += f"[{self.code}]"
        result += f": {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        return result


class LexerError(Exception):
    """
    A fatal lexical error.

    Contains the diagnostic used for reporting. ``description`` is the
    one-line form stored in an ERROR status.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
        )

    @property
    def message(self) -> str:
        return self.diagnostic.message

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    @property
    def description(self) -> str:
        loc = self.diagnostic.location
        return f"{self.diagnostic.message} at line {loc.line}, column {loc.column}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LexerError):
            return NotImplemented
        return self.diagnostic == other.diagnostic

    def __hash__(self) -> int:
        return hash((self.message, self.location, self.code))

    def __str__(self) -> str:
        return str(self.diagnostic)


# Error codes for categorization
ERROR_CODES = {
    "L001": "Invalid character",
    "L002": "Unterminated string literal",
    "L003": "Invalid numeric literal",
    "L006": "Invalid escape sequence",
    "L011": "Unterminated block comment",
}


def create_invalid_character_error(char: str, location: SourceLocation) -> LexerError:
    """Create an error for a character that cannot start any token."""
    if char.isprintable():
        help_text = f"The character '{char}' does not start any token."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexerError(
        message=f"Unrecognized character '{char}'",
        location=location,
        code="L001",
        help_text=help_text,
    )


def create_unterminated_string_error(location: SourceLocation) -> LexerError:
    """Create an error for a string literal with no closing quote."""
    return LexerError(
        message="Unterminated string literal",
        location=location,
        code="L002",
        help_text='String literals must be closed with a matching " quote.',
    )


def create_invalid_number_error(lexeme: str, location: SourceLocation, reason: str) -> LexerError:
    """Create an error for a malformed numeric literal."""
    return LexerError(
        message=f"Malformed numeric literal '{lexeme}'",
        location=location,
        code="L003",
        help_text=reason,
    )


def create_invalid_escape_error(escape_char: str, location: SourceLocation) -> LexerError:
    """Create an error for an unsupported escape sequence."""
    return LexerError(
        message=f"Invalid escape sequence '\\{escape_char}' in string literal",
        location=location,
        code="L006",
        help_text='Only \\" and \\\\ are valid escape sequences.',
    )


def create_unterminated_comment_error(location: SourceLocation) -> LexerError:
    """Create an error for a block comment with no closing */."""
    return LexerError(
        message="Unterminated block comment",
        location=location,
        code="L011",
        help_text="Block comments must be closed with */.",
    )
