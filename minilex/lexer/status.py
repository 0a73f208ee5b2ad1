"""
Scan status for the minilex lexer.

RUNNING may move to END_OF_STREAM or ERROR; both of those are terminal.
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional

from .errors import LexerError


class StatusKind(Enum):
    """Kinds of lexer status."""
    RUNNING = auto()                # More tokens may be available
    END_OF_STREAM = auto()          # Input fully consumed, no error
    ERROR = auto()                  # Scanning halted on malformed input


@dataclass(frozen=True)
class LexerStatus:
    """
    Current state of a scanning pass.

    An ERROR status carries the LexerError that stopped the scan.
    """
    kind: StatusKind
    error: Optional[LexerError] = None

    @classmethod
    def running(cls) -> "LexerStatus":
        return cls(StatusKind.RUNNING)

    @classmethod
    def end_of_stream(cls) -> "LexerStatus":
        return cls(StatusKind.END_OF_STREAM)

    @classmethod
    def failed(cls, error: LexerError) -> "LexerStatus":
        return cls(StatusKind.ERROR, error)

    @property
    def is_running(self) -> bool:
        return self.kind == StatusKind.RUNNING

    @property
    def is_end_of_stream(self) -> bool:
        return self.kind == StatusKind.END_OF_STREAM

    @property
    def is_error(self) -> bool:
        return self.kind == StatusKind.ERROR

    @property
    def is_terminal(self) -> bool:
        return self.kind != StatusKind.RUNNING

    @property
    def description(self) -> Optional[str]:
        """Human-readable error description, or None when not in ERROR."""
        if self.error is None:
            return None
        return self.error.description

    def __str__(self) -> str:
        if self.is_error:
            return f"Error({self.description})"
        return "Running" if self.is_running else "EndOfStream"
