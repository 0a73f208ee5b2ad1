"""Scanner configuration for minilex.

A LexerConfig is immutable and can be shared between any number of lexers.

Usage:
    from minilex.config import LexerConfig

    config = LexerConfig(comments=False)
    lexer = Lexer(source, config=config)

    # Reserve extra words on top of the defaults
    config = DEFAULT_CONFIG.with_keywords("return", "fn")
"""

from dataclasses import dataclass, field, replace
from typing import FrozenSet

from .lexer.tokens import KEYWORDS


@dataclass(frozen=True)
class LexerConfig:
    """Immutable scanner configuration.

    Attributes:
        keywords: Reserved words scanned as KEYWORD instead of IDENTIFIER
        comments: Skip // line comments and /* */ block comments
    """

    keywords: FrozenSet[str] = field(default_factory=lambda: frozenset(KEYWORDS))
    comments: bool = True

    def with_keywords(self, *words: str) -> "LexerConfig":
        """Return a copy with ``words`` added to the reserved set."""
        return replace(self, keywords=self.keywords | frozenset(words))


DEFAULT_CONFIG = LexerConfig()
