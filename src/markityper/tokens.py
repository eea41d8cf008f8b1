"""Token, TokenCategory and TokenKind definitions for the markityper scanner.

The scanner produces a stream of Token objects, one per step. Each Token
carries a category (syntax or display), a kind, and the exact substring
of the source it consumed.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenCategory and TokenKind are enums (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum


class TokenCategory(Enum):
    """Top-level token classification.

    - SYNTAX: markup the renderer interprets (line markers, marks, tags)
    - DISPLAY: text the renderer types out (graphemes, whitespace runs)

    """

    SYNTAX = "syntax"
    DISPLAY = "display"


class TokenKind(Enum):
    """Token kinds, grouped by category."""

    # Syntax kinds
    LINE = "line"  # # , > , - , 1. , ```lang
    OPEN = "open"  # ** * _ ` <tag>
    CLOSE = "close"  # ** * _ ` </tag>

    # Display kinds
    DEFAULT = "default"  # one grapheme cluster
    WHITESPACE = "whitespace"  # maximal run of space/tab/CR/LF


SYNTAX_KINDS: frozenset[TokenKind] = frozenset(
    {TokenKind.LINE, TokenKind.OPEN, TokenKind.CLOSE}
)
DISPLAY_KINDS: frozenset[TokenKind] = frozenset({TokenKind.DEFAULT, TokenKind.WHITESPACE})


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the scanner.

    Attributes:
        category: SYNTAX or DISPLAY
        kind: LINE/OPEN/CLOSE for syntax, DEFAULT/WHITESPACE for display
        value: The exact substring consumed from the source

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.

    """

    category: TokenCategory
    kind: TokenKind
    value: str

    @classmethod
    def syntax(cls, kind: TokenKind, value: str) -> "Token":
        """Create a syntax token."""
        return cls(TokenCategory.SYNTAX, kind, value)

    @classmethod
    def display(cls, value: str, kind: TokenKind = TokenKind.DEFAULT) -> "Token":
        """Create a display token."""
        return cls(TokenCategory.DISPLAY, kind, value)

    @property
    def is_syntax(self) -> bool:
        return self.category is TokenCategory.SYNTAX

    @property
    def is_display(self) -> bool:
        return self.category is TokenCategory.DISPLAY

    def as_dict(self) -> dict[str, str]:
        """Return the plain-dict wire shape.

        Example:
            >>> Token.syntax(TokenKind.OPEN, "**").as_dict()
            {'type': 'syntax', 'kind': 'open', 'value': '**'}
        """
        return {"type": self.category.value, "kind": self.kind.value, "value": self.value}

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.category.name}, {self.kind.name}, {val!r})"
