"""Inline mark kinds and the LIFO mark stack.

The stack is a toggle model, not a bracket matcher: a delimiter only
ever looks at the top of the stack. ``**a*b**`` therefore opens strong,
opens emphasis, and the final ``**`` opens a second strong because the
top is emphasis. Unclosed marks at end of input stay on the stack; no
synthetic closer is ever emitted.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum

from markityper.tokens import TokenKind


class Mark(Enum):
    """Inline mark kinds."""

    STRONG = "strong"
    EMPHASIS = "emphasis"
    UNDERLINE = "underline"
    CODE = "code"

    @property
    def delimiter(self) -> str:
        """Source delimiter for this mark."""
        return MARK_DELIMITERS[self]


MARK_DELIMITERS: dict[Mark, str] = {
    Mark.STRONG: "**",
    Mark.EMPHASIS: "*",
    Mark.UNDERLINE: "_",
    Mark.CODE: "`",
}


def mark_at(source: str, pos: int, *, in_code: bool = False) -> Mark | None:
    """Identify the mark whose delimiter starts at ``pos``.

    ``**`` is checked before a lone ``*``. Inside a code span only the
    backtick counts.

    Args:
        source: Source text
        pos: Offset to inspect (must be < len(source))
        in_code: True when the innermost open mark is a code span

    Returns:
        The Mark, or None if no delimiter starts here.
    """
    char = source[pos]
    if char == "`":
        return Mark.CODE
    if in_code:
        return None
    if char == "*":
        return Mark.STRONG if source.startswith("**", pos) else Mark.EMPHASIS
    if char == "_":
        return Mark.UNDERLINE
    return None


class MarkStack:
    """LIFO stack of currently open inline marks.

    Thread Safety:
        Not shared. Each ScanState owns its own stack.
    """

    __slots__ = ("_marks",)

    def __init__(self) -> None:
        self._marks: list[Mark] = []

    @property
    def top(self) -> Mark | None:
        """Innermost open mark, or None when empty."""
        return self._marks[-1] if self._marks else None

    @property
    def in_code(self) -> bool:
        """True while a code span is the innermost open mark."""
        return self.top is Mark.CODE

    def toggle(self, mark: Mark) -> TokenKind:
        """Close ``mark`` if it is on top, otherwise open it.

        Returns:
            TokenKind.CLOSE after a pop, TokenKind.OPEN after a push.
        """
        if self.top is mark:
            self._marks.pop()
            return TokenKind.CLOSE
        self._marks.append(mark)
        return TokenKind.OPEN

    def as_tuple(self) -> tuple[Mark, ...]:
        """Snapshot, outermost first."""
        return tuple(self._marks)

    def __len__(self) -> int:
        return len(self._marks)

    def __iter__(self) -> Iterator[Mark]:
        return iter(self._marks)

    def __repr__(self) -> str:
        return f"MarkStack({[m.value for m in self._marks]!r})"
