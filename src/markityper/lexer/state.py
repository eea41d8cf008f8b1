"""Scanner state and line-match results.

All scanning state lives in a ScanState owned by one Scanner, so any
number of scans can run side by side.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from markityper.lexer.marks import MarkStack


@dataclass(slots=True)
class ScanState:
    """Mutable per-scan state.

    Attributes:
        cursor: Offset of the next unconsumed character. Only ever grows.
        marks: Open inline marks (LIFO).
        in_fence: True between an opening and closing fence line. Left
            True when the source ends inside a fence.

    """

    cursor: int = 0
    marks: MarkStack = field(default_factory=MarkStack)
    in_fence: bool = False


@dataclass(frozen=True, slots=True)
class LineMatch:
    """A recognized start-of-line marker.

    Attributes:
        value: The matched literal, e.g. ``"## "`` or ``"```py\\n"``
        is_fence: True for a fence delimiter line

    """

    value: str
    is_fence: bool = False

    @property
    def length(self) -> int:
        return len(self.value)
