"""Display scanner mixin: whitespace runs and single graphemes."""

from __future__ import annotations

from markityper.charsets import WHITESPACE
from markityper.segmenter import Segmenter
from markityper.tokens import Token, TokenKind


class DisplayScannerMixin:
    """Mixin emitting DISPLAY tokens."""

    _source: str
    _source_len: int
    _segmenter: Segmenter

    def _read_whitespace(self, pos: int) -> int:
        """Return the length of the whitespace run starting at ``pos``.

        Covers any mix of space, tab, CR and LF. ``pos`` must point at a
        whitespace character, so the result is at least 1.
        """
        source = self._source
        end = pos
        while end < self._source_len and source[end] in WHITESPACE:
            end += 1
        return end - pos

    def _scan_whitespace(self, pos: int) -> Token:
        """Emit the whole whitespace run at ``pos`` as one token."""
        length = self._read_whitespace(pos)
        return Token.display(self._source[pos : pos + length], TokenKind.WHITESPACE)

    def _scan_grapheme(self, pos: int) -> Token:
        """Emit the single grapheme cluster starting at ``pos``."""
        cluster = next(self._segmenter.segments(self._source, pos))
        return Token.display(cluster)

    def _scan_display(self, pos: int) -> Token:
        """Emit a whitespace run or one grapheme, whichever starts at ``pos``."""
        if self._source[pos] in WHITESPACE:
            return self._scan_whitespace(pos)
        return self._scan_grapheme(pos)
