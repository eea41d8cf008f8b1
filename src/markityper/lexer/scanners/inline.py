"""Inline scanner mixin: HTML tags and mark toggles."""

from __future__ import annotations

from markityper.charsets import MARK_CHARS, TAG_OPEN
from markityper.lexer.marks import mark_at
from markityper.lexer.state import ScanState
from markityper.tokens import Token


class InlineScannerMixin:
    """Mixin providing inline syntax scanning.

    Runs only outside fenced code. While a code span is open, HTML tags
    are not recognized and only the backtick toggles.

    """

    _source: str
    _state: ScanState

    def _try_classify_html_tag(self, pos: int) -> Token | None:
        """Classify an HTML tag. Implemented by HtmlClassifierMixin."""
        raise NotImplementedError

    def _scan_html_tag(self, pos: int) -> Token | None:
        """Emit an OPEN/CLOSE token for an HTML tag at ``pos``, if any."""
        if self._source[pos] != TAG_OPEN or self._state.marks.in_code:
            return None
        return self._try_classify_html_tag(pos)

    def _scan_inline_mark(self, pos: int) -> Token | None:
        """Toggle the mark whose delimiter starts at ``pos``, if any.

        Returns:
            OPEN syntax token when the mark was pushed, CLOSE when popped,
            or None if no honored delimiter starts here.
        """
        if self._source[pos] not in MARK_CHARS:
            return None

        marks = self._state.marks
        mark = mark_at(self._source, pos, in_code=marks.in_code)
        if mark is None:
            return None
        return Token.syntax(marks.toggle(mark), mark.delimiter)
