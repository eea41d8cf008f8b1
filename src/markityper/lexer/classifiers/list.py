"""List marker classifier mixin."""

from markityper.charsets import DIGITS, ORDERED_LIST_DELIMITERS, UNORDERED_LIST_MARKERS
from markityper.lexer.state import LineMatch


class ListClassifierMixin:
    """Mixin providing list marker classification."""

    _source: str
    _source_len: int

    def _try_match_unordered_marker(self, pos: int) -> LineMatch | None:
        """Match ``-``, ``+`` or ``*`` followed by a space.

        Args:
            pos: Start-of-line offset

        Returns:
            LineMatch of exactly two characters, or None.
        """
        source = self._source
        if (
            pos + 1 < self._source_len
            and source[pos] in UNORDERED_LIST_MARKERS
            and source[pos + 1] == " "
        ):
            return LineMatch(source[pos : pos + 2])
        return None

    def _try_match_ordered_marker(self, pos: int) -> LineMatch | None:
        """Match digits, then ``.`` or ``)``, then a space (``1. ``, ``12) ``).

        Args:
            pos: Start-of-line offset

        Returns:
            LineMatch of digits, delimiter and space, or None.
        """
        source = self._source
        source_len = self._source_len
        end = pos
        while end < source_len and source[end] in DIGITS:
            end += 1

        if end == pos or end + 1 >= source_len:
            return None
        if source[end] not in ORDERED_LIST_DELIMITERS or source[end + 1] != " ":
            return None
        return LineMatch(source[pos : end + 2])
