"""ATX heading classifier mixin."""

from markityper.charsets import HEADING_MARKER, HEADING_MAX_LEVEL
from markityper.lexer.state import LineMatch


class HeadingClassifierMixin:
    """Mixin providing ATX heading classification."""

    # These will be set by the Scanner class
    _source: str
    _source_len: int

    def _try_match_atx_heading(self, pos: int) -> LineMatch | None:
        """Try to match an ATX heading marker at ``pos``.

        1-6 ``#`` characters followed by a single space. The space is
        required: ``#Hello`` is not a heading. A run of seven or more
        ``#`` is not a heading at any level.

        Args:
            pos: Start-of-line offset

        Returns:
            LineMatch with the hashes and the space, or None.
        """
        source = self._source
        end = pos
        while end < self._source_len and source[end] == HEADING_MARKER:
            end += 1

        level = end - pos
        if level == 0 or level > HEADING_MAX_LEVEL:
            return None
        if end >= self._source_len or source[end] != " ":
            return None
        return LineMatch(source[pos : end + 1])
