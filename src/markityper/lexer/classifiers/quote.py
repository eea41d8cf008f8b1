"""Block quote classifier mixin."""

from markityper.charsets import BLOCK_QUOTE_MARKER
from markityper.lexer.state import LineMatch


class QuoteClassifierMixin:
    """Mixin providing block quote classification."""

    _source: str
    _source_len: int

    def _try_match_block_quote(self, pos: int) -> LineMatch | None:
        """Match one or more ``>`` followed by a space (``> ``, ``>> ``)."""
        source = self._source
        end = pos
        while end < self._source_len and source[end] == BLOCK_QUOTE_MARKER:
            end += 1

        if end == pos or end >= self._source_len or source[end] != " ":
            return None
        return LineMatch(source[pos : end + 1])
