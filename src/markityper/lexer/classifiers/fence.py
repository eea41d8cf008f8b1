"""Fenced code delimiter classifier mixin."""

from markityper.charsets import FENCE
from markityper.lexer.state import LineMatch


class FenceClassifierMixin:
    """Mixin providing fence delimiter classification."""

    _source: str
    _source_len: int

    def _try_match_fence(self, pos: int) -> LineMatch | None:
        """Try to match a fence delimiter line at ``pos``.

        Any line beginning with three backticks opens or closes a fence.
        The match covers the whole line: the backticks, any info string,
        and the trailing newline when there is one.

        Args:
            pos: Start-of-line offset

        Returns:
            LineMatch with ``is_fence=True``, or None.
        """
        source = self._source
        if not source.startswith(FENCE, pos):
            return None

        line_end = source.find("\n", pos + len(FENCE))
        end = self._source_len if line_end == -1 else line_end + 1
        return LineMatch(source[pos:end], is_fence=True)
