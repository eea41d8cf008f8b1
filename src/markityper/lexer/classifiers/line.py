"""Start-of-line syntax classifier mixin.

Combines the individual line classifiers in priority order. Classifiers
are pure: they inspect the source and never move the cursor.
"""

from markityper.lexer.state import LineMatch


class LineSyntaxClassifierMixin:
    """Mixin dispatching to the line classifiers in priority order."""

    _source: str

    # Classifier methods (provided by classifier mixins)
    def _try_match_atx_heading(self, pos: int) -> LineMatch | None:
        raise NotImplementedError

    def _try_match_block_quote(self, pos: int) -> LineMatch | None:
        raise NotImplementedError

    def _try_match_unordered_marker(self, pos: int) -> LineMatch | None:
        raise NotImplementedError

    def _try_match_ordered_marker(self, pos: int) -> LineMatch | None:
        raise NotImplementedError

    def _try_match_fence(self, pos: int) -> LineMatch | None:
        raise NotImplementedError

    def _at_line_start(self, pos: int) -> bool:
        """True at offset 0 or immediately after a newline."""
        return pos == 0 or self._source[pos - 1] == "\n"

    def _match_line_syntax(self, pos: int) -> LineMatch | None:
        """Recognize a line marker at ``pos`` (which must be start-of-line).

        Order: ATX heading, block quote, unordered list, ordered list,
        fence delimiter.

        Returns:
            The first LineMatch found, or None.
        """
        char = self._source[pos]
        if char == "#":
            return self._try_match_atx_heading(pos)
        if char == ">":
            return self._try_match_block_quote(pos)
        if char == "`":
            return self._try_match_fence(pos)
        return self._try_match_unordered_marker(pos) or self._try_match_ordered_marker(pos)
