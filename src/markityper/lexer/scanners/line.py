"""Start-of-line scanner mixin."""

from __future__ import annotations

from markityper.lexer.state import LineMatch, ScanState
from markityper.tokens import Token, TokenKind


class LineScannerMixin:
    """Mixin emitting LINE tokens for start-of-line markers.

    Fence lines are honored in every state and toggle the fence flag.
    Every other line marker is ignored while inside a fence.

    """

    _state: ScanState
    _include_trailing_space: bool

    def _match_line_syntax(self, pos: int) -> LineMatch | None:
        """Recognize a line marker. Implemented by LineSyntaxClassifierMixin."""
        raise NotImplementedError

    def _scan_line_syntax(self, pos: int) -> Token | None:
        """Emit a LINE token for the marker at ``pos``, if any.

        With trailing space folding disabled, a non-fence marker is
        emitted without its space; the space is scanned on the next step.

        Args:
            pos: Start-of-line offset

        Returns:
            LINE syntax token, or None to fall through.
        """
        match = self._match_line_syntax(pos)
        if match is None:
            return None

        state = self._state
        if match.is_fence:
            state.in_fence = not state.in_fence
            return Token.syntax(TokenKind.LINE, match.value)

        if state.in_fence:
            return None

        value = match.value
        if not self._include_trailing_space and value.endswith(" "):
            value = value[:-1]
        return Token.syntax(TokenKind.LINE, value)
