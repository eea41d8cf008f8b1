"""Inline HTML tag classifier mixin."""

from __future__ import annotations

from markityper.charsets import CLOSING_TAG_PREFIX, TAG_CLOSE, TAG_OPEN
from markityper.tokens import Token, TokenKind


class HtmlClassifierMixin:
    """Mixin providing inline HTML tag classification.

    Classification is by surface syntax only: a span starting with ``</``
    is a close tag, anything else is an open tag. Self-closing tags such
    as ``<br/>`` are open tags, and tag names are not validated.

    """

    _source: str

    def _try_classify_html_tag(self, pos: int) -> Token | None:
        """Try to classify the span starting at ``pos`` as an HTML tag.

        Args:
            pos: Offset of a ``<`` character

        Returns:
            OPEN or CLOSE syntax token spanning ``<`` through the next
            ``>``, or None when no ``>`` follows.
        """
        source = self._source
        if source[pos] != TAG_OPEN:
            return None

        close_idx = source.find(TAG_CLOSE, pos + 1)
        if close_idx == -1:
            return None

        tag_text = source[pos : close_idx + 1]
        kind = TokenKind.CLOSE if tag_text.startswith(CLOSING_TAG_PREFIX) else TokenKind.OPEN
        return Token.syntax(kind, tag_text)
