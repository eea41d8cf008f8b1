"""Single-pass scanner for Markdown with inline HTML.

Decomposes source text into SYNTAX and DISPLAY tokens for progressive
(typewriter) rendering. Concatenating every token value reproduces the
source exactly; nothing is invented, dropped or fixed up.

No regex in the hot path. Every step consumes at least one character,
so the scan always terminates.

Thread Safety:
Scanner instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator, Mapping
from typing import Any

from markityper.config import ScanOptions, resolve_options
from markityper.lexer.classifiers import (
    FenceClassifierMixin,
    HeadingClassifierMixin,
    HtmlClassifierMixin,
    LineSyntaxClassifierMixin,
    ListClassifierMixin,
    QuoteClassifierMixin,
)
from markityper.lexer.scanners import (
    DisplayScannerMixin,
    InlineScannerMixin,
    LineScannerMixin,
)
from markityper.lexer.state import ScanState
from markityper.profiling import get_scan_accumulator
from markityper.segmenter import Segmenter, get_default_segmenter
from markityper.tokens import Token, TokenKind
from markityper.utils.logger import get_logger

logger = get_logger(__name__)


class Scanner(
    # Classifiers (pure logic, no state mutation)
    # Implementations precede the mixins that declare them as stubs.
    HeadingClassifierMixin,
    QuoteClassifierMixin,
    ListClassifierMixin,
    FenceClassifierMixin,
    HtmlClassifierMixin,
    LineSyntaxClassifierMixin,
    # Scanners (token emission, fence flag and mark stack updates)
    LineScannerMixin,
    InlineScannerMixin,
    DisplayScannerMixin,
):
    """Pull-based scanner: one token per step, strict source order.

    Each step tries, in order:

    1. start-of-line fence delimiter (toggles the fence flag)
    2. start-of-line heading / quote / list marker (outside a fence)
    3. inside a fence: whitespace run or one grapheme, nothing else
    4. HTML tag (outside a code span)
    5. inline mark toggle (only the backtick inside a code span)
    6. whitespace run
    7. one grapheme

    Usage:
            >>> scanner = Scanner("# Hi *x*")
            >>> [t.value for t in scanner.tokenize()]
            ['# ', 'H', 'i', ' ', '*', 'x', '*']

            >>> scanner = Scanner("ab")
            >>> scanner.next_token()
            Token(DISPLAY, DEFAULT, 'a')

    Thread Safety:
        Scanner instances are single-use. Create one per source string.
        All state is instance-local; no shared mutable state.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source)
        "_state",
        "_options",
        "_include_trailing_space",
        "_segmenter",
        "_kind_counts",
    )

    def __init__(
        self,
        source: str,
        options: ScanOptions | Mapping[str, Any] | None = None,
        *,
        segmenter: Segmenter | None = None,
    ) -> None:
        """Initialize scanner with source text.

        Args:
            source: Markdown source text
            options: ScanOptions, a mapping of option values (unknown keys
                ignored), or None for the context default
            segmenter: Grapheme segmentation strategy; selected
                automatically when None

        Raises:
            ConfigError: If options has an unsupported type or value.
        """
        self._source = source
        self._source_len = len(source)
        self._state = ScanState()
        self._options = resolve_options(options)
        self._include_trailing_space = self._options.include_trailing_space_in_line_syntax
        self._segmenter = segmenter if segmenter is not None else get_default_segmenter()
        self._kind_counts: Counter[TokenKind] = Counter()

    @property
    def state(self) -> ScanState:
        """Current scan state (cursor, mark stack, fence flag)."""
        return self._state

    @property
    def options(self) -> ScanOptions:
        return self._options

    @property
    def done(self) -> bool:
        """True once the cursor has reached the end of the source."""
        return self._state.cursor >= self._source_len

    def next_token(self) -> Token | None:
        """Scan one step.

        Returns:
            The next token, or None once the source is exhausted.
        """
        if self.done:
            return None

        token = self._dispatch(self._state.cursor)
        self._state.cursor += len(token.value)
        self._kind_counts[token.kind] += 1
        return token

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into token stream.

        Yields:
            Token objects one at a time

        Complexity: O(n) where n = len(source)
        Memory: O(1) iterator (tokens yielded, not accumulated)
        """
        acc = get_scan_accumulator()
        while True:
            token = self.next_token()
            if token is None:
                break
            yield token

        if self._state.in_fence or len(self._state.marks):
            logger.debug(
                "scan ended with open syntax: fence=%s marks=%r",
                self._state.in_fence,
                self._state.marks,
            )
        logger.debug(
            "scanned %d chars into %d tokens",
            self._source_len,
            sum(self._kind_counts.values()),
        )
        if acc is not None:
            acc.record_scan(self._source_len, self._kind_counts)

    def _dispatch(self, pos: int) -> Token:
        """Produce the token starting at ``pos`` in priority order.

        Every branch returns a token with a non-empty value taken
        verbatim from the source at ``pos``.
        """
        if self._at_line_start(pos):
            token = self._scan_line_syntax(pos)
            if token is not None:
                return token

        if self._state.in_fence:
            return self._scan_display(pos)

        token = self._scan_html_tag(pos)
        if token is not None:
            return token

        token = self._scan_inline_mark(pos)
        if token is not None:
            return token

        return self._scan_display(pos)

    def __iter__(self) -> Iterator[Token]:
        return self.tokenize()
