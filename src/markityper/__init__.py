"""
markityper — Markdown token stream for typewriter rendering

Splits Markdown with inline HTML into syntax and display tokens in a
single pass. Joining every token value reproduces the input exactly, so
a renderer can reveal text grapheme by grapheme while applying headings,
emphasis, code and tags as they open and close.

Quick Start:
    >>> from markityper import tokenize
    >>> [(t.kind.value, t.value) for t in tokenize("# *x*")]
    [('line', '# '), ('open', '*'), ('default', 'x'), ('close', '*')]

    >>> from markityper import to_closing_tag
    >>> to_closing_tag('<div class="x">')
    '</div>'

Installation:
    pip install markityper              # Core scanner (zero deps)
    pip install markityper[unicode]     # + grapheme clusters via regex
"""

from collections.abc import Iterator, Mapping
from typing import Any

from markityper.config import (
    ScanOptions,
    get_scan_options,
    reset_scan_options,
    scan_options_context,
    set_scan_options,
)
from markityper.errors import ConfigError, MarkityperError, SegmenterError
from markityper.html import to_closing_tag
from markityper.lexer import Mark, MarkStack, Scanner, ScanState
from markityper.profiling import ScanAccumulator, get_scan_accumulator, profiled_scan
from markityper.segmenter import (
    CodePointSegmenter,
    GraphemeSegmenter,
    Segmenter,
    get_default_segmenter,
    get_segmenter,
    has_grapheme_support,
)
from markityper.streaming import astream
from markityper.tokens import Token, TokenCategory, TokenKind

__version__ = "0.1.2"


def tokenize(
    source: str,
    options: ScanOptions | Mapping[str, Any] | None = None,
    *,
    segmenter: Segmenter | None = None,
) -> Iterator[Token]:
    """Scan Markdown source into a token stream.

    Args:
        source: Markdown source text
        options: ScanOptions, a mapping such as
            ``{"include_trailing_space_in_line_syntax": False}`` (unknown
            keys ignored), or None for the context default
        segmenter: Grapheme segmentation strategy (automatic if None)

    Returns:
        Lazy iterator of Token objects in source order.

    Example:
        >>> "".join(t.value for t in tokenize("**bold** <b>x</b>"))
        '**bold** <b>x</b>'
    """
    return Scanner(source, options, segmenter=segmenter).tokenize()


__all__ = [
    "CodePointSegmenter",
    "ConfigError",
    "GraphemeSegmenter",
    "Mark",
    "MarkStack",
    "MarkityperError",
    "ScanAccumulator",
    "ScanOptions",
    "ScanState",
    "Scanner",
    "Segmenter",
    "SegmenterError",
    "Token",
    "TokenCategory",
    "TokenKind",
    "__version__",
    "astream",
    "get_default_segmenter",
    "get_scan_accumulator",
    "get_scan_options",
    "get_segmenter",
    "has_grapheme_support",
    "profiled_scan",
    "reset_scan_options",
    "scan_options_context",
    "set_scan_options",
    "to_closing_tag",
    "tokenize",
]
