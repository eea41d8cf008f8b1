"""Grapheme segmentation strategies for markityper.

Display tokens are emitted one user-perceived character at a time.
When markityper[unicode] is installed, the ``regex`` package's ``\\X``
(extended grapheme cluster) is used, so emoji sequences, combining marks
and joiners stay together. Otherwise each element is a single code point.

Usage:
    # Automatic (grapheme clusters if regex is installed)
    from markityper.segmenter import get_default_segmenter
    segmenter = get_default_segmenter()

    # Explicit
    from markityper.segmenter import get_segmenter
    segmenter = get_segmenter("codepoint")

    # Injected into a scanner
    from markityper import Scanner
    scanner = Scanner("héllo", segmenter=segmenter)

Contract:
    ``segments(text, start)`` yields a lazy, finite, non-restartable
    sequence whose concatenation is exactly ``text[start:]``. The scanner
    pulls only the first element per step.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Protocol

from markityper.errors import SegmenterError
from markityper.utils.logger import get_logger

logger = get_logger(__name__)


class Segmenter(Protocol):
    """Protocol for segmentation strategies.

    Thread Safety:
        Implementations must be stateless between calls. A single
        instance may be shared by scanners running in different threads.
    """

    name: str

    def segments(self, text: str, start: int = 0) -> Iterator[str]:
        """Yield clusters of ``text`` beginning at offset ``start``."""
        ...


class CodePointSegmenter:
    """One element per code point."""

    name = "codepoint"

    def segments(self, text: str, start: int = 0) -> Iterator[str]:
        for pos in range(start, len(text)):
            yield text[pos]


class GraphemeSegmenter:
    """Extended grapheme clusters via the ``regex`` package.

    Raises:
        ImportError: If ``regex`` is not installed.
    """

    name = "grapheme"

    def __init__(self) -> None:
        import regex  # type: ignore[import-untyped]

        self._pattern: Any = regex.compile(r"\X")

    def segments(self, text: str, start: int = 0) -> Iterator[str]:
        for match in self._pattern.finditer(text, pos=start):
            yield match.group()


# Cached default, selected once per process
_default_segmenter: Segmenter | None = None


def _try_grapheme_segmenter() -> GraphemeSegmenter | None:
    """Try to build a GraphemeSegmenter."""
    try:
        return GraphemeSegmenter()
    except ImportError:
        return None


def has_grapheme_support() -> bool:
    """Check if grapheme-cluster segmentation is available."""
    return isinstance(get_default_segmenter(), GraphemeSegmenter)


def get_default_segmenter() -> Segmenter:
    """Get the automatically selected segmenter.

    Grapheme clusters when ``regex`` is importable, code points otherwise.
    Never raises.
    """
    global _default_segmenter

    if _default_segmenter is None:
        segmenter = _try_grapheme_segmenter()
        if segmenter is None:
            logger.debug("regex not installed; segmenting by code point")
            _default_segmenter = CodePointSegmenter()
        else:
            _default_segmenter = segmenter
    return _default_segmenter


def get_segmenter(name: str = "auto") -> Segmenter:
    """Select a segmentation strategy by name.

    Args:
        name: ``"auto"``, ``"grapheme"`` or ``"codepoint"``

    Returns:
        A Segmenter instance.

    Raises:
        SegmenterError: For an unknown name, or ``"grapheme"`` without
            the ``regex`` package.
    """
    if name == "auto":
        return get_default_segmenter()
    if name == "codepoint":
        return CodePointSegmenter()
    if name == "grapheme":
        segmenter = _try_grapheme_segmenter()
        if segmenter is None:
            raise SegmenterError(
                name, "requires the 'regex' package (pip install markityper[unicode])"
            )
        return segmenter
    raise SegmenterError(name, "unknown strategy; expected 'auto', 'grapheme' or 'codepoint'")


__all__ = [
    "CodePointSegmenter",
    "GraphemeSegmenter",
    "Segmenter",
    "get_default_segmenter",
    "get_segmenter",
    "has_grapheme_support",
]
