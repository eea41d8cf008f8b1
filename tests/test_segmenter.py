"""Tests for markityper.segmenter — grapheme segmentation strategies."""

from __future__ import annotations

import pytest

import markityper.segmenter as segmenter_module
from markityper import CodePointSegmenter, Scanner, SegmenterError, TokenKind
from markityper.segmenter import (
    GraphemeSegmenter,
    get_default_segmenter,
    get_segmenter,
    has_grapheme_support,
)

FAMILY = "\U0001f468\u200d\U0001f469\u200d\U0001f467"  # man ZWJ woman ZWJ girl
FLAG = "\U0001f1eb\U0001f1f7"  # regional indicators F R
E_ACUTE = "e\u0301"  # e + combining acute


class TestCodePointSegmenter:
    def test_one_element_per_code_point(self) -> None:
        assert list(CodePointSegmenter().segments(E_ACUTE)) == ["e", "\u0301"]

    def test_start_offset(self) -> None:
        assert list(CodePointSegmenter().segments("abc", 1)) == ["b", "c"]

    def test_start_at_end(self) -> None:
        assert list(CodePointSegmenter().segments("abc", 3)) == []

    def test_is_lazy(self) -> None:
        segments = CodePointSegmenter().segments("x" * 10_000)
        assert next(segments) == "x"


class TestGraphemeSegmenter:
    @pytest.fixture(autouse=True)
    def _require_regex(self) -> None:
        pytest.importorskip("regex")

    def test_zwj_sequence_is_one_cluster(self) -> None:
        assert list(GraphemeSegmenter().segments(FAMILY)) == [FAMILY]

    def test_flag_is_one_cluster(self) -> None:
        assert list(GraphemeSegmenter().segments(FLAG + "a")) == [FLAG, "a"]

    def test_combining_mark_joins_base(self) -> None:
        assert list(GraphemeSegmenter().segments(E_ACUTE + "x")) == [E_ACUTE, "x"]

    def test_crlf_is_one_cluster(self) -> None:
        assert list(GraphemeSegmenter().segments("\r\n")) == ["\r\n"]

    def test_start_offset(self) -> None:
        assert list(GraphemeSegmenter().segments("ab" + E_ACUTE, 2)) == [E_ACUTE]

    def test_scanner_emits_whole_clusters(self) -> None:
        source = f"*{FAMILY}{E_ACUTE}*"
        tokens = list(Scanner(source, segmenter=GraphemeSegmenter()).tokenize())
        assert [(t.kind, t.value) for t in tokens] == [
            (TokenKind.OPEN, "*"),
            (TokenKind.DEFAULT, FAMILY),
            (TokenKind.DEFAULT, E_ACUTE),
            (TokenKind.CLOSE, "*"),
        ]

    def test_get_segmenter_grapheme(self) -> None:
        assert isinstance(get_segmenter("grapheme"), GraphemeSegmenter)

    def test_default_is_grapheme_when_available(self) -> None:
        assert isinstance(get_default_segmenter(), GraphemeSegmenter)
        assert has_grapheme_support()


class TestSelection:
    def test_codepoint_by_name(self) -> None:
        assert isinstance(get_segmenter("codepoint"), CodePointSegmenter)

    def test_auto_is_default(self) -> None:
        assert get_segmenter("auto") is get_default_segmenter()

    def test_unknown_name_raises(self) -> None:
        with pytest.raises(SegmenterError, match="unknown strategy"):
            get_segmenter("words")

    def test_fallback_without_regex(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Automatic selection silently falls back to code points."""

        def _unavailable() -> None:
            return None

        monkeypatch.setattr(segmenter_module, "_default_segmenter", None)
        monkeypatch.setattr(segmenter_module, "_try_grapheme_segmenter", _unavailable)

        assert isinstance(get_default_segmenter(), CodePointSegmenter)
        assert not has_grapheme_support()
        with pytest.raises(SegmenterError, match="regex"):
            get_segmenter("grapheme")

    def test_fallback_scan_round_trips(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(segmenter_module, "_default_segmenter", None)
        monkeypatch.setattr(segmenter_module, "_try_grapheme_segmenter", lambda: None)

        source = f"{FAMILY} {E_ACUTE}"
        tokens = list(Scanner(source).tokenize())
        assert "".join(t.value for t in tokens) == source
        assert len(tokens) == len(FAMILY) + 1 + len(E_ACUTE)
