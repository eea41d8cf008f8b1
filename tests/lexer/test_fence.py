"""Tests for fenced code handling.

Fence lines toggle a flag; inside the fence nothing but the closing
fence line is recognized and unterminated fences simply end the stream.
"""

from __future__ import annotations

from markityper import CodePointSegmenter, Scanner, TokenCategory, TokenKind


def _scan(source: str) -> tuple[list[tuple[TokenKind, str]], Scanner]:
    scanner = Scanner(source, segmenter=CodePointSegmenter())
    return [(t.kind, t.value) for t in scanner.tokenize()], scanner


class TestFenceLines:
    def test_open_and_close(self) -> None:
        tokens, scanner = _scan("```\nx\n```\n")
        assert tokens == [
            (TokenKind.LINE, "```\n"),
            (TokenKind.DEFAULT, "x"),
            (TokenKind.WHITESPACE, "\n"),
            (TokenKind.LINE, "```\n"),
        ]
        assert scanner.state.in_fence is False

    def test_info_string_is_part_of_the_line(self) -> None:
        tokens, _ = _scan("```python title=x\npass\n```")
        assert tokens[0] == (TokenKind.LINE, "```python title=x\n")
        assert tokens[-1] == (TokenKind.LINE, "```")

    def test_longer_fence_is_one_line_token(self) -> None:
        tokens, _ = _scan("`````\n")
        assert tokens == [(TokenKind.LINE, "`````\n")]

    def test_two_backticks_are_marks(self) -> None:
        tokens, _ = _scan("``")
        assert tokens == [(TokenKind.OPEN, "`"), (TokenKind.CLOSE, "`")]

    def test_fence_mid_line_is_not_a_fence(self) -> None:
        tokens, scanner = _scan("a ```")
        assert all(kind is not TokenKind.LINE for kind, _ in tokens)
        assert scanner.state.in_fence is False

    def test_fence_closes_inside_code_span(self) -> None:
        """Fence lines are honored regardless of open inline marks."""
        tokens, scanner = _scan("`a\n```\n")
        assert tokens[-1] == (TokenKind.LINE, "```\n")
        assert scanner.state.in_fence is True


class TestFenceContent:
    def test_marks_and_tags_are_display_inside_fence(self) -> None:
        tokens, scanner = _scan("```\n**b** <i>_u_</i> `c`\n```")
        inner = tokens[1:-1]
        assert all(kind in (TokenKind.DEFAULT, TokenKind.WHITESPACE) for kind, _ in inner)
        assert "".join(value for _, value in inner) == "**b** <i>_u_</i> `c`\n"
        assert len(scanner.state.marks) == 0

    def test_line_markers_are_display_inside_fence(self) -> None:
        tokens, _ = _scan("```\n# h\n- l\n> q\n1. o\n```")
        lines = [value for kind, value in tokens if kind is TokenKind.LINE]
        assert lines == ["```\n", "```"]

    def test_whitespace_is_clumped_inside_fence(self) -> None:
        tokens, _ = _scan("```\na  \n\n  b\n```")
        assert (TokenKind.WHITESPACE, "  \n\n  ") in tokens

    def test_marks_resume_after_fence(self) -> None:
        tokens, _ = _scan("```\n*\n```\n*e*")
        assert tokens[-3:] == [
            (TokenKind.OPEN, "*"),
            (TokenKind.DEFAULT, "e"),
            (TokenKind.CLOSE, "*"),
        ]


class TestUnterminatedFence:
    def test_stream_ends_with_flag_set(self) -> None:
        tokens, scanner = _scan("```js\nlet a = 1;")
        assert scanner.state.in_fence is True
        assert tokens[0] == (TokenKind.LINE, "```js\n")
        assert all(kind is not TokenKind.LINE for kind, _ in tokens[1:])

    def test_no_synthetic_closing_fence(self) -> None:
        source = "```\ncode"
        scanner = Scanner(source, segmenter=CodePointSegmenter())
        tokens = list(scanner.tokenize())
        assert "".join(t.value for t in tokens) == source
        assert [t.category for t in tokens[1:]] == [TokenCategory.DISPLAY] * 4

    def test_fence_at_end_of_input_without_newline(self) -> None:
        tokens, scanner = _scan("```")
        assert tokens == [(TokenKind.LINE, "```")]
        assert scanner.state.in_fence is True
