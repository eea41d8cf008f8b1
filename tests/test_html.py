"""Tests for markityper.html.to_closing_tag."""

import pytest

from markityper import to_closing_tag


class TestToClosingTag:
    @pytest.mark.parametrize(
        "opening,expected",
        [
            ('<div class="x">', "</div>"),
            ("<ul>", "</ul>"),
            ("<h1 id='t'>", "</h1>"),
            ("<svg:rect width=1>", "</svg:rect>"),
            ("<my-widget>", "</my-widget>"),
            ("<  span>", "</span>"),
            ("  <p>  ", "</p>"),
        ],
    )
    def test_opening_tags(self, opening: str, expected: str) -> None:
        assert to_closing_tag(opening) == expected

    @pytest.mark.parametrize("tag", ["<br/>", "<br />", '<img src="a.png"/>'])
    def test_self_closing_tags(self, tag: str) -> None:
        assert to_closing_tag(tag) == ""

    def test_closing_tag_is_unchanged(self) -> None:
        assert to_closing_tag("</div>") == "</div>"

    @pytest.mark.parametrize("text", ["", "div", "<div", "div>", "<>", "<!-- c -->", "< >"])
    def test_not_a_tag(self, text: str) -> None:
        assert to_closing_tag(text) == ""

    @pytest.mark.parametrize("value", [None, 42, b"<b>", ["<b>"]])
    def test_non_string_returns_empty(self, value: object) -> None:
        assert to_closing_tag(value) == ""

    def test_pairs_with_scanner_open_tokens(self) -> None:
        from markityper import TokenKind, tokenize

        opens = [t.value for t in tokenize("<em>a</em><br/>") if t.kind is TokenKind.OPEN]
        assert [to_closing_tag(tag) for tag in opens] == ["</em>", ""]
