"""Tests for the markityper exception hierarchy."""

import pytest

from markityper import ConfigError, MarkityperError, SegmenterError


class TestErrorHierarchy:
    @pytest.mark.parametrize("error_type", [ConfigError, SegmenterError])
    def test_subclasses_base(self, error_type: type) -> None:
        assert issubclass(error_type, MarkityperError)

    def test_config_error_with_option(self) -> None:
        error = ConfigError("expected bool, got str", option="include_trailing_space_in_line_syntax")
        assert error.option == "include_trailing_space_in_line_syntax"
        assert str(error) == "Option 'include_trailing_space_in_line_syntax': expected bool, got str"

    def test_config_error_without_option(self) -> None:
        error = ConfigError("bad options")
        assert error.option is None
        assert str(error) == "bad options"

    def test_segmenter_error(self) -> None:
        error = SegmenterError("words", "unknown strategy")
        assert error.name == "words"
        assert str(error) == "Segmenter 'words': unknown strategy"
