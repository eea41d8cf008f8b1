"""Exception classes for markityper.

The scanner itself never raises for any source text; malformed markup
degrades to display tokens. These exceptions cover misuse of the
configuration surface only.
"""

from __future__ import annotations


class MarkityperError(Exception):
    """Base exception for all markityper errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigError(MarkityperError):
    """Invalid scan options.

    Raised when options are neither a ScanOptions, a mapping nor None,
    or when an option value has the wrong type.
    """

    def __init__(self, message: str, option: str | None = None) -> None:
        """Initialize config error.

        Args:
            message: Description of the problem
            option: Name of the offending option (optional)
        """
        self.option = option
        prefix = f"Option '{option}': " if option else ""
        super().__init__(f"{prefix}{message}")


class SegmenterError(MarkityperError):
    """Error selecting a grapheme segmentation strategy.

    Raised only on explicit selection: an unknown strategy name, or
    requesting grapheme segmentation when the ``regex`` package is not
    installed. Automatic selection never raises.
    """

    def __init__(self, name: str, message: str) -> None:
        """Initialize segmenter error.

        Args:
            name: Requested strategy name
            message: Description of the error
        """
        self.name = name
        super().__init__(f"Segmenter '{name}': {message}")
