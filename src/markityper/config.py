"""ContextVar-based scan configuration for markityper.

Options are resolved once when a Scanner is constructed. Explicit options
passed to ``tokenize()`` win; otherwise the context default applies.

Thread Safety:
    The default lives in a ContextVar and ScanOptions is immutable, so no
    locks are needed.

Usage:
    # Per call
    from markityper import tokenize
    tokens = list(tokenize("# Hi", {"include_trailing_space_in_line_syntax": False}))

    # Context default
    from markityper.config import ScanOptions, scan_options_context

    with scan_options_context(ScanOptions(include_trailing_space_in_line_syntax=False)):
        tokens = list(tokenize("# Hi"))

"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any

from markityper.errors import ConfigError

# camelCase keys accepted from JavaScript-style option objects
OPTION_ALIASES: dict[str, str] = {
    "includeTrailingSpaceInLineSyntax": "include_trailing_space_in_line_syntax",
}


@dataclass(frozen=True, slots=True)
class ScanOptions:
    """Immutable scan configuration.

    Attributes:
        include_trailing_space_in_line_syntax: Fold the space after a line
            marker (``# ``, ``> ``, ``- ``, ``1. ``) into the LINE token.
            When False the space is left for the next step and surfaces
            as a whitespace display token. Fence lines are unaffected.

    """

    include_trailing_space_in_line_syntax: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.include_trailing_space_in_line_syntax, bool):
            raise ConfigError(
                f"expected bool, got {type(self.include_trailing_space_in_line_syntax).__name__}",
                option="include_trailing_space_in_line_syntax",
            )

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "ScanOptions":
        """Create ScanOptions from a mapping.

        Only keys that are ScanOptions fields (or their camelCase aliases)
        are used; unknown keys are silently ignored.

        Args:
            config_dict: Mapping with option values.

        Returns:
            New ScanOptions instance.

        Example:
            >>> ScanOptions.from_dict({
            ...     "includeTrailingSpaceInLineSyntax": False,
            ...     "speed": 30,
            ... })
            ScanOptions(include_trailing_space_in_line_syntax=False)

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered: dict[str, Any] = {}
        for key, value in config_dict.items():
            name = OPTION_ALIASES.get(key, key)
            if name in valid_fields:
                filtered[name] = value
        return cls(**filtered)


# Module-level default (reused, never recreated)
_DEFAULT_OPTIONS: ScanOptions = ScanOptions()

_scan_options: ContextVar[ScanOptions] = ContextVar(
    "scan_options",
    default=_DEFAULT_OPTIONS,
)


def get_scan_options() -> ScanOptions:
    """Get the context default scan options."""
    return _scan_options.get()


def set_scan_options(options: ScanOptions) -> None:
    """Set the default scan options for the current context."""
    _scan_options.set(options)


def reset_scan_options() -> None:
    """Reset the context default to ``ScanOptions()``."""
    _scan_options.set(_DEFAULT_OPTIONS)


@contextmanager
def scan_options_context(options: ScanOptions) -> Iterator[None]:
    """Context manager for temporary option changes.

    Restores the previous default even if an exception is raised.

    Args:
        options: ScanOptions to use within the context.

    Yields:
        None

    """
    previous = _scan_options.get()
    _scan_options.set(options)
    try:
        yield
    finally:
        _scan_options.set(previous)


def resolve_options(options: ScanOptions | Mapping[str, Any] | None) -> ScanOptions:
    """Normalize the ``options`` argument accepted by the public API.

    Args:
        options: A ScanOptions, a mapping of option values, or None for
            the context default.

    Returns:
        A ScanOptions instance.

    Raises:
        ConfigError: If options is of an unsupported type.

    """
    if options is None:
        return get_scan_options()
    if isinstance(options, ScanOptions):
        return options
    if isinstance(options, Mapping):
        return ScanOptions.from_dict(options)
    raise ConfigError(f"expected ScanOptions, mapping or None, got {type(options).__name__}")


__all__ = [
    "OPTION_ALIASES",
    "ScanOptions",
    "get_scan_options",
    "reset_scan_options",
    "resolve_options",
    "scan_options_context",
    "set_scan_options",
]
