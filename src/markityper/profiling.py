"""markityper ScanAccumulator — opt-in profiling for scanning.

This module provides accumulated metrics during scanning:
- Total scan time
- Source length
- Token count, broken down by kind

Zero overhead when disabled (get_scan_accumulator() returns None).
Only scans that run to completion are recorded.

Example:
    from markityper import tokenize
    from markityper.profiling import profiled_scan

    with profiled_scan() as metrics:
        tokens = list(tokenize("# Hello **World**"))

    print(metrics.summary())
    # {"total_ms": 0.3, "source_length": 17, "token_count": 11, ...}

"""

from collections import Counter
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any

from markityper.tokens import TokenKind


@dataclass
class ScanAccumulator:
    """Accumulated metrics during scanning.

    Attributes:
        start_time: Profiling start timestamp.
        source_length: Total length of sources scanned.
        token_count: Total number of tokens emitted.
        scan_calls: Number of completed scans recorded.
        kind_counts: Tokens emitted per TokenKind.

    """

    start_time: float = field(default_factory=perf_counter)
    source_length: int = 0
    token_count: int = 0
    scan_calls: int = 0
    kind_counts: Counter[TokenKind] = field(default_factory=Counter)

    def record_scan(self, source_length: int, kind_counts: Counter[TokenKind]) -> None:
        """Record a completed scan.

        Args:
            source_length: Length of the source string scanned.
            kind_counts: Tokens emitted per kind during that scan.

        """
        self.scan_calls += 1
        self.source_length += source_length
        self.token_count += sum(kind_counts.values())
        self.kind_counts.update(kind_counts)

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of scan metrics.

        Returns:
            Dict with total_ms, source_length, token_count, scan_calls and
            a per-kind breakdown keyed by kind value.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "source_length": self.source_length,
            "token_count": self.token_count,
            "scan_calls": self.scan_calls,
            "kinds": {kind.value: count for kind, count in self.kind_counts.items()},
        }


_accumulator: ContextVar[ScanAccumulator | None] = ContextVar(
    "scan_accumulator",
    default=None,
)


def get_scan_accumulator() -> ScanAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_scan() -> Iterator[ScanAccumulator]:
    """Context manager for profiled scanning.

    Creates a ScanAccumulator and makes it available via
    get_scan_accumulator() for the duration of the with block.

    Yields:
        ScanAccumulator populated by scans that complete inside the block.

    """
    acc = ScanAccumulator()
    token: Token[ScanAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
