"""Scanners for the markityper scanner.

Each scanner is a mixin that turns a recognition at the cursor into a
token, updating the fence flag or mark stack where the syntax requires.
"""

from __future__ import annotations

from markityper.lexer.scanners.display import DisplayScannerMixin
from markityper.lexer.scanners.inline import InlineScannerMixin
from markityper.lexer.scanners.line import LineScannerMixin

__all__ = [
    "DisplayScannerMixin",
    "InlineScannerMixin",
    "LineScannerMixin",
]
