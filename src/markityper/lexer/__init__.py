"""Modular single-pass scanner for markityper.

The scanner walks the source once, emitting one token per step. Every
token value is a verbatim slice of the source.

Architecture:
lexer/
├── __init__.py          # Re-exports Scanner, ScanState, Mark, MarkStack
├── core.py              # Scanner class (mixin composition + dispatch)
├── marks.py             # Mark enum, MarkStack (LIFO toggle)
├── state.py             # ScanState, LineMatch
├── classifiers/         # Pure recognizers
│   ├── line.py          # Start-of-line priority order
│   ├── heading.py       # ATX heading
│   ├── quote.py         # Block quote
│   ├── list.py          # List markers
│   ├── fence.py         # Fence delimiter lines
│   └── html.py          # Inline HTML tags
└── scanners/            # Token emission
    ├── line.py          # LINE tokens, fence flag
    ├── inline.py        # HTML tags, mark toggles
    └── display.py       # Whitespace runs, graphemes

Usage:
    >>> from markityper.lexer import Scanner
    >>> for token in Scanner("1. item").tokenize():
    ...     print(token)
Token(SYNTAX, LINE, '1. ')
Token(DISPLAY, DEFAULT, 'i')
Token(DISPLAY, DEFAULT, 't')
Token(DISPLAY, DEFAULT, 'e')
Token(DISPLAY, DEFAULT, 'm')

"""

from markityper.lexer.core import Scanner
from markityper.lexer.marks import Mark, MarkStack
from markityper.lexer.state import LineMatch, ScanState

__all__ = ["LineMatch", "Mark", "MarkStack", "ScanState", "Scanner"]
