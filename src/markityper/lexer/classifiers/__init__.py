"""Syntax classifiers for the markityper scanner.

Each classifier is a mixin that recognizes one kind of syntax at a given
offset. Classifiers are pure: they never move the cursor or touch the
mark stack.
"""

from markityper.lexer.classifiers.fence import FenceClassifierMixin
from markityper.lexer.classifiers.heading import HeadingClassifierMixin
from markityper.lexer.classifiers.html import HtmlClassifierMixin
from markityper.lexer.classifiers.line import LineSyntaxClassifierMixin
from markityper.lexer.classifiers.list import ListClassifierMixin
from markityper.lexer.classifiers.quote import QuoteClassifierMixin

__all__ = [
    "FenceClassifierMixin",
    "HeadingClassifierMixin",
    "HtmlClassifierMixin",
    "LineSyntaxClassifierMixin",
    "ListClassifierMixin",
    "QuoteClassifierMixin",
]
