"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from markityper.charsets import WHITESPACE

    if char in WHITESPACE:  # O(1) lookup
        ...
"""

# Whitespace clumped into a single display token
WHITESPACE: frozenset[str] = frozenset(" \t\r\n")

# ATX heading marker and maximum level
HEADING_MARKER = "#"
HEADING_MAX_LEVEL = 6

# Block quote marker
BLOCK_QUOTE_MARKER = ">"

# Unordered list marker characters
UNORDERED_LIST_MARKERS: frozenset[str] = frozenset("-+*")

# ASCII digits for ordered list detection (not str.isdigit, which admits
# superscripts and other Unicode digits)
DIGITS: frozenset[str] = frozenset("0123456789")

# Ordered list delimiters: 1. or 1)
ORDERED_LIST_DELIMITERS: frozenset[str] = frozenset(".)")

# Fenced code delimiter
FENCE = "```"

# Inline mark delimiter characters
MARK_CHARS: frozenset[str] = frozenset("*_`")

# HTML tag delimiters
TAG_OPEN = "<"
TAG_CLOSE = ">"
CLOSING_TAG_PREFIX = "</"
