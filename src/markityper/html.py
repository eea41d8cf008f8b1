"""HTML tag helpers.

Renderers that type out a tag's content progressively need the matching
closing tag up front so the partial output stays well-formed.

Example:
    >>> from markityper.html import to_closing_tag
    >>> to_closing_tag('<div class="plan">')
    '</div>'
    >>> to_closing_tag("<br/>")
    ''
    >>> to_closing_tag("</div>")
    '</div>'

Thread Safety:
    All functions are pure. Safe to call from any thread.
"""

from __future__ import annotations

from markityper.charsets import CLOSING_TAG_PREFIX, TAG_CLOSE, TAG_OPEN

# Characters allowed in a tag name: ASCII letters, digits, ':' and '-'
TAG_NAME_CHARS: frozenset[str] = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789:-"
)


def _read_tag_name(tag: str) -> str:
    """Return the tag name following ``<`` and optional whitespace."""
    pos = 1
    while pos < len(tag) and tag[pos].isspace():
        pos += 1
    start = pos
    while pos < len(tag) and tag[pos] in TAG_NAME_CHARS:
        pos += 1
    return tag[start:pos]


def to_closing_tag(opening: object) -> str:
    """Convert an HTML opening tag into its closing tag.

    Attributes are dropped and surrounding whitespace is ignored.

    Args:
        opening: An opening tag such as ``<ul>`` or ``<a href="x">``

    Returns:
        - ``</name>`` for a well-formed, non-self-closing opening tag
        - the input unchanged if it is already a closing tag
        - ``""`` for anything else: non-strings, text that is not a
          ``<...>`` span, self-closing tags, or a missing tag name
    """
    if not isinstance(opening, str):
        return ""

    tag = opening.strip()
    if not tag.startswith(TAG_OPEN) or not tag.endswith(TAG_CLOSE):
        return ""
    if tag.startswith(CLOSING_TAG_PREFIX):
        return opening
    if tag.endswith("/>"):
        return ""

    name = _read_tag_name(tag)
    if not name:
        return ""
    return f"</{name}>"
