"""Character classes for flanking classification.

Reference: https://spec.commonmark.org/0.30/

Usage:
    from marksome.parsing.charsets import classify

    if classify(text[i - 1] if i else "") is CharClass.WHITESPACE:
        ...
"""

from enum import Enum

# CommonMark: ASCII punctuation characters
# https://spec.commonmark.org/0.30/#ascii-punctuation-character
ASCII_PUNCTUATION: frozenset[str] = frozenset("!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~")

# Emphasis delimiter characters
EMPHASIS_DELIMITERS: frozenset[str] = frozenset("*_")

# Characters whose backslash escape is removed from literal text
ESCAPABLE: frozenset[str] = frozenset("*[\\]_")

# Characters that end a line of link text
LINE_BREAKS: frozenset[str] = frozenset("\n\r\u2028\u2029")


class CharClass(Enum):
    """Neighbour class of a delimiter run."""

    WHITESPACE = "whitespace"
    PUNCTUATION = "punctuation"
    OTHER = "other"


def classify(char: str) -> CharClass:
    """Classify a single character (empty string = start/end of text).

    Absence of a character counts as whitespace.
    """
    if not char or char.isspace():
        return CharClass.WHITESPACE
    if char in ASCII_PUNCTUATION:
        return CharClass.PUNCTUATION
    return CharClass.OTHER
