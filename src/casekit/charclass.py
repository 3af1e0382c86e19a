"""Character classes and the two word-matching patterns built on them."""

from __future__ import annotations

import re
from enum import Enum, auto

from casekit.errors import InvalidArgument


class CharClass(Enum):
    ASCII_LOWER = auto()  # a-z
    ASCII_UPPER = auto()  # A-Z
    LATIN1_LOWER = auto()  # U+00DF-U+00F6, U+00F8-U+00FF
    LATIN1_UPPER = auto()  # U+00C0-U+00D6, U+00D8-U+00DE
    DIGIT = auto()  # 0-9
    SEPARATOR = auto()  # everything else up to U+00FF
    OTHER = auto()  # above U+00FF


class MatcherKind(Enum):
    ASCII = auto()
    EXTENDED = auto()


# Character sets shared by the extended matcher
_UPPER = r"A-Z\xc0-\xd6\xd8-\xde"
_LOWER = r"a-z\xdf-\xf6\xf8-\xff"
_SEP = r"\xac\xb1\xd7\xf7\x00-\x2f\x3a-\x40\x5b-\x60\x7b-\xbf \t\x0b\f\xa0\n\r"

ASCII_WORDS = re.compile(r"[^\x00-\x2f\x3a-\x40\x5b-\x60\x7b-\x7f]+")

# Alternatives are tried in order at each position:
#   a) capitalized or lowercase word followed by a separator, an uppercase
#      letter, or the end
#   b) acronym followed by a separator, a capitalized word, or the end
#   c) capitalized or lowercase word
#   d) uppercase run
#   e) digit run
EXTENDED_WORDS = re.compile(
    rf"[{_UPPER}]?[{_LOWER}]+(?=[{_SEP}]|[{_UPPER}]|\Z)"
    rf"|[{_UPPER}]+(?=[{_SEP}]|[{_UPPER}][{_LOWER}]|\Z)"
    rf"|[{_UPPER}]?[{_LOWER}]+"
    rf"|[{_UPPER}]+"
    r"|[0-9]+"
)

_EXTENDED_SIGNAL = re.compile(r"[a-z][A-Z]|[A-Z]{2,}[a-z]|[0-9][a-zA-Z]|[a-zA-Z][0-9]|[^a-zA-Z0-9 ]")


def detect(text: str) -> MatcherKind:
    """Pick the matcher for *text*.

    EXTENDED when the text has a case transition, an acronym boundary, a
    digit next to a letter, or any character outside ``[a-zA-Z0-9 ]``.
    """
    if _EXTENDED_SIGNAL.search(text):
        return MatcherKind.EXTENDED
    return MatcherKind.ASCII


def matcher_for(kind: MatcherKind) -> re.Pattern[str]:
    """Return the compiled word pattern for a matcher kind."""
    if kind is MatcherKind.EXTENDED:
        return EXTENDED_WORDS
    return ASCII_WORDS


def classify(ch: str) -> CharClass:
    """Return the CharClass of a single character."""
    if len(ch) != 1:
        raise InvalidArgument(f"expected a single character, got {ch!r}")
    cp = ord(ch)
    if cp > 0xFF:
        return CharClass.OTHER
    if "a" <= ch <= "z":
        return CharClass.ASCII_LOWER
    if "A" <= ch <= "Z":
        return CharClass.ASCII_UPPER
    if "0" <= ch <= "9":
        return CharClass.DIGIT
    if 0xC0 <= cp <= 0xDE and cp != 0xD7:
        return CharClass.LATIN1_UPPER
    if cp >= 0xDF and cp != 0xF7:
        return CharClass.LATIN1_LOWER
    return CharClass.SEPARATOR


_WORD_CLASSES = frozenset(
    {
        CharClass.ASCII_LOWER,
        CharClass.ASCII_UPPER,
        CharClass.LATIN1_LOWER,
        CharClass.LATIN1_UPPER,
        CharClass.DIGIT,
    }
)


def is_word_char(ch: str) -> bool:
    """Return True if ch can be part of a word token."""
    return classify(ch) in _WORD_CLASSES
