"""Case converters built on word segmentation."""

from __future__ import annotations

from casekit.errors import InvalidArgument
from casekit.functions import curry
from casekit.words import map_words


def lower_case(s: str) -> str:
    """Lowercase the whole string (not word-aware)."""
    return s.lower()


def _case_str(separator: str, text: str) -> str:
    return map_words(text, lambda word, _: lower_case(word), separator)


kebab_case = curry(_case_str)("-")
"""Convert a string to kebab-case: ``kebab_case("fooBar") == "foo-bar"``."""

snake_case = curry(_case_str)("_")
"""Convert a string to snake_case: ``snake_case("fooBar") == "foo_bar"``."""


def capitalize(s: str) -> str:
    """Uppercase the first character, leaving the rest untouched.

    Unlike ``str.capitalize`` the tail is not lowercased. Raises
    InvalidArgument for the empty string.
    """
    if not s:
        raise InvalidArgument("cannot capitalize an empty string")
    return s[0].upper() + s[1:]


def camel_case(text: str) -> str:
    """Convert a string to camelCase: ``camel_case("foo-bar-baz") == "fooBarBaz"``."""

    def _camel(word: str, i: int) -> str:
        word = lower_case(word)
        return word if i == 0 else capitalize(word)

    return map_words(text, _camel)


# ECMAScript WhiteSpace and LineTerminator code points
_WHITESPACE = (
    "\t\n\x0b\x0c\r \xa0\u1680"
    + "".join(chr(cp) for cp in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def trim(s: str, chars: str | None = None) -> str:
    """Remove leading and trailing whitespace, or the given characters.

    Whitespace follows ECMAScript rather than ``str.isspace``: U+FEFF is
    stripped, the separators U+001C-U+001F and U+0085 are kept.
    """
    return s.strip(_WHITESPACE if chars is None else chars)
