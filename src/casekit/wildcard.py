"""Wildcard (glob-like) patterns compiled to regular expressions."""

from __future__ import annotations

import re

from casekit.errors import InvalidArgument

_RAW_PATTERN = re.compile(r"^/(.+)/([im]+)?\Z")
_METACHARS = re.compile(r"[-\[\]/{}()?.\\^$|]")

_FLAGS = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    # Python patterns are always Unicode and have no global state
    "u": re.NOFLAG,
    "g": re.NOFLAG,
}


def parse_flags(flags: str | None) -> re.RegexFlag:
    """Translate JavaScript-style flag letters into re flags."""
    result = re.NOFLAG
    for letter in flags or "":
        try:
            result |= _FLAGS[letter]
        except KeyError:
            raise InvalidArgument(f"unknown pattern flag {letter!r}") from None
    return result


def wildcard_to_regexp(pattern: str, flags: str | None = None) -> re.Pattern[str]:
    """Compile a wildcard pattern.

    ``*`` matches any sequence (possibly empty) and ``+`` one or more
    characters, both non-greedy; everything else is literal and the whole
    candidate must match. A pattern written as ``/source/flags`` is compiled
    as a raw regular expression, its inline ``i``/``m`` flags taking the
    place of *flags*::

        >>> bool(wildcard_to_regexp("hel*o").search("hello"))
        True
        >>> bool(wildcard_to_regexp("/^a.b$/i").search("A1B"))
        True

    Errors from compiling a raw pattern propagate as ``re.error``.
    """
    raw = _RAW_PATTERN.match(pattern)
    if raw:
        return re.compile(raw.group(1), parse_flags(raw.group(2) or flags))

    source = _METACHARS.sub(r"\\\g<0>", pattern)
    source = source.replace("*", ".*?").replace("+", ".+?")
    compiled_flags = parse_flags(flags)
    # $ also matches before a trailing newline; only multiline keeps it
    end = "$" if compiled_flags & re.MULTILINE else r"\Z"
    return re.compile(f"^{source}{end}", compiled_flags)
