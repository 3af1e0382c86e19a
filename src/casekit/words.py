"""Word segmentation: split arbitrary strings into casing-relevant words."""

from __future__ import annotations

from collections.abc import Callable

from casekit.charclass import detect, matcher_for


def words(text: str | None) -> list[str]:
    """Split *text* into words.

    The matcher is chosen per call: plain space-separated ASCII uses a
    permissive run matcher; anything with case or digit transitions,
    punctuation or Latin-1 letters uses the extended matcher, which splits
    acronyms from a following capitalized word::

        >>> words("XMLHttpRequest")
        ['XML', 'Http', 'Request']
        >>> words("foo2bar")
        ['foo', '2', 'bar']

    ``None`` and the empty string yield no words.
    """
    if not text:
        return []
    return matcher_for(detect(text)).findall(text)


def map_words(
    text: str | None,
    transform: Callable[[str, int], str | None],
    join_with: str = "",
) -> str:
    """Apply ``transform(word, index)`` to every word and join the results.

    ``None`` results join as empty text.
    """
    mapped = (transform(word, i) for i, word in enumerate(words(text)))
    return join_with.join("" if m is None else m for m in mapped)
