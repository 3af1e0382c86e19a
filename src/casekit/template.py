"""String templates: ``"Hello ${name}"`` compiled into reusable functions.

The grammar has one construct, ``${ key }``. Keys are runs of characters
other than ``;``, ``{`` and whitespace; whitespace around the key is
ignored. Anything else, including a ``${`` that does not form a
placeholder, is literal text.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Collection, Mapping
from dataclasses import dataclass
from typing import TypeVar

from casekit.errors import TemplateError
from casekit.segments import Literal, Placeholder, Span, TemplateProgram, span_of

T = TypeVar("T")

Resolver = Callable[[str], object]

_PLACEHOLDER = re.compile(r"\$\{\s*([^;\s{]+)\s*\}")


def parse_template(source: str) -> TemplateProgram:
    """Split *source* into alternating literal and placeholder segments."""
    segments: list[Literal | Placeholder] = []
    pos = 0
    for m in _PLACEHOLDER.finditer(source):
        segments.append(Literal(source[pos : m.start()], span_of(source, pos, m.start())))
        segments.append(Placeholder(m.group(1), span_of(source, m.start(), m.end())))
        pos = m.end()
    segments.append(Literal(source[pos:], span_of(source, pos, len(source))))
    return TemplateProgram(tuple(segments))


@dataclass(frozen=True, slots=True)
class CompiledTemplate:
    """A parsed template, callable with a key-resolution callback.

    Calling it returns one string per segment: literals unchanged,
    placeholders replaced by ``resolve(key)`` (``None`` becomes ``""``).
    """

    program: TemplateProgram

    def __call__(self, resolve: Resolver) -> list[str]:
        return [
            seg.text if isinstance(seg, Literal) else _to_text(resolve(seg.key))
            for seg in self.program.segments
        ]

    def render(self, resolve: Resolver) -> str:
        """Resolve and join all segments."""
        return "".join(self(resolve))

    @property
    def keys(self) -> tuple[str, ...]:
        """Placeholder keys in order of appearance, duplicates included."""
        return tuple(p.key for p in self.program.placeholders)


def _to_text(value: object) -> str:
    if value is None:
        return ""
    return str(value)


def template(source: str) -> CompiledTemplate:
    """Compile a template string.

        >>> template("Hello ${ name }!").render(template_object({"name": "Bob"}))
        'Hello Bob!'
    """
    return CompiledTemplate(parse_template(source))


def template_object(values: Mapping[str, T], null_value: T | None = None) -> Callable[[str], T | None]:
    """Return a resolver looking keys up in *values*.

    Missing keys, and keys mapped to None, resolve to *null_value*. Other
    falsy values (``""``, ``0``) are returned as they are.
    """

    def resolve(key: str) -> T | None:
        value = values.get(key)
        return null_value if value is None else value

    return resolve


# ---------------------------------------------------------------------------
# Static checks
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class TemplateIssue:
    """A problem found in a template source."""

    message: str
    span: Span


def check_template(source: str, known_keys: Collection[str] | None = None) -> list[TemplateIssue]:
    """Report malformed placeholders and, given *known_keys*, unknown keys."""
    return _check(source, parse_template(source), known_keys)


def validate_template(source: str, known_keys: Collection[str] | None = None) -> TemplateProgram:
    """Parse *source*, raising TemplateError for the first issue found."""
    program = parse_template(source)
    issues = _check(source, program, known_keys)
    if issues:
        raise TemplateError(issues[0].message, issues[0].span, source)
    return program


def _check(
    source: str,
    program: TemplateProgram,
    known_keys: Collection[str] | None,
) -> list[TemplateIssue]:
    issues: list[TemplateIssue] = []
    for seg in program.segments:
        if isinstance(seg, Literal):
            issues.extend(_malformed(source, seg))
        elif known_keys is not None and seg.key not in known_keys:
            issues.append(TemplateIssue(f"unknown placeholder key '{seg.key}'", seg.span))
    issues.sort(key=lambda issue: issue.span.start.offset)
    return issues


def _malformed(source: str, literal: Literal) -> list[TemplateIssue]:
    """Find ``${`` openers left over in a literal segment."""
    found: list[TemplateIssue] = []
    base = literal.span.start.offset
    text = literal.text
    idx = text.find("${")
    while idx != -1:
        start = base + idx
        close = text.find("}", idx + 2)
        newline = text.find("\n", idx + 2)
        if close == -1 or (newline != -1 and newline < close):
            found.append(TemplateIssue("unterminated placeholder", span_of(source, start, start + 2)))
        else:
            inner = text[idx + 2 : close].strip()
            if inner:
                message = f"invalid placeholder key '{inner}'"
            else:
                message = "empty placeholder"
            found.append(TemplateIssue(message, span_of(source, start, base + close + 1)))
        idx = text.find("${", idx + 2)
    return found
