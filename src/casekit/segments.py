"""Template program structures: source spans and literal/placeholder segments."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based character offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Span:
    """Source range from start to end position."""

    start: Position
    end: Position


_NO_SPAN = Span(Position(0, 0, 0), Position(0, 0, 0))


@dataclass(frozen=True, slots=True)
class Literal:
    """Text copied verbatim into the output."""

    text: str
    span: Span = field(default=_NO_SPAN, compare=False)


@dataclass(frozen=True, slots=True)
class Placeholder:
    """A ``${key}`` reference, resolved through the caller's callback."""

    key: str
    span: Span = field(default=_NO_SPAN, compare=False)


Segment = Literal | Placeholder


@dataclass(frozen=True, slots=True)
class TemplateProgram:
    """Parsed template: literals interleaved with placeholders.

    A program with N placeholders holds 2N+1 segments, starting and ending
    with a (possibly empty) literal.
    """

    segments: tuple[Segment, ...]

    @property
    def placeholders(self) -> tuple[Placeholder, ...]:
        return tuple(s for s in self.segments if isinstance(s, Placeholder))

    @property
    def literals(self) -> tuple[Literal, ...]:
        return tuple(s for s in self.segments if isinstance(s, Literal))


def position_at(source: str, offset: int) -> Position:
    """Return the Position of a character offset within *source*."""
    line = source.count("\n", 0, offset) + 1
    line_start = source.rfind("\n", 0, offset) + 1
    return Position(line, offset - line_start + 1, offset)


def span_of(source: str, start: int, end: int) -> Span:
    """Return the Span covering ``source[start:end]``."""
    return Span(position_at(source, start), position_at(source, end))
