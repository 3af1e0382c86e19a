"""Error types with formatted source context."""

from __future__ import annotations

from casekit.segments import Span


class InvalidArgument(ValueError):
    """Raised when an argument violates an operation's precondition."""


class TemplateError(Exception):
    """Raised when a template fails validation.

    ``str()`` of the error shows the offending line with the span underlined.
    """

    def __init__(self, message: str, span: Span, source: str) -> None:
        self.message = message
        self.span = span
        self.source = source
        super().__init__(self.format())

    def format(self, filename: str = "<template>") -> str:
        start, end = self.span.start, self.span.end
        text = _line_text(self.source, start.line)
        # Spans reaching past the line (unterminated placeholders) stop at its end
        stop = end.column if end.line == start.line else len(text) + 1
        marker = " " * (start.column - 1) + "^" * max(1, stop - start.column)

        number = str(start.line)
        margin = " " * len(number)
        return "\n".join(
            [
                f"error: {self.message}",
                f"{margin} --> {filename}:{start.line}:{start.column}",
                f"{margin} |",
                f"{number} | {text}",
                f"{margin} | {marker}",
            ]
        )


def _line_text(source: str, line: int) -> str:
    """Return 1-based *line* of *source* without its line ending."""
    lines = source.split("\n")
    if 0 < line <= len(lines):
        return lines[line - 1].rstrip("\r")
    return ""
