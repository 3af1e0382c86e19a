"""--debug dumps of word segmentation and template programs to stderr."""

from __future__ import annotations

import sys
from typing import TextIO

from casekit.charclass import classify, detect
from casekit.segments import Literal, Placeholder, Span, TemplateProgram
from casekit.words import words


def dump_words(text: str, *, file: TextIO = sys.stderr) -> None:
    """Print the selected matcher and the resulting words to *file*."""
    tokens = words(text)
    kind = detect(text).name if text else "NONE"
    file.write(f"Words matcher={kind} count={len(tokens)}\n")
    for i, token in enumerate(tokens):
        classes = " ".join(classify(ch).name for ch in token)
        file.write(f"{_indent(1)}[{i}] {token!r} {classes}\n")


def dump_program(program: TemplateProgram, *, file: TextIO = sys.stderr) -> None:
    """Print a human-readable segment listing to *file*."""
    file.write(f"TemplateProgram segments={len(program.segments)}\n")
    for seg in program.segments:
        if isinstance(seg, Literal):
            file.write(f"{_indent(1)}Literal({seg.text!r}) {_span(seg.span)}\n")
        elif isinstance(seg, Placeholder):
            file.write(f"{_indent(1)}Placeholder({seg.key!r}) {_span(seg.span)}\n")


def _indent(depth: int) -> str:
    return "  " * depth


def _span(span: Span) -> str:
    return f"@{span.start.line}:{span.start.column}-{span.end.line}:{span.end.column}"
