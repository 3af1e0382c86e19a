"""Shared test fixtures and helpers."""

from __future__ import annotations

import io

import pytest

from casekit.segments import Literal, Placeholder, TemplateProgram
from casekit.template import parse_template


@pytest.fixture
def structure():
    """Return a helper that parses a template into (kind, text) pairs."""

    def _structure(source: str) -> list[tuple[str, str]]:
        program = parse_template(source)
        return [
            ("lit", s.text) if isinstance(s, Literal) else ("key", s.key)
            for s in program.segments
        ]

    return _structure


@pytest.fixture
def stream():
    """Return a fresh text stream for dump output."""
    return io.StringIO()


@pytest.fixture
def write_template(tmp_path):
    """Return a helper that writes a template file and returns its path."""

    def _write(source: str, name: str = "greeting.tmpl"):
        path = tmp_path / name
        path.write_text(source, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def program_of():
    """Return a helper building a program from alternating literal/key strings."""

    def _program_of(*parts: str) -> TemplateProgram:
        return TemplateProgram(
            tuple(Literal(p) if i % 2 == 0 else Placeholder(p) for i, p in enumerate(parts))
        )

    return _program_of
