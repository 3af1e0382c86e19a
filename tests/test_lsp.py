"""Tests for the LSP server: diagnostic generation."""

from __future__ import annotations

import pytest
from lsprotocol.types import (
    DiagnosticSeverity,
    PublishDiagnosticsParams,
    TextDocumentItem,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer
from pygls.workspace import Workspace

from casekit.lsp import _validate


@pytest.fixture
def lsp_env():
    """Create a LanguageServer with an initialized workspace and captured diagnostics."""
    ls = LanguageServer("test", "v0", text_document_sync_kind=TextDocumentSyncKind.Full)
    ws = Workspace(None)
    ls.protocol._workspace = ws

    published: list[PublishDiagnosticsParams] = []
    ls.text_document_publish_diagnostics = lambda params: published.append(params)

    def put(source: str, uri: str = "file:///test.tmpl") -> None:
        ws.put_text_document(
            TextDocumentItem(uri=uri, language_id="casekit-template", version=0, text=source)
        )

    return ls, published, put


# ---------------------------------------------------------------------------
# Malformed placeholders → Warning severity
# ---------------------------------------------------------------------------


class TestMalformed:
    def test_unterminated(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("Hello ${name")
        _validate(ls, "file:///test.tmpl")

        assert len(published) == 1
        diags = published[0].diagnostics
        assert len(diags) == 1
        d = diags[0]
        assert d.severity == DiagnosticSeverity.Warning
        assert d.message == "unterminated placeholder"
        assert d.source == "casekit"
        # ${ is at column 7 (1-based) → character 6 (0-based)
        assert d.range.start.line == 0
        assert d.range.start.character == 6
        assert d.range.end.character == 8

    def test_several_issues(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("${a b} and ${ }")
        _validate(ls, "file:///test.tmpl")

        messages = [d.message for d in published[0].diagnostics]
        assert messages == ["invalid placeholder key 'a b'", "empty placeholder"]


# ---------------------------------------------------------------------------
# Clean document → empty diagnostics
# ---------------------------------------------------------------------------


class TestCleanDocument:
    def test_valid_template(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("Dear ${ name },\n\nThanks for ${item}.")
        _validate(ls, "file:///test.tmpl")

        assert len(published) == 1
        assert published[0].diagnostics == []


# ---------------------------------------------------------------------------
# Position conversion (1-based → 0-based)
# ---------------------------------------------------------------------------


class TestPositionConversion:
    def test_issue_on_second_line(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("Valid ${first} line\n${;oops}")
        _validate(ls, "file:///test.tmpl")

        diags = published[0].diagnostics
        assert len(diags) == 1
        d = diags[0]
        assert d.range.start.line == 1
        assert d.range.start.character == 0
        assert d.range.end.character == 8
