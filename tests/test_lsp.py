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

from barelang.lsp import _validate


@pytest.fixture
def lsp_env():
    """Create a LanguageServer with an initialized workspace and captured diagnostics."""
    ls = LanguageServer("test", "v0", text_document_sync_kind=TextDocumentSyncKind.Full)
    ws = Workspace(None)
    ls.protocol._workspace = ws

    published: list[PublishDiagnosticsParams] = []
    ls.text_document_publish_diagnostics = lambda params: published.append(params)

    def put(source: str, uri: str = "file:///test.bare") -> None:
        ws.put_text_document(
            TextDocumentItem(uri=uri, language_id="barelang", version=0, text=source)
        )

    return ls, published, put


# ---------------------------------------------------------------------------
# Lex errors → Error severity
# ---------------------------------------------------------------------------


class TestLexErrors:
    def test_single_bad_character(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("task foo # {}")
        _validate(ls, "file:///test.bare")

        assert len(published) == 1
        diags = published[0].diagnostics
        assert len(diags) == 1
        d = diags[0]
        assert d.severity == DiagnosticSeverity.Error
        assert "'#'" in d.message
        assert d.source == "barelang"
        # # is at column 10 (1-based) → character 9 (0-based)
        assert d.range.start.line == 0
        assert d.range.start.character == 9
        assert d.range.end.character == 10

    def test_every_bad_character_reported(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("task $ {\n  % }\n&")
        _validate(ls, "file:///test.bare")

        diags = published[0].diagnostics
        assert [(d.range.start.line, d.range.start.character) for d in diags] == [
            (0, 5),
            (1, 2),
            (2, 0),
        ]


# ---------------------------------------------------------------------------
# Clean document → empty diagnostics
# ---------------------------------------------------------------------------


class TestCleanDocument:
    def test_valid_document(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("task build {\n  task test {}\n}\n")
        _validate(ls, "file:///test.bare")

        assert len(published) == 1
        assert published[0].diagnostics == []

    def test_unbalanced_braces_are_not_diagnosed(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("task build {{")
        _validate(ls, "file:///test.bare")

        assert published[0].diagnostics == []


# ---------------------------------------------------------------------------
# Position conversion (1-based → 0-based)
# ---------------------------------------------------------------------------


class TestPositionConversion:
    def test_column_after_multibyte_character(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("é#")
        _validate(ls, "file:///test.bare")

        diags = published[0].diagnostics
        assert len(diags) == 2
        assert diags[1].range.start.character == 1

    def test_column_after_astral_character(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("{\U0001f600#")
        _validate(ls, "file:///test.bare")

        diags = published[0].diagnostics
        assert len(diags) == 2
        # U+1F600 is two UTF-16 code units wide
        assert (diags[0].range.start.character, diags[0].range.end.character) == (1, 3)
        assert (diags[1].range.start.character, diags[1].range.end.character) == (3, 4)

    def test_astral_character_on_earlier_line_does_not_shift(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("task \U0001f600\n  $")
        _validate(ls, "file:///test.bare")

        diags = published[0].diagnostics
        assert diags[1].range.start.line == 1
        assert diags[1].range.start.character == 2
