"""Minimal LSP server for barelang: diagnostics only."""

from __future__ import annotations

import logging

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer
from pygls.workspace import TextDocument

from barelang import __version__
from barelang.errors import LexError
from barelang.lexer import scan

logger = logging.getLogger(__name__)

server = LanguageServer("barelang-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full)


def _to_diagnostic(doc: TextDocument, exc: LexError) -> Diagnostic:
    line = exc.line() - 1
    col = exc.column() - 1
    # column() counts code points; the client counts in its position encoding.
    rng = Range(
        start=Position(line=line, character=col),
        end=Position(line=line, character=col + 1),
    )
    return Diagnostic(
        range=doc.position_codec.range_to_client_units(doc.lines, rng),
        message=exc.message,
        severity=DiagnosticSeverity.Error,
        source="barelang",
    )


def _validate(ls: LanguageServer, uri: str) -> None:
    """Lex the document and publish one diagnostic per unrecognized character."""
    doc = ls.workspace.get_text_document(uri)
    _, errors = scan(doc.source)
    logger.debug("%s: %d lexical errors", uri, len(errors))

    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=[_to_diagnostic(doc, e) for e in errors])
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
