"""Minimal LSP server for COOL sources: lexical diagnostics only."""

from __future__ import annotations

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

from coollex import __version__
from coollex.errors import LexDiagnostic
from coollex.lexer import Lexer

server = LanguageServer(
    "coollex-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full
)


def _utf16_column(text: str, column: int) -> int:
    """Return the UTF-16 code unit offset of code point *column* in *text*."""
    return len(text[:column].encode("utf-16-le")) // 2


def to_lsp_diagnostic(diag: LexDiagnostic, source: str) -> Diagnostic:
    """Convert a 1-based lexer diagnostic into a 0-based LSP diagnostic.

    LSP positions count UTF-16 code units, so columns are re-measured
    against the text of the diagnostic's line.
    """
    line = diag.position.line - 1
    lines = source.split("\n")
    text = lines[line] if line < len(lines) else ""
    col = diag.position.column - 1
    start = _utf16_column(text, col)
    end = start + _utf16_column(text[col:], diag.length)
    if end == start:
        end = start + diag.length
    return Diagnostic(
        range=Range(
            start=Position(line=line, character=start),
            end=Position(line=line, character=end),
        ),
        message=diag.message,
        severity=DiagnosticSeverity.Error,
        source="coollex",
        code=diag.kind.name,
    )


def _validate(ls: LanguageServer, uri: str) -> None:
    """Scan the document and publish its lexical diagnostics."""
    doc = ls.workspace.get_text_document(uri)
    lexer = Lexer(doc.source)
    lexer.tokenize()

    diagnostics = [to_lsp_diagnostic(d, doc.source) for d in lexer.diagnostics]
    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
