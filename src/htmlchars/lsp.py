"""Minimal LSP server for htmlchars — input-stream diagnostics only."""

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

from htmlchars import __version__
from htmlchars.scanner import (
    SURROGATE_IN_INPUT_STREAM,
    UNEXPECTED_NULL_CHARACTER,
    Finding,
    scan,
)

server = LanguageServer("htmlchars-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full)

_ERROR_CODES = frozenset({SURROGATE_IN_INPUT_STREAM, UNEXPECTED_NULL_CHARACTER})


def _utf16_len(text: str) -> int:
    return sum(2 if ord(ch) > 0xFFFF else 1 for ch in text)


def _to_diagnostic(finding: Finding, source: str) -> Diagnostic:
    # LSP characters are UTF-16 code units, scanner columns are code points
    pos = finding.position
    line = pos.line - 1
    line_prefix = source[pos.offset - (pos.column - 1) : pos.offset]
    col = _utf16_len(line_prefix)
    width = 2 if finding.code_point > 0xFFFF else 1
    if finding.code in _ERROR_CODES:
        severity = DiagnosticSeverity.Error
    else:
        severity = DiagnosticSeverity.Warning
    return Diagnostic(
        range=Range(
            start=Position(line=line, character=col),
            end=Position(line=line, character=col + width),
        ),
        message=finding.message,
        severity=severity,
        code=finding.code,
        source="htmlchars",
    )


def _validate(ls: LanguageServer, uri: str) -> None:
    """Scan the document and publish one diagnostic per finding."""
    doc = ls.workspace.get_text_document(uri)
    diagnostics = [_to_diagnostic(f, doc.source) for f in scan(doc.source)]
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
