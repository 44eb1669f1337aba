from __future__ import annotations

"""
A minimal pygls-based Language Server for mexpr.

Features:
- Text synchronization (documents are kept by pygls' workspace)
- Diagnostics: parse errors, identifiers no builtin binds
- Hover: builtin signatures
- Completion: builtins and identifiers already used in the document

Note: We never evaluate the buffer. Each line is indexed statically.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from lsprotocol.types import (
    TEXT_DOCUMENT_COMPLETION,
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_CLOSE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_HOVER,
    CompletionItem,
    CompletionItemKind,
    CompletionList,
    CompletionOptions,
    CompletionParams,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    Hover,
    HoverParams,
    MarkupContent,
    MarkupKind,
    Position,
    Range,
)
from pygls.server import LanguageServer

from mexpr import __version__
from mexpr.reader.tokens import SINGLE_CHAR_KINDS
from mexpr_lsp.indexer import BUILTIN_SIGNATURES, DocumentIndex, build_index, known_names


logger = logging.getLogger(__name__)


@dataclass
class DocumentState:
    text: str
    index: DocumentIndex


class MexprLanguageServer(LanguageServer):
    CMD_NAME = "mexpr-ls"

    def __init__(self):
        super().__init__(self.CMD_NAME, __version__)
        self.documents: Dict[str, DocumentState] = {}
        self.known = known_names()

    def reindex(self, uri: str) -> DocumentState:
        text = self.workspace.get_text_document(uri).source
        state = DocumentState(text=text, index=build_index(text, self.known))
        self.documents[uri] = state
        logger.debug("indexed %s: %d errors, %d unbound", uri,
                     len(state.index.errors), len(state.index.unbound))
        return state


ls = MexprLanguageServer()


# --- Text sync ---
@ls.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: MexprLanguageServer, params: DidOpenTextDocumentParams):
    uri = params.text_document.uri
    state = ls.reindex(uri)
    ls.publish_diagnostics(uri, build_diagnostics(state.index))


@ls.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: MexprLanguageServer, params: DidChangeTextDocumentParams):
    uri = params.text_document.uri
    state = ls.reindex(uri)
    ls.publish_diagnostics(uri, build_diagnostics(state.index))


@ls.feature(TEXT_DOCUMENT_DID_CLOSE)
def did_close(ls: MexprLanguageServer, params: DidCloseTextDocumentParams):
    uri = params.text_document.uri
    ls.documents.pop(uri, None)
    ls.publish_diagnostics(uri, [])


# --- Diagnostics ---
def _mk_range(line: int, col: int, length: int) -> Range:
    return Range(start=Position(line=line, character=col), end=Position(line=line, character=col + length))


def build_diagnostics(idx: DocumentIndex) -> List[Diagnostic]:
    diags: List[Diagnostic] = []
    for problem in idx.errors:
        diags.append(
            Diagnostic(
                range=_mk_range(problem.line, problem.col, problem.length),
                message=problem.message,
                severity=DiagnosticSeverity.Error,
                source=MexprLanguageServer.CMD_NAME,
            )
        )
    for use in idx.unbound:
        diags.append(
            Diagnostic(
                range=_mk_range(use.line, use.col, len(use.name)),
                message=f'"{use.name}" is not bound by any builtin',
                severity=DiagnosticSeverity.Information,
                source=MexprLanguageServer.CMD_NAME,
            )
        )
    return diags


# --- Hover ---
@ls.feature(TEXT_DOCUMENT_HOVER)
def on_hover(ls: MexprLanguageServer, params: HoverParams) -> Optional[Hover]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None
    word = extract_word_at(state.text, params.position.line, params.position.character)
    if word not in BUILTIN_SIGNATURES:
        return None
    return Hover(contents=MarkupContent(kind=MarkupKind.PlainText, value=BUILTIN_SIGNATURES[word]))


# --- Completion ---
@ls.feature(TEXT_DOCUMENT_COMPLETION, CompletionOptions(trigger_characters=["(", ","]))
def on_completion(ls: MexprLanguageServer, params: CompletionParams) -> CompletionList:
    items: List[CompletionItem] = []
    for name in sorted(ls.known):
        if name in SINGLE_CHAR_KINDS:
            continue  # operators are typed, not completed
        items.append(CompletionItem(label=name, kind=CompletionItemKind.Function,
                                    detail=BUILTIN_SIGNATURES.get(name)))
    state = ls.documents.get(params.text_document.uri)
    if state:
        for name in sorted(state.index.names() - ls.known):
            items.append(CompletionItem(label=name, kind=CompletionItemKind.Variable))
    return CompletionList(is_incomplete=False, items=items)


# --- Helpers ---
def extract_word_at(text: str, line: int, character: int) -> Optional[str]:
    """Return the identifier or operator symbol under (line, character)."""
    lines = text.splitlines()
    if line >= len(lines):
        return None
    row = lines[line]
    if character < len(row) and row[character] in SINGLE_CHAR_KINDS:
        return row[character]
    start = character
    while start > 0 and (row[start - 1].isalnum() or row[start - 1] == "_"):
        start -= 1
    end = character
    while end < len(row) and (row[end].isalnum() or row[end] == "_"):
        end += 1
    return row[start:end] or None


def main():
    logging.basicConfig(level=logging.INFO)
    # Run the language server over stdio
    ls.start_io()


if __name__ == "__main__":
    main()
