"""Diagnostic computation for tinyclass documents.

Runs the compiler pipeline (lexer -> parser -> checker -> codegen) on source
text and converts the error that stopped it into an LSP Diagnostic.
"""

from dataclasses import dataclass, field
from typing import Optional

from lsprotocol import types as lsp

from ..ast_nodes import Program
from ..checker import ClassInfo
from ..pipeline import compile_source
from ..tokens import Token


@dataclass
class AnalysisResult:
    """Result of analyzing a document."""

    uri: str
    source: str
    diagnostics: list[lsp.Diagnostic] = field(default_factory=list)
    tokens: Optional[list[Token]] = None
    ast: Optional[Program] = None
    classes: dict[str, ClassInfo] = field(default_factory=dict)


def _make_diagnostic(
    line: int,
    col: int,
    message: str,
    severity: lsp.DiagnosticSeverity = lsp.DiagnosticSeverity.Error,
    source: str = "tinyclass",
) -> lsp.Diagnostic:
    """Create an LSP Diagnostic.

    tinyclass uses 1-based line/col; LSP uses 0-based.
    """
    line_0 = max(0, line - 1)
    col_0 = max(0, col - 1)
    return lsp.Diagnostic(
        range=lsp.Range(
            start=lsp.Position(line=line_0, character=col_0),
            end=lsp.Position(line=line_0, character=col_0 + 1),
        ),
        message=message,
        severity=severity,
        source=source,
    )


def compute_diagnostics(uri: str, source: str) -> AnalysisResult:
    """Run the compiler pipeline and return diagnostics."""
    compiled = compile_source(source)
    result = AnalysisResult(
        uri=uri,
        source=source,
        tokens=compiled.tokens,
        ast=compiled.program,
        classes=compiled.classes,
    )
    if compiled.error is not None:
        err = compiled.error
        result.diagnostics.append(_make_diagnostic(err.line, err.col, err.message))
    return result
