"""Declaration walk shared by every audit mode.

The walker classifies each top-level function and, for the ones returning an
``error``, streams their return sites into an ``AuditSink``. Collecting a
result and emitting diagnostics are just two sinks over the same traversal.
"""

from __future__ import annotations

from typing import Protocol

from errauditor.analysis.classifier import classify_function
from errauditor.analysis.extractor import ReturnSiteExtractor
from errauditor.ast.nodes import FuncDecl, SourceFile
from errauditor.models.findings import ErrorType, ReturnSite


class AuditSink(Protocol):
    """Receives walker events for functions that declare an error result."""

    def begin_function(self, decl: FuncDecl, error_index: int) -> None: ...

    def return_site(self, decl: FuncDecl, site: ReturnSite) -> None: ...

    def end_function(self, decl: FuncDecl) -> None: ...


def walk_file(source: SourceFile, sink: AuditSink) -> None:
    """Feed every qualifying function of ``source`` into ``sink``, in declaration order."""
    for decl in source.decls:
        match decl:
            case FuncDecl(type=func_type):
                error_type, index = classify_function(func_type)
                if error_type is not ErrorType.ERROR or index == -1:
                    continue
                sink.begin_function(decl, index)
                for site in ReturnSiteExtractor(index).iter_sites(decl.body):
                    sink.return_site(decl, site)
                sink.end_function(decl)
            case _:
                continue
