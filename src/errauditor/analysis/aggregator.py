"""Collecting sink: builds ``ErrorOrigin`` entries into an ``AuditResult``."""

from __future__ import annotations

from errauditor.analysis.walker import walk_file
from errauditor.ast.nodes import FuncDecl, SourceFile
from errauditor.models.findings import AuditResult, ErrorOrigin, ReturnSite


class Aggregator:
    """Records one ``ErrorOrigin`` per function that yields at least one descriptor."""

    def __init__(self, result: AuditResult | None = None) -> None:
        self._result = result if result is not None else AuditResult()
        self._descriptors: list[str] = []

    @property
    def result(self) -> AuditResult:
        return self._result

    def begin_function(self, decl: FuncDecl, error_index: int) -> None:
        self._descriptors = []

    def return_site(self, decl: FuncDecl, site: ReturnSite) -> None:
        if site.descriptor:
            self._descriptors.append(site.descriptor)

    def end_function(self, decl: FuncDecl) -> None:
        if self._descriptors:
            self._result.add(
                ErrorOrigin(func=decl.name, span=decl.span, descriptors=self._descriptors)
            )
        self._descriptors = []

    def aggregate(self, source: SourceFile) -> AuditResult:
        walk_file(source, self)
        return self._result


def aggregate(source: SourceFile, result: AuditResult | None = None) -> AuditResult:
    """Audit one file, appending to ``result`` when given."""
    return Aggregator(result).aggregate(source)
