"""Pass mode: report returned errors as positioned diagnostics.

An ``Analyzer`` is run once per ``AnalysisPass`` (the files of one package).
Nothing is returned; everything is reported through ``pass_.report``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from errauditor.analysis.walker import walk_file
from errauditor.ast.nodes import FuncDecl, SourceFile
from errauditor.models.errors import Diagnostic
from errauditor.models.findings import ReturnSite

logger = logging.getLogger("errauditor.analysis")


@dataclass
class AnalysisPass:
    """One invocation of an analyzer over a set of parsed files."""

    files: list[SourceFile]
    report: Callable[[Diagnostic], None]
    package: str = ""


@dataclass(frozen=True)
class Analyzer:
    name: str
    doc: str
    run: Callable[[AnalysisPass], None]


class DiagnosticSink:
    """Direct-emit sink.

    The function diagnostic is emitted as soon as the function qualifies,
    before it is known whether any return site carries a descriptor. Return
    sites are reported only for member access: ``pkg.Err`` or ``pkg.New(...)``.
    """

    def __init__(self, report: Callable[[Diagnostic], None]) -> None:
        self._report = report

    def begin_function(self, decl: FuncDecl, error_index: int) -> None:
        self._report(Diagnostic(span=decl.span, message=f" -- {decl.name}() ---"))

    def return_site(self, decl: FuncDecl, site: ReturnSite) -> None:
        if not site.member_access or site.expr_span is None:
            return
        self._report(Diagnostic(span=site.expr_span, message=f"-- {site.descriptor} --"))

    def end_function(self, decl: FuncDecl) -> None:
        pass


def run(pass_: AnalysisPass) -> None:
    logger.debug("errorlysis: package %s, %d file(s)", pass_.package or "?", len(pass_.files))
    sink = DiagnosticSink(pass_.report)
    for source in pass_.files:
        walk_file(source, sink)


analyzer = Analyzer(name="errorlysis", doc="Reports returned errors", run=run)

