"""Console and diagnostic reporters."""

from errauditor.report.console import ConsoleReporter, format_origin
from errauditor.report.diagnostics import DiagnosticPrinter

__all__ = [
    "ConsoleReporter",
    "DiagnosticPrinter",
    "format_origin",
]
