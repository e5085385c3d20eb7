"""Pass-mode rendering of diagnostics as ``file:line:col: message`` lines."""

from __future__ import annotations

import sys
from typing import TextIO

from errauditor.models.errors import Diagnostic


class DiagnosticPrinter:
    """A ``report`` callable that prints each diagnostic as it arrives."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream or sys.stdout
        self.count = 0

    def __call__(self, diagnostic: Diagnostic) -> None:
        self.count += 1
        print(str(diagnostic), file=self._stream)
