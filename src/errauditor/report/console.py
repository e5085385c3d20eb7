"""Standalone-mode rendering: one header per function, one line per descriptor."""

from __future__ import annotations

import os
import sys
from typing import TextIO

from errauditor.models.findings import AuditResult, ErrorOrigin

RESET = "\033[0m"
WHITE = "\033[37m"
RED = "\033[31m"


def color_enabled(stream: TextIO, requested: bool | None = None) -> bool:
    """Explicit request wins; otherwise color only on a TTY without NO_COLOR."""
    if requested is not None:
        return requested
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def format_origin(origin: ErrorOrigin) -> list[str]:
    """Plain-text lines for one origin, header first."""
    lines = [f"{origin.span}  {origin.func}"]
    lines.extend(f"---{descriptor} " for descriptor in origin.descriptors)
    return lines


class ConsoleReporter:
    def __init__(self, stream: TextIO | None = None, color: bool | None = None) -> None:
        self._stream = stream or sys.stdout
        self._color = color_enabled(self._stream, color)

    def _paint(self, text: str, code: str) -> str:
        return f"{code}{text}{RESET}" if self._color else text

    def render_origin(self, origin: ErrorOrigin) -> None:
        header, *descriptors = format_origin(origin)
        print(self._paint(header, WHITE), file=self._stream)
        for line in descriptors:
            print(self._paint(line, RED), file=self._stream)

    def render(self, result: AuditResult) -> None:
        for origin in result.origins:
            self.render_origin(origin)
