"""Source positions and positioned diagnostics."""

from __future__ import annotations

from pydantic import BaseModel


class SourceSpan(BaseModel):
    """Points to an exact location in Go source (1-based line, byte column)."""

    file: str
    line: int
    column: int
    end_line: int | None = None
    end_column: int | None = None

    def __str__(self) -> str:
        return f"{self.file}:{self.line}:{self.column}"


class Diagnostic(BaseModel):
    """A positioned message reported by an analysis pass."""

    span: SourceSpan
    message: str

    def __str__(self) -> str:
        return f"{self.span}: {self.message}"
