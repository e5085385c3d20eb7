"""Classification outcomes and the aggregated audit result."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel

from errauditor.models.errors import SourceSpan


class ErrorType(StrEnum):
    ERROR = "Error"
    DEFAULT = "Default"


class SiteKind(StrEnum):
    """Shape of the expression filling the error result of a return."""

    CALL = "call"
    SELECTOR = "selector"
    NONE = "none"


class ReturnSite(BaseModel):
    """A discovered ``return`` statement and how its error value was classified."""

    span: SourceSpan | None = None
    expr_span: SourceSpan | None = None  # None when the arity is too short
    kind: SiteKind = SiteKind.NONE
    descriptor: str = ""
    member_access: bool = False  # a selector, or a call through one


class ErrorOrigin(BaseModel):
    """All error descriptors found in one function, in source order."""

    func: str
    span: SourceSpan | None = None
    descriptors: list[str] = []


class AuditResult(BaseModel):
    """Accumulates error origins across the files of one run."""

    origins: list[ErrorOrigin] = []

    def add(self, origin: ErrorOrigin) -> None:
        self.origins.append(origin)

    def merge(self, other: AuditResult) -> None:
        self.origins.extend(other.origins)
