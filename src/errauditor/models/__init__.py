"""Pydantic domain models for errauditor."""

from errauditor.models.errors import Diagnostic, SourceSpan
from errauditor.models.findings import AuditResult, ErrorOrigin, ErrorType, ReturnSite, SiteKind

__all__ = [
    "AuditResult",
    "Diagnostic",
    "ErrorOrigin",
    "ErrorType",
    "ReturnSite",
    "SiteKind",
    "SourceSpan",
]
