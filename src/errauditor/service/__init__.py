"""Run orchestration for errauditor."""

from errauditor.service.auditor import ErrorAuditor
from errauditor.service.targets import ConfigurationError, PackageResolver

__all__ = [
    "ConfigurationError",
    "ErrorAuditor",
    "PackageResolver",
]
