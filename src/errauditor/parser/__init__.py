"""Go parsing with source positions for errauditor."""

from errauditor.parser.loader import (
    GeneratedFileError,
    GoSourceLoader,
    GoSyntaxError,
    TargetError,
    UnreadableFileError,
    is_generated,
)

__all__ = [
    "GeneratedFileError",
    "GoSourceLoader",
    "GoSyntaxError",
    "TargetError",
    "UnreadableFileError",
    "is_generated",
]
