"""Function classification: does a signature declare an ``error`` result, and where."""

from __future__ import annotations

from errauditor.ast.nodes import FuncType, Ident
from errauditor.models.findings import ErrorType

# Go's predeclared error interface, matched by name only.
ERROR_TYPE_NAME = "error"


def classify_function(func_type: FuncType | None) -> tuple[ErrorType, int]:
    """Return ``(ERROR, index)`` for the first ``error`` result, else ``(DEFAULT, -1)``.

    The index is positional over result values, so in ``(a, b int, err error)``
    ``err`` sits at index 2. Only the first error-typed result is reported.
    """
    if func_type is None or not func_type.results:
        return ErrorType.DEFAULT, -1

    position = 0
    for result in func_type.results:
        match result.type:
            case Ident(name=name) if name == ERROR_TYPE_NAME:
                return ErrorType.ERROR, position
        position += result.width
    return ErrorType.DEFAULT, -1
