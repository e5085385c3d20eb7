"""Immutable Go syntax nodes. Only the shapes the error audit cares about are modelled."""

from __future__ import annotations

from dataclasses import dataclass, field

from errauditor.models.errors import SourceSpan


@dataclass(frozen=True)
class Ident:
    """A bare identifier: ``err``, ``error``, ``nil``, ``true``."""

    name: str
    span: SourceSpan


@dataclass(frozen=True)
class BasicLit:
    """A literal of a basic type. ``value`` is the raw source text, quotes included."""

    kind: str  # STRING, INT, FLOAT, IMAG, CHAR
    value: str
    span: SourceSpan


@dataclass(frozen=True)
class SelectorExpr:
    """Member access through a qualifier: ``apperrors.ErrNotFound``."""

    operand: Node
    sel: str
    span: SourceSpan


@dataclass(frozen=True)
class CallExpr:
    """A call: ``fmt.Errorf("x: %w", err)``."""

    fun: Node
    args: tuple[Node, ...] = ()
    span: SourceSpan | None = None


@dataclass(frozen=True)
class ReturnStmt:
    """A ``return`` statement with its positional result expressions."""

    results: tuple[Node, ...] = ()
    span: SourceSpan | None = None


@dataclass(frozen=True)
class Other:
    """Any construct not modelled above (blocks, if/for/switch, literals of composite type, ...).

    Children are kept in source order so traversals can descend through it.
    """

    kind: str
    children: tuple[Node, ...] = ()
    span: SourceSpan | None = None


@dataclass(frozen=True)
class Field:
    """One entry of a parameter or result list: ``a, b int`` or a bare ``error``."""

    type: Node
    names: tuple[str, ...] = ()

    @property
    def width(self) -> int:
        """Number of positional values this field occupies."""
        return max(1, len(self.names))


@dataclass(frozen=True)
class FuncType:
    params: tuple[Field, ...] = ()
    results: tuple[Field, ...] | None = None


@dataclass(frozen=True)
class FuncDecl:
    """A top-level function or method declaration."""

    name: str
    type: FuncType | None
    body: Node | None
    span: SourceSpan
    receiver: str | None = None


# The union of all node types.
Node = Ident | BasicLit | SelectorExpr | CallExpr | ReturnStmt | Other | FuncDecl


@dataclass(frozen=True)
class SourceFile:
    """A parsed Go file: its package name and top-level declarations in order."""

    path: str
    package: str
    decls: tuple[Node, ...] = field(default_factory=tuple)

    @property
    def functions(self) -> list[FuncDecl]:
        return [d for d in self.decls if isinstance(d, FuncDecl)]
