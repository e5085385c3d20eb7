"""Return-site discovery and classification of the returned error expression."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from errauditor.ast.nodes import (
    BasicLit,
    CallExpr,
    FuncDecl,
    Ident,
    Node,
    Other,
    ReturnStmt,
    SelectorExpr,
)
from errauditor.models.findings import ReturnSite, SiteKind

logger = logging.getLogger("errauditor.analysis")


def _children(node: Node) -> tuple[Node, ...]:
    match node:
        case Ident() | BasicLit():
            return ()
        case SelectorExpr(operand=operand):
            return (operand,)
        case CallExpr(fun=fun, args=args):
            return (fun, *args)
        case ReturnStmt(results=results):
            return results
        case Other(children=children):
            return children
        case FuncDecl(body=body):
            return (body,) if body is not None else ()


def iter_returns(body: Node | None) -> Iterator[ReturnStmt]:
    """Yield every ``return`` under ``body``, depth-first in source order.

    Descends into every nested construct, function literals included.
    """
    if body is None:
        return
    stack: list[Node] = [body]
    while stack:
        node = stack.pop()
        if isinstance(node, ReturnStmt):
            yield node
        stack.extend(reversed(_children(node)))


def literal_args(args: tuple[Node, ...]) -> str:
    """Concatenate the literal arguments, each followed by a comma.

    Non-literal arguments are dropped: ``("x: %w", err)`` gives ``"x: %w",``.
    """
    return "".join(f"{arg.value}," for arg in args if isinstance(arg, BasicLit))


def describe(expr: Node) -> tuple[SiteKind, str]:
    """Classify a returned error expression and build its descriptor."""
    match expr:
        case CallExpr(fun=SelectorExpr(sel=name), args=args):
            return SiteKind.CALL, f"{name}({literal_args(args)})"
        case CallExpr(fun=Ident(name=name), args=args):
            return SiteKind.CALL, f"{name}({literal_args(args)})"
        case SelectorExpr(sel=name):
            return SiteKind.SELECTOR, f"{name}()"
        case _:
            return SiteKind.NONE, ""


def is_member_access(expr: Node) -> bool:
    match expr:
        case SelectorExpr() | CallExpr(fun=SelectorExpr()):
            return True
        case _:
            return False


class ReturnSiteExtractor:
    """Classifies the error result of every return statement in a function body."""

    def __init__(self, error_index: int) -> None:
        if error_index < 0:
            raise ValueError(f"error_index must be non-negative, got {error_index}")
        self._index = error_index

    @property
    def error_index(self) -> int:
        return self._index

    def iter_sites(self, body: Node | None) -> Iterator[ReturnSite]:
        for stmt in iter_returns(body):
            if len(stmt.results) <= self._index:
                # Naked return or a single multi-value call: nothing to classify.
                logger.debug(
                    "return at %s has %d result(s), error index is %d; skipped",
                    stmt.span,
                    len(stmt.results),
                    self._index,
                )
                yield ReturnSite(span=stmt.span, kind=SiteKind.NONE)
                continue
            expr = stmt.results[self._index]
            kind, descriptor = describe(expr)
            yield ReturnSite(
                span=stmt.span,
                expr_span=expr.span,
                kind=kind,
                descriptor=descriptor,
                member_access=is_member_access(expr),
            )

    def extract(self, body: Node | None) -> list[ReturnSite]:
        return list(self.iter_sites(body))


def extract_descriptors(body: Node | None, error_index: int) -> list[str]:
    """Ordered non-empty descriptors for one function body."""
    sites = ReturnSiteExtractor(error_index).iter_sites(body)
    return [site.descriptor for site in sites if site.descriptor]
