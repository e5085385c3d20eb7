"""Converts tree-sitter Go trees into errauditor nodes."""

from __future__ import annotations

from typing import Any

from errauditor.ast.nodes import (
    BasicLit,
    CallExpr,
    Field,
    FuncDecl,
    FuncType,
    Ident,
    Node,
    Other,
    ReturnStmt,
    SelectorExpr,
    SourceFile,
)
from errauditor.models.errors import SourceSpan

# tree-sitter-go node types that map onto Go's *ast.Ident.
_IDENT_KINDS = frozenset(
    {
        "identifier",
        "type_identifier",
        "package_identifier",
        "field_identifier",
        "nil",
        "true",
        "false",
        "iota",
    }
)

# tree-sitter-go literal node types -> Go token kind of *ast.BasicLit.
_LITERAL_KINDS: dict[str, str] = {
    "interpreted_string_literal": "STRING",
    "raw_string_literal": "STRING",
    "int_literal": "INT",
    "float_literal": "FLOAT",
    "imaginary_literal": "IMAG",
    "rune_literal": "CHAR",
}

_FUNC_KINDS = frozenset({"function_declaration", "method_declaration"})


def _text(node: Any) -> str:
    if node is None:
        return ""
    return node.text.decode("utf-8", errors="replace")


def _named(node: Any) -> list[Any]:
    if node is None:
        return []
    return [c for c in node.named_children if c.type != "comment"]


def _result_list(node: Any) -> Any:
    return next((c for c in _named(node) if c.type == "expression_list"), None)


class TreeConverter:
    """Builds a ``SourceFile`` from a tree-sitter tree of one Go file."""

    def __init__(self, filename: str) -> None:
        self._filename = filename

    def convert_file(self, tree: Any) -> SourceFile:
        root = tree.root_node
        package = ""
        decls: list[Node] = []
        for child in _named(root):
            if child.type == "package_clause":
                package = _text(_named(child)[0]) if _named(child) else ""
                continue
            decls.append(self.convert(child))
        return SourceFile(path=self._filename, package=package, decls=tuple(decls))

    def span(self, node: Any) -> SourceSpan:
        (row, col), (end_row, end_col) = node.start_point, node.end_point
        return SourceSpan(
            file=self._filename,
            line=row + 1,
            column=col + 1,
            end_line=end_row + 1,
            end_column=end_col + 1,
        )

    def convert(self, node: Any) -> Node:
        """Convert ``node`` and everything beneath it without recursing.

        Nodes are listed in pre-order, then built in reverse so every child
        exists before its parent is assembled.
        """
        order: list[Any] = []
        stack = [node]
        while stack:
            current = stack.pop()
            order.append(current)
            stack.extend(self._operands(current))
        built: dict[int, Node] = {}
        for current in reversed(order):
            built[current.id] = self._assemble(current, built)
        return built[node.id]

    def _operands(self, node: Any) -> list[Any]:
        kind = node.type
        if kind in _IDENT_KINDS or kind in _LITERAL_KINDS or kind in _FUNC_KINDS:
            return []
        if kind == "selector_expression":
            operands = [node.child_by_field_name("operand")]
        elif kind == "call_expression":
            operands = [
                node.child_by_field_name("function"),
                *_named(node.child_by_field_name("arguments")),
            ]
        elif kind == "return_statement":
            operands = _named(_result_list(node))
        else:
            operands = _named(node)
        return [o for o in operands if o is not None]

    def _assemble(self, node: Any, built: dict[int, Node]) -> Node:
        kind = node.type

        def get(child: Any) -> Node:
            if child is None:
                return Other(kind="missing", span=self.span(node))
            return built[child.id]

        if kind in _IDENT_KINDS:
            return Ident(name=_text(node), span=self.span(node))
        if kind in _LITERAL_KINDS:
            return BasicLit(kind=_LITERAL_KINDS[kind], value=_text(node), span=self.span(node))
        if kind == "selector_expression":
            return SelectorExpr(
                operand=get(node.child_by_field_name("operand")),
                sel=_text(node.child_by_field_name("field")),
                span=self.span(node),
            )
        if kind == "call_expression":
            args = node.child_by_field_name("arguments")
            return CallExpr(
                fun=get(node.child_by_field_name("function")),
                args=tuple(get(a) for a in _named(args)),
                span=self.span(node),
            )
        if kind == "return_statement":
            return ReturnStmt(
                results=tuple(get(e) for e in _named(_result_list(node))),
                span=self.span(node),
            )
        if kind in _FUNC_KINDS:
            return self._convert_func(node)
        return Other(
            kind=kind,
            children=tuple(get(c) for c in _named(node)),
            span=self.span(node),
        )

    def _convert_func(self, node: Any) -> FuncDecl:
        body = node.child_by_field_name("body")
        receiver = node.child_by_field_name("receiver")
        return FuncDecl(
            name=_text(node.child_by_field_name("name")),
            type=FuncType(
                params=self._fields(node.child_by_field_name("parameters")),
                results=self._results(node.child_by_field_name("result")),
            ),
            body=self.convert(body) if body is not None else None,
            span=self.span(node),
            receiver=_text(receiver) if receiver is not None else None,
        )

    def _results(self, node: Any) -> tuple[Field, ...] | None:
        if node is None:
            return None
        if node.type == "parameter_list":
            return self._fields(node)
        # A single unparenthesized result type: func f() error
        return (Field(type=self.convert(node)),)

    def _fields(self, node: Any) -> tuple[Field, ...]:
        fields: list[Field] = []
        for decl in _named(node):
            names = tuple(_text(n) for n in decl.children_by_field_name("name"))
            type_node = decl.child_by_field_name("type")
            type_: Node = (
                self.convert(type_node)
                if type_node is not None
                else Other(kind="missing_type", span=self.span(decl))
            )
            if decl.type == "variadic_parameter_declaration":
                type_ = Other(kind="variadic", children=(type_,), span=self.span(decl))
            fields.append(Field(type=type_, names=names))
        return tuple(fields)
