"""Shared test fixtures for errauditor."""

from __future__ import annotations

from pathlib import Path

import pytest

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
from errauditor.models.errors import Diagnostic, SourceSpan
from errauditor.parser.loader import GoSourceLoader
from errauditor.service.auditor import ErrorAuditor

FIXTURES_DIR = Path(__file__).parent / "fixtures"
PROJECT_DIR = FIXTURES_DIR / "project"


@pytest.fixture
def loader() -> GoSourceLoader:
    return GoSourceLoader()


@pytest.fixture
def auditor() -> ErrorAuditor:
    return ErrorAuditor()


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's ERRAUDITOR_* environment out of the tests."""
    for name in ("LOG_LEVEL", "EXCLUDE", "JOBS", "COLOR"):
        monkeypatch.delenv(f"ERRAUDITOR_{name}", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


def parse(loader: GoSourceLoader, source: str, filename: str = "sample.go") -> SourceFile:
    return loader.load_string(source, filename)


def write_go(root: Path, relative: str, content: str) -> Path:
    """Write a Go file under ``root``, creating parent directories."""
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


class DiagnosticCollector:
    """A ``report`` callable that keeps diagnostics in emission order."""

    def __init__(self) -> None:
        self.diagnostics: list[Diagnostic] = []

    def __call__(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)


# Shorthand constructors for hand-built trees.

NOWHERE = SourceSpan(file="<test>", line=1, column=1)


def ident(name: str, span: SourceSpan = NOWHERE) -> Ident:
    return Ident(name=name, span=span)


def string_lit(value: str, span: SourceSpan = NOWHERE) -> BasicLit:
    """A double-quoted string literal from its unquoted contents."""
    return BasicLit(kind="STRING", value=f'"{value}"', span=span)


def int_lit(value: int, span: SourceSpan = NOWHERE) -> BasicLit:
    return BasicLit(kind="INT", value=str(value), span=span)


def sel(qualifier: str, name: str, span: SourceSpan = NOWHERE) -> SelectorExpr:
    """``qualifier.name``"""
    return SelectorExpr(operand=ident(qualifier, span), sel=name, span=span)


def call(fun: Node, *args: Node, span: SourceSpan = NOWHERE) -> CallExpr:
    return CallExpr(fun=fun, args=args, span=span)


def ret(*results: Node, span: SourceSpan = NOWHERE) -> ReturnStmt:
    return ReturnStmt(results=results, span=span)


def block(*stmts: Node, kind: str = "block") -> Other:
    return Other(kind=kind, children=stmts, span=NOWHERE)


def results(*types: str) -> tuple[Field, ...]:
    """Unnamed result fields from bare type names: ``results("int", "error")``."""
    return tuple(Field(type=ident(t)) for t in types)


def func_decl(
    name: str,
    result_fields: tuple[Field, ...] | None,
    *stmts: Node,
    span: SourceSpan = NOWHERE,
) -> FuncDecl:
    """A function declaration whose body holds ``stmts``."""
    return FuncDecl(name=name, type=FuncType(results=result_fields), body=block(*stmts), span=span)


# The end-to-end example: one wrapped call inside a conditional and one
# sentinel selected from another package.
WRAP_AND_SENTINEL_GO = """\
package sample

func F() error {
	e := NewError("x")
	if cond {
		return Wrap("msg: %s", e)
	}
	return apperrors.SentinelErr
}
"""

# Same as above, but the sentinel is a bare identifier.
BARE_SENTINEL_GO = """\
package sample

func F() error {
	e := NewError("x")
	if cond {
		return Wrap("msg: %s", e)
	}
	return SentinelErr
}
"""

NESTED_RETURNS_GO = """\
package sample

import (
	"errors"
	"fmt"
	"io"
)

func Process(items []string) (int, error) {
	for i, item := range items {
		switch item {
		case "eof":
			return i, io.EOF
		case "bad":
			if i > 3 {
				return i, fmt.Errorf("bad item at %d", i)
			}
		default:
			{
				return 0, errors.New(`raw message`)
			}
		}
	}
	return len(items), nil
}
"""

NAMED_RESULTS_GO = """\
package sample

import "errors"

func Parse(s string) (n, width int, err error) {
	if s == "" {
		err = errors.New("empty")
		return
	}
	if s == "?" {
		return 0, 0, errors.New("unknown", 42, 'c', 1.5, s)
	}
	return len(s), 1, nil
}
"""

NO_ERROR_GO = """\
package sample

type T struct{}

func Sum(a, b int) int {
	return a + b
}

func (t T) Name() string {
	return "t"
}

func Close() {
}

var ErrThing = errors.New("thing")
"""
