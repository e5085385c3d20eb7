"""Tests for function classification."""

from __future__ import annotations

import pytest

from errauditor.analysis.classifier import classify_function
from errauditor.ast.nodes import Field, FuncType, Other
from errauditor.models.findings import ErrorType
from errauditor.parser.loader import GoSourceLoader
from tests.conftest import NAMED_RESULTS_GO, NO_ERROR_GO, ident, parse, results, sel


class TestClassifyFunction:
    def test_none_signature(self) -> None:
        assert classify_function(None) == (ErrorType.DEFAULT, -1)

    def test_no_results(self) -> None:
        assert classify_function(FuncType()) == (ErrorType.DEFAULT, -1)

    def test_empty_result_list(self) -> None:
        assert classify_function(FuncType(results=())) == (ErrorType.DEFAULT, -1)

    def test_single_error_result(self) -> None:
        assert classify_function(FuncType(results=results("error"))) == (ErrorType.ERROR, 0)

    @pytest.mark.parametrize(
        ("types", "index"),
        [
            (("error", "int"), 0),
            (("int", "error"), 1),
            (("string", "bool", "error"), 2),
        ],
    )
    def test_position_of_error(self, types: tuple[str, ...], index: int) -> None:
        assert classify_function(FuncType(results=results(*types))) == (ErrorType.ERROR, index)

    def test_only_first_error_is_reported(self) -> None:
        func_type = FuncType(results=results("int", "error", "error"))
        assert classify_function(func_type) == (ErrorType.ERROR, 1)

    def test_grouped_names_count_as_positions(self) -> None:
        func_type = FuncType(
            results=(
                Field(type=ident("int"), names=("a", "b")),
                Field(type=ident("error"), names=("err",)),
            )
        )
        assert classify_function(func_type) == (ErrorType.ERROR, 2)

    def test_qualified_error_type_is_not_builtin(self) -> None:
        func_type = FuncType(results=(Field(type=sel("pkg", "error")),))
        assert classify_function(func_type) == (ErrorType.DEFAULT, -1)

    def test_pointer_type_is_not_error(self) -> None:
        func_type = FuncType(results=(Field(type=Other(kind="pointer_type")),))
        assert classify_function(func_type) == (ErrorType.DEFAULT, -1)

    def test_error_parameter_is_ignored(self) -> None:
        func_type = FuncType(params=results("error"), results=results("bool"))
        assert classify_function(func_type) == (ErrorType.DEFAULT, -1)


class TestClassifyParsedFunctions:
    def test_functions_without_error_results(self, loader: GoSourceLoader) -> None:
        source = parse(loader, NO_ERROR_GO)
        assert len(source.functions) == 3
        for decl in source.functions:
            assert classify_function(decl.type) == (ErrorType.DEFAULT, -1)

    def test_named_results(self, loader: GoSourceLoader) -> None:
        (decl,) = parse(loader, NAMED_RESULTS_GO).functions
        assert classify_function(decl.type) == (ErrorType.ERROR, 2)
