"""Go source loader: raw text -> tree-sitter tree -> errauditor ``SourceFile``."""

from __future__ import annotations

from pathlib import Path

import tree_sitter_go as tsgo
from tree_sitter import Language, Parser

from errauditor.ast.builder import TreeConverter
from errauditor.ast.nodes import SourceFile

GO_LANGUAGE = Language(tsgo.language())

# https://golang.org/s/generatedcode
_GENERATED_HEADER = "// Code generated "
_GENERATED_FOOTER = " DO NOT EDIT."


class TargetError(Exception):
    """A single target could not be analyzed. The run continues without it."""


class UnreadableFileError(TargetError):
    pass


class GoSyntaxError(TargetError):
    """The file does not parse as Go."""


class GeneratedFileError(TargetError):
    """Raised when a file carries the generated-code header.

    Not a failure as such: it tells the caller to skip the file.
    """


def is_generated(src: str) -> bool:
    """Report whether a leading comment line marks the file as generated code."""
    for raw in src.splitlines():
        line = raw.rstrip("\r")
        if (
            line.startswith(_GENERATED_HEADER)
            and line.endswith(_GENERATED_FOOTER)
            and len(line) >= len(_GENERATED_HEADER) + len(_GENERATED_FOOTER)
        ):
            return True
        if line.lstrip().startswith("package "):
            break
    return False


class GoSourceLoader:
    """Parses Go files with tree-sitter and converts them to errauditor nodes.

    A fresh ``Parser`` is created per call, so one loader can be shared across
    worker threads.
    """

    def load(self, path: Path) -> SourceFile:
        """Load and parse a Go file from disk."""
        try:
            src = path.read_bytes()
        except OSError as exc:
            raise UnreadableFileError(f"cannot read {path}: {exc}") from exc
        return self.load_bytes(src, str(path))

    def load_string(self, content: str, filename: str = "<string>") -> SourceFile:
        """Parse Go source held in a string."""
        return self.load_bytes(content.encode("utf-8"), filename)

    def load_bytes(self, src: bytes, filename: str) -> SourceFile:
        if is_generated(src.decode("utf-8", errors="replace")):
            raise GeneratedFileError(f"{filename} is a generated file")

        tree = Parser(GO_LANGUAGE).parse(src)
        if tree.root_node.has_error:
            raise GoSyntaxError(f"{filename}: syntax error")
        return TreeConverter(filename).convert_file(tree)
