"""Target discovery: files, directories, ``dir/...`` trees and Go package paths."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from errauditor.parser.loader import TargetError

RECURSIVE_SUFFIX = "/..."


class ConfigurationError(Exception):
    """Raised for run-wide configuration problems (e.g. a bad exclude pattern)."""


class PackageNotFoundError(TargetError):
    def __init__(self, name: str, searched: list[Path]) -> None:
        self.package = name
        self.searched = searched
        where = ", ".join(str(p) for p in searched) or "nowhere"
        super().__init__(f"cannot find package '{name}' (searched: {where})")


class NoGoFilesError(TargetError):
    """The directory exists but holds no Go source files."""


@dataclass
class Targets:
    """Command-line targets sorted by kind, in argument order."""

    files: list[Path] = field(default_factory=list)
    dirs: list[Path] = field(default_factory=list)
    packages: list[str] = field(default_factory=list)


def compile_exclude_patterns(patterns: Iterable[str]) -> list[re.Pattern[str]]:
    compiled: list[re.Pattern[str]] = []
    for pattern in patterns:
        try:
            compiled.append(re.compile(pattern))
        except re.error as exc:
            raise ConfigurationError(
                f"failed to parse exclude dir pattern {pattern!r}: {exc}"
            ) from exc
    return compiled


def is_excluded(directory: Path | str, patterns: Iterable[re.Pattern[str]]) -> bool:
    """A directory is excluded when any pattern matches anywhere in its path."""
    text = str(directory)
    return any(p.search(text) for p in patterns)


def _skip_dir_name(name: str) -> bool:
    return name.startswith((".", "_")) or name == "testdata"


def all_packages_in_fs(pattern: str) -> list[Path]:
    """Expand ``root/...`` to ``root`` and every directory beneath it.

    Hidden, underscore-prefixed and ``testdata`` directories are pruned.
    """
    root = pattern[: -len(RECURSIVE_SUFFIX)] if pattern.endswith(RECURSIVE_SUFFIX) else pattern
    root = root or "."
    found: list[Path] = []
    for dirpath, dirnames, _ in os.walk(root):
        current = Path(dirpath)
        if current != Path(root) and _skip_dir_name(current.name):
            dirnames[:] = []
            continue
        dirnames[:] = sorted(d for d in dirnames if not _skip_dir_name(d))
        found.append(current)
    return found


def classify_targets(args: list[str]) -> Targets:
    """Sort raw command-line targets into files, directories and packages."""
    targets = Targets()
    if not args:
        targets.dirs.extend(all_packages_in_fs("." + RECURSIVE_SUFFIX))
    for arg in args:
        if arg.endswith(RECURSIVE_SUFFIX) and Path(arg[: -len(RECURSIVE_SUFFIX)] or ".").is_dir():
            targets.dirs.extend(all_packages_in_fs(arg))
        elif Path(arg).is_dir():
            targets.dirs.append(Path(arg))
        elif Path(arg).exists():
            targets.files.append(Path(arg))
        else:
            targets.packages.append(arg)
    return targets


def go_files_in_dir(directory: Path) -> list[Path]:
    """Go source files of one package directory, test files included, sorted by name."""
    try:
        entries = sorted(directory.iterdir())
    except OSError as exc:
        raise TargetError(f"cannot list {directory}: {exc}") from exc
    files = [
        p
        for p in entries
        if p.suffix == ".go" and p.is_file() and not p.name.startswith((".", "_"))
    ]
    if not files:
        raise NoGoFilesError(f"no Go source files in {directory}")
    return files


def _module_root(start: Path) -> tuple[str, Path] | None:
    """Find the enclosing ``go.mod`` and return its module path and directory."""
    for directory in (start, *start.parents):
        go_mod = directory / "go.mod"
        if not go_mod.is_file():
            continue
        try:
            lines = go_mod.read_text(encoding="utf-8").splitlines()
        except OSError:
            return None
        for line in lines:
            parts = line.split("//", 1)[0].split()
            if len(parts) == 2 and parts[0] == "module":
                return parts[1].strip('"'), directory
        return None
    return None


class PackageResolver:
    """Maps a Go import path to a source directory.

    Looks in the enclosing module first, then ``$GOROOT/src`` and each
    ``$GOPATH`` entry's ``src``.
    """

    def __init__(
        self,
        cwd: Path | None = None,
        goroot: str | None = None,
        gopath: str | None = None,
    ) -> None:
        self._cwd = cwd or Path.cwd()
        self._goroot = goroot if goroot is not None else os.environ.get("GOROOT", "")
        if gopath is None:
            gopath = os.environ.get("GOPATH") or str(Path.home() / "go")
        self._gopath = gopath

    def candidates(self, name: str) -> list[Path]:
        found: list[Path] = []
        module = _module_root(self._cwd)
        if module is not None:
            module_path, module_dir = module
            if name == module_path:
                found.append(module_dir)
            elif name.startswith(module_path + "/"):
                found.append(module_dir / name[len(module_path) + 1 :])
        if self._goroot:
            found.append(Path(self._goroot) / "src" / name)
        for entry in self._gopath.split(os.pathsep):
            if entry:
                found.append(Path(entry) / "src" / name)
        return found

    def resolve(self, name: str) -> Path:
        searched = self.candidates(name)
        for candidate in searched:
            if candidate.is_dir():
                return candidate
        raise PackageNotFoundError(name, searched)
