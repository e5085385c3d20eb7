"""Run orchestration: expand targets, analyze each file, merge per-file results."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import TypeVar

from errauditor.analysis.aggregator import aggregate
from errauditor.analysis.passes import AnalysisPass, Analyzer, analyzer
from errauditor.ast.nodes import SourceFile
from errauditor.models.errors import Diagnostic
from errauditor.models.findings import AuditResult
from errauditor.parser.loader import GoSourceLoader, TargetError
from errauditor.service.targets import (
    PackageResolver,
    Targets,
    classify_targets,
    compile_exclude_patterns,
    go_files_in_dir,
    is_excluded,
)

logger = logging.getLogger("errauditor.service")

T = TypeVar("T")


class ErrorAuditor:
    """Audits Go targets with continue-on-error semantics.

    Every file gets its own ``AuditResult``; results are merged in target
    order, so ``jobs > 1`` produces the same output as a sequential run.
    Raises ``ConfigurationError`` on construction if an exclude pattern is invalid.
    """

    def __init__(
        self,
        exclude: Iterable[str] = (),
        jobs: int = 1,
        loader: GoSourceLoader | None = None,
        resolver: PackageResolver | None = None,
    ) -> None:
        self._patterns = compile_exclude_patterns(exclude)
        self._jobs = max(1, jobs)
        self._loader = loader or GoSourceLoader()
        self._resolver = resolver or PackageResolver()

    # -- file collection -----------------------------------------------------

    def excluded(self, directory: Path) -> bool:
        return is_excluded(directory, self._patterns)

    def files_for_dir(self, directory: Path) -> list[Path]:
        if self.excluded(directory):
            logger.debug("excluded directory %s", directory)
            return []
        return go_files_in_dir(directory)

    def files_for_package(self, name: str) -> list[Path]:
        return self.files_for_dir(self._resolver.resolve(name))

    def collect_files(self, args: list[str]) -> list[Path]:
        """All files to analyze, in order: explicit files, directories, packages."""
        targets: Targets = classify_targets(args)
        files: list[Path] = list(targets.files)
        for directory in targets.dirs:
            try:
                files.extend(self.files_for_dir(directory))
            except TargetError as exc:
                logger.debug("failed to check dir: %s", exc)
        for name in targets.packages:
            try:
                files.extend(self.files_for_package(name))
            except TargetError as exc:
                logger.debug("failed to check package: %s", exc)
        return files

    # -- per-file analysis ---------------------------------------------------

    def load(self, path: Path) -> SourceFile | None:
        """Parse one file, or ``None`` if it is excluded or cannot be analyzed."""
        if self.excluded(path.parent):
            logger.debug("excluded file %s", path)
            return None
        try:
            return self._loader.load(path)
        except TargetError as exc:
            logger.debug("failed to check file: %s", exc)
            return None

    def audit_file(self, path: Path) -> AuditResult:
        source = self.load(path)
        if source is None:
            return AuditResult()
        return aggregate(source)

    # -- runs ----------------------------------------------------------------

    def run(self, args: list[str]) -> AuditResult:
        """Standalone mode: aggregate error origins over every target."""
        files = self.collect_files(args)
        result = AuditResult()
        for file_result in self._map(self.audit_file, files):
            result.merge(file_result)
        logger.info(
            "audited %d file(s), %d function(s) with error origins",
            len(files),
            len(result.origins),
        )
        return result

    def run_passes(
        self,
        args: list[str],
        report: Callable[[Diagnostic], None],
        pass_analyzer: Analyzer = analyzer,
    ) -> int:
        """Pass mode: run ``pass_analyzer`` once per package directory.

        Diagnostics go to ``report``; returns the number of passes run.
        """
        files = self.collect_files(args)
        sources = [s for s in self._map(self.load, files) if s is not None]
        by_dir: dict[Path, list[SourceFile]] = {}
        for source in sources:
            by_dir.setdefault(Path(source.path).parent, []).append(source)
        for group in by_dir.values():
            pass_analyzer.run(AnalysisPass(files=group, report=report, package=group[0].package))
        return len(by_dir)

    def diagnostics(self, args: list[str]) -> list[Diagnostic]:
        collected: list[Diagnostic] = []
        self.run_passes(args, collected.append)
        return collected

    def _map(self, fn: Callable[[Path], T], items: list[Path]) -> list[T]:
        if self._jobs == 1 or len(items) < 2:
            return [fn(item) for item in items]
        with ThreadPoolExecutor(max_workers=self._jobs) as pool:
            return list(pool.map(fn, items))
