"""Command-line entry points: ``errauditor`` (standalone) and ``errorlysis`` (pass mode)."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import NoReturn

from pydantic import ValidationError

from errauditor import __version__
from errauditor.report.console import ConsoleReporter
from errauditor.report.diagnostics import DiagnosticPrinter
from errauditor.service.auditor import ErrorAuditor
from errauditor.service.targets import ConfigurationError
from errauditor.settings import Settings

logger = logging.getLogger("errauditor.cli")


class _ArgumentParser(argparse.ArgumentParser):
    """Turns usage errors into ``ConfigurationError`` so they exit with status 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        raise ConfigurationError(message)


def _build_parser(prog: str, description: str) -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog=prog, description=description)
    parser.add_argument(
        "targets",
        nargs="*",
        help="Go files, directories, 'dir/...' trees or package import paths (default: ./...)",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        action="append",
        metavar="PATTERN",
        help="skip targets whose directory matches this regular expression (repeatable)",
    )
    parser.add_argument("-j", "--jobs", type=int, help="analyze files on N threads")
    parser.add_argument(
        "--no-color",
        dest="color",
        action="store_false",
        default=None,
        help="disable ANSI colors",
    )
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING or ERROR")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _configure(
    prog: str, description: str, argv: list[str] | None
) -> tuple[argparse.Namespace, ErrorAuditor]:
    args = _build_parser(prog, description).parse_args(argv)
    try:
        settings = Settings()
    except ValidationError as exc:
        raise ConfigurationError(f"invalid settings: {exc}") from exc

    level = (args.log_level or settings.log_level).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigurationError(f"unknown log level {level!r}")
    logging.basicConfig(level=level)

    jobs = args.jobs if args.jobs is not None else settings.jobs
    if jobs < 1:
        raise ConfigurationError(f"--jobs must be at least 1, got {jobs}")

    auditor = ErrorAuditor(exclude=[*settings.exclude, *(args.exclude or [])], jobs=jobs)
    if args.color is None:
        args.color = settings.color
    return args, auditor


def main(argv: list[str] | None = None) -> int:
    """Standalone mode: print every function's error origins."""
    try:
        args, auditor = _configure(
            "errauditor", "Report where Go functions construct the errors they return.", argv
        )
    except ConfigurationError as exc:
        logger.error("failed to run with: %s", exc)
        return 1

    result = auditor.run(args.targets)
    ConsoleReporter(color=args.color).render(result)
    return 0


def errorlysis_main(argv: list[str] | None = None) -> int:
    """Pass mode: print one diagnostic per function and per classified return."""
    try:
        args, auditor = _configure("errorlysis", "Reports returned errors.", argv)
    except ConfigurationError as exc:
        logger.error("failed to run with: %s", exc)
        return 1

    printer = DiagnosticPrinter()
    passes = auditor.run_passes(args.targets, printer)
    logger.info("ran %d pass(es), %d diagnostic(s)", passes, printer.count)
    return 0


if __name__ == "__main__":
    sys.exit(main())
