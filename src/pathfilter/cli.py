"""CLI entry point for pathfilter; I/O boundary only."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from pathfilter import PathFilterError
from pathfilter.classifier import classify
from pathfilter.filter import PathFilter
from pathfilter.gitignore import load_gitignore

_GITIGNORE_SOURCE = ".gitignore"


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Outcome of one CLI run.

    Attributes:
        output: Rendered text, without trailing newline.
        excluded: Whether at least one input path was excluded.
    """

    output: str
    excluded: bool


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser.

    Returns:
        argparse.ArgumentParser: Configured parser for the ``pathfilter`` command.
    """
    parser = argparse.ArgumentParser(
        prog="pathfilter",
        description="report which paths match the configured exclusion patterns",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        metavar="PATH",
        help="Paths to check (absolute or relative to --root)",
    )
    parser.add_argument(
        "--root",
        default="",
        help="Project root stripped from absolute paths before matching",
    )
    parser.add_argument(
        "-x",
        "--exclude",
        action="append",
        default=[],
        dest="patterns",
        help="Additional exclusion pattern (can be specified multiple times)",
    )
    parser.add_argument(
        "--exclude-from",
        action="append",
        default=[],
        dest="pattern_files",
        metavar="FILE",
        help="Read exclusion patterns from FILE, one per line",
    )
    parser.add_argument(
        "--no-defaults",
        action="store_true",
        dest="no_defaults",
        help="Do not include the built-in default patterns",
    )
    parser.add_argument(
        "--gitignore",
        action="store_true",
        dest="use_gitignore",
        help="Also honour the .gitignore file in --root",
    )
    parser.add_argument(
        "--dirs",
        action="store_true",
        dest="dir_names",
        help="Treat each PATH as a directory basename",
    )
    parser.add_argument(
        "--stdin",
        action="store_true",
        dest="read_stdin",
        help="Read paths from standard input, one per line",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Prefix each excluded path with the pattern that matched it",
    )
    parser.add_argument(
        "--classify",
        action="store_true",
        dest="classify_mode",
        help="Print the directory/extension/filename/glob categories and exit",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging on stderr",
    )
    return parser


def run_pathfilter(argv: list[str] | None = None, stdin: Iterable[str] | None = None) -> CheckResult:
    """Run pathfilter with provided CLI args and return the result.

    This function is side-effect free and is the primary test target
    for CLI behavior.

    Args:
        argv: Command-line argument list without program name.
        stdin: Line source used with ``--stdin``. Defaults to ``sys.stdin``.

    Returns:
        CheckResult: Rendered output and whether anything was excluded.

    Raises:
        PathFilterError: On any user-facing validation or I/O error.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    return _run_with_args(args, stdin)


def _read_pattern_file(path_arg: str) -> list[str]:
    """Read patterns from a file, skipping blanks and ``#`` comments.

    Raises:
        PathFilterError: If the file cannot be read.
    """
    try:
        text = Path(path_arg).read_text(encoding="utf-8")
    except OSError as exc:
        raise PathFilterError(f"cannot read pattern file '{path_arg}': {exc}") from exc
    patterns: list[str] = []
    for line in text.splitlines():
        line = line.strip()
        if line and not line.startswith("#"):
            patterns.append(line)
    return patterns


def _build_filter(args: argparse.Namespace) -> PathFilter:
    patterns: list[str] = list(args.patterns)
    for pattern_file in args.pattern_files:
        patterns.extend(_read_pattern_file(pattern_file))

    if args.no_defaults:
        return PathFilter(patterns, args.root)
    return PathFilter.with_exclusions(patterns, args.root)


def _validate_option_combinations(args: argparse.Namespace) -> None:
    """Validate incompatible CLI option combinations.

    Raises:
        PathFilterError: If incompatible options are combined.
    """
    if args.use_gitignore and not args.root:
        raise PathFilterError("--gitignore requires --root")
    if args.use_gitignore and args.dir_names:
        raise PathFilterError("--gitignore is incompatible with --dirs")
    if args.classify_mode and (args.paths or args.read_stdin):
        raise PathFilterError("--classify does not take paths")
    if args.read_stdin and args.paths:
        raise PathFilterError("--stdin is incompatible with PATH arguments")


def _collect_paths(args: argparse.Namespace, stdin: Iterable[str] | None) -> list[str]:
    if not args.read_stdin:
        return list(args.paths)
    source = sys.stdin if stdin is None else stdin
    return [line.rstrip("\r\n") for line in source if line.strip()]


def _format_classification(path_filter: PathFilter) -> str:
    buckets = classify(path_filter.patterns)
    lines: list[str] = []
    for title, items in (
        ("directories", buckets.directories),
        ("extensions", buckets.extensions),
        ("filenames", buckets.filenames),
        ("globs", buckets.globs),
    ):
        lines.append(f"{title}:")
        lines.extend(f"  {item}" for item in items)
    return "\n".join(lines)


def _run_with_args(args: argparse.Namespace, stdin: Iterable[str] | None) -> CheckResult:
    """Run the check pipeline for parsed arguments.

    Raises:
        PathFilterError: On any user-facing validation or I/O error.
    """
    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    _validate_option_combinations(args)
    path_filter = _build_filter(args)

    if args.classify_mode:
        return CheckResult(_format_classification(path_filter), excluded=False)

    gitignore = load_gitignore(Path(args.root)) if args.use_gitignore else None

    lines: list[str] = []
    for path in _collect_paths(args, stdin):
        if args.dir_names:
            source = path_filter.matching_directory_pattern(path)
        else:
            source = path_filter.matching_pattern(path)
        if source is None and gitignore is not None and gitignore.is_ignored(path):
            source = _GITIGNORE_SOURCE
        if source is None:
            continue
        lines.append(f"{source}\t{path}" if args.verbose else path)

    return CheckResult("\n".join(lines), excluded=bool(lines))


def main() -> None:
    """Run the CLI entry point with process arguments.

    Exits 0 when at least one path is excluded, 1 when none is and
    2 on user-facing errors.
    """
    parser = build_parser()
    args = parser.parse_args()  # single parse

    try:
        result = _run_with_args(args, None)
    except PathFilterError as exc:
        sys.stderr.write(f"pathfilter: {exc}\n")
        sys.exit(2)

    if result.output:
        sys.stdout.write(result.output + "\n")
    sys.exit(0 if result.excluded else 1)
