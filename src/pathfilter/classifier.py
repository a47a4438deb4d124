"""Categorized views of a unified pattern list for older consumers.

Older watchers expect separate directory, extension, filename and glob
lists. The categories are inferred from string shape only, so a
pattern can land in several buckets or in none; consumers must
tolerate both.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


def _canonical(pattern: str) -> str:
    return pattern.strip("/").lower()


def _has_wildcard(pattern: str) -> bool:
    return "*" in pattern or "?" in pattern


def ignored_directories(patterns: Iterable[str]) -> list[str]:
    """Patterns that look like directory names.

    No dot, no wildcard, longer than two characters and not starting
    with ``**``.
    """
    result: list[str] = []
    for raw in patterns:
        pattern = _canonical(raw)
        if (
            "." not in pattern
            and not _has_wildcard(pattern)
            and len(pattern) > 2
            and not pattern.startswith("**")
        ):
            result.append(pattern)
    return result


def ignored_extensions(patterns: Iterable[str]) -> list[str]:
    """Patterns that look like file extensions (``.md``, ``.lock``)."""
    return [
        pattern
        for pattern in map(_canonical, patterns)
        if "/" not in pattern and not _has_wildcard(pattern) and pattern.startswith(".")
    ]


def ignored_filenames(patterns: Iterable[str]) -> list[str]:
    """Names of at most ten characters, undotted or dot-prefixed, with no slash or wildcard."""
    result: list[str] = []
    for raw in patterns:
        pattern = _canonical(raw)
        if (
            "/" not in pattern
            and not _has_wildcard(pattern)
            and len(pattern) <= 10
            and ("." not in pattern or pattern.startswith("."))
        ):
            result.append(pattern)
    return result


def ignored_globs(patterns: Iterable[str]) -> list[str]:
    """Patterns containing ``*`` or ``?``."""
    return [
        pattern
        for pattern in map(_canonical, patterns)
        if _has_wildcard(pattern) or pattern.startswith("**")
    ]


@dataclass(frozen=True, slots=True)
class PatternBuckets:
    """All four legacy categories for one pattern list.

    Attributes:
        directories: Directory-name patterns.
        extensions: Extension patterns.
        filenames: Short filename patterns.
        globs: Wildcard patterns.
    """

    directories: tuple[str, ...]
    extensions: tuple[str, ...]
    filenames: tuple[str, ...]
    globs: tuple[str, ...]


def classify(patterns: Iterable[str]) -> PatternBuckets:
    """Sort *patterns* into the four legacy buckets.

    Args:
        patterns: Unified exclusion patterns.

    Returns:
        PatternBuckets: Canonicalized (lower-cased, slash-trimmed)
        patterns per bucket, each in input order.
    """
    items = list(patterns)
    return PatternBuckets(
        directories=tuple(ignored_directories(items)),
        extensions=tuple(ignored_extensions(items)),
        filenames=tuple(ignored_filenames(items)),
        globs=tuple(ignored_globs(items)),
    )
