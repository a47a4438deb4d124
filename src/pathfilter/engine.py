"""Match engine: evaluate a path against every exclusion pattern."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pathfilter.globmatch import glob_match

logger = logging.getLogger(__name__)


def _pattern_matches(pattern: str, path: str, folded_path: str) -> bool:
    """Apply the matching strategies for one pattern, cheapest first.

    Strategies 1-4 compare case-folded strings. The wildcard strategy
    runs on the raw pattern and raw path, so it is case-sensitive.
    """
    folded = pattern.lower()
    trimmed = folded.rstrip("/")
    had_trailing_slash = trimmed != folded
    if not trimmed:
        return False

    # exact name, or the pattern anchors a leading path component
    if folded_path == trimmed or folded_path.startswith(trimmed + "/"):
        return True

    # bare names also match at any depth
    if not had_trailing_slash and (
        f"/{trimmed}/" in folded_path or folded_path.endswith(f"/{trimmed}")
    ):
        return True

    # extension suffix such as ".md"
    if trimmed.startswith(".") and "/" not in trimmed and folded_path.endswith(trimmed):
        return True

    if "*" in pattern or "?" in pattern:
        return glob_match(pattern, path)

    return False


def first_match(path: str | None, patterns: Iterable[str]) -> str | None:
    """Return the first pattern that excludes *path*.

    Patterns are tried in order; the first hit short-circuits.

    Args:
        path: Normalized path or bare name. ``None`` and ``""`` never match.
        patterns: Exclusion patterns.

    Returns:
        str | None: The matching pattern, or ``None`` when *path* is not
        excluded.
    """
    if not path:
        return None

    folded_path = path.lower()
    for pattern in patterns:
        if _pattern_matches(pattern, path, folded_path):
            logger.debug("Excluded %r by pattern %r", path, pattern)
            return pattern
    return None


def is_excluded(path: str | None, patterns: Iterable[str]) -> bool:
    """Return whether any pattern excludes *path*."""
    return first_match(path, patterns) is not None
