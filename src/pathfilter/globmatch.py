"""Wildcard matching: single-level pathname globs and recursive ``**``.

``*`` and ``?`` never cross a ``/`` boundary. A ``**`` segment matches
zero or more whole path segments. Backslash has no escaping meaning.
Matching is case-sensitive on the strings supplied.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from fnmatch import fnmatchcase
from functools import lru_cache
from typing import Final, Literal

_DIR_ANYWHERE_RE: Final = re.compile(r"^\*\*/([^/]+)/\*\*$")
_ANY_EXTENSION_RE: Final = re.compile(r"^\*\*/\*\.(.+)$")
_LITERAL_ANYWHERE_RE: Final = re.compile(r"^\*\*/([^*]+)$")

_Shape = Literal["dir_anywhere", "extension", "literal_anywhere", "everything", "segments"]


@lru_cache(maxsize=1024)
def _recursive_shape(pattern: str) -> tuple[_Shape, str]:
    """Classify a pattern containing ``**`` into one of the fast-path shapes.

    Returns:
        tuple: ``(shape, operand)`` where *operand* is the literal the
        fast path compares against (empty for the other shapes).
    """
    m = _DIR_ANYWHERE_RE.match(pattern)
    if m:
        return "dir_anywhere", m.group(1)
    m = _ANY_EXTENSION_RE.match(pattern)
    if m:
        return "extension", "." + m.group(1)
    m = _LITERAL_ANYWHERE_RE.match(pattern)
    if m:
        return "literal_anywhere", m.group(1)
    if pattern == "**":
        return "everything", ""
    return "segments", ""


def _contains_component(path: str, name: str) -> bool:
    return f"/{name}/" in path or path.endswith(f"/{name}") or path == name


def pathname_match(pattern: str, path: str) -> bool:
    """Match *path* against a glob where ``/`` is significant.

    Equivalent to ``fnmatch`` in pathname mode: the pattern and the
    path must have the same number of segments and each pair must
    match.

    Args:
        pattern: Glob without ``**``.
        path: Slash-separated path.

    Returns:
        bool: ``True`` on a full match.
    """
    pattern_parts = pattern.split("/")
    path_parts = path.split("/")
    if len(pattern_parts) != len(path_parts):
        return False
    return all(fnmatchcase(name, pat) for pat, name in zip(pattern_parts, path_parts))


def segments_match(pattern_parts: Sequence[str], path_parts: Sequence[str]) -> bool:
    """Match segment sequences where ``**`` spans zero or more segments.

    Fills a table bottom-up: ``row[j]`` is whether the pattern suffix
    starting at the current segment matches ``path_parts[j:]``. Runs in
    O(len(pattern_parts) * len(path_parts)) with constant stack depth.

    Args:
        pattern_parts: Pattern segments; ``"**"`` is the recursive wildcard.
        path_parts: Path segments.

    Returns:
        bool: ``True`` when the whole path is consumed by the whole pattern.
    """
    n = len(path_parts)
    # empty pattern suffix only matches an empty path suffix
    below = [False] * n + [True]

    for seg in reversed(pattern_parts):
        row = [False] * (n + 1)
        if seg == "**":
            row[n] = below[n]
            for j in range(n - 1, -1, -1):
                row[j] = below[j] or row[j + 1]
        else:
            for j in range(n - 1, -1, -1):
                row[j] = below[j + 1] and fnmatchcase(path_parts[j], seg)
        below = row

    return below[0]


def glob_match(pattern: str, path: str) -> bool:
    """Match *path* against a wildcard *pattern*.

    Patterns without ``**`` use :func:`pathname_match`. Patterns with
    ``**`` are first checked against the common shapes
    ``**/<name>/**``, ``**/*.<ext>``, ``**/<literal>`` and ``**``,
    which reduce to substring tests; anything else goes through
    :func:`segments_match`.

    Args:
        pattern: Raw pattern string.
        path: Raw path string.

    Returns:
        bool: ``True`` when the pattern matches. Never raises.
    """
    if "**" not in pattern:
        return pathname_match(pattern, path)

    shape, operand = _recursive_shape(pattern)
    if shape == "dir_anywhere" or shape == "literal_anywhere":
        return _contains_component(path, operand)
    if shape == "extension":
        return path.endswith(operand)
    if shape == "everything":
        return True

    return segments_match(pattern.strip("/").split("/"), path.strip("/").split("/"))
