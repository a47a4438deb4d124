"""Lexical path normalization relative to a project root."""

from __future__ import annotations

import os


def normalize_path(raw_path: str | None, root: str) -> str | None:
    """Make *raw_path* relative to *root* for pattern matching.

    Purely lexical: no filesystem access, no symlink resolution and no
    ``.``/``..`` collapsing. Paths outside the root (or already
    relative) pass through unchanged, so normalizing twice is a no-op.

    Args:
        raw_path: Absolute or relative path, possibly ``None``.
        root: Project root prefix. Empty disables stripping.

    Returns:
        str | None: The relative path, or ``None`` when nothing can
        match (empty input, or the root itself).
    """
    if not raw_path:
        return None

    path = raw_path
    if os.sep == "\\":
        path = path.replace("\\", "/")
        root = root.replace("\\", "/")

    if root:
        if root.endswith("/"):
            if path.startswith(root):
                path = path[len(root):]
        elif path.startswith(root + "/"):
            path = path[len(root) + 1:]
        elif path == root:
            path = ""

    return path or None
