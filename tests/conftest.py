"""Shared fixtures for pathfilter tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from pathfilter.filter import PathFilter

PROJECT_DIR = "/srv/app"


@pytest.fixture
def default_filter() -> PathFilter:
    """Default filter rooted at ``/srv/app``."""
    return PathFilter.create_default(PROJECT_DIR)


@pytest.fixture
def gitignore_root(tmp_path: Path) -> Path:
    """Project root with a .gitignore.

    Structure::

        root/
        ├── .gitignore          (*.log, build/, .env)
        └── patterns.txt        (# comment, dist, *.tmp)
    """
    (tmp_path / ".gitignore").write_text("*.log\nbuild/\n.env\n")
    (tmp_path / "patterns.txt").write_text("# extra exclusions\n\ndist\n  *.tmp  \n")
    return tmp_path
