"""Project ``.gitignore`` rules as an additional exclusion source."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path, PurePath

from pathspec import GitIgnoreSpec

from pathfilter.normalize import normalize_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GitignoreRules:
    """Compiled ``.gitignore`` rules bound to the root they apply to.

    Attributes:
        root: Project root the rules were loaded from.
        spec: Compiled gitwildmatch rules.
    """

    root: str
    spec: GitIgnoreSpec

    def is_ignored(self, path: str | None) -> bool:
        """Return whether *path* is ignored by the project ``.gitignore``.

        Relative paths are taken as relative to :attr:`root`. Absolute
        paths must lie inside the root; anything else is never ignored.

        Args:
            path: Absolute or root-relative path.

        Returns:
            bool: ``True`` when a rule matches.
        """
        relative = normalize_path(path, self.root)
        if relative is None:
            return False
        if relative == path and PurePath(path).is_absolute():
            return False
        return self.spec.match_file(relative)


def load_gitignore(root: Path) -> GitignoreRules | None:
    """Load the ``.gitignore`` at the top of *root*.

    Args:
        root: Project root directory.

    Returns:
        GitignoreRules | None: Rules bound to *root* when the file exists
        and is readable, otherwise ``None``.
    """
    gitignore_path = root / ".gitignore"
    try:
        text = gitignore_path.read_text(encoding="utf-8")
    except OSError:
        logger.debug("No readable .gitignore at %s", gitignore_path)
        return None
    spec = GitIgnoreSpec.from_lines(text.splitlines())
    logger.debug("Loaded %d .gitignore rules for %s", len(spec.patterns), root)
    return GitignoreRules(str(root), spec)
