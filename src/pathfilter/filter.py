"""PathFilter: exclusion decisions for file watchers and build triggers."""

from __future__ import annotations

from collections.abc import Iterable

from pathfilter import classifier
from pathfilter.engine import first_match
from pathfilter.normalize import normalize_path
from pathfilter.patterns import DEFAULT_PATTERN_SET, PatternSet, merge_with_defaults


class PathFilter:
    """Decide whether paths or directory names should be ignored.

    Any pattern can match both files and directories. The pattern list
    is fixed at construction, so one instance can be shared freely
    between threads.
    """

    def __init__(
        self,
        patterns: Iterable[str] | PatternSet | None = None,
        project_dir: str = "",
    ) -> None:
        """Initialize the filter.

        Args:
            patterns: Unified exclusion pattern list.
            project_dir: Project root used to relativize absolute paths.
        """
        self._patterns: PatternSet = (
            patterns if isinstance(patterns, PatternSet) else PatternSet.of(patterns)
        )
        self._project_dir = project_dir

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({len(self._patterns)} patterns, "
            f"project_dir={self._project_dir!r})"
        )

    @classmethod
    def create_default(cls, project_dir: str = "") -> PathFilter:
        """Filter using the built-in dependency/artifact exclusions."""
        return cls(DEFAULT_PATTERN_SET, project_dir)

    @classmethod
    def with_exclusions(cls, patterns: Iterable[str] | None, project_dir: str = "") -> PathFilter:
        """Filter using the defaults followed by *patterns*.

        Args:
            patterns: Additional caller-defined exclusions.
            project_dir: Project root used to relativize absolute paths.

        Returns:
            PathFilter: New filter instance.
        """
        return cls(merge_with_defaults(patterns), project_dir)

    @property
    def patterns(self) -> tuple[str, ...]:
        """The configured patterns, in order."""
        return self._patterns.patterns

    @property
    def project_dir(self) -> str:
        return self._project_dir

    # -- matching ---------------------------------------------------------

    def should_ignore_directory(self, basename: str) -> bool:
        """Return whether a directory with this basename should be skipped.

        Args:
            basename: Directory name without any path.

        Returns:
            bool: ``True`` when any pattern matches.
        """
        return self.matching_directory_pattern(basename) is not None

    def matching_directory_pattern(self, basename: str) -> str | None:
        """Return the first pattern matching a bare directory name, or ``None``."""
        return first_match(basename, self._patterns)

    def matching_pattern(self, path: str | None) -> str | None:
        """Return the first pattern excluding *path*, or ``None``.

        Args:
            path: Absolute or project-relative path.
        """
        return first_match(normalize_path(path, self._project_dir), self._patterns)

    def should_ignore_path(self, path: str | None) -> bool:
        """Return whether *path* should be ignored.

        ``None`` and empty paths are never ignored.

        Args:
            path: Absolute or project-relative path.

        Returns:
            bool: ``True`` when any pattern matches.
        """
        return self.matching_pattern(path) is not None

    # -- categorized views ------------------------------------------------

    def ignored_directories(self) -> list[str]:
        return classifier.ignored_directories(self._patterns)

    def ignored_extensions(self) -> list[str]:
        return classifier.ignored_extensions(self._patterns)

    def ignored_filenames(self) -> list[str]:
        return classifier.ignored_filenames(self._patterns)

    def ignored_globs(self) -> list[str]:
        return classifier.ignored_globs(self._patterns)
