"""Pattern storage and the built-in default exclusion list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Final

DEFAULT_PATTERNS: Final[tuple[str, ...]] = (
    # directories and simple names
    "node_modules",
    "vendor",
    "public",
    "var",
    ".git",
    ".idea",
    ".webpack-cache",
    ".gitignore",
    ".gitkeep",
    # extensions
    ".md",
    # recursive globs
    "**/node_modules/**",
    "node_modules/**",
    "**/vendor/**",
    "vendor/**",
    "**/public/**",
    "public/**",
    "**/var/**",
    "var/**",
    "**/.git/**",
    ".git/**",
    "**/.idea/**",
    ".idea/**",
    "**/.webpack-cache/**",
    ".webpack-cache/**",
    "**/*.md",
    "**/.gitignore",
    "**/.gitkeep",
)


@dataclass(frozen=True, slots=True)
class PatternSet:
    """Ordered, immutable collection of raw exclusion patterns.

    Patterns are stored exactly as configured. Order only decides
    which rule is reported first for a given path.

    Attributes:
        patterns: The raw pattern strings.
    """

    patterns: tuple[str, ...] = ()

    @classmethod
    def of(cls, patterns: Iterable[str] | None) -> PatternSet:
        """Build a set from any iterable of strings (``None`` means empty)."""
        return cls(tuple(patterns) if patterns else ())

    def __iter__(self) -> Iterator[str]:
        return iter(self.patterns)

    def __len__(self) -> int:
        return len(self.patterns)

    def __contains__(self, pattern: object) -> bool:
        return pattern in self.patterns


DEFAULT_PATTERN_SET: Final[PatternSet] = PatternSet(DEFAULT_PATTERNS)


def merge_with_defaults(patterns: Iterable[str] | None) -> PatternSet:
    """Return the default patterns followed by *patterns*.

    Duplicates are kept; matching is a union test, so they only cost
    an extra comparison.

    Args:
        patterns: Caller-supplied exclusion patterns.

    Returns:
        PatternSet: Combined pattern set.
    """
    extra = tuple(patterns) if patterns else ()
    return PatternSet(DEFAULT_PATTERNS + extra)
