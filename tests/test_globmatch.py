"""Tests for pathfilter.globmatch."""

import pytest

from pathfilter.globmatch import glob_match, pathname_match, segments_match


class TestPathnameMatch:
    @pytest.mark.parametrize(
        ("pattern", "path", "expected"),
        [
            ("*.md", "README.md", True),
            ("*.md", "docs/README.md", False),
            ("src/*.js", "src/app.js", True),
            ("src/*.js", "src/lib/app.js", False),
            ("?.txt", "a.txt", True),
            ("?.txt", "ab.txt", False),
            ("*/cache", "var/cache", True),
            ("*", "", True),
            # backslash is a literal character
            ("a\\b", "a\\b", True),
            # star matches a leading dot
            ("*", ".env", True),
        ],
    )
    def test_pathname_mode(self, pattern: str, path: str, expected: bool) -> None:
        assert pathname_match(pattern, path) is expected

    def test_case_sensitive(self) -> None:
        assert pathname_match("*.md", "README.MD") is False


class TestRecursiveShapes:
    @pytest.mark.parametrize(
        ("pattern", "path", "expected"),
        [
            # **/<name>/**
            ("**/node_modules/**", "a/b/node_modules/c/d", True),
            ("**/node_modules/**", "node_modules", True),
            ("**/node_modules/**", "a/node_modules", True),
            ("**/node_modules/**", "my-node_modules", False),
            ("**/node_modules/**", "node_modules_old/x", False),
            # **/*.<ext>
            ("**/*.md", "docs/guide.md", True),
            ("**/*.md", "notes.md", True),
            ("**/*.md", "docs/guide.mdx", False),
            # **/<literal>
            ("**/.gitignore", "a/b/.gitignore", True),
            ("**/.gitignore", ".gitignore", True),
            ("**/.gitignore", "x.gitignore", False),
            ("**/docs/api", "site/docs/api/index.html", True),
            ("**/docs/api", "docs/apis", False),
            # bare **
            ("**", "anything/at/all", True),
        ],
    )
    def test_shapes(self, pattern: str, path: str, expected: bool) -> None:
        assert glob_match(pattern, path) is expected

    def test_extension_shape_is_case_sensitive(self) -> None:
        assert glob_match("**/*.md", "README.MD") is False


class TestGeneralFallback:
    @pytest.mark.parametrize(
        ("pattern", "path", "expected"),
        [
            ("src/**/test/*.go", "src/pkg/a/test/x.go", True),
            ("src/**/test/*.go", "src/pkg/a/main/x.go", False),
            ("src/**/test/*.go", "src/test/x.go", True),
            ("src/**/test/*.go", "lib/test/x.go", False),
            ("node_modules/**", "node_modules/pkg/index.js", True),
            ("node_modules/**", "node_modules", True),
            ("node_modules/**", "src/node_modules/pkg", False),
            ("/src/**/", "/src/a/b/", True),
            ("a/**/b/**/c", "a/b/c", True),
            ("a/**/b/**/c", "a/x/y/b/z/c", True),
            ("a/**/b/**/c", "a/x/y/c", False),
            ("a/**/*.py", "a/b/c.py", True),
            ("a/**/*.py", "a/b/c.pyc", False),
        ],
    )
    def test_fallback(self, pattern: str, path: str, expected: bool) -> None:
        assert glob_match(pattern, path) is expected

    def test_many_double_stars_stay_fast(self) -> None:
        pattern = "x/**/a/**/b/**/c/**/d/**/e"
        miss = "x/" + "/".join(["seg"] * 400)
        hit = miss + "/a/b/c/d/e"
        assert glob_match(pattern, miss) is False
        assert glob_match(pattern, hit) is True

    def test_deep_path_does_not_exhaust_stack(self) -> None:
        path = "/".join(["d"] * 5000) + "/leaf.go"
        assert glob_match("d/**/*.go", path) is True


class TestSegmentsMatch:
    @pytest.mark.parametrize(
        ("pattern_parts", "path_parts", "expected"),
        [
            ([], [], True),
            ([], ["a"], False),
            (["a"], [], False),
            (["**"], [], True),
            (["**"], ["a", "b"], True),
            (["**", "b"], ["a", "b"], True),
            (["**", "b"], ["a", "c"], False),
            (["a", "**"], ["a"], True),
            (["a", "?"], ["a", "bc"], False),
        ],
    )
    def test_segments(
        self, pattern_parts: list[str], path_parts: list[str], expected: bool
    ) -> None:
        assert segments_match(pattern_parts, path_parts) is expected
