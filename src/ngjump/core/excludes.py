"""Exclude patterns and glob matching shared by the host and the scanner.

HARDCODED_DIRS are never traversed when enumerating workspace files.
Everything else is controlled by globs from config:

- ``search.ignore_glob``: files never offered as candidates (dependencies)
- ``search.exclude_from_definitions``: wiring/bootstrap files that register
  components but never define them, so they are never a jump target
"""

from __future__ import annotations

import fnmatch
from collections.abc import Iterable

HARDCODED_DIRS: frozenset[str] = frozenset(
    (
        # VCS internals
        ".git",
        ".svn",
        ".hg",
        ".bzr",
        # ngjump data
        ".ngjump",
    )
)

# Dependency directory convention of the JavaScript ecosystem
DEFAULT_IGNORE_GLOB = "**/node_modules/**"

# AngularJS bootstrap file convention: angular.module(...).controller(...) wiring
DEFAULT_DEFINITION_EXCLUDES: tuple[str, ...] = ("**/app.js",)


def is_hardcoded_dir(dirname: str) -> bool:
    return dirname in HARDCODED_DIRS


def matches_glob(rel_path: str, pattern: str) -> bool:
    """Check if a path matches a glob pattern, with ** support.

    ``rel_path`` is a workspace-relative POSIX path. A leading ``**/`` also
    matches at the workspace root, so ``**/app.js`` matches ``app.js``.
    """
    if fnmatch.fnmatch(rel_path, pattern):
        return True
    if pattern.startswith("**/"):
        return fnmatch.fnmatch(rel_path, pattern[3:])
    return False


def matches_any(rel_path: str, patterns: Iterable[str]) -> bool:
    return any(matches_glob(rel_path, pattern) for pattern in patterns)
