"""Tests for candidate file lookup."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from ngjump.navigation.locator import locate_candidate_files


class _StubHost:
    """Answers find_files from a fixed table and records calls."""

    def __init__(self, table: dict[str, list[Path]], failing: bool = False) -> None:
        self.table = table
        self.failing = failing
        self.calls: list[tuple[list[str], str | None, int]] = []

    def find_files(
        self, include_globs: Sequence[str], exclude_glob: str | None, max_results: int
    ) -> list[list[Path]]:
        self.calls.append((list(include_globs), exclude_glob, max_results))
        if self.failing:
            raise OSError("disk on fire")
        return [self.table.get(glob, [])[:max_results] for glob in include_globs]


class TestLocateCandidateFiles:
    """Tests for locate_candidate_files."""

    def test_concatenates_in_pattern_order(self) -> None:
        host = _StubHost(
            {
                "**/a.js": [Path("/w/x/a.js")],
                "**/b.js": [Path("/w/b.js"), Path("/w/y/b.js")],
            }
        )

        files = locate_candidate_files(
            host, ["b.js", "a.js"], ignore_glob="**/node_modules/**", max_results=100
        )

        assert files == [Path("/w/b.js"), Path("/w/y/b.js"), Path("/w/x/a.js")]

    def test_all_patterns_go_to_one_lookup(self) -> None:
        host = _StubHost({})

        locate_candidate_files(host, ["a.js", "a.ts"], ignore_glob="**/vendor/**", max_results=7)

        assert host.calls == [(["**/a.js", "**/a.ts"], "**/vendor/**", 7)]

    def test_cap_applies_to_each_pattern_not_total(self) -> None:
        host = _StubHost(
            {
                "**/a.js": [Path("/1/a.js"), Path("/2/a.js")],
                "**/a.ts": [Path("/1/a.ts"), Path("/2/a.ts")],
            }
        )

        files = locate_candidate_files(host, ["a.js", "a.ts"], ignore_glob=None, max_results=2)

        assert len(files) == 4

    def test_failing_lookup_counts_as_no_files(self) -> None:
        host = _StubHost({"**/b.js": [Path("/w/b.js")]}, failing=True)

        files = locate_candidate_files(host, ["a.js", "b.js"], ignore_glob=None, max_results=10)

        assert files == []

    def test_no_patterns_skip_the_lookup(self) -> None:
        host = _StubHost({})

        assert locate_candidate_files(host, [], ignore_glob=None, max_results=10) == []
        assert host.calls == []
