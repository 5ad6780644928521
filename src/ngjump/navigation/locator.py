"""Candidate file lookup for guessed filename patterns."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from ngjump.core.errors import NgJumpError
from ngjump.core.logging import get_logger
from ngjump.host.base import Host

log = get_logger("locator")


def locate_candidate_files(
    host: Host,
    patterns: Iterable[str],
    *,
    ignore_glob: str | None,
    max_results: int,
) -> list[Path]:
    """Enumerate workspace files for every pattern in one host lookup.

    Results are concatenated in pattern order. ``max_results`` caps each
    pattern separately, not the total. A failing lookup yields no files.
    """
    includes = [f"**/{pattern}" for pattern in patterns]
    if not includes:
        return []
    try:
        buckets = host.find_files(includes, ignore_glob, max_results)
    except (OSError, NgJumpError) as e:
        log.warning("find_files_failed", patterns=len(includes), error=str(e))
        return []

    files: list[Path] = []
    for include, found in zip(includes, buckets, strict=True):
        log.debug("candidates_found", pattern=include, count=len(found))
        files.extend(found)
    return files
