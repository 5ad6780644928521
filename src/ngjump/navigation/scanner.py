"""Definition scanner - apply lexical rules to one file's text.

Pure: takes text, returns hits. Reading files and deciding which files to
scan belongs to NavigationOps.
"""

from __future__ import annotations

import bisect
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from ngjump.core.excludes import matches_any
from ngjump.core.logging import get_logger
from ngjump.navigation.rules import (
    MEMBER_RULES,
    REGISTRATION_RULES,
    DefinitionRule,
    RuleKind,
)

log = get_logger("scanner")


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """0-based line and column."""

    line: int
    column: int


@dataclass(frozen=True, slots=True)
class ScanHit:
    """A plausible definition site inside one text."""

    start: Position
    end: Position
    text: str
    kind: RuleKind


class TextIndex:
    """Offset to (line, column) mapping for one text."""

    def __init__(self, text: str) -> None:
        self._line_starts = [0]
        self._line_starts.extend(i + 1 for i, ch in enumerate(text) if ch == "\n")

    def position_at(self, offset: int) -> Position:
        line = bisect.bisect_right(self._line_starts, offset) - 1
        return Position(line=line, column=offset - self._line_starts[line])


def scan_text(
    text: str,
    owner_name: str,
    member_name: str | None = None,
    *,
    rules: Sequence[DefinitionRule] | None = None,
) -> list[ScanHit]:
    """Find definition sites in ``text``.

    With ``member_name`` the member rules look for that name; without it the
    registration rules look for ``owner_name``. Hits come back in rule order,
    then text order. Any hit directly preceded by ``.`` is a member access,
    not a definition, and is dropped.
    """
    if member_name:
        name = member_name
        active = MEMBER_RULES if rules is None else rules
    else:
        name = owner_name
        active = REGISTRATION_RULES if rules is None else rules

    index: TextIndex | None = None
    hits: list[ScanHit] = []
    for rule in active:
        for match in rule.compile(name).finditer(text):
            start = match.start("site")
            if start > 0 and text[start - 1] == ".":
                log.debug("skip_member_access", name=name, kind=rule.kind.value, offset=start)
                continue
            if index is None:
                index = TextIndex(text)
            hits.append(
                ScanHit(
                    start=index.position_at(start),
                    end=index.position_at(match.end("site")),
                    text=match.group("site"),
                    kind=rule.kind,
                )
            )
    return hits


def is_excluded(rel_path: str, exclude_globs: Iterable[str]) -> bool:
    """True for wiring/bootstrap files that are never a definition source."""
    return matches_any(rel_path, exclude_globs)
