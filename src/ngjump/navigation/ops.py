"""Go-to-definition operations.

Pipeline for one request:

1. parse the selection into a Reference
2. scan the current document
3. guess filenames from the owner name, enumerate and scan those files
4. drop hits on a (file, line) already seen; registration calls only
   count when no file defines the name
5. jump, offer a choice list, or report not found

Nothing is cached between requests.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal

from ngjump.config.models import SearchConfig
from ngjump.core.errors import NavigationError, NgJumpError
from ngjump.core.logging import clear_request_id, get_logger, set_request_id
from ngjump.host.base import Choice, Host
from ngjump.navigation.guessing import guess_file_patterns
from ngjump.navigation.locator import locate_candidate_files
from ngjump.navigation.reference import Reference, parse_reference
from ngjump.navigation.rules import MEMBER_RULES, RuleKind, registration_rules
from ngjump.navigation.scanner import Position, ScanHit, is_excluded, scan_text

log = get_logger("navigation")

ResolutionStatus = Literal["not_found", "single", "ambiguous"]

# (definition hits, registration-call hits) for one file
_FileHits = tuple[list[ScanHit], list[ScanHit]]


@dataclass(frozen=True)
class RequestContext:
    """Everything a request reads from the editor, made explicit.

    ``document_path`` is None when no document is open.
    """

    document_path: Path | None
    document_text: str
    selection_text: str
    selection_line_text: str
    workspace_root: Path

    @classmethod
    def from_file(
        cls, path: Path, line_number: int, selection_text: str, workspace_root: Path
    ) -> RequestContext:
        """Build a context for ``selection_text`` on 1-based ``line_number`` of ``path``."""
        text = path.read_text(encoding="utf-8", errors="replace")
        lines = text.split("\n")
        line_text = lines[line_number - 1] if 0 < line_number <= len(lines) else ""
        return cls(
            document_path=path,
            document_text=text,
            selection_text=selection_text,
            selection_line_text=line_text,
            workspace_root=workspace_root,
        )


@dataclass(frozen=True)
class DefinitionMatch:
    """A definition site in a specific file."""

    path: Path
    rel_path: str
    start: Position
    end: Position
    text: str
    kind: RuleKind

    @property
    def key(self) -> tuple[str, int]:
        return (str(self.path), self.start.line)

    @property
    def label(self) -> str:
        return f"{self.path.name}:{self.start.line + 1}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.rel_path,
            "line": self.start.line + 1,
            "column": self.start.column + 1,
            "end_line": self.end.line + 1,
            "end_column": self.end.column + 1,
            "text": self.text,
            "kind": self.kind.value,
        }


@dataclass
class Resolution:
    """Deduplicated matches for one reference, in presentation order."""

    reference: Reference
    matches: list[DefinitionMatch] = field(default_factory=list)
    files_scanned: int = 0

    @property
    def status(self) -> ResolutionStatus:
        if not self.matches:
            return "not_found"
        if len(self.matches) == 1:
            return "single"
        return "ambiguous"

    def to_dict(self) -> dict[str, Any]:
        return {
            "owner": self.reference.owner_name,
            "member": self.reference.member_name,
            "status": self.status,
            "files_scanned": self.files_scanned,
            "matches": [m.to_dict() for m in self.matches],
        }


class NavigationOps:
    """Resolve a selection to definition sites and navigate through a host."""

    def __init__(self, host: Host, config: SearchConfig | None = None) -> None:
        self._host = host
        self._config = config or SearchConfig()
        self._registration_rules = registration_rules(self._config.registration_kinds)

    def parse(self, context: RequestContext) -> Reference:
        """Raises NavigationError for a missing document or blank selection."""
        if context.document_path is None:
            raise NavigationError.no_active_document()
        return parse_reference(context.selection_text, context.selection_line_text)

    def resolve(self, context: RequestContext) -> Resolution:
        return self.search(context, self.parse(context))

    def search(self, context: RequestContext, reference: Reference) -> Resolution:
        """Scan the current document, then every guessed file, and dedup."""
        if context.document_path is None:
            raise NavigationError.no_active_document()
        root = context.workspace_root.resolve()
        current = context.document_path.resolve()

        log.debug(
            "search_started",
            owner=reference.owner_name,
            member=reference.member_name,
            document=str(current),
        )

        scanned: list[tuple[Path, _FileHits]] = []
        if self._is_excluded(current, root):
            log.debug("skip_excluded", path=str(current))
        else:
            scanned.append((current, self._scan(context.document_text, reference)))

        patterns = guess_file_patterns(reference.owner_name)
        log.debug("patterns_guessed", owner=reference.owner_name, patterns=patterns)
        candidates = self._candidate_files(patterns, current, root)

        with ThreadPoolExecutor(max_workers=self._config.max_workers) as executor:
            # map() yields in submission order, so presentation order is stable
            results = executor.map(lambda p: self._read_and_scan(p, reference), candidates)
            scanned.extend(zip(candidates, results, strict=True))

        # Registration calls only name a component; they count when nothing defines it
        found = [(path, definitions) for path, (definitions, _) in scanned]
        if not any(hits for _, hits in found):
            registrations = [(path, calls) for path, (_, calls) in scanned]
            if any(hits for _, hits in registrations):
                log.debug("registration_fallback", owner=reference.owner_name)
                found = registrations

        resolution = Resolution(reference=reference, files_scanned=len(scanned))
        seen: set[tuple[str, int]] = set()
        for path, hits in found:
            for hit in hits:
                match = DefinitionMatch(
                    path=path,
                    rel_path=_relative_to(path, root),
                    start=hit.start,
                    end=hit.end,
                    text=hit.text,
                    kind=hit.kind,
                )
                if match.key in seen:
                    log.debug("skip_duplicate", path=match.rel_path, line=hit.start.line + 1)
                    continue
                seen.add(match.key)
                resolution.matches.append(match)
                log.debug(
                    "definition_added",
                    path=match.rel_path,
                    line=hit.start.line + 1,
                    kind=hit.kind.value,
                )

        log.info(
            "search_finished",
            status=resolution.status,
            matches=len(resolution.matches),
            files_scanned=resolution.files_scanned,
        )
        return resolution

    def choices(self, resolution: Resolution) -> list[Choice[DefinitionMatch]]:
        return [
            Choice(label=match.label, description=match.rel_path, payload=match)
            for match in resolution.matches
        ]

    def goto_definition(self, context: RequestContext) -> DefinitionMatch | None:
        """Run the full command: resolve, then jump or ask.

        Returns the match navigated to, or None when nothing was found, the
        request was invalid, or the user dismissed the choice list. Problems
        are reported through ``host.notify``, never raised.
        """
        set_request_id()
        try:
            reference = self.parse(context)
            self._host.notify(f'Searching for definition of: "{reference.member_name}"...')
            resolution = self.search(context, reference)

            selection = context.selection_text.strip()
            if resolution.status == "not_found":
                raise NavigationError.definition_not_found(selection)
            if resolution.status == "single":
                target: DefinitionMatch | None = resolution.matches[0]
            else:
                target = self._host.pick_one(
                    self.choices(resolution),
                    placeholder=f'Multiple definitions found for "{selection}". Select one:',
                )
                if target is None:
                    log.info("pick_dismissed", choices=len(resolution.matches))
                    return None

            assert target is not None
            self._host.open_and_select(target)
            return target
        except NavigationError as e:
            log.info("navigation_aborted", error=e.error_name)
            self._host.notify(e.message)
            return None
        finally:
            clear_request_id()

    def _scan(self, text: str, reference: Reference) -> _FileHits:
        """Definition hits, and registration-call hits for bare references."""
        definitions = scan_text(
            text, reference.owner_name, reference.member_name, rules=MEMBER_RULES
        )
        calls: list[ScanHit] = []
        if reference.is_bare and self._config.registration_search:
            calls = scan_text(text, reference.owner_name, rules=self._registration_rules)
        return definitions, calls

    def _read_and_scan(self, path: Path, reference: Reference) -> _FileHits:
        try:
            text = self._host.read_text(path)
        except (OSError, NgJumpError) as e:
            log.warning("read_failed", path=str(path), error=str(e))
            return [], []
        return self._scan(text, reference)

    def _candidate_files(self, patterns: list[str], current: Path, root: Path) -> list[Path]:
        files = locate_candidate_files(
            self._host,
            patterns,
            ignore_glob=self._config.ignore_glob,
            max_results=self._config.max_results_per_pattern,
        )
        candidates: list[Path] = []
        seen = {current}
        for path in files:
            resolved = path.resolve()
            if resolved in seen:
                continue
            seen.add(resolved)
            if self._is_excluded(resolved, root):
                log.debug("skip_excluded", path=str(resolved))
                continue
            candidates.append(resolved)
        return candidates

    def _is_excluded(self, path: Path, root: Path) -> bool:
        return is_excluded(_relative_to(path, root), self._config.exclude_from_definitions)


def _relative_to(path: Path, root: Path) -> str:
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()
