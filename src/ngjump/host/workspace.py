"""Terminal host over a local workspace directory.

Files come from the filesystem, messages go to a rich console on stderr,
the disambiguation list is a questionary prompt, and navigation prints
``path:line:column`` (optionally opening ``$EDITOR +line path``).
"""

from __future__ import annotations

import os
import shlex
import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, TypeVar

import click
import questionary
from rich.console import Console

from ngjump.core.errors import InternalError
from ngjump.core.excludes import is_hardcoded_dir, matches_glob
from ngjump.core.logging import get_logger
from ngjump.host.base import Choice

if TYPE_CHECKING:
    from ngjump.navigation.ops import DefinitionMatch

T = TypeVar("T")

log = get_logger("host")

_PICK_STYLE = questionary.Style(
    [
        ("question", "bold"),
        ("highlighted", "fg:cyan bold"),
        ("selected", "fg:cyan"),
    ]
)


class WorkspaceHost:
    """Host implementation backed by a directory and a terminal."""

    def __init__(
        self,
        root: Path,
        *,
        interactive: bool = True,
        editor: str | None = None,
        console: Console | None = None,
    ) -> None:
        self._root = root.resolve()
        self._interactive = interactive
        self._editor = editor
        self._console = console or Console(stderr=True)

    def find_files(
        self, include_globs: Sequence[str], exclude_glob: str | None, max_results: int
    ) -> list[list[Path]]:
        """Walk the workspace once and bucket files by the globs they match."""
        found: list[list[Path]] = [[] for _ in include_globs]
        if not include_globs:
            return found
        for dirpath, dirnames, filenames in os.walk(self._root):
            rel_dir = Path(dirpath).relative_to(self._root).as_posix()
            prefix = "" if rel_dir == "." else f"{rel_dir}/"

            # Prune in place; sorted for a stable enumeration order
            dirnames[:] = sorted(
                d
                for d in dirnames
                if not is_hardcoded_dir(d)
                and not (exclude_glob and matches_glob(f"{prefix}{d}/", exclude_glob))
            )

            for name in sorted(filenames):
                rel_path = f"{prefix}{name}"
                if exclude_glob and matches_glob(rel_path, exclude_glob):
                    continue
                for bucket, pattern in zip(found, include_globs, strict=True):
                    if len(bucket) < max_results and matches_glob(rel_path, pattern):
                        bucket.append(Path(dirpath) / name)
                if all(len(bucket) >= max_results for bucket in found):
                    return found
        return found

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8", errors="replace")

    def pick_one(self, choices: Sequence[Choice[T]], *, placeholder: str) -> T | None:
        if not self._interactive:
            log.debug("pick_skipped_non_interactive", choices=len(choices))
            return None
        answer = questionary.select(
            placeholder,
            choices=[
                questionary.Choice(f"{choice.label}  {choice.description}", value=i)
                for i, choice in enumerate(choices)
            ],
            style=_PICK_STYLE,
        ).ask()
        if answer is None:
            return None
        return choices[answer].payload

    def open_and_select(self, match: DefinitionMatch) -> None:
        line = match.start.line + 1
        column = match.start.column + 1
        click.echo(f"{match.path}:{line}:{column}")

        if not self._editor:
            return
        command = [*shlex.split(self._editor), f"+{line}", str(match.path)]
        try:
            subprocess.run(command, check=False)
        except OSError as e:
            raise InternalError.unexpected(
                f"could not launch editor: {e}", command=" ".join(command)
            ) from e

    def notify(self, message: str) -> None:
        self._console.print(message, markup=False, highlight=False)
