"""Host capabilities the navigation engine depends on.

The engine never touches an editor directly. A host enumerates files,
reads them, shows a choice list, moves the cursor and shows messages.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Generic, Protocol, TypeVar

if TYPE_CHECKING:
    from ngjump.navigation.ops import DefinitionMatch

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Choice(Generic[T]):
    """One entry of a disambiguation list."""

    label: str
    description: str
    payload: T


class Host(Protocol):
    def find_files(
        self, include_globs: Sequence[str], exclude_glob: str | None, max_results: int
    ) -> list[list[Path]]:
        """Absolute paths of workspace files for each of ``include_globs``.

        One list per glob, in glob order, each capped at ``max_results``.
        """
        ...

    def read_text(self, path: Path) -> str: ...

    def pick_one(self, choices: Sequence[Choice[T]], *, placeholder: str) -> T | None:
        """Payload of the chosen entry, or None if dismissed."""
        ...

    def open_and_select(self, match: DefinitionMatch) -> None: ...

    def notify(self, message: str) -> None: ...
