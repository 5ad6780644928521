"""Selection parsing - turn a raw selection into an owner/member reference."""

from __future__ import annotations

import re
from dataclasses import dataclass

from ngjump.core.errors import NavigationError

_QUOTES = "'\""


@dataclass(frozen=True, slots=True)
class Reference:
    """What the user asked to jump to.

    ``owner_name`` drives filename guessing, ``member_name`` drives the
    definition search. For a bare identifier both are the same name.
    """

    owner_name: str
    member_name: str

    @property
    def is_bare(self) -> bool:
        return self.owner_name == self.member_name


def strip_quotes(text: str) -> str:
    """Remove one leading and one trailing quote, if present."""
    if text[:1] in _QUOTES:
        text = text[1:]
    if text[-1:] in _QUOTES:
        text = text[:-1]
    return text


def parse_reference(selected_text: str, line_text: str) -> Reference:
    """Parse a selection and the text of its line into a Reference.

    - ``Service.doThing`` splits on the first dot.
    - ``doThing`` on a line containing ``Service.doThing(`` infers the
      receiver as owner.
    - Anything else is a bare reference.

    Raises:
        NavigationError(EMPTY_SELECTION): If the selection is blank.
    """
    cleaned = strip_quotes(selected_text.strip())
    if not cleaned:
        raise NavigationError.empty_selection()

    owner, dot, member = cleaned.partition(".")
    if dot:
        if owner and member:
            return Reference(owner_name=owner, member_name=member)
        return Reference(owner_name=cleaned, member_name=cleaned)

    call = re.search(rf"(\w+)\.{re.escape(cleaned)}\s*\(", line_text, re.IGNORECASE)
    if call:
        return Reference(owner_name=call.group(1), member_name=cleaned)

    return Reference(owner_name=cleaned, member_name=cleaned)
