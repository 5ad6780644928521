"""Lexical definition rules.

Each rule recognises one way a name gets defined in loosely-structured
JavaScript. Rules compile to a regex with a named group ``site``; the start
of ``site`` is the reported position and the character right before it is
what the scanner checks for a member-access dot.

Adding a rule means adding an object to MEMBER_RULES or building one with
registration_rules(); the scanner never special-cases a rule.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from ngjump.config.models import REGISTRATION_KINDS

# `(a, b) =>`, `(a) =>`, `a =>` and `() =>`
_ARROW = r"\(?[\w\s,]*\)?\s*=>"


class RuleKind(str, Enum):
    FUNCTION_DECLARATION = "function_declaration"
    ASSIGNED_FUNCTION = "assigned_function"
    CLASS_DECLARATION = "class_declaration"
    OBJECT_METHOD = "object_method"
    REGISTRATION_CALL = "registration_call"


@dataclass(frozen=True, slots=True)
class DefinitionRule:
    """A regex template with ``{name}`` standing for the escaped target name."""

    kind: RuleKind
    template: str
    flags: int = 0

    def compile(self, name: str) -> re.Pattern[str]:
        return re.compile(self.template.format(name=re.escape(name)), self.flags)


FUNCTION_DECLARATION = DefinitionRule(
    RuleKind.FUNCTION_DECLARATION,
    r"(?:^|(?<=\W))(?P<site>function\s+{name}\s*\()",
)

ASSIGNED_FUNCTION = DefinitionRule(
    RuleKind.ASSIGNED_FUNCTION,
    r"(?:^|(?<=\W))(?P<site>(?:const|let|var)\s+{name}\s*=\s*(?:function\b|" + _ARROW + "))",
)

CLASS_DECLARATION = DefinitionRule(
    RuleKind.CLASS_DECLARATION,
    r"(?:^|(?<=\W))(?P<site>class\s+{name}\s*\{{)",
)

# `name: function`, `name: (..) =>` or shorthand `name(..) {`, never `obj.name(..)`
OBJECT_METHOD = DefinitionRule(
    RuleKind.OBJECT_METHOD,
    r"(?<![\w.$])(?P<site>{name}(?::\s*(?:function\b|" + _ARROW + r")|\s*\([^(){{}};]*\)\s*\{{))",
)

MEMBER_RULES: tuple[DefinitionRule, ...] = (
    FUNCTION_DECLARATION,
    ASSIGNED_FUNCTION,
    CLASS_DECLARATION,
    OBJECT_METHOD,
)


def registration_rule(kind: str) -> DefinitionRule:
    """``.service('Name', function Name ...)`` and friends for one method."""
    return DefinitionRule(
        RuleKind.REGISTRATION_CALL,
        r"(?P<site>\." + re.escape(kind) + r"\(\s*['\"]{name}['\"]\s*,\s*(?:function\s+{name}\b|[\w$]+)?)",
    )


def registration_rules(kinds: Iterable[str] = REGISTRATION_KINDS) -> tuple[DefinitionRule, ...]:
    return tuple(registration_rule(kind) for kind in kinds)


REGISTRATION_RULES = registration_rules()
