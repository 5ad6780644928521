"""Navigation module - heuristic go-to-definition."""

from ngjump.navigation.guessing import guess_file_patterns
from ngjump.navigation.ops import (
    DefinitionMatch,
    NavigationOps,
    RequestContext,
    Resolution,
)
from ngjump.navigation.reference import Reference, parse_reference
from ngjump.navigation.scanner import Position, ScanHit, scan_text

__all__ = [
    "DefinitionMatch",
    "NavigationOps",
    "Position",
    "Reference",
    "RequestContext",
    "Resolution",
    "ScanHit",
    "guess_file_patterns",
    "parse_reference",
    "scan_text",
]
