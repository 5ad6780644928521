"""ngjump error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Navigation
- 9xxx: Internal
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Navigation (3xxx)
    EMPTY_SELECTION = 3001
    NO_ACTIVE_DOCUMENT = 3002
    DEFINITION_NOT_FOUND = 3003

    # Internal (9xxx)
    INTERNAL_ERROR = 9001


@dataclass(frozen=True, slots=True)
class NgJumpError(Exception):
    """Base error with structured context.

    ``message`` is user-facing; it is what a host shows in its notification.
    """

    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'EMPTY_SELECTION')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(NgJumpError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class NavigationError(NgJumpError):
    """Conditions that end a go-to-definition request early.

    None of these are fatal: hosts surface ``message`` as a notification.
    """

    @classmethod
    def empty_selection(cls) -> "NavigationError":
        return cls(code=ErrorCode.EMPTY_SELECTION, message="No text selected.")

    @classmethod
    def no_active_document(cls) -> "NavigationError":
        return cls(code=ErrorCode.NO_ACTIVE_DOCUMENT, message="No active editor.")

    @classmethod
    def definition_not_found(cls, selection: str) -> "NavigationError":
        return cls(
            code=ErrorCode.DEFINITION_NOT_FOUND,
            message=f'Could not find definition for "{selection}".',
            details={"selection": selection},
        )


class InternalError(NgJumpError):
    """Internal/unexpected errors."""

    @classmethod
    def unexpected(cls, reason: str, **details: Any) -> "InternalError":
        return cls(
            code=ErrorCode.INTERNAL_ERROR,
            message=f"Internal error: {reason}",
            details=details,
        )
