"""Core module exports."""

from ngjump.core.errors import (
    ConfigError,
    ErrorCode,
    InternalError,
    NavigationError,
    NgJumpError,
)
from ngjump.core.logging import (
    clear_request_id,
    configure_logging,
    get_logger,
    get_request_id,
    set_request_id,
)

__all__ = [
    # Errors
    "ConfigError",
    "ErrorCode",
    "InternalError",
    "NavigationError",
    "NgJumpError",
    # Logging
    "clear_request_id",
    "configure_logging",
    "get_logger",
    "get_request_id",
    "set_request_id",
]
