"""Config module exports."""

from ngjump.config.loader import load_config
from ngjump.config.models import (
    LoggingConfig,
    LogOutputConfig,
    NgJumpConfig,
    SearchConfig,
)

__all__ = [
    "load_config",
    "LoggingConfig",
    "LogOutputConfig",
    "NgJumpConfig",
    "SearchConfig",
]
