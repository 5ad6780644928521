"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (NGJUMP__SECTION__KEY)
3. Workspace YAML (.ngjump/config.yaml)
4. Global YAML (~/.config/ngjump/config.yaml)
5. Built-in defaults (this file)

Examples:
    NGJUMP__LOGGING__LEVEL=DEBUG
    NGJUMP__SEARCH__MAX_RESULTS_PER_PATTERN=50
"""

from pathlib import Path
from typing import Literal, get_args

from pydantic import BaseModel, Field, field_validator

from ngjump.core.excludes import DEFAULT_DEFINITION_EXCLUDES, DEFAULT_IGNORE_GLOB

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

RegistrationKind = Literal["service", "factory", "controller", "directive", "filter", "provider"]

# angular.module(...) registration methods
REGISTRATION_KINDS: tuple[RegistrationKind, ...] = get_args(RegistrationKind)


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        NGJUMP__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. DEBUG traces every pattern, file and hit.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class SearchConfig(BaseModel):
    """Definition search configuration.

    Env vars:
        NGJUMP__SEARCH__IGNORE_GLOB: Glob never offered as a candidate file
        NGJUMP__SEARCH__MAX_RESULTS_PER_PATTERN: File cap for each guessed pattern
        NGJUMP__SEARCH__MAX_WORKERS: Threads used to read and scan candidates
    """

    ignore_glob: str = Field(
        default=DEFAULT_IGNORE_GLOB,
        description="Files matching this glob are never enumerated as candidates.",
    )
    max_results_per_pattern: int = Field(
        default=100,
        description="Maximum files enumerated for each guessed filename pattern. "
        "The cap is per pattern, so the total scanned can exceed it.",
    )
    exclude_from_definitions: list[str] = Field(
        default_factory=lambda: list(DEFAULT_DEFINITION_EXCLUDES),
        description="Wiring/bootstrap files that register components but never "
        "define them. Matching files are never scanned.",
    )
    registration_kinds: list[RegistrationKind] = Field(
        default_factory=lambda: list(REGISTRATION_KINDS),
        description="angular.module() registration calls searched for bare names.",
    )
    registration_search: bool = Field(
        default=True,
        description="For a bare name nothing declares, fall back to its registration calls.",
    )
    max_workers: int = Field(
        default=4,
        description="Threads used to read and scan candidate files.",
    )

    @field_validator("max_results_per_pattern", "max_workers")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"Must be at least 1, got {v}")
        return v


class NgJumpConfig(BaseModel):
    """Root configuration model."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
