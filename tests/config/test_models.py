"""Tests for configuration models."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from ngjump.config.models import (
    REGISTRATION_KINDS,
    LoggingConfig,
    LogOutputConfig,
    NgJumpConfig,
    SearchConfig,
)
from ngjump.navigation.rules import REGISTRATION_RULES, registration_rules


class TestLogOutputConfig:
    """Tests for LogOutputConfig."""

    def test_defaults_to_console_on_stderr(self) -> None:
        output = LogOutputConfig()
        assert output.format == "console"
        assert output.destination == "stderr"
        assert output.level is None

    @pytest.mark.parametrize("destination", ["stderr", "stdout"])
    def test_stream_destinations(self, destination: str) -> None:
        assert LogOutputConfig(destination=destination).destination == destination

    def test_absolute_file_destination(self, tmp_path: Path) -> None:
        target = tmp_path / "ngjump.log"
        assert LogOutputConfig(destination=str(target)).destination == str(target)

    def test_relative_file_destination_rejected(self) -> None:
        with pytest.raises(ValidationError, match="absolute"):
            LogOutputConfig(destination="logs/ngjump.log")

    def test_unknown_format_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LogOutputConfig(format="xml")  # type: ignore[arg-type]


class TestLoggingConfig:
    """Tests for LoggingConfig."""

    def test_defaults(self) -> None:
        config = LoggingConfig()
        assert config.level == "WARNING"
        assert len(config.outputs) == 1

    def test_unknown_level_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LoggingConfig(level="LOUD")  # type: ignore[arg-type]


class TestSearchConfig:
    """Tests for SearchConfig."""

    def test_defaults(self) -> None:
        config = SearchConfig()
        assert config.ignore_glob == "**/node_modules/**"
        assert config.max_results_per_pattern == 100
        assert config.exclude_from_definitions == ["**/app.js"]
        assert config.registration_kinds == [
            "service",
            "factory",
            "controller",
            "directive",
            "filter",
            "provider",
        ]
        assert config.registration_search is True
        assert config.max_workers == 4

    def test_registration_kinds_match_the_rule_set(self) -> None:
        """Config defaults and the compiled registration rules share one kind list."""
        kinds = SearchConfig().registration_kinds

        assert kinds == list(REGISTRATION_KINDS)
        assert len(registration_rules(kinds)) == len(REGISTRATION_RULES)

    def test_default_lists_are_not_shared(self) -> None:
        first = SearchConfig()
        first.exclude_from_definitions.append("**/main.js")
        assert SearchConfig().exclude_from_definitions == ["**/app.js"]

    @pytest.mark.parametrize("field", ["max_results_per_pattern", "max_workers"])
    def test_counts_must_be_positive(self, field: str) -> None:
        with pytest.raises(ValidationError, match="at least 1"):
            SearchConfig(**{field: 0})

    def test_unknown_registration_kind_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SearchConfig(registration_kinds=["component"])  # type: ignore[list-item]


class TestNgJumpConfig:
    """Tests for the root model."""

    def test_sections_default(self) -> None:
        config = NgJumpConfig()
        assert isinstance(config.logging, LoggingConfig)
        assert isinstance(config.search, SearchConfig)

    def test_round_trips_through_dump(self) -> None:
        config = NgJumpConfig(search=SearchConfig(max_workers=2))
        assert NgJumpConfig.model_validate(config.model_dump()) == config
