"""Configuration for the trycatch command-line tooling.

The library functions themselves take no configuration. These settings drive
the ``trycatch`` CLI: log verbosity, JSON output and the simulated latency of
the async demo scenarios.
"""

from __future__ import annotations

import logging
from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings


class LogLevel(str, Enum):
    """Logging verbosity."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class TryCatchConfig(BaseSettings):
    """Settings for the trycatch CLI.

    All settings can be overridden via environment variables with the TRYCATCH_ prefix.
    Example: TRYCATCH_LOG_LEVEL=DEBUG, TRYCATCH_JSON_INDENT=0
    """

    model_config = {"env_prefix": "TRYCATCH_"}

    # Logging
    log_level: LogLevel = Field(default=LogLevel.WARNING, description="Root log level")
    log_format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="logging.basicConfig format string",
    )

    # Output
    json_indent: int = Field(default=2, ge=0, description="Indent for JSON output")

    # Demo
    demo_delay: float = Field(
        default=0.01, ge=0.0, description="Simulated latency for async demo scenarios (s)"
    )


class DemoConfig:
    """Configuration presets for the demo command."""

    @staticmethod
    def default() -> TryCatchConfig:
        return TryCatchConfig()

    @staticmethod
    def with_overrides(**kwargs: object) -> TryCatchConfig:
        """Create demo config with specific overrides."""
        return TryCatchConfig(**kwargs)  # type: ignore[arg-type]


def configure_logging(config: TryCatchConfig) -> None:
    """Install a root handler at the configured level."""
    logging.basicConfig(
        level=config.log_level.value,
        format=config.log_format,
        force=True,
    )
