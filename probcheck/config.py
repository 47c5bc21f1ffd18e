"""Runtime configuration — env-driven.

Reads from a .env file and PROBCHECK_* environment variables.  Command-line
options take precedence over anything set here.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ProbCheckConfig(BaseSettings):
    """Settings with environment variable overrides.

    Examples
    --------
    Override via environment::

        export PROBCHECK_DATA_FILE=/var/lib/probcheck/status.json
        export PROBCHECK_LOG_LEVEL=DEBUG
        export PROBCHECK_RECHECK_FACTOR=2.5
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="PROBCHECK_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    data_file: Path = Path(".probcheck/status.json")
    log_level: LogLevel = "WARNING"

    # Numerator of the base recheck probability (factor / stable_days)
    recheck_factor: float = Field(default=3.0, gt=0)

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value


@lru_cache(maxsize=1)
def get_config() -> ProbCheckConfig:
    """Build the settings once per process.

    Raises ``pydantic.ValidationError`` for invalid environment values; the
    CLI reports that as a fatal error.
    """
    return ProbCheckConfig()
