"""12-factor configuration adapter using environment variables and TOML config."""

import logging
import sys
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class SearchConfig(BaseSettings):
    """Route search configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    # Search tuning
    default_transfer_minutes: int = Field(
        default=15,
        description="Minimum minutes between an arrival and the next departure (not applied before the first segment)",
    )
    top_n_retention_factor: int = Field(
        default=2,
        description="Top-N mode keeps up to this many times N itineraries per station",
    )
    top_n_result_cap_factor: int = Field(
        default=25,
        description="Top-N mode stops after collecting this many times N destination itineraries",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level for the route search")

    # TOML config file path; a [search] table overrides the settings above
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file with a [search] table",
    )

    @field_validator("default_transfer_minutes")
    @classmethod
    def validate_transfer_minutes(cls, v: int) -> int:
        """Validate the transfer buffer is not negative."""
        if v < 0:
            raise ValueError("default_transfer_minutes must not be negative")
        return v

    @field_validator("top_n_retention_factor", "top_n_result_cap_factor")
    @classmethod
    def validate_factor(cls, v: int) -> int:
        """Validate top-N factors are positive."""
        if v < 1:
            raise ValueError("top-N factors must be at least 1")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        if v.upper() not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return v.upper()

    def load_toml_overrides(self) -> dict[str, Any]:
        """Load the TOML file, if configured, and apply its [search] table.

        Returns:
            The parsed TOML document, or an empty dict when no file is configured.

        Raises:
            FileNotFoundError: If config_file is set but does not exist.
            ValueError: If the [search] table holds invalid values.
        """
        if not self.config_file:
            return {}

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        search = toml_data.get("search", {})
        if not isinstance(search, dict):
            raise ValueError("TOML config 'search' must be a table")
        for key in (
            "default_transfer_minutes",
            "top_n_retention_factor",
            "top_n_result_cap_factor",
            "log_level",
        ):
            if key in search:
                setattr(self, key, search[key])

        return toml_data

    def configure_logging(self) -> None:
        """Configure root logging for hosts embedding the route search."""
        logging.basicConfig(
            level=getattr(logging, self.log_level),
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            stream=sys.stderr,
        )
