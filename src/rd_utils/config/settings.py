"""
Configuration management for rd-utils.

Uses Pydantic for type-safe, validated configuration with environment variable support.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings


class RdUtilsSettings(BaseSettings):
    """Main configuration for rd-utils.

    Settings can be overridden via:
    1. Environment variables (prefixed with RDU_)
    2. .env file in the working directory
    3. Programmatic overrides

    Example:
        export RDU_LOG_LEVEL=DEBUG
        export RDU_DEFAULT_FRACTION_DIGITS=2
    """

    # === Currency ===
    thousands_separator: str = Field(
        default=",",
        min_length=1,
        max_length=1,
        description="Thousands grouping separator (es-DO uses a comma)",
    )
    decimal_separator: str = Field(
        default=".",
        min_length=1,
        max_length=1,
        description="Decimal separator (es-DO uses a period)",
    )
    default_fraction_digits: int = Field(
        default=0, ge=0, le=2, description="Fraction digits used when none are given"
    )

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING", description="Logging level"
    )
    log_rotation: str = Field(default="10 MB", description="Log file rotation size")
    log_retention: str = Field(
        default="10 days", description="Log file retention period"
    )
    log_to_file: bool = Field(default=False, description="Enable file logging")
    logs_dir: Path = Field(default=Path("logs"), description="Log files directory")

    @model_validator(mode="after")
    def check_separators(self):
        """Grouping and decimal separators must be distinguishable."""
        if self.thousands_separator == self.decimal_separator:
            raise ValueError(
                "thousands_separator and decimal_separator must differ "
                f"(both are {self.decimal_separator!r})"
            )
        return self

    model_config = {
        "env_prefix": "RDU_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


# Global settings instance
settings = RdUtilsSettings()


def get_settings() -> RdUtilsSettings:
    """Return the current settings instance (follows reload_settings)."""
    return settings


def reload_settings() -> RdUtilsSettings:
    """Reload settings from environment and .env file.

    Useful for testing or runtime configuration changes.
    """
    global settings
    settings = RdUtilsSettings()
    return settings
