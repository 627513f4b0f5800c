"""
Validator settings using pydantic-settings for type-safe configuration.

Values come from FIELDCHECK_* environment variables or a .env file and are
loaded once, then cached.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Validator settings loaded from environment variables.

    Every setting has a default suitable for form handling in development.
    """

    model_config = SettingsConfigDict(
        env_prefix="FIELDCHECK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # === Logging ===
    log_level: str = Field(
        default="INFO",
        description="Log level: TRACE, DEBUG, INFO, WARNING or ERROR",
    )
    log_source: str = Field(
        default="fieldcheck",
        description="Source tag shown in brackets in every log line",
    )

    # === Rule handling ===
    strict_rules: bool = Field(
        default=False,
        description="Raise UnknownRuleError instead of logging and skipping unknown rule names",
    )
    confirm_email_selector: str = Field(
        default="email",
        description="Field selector used by confirmEmail when no selector is given",
    )

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize log_level."""
        v = v.upper()
        if v not in ("TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid FIELDCHECK_LOG_LEVEL: {v}")
        return v


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are loaded once and cached for the lifetime of the process.
    Call get_settings.cache_clear() to pick up environment changes.
    """
    return Settings()
