"""
Settings for method security metadata resolution.

Environment-driven configuration built on pydantic settings, following the
same conventions as the other NeoMultiTenant platform services.
"""
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .logging_config import LogFormat, LogLevel, LogVerbosity


class MethodSecuritySettings(BaseSettings):
    """Settings controlling logging of security metadata resolution."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Overrides the level derived from log_verbosity when set
    log_level: Optional[LogLevel] = Field(default=None, validation_alias="LOG_LEVEL")
    log_verbosity: LogVerbosity = Field(default=LogVerbosity.NORMAL, validation_alias="LOG_VERBOSITY")
    log_format: LogFormat = Field(default=LogFormat.SIMPLE, validation_alias="LOG_FORMAT")

    # Emit one DEBUG record per resolved (view, method) pair
    log_resolutions: bool = Field(default=False, validation_alias="METHOD_SECURITY_LOG_RESOLUTIONS")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper() or None
        return value

    @field_validator("log_verbosity", mode="before")
    @classmethod
    def _lenient_verbosity(cls, value):
        # Unknown modes fall back to normal verbosity
        if isinstance(value, str):
            value = value.strip().upper()
            if value not in LogVerbosity.__members__:
                return LogVerbosity.NORMAL
        return value

    @field_validator("log_format", mode="before")
    @classmethod
    def _lenient_format(cls, value):
        if isinstance(value, str):
            value = value.strip().lower()
            if value not in {f.value for f in LogFormat}:
                return LogFormat.SIMPLE
        return value


@lru_cache()
def get_settings() -> MethodSecuritySettings:
    """Get cached settings instance."""
    return MethodSecuritySettings()
