"""Configuration module for neo-method-security."""

from .logging_config import (
    LogLevel,
    LogVerbosity,
    LogFormat,
    LoggingConfig,
    setup_logging,
    get_logger,
    get_log_level_from_verbosity,
)
from .settings import MethodSecuritySettings, get_settings

__all__ = [
    "LogLevel",
    "LogVerbosity",
    "LogFormat",
    "LoggingConfig",
    "setup_logging",
    "get_logger",
    "get_log_level_from_verbosity",
    "MethodSecuritySettings",
    "get_settings",
]
