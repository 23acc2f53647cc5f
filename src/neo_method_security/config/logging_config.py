"""Centralized logging configuration for neo-method-security.

Provides consistent, configurable logging with environment-based control
over verbosity and output format.
"""

import logging
import logging.config
from enum import Enum
from typing import Optional


class LogLevel(str, Enum):
    """Supported log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogVerbosity(str, Enum):
    """Log verbosity modes."""
    QUIET = "QUIET"      # Only errors and critical
    NORMAL = "NORMAL"    # Standard logging (warnings and above)
    VERBOSE = "VERBOSE"  # Info level logging
    DEBUG = "DEBUG"      # Full debug logging


class LogFormat(str, Enum):
    """Log format options."""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


FORMAT_STRINGS = {
    LogFormat.SIMPLE: "%(asctime)s - %(levelname)s - %(message)s",
    LogFormat.DETAILED: "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
    LogFormat.JSON: '{"time":"%(asctime)s","level":"%(levelname)s","module":"%(name)s","message":"%(message)s"}',
}


def get_log_level_from_verbosity(verbosity: str) -> str:
    """Map verbosity mode to log level."""
    verbosity_map = {
        LogVerbosity.QUIET: LogLevel.ERROR.value,
        LogVerbosity.NORMAL: LogLevel.WARNING.value,
        LogVerbosity.VERBOSE: LogLevel.INFO.value,
        LogVerbosity.DEBUG: LogLevel.DEBUG.value,
    }
    return verbosity_map[LogVerbosity(verbosity.upper())]


class LoggingConfig:
    """Centralized logging configuration manager."""

    PACKAGE_LOGGER = "neo_method_security"

    @classmethod
    def build(
        cls,
        verbosity: str = "NORMAL",
        log_format: str = "simple",
        log_level: Optional[str] = None,
    ) -> dict:
        """Build a ``dictConfig`` mapping.

        An explicit ``log_level`` wins over the level derived from verbosity.
        """
        effective_log_level = log_level.upper() if log_level else get_log_level_from_verbosity(verbosity)
        format_string = FORMAT_STRINGS[LogFormat(log_format.lower())]

        return {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": format_string,
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": effective_log_level,
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "loggers": {
                cls.PACKAGE_LOGGER: {
                    "level": effective_log_level,
                    "handlers": ["console"],
                    "propagate": True,
                },
            },
        }

    @classmethod
    def configure(cls, settings=None) -> None:
        """Configure logging from settings (environment variables by default)."""
        if settings is None:
            from .settings import get_settings
            settings = get_settings()

        log_verbosity = settings.log_verbosity.value
        log_format = settings.log_format.value
        log_level = settings.log_level.value if settings.log_level else None

        logging.config.dictConfig(cls.build(log_verbosity, log_format, log_level))

        logger = logging.getLogger(__name__)
        logger.debug(
            f"Logging configured: level={log_level}, verbosity={log_verbosity}, format={log_format}"
        )

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Get a configured logger for the given module name."""
        return logging.getLogger(name)


def setup_logging() -> None:
    """Setup logging configuration from environment variables.

    This is the main entry point for configuring logging. It runs once
    when the package is imported.
    """
    LoggingConfig.configure()


def get_logger(name: str) -> logging.Logger:
    """Get a configured logger.

    Args:
        name: Module name (usually __name__)

    Returns:
        Configured logger instance
    """
    return LoggingConfig.get_logger(name)
