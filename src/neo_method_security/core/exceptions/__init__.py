"""Exceptions module for neo-method-security."""

from .base import MethodSecurityError, create_error_report
from .deployment import (
    DeploymentConfigurationError,
    MissingImplementationMethodError,
    ConflictingAccessPolicyError,
    InvalidComponentError,
    SecurityFactsValidationError,
    MethodNotExposedError,
)

__all__ = [
    "MethodSecurityError",
    "create_error_report",
    "DeploymentConfigurationError",
    "MissingImplementationMethodError",
    "ConflictingAccessPolicyError",
    "InvalidComponentError",
    "SecurityFactsValidationError",
    "MethodNotExposedError",
]
