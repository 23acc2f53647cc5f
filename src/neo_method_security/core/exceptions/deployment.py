"""Deployment-time configuration errors.

Every error here means a component must not be deployed: a method with an
undefined security posture is never exposed.
"""

from .base import MethodSecurityError


class DeploymentConfigurationError(MethodSecurityError):
    """Base class for errors that abort a component's deployment."""
    pass


class MissingImplementationMethodError(DeploymentConfigurationError):
    """Raised when a view method has no matching implementation method."""
    pass


class ConflictingAccessPolicyError(DeploymentConfigurationError):
    """Raised when a method resolves to both deny-all and permit-all."""
    pass


class InvalidComponentError(DeploymentConfigurationError):
    """Raised when a component kind cannot carry method security metadata."""
    pass


class SecurityFactsValidationError(DeploymentConfigurationError):
    """Raised when pre-resolved security facts fail validation."""
    pass


class MethodNotExposedError(MethodSecurityError, KeyError):
    """Raised when metadata is requested for a method no view exposes."""

    def __str__(self) -> str:
        return self.message
