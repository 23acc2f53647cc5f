"""Neo-Method-Security - method security metadata for NeoMultiTenant components.

Resolves, once per deployment, the effective access-control metadata
(deny-all, permit-all and allowed roles) of every method a component exposes
through its views.
"""

from .__version__ import __version__

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .config import MethodSecuritySettings, get_settings, LoggingConfig

from .core.exceptions import (
    # Base Exception
    MethodSecurityError,

    # Deployment Errors
    DeploymentConfigurationError,
    MissingImplementationMethodError,
    ConflictingAccessPolicyError,
    InvalidComponentError,
    SecurityFactsValidationError,
    MethodNotExposedError,

    # Utility Functions
    create_error_report,
)

from .core.value_objects import MethodIdentifier, ViewIdentity

from .features.security import (
    ComponentKind,
    ComponentClass,
    ComponentDescription,
    ComponentConfiguration,
    ImplementationMethod,
    ViewSecurityFacts,
    EffectiveSecurityMetadata,
    ComponentSecurityMetadata,
    SecurityDescriptorStore,
    MethodIdentityResolver,
    MethodSecurityResolver,
    SecurityMetadataProcessor,
    InMemorySecurityDescriptorStore,
    load_security_facts,
)

__all__ = [
    "__version__",

    # Configuration
    "MethodSecuritySettings",
    "get_settings",
    "LoggingConfig",
    "setup_logging",

    # Exceptions
    "MethodSecurityError",
    "DeploymentConfigurationError",
    "MissingImplementationMethodError",
    "ConflictingAccessPolicyError",
    "InvalidComponentError",
    "SecurityFactsValidationError",
    "MethodNotExposedError",
    "create_error_report",

    # Value Objects
    "MethodIdentifier",
    "ViewIdentity",

    # Method Security
    "ComponentKind",
    "ComponentClass",
    "ComponentDescription",
    "ComponentConfiguration",
    "ImplementationMethod",
    "ViewSecurityFacts",
    "EffectiveSecurityMetadata",
    "ComponentSecurityMetadata",
    "SecurityDescriptorStore",
    "MethodIdentityResolver",
    "MethodSecurityResolver",
    "SecurityMetadataProcessor",
    "InMemorySecurityDescriptorStore",
    "load_security_facts",
]
