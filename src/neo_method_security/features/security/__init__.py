"""Method security feature for neo-method-security.

Feature-First architecture for method security metadata:
- entities/: Components, view security facts, effective metadata and protocols
- services/: Method identity resolution, security resolution and processing
- repositories/: Descriptor store implementations and facts loading
"""

# Core entities and protocols
from .entities import (
    ComponentKind, ComponentClass, ComponentDescription, ComponentConfiguration,
    ImplementationMethod, ViewSecurityFacts, EffectiveSecurityMetadata,
    ComponentSecurityMetadata, SecurityDescriptorStore,
)

# Resolution services
from .services import MethodIdentityResolver, MethodSecurityResolver, SecurityMetadataProcessor

# Concrete repository implementations
from .repositories import InMemorySecurityDescriptorStore, load_security_facts

__all__ = [
    # Entities
    "ComponentKind",
    "ComponentClass",
    "ComponentDescription",
    "ComponentConfiguration",
    "ImplementationMethod",
    "ViewSecurityFacts",
    "EffectiveSecurityMetadata",
    "ComponentSecurityMetadata",

    # Protocols
    "SecurityDescriptorStore",

    # Services
    "MethodIdentityResolver",
    "MethodSecurityResolver",
    "SecurityMetadataProcessor",

    # Repository Implementations
    "InMemorySecurityDescriptorStore",
    "load_security_facts",
]
