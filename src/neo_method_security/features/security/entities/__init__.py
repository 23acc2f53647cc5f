"""Security entities package.

Domain entities and protocols for method security metadata.
"""

from .component import (
    ComponentKind,
    ComponentClass,
    ComponentDescription,
    ComponentConfiguration,
    ImplementationMethod,
)
from .facts import ViewSecurityFacts
from .metadata import EffectiveSecurityMetadata, ComponentSecurityMetadata
from .protocols import SecurityDescriptorStore

__all__ = [
    # Component entities
    "ComponentKind",
    "ComponentClass",
    "ComponentDescription",
    "ComponentConfiguration",
    "ImplementationMethod",

    # Security entities
    "ViewSecurityFacts",
    "EffectiveSecurityMetadata",
    "ComponentSecurityMetadata",

    # Protocols
    "SecurityDescriptorStore",
]
