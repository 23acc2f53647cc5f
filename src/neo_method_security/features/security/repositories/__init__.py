"""Security repositories package.

Concrete descriptor store implementations and facts loading.
"""

from .memory_descriptor_store import InMemorySecurityDescriptorStore
from .facts_loader import (
    MethodIdentifierModel,
    MethodRolesModel,
    ViewSecurityFactsModel,
    ComponentSecurityFactsModel,
    load_security_facts,
)

__all__ = [
    "InMemorySecurityDescriptorStore",
    "MethodIdentifierModel",
    "MethodRolesModel",
    "ViewSecurityFactsModel",
    "ComponentSecurityFactsModel",
    "load_security_facts",
]
