"""Security services package."""

from .method_identity_resolver import MethodIdentityResolver
from .method_security_resolver import MethodSecurityResolver
from .metadata_processor import SecurityMetadataProcessor

__all__ = [
    "MethodIdentityResolver",
    "MethodSecurityResolver",
    "SecurityMetadataProcessor",
]
