"""Value objects for neo-method-security."""

from .identifiers import MethodIdentifier, ViewIdentity

__all__ = [
    "MethodIdentifier",
    "ViewIdentity",
]
