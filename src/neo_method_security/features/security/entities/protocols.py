"""Protocol interfaces for the security descriptor store.

The store is fed by an external configuration-loading stage and answers the
per-view questions the method security resolver asks.
"""

from abc import abstractmethod
from typing import Optional, Protocol, Set, runtime_checkable

from ....core.value_objects import MethodIdentifier


@runtime_checkable
class SecurityDescriptorStore(Protocol):
    """Protocol for per-view declarative security facts of one component."""

    @abstractmethod
    def get_denied_methods(self, view_name: str) -> Optional[Set[MethodIdentifier]]:
        """Get methods excluded from the view (deny-all), ``None`` if none recorded."""
        ...

    @abstractmethod
    def is_deny_all_applicable_to_class(self, view_name: str, class_name: str) -> bool:
        """Check if class-level deny-all applies to the class for the view."""
        ...

    @abstractmethod
    def get_permitted_methods(self, view_name: str) -> Optional[Set[MethodIdentifier]]:
        """Get methods permitted for all roles on the view, ``None`` if none recorded."""
        ...

    @abstractmethod
    def is_permit_all_applicable_to_class(self, view_name: str, class_name: str) -> bool:
        """Check if class-level permit-all applies to the class for the view."""
        ...

    @abstractmethod
    def get_roles_allowed(self, view_name: str, method: MethodIdentifier) -> Set[str]:
        """Get method-level roles allowed, empty if none declared."""
        ...

    @abstractmethod
    def get_roles_allowed_for_class(self, view_name: str, class_name: str) -> Set[str]:
        """Get class-level roles allowed, empty if none declared."""
        ...
