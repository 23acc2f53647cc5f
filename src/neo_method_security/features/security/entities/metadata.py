"""Effective security metadata of methods exposed through component views.

Results are computed once during deployment and are immutable afterwards,
so request-handling threads may read them concurrently without locking.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterator, Mapping, Tuple

from ....core.exceptions import ConflictingAccessPolicyError, MethodNotExposedError
from ....core.value_objects import MethodIdentifier, ViewIdentity


@dataclass(frozen=True)
class EffectiveSecurityMetadata:
    """Access-control metadata of one (component, view, method).

    ``deny_all`` and ``permit_all`` are unconditional short-circuits and may
    never both be set. ``roles_allowed`` applies when neither is set and may
    be empty when no role is declared for the method.
    """

    deny_all: bool = False
    permit_all: bool = False
    roles_allowed: FrozenSet[str] = frozenset()

    def __post_init__(self):
        if self.deny_all and self.permit_all:
            raise ConflictingAccessPolicyError(
                "Access policy can't be both deny-all and permit-all",
                details={"deny_all": True, "permit_all": True},
            )
        object.__setattr__(self, "roles_allowed", frozenset(self.roles_allowed))

    def is_access_denied(self) -> bool:
        """Check if access is denied for all roles."""
        return self.deny_all

    def is_permit_all(self) -> bool:
        """Check if access is permitted for all roles."""
        return self.permit_all

    def get_roles_allowed(self) -> FrozenSet[str]:
        """Get the roles allowed to invoke the method, possibly empty."""
        return self.roles_allowed

    def to_dict(self) -> Dict[str, Any]:
        return {
            "deny_all": self.deny_all,
            "permit_all": self.permit_all,
            "roles_allowed": sorted(self.roles_allowed),
        }

    def __repr__(self) -> str:
        if self.deny_all:
            return "EffectiveSecurityMetadata(deny_all)"
        if self.permit_all:
            return "EffectiveSecurityMetadata(permit_all)"
        return f"EffectiveSecurityMetadata(roles_allowed={sorted(self.roles_allowed)})"


@dataclass(frozen=True)
class ComponentSecurityMetadata:
    """Effective security metadata of every operation a component exposes."""

    component_name: str
    entries: Mapping[ViewIdentity, EffectiveSecurityMetadata] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def get(self, view_name: str, method: MethodIdentifier) -> EffectiveSecurityMetadata:
        """Get metadata for a view method.

        Raises:
            MethodNotExposedError: If the component doesn't expose the method
                through the view.
        """
        try:
            return self.entries[ViewIdentity(view_name, method)]
        except (KeyError, ValueError):
            raise MethodNotExposedError(
                f"Method {method} is not exposed through view {view_name} "
                f"of component {self.component_name}",
                details={"component": self.component_name, "view": view_name, "method": str(method)},
            ) from None

    def view_names(self) -> Tuple[str, ...]:
        return tuple(sorted({identity.view_name for identity in self.entries}))

    def __contains__(self, identity: object) -> bool:
        return identity in self.entries

    def __iter__(self) -> Iterator[ViewIdentity]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)
