"""Structured security facts for a single view.

Facts are produced by an external stage that reads annotations or deployment
descriptors; here they are already plain sets and mappings.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import FrozenSet, Mapping

from ....core.value_objects import MethodIdentifier


@dataclass(frozen=True)
class ViewSecurityFacts:
    """Method-level and class-level declarative security facts of one view."""

    denied_methods: FrozenSet[MethodIdentifier] = frozenset()
    permitted_methods: FrozenSet[MethodIdentifier] = frozenset()
    deny_all_classes: FrozenSet[str] = frozenset()
    permit_all_classes: FrozenSet[str] = frozenset()
    method_roles: Mapping[MethodIdentifier, FrozenSet[str]] = field(default_factory=dict)
    class_roles: Mapping[str, FrozenSet[str]] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "denied_methods", frozenset(self.denied_methods))
        object.__setattr__(self, "permitted_methods", frozenset(self.permitted_methods))
        object.__setattr__(self, "deny_all_classes", frozenset(self.deny_all_classes))
        object.__setattr__(self, "permit_all_classes", frozenset(self.permit_all_classes))
        object.__setattr__(
            self,
            "method_roles",
            MappingProxyType({method: frozenset(roles) for method, roles in self.method_roles.items()}),
        )
        object.__setattr__(
            self,
            "class_roles",
            MappingProxyType({name: frozenset(roles) for name, roles in self.class_roles.items()}),
        )
