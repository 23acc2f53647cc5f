"""In-memory SecurityDescriptorStore implementation."""

import logging
from typing import Dict, Mapping, Optional, Set

from ....core.value_objects import MethodIdentifier
from ..entities.facts import ViewSecurityFacts
from ..entities.protocols import SecurityDescriptorStore

logger = logging.getLogger(__name__)


class InMemorySecurityDescriptorStore(SecurityDescriptorStore):
    """Descriptor store backed by pre-resolved ViewSecurityFacts per view.

    Views without recorded facts behave as views with no security
    declarations at all.
    """

    def __init__(self, facts_by_view: Optional[Mapping[str, ViewSecurityFacts]] = None):
        self._facts: Dict[str, ViewSecurityFacts] = dict(facts_by_view or {})

    def add_view(self, view_name: str, facts: ViewSecurityFacts) -> None:
        """Record facts for a view, replacing any facts recorded before."""
        if view_name in self._facts:
            logger.debug(f"Replacing security facts for view {view_name}")
        self._facts[view_name] = facts

    def view_facts(self, view_name: str) -> Optional[ViewSecurityFacts]:
        return self._facts.get(view_name)

    def get_denied_methods(self, view_name: str) -> Optional[Set[MethodIdentifier]]:
        facts = self._facts.get(view_name)
        return None if facts is None else set(facts.denied_methods)

    def is_deny_all_applicable_to_class(self, view_name: str, class_name: str) -> bool:
        facts = self._facts.get(view_name)
        return facts is not None and class_name in facts.deny_all_classes

    def get_permitted_methods(self, view_name: str) -> Optional[Set[MethodIdentifier]]:
        facts = self._facts.get(view_name)
        return None if facts is None else set(facts.permitted_methods)

    def is_permit_all_applicable_to_class(self, view_name: str, class_name: str) -> bool:
        facts = self._facts.get(view_name)
        return facts is not None and class_name in facts.permit_all_classes

    def get_roles_allowed(self, view_name: str, method: MethodIdentifier) -> Set[str]:
        facts = self._facts.get(view_name)
        if facts is None:
            return set()
        return set(facts.method_roles.get(method, ()))

    def get_roles_allowed_for_class(self, view_name: str, class_name: str) -> Set[str]:
        facts = self._facts.get(view_name)
        if facts is None:
            return set()
        return set(facts.class_roles.get(class_name, ()))
