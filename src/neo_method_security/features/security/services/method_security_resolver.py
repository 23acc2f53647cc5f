"""Method security resolver.

Combines method-level and class-level declarative security facts of a view
into the effective metadata of one exposed method. Method-level facts are
the more specific statement and always take precedence over class-level
defaults; a method that ends up both denied and permitted for everyone
blocks deployment.
"""

import logging
from typing import FrozenSet, Optional

from ....config import MethodSecuritySettings, get_settings
from ....core.exceptions import ConflictingAccessPolicyError, InvalidComponentError
from ....core.value_objects import MethodIdentifier
from ..entities.component import ComponentConfiguration, ImplementationMethod
from ..entities.metadata import EffectiveSecurityMetadata
from ..entities.protocols import SecurityDescriptorStore
from .method_identity_resolver import MethodIdentityResolver

logger = logging.getLogger(__name__)


class MethodSecurityResolver:
    """Computes EffectiveSecurityMetadata for the views of one component."""

    def __init__(
        self,
        configuration: ComponentConfiguration,
        store: SecurityDescriptorStore,
        identity_resolver: Optional[MethodIdentityResolver] = None,
        settings: Optional[MethodSecuritySettings] = None,
    ):
        if not configuration.description.kind.carries_method_security:
            raise InvalidComponentError(
                f"{configuration.component_name} is not an EJB component",
                details={
                    "component": configuration.component_name,
                    "kind": configuration.description.kind.value,
                },
            )
        self.configuration = configuration
        self.store = store
        self.identity_resolver = identity_resolver or MethodIdentityResolver()
        self.settings = settings or get_settings()

    def find_component_method(self, view_method: MethodIdentifier) -> ImplementationMethod:
        """Find the implementation method corresponding to a view method."""
        return self.identity_resolver.resolve(self.configuration.component_class, view_method)

    def compute_deny_all(self, view_name: str, view_method: MethodIdentifier) -> bool:
        """Check the exclude list (deny-all) at method level, then class level."""
        component_method = self.find_component_method(view_method)
        denied_methods = self.store.get_denied_methods(view_name) or set()
        if component_method.identifier in denied_methods:
            return True
        return self.store.is_deny_all_applicable_to_class(view_name, component_method.declaring_class)

    def compute_permit_all(self, view_name: str, view_method: MethodIdentifier) -> bool:
        """Check permit-all at method level, then class level."""
        component_method = self.find_component_method(view_method)
        permitted_methods = self.store.get_permitted_methods(view_name) or set()
        if component_method.identifier in permitted_methods:
            return True
        return self.store.is_permit_all_applicable_to_class(view_name, component_method.declaring_class)

    def compute_roles_allowed(self, view_name: str, view_method: MethodIdentifier) -> FrozenSet[str]:
        """Get method-level roles, falling back to the declaring class's roles.

        The two levels are never merged: any method-level role overrides
        every class-level role.
        """
        component_method = self.find_component_method(view_method)
        roles_allowed = self.store.get_roles_allowed(view_name, component_method.identifier)
        if roles_allowed:
            return frozenset(roles_allowed)
        class_roles_allowed = self.store.get_roles_allowed_for_class(
            view_name, component_method.declaring_class
        )
        if class_roles_allowed:
            return frozenset(class_roles_allowed)
        return frozenset()

    def resolve(self, view_name: str, view_method: MethodIdentifier) -> EffectiveSecurityMetadata:
        """Compute the effective security metadata of a view method.

        Raises:
            MissingImplementationMethodError: If the component class has no
                matching implementation method
            ConflictingAccessPolicyError: If the method is both denied and
                permitted for all roles
        """
        deny_all = self.compute_deny_all(view_name, view_method)
        permit_all = self.compute_permit_all(view_name, view_method)
        if deny_all and permit_all:
            component_method = self.find_component_method(view_method)
            logger.error(
                f"Conflicting access policy for {component_method} on view {view_name} "
                f"of component {self.configuration.component_name}"
            )
            raise ConflictingAccessPolicyError(
                f"Method {component_method} for view {view_name} shouldn't be marked "
                f"for both permit-all and deny-all at the same time",
                details={
                    "component": self.configuration.component_name,
                    "view": view_name,
                    "method": str(component_method),
                },
            )

        metadata = EffectiveSecurityMetadata(
            deny_all=deny_all,
            permit_all=permit_all,
            roles_allowed=self.compute_roles_allowed(view_name, view_method),
        )
        if self.settings.log_resolutions:
            logger.debug(
                f"Resolved {self.configuration.component_name}/{view_name}#{view_method}: "
                f"{metadata.to_dict()}"
            )
        return metadata
