"""Deployment-time processing of method security metadata.

Runs the method security resolver over every method of every view of a
component and freezes the results into ComponentSecurityMetadata.
"""

import logging
from typing import Dict, Optional

from ....config import MethodSecuritySettings, get_settings
from ....core.exceptions import DeploymentConfigurationError
from ....core.value_objects import ViewIdentity
from ..entities.component import ComponentConfiguration
from ..entities.metadata import ComponentSecurityMetadata, EffectiveSecurityMetadata
from ..entities.protocols import SecurityDescriptorStore
from .method_identity_resolver import MethodIdentityResolver
from .method_security_resolver import MethodSecurityResolver

logger = logging.getLogger(__name__)


class SecurityMetadataProcessor:
    """Computes the security metadata of whole components."""

    def __init__(
        self,
        identity_resolver: Optional[MethodIdentityResolver] = None,
        settings: Optional[MethodSecuritySettings] = None,
    ):
        self.identity_resolver = identity_resolver or MethodIdentityResolver()
        self.settings = settings or get_settings()

    def process(
        self,
        configuration: ComponentConfiguration,
        store: SecurityDescriptorStore,
    ) -> ComponentSecurityMetadata:
        """Resolve metadata for all exposed methods of a component.

        The first failing method aborts processing and its error propagates;
        no partial result is returned.
        """
        resolver = MethodSecurityResolver(
            configuration,
            store,
            identity_resolver=self.identity_resolver,
            settings=self.settings,
        )

        entries: Dict[ViewIdentity, EffectiveSecurityMetadata] = {}
        try:
            for view_name, methods in configuration.views.items():
                for method in methods:
                    entries[ViewIdentity(view_name, method)] = resolver.resolve(view_name, method)
        except DeploymentConfigurationError as e:
            logger.error(
                f"Security metadata processing failed for component "
                f"{configuration.component_name}: {e.message}"
            )
            raise

        result = ComponentSecurityMetadata(configuration.component_name, entries)
        denied = sum(1 for metadata in entries.values() if metadata.deny_all)
        permitted = sum(1 for metadata in entries.values() if metadata.permit_all)
        logger.info(
            f"Processed security metadata for component {configuration.component_name}: "
            f"{len(result)} method(s) across {len(configuration.views)} view(s), "
            f"{denied} deny-all, {permitted} permit-all"
        )
        return result
