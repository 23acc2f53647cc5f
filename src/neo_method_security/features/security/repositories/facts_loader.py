"""Loader turning plain mappings of security facts into a descriptor store.

The input is the output of an annotation/descriptor reading stage, already
reduced to method identifiers, class names and role names, e.g.::

    {
        "views": {
            "Incrementor": {
                "denied_methods": [{"name": "reset", "parameter_types": []}],
                "permit_all_classes": ["app.beans.Counter"],
                "method_roles": [
                    {"method": {"name": "increment"}, "roles": ["user"]}
                ],
                "class_roles": {"app.beans.Counter": ["admin"]}
            }
        }
    }
"""

import logging
from typing import Any, Dict, List, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ....core.exceptions import SecurityFactsValidationError
from ....core.value_objects import MethodIdentifier
from ..entities.facts import ViewSecurityFacts
from .memory_descriptor_store import InMemorySecurityDescriptorStore

logger = logging.getLogger(__name__)


class MethodIdentifierModel(BaseModel):
    """Method signature as name plus ordered parameter type names."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., min_length=1)
    parameter_types: List[str] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Method name must not be blank")
        return v.strip()

    def to_identifier(self) -> MethodIdentifier:
        return MethodIdentifier(self.name, tuple(self.parameter_types))


class MethodRolesModel(BaseModel):
    """Roles declared on a single method."""

    model_config = ConfigDict(extra="forbid")

    method: MethodIdentifierModel
    roles: List[str] = Field(default_factory=list)


class ViewSecurityFactsModel(BaseModel):
    """Validated security facts for one view."""

    model_config = ConfigDict(extra="forbid")

    denied_methods: List[MethodIdentifierModel] = Field(default_factory=list)
    permitted_methods: List[MethodIdentifierModel] = Field(default_factory=list)
    deny_all_classes: List[str] = Field(default_factory=list)
    permit_all_classes: List[str] = Field(default_factory=list)
    method_roles: List[MethodRolesModel] = Field(default_factory=list)
    class_roles: Dict[str, List[str]] = Field(default_factory=dict)

    def to_facts(self) -> ViewSecurityFacts:
        # Roles declared twice for one method are merged
        method_roles: Dict[MethodIdentifier, set] = {}
        for entry in self.method_roles:
            method_roles.setdefault(entry.method.to_identifier(), set()).update(entry.roles)

        return ViewSecurityFacts(
            denied_methods=frozenset(m.to_identifier() for m in self.denied_methods),
            permitted_methods=frozenset(m.to_identifier() for m in self.permitted_methods),
            deny_all_classes=frozenset(self.deny_all_classes),
            permit_all_classes=frozenset(self.permit_all_classes),
            method_roles=method_roles,
            class_roles=self.class_roles,
        )


class ComponentSecurityFactsModel(BaseModel):
    """Validated security facts for all views of one component."""

    model_config = ConfigDict(extra="forbid")

    views: Dict[str, ViewSecurityFactsModel] = Field(default_factory=dict)


def load_security_facts(data: Mapping[str, Any]) -> InMemorySecurityDescriptorStore:
    """Validate structured security facts and build a descriptor store.

    Args:
        data: Mapping with a ``views`` key, one entry per view name

    Returns:
        Store answering the resolver's per-view questions

    Raises:
        SecurityFactsValidationError: If the facts are malformed
    """
    try:
        model = ComponentSecurityFactsModel.model_validate(data)
    except ValidationError as e:
        raise SecurityFactsValidationError(
            f"Invalid security facts: {e.error_count()} validation error(s)",
            details={"errors": e.errors(include_url=False)},
        ) from e

    store = InMemorySecurityDescriptorStore()
    for view_name, view_model in model.views.items():
        store.add_view(view_name, view_model.to_facts())

    logger.debug(f"Loaded security facts for {len(model.views)} view(s)")
    return store
