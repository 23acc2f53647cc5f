"""Pytest configuration and fixtures for neo-method-security tests."""

import pytest

from neo_method_security.config import MethodSecuritySettings
from neo_method_security.core.value_objects import MethodIdentifier
from neo_method_security.features.security.entities import (
    ComponentClass,
    ComponentConfiguration,
    ComponentDescription,
    ViewSecurityFacts,
)
from neo_method_security.features.security.repositories import InMemorySecurityDescriptorStore
from neo_method_security.features.security.services import MethodSecurityResolver


@pytest.fixture
def bar_int():
    """bar(int), the method exposed through view V."""
    return MethodIdentifier.of("bar", "int")


@pytest.fixture
def foo_class(bar_int):
    """Implementation class Foo declaring bar(int)."""
    return ComponentClass("Foo", {bar_int})


@pytest.fixture
def base_class():
    """Superclass declaring an inherited method and one Foo overrides."""
    return ComponentClass(
        "Base",
        {MethodIdentifier.of("ping"), MethodIdentifier.of("describe", "str")},
    )


@pytest.fixture
def derived_class(base_class, bar_int):
    """Foo extending Base and overriding describe(str)."""
    return ComponentClass(
        "Foo",
        {bar_int, MethodIdentifier.of("describe", "str")},
        superclass=base_class,
    )


@pytest.fixture
def settings():
    """Settings with per-resolution debug logging enabled."""
    return MethodSecuritySettings(log_resolutions=True)


@pytest.fixture
def foo_configuration(foo_class, bar_int):
    """Component FooBean exposing bar(int) through view V."""
    return ComponentConfiguration(
        description=ComponentDescription("FooBean"),
        component_class=foo_class,
        views={"V": (bar_int,)},
    )


@pytest.fixture
def make_resolver(foo_configuration, settings):
    """Factory building a resolver for FooBean over the given view facts."""

    def _make(configuration=None, **facts_by_view):
        store = InMemorySecurityDescriptorStore(
            {view: ViewSecurityFacts(**facts) for view, facts in facts_by_view.items()}
        )
        return MethodSecurityResolver(configuration or foo_configuration, store, settings=settings)

    return _make
