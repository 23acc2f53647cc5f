"""Tests for method security resolution and precedence rules."""

import logging

import pytest

from neo_method_security.core.exceptions import (
    ConflictingAccessPolicyError,
    InvalidComponentError,
    MissingImplementationMethodError,
)
from neo_method_security.core.value_objects import MethodIdentifier
from neo_method_security.features.security.entities import (
    ComponentConfiguration,
    ComponentDescription,
    ComponentKind,
)
from neo_method_security.features.security.repositories import InMemorySecurityDescriptorStore
from neo_method_security.features.security.services import MethodSecurityResolver


class TestDenyAll:
    """Test deny-all (exclude list) resolution."""

    def test_method_in_deny_set_is_denied(self, make_resolver, bar_int):
        resolver = make_resolver(V={"denied_methods": {bar_int}})

        metadata = resolver.resolve("V", bar_int)

        assert metadata.is_access_denied() is True
        assert metadata.is_permit_all() is False

    def test_class_level_deny_all(self, make_resolver, bar_int):
        resolver = make_resolver(V={"deny_all_classes": {"Foo"}})

        assert resolver.compute_deny_all("V", bar_int) is True

    def test_absent_method_is_not_denied(self, make_resolver, bar_int):
        resolver = make_resolver(V={"denied_methods": {MethodIdentifier.of("bar", "long")}})

        assert resolver.compute_deny_all("V", bar_int) is False

    def test_deny_set_of_other_view_does_not_apply(self, make_resolver, bar_int):
        resolver = make_resolver(Other={"denied_methods": {bar_int}, "deny_all_classes": {"Foo"}})

        assert resolver.compute_deny_all("V", bar_int) is False

    def test_store_without_deny_set(self, foo_configuration, settings, bar_int, mocker):
        store = mocker.Mock(spec=InMemorySecurityDescriptorStore)
        store.get_denied_methods.return_value = None
        store.is_deny_all_applicable_to_class.return_value = False
        resolver = MethodSecurityResolver(foo_configuration, store, settings=settings)

        assert resolver.compute_deny_all("V", bar_int) is False
        store.is_deny_all_applicable_to_class.assert_called_once_with("V", "Foo")


class TestPermitAll:
    """Test permit-all resolution."""

    def test_class_level_permit_all(self, make_resolver, bar_int):
        resolver = make_resolver(V={"permit_all_classes": {"Foo"}})

        metadata = resolver.resolve("V", bar_int)

        assert metadata.is_permit_all() is True
        assert metadata.is_access_denied() is False

    def test_method_in_permit_set(self, make_resolver, bar_int):
        resolver = make_resolver(V={"permitted_methods": {bar_int}})

        assert resolver.compute_permit_all("V", bar_int) is True

    def test_no_facts_means_no_short_circuit(self, make_resolver, bar_int):
        metadata = make_resolver().resolve("V", bar_int)

        assert metadata.is_permit_all() is False
        assert metadata.is_access_denied() is False
        assert metadata.get_roles_allowed() == frozenset()


class TestRolesAllowed:
    """Test method-level over class-level role precedence."""

    def test_method_level_overrides_class_level(self, make_resolver, bar_int):
        resolver = make_resolver(V={"method_roles": {bar_int: {"A"}}, "class_roles": {"Foo": {"B"}}})

        assert resolver.resolve("V", bar_int).get_roles_allowed() == {"A"}

    def test_class_level_fallback(self, make_resolver, bar_int):
        resolver = make_resolver(V={"method_roles": {bar_int: set()}, "class_roles": {"Foo": {"B"}}})

        assert resolver.resolve("V", bar_int).get_roles_allowed() == {"B"}

    def test_both_empty(self, make_resolver, bar_int):
        resolver = make_resolver(V={"class_roles": {"Other": {"B"}}})

        assert resolver.resolve("V", bar_int).get_roles_allowed() == frozenset()

    def test_roles_are_immutable(self, make_resolver, bar_int):
        roles = make_resolver(V={"method_roles": {bar_int: {"A"}}}).resolve("V", bar_int).get_roles_allowed()

        assert isinstance(roles, frozenset)

    def test_roles_kept_alongside_permit_all(self, make_resolver, bar_int):
        resolver = make_resolver(V={"permitted_methods": {bar_int}, "class_roles": {"Foo": {"B"}}})

        metadata = resolver.resolve("V", bar_int)

        assert metadata.is_permit_all() is True
        assert metadata.get_roles_allowed() == {"B"}


class TestInheritedMethods:
    """Test that class-level facts follow the declaring class."""

    @pytest.fixture
    def derived_configuration(self, derived_class):
        return ComponentConfiguration(
            description=ComponentDescription("FooBean"),
            component_class=derived_class,
            views={"V": (MethodIdentifier.of("ping"), MethodIdentifier.of("describe", "str"))},
        )

    def test_superclass_deny_all_applies_to_inherited_method(self, make_resolver, derived_configuration):
        resolver = make_resolver(derived_configuration, V={"deny_all_classes": {"Base"}})

        assert resolver.compute_deny_all("V", MethodIdentifier.of("ping")) is True
        assert resolver.compute_deny_all("V", MethodIdentifier.of("describe", "str")) is False

    def test_superclass_roles_apply_to_inherited_method(self, make_resolver, derived_configuration):
        resolver = make_resolver(
            derived_configuration, V={"class_roles": {"Base": {"base"}, "Foo": {"foo"}}}
        )

        assert resolver.compute_roles_allowed("V", MethodIdentifier.of("ping")) == {"base"}
        assert resolver.compute_roles_allowed("V", MethodIdentifier.of("describe", "str")) == {"foo"}


class TestConflictingPolicy:
    """Test detection of methods both denied and permitted for all."""

    @pytest.mark.parametrize(
        "facts",
        [
            pytest.param({"denied_methods": "method", "permitted_methods": "method"}, id="method-method"),
            pytest.param({"denied_methods": "method", "permit_all_classes": "class"}, id="method-class"),
            pytest.param({"deny_all_classes": "class", "permitted_methods": "method"}, id="class-method"),
            pytest.param({"deny_all_classes": "class", "permit_all_classes": "class"}, id="class-class"),
        ],
    )
    def test_conflict_is_fatal_regardless_of_level(self, make_resolver, bar_int, facts):
        values = {"method": {bar_int}, "class": {"Foo"}}
        resolver = make_resolver(V={key: values[kind] for key, kind in facts.items()})

        with pytest.raises(ConflictingAccessPolicyError, match=r"Foo\.bar\(int\) for view V") as exc_info:
            resolver.resolve("V", bar_int)

        assert exc_info.value.details["view"] == "V"
        assert exc_info.value.details["component"] == "FooBean"

    def test_conflict_is_logged(self, make_resolver, bar_int, caplog):
        resolver = make_resolver(V={"denied_methods": {bar_int}, "permitted_methods": {bar_int}})

        with caplog.at_level(logging.ERROR, logger="neo_method_security"):
            with pytest.raises(ConflictingAccessPolicyError):
                resolver.resolve("V", bar_int)

        assert "Conflicting access policy" in caplog.text


class TestResolverErrors:
    """Test deployment-time failures of the resolver."""

    def test_missing_implementation_method(self, make_resolver):
        with pytest.raises(MissingImplementationMethodError, match="not found on component class Foo"):
            make_resolver().resolve("V", MethodIdentifier.of("baz", "int"))

    def test_non_ejb_component_rejected(self, foo_class, settings):
        configuration = ComponentConfiguration(
            description=ComponentDescription("Helper", ComponentKind.MANAGED),
            component_class=foo_class,
        )

        with pytest.raises(InvalidComponentError, match="Helper is not an EJB component"):
            MethodSecurityResolver(configuration, InMemorySecurityDescriptorStore(), settings=settings)

    @pytest.mark.parametrize(
        "kind",
        [ComponentKind.STATELESS, ComponentKind.STATEFUL, ComponentKind.SINGLETON, ComponentKind.MESSAGE_DRIVEN],
    )
    def test_bean_kinds_accepted(self, foo_class, settings, kind):
        configuration = ComponentConfiguration(ComponentDescription("Bean", kind), foo_class)

        MethodSecurityResolver(configuration, InMemorySecurityDescriptorStore(), settings=settings)


class TestResolutionLogging:
    """Test per-resolution debug logging."""

    def test_resolution_logged_when_enabled(self, make_resolver, bar_int, caplog):
        resolver = make_resolver(V={"method_roles": {bar_int: {"A"}}})

        with caplog.at_level(logging.DEBUG, logger="neo_method_security"):
            resolver.resolve("V", bar_int)

        assert "Resolved FooBean/V#bar(int)" in caplog.text

    def test_resolution_not_logged_when_disabled(self, foo_configuration, bar_int, caplog):
        from neo_method_security.config import MethodSecuritySettings

        resolver = MethodSecurityResolver(
            foo_configuration,
            InMemorySecurityDescriptorStore(),
            settings=MethodSecuritySettings(log_resolutions=False),
        )

        with caplog.at_level(logging.DEBUG, logger="neo_method_security"):
            resolver.resolve("V", bar_int)

        assert "Resolved" not in caplog.text
