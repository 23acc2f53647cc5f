"""Component domain entities for method security resolution.

Describes a deployed component the way the security layer needs to see it:
its kind, its implementation class hierarchy as pre-resolved method
identifiers, and the views it exposes.
"""

import inspect
import typing
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import FrozenSet, Iterable, Iterator, Mapping, Optional, Tuple

from ....core.value_objects import MethodIdentifier


class ComponentKind(str, Enum):
    """Kinds of deployable components."""
    STATELESS = "stateless"
    STATEFUL = "stateful"
    SINGLETON = "singleton"
    MESSAGE_DRIVEN = "message_driven"
    MANAGED = "managed"

    @property
    def carries_method_security(self) -> bool:
        """Only enterprise bean kinds have declarative method security."""
        return self is not ComponentKind.MANAGED


@dataclass(frozen=True)
class ImplementationMethod:
    """An implementation method resolved from a view method."""

    declaring_class: str
    identifier: MethodIdentifier

    def __str__(self) -> str:
        return f"{self.declaring_class}.{self.identifier}"


@dataclass(frozen=True)
class ComponentClass:
    """Pre-resolved description of an implementation class.

    ``methods`` holds only the methods the class itself declares; inherited
    methods are reached through ``superclass``.
    """

    name: str
    methods: FrozenSet[MethodIdentifier] = frozenset()
    superclass: Optional["ComponentClass"] = None

    def __post_init__(self):
        if not self.name:
            raise ValueError("Component class name must not be empty")
        object.__setattr__(self, "methods", frozenset(self.methods))

    def declares(self, identifier: MethodIdentifier) -> bool:
        """Check if this class itself declares the method."""
        return identifier in self.methods

    def hierarchy(self) -> Iterator["ComponentClass"]:
        """Iterate this class and then its superclasses, nearest first."""
        current = self
        while current is not None:
            yield current
            current = current.superclass

    @classmethod
    def from_type(cls, python_class: type) -> "ComponentClass":
        """Describe a live Python class by walking its MRO.

        Public functions defined directly on each class become its declared
        methods; parameter types come from annotations, ``object`` when a
        parameter is unannotated. ``object`` itself is left out. A superclass
        method is dropped when a nearer class in the MRO defines the same name.
        """
        if not inspect.isclass(python_class):
            raise ValueError(f"'{python_class!r}' is not a class")

        mro = [klass for klass in python_class.__mro__ if klass is not object]
        if not mro:
            raise ValueError("Cannot describe 'object' as a component class")

        # Names defined by classes nearer than mro[i], per position
        shadowing = []
        seen = set()
        for klass in mro:
            shadowing.append(frozenset(seen))
            seen.update(vars(klass))

        described = None
        for klass, hidden in reversed(list(zip(mro, shadowing))):
            described = cls(
                name=_qualified_name(klass),
                methods=frozenset(m for m in _declared_methods(klass) if m.name not in hidden),
                superclass=described,
            )
        return described


def _qualified_name(klass: type) -> str:
    return f"{klass.__module__}.{klass.__qualname__}"


def _declared_methods(klass: type) -> Iterator[MethodIdentifier]:
    for name, member in vars(klass).items():
        if name.startswith("_") or not inspect.isfunction(member):
            continue
        try:
            hints = typing.get_type_hints(member)
        except (NameError, TypeError):
            hints = {}
        parameters = list(inspect.signature(member).parameters.values())[1:]
        parameter_types = []
        for parameter in parameters:
            if parameter.kind in (parameter.VAR_POSITIONAL, parameter.VAR_KEYWORD):
                continue
            annotation = hints.get(parameter.name, parameter.annotation)
            parameter_types.append(object if annotation is parameter.empty else annotation)
        yield MethodIdentifier(name, tuple(parameter_types))


@dataclass(frozen=True)
class ComponentDescription:
    """Name and kind of a deployed component."""

    component_name: str
    kind: ComponentKind = ComponentKind.STATELESS


@dataclass(frozen=True)
class ComponentConfiguration:
    """A component ready for security processing: class plus exposed views."""

    description: ComponentDescription
    component_class: ComponentClass
    views: Mapping[str, Tuple[MethodIdentifier, ...]] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(
            self,
            "views",
            MappingProxyType({view: tuple(methods) for view, methods in self.views.items()}),
        )

    @property
    def component_name(self) -> str:
        return self.description.component_name

    def view_methods(self, view_name: str) -> Tuple[MethodIdentifier, ...]:
        """Get the methods a view exposes, empty for unknown views."""
        return self.views.get(view_name, ())

    @classmethod
    def for_type(
        cls,
        component_name: str,
        python_class: type,
        views: Mapping[str, Iterable[MethodIdentifier]],
        kind: ComponentKind = ComponentKind.STATELESS,
    ) -> "ComponentConfiguration":
        """Build a configuration for a live Python implementation class."""
        return cls(
            description=ComponentDescription(component_name, kind),
            component_class=ComponentClass.from_type(python_class),
            views={view: tuple(methods) for view, methods in views.items()},
        )
