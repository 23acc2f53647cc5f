"""Value objects identifying methods and view operations.

A method is identified by its name and ordered parameter types only, never
by the type that declares it, so a view method and the implementation method
it maps to share one identifier.
"""

from dataclasses import dataclass
from typing import Iterable, Tuple


def _type_name(parameter_type) -> str:
    if isinstance(parameter_type, str):
        return parameter_type
    if isinstance(parameter_type, type):
        if parameter_type.__module__ == "builtins":
            return parameter_type.__qualname__
        return f"{parameter_type.__module__}.{parameter_type.__qualname__}"
    return str(parameter_type)


@dataclass(frozen=True)
class MethodIdentifier:
    """Immutable canonical key for a method: name plus parameter types."""

    name: str
    parameter_types: Tuple[str, ...] = ()

    def __post_init__(self):
        if not self.name or not isinstance(self.name, str):
            raise ValueError(f"Method name must be a non-empty string, got: {self.name!r}")
        if isinstance(self.parameter_types, str):
            raise ValueError(
                f"Parameter types of {self.name} must be a sequence, got string: {self.parameter_types!r}"
            )
        # Accept any iterable of types or type names, store a tuple of names
        object.__setattr__(
            self, "parameter_types", tuple(_type_name(p) for p in self.parameter_types)
        )

    @classmethod
    def of(cls, name: str, *parameter_types) -> "MethodIdentifier":
        """Build an identifier from a name and positional parameter types."""
        return cls(name, parameter_types)

    @classmethod
    def from_signature(cls, name: str, parameter_types: Iterable) -> "MethodIdentifier":
        return cls(name, tuple(parameter_types))

    def __str__(self) -> str:
        return f"{self.name}({', '.join(self.parameter_types)})"


@dataclass(frozen=True)
class ViewIdentity:
    """One operation exposed through a view: (view name, method)."""

    view_name: str
    method: MethodIdentifier

    def __post_init__(self):
        if not self.view_name:
            raise ValueError("View name must not be empty")

    def __str__(self) -> str:
        return f"{self.view_name}#{self.method}"
