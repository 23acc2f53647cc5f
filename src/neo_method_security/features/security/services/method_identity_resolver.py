"""Resolution of view method signatures to implementation methods."""

import logging
from typing import Iterable, Union

from ....core.exceptions import MissingImplementationMethodError
from ....core.value_objects import MethodIdentifier
from ..entities.component import ComponentClass, ImplementationMethod

logger = logging.getLogger(__name__)


class MethodIdentityResolver:
    """Maps a view method to the implementation method whose facts apply.

    The implementation method is the one with the same name and parameter
    types, declared on the component class or inherited by it. The nearest
    declaring class in the hierarchy wins.
    """

    def resolve(
        self,
        component_class: ComponentClass,
        method: Union[MethodIdentifier, str],
        parameter_types: Iterable = (),
    ) -> ImplementationMethod:
        """Resolve a view method against a component class.

        Args:
            component_class: Implementation class of the component
            method: View method identifier, or its name when
                ``parameter_types`` is given separately
            parameter_types: Parameter types when ``method`` is a name

        Returns:
            The matching implementation method

        Raises:
            MissingImplementationMethodError: If neither the class nor any
                of its superclasses declares the method
        """
        identifier = method if isinstance(method, MethodIdentifier) else MethodIdentifier(
            method, tuple(parameter_types)
        )

        for klass in component_class.hierarchy():
            if klass.declares(identifier):
                return ImplementationMethod(klass.name, identifier)

        logger.error(f"No implementation of {identifier} found on {component_class.name}")
        raise MissingImplementationMethodError(
            f"Method named {identifier.name} with params {list(identifier.parameter_types)} "
            f"not found on component class {component_class.name}",
            details={
                "method": identifier.name,
                "parameter_types": list(identifier.parameter_types),
                "component_class": component_class.name,
            },
        )
