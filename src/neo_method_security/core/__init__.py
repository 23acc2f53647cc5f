"""Core building blocks: exceptions and value objects."""

from .exceptions import *  # noqa: F401,F403
from .value_objects import MethodIdentifier, ViewIdentity  # noqa: F401
