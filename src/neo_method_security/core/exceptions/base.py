"""Base exceptions for neo-method-security.

This module defines the base exception hierarchy for the library.
All exceptions inherit from MethodSecurityError and carry an error code
and structured details for diagnostics.
"""

from typing import Any, Dict, Optional


class MethodSecurityError(Exception):
    """Base exception for all neo-method-security errors.

    All exceptions in the library inherit from this base class and include
    structured error information for better debugging of failed deployments.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


def create_error_report(exception: MethodSecurityError) -> Dict[str, Any]:
    """Create a standardized error report from an exception.

    Args:
        exception: The method security exception

    Returns:
        Error report dictionary
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }
