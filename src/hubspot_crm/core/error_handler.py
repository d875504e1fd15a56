"""
Error handling utilities for HubSpot API interactions.
"""
import logging
import functools
from typing import Any, Callable, Type, Union

from .errors import AssociationErrorResponse, ErrorResponse
from .transport import TransportError

logger = logging.getLogger('hubspot_crm_client.error_handler')

ErrorType = Union[Type[ErrorResponse], Type[AssociationErrorResponse]]


def request_error(error_type: ErrorType, err: Exception) -> Any:
    """Build the generic request-execution error for a transport failure."""
    return error_type(status="error", message=f"unable to execute request, err: {err}")


def handle_transport_errors(error_type: ErrorType, returns_payload: bool = True) -> Callable:
    """Decorator turning transport failures into operation error values.

    Args:
        error_type: Error model the wrapped operation returns
        returns_payload: Whether the operation returns a ``(payload, error)`` pair
            rather than a bare error

    Returns:
        Decorator for an operation method
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            try:
                return func(*args, **kwargs)
            except TransportError as e:
                logger.error(f"Transport failure in {func.__name__}: {str(e)}")
                error = request_error(error_type, e)
                return (None, error) if returns_payload else error
        return wrapper
    return decorator
