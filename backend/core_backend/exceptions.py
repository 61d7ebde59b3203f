"""
Shared error types and the DRF exception handler.

Domain errors are raised by the service layer before any state is mutated.
The handler turns them into JSON responses with a stable ``code`` so the
front-end can show the message as an advisory.
"""
import logging
from dataclasses import dataclass

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class DomainError(Exception):
    """Base exception for business rule violations."""

    code = "domain_error"
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message=None):
        if message is None:
            message = self.__class__.__doc__.strip().splitlines()[0]
        self.message = message
        super().__init__(message)


class InvalidQuantity(DomainError):
    """Quantity must be a number greater than zero."""

    code = "invalid_quantity"

    def __init__(self, quantity=None, field="quantity", message=None):
        self.quantity = quantity
        self.field = field
        if message is None:
            message = f"Invalid {field}: {quantity!r}. A number greater than zero is required."
        super().__init__(message)


class PersistenceError(DomainError):
    """Could not save data. Local changes were kept, try saving again."""

    code = "persistence_failed"
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    def __init__(self, collection, message=None):
        self.collection = collection
        if message is None:
            message = f"Failed to save {collection}. Your changes were kept, please try again."
        super().__init__(message)


def domain_exception_handler(exc, context):
    """
    DRF exception handler that understands DomainError.

    Falls back to the stock handler for everything else.
    """
    if isinstance(exc, DomainError):
        if exc.status_code >= 500:
            logger.error(f"{exc.code}: {exc.message}")
        return Response(
            {"code": exc.code, "detail": exc.message},
            status=exc.status_code,
        )

    return exception_handler(exc, context)


@dataclass(frozen=True)
class DanglingReference:
    """
    A stored id that no longer resolves to a live record.

    Tolerated, never raised: stock deduction skips the entry and displays
    render the reference as an unknown item.
    """
    kind: str
    reference_id: str
    context: str = ""
