"""
Domain errors raised by guards, services and auth dependencies.
Translated to HTTP responses only in stock_api.api.errors.
"""
from __future__ import annotations

from typing import Any, Optional


class StockApiError(Exception):
    """Base class for every error the API reports to clients."""

    name = "StockApiError"
    default_message = "Something went wrong"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFound(StockApiError):
    """A lookup by identifier found no record."""

    name = "DocumentNotFoundError"
    default_message = "The provided ID doesn't match any documents"

    def __init__(self, resource: str = "Document", identifier: Any = None):
        self.resource = resource
        self.identifier = identifier
        if identifier is None:
            message = f"{resource} not found"
        else:
            message = f"{resource} with id '{identifier}' not found"
        super().__init__(message)


class Forbidden(StockApiError):
    """The requester does not own the record it tried to mutate."""

    name = "OwnershipError"
    default_message = "The provided token does not match the owner of this document"


class Unauthorized(StockApiError):
    """Missing or invalid bearer credential on a protected route."""

    name = "UnauthorizedError"
    default_message = "A valid bearer token is required"


class BadCredentials(StockApiError):
    name = "BadCredentialsError"
    default_message = "The provided username or password is incorrect"


class BadParams(StockApiError):
    name = "BadParamsError"
    default_message = "A required parameter was omitted or invalid"


class ValidationError(StockApiError):
    """The request or the store rejected the shape of a record."""

    name = "ValidationError"
    default_message = "The record failed validation"


class StoreError(StockApiError):
    name = "StoreError"
    default_message = "Database operation failed"
