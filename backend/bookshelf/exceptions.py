"""
Bookshelf API — Custom Exception Hierarchy
===========================================

What:  Defines application-specific exceptions for different error scenarios.
Why:   Custom exceptions enable targeted error handling with appropriate HTTP
       status codes and user-friendly messages.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured responses with correct HTTP status codes.
Who:   Raised by the resource service after it matches a store result;
       caught by global handlers.

Exception Hierarchy:
    BookshelfError (base)
    ├── ValidationError   → 422 Unprocessable Entity
    ├── NotFoundError     → 404 Not Found (no body)
    ├── OwnershipError    → 401 Unauthorized
    └── DatabaseError     → 500 Internal Server Error

The document store never raises these. It returns explicit results
(see services/document_store.py) and the resource service decides which
exception, if any, a result turns into.
"""

from typing import Any, Dict, Optional


class BookshelfError(Exception):
    """
    Base exception for all Bookshelf application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(BookshelfError):
    """
    Raised when submitted fields fail persistence-layer constraints.

    Request-schema failures are reported by FastAPI's RequestValidationError
    and share the same response format and status code.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(BookshelfError):
    """
    Raised when an identifier does not resolve to a record.

    HTTP:    404 Not Found, empty body.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class OwnershipError(BookshelfError):
    """
    Raised when the ownership policy is enabled and the caller may not
    mutate the record (missing caller identity, or a different owner).

    HTTP:    401 Unauthorized
    """

    def __init__(
        self,
        message: str = "You are not allowed to modify this resource",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(BookshelfError):
    """
    Raised when a store operation fails unexpectedly.

    HTTP:    500 Internal Server Error

    Security Note:
        The message returned to the client is always generic.
        The original driver error is kept in `context` and logged only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
