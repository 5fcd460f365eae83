"""
Notes API — Custom Exception Hierarchy
========================================

What:  Application-specific exceptions for the note workflows.
Why:   The service layer raises these internally and converts them into
       ErrorResponse envelopes at its boundary; the global handlers in
       main.py render any that escape with the same envelope.
How:   Each exception carries a user-facing message, an optional context dict
       (logged, never returned) and the HTTP status category it maps to.

Exception Hierarchy:
    NotesAPIError (base)            → 500 Internal Server Error
    ├── ValidationError             → 400 Bad Request (client can fix)
    ├── NotFoundError               → 400 Bad Request (unknown note id)
    └── DatabaseError               → 500 Internal Server Error
"""

from http import HTTPStatus
from typing import Any, Dict, Optional


class NotesAPIError(Exception):
    """
    Base exception for all Notes API errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
        status:   HTTP status category used when building the ErrorResponse
    """

    status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NotesAPIError):
    """
    Raised when client input fails a business rule.

    When:    A note is created with a missing, empty or whitespace-only description.
    HTTP:    400 Bad Request
    """

    status = HTTPStatus.BAD_REQUEST

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=f"Validation error: {message}", context=ctx)
        self.field = field


class NotFoundError(NotesAPIError):
    """
    Raised when no note exists for the requested id.

    HTTP:    400 Bad Request. The get-by-id contract reports unknown ids as a
             bad request, not as 404.
    """

    status = HTTPStatus.BAD_REQUEST

    def __init__(
        self,
        note_id: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["note_id"] = note_id
        super().__init__(message=f"No note found for id -> {note_id}", context=ctx)
        self.note_id = note_id


class DatabaseError(NotesAPIError):
    """
    Raised when a store operation fails unexpectedly.

    When:    Connection lost mid-query, constraint violation, NOT NULL on update, etc.
    HTTP:    500 Internal Server Error

    Security Note:
        The message returned to the client is always generic. The underlying
        SQLAlchemy error is chained (`raise ... from`) and logged server-side.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
