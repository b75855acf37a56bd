"""
Memos Backend — Custom Exception Hierarchy
===========================================

What:  Application-specific exceptions, one per error class the API reports.
Why:   Services raise domain errors without knowing about HTTP; the global
       handlers registered in main.py translate them to status codes and a
       consistent JSON body.
How:   Each exception carries a user-facing message and an optional context
       dict. The context is logged server-side and only selectively returned.
Who:   Raised by the auth dependency, the store and the services.
When:  During request processing.

Exception Hierarchy:
    MemosError (base)
    ├── ValidationError      → 400 Bad Request (malformed body, empty name)
    ├── UnauthorizedError    → 401 Unauthorized (no user in session)
    ├── NotFoundError        → 404 Not Found (delete of a missing tag)
    ├── DatabaseError        → 500 Internal Server Error (store failures)
    └── ActivityError        → 500 Internal Server Error (activity not recorded)

Underlying causes are attached with `raise ... from exc` so they show up in
the server log traceback but never in the response.
"""

from typing import Any, Dict, Optional


class MemosError(Exception):
    """
    Base exception for all Memos application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged, not always returned)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(MemosError):
    """
    Raised when the request body cannot be used.

    When:    Body is not valid JSON, does not match the expected shape, or a
             required field is empty.
    HTTP:    400 Bad Request

    FastAPI's own schema validation answers 422; these bodies are decoded by
    hand in the routes so that malformed input is reported as 400.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class UnauthorizedError(MemosError):
    """
    Raised when no authenticated user accompanies the request.

    HTTP:    401 Unauthorized
    """

    def __init__(
        self,
        message: str = "Missing user in session",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(MemosError):
    """
    Raised when a requested resource does not exist.

    When:    POST /api/tag/delete names a tag the caller does not own.
    HTTP:    404 Not Found

    The store raises this with a bare resource description; the service
    re-raises it with the user-facing message.
    """

    def __init__(
        self,
        message: Optional[str] = None,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        if message is None:
            message = f"The requested {resource} was not found"
            if resource_id:
                message = f"{resource} '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(MemosError):
    """
    Raised when a store operation fails unexpectedly.

    HTTP:    500 Internal Server Error

    The message names the failed operation ("Failed to upsert tag"); driver
    details stay in the chained cause and the server log.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class ActivityError(MemosError):
    """
    Raised when an activity record could not be written.

    HTTP:    500 Internal Server Error

    Raised after the tag upsert. The request fails rather than reporting
    success without an audit entry; with the SQL store the per-request
    transaction then rolls the upsert back as well.
    """

    def __init__(
        self,
        message: str = "Failed to create activity",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
