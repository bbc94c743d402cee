"""
Hauge API — Custom Exception Hierarchy
=======================================

What:  Application-specific exceptions for the different failure scenarios.
How:   Each exception carries a client-safe message, an optional context dict
       (logged, never returned) and the HTTP status it maps to. The global
       handlers registered in main.py turn them into JSON responses.
Who:   Raised by services, dependencies and route handlers.

Exception Hierarchy:
    HaugeError (base)
    ├── ValidationError       → 400 Bad Request
    ├── AuthenticationError   → 401 Unauthorized
    ├── ForbiddenError        → 403 Forbidden
    ├── NotFoundError         → 404 Not Found
    ├── ConflictError         → 409 Conflict
    └── DatabaseError         → 500 Internal Server Error

    ConfigurationError is raised at startup only and never reaches a client.

Validators and the token codec do NOT raise these for expected bad input;
they return structured results which the calling layer converts.
"""

from typing import Any, Dict, List, Optional, Sequence


class ConfigurationError(Exception):
    """
    Raised when the process is missing configuration it cannot run without.

    When:    Application construction (missing JWT_SECRET).
    Effect:  Propagates out of create_app(); the server never starts.
    """


class HaugeError(Exception):
    """
    Base exception for all request-level application errors.

    Attributes:
        message:      Client-facing error description (returned as "error")
        context:      Additional debug info (logged but NOT returned to client)
        status_code:  HTTP status the global handler responds with
    """

    status_code: int = 500

    def __init__(
        self,
        message: str = "Internal server error",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(HaugeError):
    """
    Raised when client input fails validation.

    HTTP:    400 Bad Request
    Body:    {"error": "Validation failed", "details": ["Username must be ..."]}
    """

    status_code = 400

    def __init__(
        self,
        details: Sequence[str] = (),
        message: str = "Validation failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
        self.details: List[str] = list(details)


class AuthenticationError(HaugeError):
    """
    Raised when a protected route is called without usable credentials.

    When:    Missing Authorization header, wrong scheme, bad login credentials.
    HTTP:    401 Unauthorized
    """

    status_code = 401

    def __init__(
        self,
        message: str = "Access token required",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class ForbiddenError(HaugeError):
    """
    Raised when credentials were presented but do not permit the action.

    When:    Invalid/expired bearer token, or a user acting on another user's
             account.
    HTTP:    403 Forbidden
    """

    status_code = 403

    def __init__(
        self,
        message: str = "Forbidden",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(HaugeError):
    """
    Raised when a requested resource does not exist.

    When:    GET/PUT/PATCH/DELETE /users/{id} where no row matches.
    HTTP:    404 Not Found
    """

    status_code = 404

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource.capitalize()} not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class ConflictError(HaugeError):
    """
    Raised when a write would violate a uniqueness constraint.

    When:    Registering or saving a user whose email/username is taken.
    HTTP:    409 Conflict
    """

    status_code = 409

    def __init__(
        self,
        message: str = "Email or username already in use",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(HaugeError):
    """
    Raised when database operations fail unexpectedly.

    HTTP:    500 Internal Server Error

    Security Note:
        The message returned to the client is always generic. The SQL error
        type and the affected ids are kept in `context` and logged server-side.
    """

    status_code = 500

    def __init__(
        self,
        message: str = "Internal server error",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
