"""
Error taxonomy.

Route handlers and dependencies raise these; the exception handlers in
internmatch.main turn them into the JSON error envelope:

    {"error": "<message>", "details": [...]}
"""

from typing import Any, List, Optional


class AppError(Exception):
    """Base class for errors that map onto an HTTP status."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None, details: Optional[List[Any]] = None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    def to_dict(self) -> dict:
        body = {"error": self.message}
        if self.details:
            body["details"] = self.details
        return body


class AuthenticationError(AppError):
    """Missing, malformed, expired or badly signed token."""
    status_code = 401
    default_message = "Invalid token"


class AuthorizationError(AppError):
    """Authenticated, but the account's role may not do this."""
    status_code = 403
    default_message = "Forbidden"


class ValidationError(AppError):
    status_code = 400
    default_message = "Validation failed"


class NotFoundError(AppError):
    status_code = 404
    default_message = "Not found"


class ConflictError(AppError):
    status_code = 409
    default_message = "Resource already exists"


class InternalError(AppError):
    status_code = 500
