"""
Domain errors raised by the service layer.

Each error carries the HTTP status it maps to; the handler registered in
schooldesk.main turns them into JSON responses of the form {"detail": ...}.
They subclass ValueError so callers that only care about "bad input" can keep
catching the built-in type.
"""

from typing import Optional


class SchoolDeskError(ValueError):
    status_code = 500

    def __init__(self, message: str, errors: Optional[list[dict]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or []


class InvalidInputError(SchoolDeskError):
    """Missing or malformed field, or a business rule on the payload failed."""
    status_code = 400


class NotFoundError(SchoolDeskError):
    """A referenced or addressed record does not exist."""
    status_code = 404


class ConflictError(SchoolDeskError):
    """The write would violate a uniqueness rule or a deletion guard."""
    status_code = 400


class AuthError(SchoolDeskError):
    """Bad credentials, or a missing/invalid bearer token."""
    status_code = 401


class ForbiddenError(SchoolDeskError):
    status_code = 403
