"""
FastAPI dependencies for the caller's identity and role gates.
"""

from fastapi import Depends, Request

from schooldesk.exceptions import AuthError, ForbiddenError
from schooldesk.security import AuthSession


def get_auth_session(request: Request) -> AuthSession:
    """AuthSession set by AuthMiddleware for the current request."""
    session = getattr(request.state, "auth", None)
    if session is None:
        raise AuthError("Authentication required")
    return session


def require_roles(*roles: str):
    """Dependency factory: only callers with one of these roles get through (403 otherwise)."""

    def checker(session: AuthSession = Depends(get_auth_session)) -> AuthSession:
        if session.role not in roles:
            raise ForbiddenError("Insufficient permissions")
        return session

    return checker
