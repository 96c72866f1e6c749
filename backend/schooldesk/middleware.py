"""
HTTP middlewares: bearer-token guard for the API and request logging.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from schooldesk.exceptions import AuthError
from schooldesk.security import decode_access_token

logger = logging.getLogger(__name__)

PUBLIC_PATHS = {
    "/api/auth/login",
    "/api/auth/register",
    "/api/health",
    "/api/docs",
    "/api/redoc",
    "/api/openapi.json",
}


class AuthMiddleware(BaseHTTPMiddleware):
    """
    Requires a valid bearer token on every /api/ path except the public ones.
    The decoded AuthSession is stored on request.state.auth.
    """

    async def dispatch(self, request: Request, call_next):
        path = request.url.path.rstrip("/") or "/"
        if request.method == "OPTIONS" or not path.startswith("/api/") or path in PUBLIC_PATHS:
            return await call_next(request)

        header = request.headers.get("Authorization", "")
        scheme, _, token = header.partition(" ")
        if scheme.lower() != "bearer" or not token.strip():
            return JSONResponse(status_code=401, content={"detail": "Authentication required"})

        try:
            request.state.auth = decode_access_token(token.strip())
        except AuthError as exc:
            return JSONResponse(status_code=401, content={"detail": exc.message})

        return await call_next(request)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    One INFO line per request: method, path, status, duration in milliseconds
    and the caller's email once AuthMiddleware has identified it.
    """

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000

        session = getattr(request.state, "auth", None)
        logger.info(
            "%s %s -> %d (%.1f ms) user=%s",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            session.email if session is not None else "-",
        )
        return response
