"""
Password hashing (bcrypt) and JWT access tokens (PyJWT, HS256).
"""

import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
import jwt
from pydantic import BaseModel

from schooldesk.config import settings
from schooldesk.exceptions import AuthError


class AuthSession(BaseModel):
    """Identity of the caller, decoded from the bearer token of one request."""
    user_id: uuid.UUID
    email: str
    role: str
    teacher_id: Optional[uuid.UUID] = None

    @classmethod
    def from_claims(cls, claims: dict) -> "AuthSession":
        return cls(
            user_id=claims["userId"],
            email=claims["email"],
            role=claims["role"],
            teacher_id=claims.get("teacherId"),
        )


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def create_access_token(
    user_id: uuid.UUID,
    email: str,
    role: str,
    teacher_id: Optional[uuid.UUID] = None,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """Signed token carrying userId, email, role, teacherId and exp."""
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    claims = {
        "userId": str(user_id),
        "email": email,
        "role": role,
        "teacherId": str(teacher_id) if teacher_id else None,
        "exp": expire,
    }
    return jwt.encode(claims, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> AuthSession:
    """Verifies signature and expiry. Raises AuthError on any failure."""
    try:
        claims = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        return AuthSession.from_claims(claims)
    except (jwt.PyJWTError, KeyError, ValueError) as exc:
        raise AuthError("Invalid or expired token") from exc
