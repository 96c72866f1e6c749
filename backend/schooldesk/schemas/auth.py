"""
Pydantic schemas for users and authentication.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field, field_validator

from schooldesk.schemas.base import ApiModel
from schooldesk.validation import check_password_bytes, check_role, require_text


class LoginRequest(ApiModel):
    """Only presence is checked; a malformed address simply fails authentication."""
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def email_not_empty(cls, v: str) -> str:
        return require_text(v, "Email")

    @field_validator("password")
    @classmethod
    def password_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("Password is required")
        return v


class RegisterRequest(ApiModel):
    """Public self-registration. Accounts created this way always get the USER role."""
    email: EmailStr
    name: str
    password: str = Field(min_length=8)

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v: str) -> str:
        return require_text(v, "Name")

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, v: str) -> str:
        return check_password_bytes(v)


class UserCreate(RegisterRequest):
    """Account created by an administrator, with an explicit role."""
    role: str = "USER"
    teacher_id: Optional[uuid.UUID] = None

    @field_validator("role")
    @classmethod
    def valid_role(cls, v: str) -> str:
        return check_role(v)


class UserResponse(ApiModel):
    id: uuid.UUID
    email: str
    name: str
    role: str
    teacher_id: Optional[uuid.UUID] = None
    created_at: Optional[datetime] = None


class LoginResponse(ApiModel):
    user: UserResponse
    token: str
