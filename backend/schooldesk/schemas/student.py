"""
Pydantic schemas for students.
"""

import uuid
import datetime as dt
from datetime import datetime
from typing import Optional

from pydantic import EmailStr, field_validator

from schooldesk.schemas.base import ApiModel
from schooldesk.validation import optional_text, require_text


class StudentCreate(ApiModel):
    """Body of POST /students. firstName, lastName and gradeLevel are required."""
    first_name: str
    last_name: str
    grade_level: int
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    date_of_birth: Optional[dt.date] = None

    @field_validator("first_name")
    @classmethod
    def first_name_not_empty(cls, v: str) -> str:
        return require_text(v, "First name")

    @field_validator("last_name")
    @classmethod
    def last_name_not_empty(cls, v: str) -> str:
        return require_text(v, "Last name")

    @field_validator("phone", "address")
    @classmethod
    def strip_optional(cls, v: Optional[str]) -> Optional[str]:
        return optional_text(v)

    @field_validator("email", mode="before")
    @classmethod
    def blank_email_is_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class StudentUpdate(StudentCreate):
    """
    Body of PUT /students/{id}.
    Same required fields as creation; optional fields left out are not modified.
    """


class StudentResponse(ApiModel):
    id: uuid.UUID
    first_name: str
    last_name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    date_of_birth: Optional[dt.date] = None
    grade_level: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
