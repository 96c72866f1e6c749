"""
Pydantic schemas for courses.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import field_validator

from schooldesk.schemas.base import ApiModel
from schooldesk.schemas.teacher import TeacherResponse
from schooldesk.validation import check_credits, optional_text, require_text


class CourseCreate(ApiModel):
    name: str
    teacher_id: uuid.UUID
    description: Optional[str] = None
    credits: int = 1

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v: str) -> str:
        return require_text(v, "Course name")

    @field_validator("description")
    @classmethod
    def strip_description(cls, v: Optional[str]) -> Optional[str]:
        return optional_text(v)

    @field_validator("credits", mode="before")
    @classmethod
    def default_credits(cls, v):
        # null, 0 and "" fall back to the default of one credit
        if v in (None, "", 0):
            return 1
        return v

    @field_validator("credits")
    @classmethod
    def credits_positive(cls, v: int) -> int:
        return check_credits(v)


class CourseUpdate(CourseCreate):
    """Body of PUT /courses/{id}. Same rules as creation."""


class CourseSummary(ApiModel):
    """Course without its relations, embedded in other responses."""
    id: uuid.UUID
    name: str
    description: Optional[str] = None
    credits: int
    teacher_id: uuid.UUID


class CourseResponse(CourseSummary):
    teacher: TeacherResponse
    enrollment_count: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
