"""
Pydantic schemas for grades.
"""

import uuid
import datetime as dt
from datetime import datetime
from typing import Optional

from pydantic import field_validator

from schooldesk.schemas.base import ApiModel
from schooldesk.schemas.course import CourseResponse
from schooldesk.schemas.student import StudentResponse
from schooldesk.validation import check_grade_value, require_text


class GradeCreate(ApiModel):
    student_id: uuid.UUID
    course_id: uuid.UUID
    value: float
    type: str
    date: dt.date

    @field_validator("value")
    @classmethod
    def value_in_range(cls, v: float) -> float:
        return check_grade_value(v)

    @field_validator("type")
    @classmethod
    def type_not_empty(cls, v: str) -> str:
        return require_text(v, "Grade type")


class GradeUpdate(ApiModel):
    """Body of PUT /grades/{id}. Only the provided fields are modified."""
    value: Optional[float] = None
    type: Optional[str] = None
    date: Optional[dt.date] = None

    @field_validator("value")
    @classmethod
    def value_in_range(cls, v: Optional[float]) -> Optional[float]:
        if v is None:
            return v
        return check_grade_value(v)

    @field_validator("type")
    @classmethod
    def type_not_empty(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        return require_text(v, "Grade type")


class GradeResponse(ApiModel):
    id: uuid.UUID
    student_id: uuid.UUID
    course_id: uuid.UUID
    value: float
    type: str
    date: dt.date
    student: StudentResponse
    course: CourseResponse
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
