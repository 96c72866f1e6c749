"""
Pydantic schemas for enrollments.
"""

import uuid
from datetime import datetime
from typing import Optional

from schooldesk.schemas.base import ApiModel
from schooldesk.schemas.course import CourseResponse
from schooldesk.schemas.student import StudentResponse


class EnrollmentCreate(ApiModel):
    student_id: uuid.UUID
    course_id: uuid.UUID


class EnrollmentResponse(ApiModel):
    id: uuid.UUID
    student_id: uuid.UUID
    course_id: uuid.UUID
    student: StudentResponse
    course: CourseResponse
    created_at: Optional[datetime] = None
