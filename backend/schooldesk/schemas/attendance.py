"""
Pydantic schemas for attendance records.
"""

import uuid
import datetime as dt
from datetime import datetime
from typing import Optional

from pydantic import field_validator

from schooldesk.schemas.base import ApiModel
from schooldesk.schemas.schedule import ScheduleResponse
from schooldesk.schemas.student import StudentResponse
from schooldesk.validation import check_attendance_status


class AttendanceCreate(ApiModel):
    student_id: uuid.UUID
    schedule_id: uuid.UUID
    date: dt.date
    status: str

    @field_validator("status")
    @classmethod
    def valid_status(cls, v: str) -> str:
        return check_attendance_status(v.strip())


class AttendanceUpdate(ApiModel):
    """Body of PUT /attendances/{id}. status is required, date is optional."""
    status: str
    date: Optional[dt.date] = None

    @field_validator("status")
    @classmethod
    def valid_status(cls, v: str) -> str:
        return check_attendance_status(v.strip())


class AttendanceResponse(ApiModel):
    id: uuid.UUID
    student_id: uuid.UUID
    schedule_id: uuid.UUID
    date: dt.date
    status: str
    student: StudentResponse
    schedule: ScheduleResponse
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
