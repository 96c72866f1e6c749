"""
Pydantic schemas for weekly schedules.

Time rules: both times match HH:MM (24-hour) and the end time is strictly
later than the start time in minutes of the day. end_time is declared after
start_time so its validator can read the already validated start time.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import ValidationInfo, field_validator

from schooldesk.schemas.base import ApiModel
from schooldesk.schemas.course import CourseSummary
from schooldesk.schemas.teacher import TeacherResponse
from schooldesk.validation import check_day_of_week, check_time, check_time_range, optional_text


class ScheduleCreate(ApiModel):
    course_id: uuid.UUID
    teacher_id: uuid.UUID
    day_of_week: int
    start_time: str
    end_time: str
    room: Optional[str] = None

    @field_validator("day_of_week")
    @classmethod
    def day_in_week(cls, v: int) -> int:
        return check_day_of_week(v)

    @field_validator("start_time")
    @classmethod
    def start_time_format(cls, v: str) -> str:
        return check_time(v.strip())

    @field_validator("end_time")
    @classmethod
    def end_time_after_start(cls, v: str, info: ValidationInfo) -> str:
        v = check_time(v.strip())
        start_time = info.data.get("start_time")
        if start_time is not None:
            check_time_range(start_time, v)
        return v

    @field_validator("room")
    @classmethod
    def strip_room(cls, v: Optional[str]) -> Optional[str]:
        return optional_text(v)


class ScheduleUpdate(ScheduleCreate):
    """Body of PUT /schedules/{id}. Same rules as creation."""


class ScheduleSummary(ApiModel):
    id: uuid.UUID
    day_of_week: int
    start_time: str
    end_time: str
    room: Optional[str] = None
    course_id: uuid.UUID
    teacher_id: uuid.UUID


class ScheduleResponse(ScheduleSummary):
    course: CourseSummary
    teacher: TeacherResponse
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
