"""
Validation of raw payloads outside of a FastAPI request.

validate_payload() applies the same request schemas the routers use and
returns the typed record, or raises InvalidInputError listing every offending
field with the rule it broke. Used by the seed script.
"""

from typing import Any, Mapping

from pydantic import BaseModel, ValidationError

from schooldesk.exceptions import InvalidInputError
from schooldesk.schemas.attendance import AttendanceCreate
from schooldesk.schemas.auth import LoginRequest, UserCreate
from schooldesk.schemas.course import CourseCreate
from schooldesk.schemas.enrollment import EnrollmentCreate
from schooldesk.schemas.grade import GradeCreate
from schooldesk.schemas.schedule import ScheduleCreate
from schooldesk.schemas.student import StudentCreate
from schooldesk.schemas.teacher import TeacherCreate
from schooldesk.validation import format_errors

CREATE_SCHEMAS: dict[str, type[BaseModel]] = {
    "student": StudentCreate,
    "teacher": TeacherCreate,
    "course": CourseCreate,
    "schedule": ScheduleCreate,
    "enrollment": EnrollmentCreate,
    "grade": GradeCreate,
    "attendance": AttendanceCreate,
    "user": UserCreate,
    "login": LoginRequest,
}


def validate_payload(kind: str, payload: Mapping[str, Any]) -> BaseModel:
    schema = CREATE_SCHEMAS.get(kind)
    if schema is None:
        raise KeyError(f"Unknown entity kind: {kind}")

    try:
        return schema.model_validate(dict(payload))
    except ValidationError as exc:
        errors = format_errors(exc.errors())
        raise InvalidInputError(errors[0]["message"], errors=errors) from exc
