"""
Pure validation rules shared by the request schemas.

Every check either returns the normalized value or raises a
PydanticCustomError whose type names the rule that failed
(required, range, enum, time_format, time_order). Raised inside a pydantic
validator, the error ends up in the structured 400 response built by
format_errors().
"""

import math
import re
from typing import Iterable, Optional

from pydantic_core import PydanticCustomError

TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")

ATTENDANCE_STATUSES = ("PRESENT", "ABSENT", "LATE", "EXCUSED")
USER_ROLES = ("ADMIN", "TEACHER", "USER")

GRADE_MIN = 0.0
GRADE_MAX = 100.0

PASSWORD_MAX_BYTES = 72

# Prefix pydantic adds in front of plain ValueError messages
_VALUE_ERROR_PREFIX = "Value error, "


def require_text(value: str, label: str) -> str:
    """Reject blank strings; returns the stripped value."""
    if not value.strip():
        raise PydanticCustomError("required", f"{label} is required")
    return value.strip()


def optional_text(value: Optional[str]) -> Optional[str]:
    """Strip optional text, mapping blank strings to None."""
    if value is None:
        return None
    return value.strip() or None


def check_day_of_week(value: int) -> int:
    # 0 = Sunday
    if value < 0 or value > 6:
        raise PydanticCustomError("range", "Day of week must be a number between 0 and 6")
    return value


def check_time(value: str) -> str:
    if not TIME_PATTERN.match(value):
        raise PydanticCustomError("time_format", "Start time and end time must be in HH:MM format")
    return value


def to_minutes(value: str) -> int:
    """Minute of day for an HH:MM string."""
    hours, minutes = value.split(":")
    return int(hours) * 60 + int(minutes)


def check_time_range(start_time: str, end_time: str) -> None:
    if to_minutes(end_time) <= to_minutes(start_time):
        raise PydanticCustomError("time_order", "End time must be after start time")


def check_grade_value(value: float) -> float:
    if math.isnan(value) or value < GRADE_MIN or value > GRADE_MAX:
        raise PydanticCustomError("range", "Grade value must be a number between 0 and 100")
    return value


def check_credits(value: int) -> int:
    if value < 1:
        raise PydanticCustomError("range", "Credits must be a positive integer")
    return value


def check_attendance_status(value: str) -> str:
    if value not in ATTENDANCE_STATUSES:
        raise PydanticCustomError("enum", "Status must be one of: PRESENT, ABSENT, LATE, EXCUSED")
    return value


def check_role(value: str) -> str:
    if value not in USER_ROLES:
        raise PydanticCustomError("enum", "Role must be one of: ADMIN, TEACHER, USER")
    return value


def check_password_bytes(value: str) -> str:
    # bcrypt refuses passwords over 72 bytes
    if len(value.encode("utf-8")) > PASSWORD_MAX_BYTES:
        raise PydanticCustomError("range", "Password must be at most 72 bytes")
    return value


def format_errors(errors: Iterable[dict]) -> list[dict]:
    """
    Flatten pydantic error dicts into {"field", "rule", "message"} entries.

    The location prefix added by FastAPI (body/query/path) is dropped so the
    field name is the one the client sent.
    """
    formatted = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
        field = ".".join(loc)
        rule = err.get("type", "invalid")
        message = err.get("msg", "Invalid value")

        if rule == "missing":
            rule = "required"
            message = f"{field} is required" if field else "Request body is required"
        elif message.startswith(_VALUE_ERROR_PREFIX):
            message = message[len(_VALUE_ERROR_PREFIX):]

        formatted.append({"field": field, "rule": rule, "message": message})
    return formatted
