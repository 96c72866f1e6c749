"""
Unit tests for the attendance service: one record per (student, schedule, date).
"""

import uuid
from datetime import date
from unittest.mock import MagicMock

import pytest

from schooldesk.exceptions import ConflictError, NotFoundError
from schooldesk.models.attendance import Attendance
from schooldesk.models.schedule import Schedule
from schooldesk.models.student import Student
from schooldesk.schemas.attendance import AttendanceCreate, AttendanceUpdate
from schooldesk.services.attendance_service import (
    create_attendance,
    delete_attendance,
    list_attendances,
    update_attendance,
)

from factories import make_attendance, make_schedule, make_student


# --- Helpers ---

def make_db_mock(rows: dict, scalar=None):
    db = MagicMock()
    db.get.side_effect = lambda model, _id: rows.get(model)
    db.execute.return_value.scalar.return_value = scalar
    return db


def attendance_data(student_id, schedule_id, status="PRESENT") -> AttendanceCreate:
    return AttendanceCreate(studentId=student_id, scheduleId=schedule_id, date=date(2024, 3, 18), status=status)


# --- create_attendance ---

def test_create_attendance():
    student, schedule = make_student(), make_schedule()
    db = make_db_mock({Student: student, Schedule: schedule})

    attendance = create_attendance(db, attendance_data(student.id, schedule.id, "LATE"))

    assert isinstance(attendance, Attendance)
    assert attendance.status == "LATE"
    db.commit.assert_called_once()


def test_create_attendance_duplicate_triple():
    student, schedule = make_student(), make_schedule()
    db = make_db_mock({Student: student, Schedule: schedule}, scalar=uuid.uuid4())

    with pytest.raises(ConflictError) as exc:
        create_attendance(db, attendance_data(student.id, schedule.id))

    assert exc.value.message == "Attendance record already exists for this student, schedule, and date"
    db.add.assert_not_called()


def test_create_attendance_unknown_schedule():
    db = make_db_mock({Student: make_student()})

    with pytest.raises(NotFoundError, match="Schedule not found"):
        create_attendance(db, attendance_data(uuid.uuid4(), uuid.uuid4()))


# --- update_attendance ---

def test_update_attendance_status_only():
    """Same date: no uniqueness query is issued."""
    attendance = make_attendance(status="PRESENT")
    db = make_db_mock({Attendance: attendance})

    update_attendance(db, attendance.id, AttendanceUpdate(status="EXCUSED"))

    assert attendance.status == "EXCUSED"
    db.execute.assert_not_called()
    db.commit.assert_called_once()


def test_update_attendance_date_conflict():
    attendance = make_attendance(date=date(2024, 3, 18))
    db = make_db_mock({Attendance: attendance}, scalar=uuid.uuid4())

    with pytest.raises(ConflictError):
        update_attendance(db, attendance.id, AttendanceUpdate(status="ABSENT", date=date(2024, 3, 25)))

    assert attendance.date == date(2024, 3, 18)
    db.commit.assert_not_called()


def test_update_attendance_new_free_date():
    attendance = make_attendance(date=date(2024, 3, 18))
    db = make_db_mock({Attendance: attendance}, scalar=None)

    update_attendance(db, attendance.id, AttendanceUpdate(status="ABSENT", date=date(2024, 3, 25)))

    assert attendance.date == date(2024, 3, 25)
    assert attendance.status == "ABSENT"


# --- list / delete ---

def test_list_attendances_filters():
    db = MagicMock()
    db.execute.return_value.scalars.return_value.all.return_value = []

    list_attendances(db, status="ABSENT", date=date(2024, 3, 18))

    sql = str(db.execute.call_args[0][0])
    assert "attendances.status" in sql
    assert "ORDER BY attendances.date DESC" in sql


def test_delete_attendance():
    attendance = make_attendance()
    db = make_db_mock({Attendance: attendance})

    delete_attendance(db, attendance.id)

    db.delete.assert_called_once_with(attendance)
