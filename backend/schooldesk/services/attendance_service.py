"""
Business logic for attendance records.
A student has at most one record per schedule and date.
"""

import uuid
import logging
import datetime as dt
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from schooldesk.models.attendance import Attendance
from schooldesk.models.schedule import Schedule
from schooldesk.models.student import Student
from schooldesk.schemas.attendance import AttendanceCreate, AttendanceUpdate
from schooldesk.services.integrity import commit_or_conflict, ensure_unique, resolve

logger = logging.getLogger(__name__)

DUPLICATE_ATTENDANCE = "Attendance record already exists for this student, schedule, and date"


def list_attendances(
    db: Session,
    student_id: Optional[uuid.UUID] = None,
    schedule_id: Optional[uuid.UUID] = None,
    date: Optional[dt.date] = None,
    status: Optional[str] = None,
) -> list[Attendance]:
    """Attendance records, most recent date first."""
    query = select(Attendance).options(
        selectinload(Attendance.student),
        selectinload(Attendance.schedule).selectinload(Schedule.course),
        selectinload(Attendance.schedule).selectinload(Schedule.teacher),
    )

    if student_id is not None:
        query = query.where(Attendance.student_id == student_id)
    if schedule_id is not None:
        query = query.where(Attendance.schedule_id == schedule_id)
    if date is not None:
        query = query.where(Attendance.date == date)
    if status:
        query = query.where(Attendance.status == status)

    return db.execute(query.order_by(Attendance.date.desc())).scalars().all()


def get_attendance(db: Session, attendance_id: uuid.UUID) -> Attendance:
    return resolve(db, Attendance, attendance_id, "Attendance")


def create_attendance(db: Session, data: AttendanceCreate) -> Attendance:
    """
    Records an attendance.

    Checks, in order:
    1. The student exists (404)
    2. The schedule exists (404)
    3. No record exists yet for (student, schedule, date) (400)
    """
    resolve(db, Student, data.student_id, "Student")
    resolve(db, Schedule, data.schedule_id, "Schedule")
    ensure_unique(
        db, Attendance, DUPLICATE_ATTENDANCE,
        student_id=data.student_id, schedule_id=data.schedule_id, date=data.date,
    )

    attendance = Attendance(**data.model_dump())
    db.add(attendance)
    commit_or_conflict(db, DUPLICATE_ATTENDANCE)
    db.refresh(attendance)
    logger.info(
        "Attendance recorded: student %s, schedule %s, %s -> %s",
        attendance.student_id, attendance.schedule_id, attendance.date, attendance.status,
    )
    return attendance


def update_attendance(db: Session, attendance_id: uuid.UUID, data: AttendanceUpdate) -> Attendance:
    """Changes the status and, optionally, the date (re-checking the uniqueness of the triple)."""
    attendance = resolve(db, Attendance, attendance_id, "Attendance")

    if data.date is not None and data.date != attendance.date:
        ensure_unique(
            db, Attendance, DUPLICATE_ATTENDANCE,
            exclude_id=attendance_id,
            student_id=attendance.student_id,
            schedule_id=attendance.schedule_id,
            date=data.date,
        )
        attendance.date = data.date

    attendance.status = data.status
    commit_or_conflict(db, DUPLICATE_ATTENDANCE)
    db.refresh(attendance)
    return attendance


def delete_attendance(db: Session, attendance_id: uuid.UUID) -> None:
    attendance = resolve(db, Attendance, attendance_id, "Attendance")
    db.delete(attendance)
    db.commit()
