"""
Router for attendance records.
One record per (student, schedule, date); status is PRESENT, ABSENT, LATE or EXCUSED.
"""

import uuid
import datetime as dt
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from schooldesk.database import get_db
from schooldesk.schemas.attendance import AttendanceCreate, AttendanceResponse, AttendanceUpdate
from schooldesk.schemas.base import MessageResponse
from schooldesk.services import attendance_service

router = APIRouter(prefix="/api/attendances", tags=["Attendances"])


@router.get("", response_model=List[AttendanceResponse], summary="List attendance records")
def list_attendances(
    student_id: Optional[uuid.UUID] = Query(None, alias="studentId"),
    schedule_id: Optional[uuid.UUID] = Query(None, alias="scheduleId"),
    date: Optional[dt.date] = None,
    status: Optional[str] = None,
    db: Session = Depends(get_db),
):
    return attendance_service.list_attendances(
        db, student_id=student_id, schedule_id=schedule_id, date=date, status=status
    )


@router.get("/{attendance_id}", response_model=AttendanceResponse, summary="Attendance detail")
def get_attendance(attendance_id: uuid.UUID, db: Session = Depends(get_db)):
    return attendance_service.get_attendance(db, attendance_id)


@router.post("", response_model=AttendanceResponse, status_code=201, summary="Record an attendance")
def create_attendance(data: AttendanceCreate, db: Session = Depends(get_db)):
    """400 if a record already exists for this student, schedule and date."""
    return attendance_service.create_attendance(db, data)


@router.put("/{attendance_id}", response_model=AttendanceResponse, summary="Update an attendance")
def update_attendance(attendance_id: uuid.UUID, data: AttendanceUpdate, db: Session = Depends(get_db)):
    return attendance_service.update_attendance(db, attendance_id, data)


@router.delete("/{attendance_id}", response_model=MessageResponse, summary="Delete an attendance")
def delete_attendance(attendance_id: uuid.UUID, db: Session = Depends(get_db)):
    attendance_service.delete_attendance(db, attendance_id)
    return MessageResponse(message="Attendance deleted successfully")
