"""
Router for weekly schedules.
Times are HH:MM (24h) and the end time must be strictly after the start time.
"""

import uuid
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from schooldesk.database import get_db
from schooldesk.schemas.base import MessageResponse
from schooldesk.schemas.detail import ScheduleDetail
from schooldesk.schemas.schedule import ScheduleCreate, ScheduleResponse, ScheduleUpdate
from schooldesk.services import schedule_service

router = APIRouter(prefix="/api/schedules", tags=["Schedules"])


@router.get("", response_model=List[ScheduleResponse], summary="List schedules")
def list_schedules(
    teacher_id: Optional[uuid.UUID] = Query(None, alias="teacherId"),
    course_id: Optional[uuid.UUID] = Query(None, alias="courseId"),
    day_of_week: Optional[int] = Query(None, alias="dayOfWeek"),
    db: Session = Depends(get_db),
):
    """Schedules ordered by day of week, then start time."""
    return schedule_service.list_schedules(
        db, teacher_id=teacher_id, course_id=course_id, day_of_week=day_of_week
    )


@router.get("/{schedule_id}", response_model=ScheduleDetail, summary="Schedule detail")
def get_schedule(schedule_id: uuid.UUID, db: Session = Depends(get_db)):
    return schedule_service.get_schedule(db, schedule_id)


@router.post("", response_model=ScheduleResponse, status_code=201, summary="Create a schedule")
def create_schedule(data: ScheduleCreate, db: Session = Depends(get_db)):
    return schedule_service.create_schedule(db, data)


@router.put("/{schedule_id}", response_model=ScheduleResponse, summary="Update a schedule")
def update_schedule(schedule_id: uuid.UUID, data: ScheduleUpdate, db: Session = Depends(get_db)):
    return schedule_service.update_schedule(db, schedule_id, data)


@router.delete("/{schedule_id}", response_model=MessageResponse, summary="Delete a schedule")
def delete_schedule(schedule_id: uuid.UUID, db: Session = Depends(get_db)):
    """Attendance records taken for this schedule are deleted with it."""
    schedule_service.delete_schedule(db, schedule_id)
    return MessageResponse(message="Schedule deleted successfully")
