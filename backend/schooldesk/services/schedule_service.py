"""
Business logic for weekly schedules.
Format and time-range rules are enforced by ScheduleCreate/ScheduleUpdate;
this module checks the referenced course and teacher.
"""

import uuid
import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from schooldesk.models.course import Course
from schooldesk.models.schedule import Schedule
from schooldesk.models.teacher import Teacher
from schooldesk.schemas.schedule import ScheduleCreate, ScheduleUpdate
from schooldesk.services.integrity import resolve

logger = logging.getLogger(__name__)


def list_schedules(
    db: Session,
    teacher_id: Optional[uuid.UUID] = None,
    course_id: Optional[uuid.UUID] = None,
    day_of_week: Optional[int] = None,
) -> list[Schedule]:
    """Schedules ordered by day of week then start time."""
    query = select(Schedule).options(
        selectinload(Schedule.course),
        selectinload(Schedule.teacher),
    )

    if teacher_id is not None:
        query = query.where(Schedule.teacher_id == teacher_id)
    if course_id is not None:
        query = query.where(Schedule.course_id == course_id)
    if day_of_week is not None:
        query = query.where(Schedule.day_of_week == day_of_week)

    return db.execute(
        query.order_by(Schedule.day_of_week, Schedule.start_time)
    ).scalars().all()


def get_schedule(db: Session, schedule_id: uuid.UUID) -> Schedule:
    return resolve(db, Schedule, schedule_id, "Schedule")


def create_schedule(db: Session, data: ScheduleCreate) -> Schedule:
    resolve(db, Course, data.course_id, "Course")
    resolve(db, Teacher, data.teacher_id, "Teacher")

    schedule = Schedule(**data.model_dump())
    db.add(schedule)
    db.commit()
    db.refresh(schedule)
    logger.info(
        "Schedule created: course %s, day %d, %s-%s",
        schedule.course_id, schedule.day_of_week, schedule.start_time, schedule.end_time,
    )
    return schedule


def update_schedule(db: Session, schedule_id: uuid.UUID, data: ScheduleUpdate) -> Schedule:
    schedule = resolve(db, Schedule, schedule_id, "Schedule")
    resolve(db, Course, data.course_id, "Course")
    resolve(db, Teacher, data.teacher_id, "Teacher")

    update_data = data.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(schedule, field, value)

    db.commit()
    db.refresh(schedule)
    return schedule


def delete_schedule(db: Session, schedule_id: uuid.UUID) -> None:
    """Deletes the schedule and its attendance records."""
    schedule = resolve(db, Schedule, schedule_id, "Schedule")
    db.delete(schedule)
    db.commit()
    logger.info("Schedule deleted: %s", schedule_id)
