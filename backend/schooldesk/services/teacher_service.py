"""
Business logic for teachers.
"""

import uuid
import logging
from typing import Optional

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session, selectinload

from schooldesk.exceptions import ConflictError
from schooldesk.models.course import Course
from schooldesk.models.schedule import Schedule
from schooldesk.models.teacher import Teacher
from schooldesk.schemas.teacher import TeacherCreate, TeacherUpdate
from schooldesk.services.integrity import commit_or_conflict, ensure_unique, resolve

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL = "A teacher with this email already exists"


def list_teachers(
    db: Session,
    subject: Optional[str] = None,
    search: Optional[str] = None,
) -> list[Teacher]:
    query = select(Teacher).options(selectinload(Teacher.courses))

    if subject:
        query = query.where(Teacher.subject == subject)

    if search:
        pattern = f"%{search}%"
        query = query.where(or_(
            Teacher.first_name.ilike(pattern),
            Teacher.last_name.ilike(pattern),
            Teacher.email.ilike(pattern),
        ))

    return db.execute(query.order_by(Teacher.last_name, Teacher.first_name)).scalars().all()


def get_teacher(db: Session, teacher_id: uuid.UUID) -> Teacher:
    return resolve(db, Teacher, teacher_id, "Teacher")


def create_teacher(db: Session, data: TeacherCreate) -> Teacher:
    """Raises ConflictError if the email is already used by another teacher."""
    if data.email:
        ensure_unique(db, Teacher, DUPLICATE_EMAIL, email=data.email)

    teacher = Teacher(**data.model_dump())
    db.add(teacher)
    commit_or_conflict(db, DUPLICATE_EMAIL)
    db.refresh(teacher)
    logger.info("Teacher created: %s %s (%s)", teacher.first_name, teacher.last_name, teacher.id)
    return teacher


def update_teacher(db: Session, teacher_id: uuid.UUID, data: TeacherUpdate) -> Teacher:
    teacher = resolve(db, Teacher, teacher_id, "Teacher")

    if data.email:
        ensure_unique(db, Teacher, DUPLICATE_EMAIL, exclude_id=teacher_id, email=data.email)

    update_data = data.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(teacher, field, value)

    commit_or_conflict(db, DUPLICATE_EMAIL)
    db.refresh(teacher)
    return teacher


def delete_teacher(db: Session, teacher_id: uuid.UUID) -> None:
    """
    Deletes a teacher.
    Refused while courses or schedules still reference the teacher; in that
    case nothing is modified.
    """
    teacher = resolve(db, Teacher, teacher_id, "Teacher")

    course_count = db.execute(
        select(func.count())
        .select_from(Course)
        .where(Course.teacher_id == teacher_id)
    ).scalar() or 0
    if course_count:
        raise ConflictError("Cannot delete teacher with assigned courses")

    schedule_count = db.execute(
        select(func.count())
        .select_from(Schedule)
        .where(Schedule.teacher_id == teacher_id)
    ).scalar() or 0
    if schedule_count:
        raise ConflictError("Cannot delete teacher with assigned schedules")

    db.delete(teacher)
    db.commit()
    logger.info("Teacher deleted: %s", teacher_id)
