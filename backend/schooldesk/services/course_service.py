"""
Business logic for courses.
"""

import uuid
import logging
from typing import Optional

from sqlalchemy import or_, select
from sqlalchemy.orm import Session, selectinload

from schooldesk.models.course import Course
from schooldesk.models.teacher import Teacher
from schooldesk.schemas.course import CourseCreate, CourseUpdate
from schooldesk.services.integrity import resolve

logger = logging.getLogger(__name__)


def list_courses(
    db: Session,
    teacher_id: Optional[uuid.UUID] = None,
    search: Optional[str] = None,
) -> list[Course]:
    """Courses ordered by name, with their teacher and enrollments preloaded."""
    query = select(Course).options(
        selectinload(Course.teacher),
        selectinload(Course.enrollments),
    )

    if teacher_id is not None:
        query = query.where(Course.teacher_id == teacher_id)

    if search:
        pattern = f"%{search}%"
        query = query.where(or_(
            Course.name.ilike(pattern),
            Course.description.ilike(pattern),
        ))

    return db.execute(query.order_by(Course.name)).scalars().all()


def get_course(db: Session, course_id: uuid.UUID) -> Course:
    return resolve(db, Course, course_id, "Course")


def create_course(db: Session, data: CourseCreate) -> Course:
    """Raises NotFoundError if the teacher does not exist."""
    resolve(db, Teacher, data.teacher_id, "Teacher")

    course = Course(**data.model_dump())
    db.add(course)
    db.commit()
    db.refresh(course)
    logger.info("Course created: %s (%s)", course.name, course.id)
    return course


def update_course(db: Session, course_id: uuid.UUID, data: CourseUpdate) -> Course:
    course = resolve(db, Course, course_id, "Course")
    resolve(db, Teacher, data.teacher_id, "Teacher")

    update_data = data.model_dump(exclude_unset=True)
    # Omitted credits fall back to the default, like on creation
    update_data.setdefault("credits", data.credits)
    for field, value in update_data.items():
        setattr(course, field, value)

    db.commit()
    db.refresh(course)
    return course


def delete_course(db: Session, course_id: uuid.UUID) -> None:
    """Deletes the course with its enrollments, schedules (and their attendances) and grades."""
    course = resolve(db, Course, course_id, "Course")
    db.delete(course)
    db.commit()
    logger.info("Course deleted: %s", course_id)
