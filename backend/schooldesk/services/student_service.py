"""
Business logic for students.
"""

import uuid
import logging
from typing import Optional

from sqlalchemy import or_, select
from sqlalchemy.orm import Session

from schooldesk.models.student import Student
from schooldesk.schemas.student import StudentCreate, StudentUpdate
from schooldesk.services.integrity import resolve

logger = logging.getLogger(__name__)


def list_students(
    db: Session,
    grade_level: Optional[int] = None,
    search: Optional[str] = None,
) -> list[Student]:
    """Students ordered by last name, optionally filtered by grade level and a free-text search."""
    query = select(Student)

    if grade_level is not None:
        query = query.where(Student.grade_level == grade_level)

    if search:
        pattern = f"%{search}%"
        query = query.where(or_(
            Student.first_name.ilike(pattern),
            Student.last_name.ilike(pattern),
            Student.email.ilike(pattern),
        ))

    return db.execute(query.order_by(Student.last_name, Student.first_name)).scalars().all()


def get_student(db: Session, student_id: uuid.UUID) -> Student:
    return resolve(db, Student, student_id, "Student")


def create_student(db: Session, data: StudentCreate) -> Student:
    student = Student(**data.model_dump())
    db.add(student)
    db.commit()
    db.refresh(student)
    logger.info("Student created: %s %s (%s)", student.first_name, student.last_name, student.id)
    return student


def update_student(db: Session, student_id: uuid.UUID, data: StudentUpdate) -> Student:
    """Required fields are always replaced; optional fields only when provided."""
    student = resolve(db, Student, student_id, "Student")

    update_data = data.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(student, field, value)

    db.commit()
    db.refresh(student)
    return student


def delete_student(db: Session, student_id: uuid.UUID) -> None:
    """Deletes the student together with its enrollments, attendances and grades."""
    student = resolve(db, Student, student_id, "Student")
    db.delete(student)
    db.commit()
    logger.info("Student deleted: %s", student_id)
