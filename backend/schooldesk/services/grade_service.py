"""
Business logic for grades.
The value range (0-100) is enforced by GradeCreate/GradeUpdate; a grade can
only be recorded for a student enrolled in the course.
"""

import uuid
import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from schooldesk.exceptions import InvalidInputError
from schooldesk.models.course import Course
from schooldesk.models.enrollment import Enrollment
from schooldesk.models.grade import Grade
from schooldesk.models.student import Student
from schooldesk.schemas.grade import GradeCreate, GradeUpdate
from schooldesk.services.integrity import resolve

logger = logging.getLogger(__name__)


def list_grades(
    db: Session,
    student_id: Optional[uuid.UUID] = None,
    course_id: Optional[uuid.UUID] = None,
    grade_type: Optional[str] = None,
) -> list[Grade]:
    """Grades, most recent date first."""
    query = select(Grade).options(
        selectinload(Grade.student),
        selectinload(Grade.course).selectinload(Course.teacher),
    )

    if student_id is not None:
        query = query.where(Grade.student_id == student_id)
    if course_id is not None:
        query = query.where(Grade.course_id == course_id)
    if grade_type:
        query = query.where(Grade.type == grade_type)

    return db.execute(query.order_by(Grade.date.desc())).scalars().all()


def get_grade(db: Session, grade_id: uuid.UUID) -> Grade:
    return resolve(db, Grade, grade_id, "Grade")


def create_grade(db: Session, data: GradeCreate) -> Grade:
    """
    Records a grade.
    Raises NotFoundError for an unknown student or course, and
    InvalidInputError when the student is not enrolled in the course.
    """
    resolve(db, Student, data.student_id, "Student")
    resolve(db, Course, data.course_id, "Course")

    enrolled = db.execute(
        select(Enrollment.id)
        .where(
            Enrollment.student_id == data.student_id,
            Enrollment.course_id == data.course_id,
        )
        .limit(1)
    ).scalar()
    if enrolled is None:
        raise InvalidInputError("Student is not enrolled in this course")

    grade = Grade(**data.model_dump())
    db.add(grade)
    db.commit()
    db.refresh(grade)
    logger.info("Grade recorded: student %s, course %s, %s", grade.student_id, grade.course_id, grade.value)
    return grade


def update_grade(db: Session, grade_id: uuid.UUID, data: GradeUpdate) -> Grade:
    """Only value, type and date can change; fields left out are kept."""
    grade = resolve(db, Grade, grade_id, "Grade")

    update_data = data.model_dump(exclude_unset=True, exclude_none=True)
    for field, value in update_data.items():
        setattr(grade, field, value)

    db.commit()
    db.refresh(grade)
    return grade


def delete_grade(db: Session, grade_id: uuid.UUID) -> None:
    grade = resolve(db, Grade, grade_id, "Grade")
    db.delete(grade)
    db.commit()
