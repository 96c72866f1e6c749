"""
Business logic for enrollments (student <-> course).
"""

import uuid
import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from schooldesk.models.course import Course
from schooldesk.models.enrollment import Enrollment
from schooldesk.models.student import Student
from schooldesk.schemas.enrollment import EnrollmentCreate
from schooldesk.services.integrity import commit_or_conflict, ensure_unique, resolve

logger = logging.getLogger(__name__)

ALREADY_ENROLLED = "Student is already enrolled in this course"


def list_enrollments(
    db: Session,
    student_id: Optional[uuid.UUID] = None,
    course_id: Optional[uuid.UUID] = None,
) -> list[Enrollment]:
    """Enrollments, most recent first."""
    query = select(Enrollment).options(
        selectinload(Enrollment.student),
        selectinload(Enrollment.course).selectinload(Course.teacher),
    )

    if student_id is not None:
        query = query.where(Enrollment.student_id == student_id)
    if course_id is not None:
        query = query.where(Enrollment.course_id == course_id)

    return db.execute(query.order_by(Enrollment.created_at.desc())).scalars().all()


def get_enrollment(db: Session, enrollment_id: uuid.UUID) -> Enrollment:
    return resolve(db, Enrollment, enrollment_id, "Enrollment")


def create_enrollment(db: Session, data: EnrollmentCreate) -> Enrollment:
    """
    Enrolls a student in a course.

    Checks, in order:
    1. The student exists (404)
    2. The course exists (404)
    3. The student is not already enrolled in the course (400)
    """
    resolve(db, Student, data.student_id, "Student")
    resolve(db, Course, data.course_id, "Course")
    ensure_unique(
        db, Enrollment, ALREADY_ENROLLED,
        student_id=data.student_id, course_id=data.course_id,
    )

    enrollment = Enrollment(student_id=data.student_id, course_id=data.course_id)
    db.add(enrollment)
    commit_or_conflict(db, ALREADY_ENROLLED)
    db.refresh(enrollment)
    logger.info("Student %s enrolled in course %s", data.student_id, data.course_id)
    return enrollment


def delete_enrollment(db: Session, enrollment_id: uuid.UUID) -> None:
    """Grades already recorded for the pair are kept."""
    enrollment = resolve(db, Enrollment, enrollment_id, "Enrollment")
    db.delete(enrollment)
    db.commit()
