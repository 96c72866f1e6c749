"""
Router for enrollments (no update: an enrollment is created or deleted).
"""

import uuid
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from schooldesk.database import get_db
from schooldesk.schemas.base import MessageResponse
from schooldesk.schemas.enrollment import EnrollmentCreate, EnrollmentResponse
from schooldesk.services import enrollment_service

router = APIRouter(prefix="/api/enrollments", tags=["Enrollments"])


@router.get("", response_model=List[EnrollmentResponse], summary="List enrollments")
def list_enrollments(
    student_id: Optional[uuid.UUID] = Query(None, alias="studentId"),
    course_id: Optional[uuid.UUID] = Query(None, alias="courseId"),
    db: Session = Depends(get_db),
):
    return enrollment_service.list_enrollments(db, student_id=student_id, course_id=course_id)


@router.get("/{enrollment_id}", response_model=EnrollmentResponse, summary="Enrollment detail")
def get_enrollment(enrollment_id: uuid.UUID, db: Session = Depends(get_db)):
    return enrollment_service.get_enrollment(db, enrollment_id)


@router.post("", response_model=EnrollmentResponse, status_code=201, summary="Enroll a student")
def create_enrollment(data: EnrollmentCreate, db: Session = Depends(get_db)):
    """400 if the student is already enrolled in the course."""
    return enrollment_service.create_enrollment(db, data)


@router.delete("/{enrollment_id}", response_model=MessageResponse, summary="Delete an enrollment")
def delete_enrollment(enrollment_id: uuid.UUID, db: Session = Depends(get_db)):
    enrollment_service.delete_enrollment(db, enrollment_id)
    return MessageResponse(message="Enrollment deleted successfully")
