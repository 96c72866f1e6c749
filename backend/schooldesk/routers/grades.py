"""
Router for grades.
"""

import uuid
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from schooldesk.database import get_db
from schooldesk.schemas.base import MessageResponse
from schooldesk.schemas.grade import GradeCreate, GradeResponse, GradeUpdate
from schooldesk.services import grade_service

router = APIRouter(prefix="/api/grades", tags=["Grades"])


@router.get("", response_model=List[GradeResponse], summary="List grades")
def list_grades(
    student_id: Optional[uuid.UUID] = Query(None, alias="studentId"),
    course_id: Optional[uuid.UUID] = Query(None, alias="courseId"),
    grade_type: Optional[str] = Query(None, alias="type"),
    db: Session = Depends(get_db),
):
    return grade_service.list_grades(db, student_id=student_id, course_id=course_id, grade_type=grade_type)


@router.get("/{grade_id}", response_model=GradeResponse, summary="Grade detail")
def get_grade(grade_id: uuid.UUID, db: Session = Depends(get_db)):
    return grade_service.get_grade(db, grade_id)


@router.post("", response_model=GradeResponse, status_code=201, summary="Record a grade")
def create_grade(data: GradeCreate, db: Session = Depends(get_db)):
    """
    Records a grade between 0 and 100.
    The student must be enrolled in the course.
    """
    return grade_service.create_grade(db, data)


@router.put("/{grade_id}", response_model=GradeResponse, summary="Update a grade")
def update_grade(grade_id: uuid.UUID, data: GradeUpdate, db: Session = Depends(get_db)):
    return grade_service.update_grade(db, grade_id, data)


@router.delete("/{grade_id}", response_model=MessageResponse, summary="Delete a grade")
def delete_grade(grade_id: uuid.UUID, db: Session = Depends(get_db)):
    grade_service.delete_grade(db, grade_id)
    return MessageResponse(message="Grade deleted successfully")
