"""
Router for students.
CRUD: list (filter by grade level, search by name/email), detail, create,
update, delete. Deleting a student also removes its enrollments,
attendances and grades.
"""

import uuid
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from schooldesk.database import get_db
from schooldesk.schemas.base import MessageResponse
from schooldesk.schemas.detail import StudentDetail
from schooldesk.schemas.student import StudentCreate, StudentResponse, StudentUpdate
from schooldesk.services import student_service

router = APIRouter(prefix="/api/students", tags=["Students"])


@router.get("", response_model=List[StudentResponse], summary="List students")
def list_students(
    grade_level: Optional[int] = Query(None, alias="gradeLevel"),
    search: Optional[str] = None,
    db: Session = Depends(get_db),
):
    """Students sorted by last name. `search` matches first name, last name or email."""
    return student_service.list_students(db, grade_level=grade_level, search=search)


@router.get("/{student_id}", response_model=StudentDetail, summary="Student detail")
def get_student(student_id: uuid.UUID, db: Session = Depends(get_db)):
    """Student with its enrollments, attendances and grades."""
    return student_service.get_student(db, student_id)


@router.post("", response_model=StudentResponse, status_code=201, summary="Create a student")
def create_student(data: StudentCreate, db: Session = Depends(get_db)):
    return student_service.create_student(db, data)


@router.put("/{student_id}", response_model=StudentResponse, summary="Update a student")
def update_student(student_id: uuid.UUID, data: StudentUpdate, db: Session = Depends(get_db)):
    return student_service.update_student(db, student_id, data)


@router.delete("/{student_id}", response_model=MessageResponse, summary="Delete a student")
def delete_student(student_id: uuid.UUID, db: Session = Depends(get_db)):
    student_service.delete_student(db, student_id)
    return MessageResponse(message="Student deleted successfully")
