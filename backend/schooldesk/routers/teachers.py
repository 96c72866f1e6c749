"""
Router for teachers.
A teacher cannot be deleted while courses or schedules still reference it.
"""

import uuid
from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from schooldesk.database import get_db
from schooldesk.schemas.base import MessageResponse
from schooldesk.schemas.detail import TeacherDetail, TeacherWithCourses
from schooldesk.schemas.teacher import TeacherCreate, TeacherResponse, TeacherUpdate
from schooldesk.services import teacher_service

router = APIRouter(prefix="/api/teachers", tags=["Teachers"])


@router.get("", response_model=List[TeacherWithCourses], summary="List teachers")
def list_teachers(
    subject: Optional[str] = None,
    search: Optional[str] = None,
    db: Session = Depends(get_db),
):
    """Teachers with the courses they teach."""
    return teacher_service.list_teachers(db, subject=subject, search=search)


@router.get("/{teacher_id}", response_model=TeacherDetail, summary="Teacher detail")
def get_teacher(teacher_id: uuid.UUID, db: Session = Depends(get_db)):
    return teacher_service.get_teacher(db, teacher_id)


@router.post("", response_model=TeacherResponse, status_code=201, summary="Create a teacher")
def create_teacher(data: TeacherCreate, db: Session = Depends(get_db)):
    """Email, when given, must not belong to another teacher."""
    return teacher_service.create_teacher(db, data)


@router.put("/{teacher_id}", response_model=TeacherResponse, summary="Update a teacher")
def update_teacher(teacher_id: uuid.UUID, data: TeacherUpdate, db: Session = Depends(get_db)):
    return teacher_service.update_teacher(db, teacher_id, data)


@router.delete("/{teacher_id}", response_model=MessageResponse, summary="Delete a teacher")
def delete_teacher(teacher_id: uuid.UUID, db: Session = Depends(get_db)):
    """Refused (400) while courses or schedules are assigned to the teacher."""
    teacher_service.delete_teacher(db, teacher_id)
    return MessageResponse(message="Teacher deleted successfully")
