"""
Router for courses.
"""

import uuid
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from schooldesk.database import get_db
from schooldesk.schemas.base import MessageResponse
from schooldesk.schemas.course import CourseCreate, CourseResponse, CourseUpdate
from schooldesk.schemas.detail import CourseDetail
from schooldesk.services import course_service

router = APIRouter(prefix="/api/courses", tags=["Courses"])


@router.get("", response_model=List[CourseResponse], summary="List courses")
def list_courses(
    teacher_id: Optional[uuid.UUID] = Query(None, alias="teacherId"),
    search: Optional[str] = None,
    db: Session = Depends(get_db),
):
    """Courses with their teacher and enrollment count."""
    return course_service.list_courses(db, teacher_id=teacher_id, search=search)


@router.get("/{course_id}", response_model=CourseDetail, summary="Course detail")
def get_course(course_id: uuid.UUID, db: Session = Depends(get_db)):
    """Course with its teacher, enrollments, schedules and grades."""
    return course_service.get_course(db, course_id)


@router.post("", response_model=CourseResponse, status_code=201, summary="Create a course")
def create_course(data: CourseCreate, db: Session = Depends(get_db)):
    """The teacher must exist. Credits default to 1."""
    return course_service.create_course(db, data)


@router.put("/{course_id}", response_model=CourseResponse, summary="Update a course")
def update_course(course_id: uuid.UUID, data: CourseUpdate, db: Session = Depends(get_db)):
    return course_service.update_course(db, course_id, data)


@router.delete("/{course_id}", response_model=MessageResponse, summary="Delete a course")
def delete_course(course_id: uuid.UUID, db: Session = Depends(get_db)):
    course_service.delete_course(db, course_id)
    return MessageResponse(message="Course deleted successfully")
