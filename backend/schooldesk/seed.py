"""
Seeds a development database with demo data.
Run: python -m schooldesk.seed  (from the backend/ directory)

Every record goes through the same request schemas and services as the API.
Each record is looked up by its natural key first and only created when
missing, so a run interrupted halfway is completed by the next one and a
fully seeded database is left untouched.
"""

import logging
from typing import Callable

from sqlalchemy import select
from sqlalchemy.orm import Session

from schooldesk.config import settings
from schooldesk.database import SessionLocal, init_db
from schooldesk.models.course import Course
from schooldesk.models.enrollment import Enrollment
from schooldesk.models.schedule import Schedule
from schooldesk.models.student import Student
from schooldesk.models.teacher import Teacher
from schooldesk.models.user import User
from schooldesk.schemas.payloads import validate_payload
from schooldesk.services import (
    auth_service,
    course_service,
    enrollment_service,
    schedule_service,
    student_service,
    teacher_service,
)

logger = logging.getLogger(__name__)

ADMIN_EMAIL = "admin@school.com"

TEACHERS = [
    {"firstName": "John", "lastName": "Doe", "email": "john.doe@school.com",
     "phone": "123-456-7890", "subject": "Mathematics"},
    {"firstName": "Jane", "lastName": "Smith", "email": "jane.smith@school.com",
     "phone": "123-456-7891", "subject": "Science"},
    {"firstName": "Robert", "lastName": "Johnson", "email": "robert.johnson@school.com",
     "phone": "123-456-7892", "subject": "History"},
]

# (name, description, credits); course i is taught by teacher i
COURSES = [
    ("Algebra I", "Introduction to algebraic concepts", 3),
    ("Biology", "Study of living organisms", 4),
    ("World History", "Overview of world history", 3),
]

# (dayOfWeek, startTime, endTime, room); schedule i belongs to course i
SCHEDULES = [
    (1, "09:00", "10:30", "Room 101"),
    (2, "11:00", "12:30", "Room 102"),
    (3, "13:00", "14:30", "Room 103"),
]

STUDENT_COUNT = 20


def find_existing(db: Session, model, **key):
    """First row of `model` matching every column in `key`, or None."""
    return db.execute(select(model).filter_by(**key).limit(1)).scalars().first()


class _Seeder:
    def __init__(self, db: Session):
        self.db = db
        self.created = 0

    def get_or_create(self, model, key: dict, create: Callable[[], object]):
        existing = find_existing(self.db, model, **key)
        if existing is not None:
            return existing
        self.created += 1
        return create()


def seed(db: Session) -> int:
    """Inserts whatever demo data is missing. Returns the number of records created."""
    seeder = _Seeder(db)

    seeder.get_or_create(User, {"email": ADMIN_EMAIL}, lambda: auth_service.create_user(
        db, validate_payload("user", {
            "email": ADMIN_EMAIL, "name": "Admin User", "password": "admin123", "role": "ADMIN",
        }),
    ))

    teachers = [
        seeder.get_or_create(
            Teacher, {"email": data["email"]},
            lambda data=data: teacher_service.create_teacher(db, validate_payload("teacher", data)),
        )
        for data in TEACHERS
    ]

    # Login accounts for the first two teachers
    for teacher in teachers[:2]:
        seeder.get_or_create(User, {"email": teacher.email}, lambda teacher=teacher: auth_service.create_user(
            db, validate_payload("user", {
                "email": teacher.email,
                "name": f"{teacher.first_name} {teacher.last_name}",
                "password": "teacher123",
                "role": "TEACHER",
                "teacherId": teacher.id,
            }),
        ))

    students = []
    for i in range(1, STUDENT_COUNT + 1):
        payload = {
            "firstName": f"Student{i}",
            "lastName": f"Last{i}",
            "email": f"student{i}@school.com",
            "phone": f"123-456-{1000 + i}",
            "gradeLevel": (i - 1) % 12 + 1,
        }
        students.append(seeder.get_or_create(
            Student, {"email": payload["email"]},
            lambda payload=payload: student_service.create_student(db, validate_payload("student", payload)),
        ))

    courses = []
    for teacher, (name, description, credits) in zip(teachers, COURSES):
        payload = {"name": name, "description": description, "credits": credits, "teacherId": teacher.id}
        courses.append(seeder.get_or_create(
            Course, {"name": name},
            lambda payload=payload: course_service.create_course(db, validate_payload("course", payload)),
        ))

    for course, (day, start, end, room) in zip(courses, SCHEDULES):
        payload = {
            "courseId": course.id, "teacherId": course.teacher_id,
            "dayOfWeek": day, "startTime": start, "endTime": end, "room": room,
        }
        seeder.get_or_create(
            Schedule, {"course_id": course.id, "day_of_week": day, "start_time": start},
            lambda payload=payload: schedule_service.create_schedule(db, validate_payload("schedule", payload)),
        )

    # Student i takes the first (i mod 3) + 1 courses
    for i, student in enumerate(students):
        for course in courses[: i % len(courses) + 1]:
            payload = {"studentId": student.id, "courseId": course.id}
            seeder.get_or_create(
                Enrollment, {"student_id": student.id, "course_id": course.id},
                lambda payload=payload: enrollment_service.create_enrollment(
                    db, validate_payload("enrollment", payload),
                ),
            )

    if seeder.created:
        logger.info("Seed created %d records", seeder.created)
    else:
        logger.info("Database already seeded, nothing to do")
    return seeder.created


def main() -> None:
    logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    init_db()
    db = SessionLocal()
    try:
        seed(db)
    finally:
        db.close()


if __name__ == "__main__":
    main()
