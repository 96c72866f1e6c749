"""
Detail views returned by GET /<entity>/{id}.

Each view embeds the related records of the entity. They live in their own
module because they cross-reference schemas that otherwise import each other
(student -> enrollment -> student).
"""

import uuid
import datetime as dt
from datetime import datetime
from typing import List, Optional

from schooldesk.schemas.auth import UserResponse
from schooldesk.schemas.base import ApiModel
from schooldesk.schemas.course import CourseResponse, CourseSummary
from schooldesk.schemas.schedule import ScheduleResponse, ScheduleSummary
from schooldesk.schemas.student import StudentResponse
from schooldesk.schemas.teacher import TeacherResponse


# --- Student ---

class StudentEnrollment(ApiModel):
    id: uuid.UUID
    course_id: uuid.UUID
    course: CourseSummary
    created_at: Optional[datetime] = None


class ScheduleWithCourse(ScheduleSummary):
    course: CourseSummary


class StudentAttendance(ApiModel):
    id: uuid.UUID
    schedule_id: uuid.UUID
    date: dt.date
    status: str
    schedule: ScheduleWithCourse


class StudentGrade(ApiModel):
    id: uuid.UUID
    course_id: uuid.UUID
    value: float
    type: str
    date: dt.date
    course: CourseSummary


class StudentDetail(StudentResponse):
    enrollments: List[StudentEnrollment] = []
    attendances: List[StudentAttendance] = []
    grades: List[StudentGrade] = []


# --- Teacher ---

class TeacherWithCourses(TeacherResponse):
    """List item of GET /teachers."""
    courses: List[CourseSummary] = []


class TeacherDetail(TeacherWithCourses):
    schedules: List[ScheduleWithCourse] = []
    user: Optional[UserResponse] = None


# --- Course ---

class CourseEnrollment(ApiModel):
    id: uuid.UUID
    student_id: uuid.UUID
    student: StudentResponse
    created_at: Optional[datetime] = None


class CourseGrade(ApiModel):
    id: uuid.UUID
    student_id: uuid.UUID
    value: float
    type: str
    date: dt.date
    student: StudentResponse


class CourseDetail(CourseResponse):
    enrollments: List[CourseEnrollment] = []
    schedules: List[ScheduleSummary] = []
    grades: List[CourseGrade] = []


# --- Schedule ---

class ScheduleAttendance(ApiModel):
    id: uuid.UUID
    student_id: uuid.UUID
    date: dt.date
    status: str
    student: StudentResponse


class ScheduleDetail(ScheduleResponse):
    attendances: List[ScheduleAttendance] = []
