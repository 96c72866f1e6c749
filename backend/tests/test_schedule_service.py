"""
Unit tests for the schedule service.
"""

import uuid
from unittest.mock import MagicMock

import pytest

from schooldesk.exceptions import NotFoundError
from schooldesk.models.course import Course
from schooldesk.models.schedule import Schedule
from schooldesk.models.teacher import Teacher
from schooldesk.schemas.schedule import ScheduleCreate, ScheduleUpdate
from schooldesk.services.schedule_service import (
    create_schedule,
    delete_schedule,
    list_schedules,
    update_schedule,
)

from factories import make_course, make_schedule, make_teacher


# --- Helpers ---

def make_db_mock(rows: dict):
    """db.get(Model, id) returns rows.get(Model)."""
    db = MagicMock()
    db.get.side_effect = lambda model, _id: rows.get(model)
    return db


# ============================================================
# create / list / delete
# ============================================================

def schedule_data(course_id, teacher_id) -> ScheduleCreate:
    return ScheduleCreate(
        courseId=course_id, teacherId=teacher_id, dayOfWeek=1,
        startTime="09:00", endTime="10:30", room="Room 101",
    )


def test_create_schedule():
    course = make_course()
    db = make_db_mock({Course: course, Teacher: course.teacher})

    schedule = create_schedule(db, schedule_data(course.id, course.teacher_id))

    assert isinstance(schedule, Schedule)
    assert schedule.start_time == "09:00"
    db.commit.assert_called_once()


def test_create_schedule_unknown_course():
    teacher = make_teacher()
    db = make_db_mock({Teacher: teacher})

    with pytest.raises(NotFoundError, match="Course not found"):
        create_schedule(db, schedule_data(uuid.uuid4(), teacher.id))


def test_create_schedule_unknown_teacher():
    db = make_db_mock({Course: make_course()})

    with pytest.raises(NotFoundError, match="Teacher not found"):
        create_schedule(db, schedule_data(uuid.uuid4(), uuid.uuid4()))


def test_list_schedules_ordering():
    db = MagicMock()
    db.execute.return_value.scalars.return_value.all.return_value = []

    list_schedules(db, day_of_week=0)

    sql = str(db.execute.call_args[0][0])
    assert "ORDER BY schedules.day_of_week, schedules.start_time" in sql


def test_delete_schedule_not_found():
    db = make_db_mock({})

    with pytest.raises(NotFoundError, match="Schedule not found"):
        delete_schedule(db, uuid.uuid4())


def test_delete_schedule():
    schedule = make_schedule()
    db = make_db_mock({Schedule: schedule})

    delete_schedule(db, schedule.id)

    db.delete.assert_called_once_with(schedule)


# ============================================================
# update_schedule
# ============================================================

def update_data(course_id, teacher_id, **overrides) -> ScheduleUpdate:
    fields = {
        "courseId": course_id, "teacherId": teacher_id, "dayOfWeek": 3,
        "startTime": "13:00", "endTime": "14:15", "room": "Lab 2",
    }
    fields.update(overrides)
    return ScheduleUpdate(**fields)


def test_update_schedule():
    schedule = make_schedule()
    db = make_db_mock({Schedule: schedule, Course: schedule.course, Teacher: schedule.course.teacher})

    result = update_schedule(db, schedule.id, update_data(schedule.course_id, schedule.teacher_id))

    assert result is schedule
    assert schedule.day_of_week == 3
    assert schedule.start_time == "13:00"
    assert schedule.end_time == "14:15"
    assert schedule.room == "Lab 2"
    db.commit.assert_called_once()


def test_update_schedule_not_found():
    course = make_course()
    db = make_db_mock({Course: course, Teacher: course.teacher})

    with pytest.raises(NotFoundError, match="Schedule not found"):
        update_schedule(db, uuid.uuid4(), update_data(course.id, course.teacher_id))
    db.commit.assert_not_called()


def test_update_schedule_unknown_teacher():
    schedule = make_schedule()
    db = make_db_mock({Schedule: schedule, Course: schedule.course})

    with pytest.raises(NotFoundError, match="Teacher not found") as exc_info:
        update_schedule(db, schedule.id, update_data(schedule.course_id, uuid.uuid4()))

    assert exc_info.value.status_code == 404
    assert schedule.start_time == "09:00"
    db.commit.assert_not_called()
