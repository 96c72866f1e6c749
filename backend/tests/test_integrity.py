"""
Unit tests for the existence and uniqueness helpers.
"""

import uuid
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import IntegrityError

from schooldesk.exceptions import ConflictError, NotFoundError
from schooldesk.models.teacher import Teacher
from schooldesk.services.integrity import commit_or_conflict, ensure_unique, resolve


def test_resolve_returns_row():
    db = MagicMock()
    teacher = MagicMock()
    db.get.return_value = teacher

    assert resolve(db, Teacher, uuid.uuid4(), "Teacher") is teacher


def test_resolve_missing_row():
    db = MagicMock()
    db.get.return_value = None

    with pytest.raises(NotFoundError) as exc:
        resolve(db, Teacher, uuid.uuid4(), "Teacher")
    assert str(exc.value) == "Teacher not found"
    assert exc.value.status_code == 404


def test_ensure_unique_free_key():
    db = MagicMock()
    db.execute.return_value.scalar.return_value = None

    ensure_unique(db, Teacher, "taken", email="john@school.com")


def test_ensure_unique_taken_key():
    db = MagicMock()
    db.execute.return_value.scalar.return_value = uuid.uuid4()

    with pytest.raises(ConflictError) as exc:
        ensure_unique(db, Teacher, "A teacher with this email already exists", email="john@school.com")
    assert exc.value.status_code == 400


def test_ensure_unique_excludes_record():
    db = MagicMock()
    db.execute.return_value.scalar.return_value = None
    own_id = uuid.uuid4()

    ensure_unique(db, Teacher, "taken", exclude_id=own_id, email="john@school.com")

    query = db.execute.call_args[0][0]
    assert "teachers.id !=" in str(query)


def test_commit_or_conflict_maps_integrity_error():
    db = MagicMock()
    db.commit.side_effect = IntegrityError("INSERT", {}, Exception("duplicate key"))

    with pytest.raises(ConflictError) as exc:
        commit_or_conflict(db, "Student is already enrolled in this course")

    assert exc.value.message == "Student is already enrolled in this course"
    db.rollback.assert_called_once()
