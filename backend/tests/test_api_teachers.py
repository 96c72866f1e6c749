"""
API tests for /api/teachers.
"""

import uuid
from unittest.mock import patch

from schooldesk.exceptions import ConflictError

from factories import make_course, make_teacher


def test_list_teachers_with_courses(client):
    teacher = make_teacher()
    make_course(teacher=teacher, name="Algebra I")

    with patch("schooldesk.routers.teachers.teacher_service.list_teachers") as mock:
        mock.return_value = [teacher]
        response = client.get("/api/teachers?subject=Mathematics")

    assert response.status_code == 200
    data = response.json()
    assert data[0]["courses"][0]["name"] == "Algebra I"
    assert mock.call_args.kwargs == {"subject": "Mathematics", "search": None}


def test_create_teacher_missing_last_name(client):
    response = client.post("/api/teachers", json={"firstName": "John"})

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "lastName"


def test_create_teacher_duplicate_email(client):
    with patch("schooldesk.routers.teachers.teacher_service.create_teacher") as mock:
        mock.side_effect = ConflictError("A teacher with this email already exists")
        response = client.post("/api/teachers", json={
            "firstName": "John", "lastName": "Doe", "email": "john.doe@school.com",
        })

    assert response.status_code == 400
    assert response.json()["detail"] == "A teacher with this email already exists"


def test_get_teacher_detail(client):
    teacher = make_teacher()
    make_course(teacher=teacher)

    with patch("schooldesk.routers.teachers.teacher_service.get_teacher") as mock:
        mock.return_value = teacher
        response = client.get(f"/api/teachers/{teacher.id}")

    assert response.status_code == 200
    data = response.json()
    assert len(data["courses"]) == 1
    assert data["schedules"] == []
    assert data["user"] is None


def test_delete_teacher_with_courses(client):
    with patch("schooldesk.routers.teachers.teacher_service.delete_teacher") as mock:
        mock.side_effect = ConflictError("Cannot delete teacher with assigned courses")
        response = client.delete(f"/api/teachers/{uuid.uuid4()}")

    assert response.status_code == 400
    assert response.json()["detail"] == "Cannot delete teacher with assigned courses"


def test_delete_teacher(client):
    with patch("schooldesk.routers.teachers.teacher_service.delete_teacher"):
        response = client.delete(f"/api/teachers/{uuid.uuid4()}")

    assert response.status_code == 200
    assert response.json()["message"] == "Teacher deleted successfully"
