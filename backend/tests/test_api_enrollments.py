"""
API tests for /api/enrollments.
"""

import uuid
from unittest.mock import patch

from schooldesk.exceptions import ConflictError, NotFoundError

from factories import make_enrollment


def ids() -> dict:
    return {"studentId": str(uuid.uuid4()), "courseId": str(uuid.uuid4())}


# ============================================================
# /api/enrollments
# ============================================================

def test_create_enrollment(client):
    enrollment = make_enrollment()

    with patch("schooldesk.routers.enrollments.enrollment_service.create_enrollment") as mock:
        mock.return_value = enrollment
        response = client.post("/api/enrollments", json=ids())

    assert response.status_code == 201
    data = response.json()
    assert data["studentId"] == str(enrollment.student_id)
    assert data["course"]["teacher"]["firstName"] == "John"


def test_create_enrollment_duplicate(client):
    with patch("schooldesk.routers.enrollments.enrollment_service.create_enrollment") as mock:
        mock.side_effect = ConflictError("Student is already enrolled in this course")
        response = client.post("/api/enrollments", json=ids())

    assert response.status_code == 400
    assert response.json()["detail"] == "Student is already enrolled in this course"


def test_create_enrollment_missing_course(client):
    response = client.post("/api/enrollments", json={"studentId": str(uuid.uuid4())})

    assert response.status_code == 400
    assert response.json()["detail"] == "courseId is required"


def test_delete_enrollment_not_found(client):
    with patch("schooldesk.routers.enrollments.enrollment_service.delete_enrollment") as mock:
        mock.side_effect = NotFoundError("Enrollment not found")
        response = client.delete(f"/api/enrollments/{uuid.uuid4()}")

    assert response.status_code == 404
