"""
API tests for /api/attendances.
"""

import uuid
from unittest.mock import patch

from schooldesk.exceptions import ConflictError

from factories import make_attendance


# ============================================================
# /api/attendances
# ============================================================

def attendance_body(status="PRESENT") -> dict:
    return {
        "studentId": str(uuid.uuid4()),
        "scheduleId": str(uuid.uuid4()),
        "date": "2024-03-18",
        "status": status,
    }


def test_create_attendance(client):
    attendance = make_attendance(status="LATE")

    with patch("schooldesk.routers.attendances.attendance_service.create_attendance") as mock:
        mock.return_value = attendance
        response = client.post("/api/attendances", json=attendance_body("LATE"))

    assert response.status_code == 201
    data = response.json()
    assert data["status"] == "LATE"
    assert data["schedule"]["course"]["name"] == "Algebra I"


def test_create_attendance_twice(client):
    """Second POST of the same (student, schedule, date) → 400."""
    body = attendance_body()

    with patch("schooldesk.routers.attendances.attendance_service.create_attendance") as mock:
        mock.side_effect = [
            make_attendance(),
            ConflictError("Attendance record already exists for this student, schedule, and date"),
        ]
        first = client.post("/api/attendances", json=body)
        second = client.post("/api/attendances", json=body)

    assert first.status_code == 201
    assert second.status_code == 400
    assert second.json()["detail"] == "Attendance record already exists for this student, schedule, and date"


def test_create_attendance_invalid_status(client):
    response = client.post("/api/attendances", json=attendance_body("SICK"))

    assert response.status_code == 400
    error = response.json()["errors"][0]
    assert error["field"] == "status"
    assert error["rule"] == "enum"


def test_update_attendance(client):
    attendance = make_attendance(status="ABSENT")

    with patch("schooldesk.routers.attendances.attendance_service.update_attendance") as mock:
        mock.return_value = attendance
        response = client.put(f"/api/attendances/{attendance.id}", json={"status": "ABSENT"})

    assert response.status_code == 200
    assert response.json()["status"] == "ABSENT"


def test_delete_attendance(client):
    with patch("schooldesk.routers.attendances.attendance_service.delete_attendance"):
        response = client.delete(f"/api/attendances/{uuid.uuid4()}")

    assert response.json() == {"message": "Attendance deleted successfully"}
