from __future__ import annotations

import json

import pytest
from werkzeug.security import generate_password_hash

from campus_connect.core.enums import Role
from campus_connect.users.model import User


def _auth(token):
    return {"Authorization": f"Bearer {token}"}


def _register(client, **body):
    resp = client.post("/api/auth/register", json={"password": "secret1", **body})
    assert resp.status_code == 201, resp.get_json()
    return resp.get_json()


@pytest.fixture
def container(app):
    return app.extensions["campus_connect"]


@pytest.fixture
def admin_token(client, container):
    container.users_repo.create_user(
        User(
            user_id="admin",
            email="admin@college.edu",
            password_hash=generate_password_hash("admin123", method="pbkdf2:sha256:1000"),
            name="Admin",
            role=Role.ADMIN,
        )
    )
    return client.post("/api/auth/login", json={"email": "admin@college.edu", "password": "admin123"}).get_json()["token"]


def test_event_attendance_flow(client, admin_token):
    faculty = _register(client, email="rao@college.edu", name="Dr. Rao", role="faculty")
    student = _register(client, email="asha@college.edu", name="Asha", rollNumber="21CS001")
    assert student["user"]["rollNumber"] == "21CS001"

    resp = client.post("/api/events", json={"title": "Hackathon", "venue": "Hall A"}, headers=_auth(faculty["token"]))
    assert resp.status_code == 201
    event = resp.get_json()
    assert event["status"] == "pending" and event["qrCode"].startswith("data:image/png")

    code = client.get(f"/api/events/{event['id']}/code", headers=_auth(faculty["token"])).get_json()
    assert code["eventTitle"] == "Hackathon"

    first = client.post("/api/attendance/redeem", json={"code": code["code"]}, headers=_auth(student["token"]))
    again = client.post(f"/api/events/{event['id']}/attend", headers=_auth(student["token"]))
    assert first.get_json()["xpGained"] == 10
    assert again.status_code == 200 and again.get_json()["xpGained"] == 0

    sid = student["user"]["id"]
    assert client.post(f"/api/events/{event['id']}/approve/{sid}", headers=_auth(faculty["token"])).status_code == 403
    assert client.post(f"/api/events/{event['id']}/approve/{sid}", headers=_auth(admin_token)).status_code == 200

    report = client.get(f"/api/reports/attendance/{event['id']}", headers=_auth(admin_token)).get_json()
    assert (report["totalAttendees"], report["approved"], report["pending"]) == (1, 1, 0)

    notes = client.get("/api/notifications", headers=_auth(student["token"])).get_json()
    assert {"new_event", "attendance_approved"} <= {n["type"] for n in notes}

    score = client.get("/api/me/score", headers=_auth(student["token"])).get_json()
    assert score == {"eventsAttended": 1, "clubsJoined": 0, "practiceAttended": 0, "xp": 10, "level": 1, "nextLevelXP": 50}

    png = client.get(f"/api/events/{event['id']}/code.png", headers=_auth(faculty["token"]))
    assert png.mimetype == "image/png" and png.data[:4] == b"\x89PNG"


def test_error_statuses(client):
    student = _register(client, email="asha@college.edu", name="Asha")

    assert client.get("/api/auth/me").status_code == 401
    assert client.get("/api/auth/me", headers=_auth("garbage")).status_code == 401
    assert client.post("/api/events", json={"title": "x"}, headers=_auth(student["token"])).status_code == 403
    assert client.post("/api/events/nope/attend", headers=_auth(student["token"])).status_code == 404
    assert client.post("/api/auth/register", json={"email": "asha@college.edu", "password": "secret1", "name": "A"}).status_code == 409
    assert client.post("/api/auth/register", json={"email": "bad", "password": "secret1", "name": "A"}).status_code == 400

    body = client.post("/api/auth/login", json={"email": "asha@college.edu", "password": "nope"}).get_json()
    assert body == {"success": False, "message": "Invalid credentials"}


def test_wrongly_typed_bodies_are_bad_requests(client):
    _register(client, email="asha@college.edu", name="Asha")

    resp = client.post("/api/auth/login", json={"email": 123, "password": "x"})
    assert resp.status_code == 400
    assert resp.get_json() == {"success": False, "message": "Email must be a string"}

    resp = client.post("/api/auth/register", json={"email": "bob@college.edu", "password": 123456, "name": "Bob"})
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Password must be a string"

    resp = client.post("/api/auth/login", json=["asha@college.edu", "secret1"])
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Request body must be a JSON object"


def test_profile_and_role_request_flow(client, admin_token):
    student = _register(client, email="asha@college.edu", name="Asha", department="CSE")

    me = client.put("/api/auth/profile", json={"department": "", "phone": "999"}, headers=_auth(student["token"])).get_json()
    assert me["department"] == "CSE" and me["phone"] == "999"

    req = client.post(
        "/api/role-requests",
        json={"requestedRole": "core-committee", "reason": "Club lead"},
        headers=_auth(student["token"]),
    ).get_json()
    resp = client.put(f"/api/role-requests/{req['id']}", json={"status": "approved"}, headers=_auth(admin_token))
    assert resp.get_json()["status"] == "approved"

    # old token still says student, but the stored role now allows announcements
    created = client.post("/api/announcements", json={"title": "Fest", "content": "Friday"}, headers=_auth(student["token"]))
    assert created.status_code == 201

    logs = client.get("/api/audit-logs", headers=_auth(admin_token)).get_json()
    assert logs[0]["action"] == "ROLE_REQUEST_REVIEWED"
    assert client.get("/api/audit-logs", headers=_auth(student["token"])).status_code == 403


def test_practice_session_flow(client, admin_token):
    faculty = _register(client, email="rao@college.edu", name="Dr. Rao", role="faculty")
    student = _register(client, email="asha@college.edu", name="Asha", classTeacher="Dr. Rao")

    session = client.post(
        "/api/practice/sessions",
        json={"teacherName": "Dr. Rao", "date": "2026-01-10", "time": "10:00"},
        headers=_auth(faculty["token"]),
    ).get_json()

    listed = client.get("/api/practice/sessions", headers=_auth(student["token"])).get_json()
    assert [s["id"] for s in listed] == [session["id"]]

    attend = client.post(f"/api/practice/sessions/{session['id']}/attend", headers=_auth(student["token"]))
    assert attend.get_json()["xpGained"] == 5

    client.put(f"/api/practice/sessions/{session['id']}/status", json={"status": "completed"}, headers=_auth(faculty["token"]))
    report = client.get(f"/api/practice/report/{session['id']}", headers=_auth(faculty["token"])).get_json()
    assert report["totalAttendance"] == 1 and report["status"] == "completed"


def test_notification_stream_delivers_live_messages(client, container):
    student = _register(client, email="asha@college.edu", name="Asha")
    uid = student["user"]["id"]

    assert client.get("/api/notifications/stream").status_code == 401

    resp = client.get(f"/api/notifications/stream?token={student['token']}")
    assert resp.mimetype == "text/event-stream"
    chunks = iter(resp.response)
    assert next(chunks) == b": connected\n\n"
    assert container.broker.is_connected(uid)

    sent = container.notification_service.publish(uid, "announcement", "Fest", "Friday")
    frame = next(chunks).decode()
    assert frame.startswith("event: notification\n")
    assert json.loads(frame.split("data: ", 1)[1]) == sent.to_dict()

    resp.close()
    assert not container.broker.is_connected(uid)
