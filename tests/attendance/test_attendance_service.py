from __future__ import annotations

import pytest

from campus_connect.core.enums import AttendanceStatus, Role, SessionStatus
from campus_connect.core.exceptions import NotFoundError, ValidationError


def _types(container, user_id):
    return [n.type for n in container.notification_service.list_for(user_id)]


@pytest.fixture
def organizer(make_user):
    return make_user(Role.FACULTY, name="Dr. Rao")


@pytest.fixture
def event(container, organizer):
    return container.event_service.create(creator_id=organizer.user_id, fields={"title": "Hackathon", "venue": "Hall A"})


def test_event_checkin_is_idempotent(container, make_user, organizer, event):
    student = make_user(name="Asha")

    first = container.attendance_service.check_in_event(event.event_id, student.user_id)
    again = container.attendance_service.check_in_event(event.event_id, student.user_id)

    assert first.created and first.xp_gained == 10
    assert first.record.status == AttendanceStatus.PENDING
    assert not again.created and again.xp_gained == 0
    assert len(container.events_repo.get_by_id(event.event_id).attendees) == 1
    assert _types(container, organizer.user_id).count("attendance_marked") == 1


def test_checkin_unknown_event_or_user(container, make_user, event):
    student = make_user()
    with pytest.raises(NotFoundError):
        container.attendance_service.check_in_event("missing", student.user_id)
    with pytest.raises(NotFoundError):
        container.attendance_service.check_in_event(event.event_id, "ghost")


def test_approve_notifies_once_and_audits(container, make_user, event):
    admin = make_user(Role.ADMIN)
    student = make_user()
    container.attendance_service.check_in_event(event.event_id, student.user_id)

    container.attendance_service.approve(event.event_id, student.user_id, approved_by=admin.user_id)
    result = container.attendance_service.approve(event.event_id, student.user_id, approved_by=admin.user_id)

    assert result.record.status == AttendanceStatus.APPROVED
    assert _types(container, student.user_id).count("attendance_approved") == 1
    actions = [e.action for e in container.audit_log.recent()]
    assert actions.count("ATTENDANCE_APPROVED") == 1


def test_approve_unknown_event_or_attendee(container, make_user, event):
    with pytest.raises(NotFoundError, match="Event"):
        container.attendance_service.approve("missing", "u")
    with pytest.raises(NotFoundError, match="Attendee"):
        container.attendance_service.approve(event.event_id, make_user().user_id)


def test_event_report_counts(container, make_user, event):
    a, b = make_user(), make_user()
    container.attendance_service.check_in_event(event.event_id, a.user_id)
    container.attendance_service.check_in_event(event.event_id, b.user_id)
    container.attendance_service.approve(event.event_id, a.user_id)

    report = container.attendance_service.event_report(event.event_id)

    assert (report.total, report.approved, report.pending) == (2, 1, 1)
    assert report.title == "Hackathon"


def test_redeem_code_for_event_and_session(container, make_user, organizer, event):
    student = make_user(roll_number="21CS001")
    session = container.practice_service.create(creator_id=organizer.user_id, fields={"teacherName": "Dr. Rao"})

    by_event = container.attendance_service.redeem(event.manual_code, student.user_id)
    by_session = container.attendance_service.redeem(session.manual_code, student.user_id)

    assert by_event.resource_id == event.event_id and by_event.xp_gained == 10
    assert by_session.resource_id == session.session_id and by_session.xp_gained == 5
    assert by_session.record.roll_number == "21CS001"

    with pytest.raises(ValidationError):
        container.attendance_service.redeem("garbage", student.user_id)
    with pytest.raises(NotFoundError):
        container.attendance_service.redeem(container.codes.encode("nothing-here"), student.user_id)


def test_completing_session_reports_attendance_to_creator(container, make_user, organizer):
    session = container.practice_service.create(creator_id=organizer.user_id, fields={"teacherName": "Dr. Rao"})
    for student in (make_user(), make_user()):
        container.attendance_service.check_in_session(session.session_id, student.user_id)

    container.attendance_service.set_session_status(session.session_id, "ongoing")
    assert "practice_report" not in _types(container, organizer.user_id)

    updated = container.attendance_service.set_session_status(session.session_id, "completed")

    assert updated.status == SessionStatus.COMPLETED
    reports = [n for n in container.notification_service.list_for(organizer.user_id) if n.type == "practice_report"]
    assert len(reports) == 1
    assert reports[0].message == "2 students attended the practice session"

    report = container.attendance_service.session_report(session.session_id)
    assert report["totalAttendance"] == 2 and report["status"] == "completed"


def test_session_status_validation(container, organizer):
    session = container.practice_service.create(creator_id=organizer.user_id, fields={"teacherName": "Dr. Rao"})
    with pytest.raises(ValidationError):
        container.attendance_service.set_session_status(session.session_id, "paused")
    with pytest.raises(NotFoundError):
        container.attendance_service.set_session_status("missing", "completed")


def test_session_visibility(container, make_user, claims_for, organizer):
    other = make_user(Role.FACULTY, name="Dr. Iyer")
    mine = container.practice_service.create(creator_id=organizer.user_id, fields={"teacherName": "Dr. Rao"})
    container.practice_service.create(creator_id=other.user_id, fields={"teacherName": "Dr. Iyer"})

    rao_student = make_user(class_teacher="Dr. Rao")
    orphan = make_user()
    admin = make_user(Role.ADMIN)

    assert [s.session_id for s in container.attendance_service.list_sessions_for(claims_for(rao_student))] == [mine.session_id]
    assert container.attendance_service.list_sessions_for(claims_for(orphan)) == []
    assert [s.session_id for s in container.attendance_service.list_sessions_for(claims_for(organizer))] == [mine.session_id]
    assert len(container.attendance_service.list_sessions_for(claims_for(admin))) == 2


def test_creating_session_notifies_only_that_teachers_students(container, make_user, organizer):
    mine = make_user(class_teacher="Dr. Rao")
    theirs = make_user(class_teacher="Dr. Iyer")

    container.practice_service.create(creator_id=organizer.user_id, fields={"teacherName": "Dr. Rao", "date": "2026-01-10"})

    assert "practice_scheduled" in _types(container, mine.user_id)
    assert "practice_scheduled" not in _types(container, theirs.user_id)
    with pytest.raises(ValidationError):
        container.practice_service.create(creator_id=organizer.user_id, fields={})
