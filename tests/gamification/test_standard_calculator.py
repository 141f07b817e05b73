import pytest

from campus_connect.core.enums import Role
from campus_connect.gamification.calculator.standard_calculator import StandardScoreCalculator
from campus_connect.gamification.model import ActivityCounts


@pytest.mark.parametrize(
    "counts, xp, level, threshold",
    [
        (ActivityCounts(), 0, 1, 50),
        (ActivityCounts(events_attended=3, clubs_joined=1, sessions_attended=2), 60, 2, 100),
        (ActivityCounts(events_attended=5), 50, 2, 100),
        (ActivityCounts(sessions_attended=9), 45, 1, 50),
    ],
)
def test_standard_calculator(counts, xp, level, threshold):
    card = StandardScoreCalculator().score(counts)
    assert (card.xp, card.level, card.next_level_threshold) == (xp, level, threshold)
    assert card.to_dict() == {"xp": xp, "level": level, "nextLevelXP": threshold}


def test_more_activity_never_lowers_score():
    calc = StandardScoreCalculator()
    base = calc.score(ActivityCounts(events_attended=2, clubs_joined=1, sessions_attended=1))
    for more in (
        ActivityCounts(events_attended=3, clubs_joined=1, sessions_attended=1),
        ActivityCounts(events_attended=2, clubs_joined=2, sessions_attended=1),
        ActivityCounts(events_attended=2, clubs_joined=1, sessions_attended=2),
    ):
        card = calc.score(more)
        assert card.xp > base.xp and card.level >= base.level


def test_score_service_counts_from_store(container, store, make_user):
    organizer = make_user(Role.FACULTY, name="Dr. Rao")
    student = make_user()
    event = container.event_service.create(creator_id=organizer.user_id, fields={"title": "Hackathon"})
    session = container.practice_service.create(creator_id=organizer.user_id, fields={"teacherName": "Dr. Rao"})
    container.attendance_service.check_in_event(event.event_id, student.user_id)
    container.attendance_service.check_in_session(session.session_id, student.user_id)
    store.save("clubs", [{"id": "c1", "members": [{"id": student.user_id}]}, {"id": "c2", "members": []}])

    counts = container.score_service.counts_for(student.user_id)
    assert (counts.events_attended, counts.clubs_joined, counts.sessions_attended) == (1, 1, 1)
    assert container.score_service.compute_score(student.user_id).xp == 35
