"""Example: drive the service layer directly, without Flask.

Controllers are thin; the use cases live in the services.
"""

from campus_connect.container import build_container
from campus_connect.storage.base import InMemoryStore


def main():
    container = build_container(store=InMemoryStore(), secret_key="example")

    faculty = container.auth_service.register(
        {"email": "rao@college.edu", "password": "secret1", "name": "Dr. Rao", "role": "faculty"}
    )
    student = container.auth_service.register(
        {"email": "asha@college.edu", "password": "secret1", "name": "Asha"}
    )

    event = container.event_service.create(creator_id=faculty.user["id"], fields={"title": "Hackathon"})
    result = container.attendance_service.redeem(event.manual_code, student.user["id"])
    print("checked in:", result.created, "xp:", result.xp_gained)

    container.attendance_service.approve(event.event_id, student.user["id"], approved_by=faculty.user["id"])
    print(container.score_service.compute_score(student.user["id"]).to_dict())
    print([n.title for n in container.notification_service.list_for(student.user["id"])])


if __name__ == "__main__":
    main()
