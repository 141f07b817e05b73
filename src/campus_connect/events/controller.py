from __future__ import annotations

import io

from flask import Flask, jsonify, request, send_file

from ..auth.guard import Capability
from ..auth.web import current_claims, make_decorators
from ..common.http import json_body, json_ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    login_required, capability_required = make_decorators(container)

    @app.route("/api/events", methods=["GET"], endpoint="events_list")
    @login_required
    def events_list():
        return jsonify([e.to_dict() for e in container.event_service.list_all()])

    @app.route("/api/events", methods=["POST"], endpoint="events_create")
    @capability_required(Capability.MANAGE_EVENTS)
    def events_create():
        data = json_body() or request.form.to_dict()
        event = container.event_service.create(creator_id=current_claims().user_id, fields=data)
        return jsonify(event.to_dict()), 201

    @app.route("/api/events/<event_id>", methods=["PUT"], endpoint="events_update")
    @capability_required(Capability.MANAGE_EVENTS)
    def events_update(event_id: str):
        event = container.event_service.update(event_id, json_body())
        return jsonify(event.to_dict())

    @app.route("/api/events/<event_id>", methods=["DELETE"], endpoint="events_delete")
    @capability_required(Capability.MANAGE_EVENTS)
    def events_delete(event_id: str):
        container.event_service.delete(event_id, actor_id=current_claims().user_id)
        return json_ok("Event deleted")

    @app.route("/api/events/<event_id>/attend", methods=["POST"], endpoint="events_attend")
    @capability_required(Capability.CHECK_IN)
    def events_attend(event_id: str):
        result = container.attendance_service.check_in_event(event_id, current_claims().user_id)
        return json_ok(
            "Attendance marked successfully" if result.created else "Attendance already marked",
            xpGained=result.xp_gained,
            attendance=result.record.to_dict(),
        )

    @app.route("/api/attendance/redeem", methods=["POST"], endpoint="attendance_redeem")
    @capability_required(Capability.CHECK_IN)
    def attendance_redeem():
        data = json_body()
        result = container.attendance_service.redeem(data.get("code", ""), current_claims().user_id)
        return json_ok(
            "Attendance marked successfully" if result.created else "Attendance already marked",
            resourceId=result.resource_id,
            xpGained=result.xp_gained,
            attendance=result.record.to_dict(),
        )

    @app.route("/api/events/<event_id>/code", methods=["GET"], endpoint="events_code")
    @capability_required(Capability.MANAGE_EVENTS)
    def events_code(event_id: str):
        return jsonify(container.event_service.get_code(event_id))

    @app.route("/api/events/<event_id>/code.png", methods=["GET"], endpoint="events_code_png")
    @capability_required(Capability.MANAGE_EVENTS)
    def events_code_png(event_id: str):
        png = container.event_service.code_png(event_id)
        return send_file(io.BytesIO(png), mimetype="image/png", download_name=f"event-{event_id}.png")

    @app.route("/api/events/<event_id>/approve/<user_id>", methods=["POST"], endpoint="events_approve")
    @capability_required(Capability.APPROVE_ATTENDANCE)
    def events_approve(event_id: str, user_id: str):
        result = container.attendance_service.approve(event_id, user_id, approved_by=current_claims().user_id)
        return json_ok("Attendance approved", attendance=result.record.to_dict())

    @app.route("/api/reports/attendance/<event_id>", methods=["GET"], endpoint="events_report")
    @capability_required(Capability.MANAGE_EVENTS)
    def events_report(event_id: str):
        report = container.attendance_service.event_report(event_id)
        return jsonify(
            {
                "eventName": report.title,
                "totalAttendees": report.total,
                "approved": report.approved,
                "pending": report.pending,
                "attendees": report.attendees,
                "generatedAt": report.generated_at,
            }
        )
