from __future__ import annotations

from flask import Flask, jsonify

from ..auth.guard import Capability
from ..auth.web import current_claims, make_decorators
from ..common.http import json_body, json_ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    login_required, capability_required = make_decorators(container)

    @app.route("/api/practice/sessions", methods=["POST"], endpoint="practice_create")
    @capability_required(Capability.MANAGE_SESSIONS)
    def practice_create():
        data = json_body()
        session = container.practice_service.create(creator_id=current_claims().user_id, fields=data)
        return jsonify(session.to_dict()), 201

    @app.route("/api/practice/sessions", methods=["GET"], endpoint="practice_list")
    @login_required
    def practice_list():
        sessions = container.attendance_service.list_sessions_for(current_claims())
        return jsonify([s.to_dict() for s in sessions])

    @app.route("/api/practice/sessions/<session_id>/attend", methods=["POST"], endpoint="practice_attend")
    @capability_required(Capability.CHECK_IN)
    def practice_attend(session_id: str):
        result = container.attendance_service.check_in_session(session_id, current_claims().user_id)
        return json_ok(
            "Attendance marked successfully" if result.created else "Attendance already marked",
            xpGained=result.xp_gained,
        )

    @app.route("/api/practice/sessions/<session_id>/status", methods=["PUT"], endpoint="practice_status")
    @capability_required(Capability.MANAGE_SESSIONS)
    def practice_status(session_id: str):
        data = json_body()
        container.attendance_service.set_session_status(session_id, data.get("status", ""))
        return json_ok("Session status updated")

    @app.route("/api/practice/report/<session_id>", methods=["GET"], endpoint="practice_report")
    @capability_required(Capability.MANAGE_SESSIONS)
    def practice_report(session_id: str):
        return jsonify(container.attendance_service.session_report(session_id))
