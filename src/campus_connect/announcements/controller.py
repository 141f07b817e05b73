from __future__ import annotations

from flask import Flask, jsonify

from ..auth.web import current_claims, make_decorators
from ..common.http import json_body, json_ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    login_required, _ = make_decorators(container)

    @app.route("/api/announcements", methods=["GET"], endpoint="announcements_list")
    @login_required
    def announcements_list():
        return jsonify([a.to_dict() for a in container.announcement_service.list_all()])

    @app.route("/api/announcements", methods=["POST"], endpoint="announcements_create")
    @login_required
    def announcements_create():
        data = json_body()
        announcement = container.announcement_service.create(
            current_claims(),
            title=data.get("title", ""),
            content=data.get("content", ""),
            priority=data.get("priority", ""),
        )
        return jsonify(announcement.to_dict()), 201

    @app.route("/api/announcements/<announcement_id>", methods=["PUT"], endpoint="announcements_update")
    @login_required
    def announcements_update(announcement_id: str):
        data = json_body()
        announcement = container.announcement_service.update(current_claims(), announcement_id, data)
        return jsonify(announcement.to_dict())

    @app.route("/api/announcements/<announcement_id>", methods=["DELETE"], endpoint="announcements_delete")
    @login_required
    def announcements_delete(announcement_id: str):
        container.announcement_service.delete(current_claims(), announcement_id)
        return json_ok("Announcement deleted")
