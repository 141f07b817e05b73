from __future__ import annotations

from flask import Flask, jsonify

from ..auth.web import current_claims, make_decorators
from ..common.http import json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    login_required, _ = make_decorators(container)

    @app.route("/api/role-requests", methods=["POST"], endpoint="role_requests_create")
    @login_required
    def role_requests_create():
        data = json_body()
        req = container.role_request_service.create(
            current_claims(),
            requested_role=data.get("requestedRole", ""),
            reason=data.get("reason", ""),
        )
        return jsonify(req.to_dict()), 201

    @app.route("/api/role-requests", methods=["GET"], endpoint="role_requests_list")
    @login_required
    def role_requests_list():
        return jsonify([r.to_dict() for r in container.role_request_service.list_all(current_claims())])

    @app.route("/api/role-requests/<request_id>", methods=["PUT"], endpoint="role_requests_review")
    @login_required
    def role_requests_review(request_id: str):
        data = json_body()
        req = container.role_request_service.review(current_claims(), request_id=request_id, status=data.get("status", ""))
        return jsonify(req.to_dict())
