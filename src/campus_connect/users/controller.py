from __future__ import annotations

from flask import Flask, jsonify

from ..auth.web import current_claims, make_decorators
from ..common.http import json_body, json_ok
from ..container import Container
from .model import normalize_payload


def register(app: Flask, container: Container) -> None:
    login_required, _ = make_decorators(container)

    @app.route("/api/auth/register", methods=["POST"], endpoint="auth_register")
    def auth_register():
        data = normalize_payload(json_body())
        result = container.auth_service.register(data)
        app.logger.info("Registered %s", result.user.get("email"))
        return jsonify({"token": result.token, "user": result.user}), 201

    @app.route("/api/auth/login", methods=["POST"], endpoint="auth_login")
    def auth_login():
        data = json_body()
        result = container.auth_service.login(data.get("email", ""), data.get("password", ""))
        return jsonify({"token": result.token, "user": result.user})

    @app.route("/api/auth/me", methods=["GET"], endpoint="auth_me")
    @login_required
    def auth_me():
        return jsonify(container.user_service.current_user(current_claims().user_id))

    @app.route("/api/auth/profile", methods=["PUT"], endpoint="auth_profile")
    @login_required
    def auth_profile():
        data = normalize_payload(json_body())
        return jsonify(container.user_service.update_profile(current_claims().user_id, data))

    @app.route("/api/admin/users", methods=["GET"], endpoint="admin_users")
    @login_required
    def admin_users():
        return jsonify(container.user_service.list_users(current_claims()))

    @app.route("/api/admin/users/<user_id>", methods=["PUT"], endpoint="admin_update_user")
    @login_required
    def admin_update_user(user_id: str):
        data = normalize_payload(json_body())
        container.user_service.admin_update_user(current_claims(), user_id, data)
        return json_ok("User updated successfully")

    @app.route("/api/admin/users/<user_id>", methods=["DELETE"], endpoint="admin_delete_user")
    @login_required
    def admin_delete_user(user_id: str):
        container.user_service.delete_user(current_claims(), user_id)
        return json_ok("User deleted successfully")
