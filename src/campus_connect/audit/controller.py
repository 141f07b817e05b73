from __future__ import annotations

from flask import Flask, jsonify

from ..auth.guard import Capability
from ..auth.web import make_decorators
from ..container import Container


def register(app: Flask, container: Container) -> None:
    _, capability_required = make_decorators(container)

    @app.route("/api/audit-logs", methods=["GET"], endpoint="audit_logs")
    @capability_required(Capability.READ_AUDIT_LOG)
    def audit_logs():
        return jsonify([e.to_dict() for e in container.audit_log.recent()])
