from __future__ import annotations

import json

from flask import Flask, Response, g, jsonify, stream_with_context

from ..auth.web import bearer_token, current_claims, make_decorators
from ..common.http import json_ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    login_required, _ = make_decorators(container)

    @app.route("/api/notifications", methods=["GET"], endpoint="notifications_list")
    @login_required
    def notifications_list():
        items = container.notification_service.list_for(current_claims().user_id)
        return jsonify([n.to_dict() for n in items])

    @app.route("/api/notifications/<notification_id>/read", methods=["PUT"], endpoint="notifications_read")
    @login_required
    def notifications_read(notification_id: str):
        container.notification_service.mark_read(notification_id, current_claims().user_id)
        return json_ok("Notification marked as read")

    @app.route("/api/notifications/stream", methods=["GET"], endpoint="notifications_stream")
    def notifications_stream():
        """Server-Sent Events channel for the caller's live notifications."""
        g.claims = container.auth_service.validate_token(bearer_token(allow_query=True))
        user_id = g.claims.user_id
        heartbeat = float(app.config.get("NOTIFICATION_HEARTBEAT_SECONDS", 15))
        sub = container.broker.subscribe(user_id)
        app.logger.debug("Live channel opened for %s", user_id)

        def events():
            try:
                yield ": connected\n\n"
                while True:
                    message = sub.get(timeout=heartbeat)
                    if message is None:
                        yield ": keep-alive\n\n"
                        continue
                    yield f"event: notification\ndata: {json.dumps(message)}\n\n"
            finally:
                container.broker.unsubscribe(sub)
                app.logger.debug("Live channel closed for %s", user_id)

        return Response(
            stream_with_context(events()),
            mimetype="text/event-stream",
            headers={"Cache-Control": "no-cache", "X-Accel-Buffering": "no"},
        )
