from __future__ import annotations

from flask import Flask, jsonify

from ..auth.guard import Capability
from ..auth.web import current_claims, make_decorators
from ..container import Container


def register(app: Flask, container: Container) -> None:
    _, capability_required = make_decorators(container)

    @app.route("/api/me/score", methods=["GET"], endpoint="me_score")
    @capability_required(Capability.CHECK_IN)
    def me_score():
        user_id = current_claims().user_id
        counts = container.score_service.counts_for(user_id)
        score = container.score_service.compute_score(user_id)
        return jsonify(
            {
                "eventsAttended": counts.events_attended,
                "clubsJoined": counts.clubs_joined,
                "practiceAttended": counts.sessions_attended,
                **score.to_dict(),
            }
        )
