from __future__ import annotations

from functools import wraps
from typing import Optional

from flask import g, request

from ..core.exceptions import AuthenticationError
from .guard import Capability


def bearer_token(*, allow_query: bool = False) -> Optional[str]:
    header = request.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() == "bearer" and token.strip():
        return token.strip()
    if allow_query:
        # EventSource cannot send headers.
        return request.args.get("token") or None
    return None


def current_claims():
    claims = g.get("claims")
    if claims is None:
        raise AuthenticationError("No token provided")
    return claims


def make_decorators(container):
    """Build ``login_required`` and ``capability_required`` bound to a container."""

    def login_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            g.claims = container.auth_service.validate_token(bearer_token())
            return view(*args, **kwargs)

        return wrapper

    def capability_required(capability: Capability):
        """Claim-trust check; live checks happen inside the services that need them."""

        def decorator(view):
            @wraps(view)
            def wrapper(*args, **kwargs):
                g.claims = container.auth_service.validate_token(bearer_token())
                container.guard.require(g.claims, capability)
                return view(*args, **kwargs)

            return wrapper

        return decorator

    return login_required, capability_required
