from __future__ import annotations

from typing import Any, Iterable

from ..core.exceptions import ValidationError


def require_text(value: Any, field_name: str) -> str:
    """None reads as empty; anything that is not a string is rejected."""
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string")
    return value


def require_non_empty(value: Any, field_name: str) -> str:
    value = require_text(value, field_name).strip()
    if not value:
        raise ValidationError(f"{field_name} is required")
    return value


def require_min_length(value: Any, field_name: str, min_len: int) -> str:
    value = require_text(value, field_name)
    if len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_email(value: Any) -> str:
    email = require_non_empty(value, "Email").lower()
    local, sep, domain = email.partition("@")
    if not sep or not local or "." not in domain:
        raise ValidationError("Email is not valid")
    return email


def truthy_changes(patch: dict, fields: Iterable[str]) -> dict:
    """Pick the fields of ``patch`` that should overwrite stored values.

    Only truthy values count: an empty string, None or 0 means "leave as is",
    so a patch can never clear a field.
    """
    return {name: patch[name] for name in fields if patch.get(name)}
