"""Verification codes used for check-in.

A code is not a secret: it is a JSON payload naming the resource. It is
rendered once, as text and as a QR image, when the resource is created.
"""

from __future__ import annotations

import base64
import io
import json
from dataclasses import dataclass

import qrcode

from ..core.constants import CODE_TYPE_ATTENDANCE
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class VerificationCode:
    resource_id: str
    resource_type: str
    text: str
    image_data_url: str


class VerificationCodeScheme:
    def __init__(self, *, box_size: int = 10, border: int = 2):
        self._box_size = int(box_size)
        self._border = int(border)

    @staticmethod
    def encode(resource_id: str, resource_type: str = CODE_TYPE_ATTENDANCE) -> str:
        return json.dumps({"resourceId": resource_id, "resourceType": resource_type}, sort_keys=True)

    def issue(self, resource_id: str, resource_type: str = CODE_TYPE_ATTENDANCE) -> VerificationCode:
        text = self.encode(resource_id, resource_type)
        png = self.render_png(text)
        return VerificationCode(
            resource_id=resource_id,
            resource_type=resource_type,
            text=text,
            image_data_url="data:image/png;base64," + base64.b64encode(png).decode("ascii"),
        )

    def render_png(self, text: str) -> bytes:
        qr = qrcode.QRCode(
            version=None,
            error_correction=qrcode.constants.ERROR_CORRECT_L,
            box_size=self._box_size,
            border=self._border,
        )
        qr.add_data(text)
        qr.make(fit=True)

        img = qr.make_image(fill_color="black", back_color="white")
        buf = io.BytesIO()
        img.save(buf, format="PNG")
        return buf.getvalue()

    @staticmethod
    def parse(text: str, *, expected_type: str = CODE_TYPE_ATTENDANCE) -> str:
        """Return the resource id named by ``text``.

        Accepts the older ``{"eventId", "type"}`` shape as well.
        """
        if not text or not str(text).strip():
            raise ValidationError("Verification code is empty")
        try:
            payload = json.loads(text)
        except (TypeError, ValueError):
            raise ValidationError("Verification code is malformed")
        if not isinstance(payload, dict):
            raise ValidationError("Verification code is malformed")

        resource_id = payload.get("resourceId") or payload.get("eventId")
        resource_type = payload.get("resourceType") or payload.get("type")
        if not resource_id or not isinstance(resource_id, str):
            raise ValidationError("Verification code has no resource id")
        if resource_type != expected_type:
            raise ValidationError(f"Verification code is not an {expected_type} code")
        return resource_id
