import base64
import json

import pytest

from campus_connect.attendance.codes import VerificationCodeScheme
from campus_connect.core.exceptions import ValidationError


def test_issue_renders_text_and_png_data_url():
    code = VerificationCodeScheme(box_size=2, border=1).issue("evt-1")

    assert VerificationCodeScheme.parse(code.text) == "evt-1"
    assert code.image_data_url.startswith("data:image/png;base64,")
    png = base64.b64decode(code.image_data_url.split(",", 1)[1])
    assert png[:8] == b"\x89PNG\r\n\x1a\n"


def test_encoding_is_stable():
    assert VerificationCodeScheme.encode("evt-1") == VerificationCodeScheme.encode("evt-1")


def test_parse_accepts_legacy_shape():
    assert VerificationCodeScheme.parse(json.dumps({"eventId": "e9", "type": "attendance"})) == "e9"


@pytest.mark.parametrize(
    "text",
    [
        "",
        "   ",
        "not json",
        "[1, 2]",
        json.dumps({"resourceType": "attendance"}),
        json.dumps({"resourceId": 5, "resourceType": "attendance"}),
        json.dumps({"resourceId": "e1", "resourceType": "coupon"}),
    ],
)
def test_parse_rejects_bad_codes(text):
    with pytest.raises(ValidationError):
        VerificationCodeScheme.parse(text)
