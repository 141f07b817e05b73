import pytest

from campus_connect.common.validators import require_email, require_min_length, require_non_empty, require_text
from campus_connect.core.exceptions import ValidationError


def test_require_text_treats_none_as_empty():
    assert require_text(None, "Email") == ""
    assert require_text("a@b.edu", "Email") == "a@b.edu"


@pytest.mark.parametrize("value", [123, 1.5, True, ["x"], {"x": 1}])
def test_non_strings_are_rejected_before_any_string_handling(value):
    with pytest.raises(ValidationError, match="Field must be a string"):
        require_text(value, "Field")
    with pytest.raises(ValidationError, match="Field must be a string"):
        require_non_empty(value, "Field")
    with pytest.raises(ValidationError, match="Field must be a string"):
        require_min_length(value, "Field", 6)
    with pytest.raises(ValidationError, match="Email must be a string"):
        require_email(value)


def test_min_length_counts_characters_of_the_raw_value():
    assert require_min_length("secret", "Password", 6) == "secret"
    with pytest.raises(ValidationError, match="at least 6"):
        require_min_length(None, "Password", 6)
