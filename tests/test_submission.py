"""Tests for submitted-data validation."""

import pytest

from gen_form.models.form_schema import FormSchema
from gen_form.validation import validate_submission


@pytest.fixture
def contact(contact_schema) -> FormSchema:
    return FormSchema.from_candidate(contact_schema)


def _single(field: dict) -> FormSchema:
    return FormSchema.from_candidate({"fields": [field]})


class TestValidateSubmission:
    """Tests for validate_submission()."""

    def test_valid_submission_is_trimmed(self, contact):
        result = validate_submission(contact, {
            "fullName": "  Jane Doe ",
            "email": "jane@example.com",
            "topic": "Sales",
            "message": "I would like a quote.",
        })
        assert result.is_valid
        assert result.validated_data["fullName"] == "Jane Doe"
        assert result.warnings == []

    def test_required_fields(self, contact):
        result = validate_submission(contact, {"fullName": "   "})
        assert not result.is_valid
        assert result.to_error_dict() == {
            "fullName": "Full Name is required",
            "email": "Email is required",
        }
        assert result.validated_data is None

    def test_optional_fields_may_be_empty(self, contact):
        result = validate_submission(contact, {"fullName": "Jane", "email": "jane@example.com", "topic": ""})
        assert result.is_valid
        assert "topic" not in result.validated_data

    def test_email_format(self, contact):
        result = validate_submission(contact, {"fullName": "Jane", "email": "jane@"})
        assert result.to_error_dict() == {"email": "Please enter a valid email address"}
        assert result.errors[0].error_type == "format"

    def test_choice_membership(self, contact):
        result = validate_submission(contact, {"fullName": "Jane", "email": "j@x.io", "topic": "Billing"})
        assert result.get_field_errors("topic")[0].error_type == "choice"

    def test_length_bounds(self, contact):
        result = validate_submission(contact, {"fullName": "Jane", "email": "j@x.io", "message": "short"})
        assert result.to_error_dict() == {"message": "Minimum 10 characters required"}
        result = validate_submission(contact, {"fullName": "Jane", "email": "j@x.io", "message": "x" * 501})
        assert result.to_error_dict() == {"message": "Maximum 500 characters allowed"}

    def test_unexpected_keys_warn(self, contact):
        result = validate_submission(contact, {"fullName": "Jane", "email": "j@x.io", "admin": True})
        assert result.is_valid
        assert result.warnings == ["Unexpected field 'admin' was ignored"]
        assert "admin" not in result.validated_data

    def test_url_and_phone_formats(self):
        url = _single({"name": "site", "label": "Site", "type": "url"})
        assert not validate_submission(url, {"site": "example.com"}).is_valid
        assert validate_submission(url, {"site": "https://example.com"}).is_valid

        phone = _single({"name": "tel", "label": "Tel", "type": "phone"})
        assert validate_submission(phone, {"tel": "+1 (555) 123-4567"}).is_valid
        assert not validate_submission(phone, {"tel": "call me"}).is_valid


class TestNumericValues:
    """Numeric bounds come from validation hints, then the field's own min/max."""

    @pytest.fixture
    def age(self) -> FormSchema:
        return _single({"name": "age", "label": "Age", "type": "int", "min": 18, "max": 99})

    @pytest.mark.parametrize(
        "value,message",
        [
            ("17", "Minimum value is 18"),
            (100, "Maximum value is 99"),
            ("abc", "Please enter a number"),
            (True, "Please enter a number"),
        ],
    )
    def test_bounds(self, age, value, message):
        assert validate_submission(age, {"age": value}).to_error_dict() == {"age": message}

    def test_in_range(self, age):
        result = validate_submission(age, {"age": "42"})
        assert result.is_valid
        assert result.validated_data == {"age": "42"}

    def test_validation_hint_overrides_field_bound(self):
        schema = _single({
            "name": "age", "label": "Age", "type": "number",
            "min": 18, "validation": {"min": 21},
        })
        assert validate_submission(schema, {"age": 20}).to_error_dict() == {"age": "Minimum value is 21"}


class TestPatterns:
    """Pattern checks with custom messages."""

    def test_custom_message(self):
        schema = _single({
            "name": "code", "label": "Code", "type": "data",
            "pattern": "^[A-Z]{3}$", "validation": {"custom": "Use three capital letters"},
        })
        assert validate_submission(schema, {"code": "abc"}).to_error_dict() == {"code": "Use three capital letters"}
        assert validate_submission(schema, {"code": "ABC"}).is_valid

    def test_default_message(self):
        schema = _single({"name": "zip", "label": "ZIP", "type": "text", "validation": {"pattern": "^\\d{5}$"}})
        assert validate_submission(schema, {"zip": "1234"}).to_error_dict() == {"zip": "Please enter a valid format"}

    def test_broken_pattern_is_ignored(self):
        schema = _single({"name": "x", "label": "X", "type": "text", "pattern": "(["})
        assert validate_submission(schema, {"x": "anything"}).is_valid

    def test_multiselect_values(self):
        schema = _single({"name": "langs", "label": "Languages", "type": "multiselect", "options": ["Python", "SQL"]})
        assert validate_submission(schema, {"langs": ["Python", "SQL"]}).is_valid
        assert not validate_submission(schema, {"langs": ["Python", "Go"]}).is_valid


class TestToggles:
    """Checkbox and switch answers."""

    @pytest.fixture
    def terms(self) -> FormSchema:
        return FormSchema.from_candidate({
            "fields": [
                {"name": "terms", "label": "Accept terms", "type": "checkbox", "required": True},
                {"name": "newsletter", "label": "Newsletter", "type": "switch"},
            ],
        })

    def test_required_toggle_must_be_ticked(self, terms):
        result = validate_submission(terms, {"terms": False, "newsletter": True})
        assert result.to_error_dict() == {"terms": "Accept terms is required"}

    def test_optional_toggle_keeps_false(self, terms):
        result = validate_submission(terms, {"terms": True, "newsletter": False})
        assert result.is_valid
        assert result.validated_data == {"terms": True, "newsletter": False}


class TestOversizedNumbers:
    """Numbers too large for a float are rejected, not raised."""

    def test_huge_integer(self):
        schema = _single({"name": "qty", "label": "Qty", "type": "int", "max": 10})
        result = validate_submission(schema, {"qty": 10 ** 400})
        assert result.to_error_dict() == {"qty": "Please enter a number"}

    def test_date_hint_is_ignored_for_numbers(self):
        schema = _single({"name": "n", "label": "N", "type": "number", "validation": {"min": "2024-01-01"}})
        assert validate_submission(schema, {"n": 5}).is_valid
