"""
Submission validation.

Checks the values a user entered into a rendered form against the
schema that produced it, with the same rules the client applies before
submitting: required values, email/url/phone formats, patterns, length
and numeric bounds, and choice membership.
"""

import re
from typing import Any

from gen_form.models.field_types import FieldType
from gen_form.models.form_schema import BaseField, ChoiceField, FormSchema, RangedField, TextField
from gen_form.models.validation_result import FieldValidationError, ValidationResult

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
URL_PATTERN = re.compile(r"^https?://.+")
PHONE_PATTERN = re.compile(r"^[\+]?[\d\s\-\(\)]+$")

NUMERIC_TYPES = frozenset({
    FieldType.INT.value,
    FieldType.FLOAT.value,
    FieldType.NUMBER.value,
    FieldType.RANGE.value,
    FieldType.PERCENT.value,
    FieldType.CURRENCY.value,
})

TOGGLE_TYPES = frozenset({FieldType.CHECKBOX.value, FieldType.SWITCH.value})

FORMAT_CHECKS = {
    FieldType.EMAIL.value: (EMAIL_PATTERN, "Please enter a valid email address"),
    FieldType.URL.value: (URL_PATTERN, "Please enter a valid URL (starting with http:// or https://)"),
    FieldType.PHONE.value: (PHONE_PATTERN, "Please enter a valid phone number"),
}


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, (list, tuple, dict)):
        return len(value) == 0
    return False


def _to_number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    try:
        if isinstance(value, (int, float)):
            return float(value)
        return float(str(value))
    except (ValueError, OverflowError):
        return None


def _check_value(field: BaseField, value: Any) -> tuple[str, str, Any] | None:
    """Return (error_type, message, expected) for the first failed rule."""
    validation = field.validation

    if isinstance(value, str):
        fmt = FORMAT_CHECKS.get(field.type)
        if fmt and not fmt[0].match(value):
            return "format", fmt[1], field.type

        pattern = field.pattern if isinstance(field, TextField) else None
        pattern = pattern or (validation.pattern if validation else None)
        if pattern:
            try:
                matched = re.search(pattern, value) is not None
            except re.error:
                matched = True
            if not matched:
                custom = validation.custom if validation else None
                return "pattern", custom or "Please enter a valid format", pattern

        if validation and validation.min_length is not None and len(value) < validation.min_length:
            return "min_length", f"Minimum {validation.min_length} characters required", validation.min_length
        if validation and validation.max_length is not None and len(value) > validation.max_length:
            return "max_length", f"Maximum {validation.max_length} characters allowed", validation.max_length

    if field.type in NUMERIC_TYPES:
        number = _to_number(value)
        if number is None:
            return "type", "Please enter a number", "number"
        low = _to_number(validation.min) if validation and validation.min is not None else None
        high = _to_number(validation.max) if validation and validation.max is not None else None
        if isinstance(field, RangedField):
            if low is None and field.min is not None:
                low = _to_number(field.min)
            if high is None and field.max is not None:
                high = _to_number(field.max)
        if low is not None and number < low:
            return "minimum", f"Minimum value is {low:g}", low
        if high is not None and number > high:
            return "maximum", f"Maximum value is {high:g}", high

    if isinstance(field, ChoiceField):
        chosen = value if isinstance(value, list) else [value]
        invalid = [v for v in chosen if v not in field.options]
        if invalid:
            return "choice", f"Please select one of the available options: {', '.join(field.options)}", field.options

    return None


def validate_submission(schema: FormSchema, data: dict[str, Any]) -> ValidationResult:
    """
    Validate submitted form data against a generated schema.

    Args:
        schema: The schema the form was rendered from.
        data: Submitted values keyed by field name.

    Returns:
        ValidationResult with one error per failing field. When valid,
        ``validated_data`` holds the submitted values with strings trimmed.
    """
    errors: list[FieldValidationError] = []
    cleaned: dict[str, Any] = {}

    for field in schema.fields:
        value = data.get(field.name)
        if isinstance(value, str):
            value = value.strip()

        # A required toggle left unticked counts as unanswered
        unticked = value is False and field.type in TOGGLE_TYPES
        if _is_empty(value) or (field.required and unticked):
            if field.required:
                errors.append(FieldValidationError(
                    field_name=field.name,
                    error_type="required",
                    message=f"{field.label} is required",
                    received=value,
                ))
            continue

        failure = _check_value(field, value)
        if failure:
            error_type, message, expected = failure
            errors.append(FieldValidationError(
                field_name=field.name,
                error_type=error_type,
                message=message,
                expected=expected,
                received=value,
            ))
            continue

        cleaned[field.name] = value

    known = set(schema.field_names)
    warnings = [f"Unexpected field '{key}' was ignored" for key in data if key not in known]

    return ValidationResult(
        is_valid=len(errors) == 0,
        errors=errors,
        validated_data=cleaned if not errors else None,
        warnings=warnings,
    )
