"""
Schema validator.

Walks a candidate schema parsed from model output and reports every
structural and semantic defect it finds, indexed by field. The generator
is unreliable, so all checks run (apart from the three top-level early
returns) and the caller gets the full list to decide whether to retry.

A candidate this module accepts always loads into ``FormSchema``.
"""

import logging
from typing import Any

from pydantic import TypeAdapter, ValidationError

from gen_form.models.field_types import (
    ALLOWED_TYPES,
    CHOICE_TYPES,
    LINK_TYPES,
    FieldType,
    is_field_type,
)
from gen_form.models.form_schema import FieldSpec
from gen_form.models.schema_check import IssueKind, SchemaCheckResult, SchemaIssue

logger = logging.getLogger("gen-form")

MIN_STARS = 1
MAX_STARS = 10
MAP_TYPES = ("roadmap", "satellite", "hybrid", "terrain")

SCHEMA_STRING_ATTRIBUTES = ("title", "description", "submitText", "resetText")
FIELD_STRING_ATTRIBUTES = ("placeholder", "description", "pattern", "currency", "targetDocType", "accept")
FIELD_BOOLEAN_ATTRIBUTES = ("required", "multiple", "allowHalfRating")

# Types loaded as LinkField, which may carry options and filters
RECORD_TYPES = frozenset({
    FieldType.LINK.value,
    FieldType.DYNAMIC_LINK.value,
    FieldType.TABLE.value,
    FieldType.TABLE_MULTISELECT.value,
})

_FIELD_ADAPTER = TypeAdapter(FieldSpec)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_whole(value: Any) -> bool:
    if isinstance(value, float):
        return value.is_integer()
    return isinstance(value, int) and not isinstance(value, bool)


def _is_bound(value: Any) -> bool:
    return _is_number(value) or isinstance(value, str)


def _is_string_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def _schema_error(kind: IssueKind, detail: str) -> SchemaCheckResult:
    return SchemaCheckResult(is_valid=False, errors=[SchemaIssue(kind=kind, detail=detail)])


def _check_validation(validation: Any, report) -> None:
    """Check the nested ``validation`` hints object."""
    if not isinstance(validation, dict):
        report(IssueKind.INVALID_VALIDATION, "'validation' must be an object")
        return

    for key in ("minLength", "maxLength"):
        value = validation.get(key)
        if value is not None and not _is_whole(value):
            report(IssueKind.INVALID_VALIDATION, f"'validation.{key}' must be a whole number")
    for key in ("min", "max"):
        value = validation.get(key)
        if value is not None and not _is_bound(value):
            report(IssueKind.INVALID_VALIDATION, f"'validation.{key}' must be a number")
    for key in ("pattern", "custom", "fileSize"):
        value = validation.get(key)
        if value is not None and not isinstance(value, str):
            report(IssueKind.INVALID_VALIDATION, f"'validation.{key}' must be a string")
    file_types = validation.get("fileTypes")
    if file_types is not None and not _is_string_list(file_types):
        report(IssueKind.INVALID_VALIDATION, "'validation.fileTypes' must be an array of strings")


def _check_field(
    index: int,
    field: dict[str, Any],
    seen_names: set[str],
    errors: list[SchemaIssue],
    warnings: list[str],
) -> None:
    name = field.get("name")
    field_name = name if isinstance(name, str) and name else None
    errors_before = len(errors)

    def report(kind: IssueKind, detail: str) -> None:
        errors.append(SchemaIssue(field_index=index, field_name=field_name, kind=kind, detail=detail))

    # Required properties
    if field_name is None:
        report(IssueKind.MISSING_NAME, "'name' is required and must be a string")
    label = field.get("label")
    if not isinstance(label, str) or not label:
        report(IssueKind.MISSING_LABEL, "'label' is required and must be a string")
    field_type = field.get("type")
    if not isinstance(field_type, str) or not field_type:
        report(IssueKind.MISSING_TYPE, "'type' is required and must be a string")
        field_type = None

    # First occurrence wins
    if field_name is not None:
        if field_name in seen_names:
            report(IssueKind.DUPLICATE_NAME, f"Duplicate field name '{field_name}'")
        seen_names.add(field_name)

    if field_type is not None and not is_field_type(field_type):
        report(
            IssueKind.INVALID_TYPE,
            f"Invalid field type '{field_type}'. Allowed types: {', '.join(ALLOWED_TYPES)}",
        )
        field_type = None

    if field_type in CHOICE_TYPES:
        options = field.get("options")
        if not isinstance(options, list) or len(options) == 0:
            report(IssueKind.MISSING_OPTIONS, f"Field type '{field_type}' requires a non-empty options array")
        elif not _is_string_list(options):
            report(IssueKind.INVALID_OPTIONS, f"Field type '{field_type}' options must all be strings")

    if field_type in RECORD_TYPES:
        options = field.get("options")
        if options is not None and not _is_string_list(options):
            report(IssueKind.INVALID_OPTIONS, "'options' must be an array of strings")
        link_filters = field.get("linkFilters")
        if link_filters is not None and not isinstance(link_filters, dict):
            report(IssueKind.INVALID_ATTRIBUTE, "'linkFilters' must be an object")

    if field_type in LINK_TYPES and not field.get("targetDocType"):
        advisory = f"Field {index + 1}: Link field '{field_name}' should specify targetDocType for better UX"
        logger.warning(advisory)
        warnings.append(advisory)

    # Plain attributes
    for key in FIELD_STRING_ATTRIBUTES:
        value = field.get(key)
        if value is not None and not isinstance(value, str):
            report(IssueKind.INVALID_ATTRIBUTE, f"'{key}' must be a string")
    for key in FIELD_BOOLEAN_ATTRIBUTES:
        value = field.get(key)
        if value is not None and not isinstance(value, bool):
            report(IssueKind.INVALID_ATTRIBUTE, f"'{key}' must be true or false")
    if field.get("validation") is not None:
        _check_validation(field["validation"], report)

    # Numeric constraints
    bounds_ok = True
    for key in ("min", "max"):
        value = field.get(key)
        if value is not None and not _is_bound(value):
            report(IssueKind.INVALID_BOUND, f"'{key}' must be a number")
            bounds_ok = False
    step = field.get("step")
    if step is not None and not _is_number(step):
        report(IssueKind.INVALID_BOUND, "'step' must be a number")
    precision = field.get("precision")
    if precision is not None and not _is_whole(precision):
        report(IssueKind.INVALID_BOUND, "'precision' must be a whole number")
    low, high = field.get("min"), field.get("max")
    if bounds_ok and low is not None and high is not None:
        comparable = (_is_number(low) and _is_number(high)) or (isinstance(low, str) and isinstance(high, str))
        if comparable and low > high:
            report(IssueKind.MIN_GREATER_THAN_MAX, "'min' value cannot be greater than 'max' value")

    if field_type == FieldType.RATING:
        max_stars = field.get("maxStars")
        if max_stars is not None and (not _is_whole(max_stars) or not MIN_STARS <= max_stars <= MAX_STARS):
            report(
                IssueKind.MAX_STARS_OUT_OF_RANGE,
                f"'maxStars' must be a whole number between {MIN_STARS} and {MAX_STARS}",
            )

    if field_type == FieldType.GEOLOCATION:
        map_type = field.get("mapType")
        if map_type is not None and map_type not in MAP_TYPES:
            report(IssueKind.INVALID_MAP_TYPE, f"'mapType' must be one of: {', '.join(MAP_TYPES)}")

    # Anything the checks above do not name still has to load
    if len(errors) == errors_before:
        try:
            _FIELD_ADAPTER.validate_python(field)
        except ValidationError as e:
            for err in e.errors():
                # loc[0] is the variant tag
                path = ".".join(str(part) for part in err["loc"][1:]) or "field"
                report(IssueKind.INVALID_ATTRIBUTE, f"'{path}': {err['msg']}")


def validate_schema(candidate: Any) -> SchemaCheckResult:
    """
    Check a candidate schema against the form schema contract.

    Args:
        candidate: Any decoded JSON value.

    Returns:
        SchemaCheckResult listing every defect. Never raises.

    Example:
        >>> result = validate_schema({"fields": [{"name": "a", "label": "A", "type": "select"}]})
        >>> result.messages
        ["Field 1: Field type 'select' requires a non-empty options array"]
    """
    if not isinstance(candidate, dict):
        return _schema_error(IssueKind.NOT_AN_OBJECT, "Schema must be an object")

    fields = candidate.get("fields")
    if not isinstance(fields, list):
        return _schema_error(IssueKind.MISSING_FIELDS, "Schema must contain a fields array")
    if len(fields) == 0:
        return _schema_error(IssueKind.EMPTY_FIELDS, "Schema must contain at least one field")

    errors: list[SchemaIssue] = []
    warnings: list[str] = []
    seen_names: set[str] = set()

    for key in SCHEMA_STRING_ATTRIBUTES:
        value = candidate.get(key)
        if value is not None and not isinstance(value, str):
            errors.append(SchemaIssue(kind=IssueKind.INVALID_ATTRIBUTE, detail=f"Schema '{key}' must be a string"))

    for index, field in enumerate(fields):
        if not isinstance(field, dict):
            errors.append(SchemaIssue(field_index=index, kind=IssueKind.INVALID_FIELD, detail="Field must be an object"))
            continue
        _check_field(index, field, seen_names, errors, warnings)

    return SchemaCheckResult(is_valid=len(errors) == 0, errors=errors, warnings=warnings)
