"""
Data models for Gen-Form.

This module contains Pydantic models for:
- Field type taxonomy
- Form schema (tagged field variants)
- Completion requests
- Schema check and submission validation results
"""

from gen_form.models.field_types import (
    ALLOWED_TYPES,
    CHOICE_TYPES,
    LINK_TYPES,
    FieldType,
)
from gen_form.models.form_schema import (
    BaseField,
    ChoiceField,
    CurrencyField,
    FieldSpec,
    FieldValidation,
    FileField,
    FormSchema,
    GeolocationField,
    LinkField,
    MediaField,
    NumericField,
    RatingField,
    TextField,
)
from gen_form.models.completion import CompletionRequest
from gen_form.models.schema_check import (
    IssueKind,
    SchemaCheckResult,
    SchemaIssue,
)
from gen_form.models.validation_result import (
    FieldValidationError,
    ValidationResult,
)

__all__ = [
    # Taxonomy
    "ALLOWED_TYPES",
    "CHOICE_TYPES",
    "LINK_TYPES",
    "FieldType",
    # Schema
    "BaseField",
    "ChoiceField",
    "CurrencyField",
    "FieldSpec",
    "FieldValidation",
    "FileField",
    "FormSchema",
    "GeolocationField",
    "LinkField",
    "MediaField",
    "NumericField",
    "RatingField",
    "TextField",
    # Completion
    "CompletionRequest",
    # Schema checks
    "IssueKind",
    "SchemaCheckResult",
    "SchemaIssue",
    # Submission validation
    "ValidationResult",
    "FieldValidationError",
]
