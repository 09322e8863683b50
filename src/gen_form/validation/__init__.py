"""
Validation stages for Gen-Form.

- Schema validator: checks a candidate schema parsed from model output
- Enrichment: fills type-specific defaults on a valid schema
- Submission: checks user-entered values against a schema
"""

from gen_form.validation.schema_validator import validate_schema
from gen_form.validation.enrichment import enrich
from gen_form.validation.submission import validate_submission

__all__ = [
    "validate_schema",
    "enrich",
    "validate_submission",
]
