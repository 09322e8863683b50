"""
Gen-Form: form schemas from plain-language descriptions.

Describe a form, get back a validated schema the client can render.
Model output is sanitized, parsed, validated field by field and
enriched with type-specific defaults before it is returned.

Simple Usage:
    from gen_form import generate_form_schema

    schema = await generate_form_schema("Contact form with name, email and message")
    payload = schema.to_dict()

Advanced Usage:
    from gen_form import FormSchemaOrchestrator, RetryPolicy

    orchestrator = FormSchemaOrchestrator(
        model="gpt-4o",
        retry_policy=RetryPolicy(max_attempts=3, backoff_seconds=1.0),
        trace_to_log=True,
    )

    try:
        schema = await orchestrator.generate("Job application with CV upload")
    except GenerationFailedError as e:
        print(e.details)

    # Validate what the user submitted
    result = orchestrator.validate_data(schema, {"email": "jane@example.com"})

Pipeline stages can also be used on their own:
    from gen_form import sanitize, parse_response, validate_schema, enrich
"""

from gen_form.orchestrator import (
    FormSchemaOrchestrator,
    generate_form_schema,
)
from gen_form.agents.schema_generator import (
    AgentCompletionService,
    CompletionService,
)
from gen_form.errors import (
    FormGenerationError,
    GenerationFailedError,
    InvalidInputError,
    ParseError,
    QuotaExceededError,
    RateLimitedError,
    ServiceUnavailableError,
)
from gen_form.models.field_types import FieldType
from gen_form.models.form_schema import FormSchema
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
from gen_form.parsing import parse_response, sanitize
from gen_form.retry import (
    CompletionError,
    FailureKind,
    RetryPolicy,
    classify_error,
)
from gen_form.validation import enrich, validate_schema, validate_submission
from gen_form.tracing import (
    setup_tracing,
    disable_tracing,
    enable_tracing,
)

__all__ = [
    # Main interface
    "FormSchemaOrchestrator",
    "generate_form_schema",
    # Completion service
    "AgentCompletionService",
    "CompletionService",
    "CompletionRequest",
    "CompletionError",
    "FailureKind",
    "RetryPolicy",
    "classify_error",
    # Errors
    "FormGenerationError",
    "GenerationFailedError",
    "InvalidInputError",
    "ParseError",
    "QuotaExceededError",
    "RateLimitedError",
    "ServiceUnavailableError",
    # Models
    "FieldType",
    "FormSchema",
    "IssueKind",
    "SchemaCheckResult",
    "SchemaIssue",
    "ValidationResult",
    "FieldValidationError",
    # Pipeline stages
    "sanitize",
    "parse_response",
    "validate_schema",
    "enrich",
    "validate_submission",
    # Tracing
    "setup_tracing",
    "disable_tracing",
    "enable_tracing",
]

__version__ = "0.1.0"
