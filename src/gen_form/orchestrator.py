"""
Form Schema Orchestrator.

This is the main entry point for Gen-Form. Give it a description of a
form in plain language and get back a validated, enriched FormSchema,
or one of the classified FormGenerationError failures.

Pipeline, per call:
    validate input -> build prompts -> completion (with retry)
    -> parse -> validate -> enrich
"""

import asyncio
import json
import logging
from typing import Any

from agents import trace
from pydantic import ValidationError

from gen_form.agents.instructions import SCHEMA_GENERATOR_INSTRUCTIONS, build_user_prompt
from gen_form.agents.schema_generator import AgentCompletionService, CompletionService
from gen_form.config import get_config
from gen_form.errors import (
    GenerationFailedError,
    InvalidInputError,
    ParseError,
    ServiceUnavailableError,
)
from gen_form.models.completion import CompletionRequest
from gen_form.models.form_schema import FormSchema
from gen_form.models.validation_result import ValidationResult
from gen_form.parsing.parser import parse_response
from gen_form.retry import RetryPolicy, Sleep, call_with_retry
from gen_form.tracing import setup_tracing
from gen_form.validation.enrichment import enrich
from gen_form.validation.schema_validator import validate_schema
from gen_form.validation.submission import validate_submission

logger = logging.getLogger("gen-form")


class FormSchemaOrchestrator:
    """
    Turns one prompt into one validated form schema.

    The orchestrator keeps no per-call state, so a single instance can
    serve concurrent requests.

    Usage:
        orchestrator = FormSchemaOrchestrator()

        schema = await orchestrator.generate("Contact form with name, email and message")
        payload = schema.to_dict()

        # Check what a user submitted
        result = orchestrator.validate_data(schema, {"email": "jane@example.com"})
    """

    def __init__(
        self,
        completion_service: CompletionService | None = None,
        model: str | None = None,
        retry_policy: RetryPolicy | None = None,
        sleep: Sleep = asyncio.sleep,
        enable_tracing: bool | None = None,
        trace_to_log: bool = False,
        trace_verbose: bool = False,
        trace_file: str | None = None,
    ):
        """
        Initialize the orchestrator.

        Args:
            completion_service: Service answering the prompt pair. If None,
                an AgentCompletionService is built from the configured API
                key on first use.
            model: OpenAI model for the default service. If None, uses
                config.default_model.
            retry_policy: Retry settings for the completion call. If None,
                built from config.max_attempts and config.retry_backoff_seconds.
            sleep: Coroutine used to wait between rate-limited attempts.
            enable_tracing: Whether to trace runs. If None, uses config.enable_tracing.
            trace_to_log: Whether to write traces to the gen-form logger.
            trace_verbose: Whether to log span boundaries too.
            trace_file: Optional JSON Lines file to write traces to.
        """
        config = get_config()
        self.model = model or config.default_model
        self.retry_policy = retry_policy or RetryPolicy(
            max_attempts=config.max_attempts,
            backoff_seconds=config.retry_backoff_seconds,
        )
        self._sleep = sleep
        self._completion_service = completion_service

        setup_tracing(
            enabled=config.enable_tracing if enable_tracing is None else enable_tracing,
            to_log=trace_to_log,
            verbose=trace_verbose,
            file_path=trace_file,
        )

    def build_request(self, prompt: str) -> CompletionRequest:
        """Build the system + user prompt pair for a form description."""
        config = get_config()
        return CompletionRequest(
            system_prompt=SCHEMA_GENERATOR_INSTRUCTIONS,
            user_prompt=build_user_prompt(prompt),
            temperature=config.default_temperature,
            max_tokens=config.default_max_tokens,
        )

    async def generate(self, prompt: str) -> FormSchema:
        """
        Generate a form schema from a natural-language description.

        Args:
            prompt: What the form is for, e.g. "Job application with CV upload"

        Returns:
            Validated and enriched FormSchema.

        Raises:
            InvalidInputError: The prompt is empty or not a string.
            RateLimitedError: Still rate limited after every retry.
            QuotaExceededError: The API quota is exhausted.
            ServiceUnavailableError: The completion service failed or is not configured.
            GenerationFailedError: The model output could not be parsed or
                did not pass schema validation.

        Example:
            >>> schema = await orchestrator.generate("Event RSVP with meal choice")
            >>> [f.type for f in schema.fields]
            ['text', 'email', 'radio']
        """
        if not isinstance(prompt, str) or not prompt.strip():
            raise InvalidInputError("Valid prompt is required")

        with trace("form_schema_generation"):
            service = self._get_completion_service()
            request = self.build_request(prompt)

            raw = await call_with_retry(
                lambda: service.complete(request),
                policy=self.retry_policy,
                sleep=self._sleep,
            )
            if not raw or not raw.strip():
                raise GenerationFailedError("No response generated from AI")

            return self._schema_from_response(raw)

    def validate_data(self, schema: FormSchema, data: dict[str, Any]) -> ValidationResult:
        """
        Validate form data against a generated schema.

        Args:
            schema: The generated form schema
            data: User-submitted form data

        Returns:
            ValidationResult with errors and validated data
        """
        return validate_submission(schema, data)

    def _get_completion_service(self) -> CompletionService:
        if self._completion_service is None:
            config = get_config()
            if not config.openai_api_key:
                logger.error("OpenAI API key is not configured")
                raise ServiceUnavailableError("AI service is not configured")
            self._completion_service = AgentCompletionService(
                api_key=config.openai_api_key,
                model=self.model,
            )
        return self._completion_service

    def _schema_from_response(self, raw: str) -> FormSchema:
        """Parse, validate and enrich raw model text."""
        try:
            candidate = parse_response(raw)
        except ParseError as e:
            logger.error(f"JSON parsing error: {e.message}")
            logger.error(f"Raw AI response: {e.raw_text}")
            raise GenerationFailedError(
                "Invalid JSON response from AI. Please try a different prompt.",
                details=e.message,
            ) from e

        check = validate_schema(candidate)
        if not check.is_valid:
            logger.error(f"Schema validation errors: {check.messages}")
            logger.error(f"Invalid schema: {json.dumps(candidate, indent=2)}")
            raise GenerationFailedError(
                "Generated schema is invalid",
                details=check.summary(),
                issues=check.messages,
            )

        try:
            schema = FormSchema.from_candidate(candidate)
        except ValidationError as e:
            messages = [
                f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
                for err in e.errors()
            ]
            logger.error(f"Schema model errors: {messages}")
            raise GenerationFailedError(
                "Generated schema is invalid",
                details="; ".join(messages),
                issues=messages,
            ) from e

        return enrich(schema)


async def generate_form_schema(
    prompt: str,
    completion_service: CompletionService | None = None,
    model: str | None = None,
    enable_tracing: bool | None = None,
) -> FormSchema:
    """
    Convenience function to generate a form schema.

    Args:
        prompt: Natural-language description of the form
        completion_service: Optional service to use instead of OpenAI
        model: OpenAI model to use. If None, uses config.default_model.
        enable_tracing: Whether to trace the run. If None, uses config.

    Returns:
        Validated and enriched FormSchema

    Example:
        >>> from gen_form import generate_form_schema
        >>> schema = await generate_form_schema("Newsletter signup")
    """
    orchestrator = FormSchemaOrchestrator(
        completion_service=completion_service,
        model=model,
        enable_tracing=enable_tracing,
    )
    return await orchestrator.generate(prompt)
