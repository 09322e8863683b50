"""
Retry policy for completion service calls.

Errors raised by the completion service are classified first, and the
classification decides what happens next:

- rate limited: wait ``backoff_seconds * attempt`` and try again
- quota exceeded: give up immediately, it will not clear by retrying
- anything else: try again straight away, give up on the final attempt

The wait is an injected coroutine so the policy can be exercised
without real sleeps.
"""

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable

import openai

from gen_form.errors import (
    QuotaExceededError,
    RateLimitedError,
    ServiceUnavailableError,
)

logger = logging.getLogger("gen-form")

Sleep = Callable[[float], Awaitable[None]]


class FailureKind(str, Enum):
    """Classification of a completion service error."""

    RATE_LIMITED = "rate_limited"
    QUOTA_EXCEEDED = "quota_exceeded"
    TRANSIENT = "transient"
    OTHER = "other"


class CompletionError(Exception):
    """An error a completion service has already classified."""

    def __init__(self, kind: FailureKind, message: str = ""):
        super().__init__(message or kind.value)
        self.kind = kind


def classify_error(error: BaseException) -> FailureKind:
    """
    Map an exception from the completion service to a FailureKind.

    OpenAI reports an exhausted quota as a 429 too, so the error code
    is checked before the exception type.
    """
    if isinstance(error, CompletionError):
        return error.kind

    code = getattr(error, "code", None)
    if code == "insufficient_quota":
        return FailureKind.QUOTA_EXCEEDED
    if code == "rate_limit_exceeded" or isinstance(error, openai.RateLimitError):
        return FailureKind.RATE_LIMITED
    if isinstance(error, (openai.APIConnectionError, openai.InternalServerError)):
        return FailureKind.TRANSIENT
    return FailureKind.OTHER


@dataclass(frozen=True)
class RetryPolicy:
    """Bounded linear-backoff retry settings."""

    max_attempts: int = 3
    backoff_seconds: float = 1.0

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.backoff_seconds < 0:
            raise ValueError("backoff_seconds cannot be negative")

    def delay_for(self, attempt: int) -> float:
        """Seconds to wait after the given 1-based failed attempt."""
        return self.backoff_seconds * attempt


async def call_with_retry(
    call: Callable[[], Awaitable[str]],
    policy: RetryPolicy | None = None,
    sleep: Sleep = asyncio.sleep,
) -> str:
    """
    Run a completion call under the retry policy.

    Args:
        call: Zero-argument coroutine function performing one attempt.
        policy: Retry settings. Defaults to 3 attempts, 1s linear backoff.
        sleep: Coroutine used to wait between rate-limited attempts.

    Returns:
        The text returned by the first successful attempt.

    Raises:
        RateLimitedError: Still rate limited after the last attempt.
        QuotaExceededError: The quota is exhausted (never retried).
        ServiceUnavailableError: Any other failure on the last attempt.
    """
    policy = policy or RetryPolicy()

    for attempt in range(1, policy.max_attempts + 1):
        try:
            return await call()
        except Exception as e:
            kind = classify_error(e)
            final = attempt == policy.max_attempts

            if kind == FailureKind.QUOTA_EXCEEDED:
                logger.error(f"Completion quota exceeded: {e}")
                raise QuotaExceededError(
                    "API quota exceeded. Please check your usage.",
                    details=str(e),
                ) from e

            if kind == FailureKind.RATE_LIMITED:
                if final:
                    logger.error(f"Rate limited on all {policy.max_attempts} attempts")
                    raise RateLimitedError(
                        "Rate limit exceeded. Please try again in a moment.",
                        details=str(e),
                    ) from e
                delay = policy.delay_for(attempt)
                logger.warning(f"Rate limited on attempt {attempt}/{policy.max_attempts}, retrying in {delay:.1f}s")
                await sleep(delay)
                continue

            if final:
                logger.error(f"Completion failed on final attempt {attempt}: {type(e).__name__}: {e}")
                raise ServiceUnavailableError(
                    "AI service is unavailable. Please try again later.",
                    details=str(e),
                ) from e
            logger.warning(f"Completion attempt {attempt}/{policy.max_attempts} failed ({kind.value}): {e}")

    # max_attempts >= 1 so the loop always returns or raises
    raise ServiceUnavailableError("AI service is unavailable. Please try again later.")
