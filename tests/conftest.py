"""Shared fixtures and fakes for Gen-Form tests."""

import copy
import json

import httpx
import openai
import pytest

from gen_form.models.completion import CompletionRequest
from gen_form.retry import CompletionError, FailureKind


class FakeCompletionService:
    """Completion service that replays scripted responses or errors."""

    def __init__(self, responses):
        self.responses = list(responses)
        self.requests: list[CompletionRequest] = []

    async def complete(self, request: CompletionRequest) -> str:
        self.requests.append(request)
        item = self.responses.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item


class RecordingSleep:
    """Stand-in for asyncio.sleep that records requested delays."""

    def __init__(self):
        self.calls: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)

    @property
    def total(self) -> float:
        return sum(self.calls)


def rate_limited() -> CompletionError:
    return CompletionError(FailureKind.RATE_LIMITED, "rate limit exceeded")


def quota_exceeded() -> CompletionError:
    return CompletionError(FailureKind.QUOTA_EXCEEDED, "insufficient quota")


def openai_status_error(error_cls, status: int, code: str | None):
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    response = httpx.Response(status, request=request)
    body = {"code": code, "message": "error"} if code else None
    return error_cls("error", response=response, body=body)


def openai_connection_error() -> openai.APIConnectionError:
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    return openai.APIConnectionError(request=request)


CONTACT_SCHEMA = {
    "title": "Contact Us",
    "description": "Get in touch",
    "fields": [
        {"name": "fullName", "label": "Full Name", "type": "text", "required": True},
        {"name": "email", "label": "Email", "type": "email", "required": True},
        {
            "name": "topic",
            "label": "Topic",
            "type": "select",
            "options": ["Sales", "Support", "Other"],
        },
        {
            "name": "message",
            "label": "Message",
            "type": "long_text",
            "validation": {"minLength": 10, "maxLength": 500},
        },
    ],
}


RICH_SCHEMA = {
    "title": "Everything",
    "fields": [
        {"name": "notes", "label": "Notes", "type": "markdown"},
        {"name": "age", "label": "Age", "type": "int", "min": 0, "max": 120, "step": 1},
        {"name": "budget", "label": "Budget", "type": "currency", "min": 0},
        {"name": "score", "label": "Score", "type": "rating"},
        {"name": "start", "label": "Start", "type": "date", "min": "2024-01-01", "max": "2024-12-31"},
        {"name": "customer", "label": "Customer", "type": "link", "targetDocType": "Customer"},
        {"name": "skills", "label": "Skills", "type": "multiselect", "options": ["Python", "SQL"]},
        {"name": "avatar", "label": "Avatar", "type": "attach_image"},
        {"name": "cv", "label": "CV", "type": "file", "accept": ".pdf"},
        {"name": "signature", "label": "Signature", "type": "signature"},
        {"name": "office", "label": "Office", "type": "geolocation"},
        {"name": "newsletter", "label": "Newsletter", "type": "switch"},
    ],
}


@pytest.fixture
def contact_schema() -> dict:
    return copy.deepcopy(CONTACT_SCHEMA)


@pytest.fixture
def rich_schema() -> dict:
    return copy.deepcopy(RICH_SCHEMA)


@pytest.fixture
def contact_response() -> str:
    return json.dumps(CONTACT_SCHEMA)


@pytest.fixture
def sleep() -> RecordingSleep:
    return RecordingSleep()
