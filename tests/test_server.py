"""Tests for the HTTP routes and MCP tool wrappers."""

import pytest
from starlette.testclient import TestClient

from gen_form.mcp_server import create_http_app, create_mcp_server, get_mcp_tools
from gen_form.mcp_server.tools import mcp_generate_form_schema
from gen_form.orchestrator import FormSchemaOrchestrator
from gen_form.retry import RetryPolicy

from conftest import FakeCompletionService, quota_exceeded, rate_limited


def make_orchestrator(responses, sleep):
    return FormSchemaOrchestrator(
        completion_service=FakeCompletionService(responses),
        model="gpt-4o-mini",
        retry_policy=RetryPolicy(),
        sleep=sleep,
        enable_tracing=False,
    )


def make_client(responses, sleep) -> TestClient:
    return TestClient(create_http_app(make_orchestrator(responses, sleep)))


class TestHttpRoutes:
    """Tests for the plain HTTP endpoint."""

    def test_health(self, sleep):
        response = make_client([], sleep).get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "gen-form", "model": "gpt-4o-mini"}

    def test_generate_schema(self, sleep, contact_response):
        response = make_client([contact_response], sleep).post(
            "/api/generate-schema", json={"prompt": "Contact form"}
        )
        assert response.status_code == 200
        schema = response.json()["schema"]
        assert schema["title"] == "Contact Us"
        assert schema["submitText"] == "Submit"
        assert [f["name"] for f in schema["fields"]] == ["fullName", "email", "topic", "message"]

    @pytest.mark.parametrize("body", [{}, {"prompt": ""}, {"prompt": 7}, ["Contact form"]])
    def test_invalid_prompt(self, sleep, body):
        response = make_client([], sleep).post("/api/generate-schema", json=body)
        assert response.status_code == 400
        assert response.json() == {"error": "Valid prompt is required"}

    def test_body_must_be_json(self, sleep):
        response = make_client([], sleep).post(
            "/api/generate-schema",
            content=b"prompt=Contact",
            headers={"content-type": "application/x-www-form-urlencoded"},
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Request body must be JSON"}

    def test_rate_limited(self, sleep):
        response = make_client([rate_limited()] * 3, sleep).post(
            "/api/generate-schema", json={"prompt": "Contact form"}
        )
        assert response.status_code == 429
        assert response.json()["error"] == "Rate limit exceeded. Please try again in a moment."

    def test_quota_exceeded(self, sleep):
        response = make_client([quota_exceeded()], sleep).post(
            "/api/generate-schema", json={"prompt": "Contact form"}
        )
        assert response.status_code == 402

    def test_generation_failed(self, sleep):
        response = make_client(["I cannot help with that."], sleep).post(
            "/api/generate-schema", json={"prompt": "Contact form"}
        )
        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "Invalid JSON response from AI. Please try a different prompt."
        assert "Failed to parse JSON" in body["details"]

    def test_get_not_allowed(self, sleep):
        assert make_client([], sleep).get("/api/generate-schema").status_code == 405


class TestMcpTools:
    """Tests for the MCP tool surface."""

    def test_tool_definitions(self):
        tools = get_mcp_tools()
        assert [t["name"] for t in tools] == ["generate_form_schema"]
        assert tools[0]["inputSchema"]["required"] == ["prompt"]

    def test_server_is_named(self, sleep):
        server = create_mcp_server(make_orchestrator([], sleep))
        assert server.name == "gen-form-mcp"

    @pytest.mark.asyncio
    async def test_success_returns_schema(self, sleep, contact_response):
        result = await mcp_generate_form_schema(make_orchestrator([contact_response], sleep), "Contact form")
        assert result["schema"]["title"] == "Contact Us"

    @pytest.mark.asyncio
    async def test_failure_is_returned_as_data(self, sleep):
        result = await mcp_generate_form_schema(make_orchestrator([quota_exceeded()], sleep), "Contact form")
        assert result == {
            "error": "API quota exceeded. Please check your usage.",
            "kind": "quota_exceeded",
            "details": "insufficient quota",
        }

    @pytest.mark.asyncio
    async def test_empty_prompt(self, sleep):
        result = await mcp_generate_form_schema(make_orchestrator([], sleep), "")
        assert result["kind"] == "invalid_input"
