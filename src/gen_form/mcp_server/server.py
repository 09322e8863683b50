"""
MCP Server implementation for Gen-Form.

Provides stdio and SSE transport support for the Model Context Protocol.
The SSE app also serves a plain HTTP endpoint for browser clients:

    POST /api/generate-schema   {"prompt": "..."} -> {"schema": {...}}
"""

import json
import logging
from typing import Any, Literal

from mcp.server import Server
from mcp.server.sse import SseServerTransport
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Mount, Route

from gen_form.errors import FormGenerationError
from gen_form.mcp_server.tools import get_mcp_tools, mcp_generate_form_schema
from gen_form.orchestrator import FormSchemaOrchestrator

logger = logging.getLogger("gen-form-mcp")


def create_mcp_server(orchestrator: FormSchemaOrchestrator | None = None) -> Server:
    """
    Create and configure the MCP server instance.

    Args:
        orchestrator: Orchestrator used by the tools. If None, a default
            one is created.

    Returns:
        Configured MCP Server with gen-form tools registered.
    """
    server = Server("gen-form-mcp")
    orchestrator = orchestrator or FormSchemaOrchestrator()

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        """List available tools."""
        return [
            Tool(
                name=t["name"],
                description=t["description"],
                inputSchema=t["inputSchema"],
            )
            for t in get_mcp_tools()
        ]

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
        """Handle tool calls."""
        logger.info(f"Tool call: {name}")

        if name == "generate_form_schema":
            result = await mcp_generate_form_schema(orchestrator, arguments.get("prompt", ""))
            return [TextContent(type="text", text=json.dumps(result, indent=2))]
        return [TextContent(type="text", text=json.dumps({"error": f"Unknown tool: {name}"}))]

    return server


async def run_stdio_server(server: Server) -> None:
    """
    Run MCP server with stdio transport.

    Used for desktop clients and local subprocess communication.
    """
    logger.info("Starting MCP server with stdio transport...")

    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


def create_http_routes(orchestrator: FormSchemaOrchestrator) -> list[Route]:
    """Plain HTTP routes: health check and schema generation."""

    async def health_check(request: Request) -> JSONResponse:
        return JSONResponse({
            "status": "healthy",
            "service": "gen-form",
            "model": orchestrator.model,
        })

    async def generate_schema(request: Request) -> JSONResponse:
        try:
            body = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            return JSONResponse({"error": "Request body must be JSON"}, status_code=400)

        prompt = body.get("prompt") if isinstance(body, dict) else None
        try:
            schema = await orchestrator.generate(prompt)
        except FormGenerationError as e:
            payload: dict[str, Any] = {"error": e.message}
            if e.details:
                payload["details"] = e.details
            return JSONResponse(payload, status_code=e.status_code)

        return JSONResponse({"schema": schema.to_dict()})

    return [
        Route("/health", health_check, methods=["GET"]),
        Route("/api/generate-schema", generate_schema, methods=["POST"]),
    ]


def create_sse_app(server: Server, orchestrator: FormSchemaOrchestrator) -> Starlette:
    """
    Create Starlette app for SSE transport plus the HTTP routes.

    Used for remote/Docker deployment.
    """
    # SSE transport - messages endpoint is relative to SSE mount point
    sse_transport = SseServerTransport("/messages/")

    async def handle_sse(scope, receive, send):
        """Handle SSE connections - raw ASGI handler."""
        async with sse_transport.connect_sse(scope, receive, send) as streams:
            await server.run(
                streams[0],
                streams[1],
                server.create_initialization_options(),
            )

    async def handle_messages(scope, receive, send):
        """Handle message POST requests - raw ASGI handler."""
        await sse_transport.handle_post_message(scope, receive, send)

    return Starlette(
        routes=[
            *create_http_routes(orchestrator),
            Mount("/sse/messages", app=handle_messages),
            Mount("/sse", app=handle_sse),
        ],
    )


def create_http_app(orchestrator: FormSchemaOrchestrator | None = None) -> Starlette:
    """Starlette app with only the HTTP routes, no MCP transport."""
    return Starlette(routes=create_http_routes(orchestrator or FormSchemaOrchestrator()))


async def run_sse_server(
    server: Server,
    orchestrator: FormSchemaOrchestrator,
    host: str = "0.0.0.0",
    port: int = 8080,
) -> None:
    """
    Run MCP server with SSE transport.

    Args:
        server: MCP Server instance
        orchestrator: Orchestrator backing the HTTP routes
        host: Host to bind to
        port: Port to listen on
    """
    import uvicorn

    logger.info(f"Starting MCP server with SSE transport on {host}:{port}...")

    app = create_sse_app(server, orchestrator)
    config = uvicorn.Config(app, host=host, port=port, log_level="info")
    server_instance = uvicorn.Server(config)
    await server_instance.serve()


async def run_mcp_server(
    transport: Literal["stdio", "sse"] = "stdio",
    host: str = "0.0.0.0",
    port: int = 8080,
) -> None:
    """
    Run MCP server with specified transport.

    Args:
        transport: Transport type - "stdio" or "sse"
        host: Host for SSE transport (default: 0.0.0.0)
        port: Port for SSE transport (default: 8080)
    """
    orchestrator = FormSchemaOrchestrator()
    server = create_mcp_server(orchestrator)

    if transport == "stdio":
        await run_stdio_server(server)
    elif transport == "sse":
        await run_sse_server(server, orchestrator, host, port)
    else:
        raise ValueError(f"Unknown transport: {transport}. Use 'stdio' or 'sse'.")
