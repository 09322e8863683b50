"""
MCP Server module for Gen-Form.

Provides Model Context Protocol server implementation
with stdio and SSE transport support, plus the HTTP routes.
"""

from gen_form.mcp_server.server import (
    create_http_app,
    create_mcp_server,
    run_mcp_server,
)
from gen_form.mcp_server.tools import get_mcp_tools

__all__ = [
    "create_http_app",
    "create_mcp_server",
    "run_mcp_server",
    "get_mcp_tools",
]
