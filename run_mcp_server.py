"""
Gen-Form MCP Server Entry Point.

Run the MCP server with either stdio or SSE transport. The SSE transport
also serves the HTTP routes (/health, /api/generate-schema).

Usage:
    # stdio mode (desktop MCP clients)
    python run_mcp_server.py --transport stdio

    # SSE mode (Docker/remote, includes HTTP routes)
    python run_mcp_server.py --transport sse --port 8080

    # Use environment variables
    MCP_TRANSPORT=sse MCP_PORT=8080 python run_mcp_server.py
"""

import argparse
import asyncio
import logging
import sys

from gen_form.config import get_config
from gen_form.mcp_server import run_mcp_server


def main():
    """Main entry point."""
    config = get_config()

    parser = argparse.ArgumentParser(
        description="Gen-Form MCP Server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment Variables:
  MCP_TRANSPORT           Transport type: stdio or sse (default: stdio)
  MCP_HOST                Host for SSE transport (default: 0.0.0.0)
  MCP_PORT                Port for SSE transport (default: 8080)
  OPENAI_API_KEY          OpenAI API key for form generation
  OPENAI_MODEL            Model used for generation
  GEN_FORM_LOG_LEVEL      Logging level (default: INFO)
        """,
    )

    parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default=config.mcp_transport,
        help=f"Transport type (default: {config.mcp_transport})",
    )
    parser.add_argument(
        "--host",
        default=config.mcp_host,
        help=f"Host for SSE transport (default: {config.mcp_host})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=config.mcp_port,
        help=f"Port for SSE transport (default: {config.mcp_port})",
    )

    args = parser.parse_args()

    # stdout carries the protocol in stdio mode, so logs go to stderr
    logging.basicConfig(level=config.log_level, stream=sys.stderr)
    logger = logging.getLogger("gen-form-mcp")
    logger.info(f"Transport: {args.transport}")
    if args.transport == "sse":
        logger.info(f"Listening on {args.host}:{args.port}")
    logger.info(f"Model: {config.default_model}")

    try:
        asyncio.run(
            run_mcp_server(
                transport=args.transport,
                host=args.host,
                port=args.port,
            )
        )
    except KeyboardInterrupt:
        logger.info("Server stopped.")
    except Exception as e:
        logger.error(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
