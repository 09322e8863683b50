"""
MCP Tool definitions for Gen-Form.

Wraps form schema generation as an MCP tool.
"""

import logging
from typing import Any

from gen_form.errors import FormGenerationError
from gen_form.orchestrator import FormSchemaOrchestrator

logger = logging.getLogger("gen-form-mcp")


async def mcp_generate_form_schema(
    orchestrator: FormSchemaOrchestrator,
    prompt: str,
) -> dict[str, Any]:
    """
    MCP-compatible wrapper for FormSchemaOrchestrator.generate.

    Failures are returned as data rather than raised, so the calling
    agent can read the reason and decide whether to rephrase.

    Args:
        orchestrator: Orchestrator to run the generation with.
        prompt: Natural-language description of the form.

    Returns:
        ``{"schema": {...}}`` on success, or
        ``{"error": ..., "kind": ..., "details": ...}`` on failure.
    """
    try:
        schema = await orchestrator.generate(prompt)
    except FormGenerationError as e:
        logger.warning(f"Form generation failed ({e.kind}): {e.message}")
        return e.to_dict()

    logger.info(f"Generated form '{schema.title}' with {len(schema.fields)} fields")
    return {"schema": schema.to_dict()}


def get_mcp_tools() -> list[dict]:
    """
    Get MCP tool definitions for registration with MCP server.

    Returns list of tool schemas compatible with MCP protocol.
    """
    return [
        {
            "name": "generate_form_schema",
            "description": """
Generate a form schema from a natural-language description.

WHEN TO USE:
- When a user asks for a form (signup, survey, application, feedback...)
- When you need a structured set of inputs to collect from a user

HOW TO USE:
- Describe the purpose of the form and the information it should collect
- Mention choices explicitly when you know them ("size: S, M or L")

RETURNS:
A JSON object with either:
- schema: title, description, fields, submitText, resetText
- error / kind / details: why generation failed. For kind
  "generation_failed" the details list the schema defects; rephrasing
  the prompt usually helps.
""".strip(),
            "inputSchema": {
                "type": "object",
                "properties": {
                    "prompt": {
                        "type": "string",
                        "description": "Description of the form to generate",
                    },
                },
                "required": ["prompt"],
            },
        }
    ]
