"""
Agent definitions for Gen-Form.

- Schema generator agent and the completion service built on it
- Prompt text shared by both
"""

from gen_form.agents.instructions import (
    SCHEMA_GENERATOR_INSTRUCTIONS,
    build_user_prompt,
)
from gen_form.agents.schema_generator import (
    AgentCompletionService,
    CompletionService,
    create_schema_generator_agent,
)

__all__ = [
    "SCHEMA_GENERATOR_INSTRUCTIONS",
    "build_user_prompt",
    "AgentCompletionService",
    "CompletionService",
    "create_schema_generator_agent",
]
