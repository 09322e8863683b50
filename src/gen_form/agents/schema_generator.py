"""
Schema Generator Agent.

This agent turns a natural-language form description into raw model
text that should contain a form schema as JSON. It produces plain text
on purpose: the parser and validator downstream are built to cope with
whatever the model actually returns.
"""

from typing import Protocol

from agents import Agent, ModelSettings, OpenAIChatCompletionsModel, Runner
from openai import AsyncOpenAI

from gen_form.agents.instructions import SCHEMA_GENERATOR_INSTRUCTIONS
from gen_form.config import get_config
from gen_form.models.completion import CompletionRequest


class CompletionService(Protocol):
    """Anything that can answer a system + user message pair with text."""

    async def complete(self, request: CompletionRequest) -> str:
        ...


def create_schema_generator_agent(
    model: str | OpenAIChatCompletionsModel | None = None,
    model_settings: ModelSettings | None = None,
) -> Agent[None]:
    """
    Create the Schema Generator agent.

    Args:
        model: Model name or model instance. If None, uses config.default_model.
        model_settings: Generation settings. If None, uses the configured defaults.

    Returns:
        Configured Agent instance with plain text output.
    """
    config = get_config()

    return Agent[None](
        name="Schema Generator",
        instructions=SCHEMA_GENERATOR_INSTRUCTIONS,
        model=model or config.default_model,
        model_settings=model_settings or config.get_model_settings(),
    )


class AgentCompletionService:
    """
    Completion service backed by the Agents SDK over Chat Completions.

    The OpenAI client is built here from an explicit API key rather than
    at import time. Client-side retries are turned off because the
    orchestrator owns the retry policy.

    Usage:
        service = AgentCompletionService(api_key="sk-...")
        text = await service.complete(request)
    """

    def __init__(
        self,
        api_key: str,
        model: str | None = None,
        base_url: str | None = None,
    ):
        if not api_key:
            raise ValueError("An OpenAI API key is required")

        config = get_config()
        self.model_name = model or config.default_model
        self._client = AsyncOpenAI(api_key=api_key, base_url=base_url, max_retries=0)
        self._agent = create_schema_generator_agent(
            model=OpenAIChatCompletionsModel(model=self.model_name, openai_client=self._client),
        )

    async def complete(self, request: CompletionRequest) -> str:
        """Run one completion and return the model's text."""
        agent = self._agent.clone(
            instructions=request.system_prompt,
            model_settings=ModelSettings(
                temperature=request.temperature,
                max_tokens=request.max_tokens,
                presence_penalty=request.presence_penalty,
                frequency_penalty=request.frequency_penalty,
            ),
        )
        result = await Runner.run(agent, request.user_prompt, max_turns=1)
        output = result.final_output
        return output if isinstance(output, str) else ""
