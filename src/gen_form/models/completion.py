"""
Completion request model.

The completion service is opaque to the pipeline beyond this: a system
prompt, a user prompt and a couple of bounded generation parameters.
"""

from pydantic import BaseModel, Field


class CompletionRequest(BaseModel):
    """One chat completion call: a system + user message pair."""

    system_prompt: str = Field(..., description="Fixed instructions describing the schema format")
    user_prompt: str = Field(..., description="User message wrapping the form description")
    temperature: float = Field(default=0.3, ge=0.0, le=2.0, description="Sampling temperature")
    max_tokens: int = Field(default=2000, gt=0, description="Completion token ceiling")
    presence_penalty: float = Field(default=0.0)
    frequency_penalty: float = Field(default=0.0)

    model_config = {"frozen": True}
