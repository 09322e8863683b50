"""
Configuration module for Gen-Form.

Handles environment variables and default settings.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv
from agents import ModelSettings

# Load environment variables
load_dotenv()


@dataclass
class GenFormConfig:
    """Configuration settings for Gen-Form."""

    # OpenAI settings
    openai_api_key: str = ""
    default_model: str = "gpt-4o-mini"

    # Generation settings, low temperature for consistent JSON
    default_temperature: float = 0.3
    default_max_tokens: int = 2000

    # Retry settings for the completion call
    max_attempts: int = 3
    retry_backoff_seconds: float = 1.0

    # MCP / HTTP server settings
    mcp_transport: str = "stdio"  # stdio or sse
    mcp_host: str = "0.0.0.0"
    mcp_port: int = 8080

    # Tracing settings
    enable_tracing: bool = True

    # Logging
    log_level: str = "INFO"

    def get_model_settings(self) -> ModelSettings:
        """Get ModelSettings instance with configured defaults."""
        return ModelSettings(
            temperature=self.default_temperature,
            max_tokens=self.default_max_tokens,
            presence_penalty=0.0,
            frequency_penalty=0.0,
        )

    @classmethod
    def from_env(cls) -> "GenFormConfig":
        """
        Create configuration from environment variables.

        Unset variables fall back to the class field defaults.
        """
        _defaults = cls()

        return cls(
            openai_api_key=os.getenv("OPENAI_API_KEY", _defaults.openai_api_key),
            default_model=os.getenv("OPENAI_MODEL", _defaults.default_model),
            default_temperature=float(os.getenv("GEN_FORM_TEMPERATURE", str(_defaults.default_temperature))),
            default_max_tokens=int(os.getenv("GEN_FORM_MAX_TOKENS", str(_defaults.default_max_tokens))),
            max_attempts=int(os.getenv("GEN_FORM_MAX_ATTEMPTS", str(_defaults.max_attempts))),
            retry_backoff_seconds=float(os.getenv("GEN_FORM_RETRY_BACKOFF", str(_defaults.retry_backoff_seconds))),
            mcp_transport=os.getenv("MCP_TRANSPORT", _defaults.mcp_transport),
            mcp_host=os.getenv("MCP_HOST", _defaults.mcp_host),
            mcp_port=int(os.getenv("MCP_PORT", str(_defaults.mcp_port))),
            enable_tracing=os.getenv("OPENAI_AGENTS_DISABLE_TRACING", "0" if _defaults.enable_tracing else "1") != "1",
            log_level=os.getenv("GEN_FORM_LOG_LEVEL", _defaults.log_level).upper(),
        )


config = GenFormConfig.from_env()


def get_config() -> GenFormConfig:
    """Get the current configuration."""
    return config


def update_config(**kwargs) -> GenFormConfig:
    """Update configuration settings."""
    global config
    for key, value in kwargs.items():
        if hasattr(config, key):
            setattr(config, key, value)
    return config
