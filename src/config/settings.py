"""Application settings using Pydantic BaseSettings."""

import logging
from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_VALID_BACKENDS = {"agent", "http"}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Milo Command Interpreter"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        upper = v.upper()
        if upper not in _VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {_VALID_LOG_LEVELS}, got '{v}'")
        return upper

    @field_validator("completion_backend")
    @classmethod
    def validate_completion_backend(cls, v: str) -> str:
        lower = v.lower()
        if lower not in _VALID_BACKENDS:
            raise ValueError(f"completion_backend must be one of {_VALID_BACKENDS}, got '{v}'")
        return lower

    @model_validator(mode="after")
    def validate_timeouts_positive(self) -> "Settings":
        for field_name in ("completion_timeout", "completion_retry_delay"):
            value = getattr(self, field_name)
            if value <= 0:
                raise ValueError(f"{field_name} must be positive, got {value}")
        if self.completion_max_retries < 1:
            raise ValueError(
                f"completion_max_retries must be at least 1, got {self.completion_max_retries}"
            )
        return self

    @model_validator(mode="after")
    def validate_grammar(self) -> "Settings":
        if not 0 < self.asset_match_threshold <= 1:
            raise ValueError(
                f"asset_match_threshold must be in (0, 1], got {self.asset_match_threshold}"
            )
        if self.min_address_length <= len(self.address_prefix):
            raise ValueError("min_address_length must be longer than address_prefix")
        return self

    @model_validator(mode="after")
    def validate_http_backend(self) -> "Settings":
        if self.completion_backend == "http" and not self.completion_endpoint_url:
            raise ValueError("completion_endpoint_url is required when completion_backend='http'")
        return self

    @model_validator(mode="after")
    def warn_wildcard_origins(self) -> "Settings":
        if self.allowed_origins == ["*"]:
            logging.getLogger(__name__).warning(
                "allowed_origins is set to ['*'] — consider restricting in production"
            )
        return self

    # Completion backend: "agent" (Agent Framework chat agents) or "http" (remote endpoint)
    completion_backend: str = "agent"

    # Azure AI Foundry
    azure_ai_project_endpoint: str = ""

    # Anthropic
    anthropic_api_key: str | None = None

    # Remote completion endpoint
    completion_endpoint_url: str = ""
    completion_api_key: str | None = None

    # Router Agent (intent classification)
    router_agent_model: str = "gpt-4o-mini"
    router_temperature: float = 0.0
    router_max_tokens: int = 100

    # Command Agent
    command_agent_model: str = "gpt-4o-mini"
    command_temperature: float = 0.0
    command_max_tokens: int = 500

    # Conversation Agent
    conversation_agent_model: str = "gpt-4o-mini"
    conversation_temperature: float = 0.7
    conversation_max_tokens: int = 1024
    max_history_turns: int = 6

    # Transcription Agent
    transcribe_agent_model: str = "gpt-4o-audio-preview"
    transcribe_temperature: float = 0.0
    transcribe_max_tokens: int = 1024

    # Refinement Agent (transcription correction, text only)
    refine_agent_model: str = "gpt-4o-mini"
    refine_temperature: float = 0.0
    refine_max_tokens: int = 500

    # Completion calls
    completion_timeout: float = 30.0
    completion_max_retries: int = 2
    completion_retry_delay: float = 2.0

    # Command grammar
    asset_match_threshold: float = 0.8
    address_prefix: str = "0x"
    min_address_length: int = 11

    # CORS
    allowed_origins: list[str] = ["*"]

    @property
    def has_llm_credentials(self) -> bool:
        """Whether the selected completion backend has what it needs to run."""
        if self.completion_backend == "http":
            return bool(self.completion_endpoint_url)
        return bool(self.anthropic_api_key or self.azure_ai_project_endpoint)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
