"""Completion service backed by Agent Framework chat agents.

Supports both Azure AI (OpenAI models) and Anthropic (Claude models).
Model routing is automatic based on the model name.
"""

import asyncio
import logging

from azure.identity.aio import DefaultAzureCredential

from src.config.settings import Settings
from src.infrastructure.llm.base import CompletionRequest, CompletionService
from src.infrastructure.llm.executor import build_input_message, run_single_agent
from src.infrastructure.llm.factory import (
    azure_agent_client,
    create_anthropic_agent,
    is_anthropic_model,
)
from src.services.errors import CompletionError, ConfigurationError

logger = logging.getLogger(__name__)


class AgentCompletionService(CompletionService):
    """Runs one short-lived agent per completion request.

    The Azure credential is created lazily and owned by this instance, so its
    lifetime matches the orchestrator that holds the service.
    """

    def __init__(self, settings: Settings):
        """Initialize the service with settings."""
        self.settings = settings
        self._credential: DefaultAzureCredential | None = None

    def _get_credential(self) -> DefaultAzureCredential:
        if self._credential is None:
            self._credential = DefaultAzureCredential()
        return self._credential

    async def close(self) -> None:
        """Close the Azure credential if one was created."""
        if self._credential is not None:
            await self._credential.close()
            self._credential = None

    async def complete(self, request: CompletionRequest) -> str:
        """Create an agent for the request's model and return its text."""
        message = build_input_message(request.prompt, request.parts)
        try:
            return await asyncio.wait_for(
                self._run(request, message), timeout=self.settings.completion_timeout
            )
        except (CompletionError, ConfigurationError):
            raise
        except asyncio.TimeoutError as e:
            raise CompletionError(
                f"{request.agent_name} timed out after {self.settings.completion_timeout}s", cause=e
            ) from e
        except Exception as e:
            raise CompletionError(f"{request.agent_name} failed: {e}", cause=e) from e

    async def _run(self, request: CompletionRequest, message: object) -> str:
        if is_anthropic_model(request.model):
            if not self.settings.anthropic_api_key:
                raise ConfigurationError("anthropic_api_key is not configured")
            agent = create_anthropic_agent(
                settings=self.settings,
                name=request.agent_name,
                instructions=request.instructions,
                model=request.model,
                max_tokens=request.max_tokens,
                temperature=request.temperature,
            )
            return await self._execute(agent, message)

        if not self.settings.azure_ai_project_endpoint:
            raise ConfigurationError("azure_ai_project_endpoint is not configured")
        async with azure_agent_client(
            self.settings, request.model, self._get_credential()
        ) as client:
            agent = client.create_agent(
                name=request.agent_name,
                instructions=request.instructions,
                max_tokens=request.max_tokens,
                temperature=request.temperature,
            )
            return await self._execute(agent, message)

    async def _execute(self, agent: object, message: object) -> str:
        return await run_single_agent(
            agent,
            message,
            max_retries=self.settings.completion_max_retries,
            initial_delay=self.settings.completion_retry_delay,
        )
