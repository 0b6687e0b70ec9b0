"""Agent and completion-service factory helpers."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from agent_framework.anthropic import AnthropicClient
from agent_framework_azure_ai import AzureAIAgentClient
from azure.identity.aio import DefaultAzureCredential

from src.config.settings import Settings
from src.infrastructure.llm.base import CompletionService

logger = logging.getLogger(__name__)


def is_anthropic_model(model: str) -> bool:
    """Check if model is Anthropic (Claude)."""
    return "claude" in model.lower()


@asynccontextmanager
async def azure_agent_client(
    settings: Settings,
    model: str,
    credential: DefaultAzureCredential,
) -> AsyncIterator[AzureAIAgentClient]:
    """
    Azure AI (Foundry) agent client as context manager.

    The `model` argument must be the deployment name configured in your project.
    """
    async with AzureAIAgentClient(
        project_endpoint=settings.azure_ai_project_endpoint,
        model_deployment_name=model,
        async_credential=credential,
    ) as client:
        yield client


def create_anthropic_agent(
    settings: Settings,
    name: str,
    instructions: str,
    model: str,
    max_tokens: int = 1024,
    temperature: float = 0.0,
) -> Any:
    """
    Create an Anthropic (Claude) agent.

    Usage:
        agent = create_anthropic_agent(settings, "CommandInterpreter", prompt, model)
        response = await run_single_agent(agent, message)
    """
    logger.debug("Creating Anthropic agent '%s' with model: %s", name, model)

    client = AnthropicClient(
        model_id=model,
        api_key=settings.anthropic_api_key,
    )
    return client.create_agent(
        name=name,
        instructions=instructions,
        max_tokens=max_tokens,
        temperature=temperature,
    )


def create_completion_service(settings: Settings) -> CompletionService:
    """Build the completion backend selected by ``settings.completion_backend``."""
    # Imported here: agent_service depends on the agent helpers above.
    from src.infrastructure.llm.agent_service import AgentCompletionService
    from src.infrastructure.llm.http_service import HttpCompletionService

    if settings.completion_backend == "http":
        logger.info("Using remote completion endpoint %s", settings.completion_endpoint_url)
        return HttpCompletionService(settings)
    logger.info("Using Agent Framework completion backend")
    return AgentCompletionService(settings)
