"""
Agent executor for running agents in isolation.
"""
import logging
from typing import Any

from agent_framework import ChatMessage, DataContent, Role, TextContent

from src.infrastructure.llm.base import BinaryPart
from src.utils.retry import run_with_retry

logger = logging.getLogger(__name__)


def build_input_message(prompt: str, parts: tuple[BinaryPart, ...] = ()) -> str | ChatMessage:
    """Plain text when there are no binary parts, otherwise a multimodal user message."""
    if not parts:
        return prompt
    contents: list[Any] = [DataContent(data=part.data, media_type=part.mime_type) for part in parts]
    contents.append(TextContent(text=prompt))
    return ChatMessage(role=Role.USER, contents=contents)


async def run_single_agent(
    agent: Any,
    message: str | ChatMessage,
    *,
    max_retries: int = 2,
    initial_delay: float = 2.0,
) -> str:
    """
    Execute an agent in isolation and return its full text response.
    Includes automatic retry for rate limit errors.
    """
    async def _execute_agent() -> str:
        response = await agent.run(message)
        text = getattr(response, "text", None) or ""
        if not text:
            logger.warning("run_single_agent: no text received from agent %s", getattr(agent, "name", "?"))
        return text

    return await run_with_retry(
        _execute_agent,
        max_retries=max_retries,
        initial_delay=initial_delay,
        backoff_factor=2.0,
        retry_on_rate_limit=True,
    )
