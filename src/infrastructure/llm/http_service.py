"""Completion service backed by a remote HTTP endpoint.

Request body::

    {"agent": "...", "model": "...", "instructions": "...", "prompt": "...",
     "temperature": 0.0, "maxTokens": 500,
     "parts": [{"mimeType": "audio/webm", "data": "<base64>"}]}

The endpoint answers ``{"text": "..."}``.
"""

import base64
import logging
from typing import Any

import httpx

from src.config.settings import Settings
from src.infrastructure.llm.base import CompletionRequest, CompletionService
from src.services.errors import CompletionError
from src.utils.retry import run_with_retry

logger = logging.getLogger(__name__)


class HttpCompletionService(CompletionService):
    """Posts completion requests to ``settings.completion_endpoint_url``."""

    def __init__(self, settings: Settings, client: httpx.AsyncClient | None = None):
        self.settings = settings
        headers = {"Content-Type": "application/json"}
        if settings.completion_api_key:
            headers["Authorization"] = f"Bearer {settings.completion_api_key}"
        self._client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(settings.completion_timeout),
            headers=headers,
        )

    async def close(self) -> None:
        await self._client.aclose()

    @staticmethod
    def _payload(request: CompletionRequest) -> dict[str, Any]:
        return {
            "agent": request.agent_name,
            "model": request.model,
            "instructions": request.instructions,
            "prompt": request.prompt,
            "temperature": request.temperature,
            "maxTokens": request.max_tokens,
            "parts": [
                {
                    "mimeType": part.mime_type,
                    "data": base64.b64encode(part.data).decode("ascii"),
                }
                for part in request.parts
            ],
        }

    async def complete(self, request: CompletionRequest) -> str:
        """POST the request and return the ``text`` field of the reply."""
        payload = self._payload(request)

        async def _post() -> httpx.Response:
            response = await self._client.post(self.settings.completion_endpoint_url, json=payload)
            response.raise_for_status()
            return response

        try:
            response = await run_with_retry(
                _post,
                max_retries=self.settings.completion_max_retries,
                initial_delay=self.settings.completion_retry_delay,
            )
            body = response.json()
        except httpx.HTTPStatusError as e:
            raise CompletionError(
                f"{request.agent_name}: endpoint returned {e.response.status_code}", cause=e
            ) from e
        except (httpx.HTTPError, ValueError) as e:
            raise CompletionError(f"{request.agent_name}: request failed: {e}", cause=e) from e

        text = body.get("text") if isinstance(body, dict) else None
        if not isinstance(text, str):
            raise CompletionError(f"{request.agent_name}: response has no 'text' field")
        return text
