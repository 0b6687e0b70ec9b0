"""Tests for the remote HTTP completion backend."""

import base64
import json

import httpx
import pytest
from src.config.settings import Settings
from src.infrastructure.llm.base import BinaryPart, CompletionRequest
from src.infrastructure.llm.http_service import HttpCompletionService
from src.services.errors import CompletionError

ENDPOINT = "https://llm.local/complete"


@pytest.fixture
def http_settings():
    return Settings(
        _env_file=None,
        completion_backend="http",
        completion_endpoint_url=ENDPOINT,
        completion_api_key="secret",
        completion_max_retries=1,
    )


def _service(settings, handler):
    client = httpx.AsyncClient(
        transport=httpx.MockTransport(handler),
        headers={"Authorization": "Bearer secret"},
    )
    return HttpCompletionService(settings, client=client)


def _request(**overrides):
    values = dict(
        agent_name="IntentRouter",
        instructions="classify",
        prompt="hello",
        model="gpt-4o-mini",
        temperature=0.0,
        max_tokens=100,
    )
    values.update(overrides)
    return CompletionRequest(**values)


@pytest.mark.asyncio
async def test_complete_posts_payload(http_settings):
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["auth"] = request.headers.get("Authorization")
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"text": '{"intent": "greeting"}'})

    async with _service(http_settings, handler) as service:
        text = await service.complete(
            _request(parts=(BinaryPart(data=b"abc", mime_type="audio/webm"),))
        )

    assert text == '{"intent": "greeting"}'
    assert seen["url"] == ENDPOINT
    assert seen["auth"] == "Bearer secret"
    assert seen["body"]["agent"] == "IntentRouter"
    assert seen["body"]["maxTokens"] == 100
    assert seen["body"]["parts"] == [
        {"mimeType": "audio/webm", "data": base64.b64encode(b"abc").decode("ascii")}
    ]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(500, json={"error": "boom"}),
        httpx.Response(200, json={"answer": "no text field"}),
        httpx.Response(200, content=b"not json"),
    ],
)
async def test_complete_failures_raise_completion_error(http_settings, response):
    async with _service(http_settings, lambda request: response) as service:
        with pytest.raises(CompletionError):
            await service.complete(_request())


def test_default_client_sets_bearer_header(http_settings):
    service = HttpCompletionService(http_settings)
    assert service._client.headers["Authorization"] == "Bearer secret"
