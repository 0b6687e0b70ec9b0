"""Pytest configuration and fixtures."""

import pytest

from src.config.settings import Settings
from src.infrastructure.llm.base import CompletionRequest, CompletionService
from src.services.contacts.models import Contact
from src.services.errors import CompletionError

JOHN_ADDRESS = "0xabc123def4567890"
MARIE_ADDRESS = "0xfed987cba6543210"


class FakeCompletionService(CompletionService):
    """Scripted completion backend keyed by agent name.

    Each agent has a queue of responses; the last one is repeated once the
    queue is down to a single entry. An Exception instance is raised
    instead of returned.
    """

    def __init__(self, **responses: object) -> None:
        self.responses: dict[str, list[object]] = {}
        self.requests: list[CompletionRequest] = []
        self.closed = False
        for agent_name, value in responses.items():
            self.script(agent_name, *(value if isinstance(value, list) else [value]))

    def script(self, agent_name: str, *responses: object) -> "FakeCompletionService":
        self.responses.setdefault(agent_name, []).extend(responses)
        return self

    def calls(self, agent_name: str) -> list[CompletionRequest]:
        return [r for r in self.requests if r.agent_name == agent_name]

    async def complete(self, request: CompletionRequest) -> str:
        self.requests.append(request)
        queue = self.responses.get(request.agent_name)
        if not queue:
            raise CompletionError(f"No scripted response for {request.agent_name}")
        response = queue.pop(0) if len(queue) > 1 else queue[0]
        if isinstance(response, Exception):
            raise response
        return str(response)

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def settings():
    """Provide settings fixture."""
    return Settings(_env_file=None, anthropic_api_key="test-key")


@pytest.fixture
def fake_completion():
    """Provide an empty scripted completion service."""
    return FakeCompletionService()


@pytest.fixture
def contacts():
    """Provide a small contact snapshot."""
    return [
        Contact(name="John", address=JOHN_ADDRESS),
        Contact(name="Marie", address=MARIE_ADDRESS),
    ]


@pytest.fixture
def completion_factory():
    """Provide the scripted completion class for tests that build their own."""
    return FakeCompletionService
