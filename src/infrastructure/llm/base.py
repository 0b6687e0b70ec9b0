"""Completion-service abstraction shared by every interpreter stage."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass(frozen=True)
class BinaryPart:
    """Inline binary payload (audio, image) sent along with a prompt."""

    data: bytes
    mime_type: str


@dataclass(frozen=True)
class CompletionRequest:
    """Backend-agnostic completion request.

    ``instructions`` is the fixed system prompt of a stage and ``prompt`` the
    per-request text. Binary parts are attached to the prompt message.
    """

    agent_name: str
    instructions: str
    prompt: str
    model: str
    temperature: float = 0.0
    max_tokens: int = 1024
    parts: tuple[BinaryPart, ...] = field(default_factory=tuple)


class CompletionService(ABC):
    """Given a prompt (plus optional binary parts), return text."""

    @abstractmethod
    async def complete(self, request: CompletionRequest) -> str:
        """
        Execute a completion request.

        Returns:
            Raw response text, possibly wrapped in markdown fences

        Raises:
            CompletionError: On any backend failure, including timeouts
        """

    async def close(self) -> None:
        """Release backend resources."""

    async def __aenter__(self) -> "CompletionService":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
