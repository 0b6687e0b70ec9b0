"""LLM infrastructure module.

Backend adapters live in ``agent_service`` and ``http_service`` and are built
through ``factory.create_completion_service``; they are not re-exported here
so importing the abstraction does not pull in the SDKs.
"""

from src.infrastructure.llm.base import BinaryPart, CompletionRequest, CompletionService

__all__ = [
    "BinaryPart",
    "CompletionRequest",
    "CompletionService",
]
