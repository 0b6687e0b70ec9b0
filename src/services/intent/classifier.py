"""Intent classifier service."""

import logging

from pydantic import ValidationError

from src.config.prompts import build_router_system_prompt
from src.config.settings import Settings
from src.config.constants import IntentType
from src.infrastructure.llm.base import CompletionRequest, CompletionService
from src.services.errors import ClassificationError, CompletionError, MalformedResponseError
from src.services.intent.models import IntentResult
from src.utils.json_parser import JSONParser

logger = logging.getLogger(__name__)


class IntentClassifier:
    """Classifies an utterance as command, question or greeting."""

    def __init__(self, completion: CompletionService, settings: Settings):
        """Initialize intent classifier."""
        self.completion = completion
        self.settings = settings

    async def classify(self, utterance: str) -> IntentType:
        """
        Classify a single utterance. Conversation history is never included.

        Args:
            utterance: Raw user text

        Returns:
            The classified intent

        Raises:
            ClassificationError: If the call fails, the response is malformed,
                or the intent is not one of the known values
        """
        request = CompletionRequest(
            agent_name="IntentRouter",
            instructions=build_router_system_prompt(),
            prompt=utterance,
            model=self.settings.router_agent_model,
            temperature=self.settings.router_temperature,
            max_tokens=self.settings.router_max_tokens,
        )
        try:
            raw = await self.completion.complete(request)
            result = IntentResult.model_validate(JSONParser.parse_object(raw))
        except (CompletionError, MalformedResponseError) as e:
            raise ClassificationError(f"Intent classification failed: {e}", cause=e) from e
        except ValidationError as e:
            raise ClassificationError(f"Unrecognized intent in response: {e}", cause=e) from e

        logger.info("Classified utterance as %s", result.intent.value)
        return result.intent
