"""Conversational responder for questions and greetings."""

import logging
from collections.abc import Sequence

from src.config.constants import IntentType
from src.config.prompts import CONVERSATION_SYSTEM_PROMPT, build_conversation_user_input
from src.config.settings import Settings
from src.infrastructure.llm.base import CompletionRequest, CompletionService
from src.services.conversation.models import ConversationResult, HistoryTurn
from src.services.errors import CompletionError, ResponseGenerationError

logger = logging.getLogger(__name__)


class ConversationalResponder:
    """Answers non-command utterances with plain text."""

    def __init__(self, completion: CompletionService, settings: Settings):
        self.completion = completion
        self.settings = settings

    async def respond(
        self,
        utterance: str,
        intent: IntentType,
        history: Sequence[HistoryTurn] = (),
    ) -> ConversationResult:
        """
        Generate a reply. Only the latest ``max_history_turns`` turns are sent.

        Raises:
            ResponseGenerationError: If the call fails or returns no text
        """
        limit = self.settings.max_history_turns
        recent = list(history)[-limit:] if limit > 0 else []
        request = CompletionRequest(
            agent_name="ConversationalResponder",
            instructions=CONVERSATION_SYSTEM_PROMPT,
            prompt=build_conversation_user_input(
                utterance,
                intent,
                [(turn.role, turn.content) for turn in recent],
            ),
            model=self.settings.conversation_agent_model,
            temperature=self.settings.conversation_temperature,
            max_tokens=self.settings.conversation_max_tokens,
        )
        try:
            text = (await self.completion.complete(request)).strip()
        except CompletionError as e:
            raise ResponseGenerationError(f"Response generation failed: {e}", cause=e) from e

        if not text:
            raise ResponseGenerationError("Response generation returned no text")

        return ConversationResult(intent=intent, message=text)
