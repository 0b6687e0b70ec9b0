"""Route a classified utterance to the command interpreter or the responder."""

import logging
from typing import Union

from src.config.constants import IntentType
from src.config.message import CONVERSATION_FALLBACK
from src.orchestrator.state import TurnState
from src.services.command.interpreter import CommandInterpreter
from src.services.command.models import Intent
from src.services.conversation.models import ConversationResult
from src.services.conversation.responder import ConversationalResponder

logger = logging.getLogger(__name__)


class HandlerRouter:
    """Dispatch a classified turn.

    Commands go to the interpreter; questions and greetings go to the
    conversational responder.
    """

    def __init__(
        self,
        interpreter: CommandInterpreter,
        responder: ConversationalResponder,
    ) -> None:
        self._interpreter = interpreter
        self._responder = responder

    async def route(self, state: TurnState) -> Union[Intent, ConversationResult]:
        """Return the structured intent or the conversational reply."""
        it = state.intent_type

        if it == IntentType.COMMAND:
            return await self._interpreter.interpret(state.utterance, state.contacts)

        if it in (IntentType.QUESTION, IntentType.GREETING):
            return await self._responder.respond(state.utterance, it, state.history)

        # Unclassified turns never reach the interpreter
        logger.warning("Unknown intent type '%s', using fallback reply", it)
        return ConversationResult(intent=IntentType.QUESTION, message=CONVERSATION_FALLBACK)
