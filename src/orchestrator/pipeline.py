"""Main chat orchestrator."""

import logging
from collections.abc import Sequence
from typing import Any, Union

from src.config.constants import IntentType, PipelineStep
from src.config.settings import Settings
from src.infrastructure.llm.base import CompletionService
from src.infrastructure.logging.logger import StructuredLogger
from src.orchestrator.handler_router import HandlerRouter
from src.orchestrator.state import TurnState
from src.orchestrator.step_timer import timed_step
from src.services.command.interpreter import CommandInterpreter
from src.services.command.models import ErrorIntent, Intent
from src.services.contacts.models import Contact
from src.services.conversation.models import ConversationResult, HistoryTurn
from src.services.conversation.responder import ConversationalResponder
from src.services.errors import (
    ClassificationError,
    CommandInterpretationError,
    ResponseGenerationError,
    TranscriptionError,
    to_user_message,
)
from src.services.intent.classifier import IntentClassifier
from src.services.normalizer.language import detect_language
from src.services.transactions.drafter import BalanceProvider, TransactionBuilder, TransactionDrafter
from src.services.transcription.models import TranscriptionResult
from src.services.transcription.refiner import TranscriptionRefiner
from src.utils.text_processing import truncate

logger = logging.getLogger(__name__)

TurnResult = Union[Intent, ConversationResult]


class ChatOrchestrator:
    """Classify-then-dispatch for text turns, with transcription in front for audio.

    The completion service is owned by the orchestrator unless one is
    passed in, and is closed with it.
    """

    def __init__(self, settings: Settings, completion: CompletionService | None = None):
        """Initialize orchestrator with settings."""
        self.settings = settings
        self._owns_completion = completion is None
        if completion is None:
            # Lazy: keeps the agent SDKs out of imports that only need the types
            from src.infrastructure.llm.factory import create_completion_service

            completion = create_completion_service(settings)
        self.completion = completion
        self.classifier = IntentClassifier(completion, settings)
        self.interpreter = CommandInterpreter(completion, settings)
        self.responder = ConversationalResponder(completion, settings)
        self.transcriber = TranscriptionRefiner(completion, settings)
        self.router = HandlerRouter(self.interpreter, self.responder)
        self.structured_logger = StructuredLogger(__name__)

    async def close(self) -> None:
        """Close the completion service if this orchestrator created it."""
        if self._owns_completion:
            await self.completion.close()
            logger.info("Completion service closed")

    async def __aenter__(self) -> "ChatOrchestrator":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def process(
        self,
        text: str,
        contacts: Sequence[Contact] = (),
        history: Sequence[HistoryTurn] = (),
    ) -> TurnResult:
        """
        Process one text turn.

        Stage failures are converted to a short message in the user's
        language: an ErrorIntent for commands, a ConversationResult otherwise.
        A failed classification never falls through to the interpreter.
        """
        state = TurnState(
            utterance=text,
            contacts=tuple(contacts),
            history=tuple(history),
            language=detect_language(text),
        )

        try:
            async with timed_step(PipelineStep.CLASSIFY, self.structured_logger, "IntentRouter") as step:
                state.intent_type = await self.classifier.classify(text)
                step.set_result(intent=state.intent_type.value, language=state.language)
        except ClassificationError as e:
            self.structured_logger.log_error(
                PipelineStep.CLASSIFY.value, e, {"utterance": truncate(text)}
            )
            return ConversationResult(
                intent=IntentType.QUESTION, message=to_user_message(e, state.language)
            )

        step_name = (
            PipelineStep.INTERPRET
            if state.intent_type == IntentType.COMMAND
            else PipelineStep.RESPOND
        )
        try:
            async with timed_step(step_name, self.structured_logger, "HandlerRouter") as step:
                state.result = await self.router.route(state)
                step.set_result(result=_summarize(state.result))
        except CommandInterpretationError as e:
            self.structured_logger.log_error(step_name.value, e, {"utterance": truncate(text)})
            return ErrorIntent(message=to_user_message(e, state.language))
        except ResponseGenerationError as e:
            self.structured_logger.log_error(step_name.value, e, {"utterance": truncate(text)})
            return ConversationResult(
                intent=state.intent_type, message=to_user_message(e, state.language)
            )

        return state.result

    async def transcribe(
        self,
        audio: bytes,
        mime_type: str,
        language: str | None = None,
    ) -> TranscriptionResult:
        """
        Run the two-stage transcription.

        Raises:
            TranscriptionError: Logged here and re-raised for the caller
        """
        try:
            async with timed_step(
                PipelineStep.TRANSCRIBE, self.structured_logger, "TranscriptionRefiner"
            ) as step:
                result = await self.transcriber.transcribe(audio, mime_type, language)
                step.set_result(transcription=truncate(result.transcription))
        except TranscriptionError as e:
            self.structured_logger.log_error(
                PipelineStep.TRANSCRIBE.value, e, {"mime_type": mime_type, "bytes": len(audio)}
            )
            raise
        return result

    async def process_audio(
        self,
        audio: bytes,
        mime_type: str,
        language: str | None = None,
        contacts: Sequence[Contact] = (),
        history: Sequence[HistoryTurn] = (),
    ) -> tuple[TranscriptionResult, TurnResult]:
        """Transcribe, then send the text through the same flow as typed input."""
        transcription = await self.transcribe(audio, mime_type, language)
        result = await self.process(transcription.transcription, contacts, history)
        return transcription, result

    async def draft_transaction(
        self,
        intent: Intent,
        contacts: Sequence[Contact],
        builder: TransactionBuilder,
        balances: BalanceProvider | None = None,
    ) -> Any:
        """Resolve the recipient authoritatively and build the transaction."""
        drafter = TransactionDrafter(builder, balances, self.settings)
        async with timed_step(PipelineStep.DRAFT, self.structured_logger, "TransactionDrafter") as step:
            transaction = await drafter.draft(intent, contacts)
            step.set_result(action=intent.action)
        return transaction


def _summarize(result: Any) -> dict[str, Any]:
    """Small, log-safe summary of a turn result."""
    if isinstance(result, ConversationResult):
        return {"type": result.type, "intent": result.intent.value}
    return {"action": getattr(result, "action", None)}
