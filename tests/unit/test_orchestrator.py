"""Tests for the chat orchestrator."""

import json
from unittest.mock import AsyncMock

import pytest
from src.config.constants import IntentType
from src.config.message import get_error_message
from src.orchestrator.pipeline import ChatOrchestrator
from src.services.command.models import ErrorIntent, SwapIntent, TransferIntent
from src.services.conversation.models import ConversationResult
from src.services.errors import CompletionError, ContactResolutionError, TranscriptionError


@pytest.mark.asyncio
async def test_command_is_interpreted(settings, completion_factory, contacts):
    completion = completion_factory(
        IntentRouter='{"intent": "command"}',
        CommandInterpreter=json.dumps(
            {"action": "transfer", "asset": "SUI", "amount": "5", "recipient": "John"}
        ),
    )
    orchestrator = ChatOrchestrator(settings, completion)
    result = await orchestrator.process("Send 5 SUI to John", contacts)

    assert isinstance(result, TransferIntent)
    assert result.recipient == contacts[0].address
    assert [r.agent_name for r in completion.requests] == ["IntentRouter", "CommandInterpreter"]


@pytest.mark.asyncio
async def test_question_goes_to_responder(settings, completion_factory):
    completion = completion_factory(
        IntentRouter='{"intent": "question"}',
        ConversationalResponder="Sui is a layer-1 blockchain.",
    )
    result = await ChatOrchestrator(settings, completion).process("What is Sui blockchain?")

    assert result == ConversationResult(
        intent=IntentType.QUESTION, message="Sui is a layer-1 blockchain."
    )
    assert completion.calls("CommandInterpreter") == []


@pytest.mark.asyncio
async def test_classification_failure_never_interprets(settings, completion_factory):
    completion = completion_factory(
        IntentRouter="not json",
        CommandInterpreter='{"action": "query_balance"}',
    )
    result = await ChatOrchestrator(settings, completion).process("send 5 SUI to John")

    assert isinstance(result, ConversationResult)
    assert result.message == get_error_message("classification_failed", "en")
    assert completion.calls("CommandInterpreter") == []


@pytest.mark.asyncio
async def test_classification_failure_message_is_localized(settings, completion_factory):
    completion = completion_factory(IntentRouter=CompletionError("down"))
    result = await ChatOrchestrator(settings, completion).process("Je veux envoyer 5 SUI à Marie")
    assert result.message == get_error_message("classification_failed", "fr")


@pytest.mark.asyncio
async def test_interpretation_failure_becomes_generic_error(settings, completion_factory):
    completion = completion_factory(
        IntentRouter='{"intent": "command"}',
        CommandInterpreter=CompletionError("upstream 503: secret vendor detail"),
    )
    result = await ChatOrchestrator(settings, completion).process("send 5 SUI to John")

    assert isinstance(result, ErrorIntent)
    assert result.message == "Failed to process command. Please try again."
    assert "vendor" not in result.message


@pytest.mark.asyncio
async def test_responder_failure_becomes_generic_reply(settings, completion_factory):
    completion = completion_factory(
        IntentRouter='{"intent": "greeting"}',
        ConversationalResponder=CompletionError("down"),
    )
    result = await ChatOrchestrator(settings, completion).process("hello")

    assert isinstance(result, ConversationResult)
    assert result.intent == IntentType.GREETING
    assert result.message == get_error_message("response_failed", "en")


@pytest.mark.asyncio
async def test_audio_reenters_text_flow(settings, completion_factory):
    completion = completion_factory(
        AudioTranscriber="swap ten suite for you ess dee see",
        TranscriptionRefiner="swap 10 SUI for USDC",
        IntentRouter='{"intent": "command"}',
        CommandInterpreter=json.dumps(
            {"action": "swap", "fromAsset": "SUI", "toAsset": "USDC", "amount": "10"}
        ),
    )
    transcription, result = await ChatOrchestrator(settings, completion).process_audio(
        b"audio", "audio/webm", "English"
    )

    assert transcription.transcription == "swap 10 SUI for USDC"
    assert isinstance(result, SwapIntent)
    assert completion.calls("IntentRouter")[0].prompt == "swap 10 SUI for USDC"


@pytest.mark.asyncio
async def test_transcription_failure_propagates(settings, completion_factory):
    completion = completion_factory(
        AudioTranscriber="send five sweet",
        TranscriptionRefiner=CompletionError("down"),
    )
    with pytest.raises(TranscriptionError):
        await ChatOrchestrator(settings, completion).transcribe(b"audio", "audio/webm")
    assert completion.calls("IntentRouter") == []


@pytest.mark.asyncio
async def test_draft_transaction_resolves_recipient(settings, completion_factory, contacts):
    builder = AsyncMock()
    builder.build.return_value = {"digest": "tx-1"}
    intent = TransferIntent(asset="SUI", amount="5", recipient="John", reply="ok")

    orchestrator = ChatOrchestrator(settings, completion_factory())
    tx = await orchestrator.draft_transaction(intent, contacts, builder)

    assert tx == {"digest": "tx-1"}
    built = builder.build.await_args.args[0]
    assert built.recipient == contacts[0].address
    assert intent.recipient == "John"


@pytest.mark.asyncio
async def test_draft_transaction_unresolvable(settings, completion_factory, contacts):
    intent = TransferIntent(asset="SUI", amount="5", recipient="Nobody", reply="ok")
    with pytest.raises(ContactResolutionError):
        await ChatOrchestrator(settings, completion_factory()).draft_transaction(
            intent, contacts, AsyncMock()
        )


@pytest.mark.asyncio
async def test_injected_completion_is_not_closed(settings, completion_factory):
    completion = completion_factory()
    async with ChatOrchestrator(settings, completion):
        pass
    assert completion.closed is False
