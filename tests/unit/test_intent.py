"""Tests for intent service."""

import pytest
from src.config.constants import IntentType
from src.services.errors import ClassificationError, CompletionError
from src.services.intent.classifier import IntentClassifier


@pytest.mark.asyncio
async def test_classifier_question_with_action_words(settings, completion_factory):
    """A blockchain question is routed as a question."""
    completion = completion_factory(IntentRouter='{"intent": "question"}')
    classifier = IntentClassifier(completion, settings)
    assert await classifier.classify("What is Sui blockchain?") == IntentType.QUESTION


@pytest.mark.asyncio
async def test_classifier_command(settings, completion_factory):
    completion = completion_factory(IntentRouter='```json\n{"intent": "command"}\n```')
    classifier = IntentClassifier(completion, settings)
    assert await classifier.classify("Send 5 SUI to John") == IntentType.COMMAND


@pytest.mark.asyncio
async def test_classifier_sends_only_the_utterance(settings, completion_factory):
    completion = completion_factory(IntentRouter='{"intent": "greeting"}')
    classifier = IntentClassifier(completion, settings)
    await classifier.classify("hello")

    request = completion.calls("IntentRouter")[0]
    assert request.prompt == "hello"
    assert request.model == settings.router_agent_model
    assert request.temperature == settings.router_temperature
    assert '"command"' in request.instructions


@pytest.mark.asyncio
async def test_classifier_normalizes_case(settings, completion_factory):
    completion = completion_factory(IntentRouter='{"intent": " Greeting "}')
    classifier = IntentClassifier(completion, settings)
    assert await classifier.classify("hi") == IntentType.GREETING


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        '{"intent": "transfer"}',
        '{"kind": "command"}',
        "I think this is a command",
        CompletionError("boom"),
    ],
)
async def test_classifier_failures_raise(settings, completion_factory, response):
    completion = completion_factory(IntentRouter=response)
    classifier = IntentClassifier(completion, settings)
    with pytest.raises(ClassificationError):
        await classifier.classify("Send 5 SUI to John")
