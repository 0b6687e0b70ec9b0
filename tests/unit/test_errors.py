"""Tests for user-facing error mapping."""

import pytest
from src.config.message import ERROR_MESSAGES, VALIDATION_MESSAGES, format_reply, get_validation_message
from src.services.errors import (
    ClassificationError,
    CommandInterpretationError,
    ContactResolutionError,
    TranscriptionError,
    to_user_message,
)


def test_user_message_never_echoes_exception_text():
    error = CommandInterpretationError("HTTP 500 from upstream: stack trace", cause=RuntimeError("x"))
    message = to_user_message(error)
    assert message == "Failed to process command. Please try again."
    assert "upstream" not in message


def test_unknown_exception_gets_generic_message():
    assert to_user_message(KeyError("field_name")) == ERROR_MESSAGES["en"]["unknown_error"]


def test_unknown_language_falls_back_to_english():
    assert to_user_message(TranscriptionError("x"), "de") == "Failed to transcribe audio."


def test_localized_message():
    assert to_user_message(ClassificationError("x"), "es") == ERROR_MESSAGES["es"]["classification_failed"]


def test_contact_resolution_error_keeps_token():
    error = ContactResolutionError("Bob")
    assert error.name_or_address == "Bob"
    assert "Bob" in str(error)


@pytest.mark.parametrize("language", sorted(VALIDATION_MESSAGES))
def test_every_language_has_every_message(language):
    assert set(VALIDATION_MESSAGES[language]) == set(VALIDATION_MESSAGES["en"])
    assert set(ERROR_MESSAGES[language]) == set(ERROR_MESSAGES["en"])
    assert "SUI" in get_validation_message("missing_asset", language)


def test_format_reply():
    assert format_reply("swap", "en", amount="10", from_asset="SUI", to_asset="USDC") == (
        "Swapping 10 SUI to USDC. Sign transaction to continue."
    )
