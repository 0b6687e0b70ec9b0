"""Typed errors raised by the interpreter services.

Each error carries diagnostic detail for logs and an ``error_key`` used to
look up the short message shown to users. The two are never the same value.
"""

from src.config.constants import DEFAULT_LANGUAGE
from src.config.message import get_error_message


class AssistantError(Exception):
    """Base class for interpreter failures."""

    error_key = "unknown_error"

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class CompletionError(AssistantError):
    """The completion service call failed, timed out, or returned nothing."""

    error_key = "completion_failed"


class MalformedResponseError(AssistantError):
    """Completion text did not decode as JSON after fence-stripping."""

    error_key = "invalid_response"

    def __init__(self, message: str, raw_text: str = "", *, cause: Exception | None = None) -> None:
        super().__init__(message, cause=cause)
        self.raw_text = raw_text


class ClassificationError(AssistantError):
    """Intent classification failed or produced an unknown intent."""

    error_key = "classification_failed"


class CommandInterpretationError(AssistantError):
    """Structured-command generation failed before validation could run."""

    error_key = "command_failed"


class ResponseGenerationError(AssistantError):
    """The conversational reply could not be generated."""

    error_key = "response_failed"


class TranscriptionError(AssistantError):
    """Either transcription stage failed; no partial transcript is returned."""

    error_key = "transcription_failed"


class ContactResolutionError(AssistantError):
    """A name is not a saved contact and does not look like an address."""

    error_key = "contact_unresolved"

    def __init__(self, name_or_address: str) -> None:
        super().__init__(
            f'"{name_or_address}" is not a saved contact and does not appear to be a valid address.'
        )
        self.name_or_address = name_or_address


class ConfigurationError(AssistantError):
    """Backend credentials or endpoints are missing."""

    error_key = "not_configured"


def to_user_message(error: BaseException, language: str = DEFAULT_LANGUAGE) -> str:
    """Map any exception to a short, non-technical message."""
    error_key = getattr(error, "error_key", "unknown_error")
    return get_error_message(error_key, language)
