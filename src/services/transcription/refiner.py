"""Two-stage audio transcription: raw speech-to-text, then terminology refinement."""

import logging

from src.config.constants import DEFAULT_LANGUAGE
from src.config.prompts import (
    REFINE_OUTPUT_LABELS,
    REFINE_SYSTEM_PROMPT,
    TRANSCRIBE_SYSTEM_PROMPT,
    build_refine_user_input,
    build_transcribe_user_input,
)
from src.config.settings import Settings
from src.infrastructure.llm.base import BinaryPart, CompletionRequest, CompletionService
from src.services.errors import CompletionError, TranscriptionError
from src.services.normalizer.numbers import convert_number_words
from src.services.transcription.models import TranscriptionResult
from src.utils.text_processing import normalize_text, strip_label, strip_quotes, truncate

logger = logging.getLogger(__name__)


class TranscriptionRefiner:
    """Transcribes audio and corrects crypto terminology.

    The two stages are atomic: if either fails the whole call fails, and
    the stage-1 text is never returned on its own.
    """

    def __init__(self, completion: CompletionService, settings: Settings):
        self.completion = completion
        self.settings = settings

    async def transcribe(
        self,
        audio: bytes,
        mime_type: str,
        language_hint: str | None = None,
    ) -> TranscriptionResult:
        """
        Transcribe and refine an audio clip.

        Args:
            audio: Raw audio bytes
            mime_type: Audio media type, e.g. "audio/webm"
            language_hint: Language the speaker is expected to use

        Returns:
            TranscriptionResult with the refined text

        Raises:
            TranscriptionError: If either stage fails or yields no text
        """
        if not audio:
            raise TranscriptionError("No audio data to transcribe")

        raw = await self._raw_transcription(audio, mime_type, language_hint or DEFAULT_LANGUAGE)
        refined = await self._refine(raw)
        logger.info("Transcription refined: '%s' -> '%s'", truncate(raw), truncate(refined))
        return TranscriptionResult(transcription=refined)

    async def _raw_transcription(self, audio: bytes, mime_type: str, language: str) -> str:
        request = CompletionRequest(
            agent_name="AudioTranscriber",
            instructions=TRANSCRIBE_SYSTEM_PROMPT,
            prompt=build_transcribe_user_input(language),
            model=self.settings.transcribe_agent_model,
            temperature=self.settings.transcribe_temperature,
            max_tokens=self.settings.transcribe_max_tokens,
            parts=(BinaryPart(data=audio, mime_type=mime_type),),
        )
        try:
            text = (await self.completion.complete(request)).strip()
        except CompletionError as e:
            raise TranscriptionError(f"Speech-to-text stage failed: {e}", cause=e) from e
        if not text:
            raise TranscriptionError("Speech-to-text stage returned no text")
        return text

    async def _refine(self, raw: str) -> str:
        request = CompletionRequest(
            agent_name="TranscriptionRefiner",
            instructions=REFINE_SYSTEM_PROMPT,
            prompt=build_refine_user_input(raw),
            model=self.settings.refine_agent_model,
            temperature=self.settings.refine_temperature,
            max_tokens=self.settings.refine_max_tokens,
        )
        try:
            text = await self.completion.complete(request)
        except CompletionError as e:
            raise TranscriptionError(f"Refinement stage failed: {e}", cause=e) from e

        refined = normalize_text(
            convert_number_words(strip_quotes(strip_label(text, REFINE_OUTPUT_LABELS)))
        )
        if not refined:
            raise TranscriptionError("Refinement stage returned no text")
        return refined
