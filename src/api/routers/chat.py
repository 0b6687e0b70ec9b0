"""Chat, voice and health endpoints."""

import base64
import binascii
import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from src.api.models import ChatRequest, HealthResponse, TranscriptionResponse, VoiceResponse
from src.config.settings import Settings, get_settings
from src.orchestrator.pipeline import ChatOrchestrator
from src.services.command.models import to_payload
from src.services.errors import ConfigurationError, TranscriptionError

logger = logging.getLogger(__name__)

router = APIRouter()

NOT_CONFIGURED = "AI service not configured"
TRANSCRIPTION_FAILED = "Failed to transcribe audio"


def _require_credentials(settings: Settings) -> None:
    if not settings.has_llm_credentials:
        logger.error("Rejecting request: no completion backend credentials configured")
        raise HTTPException(status_code=500, detail=NOT_CONFIGURED)


def _decode_audio(request: ChatRequest) -> tuple[bytes, str]:
    """Return (audio bytes, mime type); data URLs carry their own mime type."""
    data = (request.audio_base64 or "").strip()
    mime_type = request.mime_type
    if data.startswith("data:") and "," in data:
        header, data = data.split(",", 1)
        mime_type = mime_type or header[len("data:"):].split(";", 1)[0] or None

    if not mime_type:
        raise HTTPException(status_code=400, detail="Missing mimeType for audio data")
    try:
        audio = base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError) as e:
        raise HTTPException(status_code=400, detail="Invalid base64 audio data") from e
    if not audio:
        raise HTTPException(status_code=400, detail="Missing prompt or audio data")
    return audio, mime_type


@router.post("/chat")
async def chat(
    request: ChatRequest,
    settings: Settings = Depends(get_settings),
) -> dict[str, Any]:
    """Interpret a text message, or transcribe an audio message."""
    if not (request.prompt and request.prompt.strip()) and not request.audio_base64:
        raise HTTPException(status_code=400, detail="Missing prompt or audio data")
    _require_credentials(settings)

    if request.audio_base64:
        audio, mime_type = _decode_audio(request)
        try:
            async with ChatOrchestrator(settings) as orchestrator:
                result = await orchestrator.transcribe(audio, mime_type, request.language)
        except TranscriptionError as e:
            raise HTTPException(status_code=500, detail=TRANSCRIPTION_FAILED) from e
        except ConfigurationError as e:
            logger.error("Completion backend misconfigured: %s", e)
            raise HTTPException(status_code=500, detail=NOT_CONFIGURED) from e
        except Exception as e:
            logger.error("Error processing audio request: %s", e, exc_info=True)
            raise HTTPException(status_code=500, detail="Internal server error") from e
        return TranscriptionResponse(transcription=result.transcription).model_dump()

    try:
        async with ChatOrchestrator(settings) as orchestrator:
            result = await orchestrator.process(request.prompt, request.contacts, request.history)
    except ConfigurationError as e:
        logger.error("Completion backend misconfigured: %s", e)
        raise HTTPException(status_code=500, detail=NOT_CONFIGURED) from e
    except Exception as e:
        logger.error("Error processing chat request: %s", e, exc_info=True)
        raise HTTPException(status_code=500, detail="Internal server error") from e
    return to_payload(result)


@router.post("/chat/voice", response_model=VoiceResponse)
async def chat_voice(
    request: ChatRequest,
    settings: Settings = Depends(get_settings),
) -> VoiceResponse:
    """Transcribe an audio message and run it through the chat flow."""
    if not request.audio_base64:
        raise HTTPException(status_code=400, detail="Missing prompt or audio data")
    _require_credentials(settings)
    audio, mime_type = _decode_audio(request)

    try:
        async with ChatOrchestrator(settings) as orchestrator:
            transcription, result = await orchestrator.process_audio(
                audio,
                mime_type,
                request.language,
                request.contacts,
                request.history,
            )
    except TranscriptionError as e:
        raise HTTPException(status_code=500, detail=TRANSCRIPTION_FAILED) from e
    except ConfigurationError as e:
        logger.error("Completion backend misconfigured: %s", e)
        raise HTTPException(status_code=500, detail=NOT_CONFIGURED) from e
    except Exception as e:
        logger.error("Error processing voice request: %s", e, exc_info=True)
        raise HTTPException(status_code=500, detail="Internal server error") from e

    return VoiceResponse(transcription=transcription.transcription, result=to_payload(result))


@router.get("/health", response_model=HealthResponse)
async def health(settings: Settings = Depends(get_settings)) -> HealthResponse:
    """Health check."""
    return HealthResponse(status="healthy", version=settings.app_version)
