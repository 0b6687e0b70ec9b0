"""Request/Response models for API endpoints."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from src.services.contacts.models import Contact
from src.services.conversation.models import HistoryTurn


class ChatRequest(BaseModel):
    """Request model for the chat endpoints. Field names are camelCase on the wire."""

    model_config = ConfigDict(populate_by_name=True)

    prompt: Optional[str] = Field(None, description="User's natural language message")
    contacts: list[Contact] = Field(default_factory=list, description="Contact snapshot")
    history: list[HistoryTurn] = Field(default_factory=list, description="Prior turns, oldest first")
    audio_base64: Optional[str] = Field(
        None, alias="audioBase64", description="Base64 audio, optionally a data URL"
    )
    mime_type: Optional[str] = Field(None, alias="mimeType", description="Audio media type")
    language: Optional[str] = Field(None, description="Spoken language hint for audio")


class TranscriptionResponse(BaseModel):
    """Response model for audio sent to the chat endpoint."""

    transcription: str = Field(..., description="Refined transcription")


class VoiceResponse(BaseModel):
    """Response model for the voice endpoint."""

    transcription: str = Field(..., description="Refined transcription")
    result: dict[str, Any] = Field(..., description="Intent or conversational reply")


class HealthResponse(BaseModel):
    """Response model for health endpoint."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
