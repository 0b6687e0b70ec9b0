"""Transcription models."""

from pydantic import BaseModel, ConfigDict


class TranscriptionResult(BaseModel):
    """Refined transcription of an audio clip."""

    model_config = ConfigDict(frozen=True)

    transcription: str
