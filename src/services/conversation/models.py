"""Conversation models."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.config.constants import IntentType


class HistoryTurn(BaseModel):
    """One prior chat turn, read-only context for replies."""

    model_config = ConfigDict(frozen=True)

    role: Literal["user", "assistant"]
    content: str


class ConversationResult(BaseModel):
    """Free-text reply to a question or greeting."""

    model_config = ConfigDict(frozen=True)

    type: Literal["conversational"] = "conversational"
    intent: IntentType
    message: str = Field(..., description="Reply text")

    @field_validator("intent")
    @classmethod
    def validate_intent(cls, v: IntentType) -> IntentType:
        if v == IntentType.COMMAND:
            raise ValueError("conversational results are only for questions and greetings")
        return v
