"""Intent service models."""

from pydantic import BaseModel, field_validator

from src.config.constants import IntentType


class IntentResult(BaseModel):
    """Result from intent classification."""

    intent: IntentType

    @field_validator("intent", mode="before")
    @classmethod
    def normalize_intent(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip().lower()
        return v
