"""Contact models."""

from pydantic import BaseModel, ConfigDict, Field


class Contact(BaseModel):
    """A saved contact. Names are not guaranteed unique."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Display name")
    address: str = Field(..., description="Chain address, 0x-prefixed hex")
