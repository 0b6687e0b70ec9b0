"""Structured command models.

The field names and aliases are the input contract of the transaction
builder; ``to_payload`` renders them the way the builder expects.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from src.config.constants import Asset


class TransferIntent(BaseModel):
    """Send an amount of a whitelisted asset to a resolved address."""

    model_config = ConfigDict(frozen=True)

    action: Literal["transfer"] = "transfer"
    asset: Asset
    amount: str = Field(..., description="Positive decimal, as a string")
    recipient: str = Field(..., description="Recipient address")
    reply: str


class BalanceQueryIntent(BaseModel):
    """Show the wallet balance."""

    model_config = ConfigDict(frozen=True)

    action: Literal["query_balance"] = "query_balance"


class SwapIntent(BaseModel):
    """Swap an amount of one whitelisted asset for another."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    action: Literal["swap"] = "swap"
    from_asset: Asset = Field(..., alias="fromAsset")
    to_asset: Asset = Field(..., alias="toAsset")
    amount: str = Field(..., description="Positive decimal, as a string")
    reply: str


class ErrorIntent(BaseModel):
    """Validation failure with a message in the user's language."""

    model_config = ConfigDict(frozen=True)

    action: Literal["error"] = "error"
    message: str


Intent = Annotated[
    Union[TransferIntent, BalanceQueryIntent, SwapIntent, ErrorIntent],
    Field(discriminator="action"),
]


def to_payload(intent: BaseModel) -> dict[str, Any]:
    """JSON-ready dict with builder field names (``fromAsset``, ``toAsset``)."""
    return intent.model_dump(mode="json", by_alias=True)
