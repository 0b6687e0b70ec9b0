"""Tests for transaction drafting."""

from decimal import Decimal
from unittest.mock import AsyncMock

import pytest
from src.services.command.models import BalanceQueryIntent, ErrorIntent, SwapIntent, TransferIntent
from src.services.errors import ConfigurationError, ContactResolutionError
from src.services.transactions.drafter import TransactionDrafter


@pytest.fixture
def builder():
    mock = AsyncMock()
    mock.build.return_value = "unsigned-tx"
    return mock


@pytest.mark.asyncio
async def test_transfer_with_literal_address(builder, settings):
    intent = TransferIntent(asset="USDC", amount="2.5", recipient="0x1234567890abcdef", reply="ok")
    drafter = TransactionDrafter(builder, settings=settings)

    assert await drafter.draft(intent) == "unsigned-tx"
    assert builder.build.await_args.args[0] == intent


@pytest.mark.asyncio
async def test_transfer_with_name_is_resolved(builder, contacts):
    intent = TransferIntent(asset="SUI", amount="5", recipient="marie", reply="ok")
    await TransactionDrafter(builder).draft(intent, contacts)
    assert builder.build.await_args.args[0].recipient == contacts[1].address


@pytest.mark.asyncio
async def test_transfer_unresolved_is_not_built(builder, contacts):
    intent = TransferIntent(asset="SUI", amount="5", recipient="Nobody", reply="ok")
    with pytest.raises(ContactResolutionError):
        await TransactionDrafter(builder).draft(intent, contacts)
    builder.build.assert_not_awaited()


@pytest.mark.asyncio
async def test_swap_is_built_unchanged(builder):
    intent = SwapIntent(fromAsset="SUI", toAsset="USDC", amount="10", reply="ok")
    await TransactionDrafter(builder).draft(intent)
    assert builder.build.await_args.args[0] is intent


@pytest.mark.asyncio
@pytest.mark.parametrize("intent", [BalanceQueryIntent(), ErrorIntent(message="no")])
async def test_other_intents_are_rejected(builder, intent):
    with pytest.raises(ValueError):
        await TransactionDrafter(builder).draft(intent)


@pytest.mark.asyncio
async def test_balance_delegates(builder):
    balances = AsyncMock()
    balances.query_balance.return_value = Decimal("12.5")
    drafter = TransactionDrafter(builder, balances)

    assert await drafter.balance("0x1234567890abcdef") == Decimal("12.5")
    balances.query_balance.assert_awaited_once_with("0x1234567890abcdef", "SUI")


@pytest.mark.asyncio
async def test_balance_without_provider(builder):
    with pytest.raises(ConfigurationError):
        await TransactionDrafter(builder).balance("0x1234567890abcdef", "USDC")
