"""Hand-off of validated intents to the transaction layer."""

import logging
from collections.abc import Sequence
from decimal import Decimal
from typing import Any, Protocol

from src.config.constants import Asset
from src.config.settings import Settings
from src.services.command.models import Intent, SwapIntent, TransferIntent
from src.services.contacts.directory import ContactDirectory
from src.services.contacts.models import Contact
from src.services.errors import ConfigurationError

logger = logging.getLogger(__name__)


class TransactionBuilder(Protocol):
    """Builds an unsigned transaction from a transfer or swap intent."""

    async def build(self, intent: TransferIntent | SwapIntent) -> Any: ...


class BalanceProvider(Protocol):
    """Reads an account balance for one asset."""

    async def query_balance(self, address: str, asset: str) -> Decimal: ...


class TransactionDrafter:
    """Final recipient check and transaction building.

    Recipient resolution here is authoritative: the interpreter's lookup is
    best-effort, this one raises when the recipient cannot be resolved.
    """

    def __init__(
        self,
        builder: TransactionBuilder,
        balances: BalanceProvider | None = None,
        settings: Settings | None = None,
    ):
        self.builder = builder
        self.balances = balances
        self.settings = settings

    def _directory(self, contacts: Sequence[Contact]) -> ContactDirectory:
        if self.settings is None:
            return ContactDirectory(contacts)
        return ContactDirectory.from_settings(contacts, self.settings)

    async def draft(self, intent: Intent, contacts: Sequence[Contact] = ()) -> Any:
        """
        Build a transaction for a transfer or swap.

        Raises:
            ContactResolutionError: If a transfer recipient is not resolvable
            ValueError: If the intent is not a transfer or swap
        """
        if isinstance(intent, TransferIntent):
            address = self._directory(contacts).resolve(intent.recipient)
            resolved = intent.model_copy(update={"recipient": address})
            logger.info("Drafting transfer of %s %s", resolved.amount, resolved.asset.value)
            return await self.builder.build(resolved)

        if isinstance(intent, SwapIntent):
            logger.info(
                "Drafting swap of %s %s to %s",
                intent.amount,
                intent.from_asset.value,
                intent.to_asset.value,
            )
            return await self.builder.build(intent)

        raise ValueError(f"Cannot draft a transaction for action '{intent.action}'")

    async def balance(self, owner_address: str, asset: str = Asset.SUI.value) -> Decimal:
        """Balance of ``asset`` held by ``owner_address``."""
        if self.balances is None:
            raise ConfigurationError("No balance provider configured")
        return await self.balances.query_balance(owner_address, asset)
