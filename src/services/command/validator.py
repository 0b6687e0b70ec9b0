"""Deterministic validation of model-produced commands.

The model's output is only a proposal. Every asset, amount and recipient is
checked again here against the whitelist, the utterance and the contact
snapshot, so a hallucinated correction or address still ends in an
``ErrorIntent``.
"""

import logging
from collections.abc import Sequence
from typing import Any

from src.config.constants import Action, Asset
from src.config.message import format_reply, get_validation_message
from src.config.settings import Settings
from src.services.command.models import (
    BalanceQueryIntent,
    ErrorIntent,
    Intent,
    SwapIntent,
    TransferIntent,
)
from src.services.contacts.directory import ContactDirectory
from src.services.contacts.models import Contact
from src.services.normalizer.assets import AssetCorrector
from src.services.normalizer.numbers import format_amount, numbers_in, parse_amount
from src.utils.text_processing import contains_phrase

logger = logging.getLogger(__name__)


class _Rejected(Exception):
    """Internal signal carrying a validation message key."""

    def __init__(self, key: str, **params: str) -> None:
        super().__init__(key)
        self.key = key
        self.params = params


class CommandValidator:
    """Turns a parsed model response into a validated ``Intent``."""

    def __init__(self, corrector: AssetCorrector, settings: Settings):
        self.corrector = corrector
        self.settings = settings

    def validate(
        self,
        raw: dict[str, Any],
        utterance: str,
        contacts: Sequence[Contact],
        language: str,
    ) -> Intent:
        """
        Validate a raw command against the utterance it came from.

        Args:
            raw: Parsed JSON object from the model
            utterance: User text after number-word conversion
            contacts: Contact snapshot for this request
            language: Language code used for error messages and replies

        Returns:
            A valid intent, or an ErrorIntent naming the failed rule
        """
        action = str(raw.get("action") or "").strip().lower()
        try:
            if action == Action.QUERY_BALANCE.value:
                return BalanceQueryIntent()
            if action == Action.TRANSFER.value:
                return self._transfer(raw, utterance, contacts, language)
            if action == Action.SWAP.value:
                return self._swap(raw, utterance, language)
            if action == Action.ERROR.value:
                message = raw.get("message")
                if isinstance(message, str) and message.strip():
                    return ErrorIntent(message=message.strip())
            raise _Rejected("unknown_command")
        except _Rejected as rejected:
            logger.info("Command rejected (%s) for action '%s'", rejected.key, action)
            return ErrorIntent(
                message=get_validation_message(rejected.key, language, **rejected.params)
            )

    def _transfer(
        self,
        raw: dict[str, Any],
        utterance: str,
        contacts: Sequence[Contact],
        language: str,
    ) -> TransferIntent:
        mentioned = self.corrector.find_mentions(utterance)
        asset = self._asset(raw.get("asset"), mentioned)
        amount = self._amount(raw.get("amount"), utterance)
        recipient, display_name = self._recipient(raw.get("recipient"), utterance, contacts)
        reply = self._reply(raw) or format_reply(
            Action.TRANSFER.value,
            language,
            amount=amount,
            asset=asset.value,
            recipient=display_name,
        )
        return TransferIntent(asset=asset, amount=amount, recipient=recipient, reply=reply)

    def _swap(self, raw: dict[str, Any], utterance: str, language: str) -> SwapIntent:
        mentioned = self.corrector.find_mentions(utterance)
        from_asset = self._asset(raw.get("fromAsset", raw.get("from_asset")), mentioned)
        to_asset = self._asset(raw.get("toAsset", raw.get("to_asset")), mentioned)
        if from_asset == to_asset:
            raise _Rejected("same_asset", asset=from_asset.value)
        amount = self._amount(raw.get("amount"), utterance)
        reply = self._reply(raw) or format_reply(
            Action.SWAP.value,
            language,
            amount=amount,
            from_asset=from_asset.value,
            to_asset=to_asset.value,
        )
        return SwapIntent(from_asset=from_asset, to_asset=to_asset, amount=amount, reply=reply)

    def _asset(self, value: Any, mentioned: set[Asset]) -> Asset:
        """Canonical asset, required to be evidenced in the utterance."""
        text = str(value).strip() if value is not None else ""
        if not text:
            raise _Rejected("missing_asset")
        asset = self.corrector.canonicalize(text)
        if asset is None:
            raise _Rejected("unsupported_asset", asset=text)
        if asset not in mentioned:
            logger.warning("Model proposed %s, which the utterance does not mention", asset.value)
            raise _Rejected("missing_asset")
        return asset

    def _amount(self, value: Any, utterance: str) -> str:
        """Positive amount that also appears as a number in the utterance."""
        amount = parse_amount(value)
        if amount is None or amount not in numbers_in(utterance):
            raise _Rejected("invalid_amount")
        return format_amount(amount)

    def _recipient(
        self,
        value: Any,
        utterance: str,
        contacts: Sequence[Contact],
    ) -> tuple[str, str]:
        """Return (address, display name) for the recipient.

        The recipient must be evidenced in the utterance: a contact by its
        name or address, a literal address as a whole token.
        """
        token = str(value).strip() if value is not None else ""
        if not token:
            raise _Rejected("missing_recipient")

        directory = ContactDirectory.from_settings(contacts, self.settings)
        contact = directory.find(token) or directory.find_by_address(token)
        if contact is not None:
            if not self._names_contact(utterance, contact, contacts):
                logger.warning("Utterance does not name proposed contact %s", contact.name)
                raise _Rejected("unknown_recipient", recipient=token)
            return contact.address, contact.name
        if directory.looks_like_address(token) and contains_phrase(utterance, token):
            return token, token
        raise _Rejected("unknown_recipient", recipient=token)

    @staticmethod
    def _names_contact(utterance: str, contact: Contact, contacts: Sequence[Contact]) -> bool:
        """True when the utterance names the contact or any alias sharing its address."""
        address = contact.address.strip().lower()
        if contains_phrase(utterance, address):
            return True
        return any(
            contains_phrase(utterance, other.name)
            for other in contacts
            if other.address.strip().lower() == address
        )

    @staticmethod
    def _reply(raw: dict[str, Any]) -> str:
        reply = raw.get("reply")
        return reply.strip() if isinstance(reply, str) else ""
