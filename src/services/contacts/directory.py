"""Read-only contact lookup over a per-request snapshot."""

import re
from collections.abc import Iterable

from src.config.settings import Settings
from src.services.contacts.models import Contact
from src.services.errors import ContactResolutionError

_HEX_RE = re.compile(r"^[0-9a-fA-F]+$")


class ContactDirectory:
    """Resolves contact names to addresses.

    Name matching is case-insensitive and exact; the first contact with a
    matching name wins when names are duplicated.
    """

    def __init__(
        self,
        contacts: Iterable[Contact],
        address_prefix: str = "0x",
        min_address_length: int = 11,
    ):
        self.contacts = tuple(contacts)
        self.address_prefix = address_prefix
        self.min_address_length = min_address_length

    @classmethod
    def from_settings(cls, contacts: Iterable[Contact], settings: Settings) -> "ContactDirectory":
        return cls(
            contacts,
            address_prefix=settings.address_prefix,
            min_address_length=settings.min_address_length,
        )

    def find(self, name: str) -> Contact | None:
        """Contact whose name matches, ignoring case and surrounding spaces."""
        key = name.strip().casefold()
        if not key:
            return None
        for contact in self.contacts:
            if contact.name.strip().casefold() == key:
                return contact
        return None

    def find_by_address(self, address: str) -> Contact | None:
        """First contact saved under this address, ignoring case."""
        key = address.strip().lower()
        if not key:
            return None
        for contact in self.contacts:
            if contact.address.strip().lower() == key:
                return contact
        return None

    def looks_like_address(self, token: str) -> bool:
        """Syntactic address check: prefix, hex body, minimum length."""
        token = token.strip()
        if len(token) < self.min_address_length:
            return False
        if not token.lower().startswith(self.address_prefix.lower()):
            return False
        return bool(_HEX_RE.match(token[len(self.address_prefix):]))

    def resolve(self, name_or_address: str) -> str:
        """
        Return the address for a contact name or a literal address.

        Raises:
            ContactResolutionError: If the value is neither
        """
        contact = self.find(name_or_address)
        if contact is not None:
            return contact.address
        if self.looks_like_address(name_or_address):
            return name_or_address.strip()
        raise ContactResolutionError(name_or_address)
