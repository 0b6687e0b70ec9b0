"""Turn state model."""

from dataclasses import dataclass, field
from typing import Optional, Union

from src.config.constants import DEFAULT_LANGUAGE, IntentType
from src.services.command.models import Intent
from src.services.contacts.models import Contact
from src.services.conversation.models import ConversationResult, HistoryTurn


@dataclass
class TurnState:
    """State object passed through one chat turn."""

    # Input (read-only once the turn starts)
    utterance: str
    contacts: tuple[Contact, ...] = ()
    history: tuple[HistoryTurn, ...] = ()
    language: str = DEFAULT_LANGUAGE

    # Audio path
    transcription: Optional[str] = None

    # Step 1: Classification
    intent_type: Optional[IntentType] = None

    # Step 2: Interpretation or reply
    result: Optional[Union[Intent, ConversationResult]] = None

    errors: list[str] = field(default_factory=list)
