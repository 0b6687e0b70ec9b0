"""Command interpreter service."""

import logging
from collections.abc import Sequence

from src.config.prompts import build_command_system_prompt, build_command_user_input
from src.config.settings import Settings
from src.infrastructure.llm.base import CompletionRequest, CompletionService
from src.services.command.models import Intent
from src.services.command.validator import CommandValidator
from src.services.contacts.models import Contact
from src.services.errors import CommandInterpretationError, CompletionError, MalformedResponseError
from src.services.normalizer.assets import AssetCorrector
from src.services.normalizer.language import detect_language
from src.services.normalizer.numbers import convert_number_words
from src.utils.json_parser import JSONParser
from src.utils.text_processing import normalize_text, truncate

logger = logging.getLogger(__name__)


class CommandInterpreter:
    """Translates a command utterance into a validated intent.

    Free-text understanding is delegated to one completion call; the result
    is then checked by ``CommandValidator``, which has the final word.
    """

    def __init__(
        self,
        completion: CompletionService,
        settings: Settings,
        corrector: AssetCorrector | None = None,
    ):
        """Initialize interpreter with a completion backend and settings."""
        self.completion = completion
        self.settings = settings
        self.corrector = corrector or AssetCorrector(settings.asset_match_threshold)
        self.validator = CommandValidator(self.corrector, settings)

    async def interpret(self, utterance: str, contacts: Sequence[Contact] = ()) -> Intent:
        """
        Interpret a command.

        Args:
            utterance: Raw user text
            contacts: Contact snapshot, read-only

        Returns:
            A valid intent, or an ErrorIntent in the user's language

        Raises:
            CommandInterpretationError: If the completion call or parsing fails
        """
        language = detect_language(utterance)
        normalized = normalize_text(convert_number_words(utterance))
        hints = self.corrector.hints(normalized)
        if hints:
            logger.debug("Asset hints for '%s': %s", truncate(normalized), hints)

        request = CompletionRequest(
            agent_name="CommandInterpreter",
            instructions=build_command_system_prompt(),
            prompt=build_command_user_input(
                normalized,
                [contact.model_dump() for contact in contacts],
                hints,
            ),
            model=self.settings.command_agent_model,
            temperature=self.settings.command_temperature,
            max_tokens=self.settings.command_max_tokens,
        )
        try:
            raw_text = await self.completion.complete(request)
            raw = JSONParser.parse_object(raw_text)
        except (CompletionError, MalformedResponseError) as e:
            raise CommandInterpretationError(f"Command interpretation failed: {e}", cause=e) from e

        intent = self.validator.validate(raw, normalized, contacts, language)
        logger.info("Interpreted command as '%s' (language=%s)", intent.action, language)
        return intent
