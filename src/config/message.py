"""
User-facing messages for the command interpreter.

Every table is keyed by language code first. Lookups fall back to English
when a language or key is missing.
"""
from src.config.constants import DEFAULT_LANGUAGE, SUPPORTED_ASSET_NAMES

# =============================================================================
# Failure Messages (generic, never derived from exception text)
# =============================================================================
ERROR_MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "invalid_response": "I received an invalid response. Please try again.",
        "completion_failed": "The assistant is unavailable right now. Please try again.",
        "classification_failed": "Sorry, I didn't quite get that. Could you rephrase?",
        "command_failed": "Failed to process command. Please try again.",
        "response_failed": "Sorry, I couldn't come up with a reply. Please try again.",
        "transcription_failed": "Failed to transcribe audio.",
        "contact_unresolved": "I couldn't find that recipient.",
        "not_configured": "AI service not configured.",
        "unknown_error": "Something went wrong. Please try again.",
    },
    "fr": {
        "invalid_response": "J'ai reçu une réponse invalide. Veuillez réessayer.",
        "completion_failed": "L'assistant n'est pas disponible pour le moment. Veuillez réessayer.",
        "classification_failed": "Désolé, je n'ai pas bien compris. Pouvez-vous reformuler ?",
        "command_failed": "Impossible de traiter la commande. Veuillez réessayer.",
        "response_failed": "Désolé, je n'ai pas pu répondre. Veuillez réessayer.",
        "transcription_failed": "Impossible de transcrire l'audio.",
        "contact_unresolved": "Je n'ai pas trouvé ce destinataire.",
        "not_configured": "Le service d'IA n'est pas configuré.",
        "unknown_error": "Une erreur s'est produite. Veuillez réessayer.",
    },
    "es": {
        "invalid_response": "Recibí una respuesta no válida. Por favor, inténtalo de nuevo.",
        "completion_failed": "El asistente no está disponible ahora. Por favor, inténtalo de nuevo.",
        "classification_failed": "Lo siento, no te entendí bien. ¿Puedes reformularlo?",
        "command_failed": "No pude procesar el comando. Por favor, inténtalo de nuevo.",
        "response_failed": "Lo siento, no pude generar una respuesta. Por favor, inténtalo de nuevo.",
        "transcription_failed": "No pude transcribir el audio.",
        "contact_unresolved": "No encontré a ese destinatario.",
        "not_configured": "El servicio de IA no está configurado.",
        "unknown_error": "Ocurrió un error inesperado. Por favor, inténtalo de nuevo.",
    },
    "pt": {
        "invalid_response": "Recebi uma resposta inválida. Por favor, tente novamente.",
        "completion_failed": "O assistente não está disponível agora. Por favor, tente novamente.",
        "classification_failed": "Desculpe, não entendi bem. Pode reformular?",
        "command_failed": "Não consegui processar o comando. Por favor, tente novamente.",
        "response_failed": "Desculpe, não consegui responder. Por favor, tente novamente.",
        "transcription_failed": "Não consegui transcrever o áudio.",
        "contact_unresolved": "Não encontrei esse destinatário.",
        "not_configured": "O serviço de IA não está configurado.",
        "unknown_error": "Ocorreu um erro inesperado. Por favor, tente novamente.",
    },
    "yo": {
        "invalid_response": "Mo gba èsì tí kò tọ́. Jọ̀wọ́ gbìyànjú lẹ́ẹ̀kan sí i.",
        "completion_failed": "Olùrànlọ́wọ́ kò sí lárọ̀ọ́wọ́tó báyìí. Jọ̀wọ́ gbìyànjú lẹ́ẹ̀kan sí i.",
        "classification_failed": "Ẹ má bínú, kò yé mi. Ṣé ẹ lè sọ ọ́ lọ́nà míì?",
        "command_failed": "Mi ò lè ṣe àṣẹ yìí. Jọ̀wọ́ gbìyànjú lẹ́ẹ̀kan sí i.",
        "response_failed": "Ẹ má bínú, mi ò rí èsì kankan. Jọ̀wọ́ gbìyànjú lẹ́ẹ̀kan sí i.",
        "transcription_failed": "Mi ò lè kọ ohùn náà sílẹ̀.",
        "contact_unresolved": "Mi ò rí ẹni tí ẹ fẹ́ fi ránṣẹ́ sí.",
        "not_configured": "Iṣẹ́ AI kò tíì ṣètò.",
        "unknown_error": "Àṣìṣe kan ṣẹlẹ̀. Jọ̀wọ́ gbìyànjú lẹ́ẹ̀kan sí i.",
    },
}

# =============================================================================
# Validation Messages (ErrorIntent payloads)
# =============================================================================
VALIDATION_MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "unsupported_asset": 'I can\'t use "{asset}". Supported assets are {assets}.',
        "missing_asset": "I couldn't find a supported asset in your request. Supported assets are {assets}.",
        "invalid_amount": "The amount must be a positive number, for example 5 or 2.5.",
        "missing_recipient": "Please tell me who should receive the tokens.",
        "unknown_recipient": '"{recipient}" is not a saved contact and does not look like a valid address.',
        "same_asset": "You can't swap {asset} for itself. Choose two different assets.",
        "unknown_command": "I couldn't understand that command. Try something like: send 5 SUI to John.",
    },
    "fr": {
        "unsupported_asset": "Je ne peux pas utiliser « {asset} ». Les actifs pris en charge sont {assets}.",
        "missing_asset": "Je n'ai trouvé aucun actif pris en charge dans votre demande. Les actifs pris en charge sont {assets}.",
        "invalid_amount": "Le montant doit être un nombre positif, par exemple 5 ou 2.5.",
        "missing_recipient": "Indiquez-moi qui doit recevoir les jetons.",
        "unknown_recipient": "« {recipient} » n'est pas un contact enregistré et ne ressemble pas à une adresse valide.",
        "same_asset": "Vous ne pouvez pas échanger {asset} contre lui-même. Choisissez deux actifs différents.",
        "unknown_command": "Je n'ai pas compris cette commande. Essayez par exemple : envoie 5 SUI à Jean.",
    },
    "es": {
        "unsupported_asset": "No puedo usar \"{asset}\". Los activos admitidos son {assets}.",
        "missing_asset": "No encontré ningún activo admitido en tu solicitud. Los activos admitidos son {assets}.",
        "invalid_amount": "La cantidad debe ser un número positivo, por ejemplo 5 o 2.5.",
        "missing_recipient": "Dime quién debe recibir los tokens.",
        "unknown_recipient": "\"{recipient}\" no es un contacto guardado y no parece una dirección válida.",
        "same_asset": "No puedes cambiar {asset} por sí mismo. Elige dos activos diferentes.",
        "unknown_command": "No entendí ese comando. Prueba algo como: envía 5 SUI a Juan.",
    },
    "pt": {
        "unsupported_asset": "Não posso usar \"{asset}\". Os ativos suportados são {assets}.",
        "missing_asset": "Não encontrei nenhum ativo suportado no seu pedido. Os ativos suportados são {assets}.",
        "invalid_amount": "O valor deve ser um número positivo, por exemplo 5 ou 2.5.",
        "missing_recipient": "Diga-me quem deve receber os tokens.",
        "unknown_recipient": "\"{recipient}\" não é um contato salvo e não parece um endereço válido.",
        "same_asset": "Você não pode trocar {asset} por ele mesmo. Escolha dois ativos diferentes.",
        "unknown_command": "Não entendi esse comando. Tente algo como: envie 5 SUI para João.",
    },
    "yo": {
        "unsupported_asset": "Mi ò lè lo \"{asset}\". Àwọn owó tí a gbà ni {assets}.",
        "missing_asset": "Mi ò rí owó tí a gbà nínú ìbéèrè yín. Àwọn owó tí a gbà ni {assets}.",
        "invalid_amount": "Iye owó gbọ́dọ̀ jẹ́ nọ́ńbà tó ju òdo lọ, bí àpẹẹrẹ 5 tàbí 2.5.",
        "missing_recipient": "Ẹ sọ fún mi ẹni tí ẹ fẹ́ fi owó ránṣẹ́ sí.",
        "unknown_recipient": "\"{recipient}\" kò sí nínú àwọn olùbásọ̀rọ̀ yín, kò sì jọ àdírẹ́sì tó tọ́.",
        "same_asset": "Ẹ ò lè pààrọ̀ {asset} sí ara rẹ̀. Ẹ yan owó méjì tó yàtọ̀.",
        "unknown_command": "Àṣẹ yìí kò yé mi. Ẹ gbìyànjú báyìí: fi 5 SUI ránṣẹ́ sí John.",
    },
}

# =============================================================================
# Confirmation Replies (used when the model omits a reply)
# =============================================================================
REPLY_TEMPLATES: dict[str, dict[str, str]] = {
    "en": {
        "transfer": "Sending {amount} {asset} to {recipient}. Sign transaction to continue.",
        "swap": "Swapping {amount} {from_asset} to {to_asset}. Sign transaction to continue.",
    },
    "fr": {
        "transfer": "Envoi de {amount} {asset} à {recipient}. Signez la transaction pour continuer.",
        "swap": "Échange de {amount} {from_asset} contre {to_asset}. Signez la transaction pour continuer.",
    },
    "es": {
        "transfer": "Enviando {amount} {asset} a {recipient}. Firma la transacción para continuar.",
        "swap": "Cambiando {amount} {from_asset} por {to_asset}. Firma la transacción para continuar.",
    },
    "pt": {
        "transfer": "Enviando {amount} {asset} para {recipient}. Assine a transação para continuar.",
        "swap": "Trocando {amount} {from_asset} por {to_asset}. Assine a transação para continuar.",
    },
    "yo": {
        "transfer": "A ń fi {amount} {asset} ránṣẹ́ sí {recipient}. Ẹ buwọ́ lu ìdúnàádúrà láti tẹ̀síwájú.",
        "swap": "A ń pààrọ̀ {amount} {from_asset} sí {to_asset}. Ẹ buwọ́ lu ìdúnàádúrà láti tẹ̀síwájú.",
    },
}

CONVERSATION_FALLBACK = "I'm not sure how to help with that."

# =============================================================================
# Helper Functions
# =============================================================================


def _lookup(table: dict[str, dict[str, str]], key: str, language: str) -> str | None:
    localized = table.get(language) or table[DEFAULT_LANGUAGE]
    return localized.get(key) or table[DEFAULT_LANGUAGE].get(key)


def get_error_message(error_key: str, language: str = DEFAULT_LANGUAGE) -> str:
    """Get a generic failure message by key."""
    message = _lookup(ERROR_MESSAGES, error_key, language)
    if message is None:
        return _lookup(ERROR_MESSAGES, "unknown_error", language) or ""
    return message


def get_validation_message(key: str, language: str = DEFAULT_LANGUAGE, **kwargs: str) -> str:
    """Format a validation message in the user's language."""
    template = _lookup(VALIDATION_MESSAGES, key, language)
    if template is None:
        template = _lookup(VALIDATION_MESSAGES, "unknown_command", language) or ""
    kwargs.setdefault("assets", SUPPORTED_ASSET_NAMES)
    return template.format(**kwargs)


def format_reply(action: str, language: str = DEFAULT_LANGUAGE, **kwargs: str) -> str:
    """Format a confirmation reply for a transfer or swap."""
    template = _lookup(REPLY_TEMPLATES, action, language)
    return template.format(**kwargs) if template else ""
