"""Lightweight language detection for error-message mirroring."""

import re

from src.config.constants import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES

# Marker words per language. Scored by whole-word hits; ties go to the
# language that comes first in SUPPORTED_LANGUAGES.
LANGUAGE_MARKERS: dict[str, frozenset[str]] = {
    "en": frozenset(
        {
            "the", "to", "send", "please", "my", "me", "for", "swap", "transfer",
            "what", "how", "is", "balance", "check", "and", "with", "from", "i",
            "want", "give", "pay", "hello", "hi", "thanks", "some",
        }
    ),
    "fr": frozenset(
        {
            "le", "la", "les", "des", "du", "à", "envoie", "envoyer", "envoyez",
            "je", "veux", "mon", "ma", "mes", "pour", "échange", "échanger",
            "solde", "bonjour", "merci", "contre", "est", "quel", "quelle",
            "comment", "vers", "au", "s'il", "plaît", "voudrais",
        }
    ),
    "es": frozenset(
        {
            "el", "los", "las", "envía", "envia", "enviar", "quiero", "mi",
            "mis", "para", "cambiar", "cambia", "saldo", "hola", "gracias",
            "por", "favor", "cuál", "cual", "cómo", "como", "qué", "manda",
            "mandar", "intercambiar",
        }
    ),
    "pt": frozenset(
        {
            "o", "os", "as", "envie", "enviar", "manda", "quero", "meu",
            "minha", "para", "trocar", "troca", "saldo", "olá", "ola",
            "obrigado", "obrigada", "qual", "como", "você", "não", "por",
            "favor",
        }
    ),
    "yo": frozenset(
        {
            "mo", "fe", "fẹ́", "ranse", "ranṣẹ", "ránṣẹ́", "si", "sí", "owo", "owó",
            "jowo", "jọ̀wọ́", "e", "ẹ", "kaabo", "ẹ̀kúùrọ̀", "bawo", "báwo", "ni",
            "fun", "fún", "mi", "pààrọ̀", "paaro", "elo", "mélòó", "melo",
        }
    ),
}

# Letters that only occur in Yoruba among the supported languages.
_YORUBA_LETTERS_RE = re.compile("[ẹọṣẸỌṢ]")
_WORD_RE = re.compile(r"[^\W\d_]+(?:'[^\W\d_]+)?", re.UNICODE)


def detect_language(text: str) -> str:
    """Best-effort ISO 639-1 code of the text's language.

    Falls back to English when no language scores above zero.
    """
    words = [w.lower() for w in _WORD_RE.findall(text or "")]
    if not words:
        return DEFAULT_LANGUAGE

    scores: dict[str, int] = {}
    for language in SUPPORTED_LANGUAGES:
        markers = LANGUAGE_MARKERS[language]
        scores[language] = sum(1 for word in words if word in markers)

    if _YORUBA_LETTERS_RE.search(text):
        scores["yo"] += 2

    best = max(scores, key=lambda language: scores[language])
    if scores[best] <= 0:
        return DEFAULT_LANGUAGE
    return best
