"""Spelled-out number substitution.

Whole-word, case-insensitive replacement of number words with digits. Words
that double as articles or common words in another supported language are
left out of the lexicon ("un", "une", "uno", "una", "um", "uma", "once",
"neuf", and Spanish "dos", which is also the Portuguese "of the").
"""

import re
from decimal import Decimal, InvalidOperation

ENGLISH_NUMBERS: dict[str, str] = {
    "zero": "0",
    "one": "1",
    "two": "2",
    "three": "3",
    "four": "4",
    "five": "5",
    "six": "6",
    "seven": "7",
    "eight": "8",
    "nine": "9",
    "ten": "10",
    "eleven": "11",
    "twelve": "12",
    "thirteen": "13",
    "fourteen": "14",
    "fifteen": "15",
    "sixteen": "16",
    "seventeen": "17",
    "eighteen": "18",
    "nineteen": "19",
    "twenty": "20",
}

YORUBA_NUMBERS: dict[str, str] = {
    "ise": "5",
    "iri": "10",
    "ogun": "20",
}

FRENCH_NUMBERS: dict[str, str] = {
    "deux": "2",
    "trois": "3",
    "quatre": "4",
    "cinq": "5",
    "sept": "7",
    "huit": "8",
    "dix": "10",
    "onze": "11",
    "douze": "12",
    "treize": "13",
    "quatorze": "14",
    "quinze": "15",
    "seize": "16",
    "dix-sept": "17",
    "dix-huit": "18",
    "dix-neuf": "19",
    "vingt": "20",
}

SPANISH_NUMBERS: dict[str, str] = {
    "tres": "3",
    "cuatro": "4",
    "cinco": "5",
    "seis": "6",
    "siete": "7",
    "ocho": "8",
    "nueve": "9",
    "diez": "10",
    "doce": "12",
    "trece": "13",
    "catorce": "14",
    "quince": "15",
    "dieciséis": "16",
    "dieciseis": "16",
    "diecisiete": "17",
    "dieciocho": "18",
    "diecinueve": "19",
    "veinte": "20",
}

PORTUGUESE_NUMBERS: dict[str, str] = {
    "dois": "2",
    "duas": "2",
    "três": "3",
    "quatro": "4",
    "sete": "7",
    "oito": "8",
    "nove": "9",
    "dez": "10",
    "doze": "12",
    "treze": "13",
    "dezesseis": "16",
    "dezasseis": "16",
    "dezessete": "17",
    "dezassete": "17",
    "dezoito": "18",
    "dezenove": "19",
    "dezanove": "19",
    "vinte": "20",
}

NUMBER_WORDS: dict[str, str] = {
    **ENGLISH_NUMBERS,
    **YORUBA_NUMBERS,
    **FRENCH_NUMBERS,
    **SPANISH_NUMBERS,
    **PORTUGUESE_NUMBERS,
}

# Longest first so "dix-sept" wins over "dix".
_NUMBER_WORD_RE = re.compile(
    r"\b(" + "|".join(re.escape(w) for w in sorted(NUMBER_WORDS, key=len, reverse=True)) + r")\b",
    re.IGNORECASE,
)

# Plain and leading-dot decimals; a number may run straight into a word ("5sui").
_NUMERIC_TOKEN_RE = re.compile(r"(?<![\w.])(?:\d+(?:\.\d+)?|\.\d+)(?!\d)(?!\.\d)")
_ADDRESS_RE = re.compile(r"\b0x[0-9a-fA-F]+\b", re.IGNORECASE)


def convert_number_words(text: str) -> str:
    """Replace spelled-out numbers with their digit form.

    Example:
        >>> convert_number_words("send five SUI")
        'send 5 SUI'
    """
    return _NUMBER_WORD_RE.sub(lambda m: NUMBER_WORDS[m.group(1).lower()], text)


def parse_amount(value: object) -> Decimal | None:
    """Parse an amount into a positive, finite Decimal, or None.

    Number words are converted first, so "five" and "5" both give 5.
    """
    if isinstance(value, bool) or value is None:
        return None
    text = convert_number_words(str(value)).strip()
    if not text:
        return None
    try:
        amount = Decimal(text)
    except InvalidOperation:
        return None
    if not amount.is_finite() or amount <= 0:
        return None
    return amount


def format_amount(amount: Decimal) -> str:
    """Render an amount without exponent or trailing zeros."""
    normalized = amount.normalize()
    text = format(normalized, "f")
    return text


def numbers_in(text: str) -> set[Decimal]:
    """All numeric values written in the text, after number-word conversion.

    Addresses are skipped so their hex digits never count as amounts.
    """
    converted = _ADDRESS_RE.sub(" ", convert_number_words(text))
    return {Decimal(match.group(0)) for match in _NUMERIC_TOKEN_RE.finditer(converted)}
