"""Text processing utilities."""

import re


def normalize_text(text: str) -> str:
    """
    Normalize text for processing.

    Args:
        text: Input text

    Returns:
        Normalized text
    """
    # Remove extra whitespace
    text = re.sub(r"\s+", " ", text)
    # Trim
    text = text.strip()
    return text


def strip_label(text: str, labels: tuple[str, ...]) -> str:
    """Remove a leading ``Label:`` preamble a model may prepend."""
    for label in labels:
        text = re.sub(rf"^\s*{re.escape(label)}\s*:\s*", "", text, flags=re.IGNORECASE)
    return text.strip()


def strip_quotes(text: str) -> str:
    """Remove one pair of wrapping quotes."""
    text = text.strip()
    if len(text) >= 2 and text[0] == text[-1] and text[0] in "\"'“”":
        return text[1:-1].strip()
    if len(text) >= 2 and text[0] == "“" and text[-1] == "”":
        return text[1:-1].strip()
    return text


def truncate(text: str, limit: int = 200) -> str:
    """Shorten text for log records."""
    if len(text) <= limit:
        return text
    return text[: limit - 3] + "..."


def contains_phrase(text: str, phrase: str) -> bool:
    """Whole-word, case-insensitive containment.

    "0x12ab" is not contained in "send to 0x12abcd": the match must not run
    into neighbouring letters or digits.
    """
    phrase = " ".join(phrase.split())
    if not phrase:
        return False
    pattern = r"(?<!\w)" + r"\s+".join(re.escape(part) for part in phrase.split(" ")) + r"(?!\w)"
    return re.search(pattern, text, re.IGNORECASE) is not None
