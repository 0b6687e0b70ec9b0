"""Tests for language detection."""

import pytest
from src.services.normalizer.language import detect_language


@pytest.mark.parametrize(
    "text, expected",
    [
        ("send 5 SUI to John", "en"),
        ("Envoie 5 banane à Jean", "fr"),
        ("Je veux envoyer 5 SUI à Marie", "fr"),
        ("Quiero enviar 5 SUI a Juan", "es"),
        ("Envie 5 SUI para João, por favor", "pt"),
        ("Mo fe ranṣẹ 5 su si John", "yo"),
    ],
)
def test_detect_language(text, expected):
    assert detect_language(text) == expected


@pytest.mark.parametrize("text", ["", "   ", "5 SUI", "0xabc123"])
def test_detect_language_defaults_to_english(text):
    assert detect_language(text) == "en"
