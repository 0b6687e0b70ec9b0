"""Tests for text helpers."""

import pytest
from src.utils.text_processing import contains_phrase, strip_label, strip_quotes


@pytest.mark.parametrize(
    "text, phrase",
    [
        ("send 5 SUI to John", "john"),
        ("send 5 SUI to John.", "John"),
        ("envoie 5 SUI à Marie Claire", "marie   claire"),
        ("send to 0xABCDEF1234, please", "0xabcdef1234"),
    ],
)
def test_contains_phrase(text, phrase):
    assert contains_phrase(text, phrase) is True


@pytest.mark.parametrize(
    "text, phrase",
    [
        ("send 5 SUI to Johnny", "John"),
        ("send 5 SUI to 0x1234567890abcdef", "0x1234567890ab"),
        ("send 5 SUI to a0x1234567890", "0x1234567890"),
        ("send 5 SUI", ""),
    ],
)
def test_contains_phrase_needs_whole_words(text, phrase):
    assert contains_phrase(text, phrase) is False


def test_strip_label_and_quotes():
    assert strip_quotes(strip_label('Corrected transcription: "send 5 SUI"', ("Corrected transcription",))) == (
        "send 5 SUI"
    )
