"""Tests for asset typo and phonetic correction."""

import pytest
from src.config.constants import Asset
from src.services.normalizer.assets import AssetCorrector


@pytest.fixture
def corrector():
    return AssetCorrector(threshold=0.8)


@pytest.mark.parametrize(
    "token, expected",
    [
        ("SUI", Asset.SUI),
        ("sui", Asset.SUI),
        ("su", Asset.SUI),
        ("suii", Asset.SUI),
        ("suh", Asset.SUI),
        ("suite", Asset.SUI),
        ("usd", Asset.USDC),
        ("usd coin", Asset.USDC),
        ("USD Coin", Asset.USDC),
        ("usd-t", Asset.USDT),
        ("cetos", Asset.CETUS),
        ("wef", Asset.WETH),
        ("usdcc", Asset.USDC),
        ("cetuss", Asset.CETUS),
        ("wethh", Asset.WETH),
        ("usdtt", Asset.USDT),
    ],
)
def test_canonicalize_near_matches(corrector, token, expected):
    assert corrector.canonicalize(token) == expected


@pytest.mark.parametrize(
    "token",
    [
        "banana", "rubbish", "bitcoin", "ether", "eth", "the", "sue", "", "x",
        "quite", "used", "suis", "cents", "with",
    ],
)
def test_canonicalize_rejects_unrelated(corrector, token):
    assert corrector.canonicalize(token) is None


def test_find_mentions_includes_phrases(corrector):
    assert corrector.find_mentions("swap 10 suite for usd coin") == {Asset.SUI, Asset.USDC}


def test_find_mentions_ignores_addresses(corrector):
    assert corrector.find_mentions("send 5 to 0xabc123def4567890") == set()


def test_find_mentions_none_for_banana(corrector):
    assert corrector.find_mentions("send 5 banana to John") == set()


def test_hints_only_report_changes(corrector):
    hints = corrector.hints("send 5 suii and 3 USDC to John")
    assert hints == {"suii": "SUI"}


def test_find_mentions_ignores_everyday_words(corrector):
    assert corrector.find_mentions("send 5 banana to John quite quickly") == set()
    assert corrector.find_mentions("je suis content, 20 cents used") == set()


def test_single_edit_needs_a_long_symbol(corrector):
    # "suis" is one edit from "sui", but three-letter symbols only match via aliases.
    assert corrector.canonicalize("suis") is None
    assert corrector.canonicalize("usdcc") == Asset.USDC


def test_weak_alias_only_counts_after_an_amount(corrector):
    assert corrector.find_mentions("quiero enviar dinero a su amigo") == set()
    assert corrector.find_mentions("envía 5 su a Pedro") == {Asset.SUI}


def test_asset_glued_to_amount(corrector):
    assert corrector.find_mentions("send 5sui to John") == {Asset.SUI}
