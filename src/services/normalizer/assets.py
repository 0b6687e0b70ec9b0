"""Phonetic and typo correction for the asset whitelist.

Corrections are bounded: a token is mapped to a whitelisted symbol only when
it is a known alias, or a single edit away from a symbol of four or more
letters with a ``difflib`` ratio at or above the threshold. Unrelated words
such as "banana", "quite" or "rubbish" stay uncorrected so validation still
rejects them.
"""

import re
from difflib import SequenceMatcher

from src.config.constants import SUPPORTED_ASSETS, Asset

# Many-to-one alias table. Multi-word aliases are matched as phrases.
ASSET_ALIASES: dict[str, Asset] = {
    # SUI
    "sui": Asset.SUI,
    "su": Asset.SUI,
    "suii": Asset.SUI,
    "suh": Asset.SUI,
    "sweet": Asset.SUI,
    "swit": Asset.SUI,
    "suite": Asset.SUI,
    "swee": Asset.SUI,
    # USDC
    "usdc": Asset.USDC,
    "usd": Asset.USDC,
    "usd coin": Asset.USDC,
    "usd-c": Asset.USDC,
    "you ess dee see": Asset.USDC,
    "u s d c": Asset.USDC,
    # USDT
    "usdt": Asset.USDT,
    "usd-t": Asset.USDT,
    "tether": Asset.USDT,
    "you ess dee tee": Asset.USDT,
    "u s d t": Asset.USDT,
    # CETUS
    "cetus": Asset.CETUS,
    "cetos": Asset.CETUS,
    "setus": Asset.CETUS,
    # WETH
    "weth": Asset.WETH,
    "wef": Asset.WETH,
    "wet": Asset.WETH,
    "wrapped eth": Asset.WETH,
    "wrapped ether": Asset.WETH,
}

# Common words that sit close to an asset name but are never meant as one.
STOP_WORDS: frozenset[str] = frozenset(
    {
        "the", "with", "sue", "sun", "use", "set", "see", "sweat", "what",
        "when", "west", "best", "test", "cats", "status", "sit", "suit",
        "soup", "sum", "such", "sus", "sur", "seu", "seus", "wed", "web",
        "went", "was", "who", "why", "seth", "beth", "meth",
        # Not whitelisted, and not a typo of WETH or USDT
        "eth", "ether", "ethereum",
    }
)

# Aliases that are also everyday words ("su" is a Spanish possessive). In
# free text they only count when written right after an amount.
WEAK_ALIASES: frozenset[str] = frozenset({"su", "wet"})

MIN_FUZZY_LENGTH = 4
MAX_FUZZY_EDITS = 1
DEFAULT_THRESHOLD = 0.8

_PHRASE_ALIASES = sorted((a for a in ASSET_ALIASES if " " in a), key=len, reverse=True)
_PHRASE_RE = re.compile(
    r"\b(" + "|".join(re.escape(p) for p in _PHRASE_ALIASES) + r")\b",
    re.IGNORECASE,
)
# A token may be glued to a preceding amount ("5sui").
_TOKEN_RE = re.compile(r"(?:\b|(?<=\d))[A-Za-z][A-Za-z-]*\b")
_ADDRESS_RE = re.compile(r"\b0x[0-9a-fA-F]+\b", re.IGNORECASE)
_AFTER_AMOUNT_RE = re.compile(r"\d\s*$")


def edit_count(a: str, b: str) -> int:
    """Number of inserted, deleted or replaced characters between two strings."""
    return sum(
        max(i2 - i1, j2 - j1)
        for tag, i1, i2, j1, j2 in SequenceMatcher(None, a, b).get_opcodes()
        if tag != "equal"
    )


class AssetCorrector:
    """Maps misspelled or misheard asset names to whitelisted symbols.

    Aliases are matched exactly. Fuzzy matching only runs against the
    canonical symbols of four or more letters and accepts a single edit, so
    short everyday words ("quite", "used", "suis") are never corrected.
    """

    def __init__(self, threshold: float = DEFAULT_THRESHOLD):
        self.threshold = threshold
        self._candidates = {**{a.lower(): Asset(a) for a in SUPPORTED_ASSETS}, **ASSET_ALIASES}
        self._fuzzy_targets = {
            a.lower(): Asset(a) for a in SUPPORTED_ASSETS if len(a) >= MIN_FUZZY_LENGTH
        }

    def canonicalize(self, token: str) -> Asset | None:
        """Return the whitelisted asset a token stands for, or None."""
        key = " ".join(str(token).lower().split())
        if not key:
            return None
        if key in self._candidates:
            return self._candidates[key]
        if len(key) < MIN_FUZZY_LENGTH or key in STOP_WORDS or " " in key:
            return None

        for symbol, asset in self._fuzzy_targets.items():
            if edit_count(key, symbol) > MAX_FUZZY_EDITS:
                continue
            if SequenceMatcher(None, key, symbol).ratio() >= self.threshold:
                return asset
        return None

    def corrections(self, text: str) -> dict[str, Asset]:
        """Tokens (and alias phrases) of the text that correct to an asset.

        Tokens already spelled as a canonical symbol are included too, so the
        result doubles as the set of assets the text mentions.
        """
        found: dict[str, Asset] = {}
        remainder = _ADDRESS_RE.sub(" ", text)
        for match in _PHRASE_RE.finditer(remainder):
            phrase = match.group(1)
            found[phrase] = ASSET_ALIASES[phrase.lower()]
        remainder = _PHRASE_RE.sub(" ", remainder)

        for match in _TOKEN_RE.finditer(remainder):
            token = match.group(0)
            if token.lower() in WEAK_ALIASES and not _AFTER_AMOUNT_RE.search(
                remainder[: match.start()]
            ):
                continue
            asset = self.canonicalize(token)
            if asset is not None:
                found[token] = asset
        return found

    def find_mentions(self, text: str) -> set[Asset]:
        """Set of whitelisted assets evidenced in the text."""
        return set(self.corrections(text).values())

    def hints(self, text: str) -> dict[str, str]:
        """Advisory corrections for prompts: only tokens that actually change."""
        return {
            token: asset.value
            for token, asset in self.corrections(text).items()
            if token != asset.value
        }
