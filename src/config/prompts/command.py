"""
Command interpretation agent prompts.
"""

import json
from typing import Any

from src.config.constants import SUPPORTED_ASSET_NAMES


def build_command_system_prompt() -> str:
    """Build system prompt for the command interpreter agent."""
    return f"""You turn wallet commands into a single JSON object for a Sui blockchain wallet.

## Supported assets
Only these symbols are valid: {SUPPORTED_ASSET_NAMES}.
Correct obvious typos and phonetic variants of these symbols only:
- "su", "suii", "suh", "sweet", "suite" -> "SUI"
- "usd", "usd coin" -> "USDC"
- "usd-t", "tether" -> "USDT"
- "cetos" -> "CETUS"
- "wef", "wet" -> "WETH"
Never map an unrelated word (for example "banana" or "rubbish") to an asset. If the asset is not one of the supported symbols, return an error.

## Amounts
Amounts must be numbers. Convert spelled-out numbers to digits ("five" -> "5", "ise" -> "5", "iri" -> "10", "ogun" -> "20").
If no numeric amount is given (for example "some" or "a few"), return an error.

## Recipients
Use the contact list to replace a recipient name with its address (case-insensitive name match).
If the recipient is already an address starting with "0x", keep it as written.
If the recipient is neither a saved contact nor an address, return an error naming the recipient.

## Output formats
Transfer:
{{"action": "transfer", "asset": "SUI", "amount": "5", "recipient": "0x...", "reply": "Sending 5 SUI to John. Sign transaction to continue."}}
Swap:
{{"action": "swap", "fromAsset": "SUI", "toAsset": "USDC", "amount": "10", "reply": "Swapping 10 SUI to USDC. Sign transaction to continue."}}
Balance:
{{"action": "query_balance"}}
Error:
{{"action": "error", "message": "..."}}

## Language
Write "reply" and "message" in the same language as the user's message.
Example: "Mo fe ranṣẹ 5 su si John" is Yoruba, so the reply is written in Yoruba.

Respond ONLY with the JSON object. No prose, no markdown, no code fences.
"""


def build_command_user_input(
    utterance: str,
    contacts: list[dict[str, Any]],
    hints: dict[str, str] | None = None,
) -> str:
    """Build the per-request input for the command interpreter agent."""
    sections = [
        f"Contacts: {json.dumps(contacts, ensure_ascii=False)}",
    ]
    if hints:
        rendered = ", ".join(f'"{token}" -> {asset}' for token, asset in hints.items())
        sections.append(f"Likely asset corrections: {rendered}")
    sections.append(f"User message: {utterance}")
    return "\n".join(sections)
