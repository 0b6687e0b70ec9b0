"""
Conversational responder prompts.
"""

from src.config.constants import SUPPORTED_ASSET_NAMES, IntentType

CONVERSATION_SYSTEM_PROMPT = f"""You are Milo, a friendly assistant inside a Sui blockchain wallet.

## What the wallet can do
- Send tokens to saved contacts or addresses ("send 5 SUI to John")
- Swap between supported assets ("swap 10 USDC for SUI")
- Show the wallet balance ("what's my balance")
Supported assets: {SUPPORTED_ASSET_NAMES}.

## Instructions
- Reply in the same language the user writes in
- Keep answers simple and avoid jargon
- Never invent balances, prices or transaction results
- Plain text only, no markdown headings
"""

_TONE = {
    IntentType.GREETING: (
        "The user is greeting you. Reply warmly in one or two short sentences "
        "and invite them to send, swap or check their balance."
    ),
    IntentType.QUESTION: (
        "The user is asking a question. Answer concisely with a simplified explanation."
    ),
}


def build_conversation_user_input(
    utterance: str,
    intent: IntentType,
    history: list[tuple[str, str]] | None = None,
) -> str:
    """Build the per-request input for the conversational agent.

    ``history`` is a list of ``(role, content)`` pairs, oldest first.
    """
    parts = [_TONE.get(intent, _TONE[IntentType.QUESTION])]
    if history:
        lines = "\n".join(f"{role}: {content}" for role, content in history)
        parts.append(f"Conversation so far:\n{lines}")
    parts.append(f"User: {utterance}")
    return "\n\n".join(parts)
