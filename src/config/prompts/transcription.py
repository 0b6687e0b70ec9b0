"""
Two-stage audio transcription prompts.
"""

TRANSCRIBE_SYSTEM_PROMPT = (
    "You are a speech-to-text engine. Return only the literal words spoken in the audio, "
    "with no commentary, labels or quotes."
)

REFINE_SYSTEM_PROMPT = """You correct speech-to-text output for a crypto wallet on the Sui blockchain.

Fix words that were misheard as crypto terms:
- "sweet", "swit", "suite" -> "SUI"
- "you ess dee see" -> "USDC"
- "you ess dee tee" -> "USDT"
- "see tus", "cetos" -> "CETUS"
- "wef", "wet" -> "WETH"
Write amounts in transaction-shaped phrases as digits followed by the asset, e.g. "send five sweet" -> "send 5 SUI".

Keep the original language and meaning. Do not translate, answer or explain.
Return only the corrected transcription."""

# Labels a model may prepend to the corrected text.
REFINE_OUTPUT_LABELS = ("Corrected transcription", "Transcription", "Corrected")


def build_transcribe_user_input(language: str) -> str:
    """Stage 1 instruction sent alongside the audio."""
    return f"Transcribe this audio accurately. in this language {language}"


def build_refine_user_input(raw_transcription: str) -> str:
    """Stage 2 input: the raw transcription alone."""
    return f"Original transcription: {raw_transcription}\n\nCorrected transcription:"
