"""
Constants, enums, and static values.
"""

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class IntentType(str, Enum):
    """Utterance classification types."""

    COMMAND = "command"  # Proceed to command interpretation
    QUESTION = "question"  # Conversational answer
    GREETING = "greeting"  # Conversational answer


class Action(str, Enum):
    """Structured command actions understood by the transaction layer."""

    TRANSFER = "transfer"
    QUERY_BALANCE = "query_balance"
    SWAP = "swap"
    ERROR = "error"


class Asset(str, Enum):
    """Whitelisted asset symbols."""

    SUI = "SUI"
    USDC = "USDC"
    USDT = "USDT"
    CETUS = "CETUS"
    WETH = "WETH"


SUPPORTED_ASSETS: tuple[str, ...] = tuple(asset.value for asset in Asset)
SUPPORTED_ASSET_NAMES = ", ".join(SUPPORTED_ASSETS)  # For prompts and messages

DEFAULT_LANGUAGE = "en"
SUPPORTED_LANGUAGES: tuple[str, ...] = ("en", "fr", "es", "pt", "yo")


class PipelineStep(str, Enum):
    """Orchestrator execution steps."""

    CLASSIFY = "classify"
    INTERPRET = "interpret"
    RESPOND = "respond"
    TRANSCRIBE = "transcribe"
    REFINE = "refine"
    DRAFT = "draft"


class PipelineStepDescription(str, Enum):
    """Orchestrator execution step descriptions."""

    CLASSIFY = "Classify the utterance as command, question or greeting"
    INTERPRET = "Interpret the command into a validated intent"
    RESPOND = "Generate a conversational reply"
    TRANSCRIBE = "Transcribe the raw audio"
    REFINE = "Correct crypto terminology in the transcription"
    DRAFT = "Resolve the recipient and build the transaction"


def log_pipeline_step(step: PipelineStep) -> None:
    """Log the start of a pipeline step with its description."""
    description = PipelineStepDescription[step.name].value
    logger.info("%s: %s", step.value, description)
