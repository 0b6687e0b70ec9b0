"""System prompts for the command interpreter agents."""

from src.config.prompts.command import build_command_system_prompt, build_command_user_input
from src.config.prompts.conversation import (
    CONVERSATION_SYSTEM_PROMPT,
    build_conversation_user_input,
)
from src.config.prompts.router import build_router_system_prompt
from src.config.prompts.transcription import (
    REFINE_OUTPUT_LABELS,
    REFINE_SYSTEM_PROMPT,
    TRANSCRIBE_SYSTEM_PROMPT,
    build_refine_user_input,
    build_transcribe_user_input,
)

__all__ = [
    "CONVERSATION_SYSTEM_PROMPT",
    "REFINE_OUTPUT_LABELS",
    "REFINE_SYSTEM_PROMPT",
    "TRANSCRIBE_SYSTEM_PROMPT",
    "build_command_system_prompt",
    "build_command_user_input",
    "build_conversation_user_input",
    "build_refine_user_input",
    "build_router_system_prompt",
    "build_transcribe_user_input",
]
