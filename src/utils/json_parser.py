"""
JSON Parser utility for extracting JSON from LLM responses.
"""
import json
import logging
import re
from typing import Any

from src.services.errors import MalformedResponseError

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"```[a-zA-Z0-9_-]*")


class JSONParser:
    """Helper class to extract clean JSON from LLM responses."""

    @staticmethod
    def strip_fences(text: str) -> str:
        """Remove markdown code-fence markers, tagged (```json) or bare."""
        return _FENCE_RE.sub("", text).strip()

    @staticmethod
    def parse(text: str) -> Any:
        """Decode the JSON payload of a model response.

        Fences are stripped first. If the remainder still carries prose around
        the payload, the outermost ``{...}`` block is tried.

        Raises:
            MalformedResponseError: if nothing decodes as JSON.
        """
        if not text or not text.strip():
            raise MalformedResponseError("Empty response", raw_text=text or "")

        cleaned = JSONParser.strip_fences(text)
        try:
            return json.loads(cleaned)
        except json.JSONDecodeError as e:
            # Fallback: the outermost JSON object inside surrounding prose
            match = re.search(r"(\{.*\})", cleaned, re.DOTALL)
            if match:
                try:
                    return json.loads(match.group(1))
                except json.JSONDecodeError:
                    pass
            logger.warning("JSONParser: could not decode response (first 200 chars): %s", text[:200])
            raise MalformedResponseError("Response is not valid JSON", raw_text=text, cause=e) from e

    @staticmethod
    def parse_object(text: str) -> dict[str, Any]:
        """Decode a model response that must be a JSON object."""
        data = JSONParser.parse(text)
        if not isinstance(data, dict):
            raise MalformedResponseError(
                f"Expected a JSON object, got {type(data).__name__}", raw_text=text
            )
        return data
