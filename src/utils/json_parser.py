"""
JSON Parser utility for extracting JSON from LLM responses.
"""
import json
import logging
import re
from typing import Any, Dict

from src.services.verdict.errors import MalformedResponse

logger = logging.getLogger(__name__)

# Opening fences may carry a language tag (```json, ```JSON, ```javascript ...)
_FENCE_RE = re.compile(r"```[A-Za-z0-9_+-]*")


class JSONParser:
    """Helper class to extract clean JSON from LLM responses."""

    @staticmethod
    def strip_code_fences(text: str) -> str:
        """Remove every triple-backtick marker, tagged or not."""
        return _FENCE_RE.sub("", text)

    @staticmethod
    def extract_json(text: str) -> Dict[str, Any]:
        """
        Extract the JSON object embedded in a completion.

        Fences are stripped first, then the span from the first ``{`` to the
        last ``}`` is parsed. Anything short of a JSON object raises
        MalformedResponse; there is no empty-dict fallback.
        """
        if not text:
            raise MalformedResponse("Empty completion", raw_text=text or "")

        cleaned = JSONParser.strip_code_fences(text)
        start = cleaned.find("{")
        end = cleaned.rfind("}")
        if start < 0 or end <= start:
            raise MalformedResponse("No JSON object found in completion", raw_text=text)

        candidate = cleaned[start : end + 1]
        try:
            data = json.loads(candidate)
        except json.JSONDecodeError as e:
            raise MalformedResponse(
                f"Invalid JSON in completion: {e.msg} at position {e.pos}", raw_text=text
            ) from e

        if not isinstance(data, dict):
            raise MalformedResponse("Completion JSON is not an object", raw_text=text)
        return data
