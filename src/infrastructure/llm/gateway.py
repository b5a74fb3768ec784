"""
Model gateway: one request/response round trip against the Messages API.
"""
import base64
import logging
from typing import Any

import anthropic
import httpx

from src.config.settings import Settings
from src.infrastructure.llm.factory import build_anthropic_client
from src.services.verdict.composer import ImagePart, PromptPayload, TextPart
from src.services.verdict.errors import UpstreamFailure

logger = logging.getLogger(__name__)


def to_message_content(payload: PromptPayload) -> str | list[dict[str, Any]]:
    """
    Convert payload parts to Messages API content.

    A text-only payload is sent as a plain string; otherwise image blocks
    (base64) come first, followed by the text block.
    """
    if len(payload.parts) == 1 and isinstance(payload.parts[0], TextPart):
        return payload.parts[0].text

    blocks: list[dict[str, Any]] = []
    for part in payload.parts:
        if isinstance(part, ImagePart):
            blocks.append({
                "type": "image",
                "source": {
                    "type": "base64",
                    "media_type": part.media_type,
                    "data": base64.b64encode(part.data).decode("ascii"),
                },
            })
        else:
            blocks.append({"type": "text", "text": part.text})
    return blocks


def _error_message(error: Any) -> str:
    if isinstance(error, dict):
        message = error.get("message")
        if message:
            return str(message)
        return str(error.get("type") or error)
    return str(error)


def _status_error_message(exc: anthropic.APIStatusError) -> str:
    """Pull the upstream error message out of a non-2xx response."""
    body = exc.body
    if isinstance(body, dict):
        return _error_message(body.get("error", body))
    return exc.message


def first_text(body: Any) -> str:
    """
    Return the first text segment of a Messages API response body.

    Raises:
        UpstreamFailure: the body carries an error object, or has no text.
    """
    if not isinstance(body, dict):
        raise UpstreamFailure("Model endpoint returned an unexpected body")
    if body.get("error"):
        raise UpstreamFailure(_error_message(body["error"]))

    for block in body.get("content") or []:
        if isinstance(block, dict) and block.get("type") == "text" and isinstance(block.get("text"), str):
            return block["text"]
    raise UpstreamFailure("Model response contained no text")


class ModelGateway:
    """Sends one composed prompt to the model and returns the raw completion."""

    def __init__(self, settings: Settings, http_client: httpx.AsyncClient | None = None):
        """Initialize model gateway."""
        self.settings = settings
        self._client = build_anthropic_client(settings, http_client=http_client)

    async def complete(self, payload: PromptPayload, *, model: str, max_tokens: int) -> str:
        """
        Run a single completion.

        No retry, no streaming, no caching. Network errors, timeouts,
        non-success statuses and error objects inside a 200 body all raise
        UpstreamFailure; partial content is never returned.

        Args:
            payload: Composed prompt (system text plus content parts)
            model: Model identifier
            max_tokens: Token ceiling for this phase

        Returns:
            The completion text, unparsed
        """
        logger.debug(
            "Calling %s (phase=%s, max_tokens=%d, images=%d)",
            model,
            payload.phase.value,
            max_tokens,
            payload.image_count,
        )
        # The SDK refuses to build a request without credentials
        if not self.settings.anthropic_api_key:
            logger.warning("Model call skipped: anthropic_api_key is not set")
            raise UpstreamFailure("Model API key is not configured")

        try:
            raw = await self._client.messages.with_raw_response.create(
                model=model,
                max_tokens=max_tokens,
                system=payload.system,
                messages=[{"role": "user", "content": to_message_content(payload)}],
            )
        except anthropic.APIStatusError as e:
            logger.warning("Model endpoint returned %s: %s", e.status_code, e.message)
            raise UpstreamFailure(_status_error_message(e)) from e
        except anthropic.APITimeoutError as e:
            logger.warning("Model call timed out after %.1fs", self.settings.llm_timeout)
            raise UpstreamFailure("Model request timed out") from e
        except anthropic.APIConnectionError as e:
            logger.warning("Could not reach model endpoint: %s", e)
            raise UpstreamFailure("Could not reach the model endpoint") from e

        try:
            body = raw.http_response.json()
        except ValueError as e:
            raise UpstreamFailure("Model endpoint returned a non-JSON body") from e
        return first_text(body)

    async def close(self) -> None:
        """Release the underlying HTTP client."""
        await self._client.close()
