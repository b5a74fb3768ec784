"""Anthropic client factory."""

import logging

import anthropic
import httpx

from src.config.settings import Settings

logger = logging.getLogger(__name__)


def is_anthropic_model(model: str) -> bool:
    """Check if model is Anthropic (Claude)."""
    return "claude" in model.lower()


def build_anthropic_client(
    settings: Settings,
    http_client: httpx.AsyncClient | None = None,
) -> anthropic.AsyncAnthropic:
    """
    Build an async Anthropic client for a single request.

    Retries are disabled: every call is one round trip, and failures are
    surfaced to the caller instead of being retried.

    Args:
        settings: Application settings
        http_client: Optional pre-built httpx client (used by tests)
    """
    if not settings.anthropic_api_key:
        logger.warning("anthropic_api_key is not set; model calls will fail before any request is sent")

    return anthropic.AsyncAnthropic(
        api_key=settings.anthropic_api_key or "",
        base_url=settings.anthropic_base_url,
        timeout=settings.llm_timeout,
        max_retries=0,
        default_headers={"anthropic-version": settings.anthropic_version},
        http_client=http_client,
    )
