"""LLM infrastructure module."""

from src.infrastructure.llm.factory import build_anthropic_client, is_anthropic_model
from src.infrastructure.llm.gateway import ModelGateway, first_text, to_message_content

__all__ = [
    "ModelGateway",
    "build_anthropic_client",
    "first_text",
    "is_anthropic_model",
    "to_message_content",
]
