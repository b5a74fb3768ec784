"""FastAPI dependencies."""

from collections.abc import AsyncIterator
from functools import lru_cache

from fastapi import Depends

from src.config.personas import Persona, get_persona
from src.config.settings import Settings, get_settings
from src.infrastructure.llm.gateway import ModelGateway
from src.services.verdict.errors import UnknownPersona


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings as a FastAPI dependency."""
    return get_settings()


def get_persona_dependency(persona_name: str) -> Persona:
    """Resolve the ``{persona_name}`` path segment."""
    persona = get_persona(persona_name)
    if persona is None:
        raise UnknownPersona(f"Unknown persona '{persona_name}'")
    return persona


async def get_model_gateway(
    settings: Settings = Depends(get_settings_dependency),  # noqa: B008
) -> AsyncIterator[ModelGateway]:
    """One gateway per request, closed when the request finishes."""
    gateway = ModelGateway(settings)
    try:
        yield gateway
    finally:
        await gateway.close()
