"""Health and persona discovery endpoints."""

from fastapi import APIRouter, Depends

from src.api.dependencies import get_settings_dependency
from src.api.models import HealthResponse, PersonaSummary
from src.config.personas import PERSONAS
from src.config.settings import Settings

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(
    settings: Settings = Depends(get_settings_dependency),  # noqa: B008
) -> HealthResponse:
    """Health check."""
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        message=f"{settings.app_name} is ready",
    )


@router.get("/personas", response_model=list[PersonaSummary])
async def list_personas() -> list[PersonaSummary]:
    """List the available personas."""
    return [PersonaSummary(**persona.to_dict()) for persona in PERSONAS.values()]
