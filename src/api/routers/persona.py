"""Analyze and verdict endpoints, one set per persona."""

from typing import Any

from fastapi import APIRouter, Depends, File, Form, UploadFile

from src.api.dependencies import (
    get_model_gateway,
    get_persona_dependency,
    get_settings_dependency,
)
from src.api.models import (
    ERROR_RESPONSES,
    AnalysisResponse,
    QuestionsRequest,
    VerdictResponse,
)
from src.api.response import build_success
from src.api.uploads import read_images, release_uploads
from src.config.personas import Persona
from src.config.settings import Settings
from src.infrastructure.llm.gateway import ModelGateway
from src.orchestrator.pipeline import VerdictPipeline
from src.services.verdict.models import IntakeRequest, VerdictRequest

router = APIRouter(responses=ERROR_RESPONSES)


@router.post("/{persona_name}/analyze", response_model=AnalysisResponse)
async def analyze(
    text: str = Form(""),
    experience: str | None = Form(None),
    motivations: list[str] = Form([]),  # noqa: B008
    files: list[UploadFile] | None = File(None),  # noqa: B008
    persona: Persona = Depends(get_persona_dependency),  # noqa: B008
    settings: Settings = Depends(get_settings_dependency),  # noqa: B008
    gateway: ModelGateway = Depends(get_model_gateway),  # noqa: B008
) -> dict[str, Any]:
    """
    First phase: description, optional profile and photos -> five questions.

    Uploads are released on every exit path, including errors.
    """
    uploads = files or []
    try:
        images = await read_images(uploads, persona, settings)
        intake = IntakeRequest(
            subject=text,
            experience=experience,
            motivations=tuple(motivations),
            images=images,
        )
        result = await VerdictPipeline(settings, gateway).analyze(persona, intake)
        return build_success(result)
    finally:
        await release_uploads(uploads)


@router.post("/{persona_name}/questions", response_model=AnalysisResponse)
async def questions(
    request: QuestionsRequest,
    persona: Persona = Depends(get_persona_dependency),  # noqa: B008
    settings: Settings = Depends(get_settings_dependency),  # noqa: B008
    gateway: ModelGateway = Depends(get_model_gateway),  # noqa: B008
) -> dict[str, Any]:
    """First phase for text-only clients posting JSON."""
    intake = IntakeRequest(
        subject=request.subject,
        experience=request.experience,
        motivations=tuple(request.motivations),
    )
    result = await VerdictPipeline(settings, gateway).analyze(persona, intake)
    return build_success(result)


@router.post("/{persona_name}/verdict", response_model=VerdictResponse)
async def verdict(
    request: VerdictRequest,
    persona: Persona = Depends(get_persona_dependency),  # noqa: B008
    settings: Settings = Depends(get_settings_dependency),  # noqa: B008
    gateway: ModelGateway = Depends(get_model_gateway),  # noqa: B008
) -> dict[str, Any]:
    """Second phase: prior analysis plus answers -> verdict."""
    result = await VerdictPipeline(settings, gateway).verdict(persona, request)
    return build_success(result)
