"""Request/Response models for API endpoints."""

from typing import Any

from pydantic import AliasChoices, BaseModel, Field

from src.services.verdict.models import AnalysisResult, VerdictResult


class QuestionsRequest(BaseModel):
    """Text-only analyze request (JSON body)."""

    subject: str = Field(
        "",
        validation_alias=AliasChoices("subject", "project", "text"),
        description="What the user wants help with",
    )
    experience: str | None = Field(None, description="Self-reported experience level key")
    motivations: list[str] = Field(default_factory=list, description="Motivation tag keys")


class AnalysisResponse(BaseModel):
    """Success envelope for the analyze phase."""

    success: bool = True
    data: AnalysisResult


class VerdictResponse(BaseModel):
    """Success envelope for the verdict phase."""

    success: bool = True
    data: VerdictResult


class ErrorResponse(BaseModel):
    """Error envelope shared by every endpoint."""

    success: bool = False
    error: str = Field(..., description="Human-readable error message")


class HealthResponse(BaseModel):
    """Response model for health endpoint."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
    message: str = Field(..., description="Readiness message")


class PersonaSummary(BaseModel):
    """Public description of a persona."""

    name: str
    title: str
    question_kind: str
    verdict_values: list[str]
    max_images: int
    experience_levels: list[str]
    motivations: list[str]


ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Missing or invalid input"},
    404: {"model": ErrorResponse, "description": "Unknown persona"},
    500: {"model": ErrorResponse, "description": "Model call or response parsing failed"},
}
