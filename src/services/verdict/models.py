"""Analyze/verdict pipeline models."""

from dataclasses import dataclass

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from src.config.constants import QUESTION_COUNT


@dataclass(frozen=True)
class ImageAttachment:
    """An uploaded image, held in memory for one request."""

    data: bytes
    media_type: str


@dataclass(frozen=True)
class IntakeRequest:
    """User input for the analyze phase."""

    subject: str
    experience: str | None = None
    motivations: tuple[str, ...] = ()
    images: tuple[ImageAttachment, ...] = ()


class Question(BaseModel):
    """One diagnostic question; ``options`` is set only for multiple choice."""

    model_config = ConfigDict(frozen=True)

    q: str = Field(..., min_length=1, description="Question text")
    options: list[str] | None = Field(
        default=None, description="Exactly four choices for multiple-choice personas"
    )


class AnalysisResult(BaseModel):
    """First-phase result: category, observations and five questions."""

    model_config = ConfigDict(frozen=True)

    situation_type: str = Field(..., min_length=1, description="Short category label")
    observations: list[str] = Field(..., description="Notable details from the input")
    first_take: str = Field(..., min_length=1, description="Short narrative reaction")
    questions: list[Question] = Field(
        ..., min_length=QUESTION_COUNT, max_length=QUESTION_COUNT
    )

    @field_validator("situation_type", mode="before")
    @classmethod
    def normalize_situation_type(cls, v: str) -> str:
        """Ensure situation_type is stripped."""
        return v.strip() if isinstance(v, str) else v


class VerdictResult(BaseModel):
    """Second-phase result.

    ``verdict`` is checked against the persona's closed set by the extractor;
    the model itself only requires a string.
    """

    model_config = ConfigDict(frozen=True)

    verdict: str
    headline: str
    reasoning: str
    positives: list[str] = Field(default_factory=list)
    negatives: list[str] = Field(default_factory=list)
    cost: str | None = None
    resources: str | None = None
    closing: str

    @field_validator("verdict", mode="before")
    @classmethod
    def strip_verdict(cls, v: str) -> str:
        return v.strip() if isinstance(v, str) else v


class VerdictRequest(BaseModel):
    """Second-phase input: the subject, the prior analysis and the answers.

    Lengths are deliberately unconstrained here; the composer rejects
    mismatches with InvalidInput so the client gets a 400 envelope.
    """

    subject: str = Field(
        ...,
        validation_alias=AliasChoices("subject", "project", "text"),
        description="Original subject text",
    )
    situation_type: str = ""
    observations: list[str] = Field(default_factory=list)
    first_take: str = ""
    questions: list[Question] = Field(default_factory=list)
    answers: list[bool | str] = Field(default_factory=list)
