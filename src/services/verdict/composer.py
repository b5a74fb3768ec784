"""
Prompt composer.

Renders a persona's fixed templates plus the caller's input into a
PromptPayload. Pure: no I/O, no model calls, identical input gives an
identical payload.
"""

from dataclasses import dataclass

from src.config.constants import NO_ANSWERS, YES_ANSWERS, Phase, QuestionKind
from src.config.personas import Persona
from src.services.verdict.errors import InvalidInput
from src.services.verdict.models import (
    ImageAttachment,
    IntakeRequest,
    Question,
    VerdictRequest,
)


@dataclass(frozen=True)
class TextPart:
    text: str


@dataclass(frozen=True)
class ImagePart:
    data: bytes
    media_type: str


ContentPart = TextPart | ImagePart


@dataclass(frozen=True)
class PromptPayload:
    """Everything the gateway needs for one round trip."""

    phase: Phase
    system: str
    parts: tuple[ContentPart, ...]

    @property
    def text(self) -> str:
        """The trailing text block."""
        return self.parts[-1].text  # type: ignore[union-attr]

    @property
    def image_count(self) -> int:
        return sum(1 for part in self.parts if isinstance(part, ImagePart))


def _render_profile(persona: Persona, experience: str | None, motivations: tuple[str, ...]) -> str:
    lines = []
    if experience and experience.strip():
        lines.append(f"- Experience: this person {persona.describe_experience(experience.strip())}.")
    tags = [tag.strip() for tag in motivations if tag and tag.strip()]
    if tags:
        phrases = ", ".join(persona.describe_motivation(tag) for tag in tags)
        lines.append(f"- Motivation: this person {phrases}.")
    if not lines:
        return ""
    return "About them:\n" + "\n".join(lines)


def _render_subject(persona: Persona, subject: str, image_count: int) -> str:
    if subject:
        line = f'{persona.subject_label}: "{subject}"'
    else:
        line = f"{persona.subject_label}: (no description, see the attached photos)"
    if image_count:
        noun = "photo" if image_count == 1 else "photos"
        line += f"\n\nThey attached {image_count} {noun}. Use what you can see in them."
    return line


def _json_instruction(schema: str) -> str:
    return f"Respond ONLY with valid JSON, no markdown, no backticks:\n{schema}"


def _image_parts(images: tuple[ImageAttachment, ...]) -> tuple[ImagePart, ...]:
    return tuple(ImagePart(data=image.data, media_type=image.media_type) for image in images)


def compose_analysis(persona: Persona, intake: IntakeRequest) -> PromptPayload:
    """Build the analyze-phase payload.

    Raises:
        InvalidInput: no subject text and no images, or more images than
            the persona allows.
    """
    subject = (intake.subject or "").strip()
    if not subject and not intake.images:
        raise InvalidInput("A description or at least one photo is required")
    if len(intake.images) > persona.max_images:
        raise InvalidInput(f"At most {persona.max_images} photos are allowed")

    sections = [
        _render_subject(persona, subject, len(intake.images)),
        _render_profile(persona, intake.experience, intake.motivations),
        persona.analysis_rules,
        _json_instruction(persona.analysis_schema),
    ]
    text = "\n\n".join(section for section in sections if section)
    return PromptPayload(
        phase=Phase.ANALYZE,
        system=persona.system_prompt,
        parts=(*_image_parts(intake.images), TextPart(text)),
    )


def _render_answer(persona: Persona, index: int, question: Question, answer: bool | str) -> str:
    if persona.question_kind is QuestionKind.BINARY:
        if isinstance(answer, bool):
            return "Yes" if answer else "No"
        normalized = str(answer).strip().lower()
        if normalized in YES_ANSWERS:
            return "Yes"
        if normalized in NO_ANSWERS:
            return "No"
        raise InvalidInput(f"Answer {index + 1} must be Yes or No")

    if isinstance(answer, bool) or answer not in (question.options or []):
        raise InvalidInput(f"Answer {index + 1} must be one of the question's options")
    return answer


def compose_verdict(persona: Persona, request: VerdictRequest) -> PromptPayload:
    """Build the verdict-phase payload.

    Raises:
        InvalidInput: missing subject, missing questions or answers, a
            length mismatch between them, or an answer outside the
            question's domain.
    """
    subject = request.subject.strip()
    if not subject:
        raise InvalidInput("The original description is required")
    if not request.questions or not request.answers:
        raise InvalidInput("Both questions and answers are required")
    if len(request.questions) != len(request.answers):
        raise InvalidInput(
            f"Got {len(request.answers)} answers for {len(request.questions)} questions"
        )

    qa = "\n\n".join(
        f"Q: {question.q}\nA: {_render_answer(persona, i, question, answer)}"
        for i, (question, answer) in enumerate(zip(request.questions, request.answers))
    )

    context = []
    if request.situation_type:
        context.append(f"Category: {request.situation_type}")
    if request.observations:
        context.append("What you noticed:\n" + "\n".join(f"- {o}" for o in request.observations))
    if request.first_take:
        context.append(f"Your first take: {request.first_take}")

    allowed = " or ".join(f'"{value}"' for value in persona.verdict_values)
    sections = [
        f'{persona.subject_label}: "{subject}"',
        "\n".join(context),
        f"You asked them {len(request.questions)} questions. Here's exactly what they said:\n{qa}",
        persona.verdict_rules,
        f"verdict must be exactly one of: {allowed}.",
        _json_instruction(persona.verdict_schema),
    ]
    text = "\n\n".join(section for section in sections if section)
    return PromptPayload(
        phase=Phase.VERDICT,
        system=persona.system_prompt,
        parts=(TextPart(text),),
    )
