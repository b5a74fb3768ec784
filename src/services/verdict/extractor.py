"""Response extractor: completion text -> validated result models."""

from pydantic import ValidationError

from src.config.constants import CHOICE_OPTION_COUNT, QuestionKind
from src.config.personas import Persona
from src.services.verdict.errors import MalformedResponse
from src.services.verdict.models import AnalysisResult, VerdictResult
from src.utils.json_parser import JSONParser


def _describe(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "root"
    return f"{location}: {first['msg']}"


def _check_questions(persona: Persona, result: AnalysisResult, text: str) -> None:
    for i, question in enumerate(result.questions, start=1):
        if persona.question_kind is QuestionKind.BINARY:
            if question.options:
                raise MalformedResponse(
                    f"Question {i} has options but {persona.name} questions are yes/no",
                    raw_text=text,
                )
            continue
        options = question.options or []
        if len(options) != CHOICE_OPTION_COUNT or not all(o.strip() for o in options):
            raise MalformedResponse(
                f"Question {i} needs exactly {CHOICE_OPTION_COUNT} non-empty options",
                raw_text=text,
            )


def extract_analysis(persona: Persona, text: str) -> AnalysisResult:
    """Parse and validate an analyze-phase completion."""
    data = JSONParser.extract_json(text)
    try:
        result = AnalysisResult.model_validate(data)
    except ValidationError as e:
        raise MalformedResponse(f"Analysis does not match schema ({_describe(e)})", raw_text=text) from e
    _check_questions(persona, result, text)
    return result


def extract_verdict(persona: Persona, text: str) -> VerdictResult:
    """Parse and validate a verdict-phase completion."""
    data = JSONParser.extract_json(text)
    try:
        result = VerdictResult.model_validate(data)
    except ValidationError as e:
        raise MalformedResponse(f"Verdict does not match schema ({_describe(e)})", raw_text=text) from e
    if result.verdict not in persona.verdict_values:
        raise MalformedResponse(
            f"Verdict {result.verdict!r} is not one of {list(persona.verdict_values)}",
            raw_text=text,
        )
    return result
