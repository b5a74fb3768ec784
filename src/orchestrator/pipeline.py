"""Main pipeline orchestrator."""

import logging

from src.config.constants import RAW_LOG_CHARS, PipelineStep
from src.config.personas import Persona
from src.config.settings import Settings
from src.infrastructure.llm.gateway import ModelGateway
from src.infrastructure.logging.logger import StructuredLogger
from src.orchestrator.step_timer import timed_step
from src.services.verdict.composer import compose_analysis, compose_verdict
from src.services.verdict.errors import MalformedResponse
from src.services.verdict.extractor import extract_analysis, extract_verdict
from src.services.verdict.models import (
    AnalysisResult,
    IntakeRequest,
    VerdictRequest,
    VerdictResult,
)

logger = logging.getLogger(__name__)


class VerdictPipeline:
    """Runs compose -> gateway -> extract for one persona and one phase.

    Stateless: nothing survives between calls, so one instance per request
    is the expected use.
    """

    def __init__(self, settings: Settings, gateway: ModelGateway):
        """Initialize pipeline with settings and a model gateway."""
        self.settings = settings
        self.gateway = gateway
        self.structured_logger = StructuredLogger(__name__)

    def _log_malformed(self, persona: Persona, error: MalformedResponse) -> None:
        logger.warning(
            "Unparseable completion for %s: %s\n--- raw completion ---\n%s",
            persona.name,
            error.message,
            error.raw_text[:RAW_LOG_CHARS],
        )

    async def analyze(self, persona: Persona, intake: IntakeRequest) -> AnalysisResult:
        """
        Run the analyze phase.

        Raises:
            InvalidInput: before any model call, if the intake is unusable.
            UpstreamFailure: the model call failed.
            MalformedResponse: the completion could not be parsed.
        """
        payload = compose_analysis(persona, intake)

        async with timed_step(
            PipelineStep.GATEWAY,
            self.structured_logger,
            persona=persona.name,
            phase=payload.phase.value,
            model=self.settings.analysis_model,
            images=payload.image_count,
        ) as step:
            text = await self.gateway.complete(
                payload,
                model=self.settings.analysis_model,
                max_tokens=self.settings.analysis_max_tokens,
            )
            step.note(completion_chars=len(text))

        async with timed_step(PipelineStep.EXTRACT, self.structured_logger, persona=persona.name) as step:
            try:
                result = extract_analysis(persona, text)
            except MalformedResponse as e:
                self._log_malformed(persona, e)
                raise
            step.note(situation_type=result.situation_type)
        return result

    async def verdict(self, persona: Persona, request: VerdictRequest) -> VerdictResult:
        """
        Run the verdict phase.

        Raises:
            InvalidInput: questions/answers missing or misaligned.
            UpstreamFailure: the model call failed.
            MalformedResponse: the completion could not be parsed, or the
                verdict is outside the persona's enumeration.
        """
        payload = compose_verdict(persona, request)

        async with timed_step(
            PipelineStep.GATEWAY,
            self.structured_logger,
            persona=persona.name,
            phase=payload.phase.value,
            model=self.settings.verdict_model,
        ) as step:
            text = await self.gateway.complete(
                payload,
                model=self.settings.verdict_model,
                max_tokens=self.settings.verdict_max_tokens,
            )
            step.note(completion_chars=len(text))

        async with timed_step(PipelineStep.EXTRACT, self.structured_logger, persona=persona.name) as step:
            try:
                result = extract_verdict(persona, text)
            except MalformedResponse as e:
                self._log_malformed(persona, e)
                raise
            step.note(verdict=result.verdict)
        return result
