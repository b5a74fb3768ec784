"""Async context manager for timing and logging pipeline steps."""

import time
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from src.config.constants import PipelineStep
from src.infrastructure.logging.logger import StructuredLogger


class StepContext:
    """Mutable context for a timed pipeline step."""

    def __init__(self, state: dict[str, Any]) -> None:
        self.state = state

    def note(self, **fields: Any) -> None:
        """Attach extra fields to the step's log entry."""
        self.state.update(fields)


@asynccontextmanager
async def timed_step(
    step: PipelineStep,
    logger: StructuredLogger,
    **state: Any,
) -> AsyncGenerator[StepContext, None]:
    """Time a pipeline step; log it on success, log the error on failure."""
    ctx = StepContext(dict(state))
    start = time.perf_counter()
    try:
        yield ctx
    except Exception as e:
        logger.log_error(step.value, e, context=ctx.state)
        raise
    logger.log_step(step.value, ctx.state, duration_ms=(time.perf_counter() - start) * 1000)
