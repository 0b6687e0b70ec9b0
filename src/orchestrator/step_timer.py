"""Async context manager for timing and logging pipeline steps."""

import time
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from src.config.constants import PipelineStep, log_pipeline_step
from src.infrastructure.logging.logger import StructuredLogger


class StepContext:
    """Mutable context for a timed pipeline step."""

    def __init__(self) -> None:
        self.summary: dict[str, Any] = {}

    def set_result(self, **summary: Any) -> None:
        self.summary.update(summary)


@asynccontextmanager
async def timed_step(
    step: PipelineStep,
    logger: StructuredLogger,
    agent_name: str,
) -> AsyncGenerator[StepContext, None]:
    """Time a pipeline step and log its result summary."""
    log_pipeline_step(step)
    ctx = StepContext()
    start = time.time()
    yield ctx
    elapsed_ms = (time.time() - start) * 1000
    logger.log_step(step.value, {"agent": agent_name, **ctx.summary}, duration_ms=elapsed_ms)
