"""Sequential step pipeline driven through the timed task runner."""

import logging
from collections.abc import Iterable

from pydantic import BaseModel, Field

from updater.core.config import StepDelays
from updater.core.credentials import Credential
from updater.core.runner import run_timed_task
from updater.utils.progress import IndicatorColor

logger = logging.getLogger(__name__)


class PipelineStep(BaseModel):
    label: str
    delay_ms: int = Field(ge=0)


def build_steps(
    input_path: str,
    output_path: str,
    credential: Credential,
    delays: StepDelays | None = None,
) -> list[PipelineStep]:
    """Build the fixed read -> connect -> transfer -> write sequence."""
    if delays is None:
        delays = StepDelays()

    return [
        PipelineStep(
            label=f"Reading input file [{input_path}]",
            delay_ms=delays.read_input,
        ),
        PipelineStep(
            label=f"Connecting with user [{credential.user}]",
            delay_ms=delays.connect,
        ),
        PipelineStep(
            label="Reading data from external system",
            delay_ms=delays.transfer,
        ),
        PipelineStep(
            label=f"Writing output file [{output_path}]",
            delay_ms=delays.write_output,
        ),
    ]


async def run_pipeline(
    steps: Iterable[PipelineStep],
    *,
    color: IndicatorColor | str = IndicatorColor.YELLOW,
) -> int:
    """Run steps one after another, stopping at the first failure.

    Returns:
        Number of steps completed.
    """
    completed = 0
    for step in steps:
        logger.debug("Step %d: %s (%dms)", completed + 1, step.label, step.delay_ms)
        await run_timed_task(step.delay_ms, step.label, color=color)
        completed += 1
    return completed
