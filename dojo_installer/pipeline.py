from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Protocol, Sequence

from .context import InstallContext

logger = logging.getLogger(__name__)


class Step(Protocol):
    """A single blocking stage of the install."""

    step_id: str

    def run(self, ctx: InstallContext) -> InstallContext:
        ...


@dataclass(frozen=True)
class PipelineResult:
    ctx: InstallContext
    ran_steps: List[str]
    skipped_steps: List[str]


def run_pipeline(
    *,
    ctx: InstallContext,
    steps: Sequence[Step],
    skip: Sequence[str] = (),
    stop_after: Optional[str] = None,
) -> PipelineResult:
    """Run steps in order; the first exception aborts the run."""

    ran: List[str] = []
    skipped: List[str] = []

    for step in steps:
        if step.step_id in skip:
            logger.info("Skipping step %s (per request)", step.step_id)
            skipped.append(step.step_id)
        else:
            logger.debug("Running step %s", step.step_id)
            ctx = step.run(ctx)
            ran.append(step.step_id)

        if stop_after is not None and step.step_id == stop_after:
            logger.info("Stopping after %s", stop_after)
            break

    return PipelineResult(ctx=ctx, ran_steps=ran, skipped_steps=skipped)
