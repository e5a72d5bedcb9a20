"""Timed task runner: wraps one unit of async work with a progress indicator."""

import asyncio
import inspect
import logging
import time
from collections.abc import Awaitable, Callable
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

import click

from updater.utils.progress import Indicator, IndicatorColor, progress_indicator

logger = logging.getLogger(__name__)

Work = Awaitable[Any] | Callable[[], Awaitable[Any]] | int | float


class TaskInvocation:
    def __init__(self, label: str, started_at: float):
        self.label = label
        self.started_at = started_at
        self.finished_at: float | None = None

    def finish(self, finished_at: float) -> None:
        self.finished_at = finished_at

    @property
    def elapsed(self) -> float:
        if self.finished_at is None:
            raise RuntimeError(f"Task '{self.label}' has not finished")
        return self.finished_at - self.started_at


async def simulate_work(ms: int | float) -> None:
    """Stand-in for a real I/O operation: sleep for `ms` milliseconds."""
    if ms < 0:
        raise ValueError(f"Work duration must be non-negative, got {ms}ms")
    await asyncio.sleep(ms / 1000)


def format_elapsed(seconds: float) -> str:
    """Format a duration with one decimal, rounding half away from zero."""
    quantized = Decimal(str(seconds)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return f"{quantized}"


def format_completion(label: str, seconds: float) -> str:
    return f"{label}  ({format_elapsed(seconds)}s)."


def _as_awaitable(work: Work) -> Awaitable[Any]:
    if isinstance(work, bool):
        raise TypeError("Work must be an awaitable, a callable or a duration in ms")
    if isinstance(work, int | float):
        if work < 0:
            raise ValueError(f"Work duration must be non-negative, got {work}ms")
        return simulate_work(work)
    if inspect.isawaitable(work):
        return work
    if callable(work):
        return work()
    raise TypeError("Work must be an awaitable, a callable or a duration in ms")


async def run_timed_task(
    work: Work,
    label: str,
    *,
    indicator: Indicator | None = None,
    color: IndicatorColor | str = IndicatorColor.YELLOW,
    clock: Callable[[], float] = time.monotonic,
) -> Any:
    """Run one unit of work behind a spinner and report how long it took.

    Prints "<label>  (<seconds>s)." on stdout once the work has finished and
    the spinner is gone. If the work raises, the spinner is stopped first and
    the exception propagates unchanged; no completion line is printed.

    Args:
        work: Awaitable, zero-argument callable returning an awaitable, or a
            delay in milliseconds to simulate
        label: Human-readable description of the step
        indicator: Indicator to drive; a new one is built when omitted
        color: Spinner color for a newly built indicator
        clock: Monotonic time source in seconds

    Returns:
        Whatever the wrapped work returns.
    """
    invocation = TaskInvocation(label, started_at=clock())
    logger.debug("Starting task: %s", label)

    try:
        with progress_indicator(label, color=color, indicator=indicator):
            result = await _as_awaitable(work)
    finally:
        # no-op once awaited; avoids an un-awaited coroutine if the spinner failed
        if inspect.iscoroutine(work):
            work.close()

    invocation.finish(clock())
    click.echo(format_completion(label, invocation.elapsed))
    logger.debug("Task finished in %.3fs: %s", invocation.elapsed, label)
    return result
