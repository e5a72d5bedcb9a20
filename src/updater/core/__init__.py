"""Core pipeline: timed task runner, credentials, configuration."""

from updater.core.runner import format_completion, format_elapsed, run_timed_task

__all__ = [
    "format_completion",
    "format_elapsed",
    "run_timed_task",
]
