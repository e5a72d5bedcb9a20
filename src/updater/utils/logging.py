"""Logging setup routed through the shared stderr console."""

import logging

from rich.logging import RichHandler

from updater.utils.progress import stderr_console


def configure_logging(verbose: bool = False) -> None:
    """Send updater's log records to stderr via rich.

    Sharing the spinner's console lets records print above a live spinner
    without tearing it.
    """
    handler = RichHandler(
        console=stderr_console,
        show_path=False,
        markup=False,
        rich_tracebacks=verbose,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger("updater")
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    root.propagate = False
