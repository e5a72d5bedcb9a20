"""Progress indicator utilities using rich library."""

from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum

from rich.console import Console
from rich.status import Status
from rich.text import Text

stderr_console = Console(stderr=True)

DEFAULT_REFRESH_INTERVAL = 0.08


class IndicatorColor(str, Enum):
    YELLOW = "yellow"
    GREEN = "green"
    CYAN = "cyan"
    MAGENTA = "magenta"
    BLUE = "blue"
    RED = "red"
    WHITE = "white"


class Indicator:
    """Spinner redrawn in place on a console while a task runs.

    Redraw happens on rich's refresh thread, so the caller is never blocked.
    When the console is not a terminal (piped output, CI) nothing is drawn,
    but the running flag is still tracked.
    """

    def __init__(
        self,
        message: str,
        color: IndicatorColor | str = IndicatorColor.YELLOW,
        console: Console | None = None,
        refresh_interval: float = DEFAULT_REFRESH_INTERVAL,
        spinner: str = "dots",
    ):
        if refresh_interval <= 0:
            raise ValueError(
                f"refresh_interval must be positive, got {refresh_interval}"
            )
        self.message = message
        self.color = IndicatorColor(color)
        self.console = console if console is not None else stderr_console
        self.refresh_interval = refresh_interval
        self.spinner = spinner
        self.running = False
        self._status: Status | None = None

    @property
    def interactive(self) -> bool:
        return self.console.is_terminal

    def start(self) -> None:
        if self.running:
            return

        if not self.interactive:
            self.running = True
            return

        # Text() keeps labels like "[data.csv]" from being parsed as markup
        status = Status(
            Text(self.message),
            console=self.console,
            spinner=self.spinner,
            spinner_style=self.color.value,
            refresh_per_second=1 / self.refresh_interval,
        )
        status.start()
        # only flag running once the redraw loop is actually up
        self._status = status
        self.running = True

    def stop(self) -> None:
        if not self.running:
            return
        self.running = False

        if self._status is not None:
            status, self._status = self._status, None
            status.stop()


@contextmanager
def progress_indicator(
    message: str,
    color: IndicatorColor | str = IndicatorColor.YELLOW,
    indicator: Indicator | None = None,
) -> Iterator[Indicator]:
    """Context manager for an indeterminate spinner around one operation.

    The indicator is stopped on every exit path, including exceptions and
    cancellation, before the exception leaves the block.

    Args:
        message: Description of the operation
        color: Spinner color
        indicator: Pre-built indicator to drive instead of a new one

    Usage:
        with progress_indicator("Reading input file [data.csv]"):
            await read_input()
    """
    if indicator is None:
        indicator = Indicator(message, color=color)

    indicator.start()
    try:
        yield indicator
    finally:
        indicator.stop()
