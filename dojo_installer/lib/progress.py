from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional

from rich.console import Console


class Spinner:
    """Cosmetic progress indicator around blocking calls.

    Purely visual; nothing in the pipeline waits on or reads from it.
    """

    def __init__(self, console: Optional[Console] = None, *, enabled: bool = True):
        self.console = console or Console(stderr=True)
        self.enabled = enabled

    @contextmanager
    def running(self, prefix: str) -> Iterator[None]:
        if not self.enabled:
            yield
            return
        with self.console.status(prefix, spinner="dots"):
            yield

    def status(self, message: str) -> None:
        if self.enabled:
            self.console.print(f"[green]==>[/green] {message}")

    def section(self, message: str) -> None:
        if self.enabled:
            self.console.rule(message)

    def error(self, message: str) -> None:
        self.console.print(f"[bold red]Error:[/bold red] {message}")
