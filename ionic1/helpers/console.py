"""Shared consoles and the logger used by every command."""

from __future__ import annotations

import os

from rich.console import Console
from rich.text import Text

console = Console()
err_console = Console(stderr=True)


def verbose_from_env() -> bool:
    """True when IONIC1_VERBOSE is set to a truthy value."""
    return os.environ.get("IONIC1_VERBOSE", "").strip().lower() in ("1", "true", "yes")


class Logger:
    """User-facing logger printing through rich consoles.

    Messages are wrapped in Text so exception strings containing square
    brackets are never interpreted as rich markup.
    """

    def __init__(
        self,
        out: Console | None = None,
        err: Console | None = None,
        *,
        verbose: bool = False,
    ) -> None:
        self.out = out or console
        self.err = err or err_console
        self.verbose = verbose

    def info(self, message: object) -> None:
        self.out.print(Text(str(message)), highlight=False)

    def success(self, message: object) -> None:
        self.out.print(Text(str(message), style="green"), highlight=False)

    def warn(self, message: object) -> None:
        self.out.print(Text(str(message), style="yellow"), highlight=False)

    def error(self, message: object) -> None:
        self.err.print(Text(str(message), style="bold red"), highlight=False)

    def debug(self, message: object) -> None:
        if self.verbose:
            self.out.print(Text(str(message), style="dim"), highlight=False)
