"""Console construction for prompt and diagnostic output.

Both streams go through Rich consoles configured for plain text: no markup,
no highlighting, no colors. Prompts contain square brackets that would
otherwise be parsed as markup.
"""
from __future__ import annotations

from typing import TextIO

from rich.console import Console


def make_console(*, stderr: bool = False, file: TextIO | None = None) -> Console:
    """Return a plain-text console writing to ``file`` or a standard stream."""
    return Console(
        file=file,
        stderr=stderr,
        markup=False,
        emoji=False,
        highlight=False,
        soft_wrap=True,
        color_system=None,
    )


class Diagnostics:
    """Writes user-facing diagnostics (one message per line) to stderr."""

    def __init__(self, console: Console | None = None):
        self.console = console or make_console(stderr=True)

    def report(self, message: str) -> None:
        self.console.print(message)
        self.console.file.flush()
