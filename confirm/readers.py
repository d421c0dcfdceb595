"""Input readers: write the prompt, block for one token of input.

Two strategies exist, selected by ``ReaderMode``:

- ``LineReader`` waits for a full line (the user presses enter).
- ``SingleCharReader`` returns as soon as one key is pressed.

A failure to read is raised as ``ReadError`` so the loop can count it as a
retry. A failure to write the prompt is not wrapped and propagates.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, TextIO

import click
from rich.console import Console
from rich.text import Text

from .display import make_console
from .types import ReaderMode


class ReadError(Exception):
    """Reading user input failed (stream closed, terminal unavailable, ...)."""


def first_keystroke(chars: str) -> str:
    """Return the first key of a raw terminal read.

    ``click.getchar`` returns everything the terminal had buffered, so keys
    typed together arrive as one string. An escape sequence (arrow keys,
    function keys) is one key and is kept whole.
    """
    if chars.startswith("\x1b"):
        return chars
    return chars[:1]


class InputReader(ABC):
    """Interface for prompting and reading one token of user input."""

    def __init__(self, console: Console | None = None):
        self.console = console or make_console()

    def _write_prompt(self, prompt: str) -> None:
        self.console.print(Text(prompt), end="")
        self.console.file.flush()

    @abstractmethod
    def read(self, prompt: str) -> str:
        """Write ``prompt`` and return the raw token typed by the user."""
        raise NotImplementedError


class LineReader(InputReader):
    """Reads a newline-terminated answer.

    Reads from ``stream`` when given, otherwise from standard input.
    """

    def __init__(self, console: Console | None = None, stream: TextIO | None = None):
        super().__init__(console)
        self.stream = stream

    def read(self, prompt: str) -> str:
        self._write_prompt(prompt)
        try:
            line = self.console.input(stream=self.stream)
        except (EOFError, OSError, UnicodeDecodeError) as e:
            raise ReadError(str(e) or "end of input") from e
        # readline() signals end of stream with an empty string, input() raises.
        if self.stream is not None and not line:
            raise ReadError("end of input")
        return line.rstrip("\r\n")


class SingleCharReader(InputReader):
    """Reads a single raw keystroke without waiting for enter."""

    def __init__(
        self,
        console: Console | None = None,
        getchar: Callable[..., str] = click.getchar,
    ):
        super().__init__(console)
        self._getchar = getchar

    def read(self, prompt: str) -> str:
        self._write_prompt(prompt)
        try:
            char = self._getchar(echo=False)
        except (EOFError, OSError, UnicodeDecodeError) as e:
            raise ReadError(str(e) or "end of input") from e
        # The keystroke is not echoed; end the prompt line ourselves.
        self.console.print()
        self.console.file.flush()
        return first_keystroke(char)


def make_reader(mode: ReaderMode, console: Console | None = None) -> InputReader:
    if mode is ReaderMode.SINGLE_CHAR:
        return SingleCharReader(console)
    return LineReader(console)
