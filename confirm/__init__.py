"""confirm: ask a yes/no question from a shell script.

The CLI (``confirm``) exits 0 when the user answers yes and 1 otherwise,
so it can guard a destructive command::

    confirm "Drop the database?" && dropdb prod

Programmatic use goes through ``ConfirmEngine`` (or the ``ask`` shortcut),
which returns a ``ConfirmResult`` instead of an exit code.
"""
from __future__ import annotations

__version__ = "0.1.0"

from .answers import classify_answer
from .config import ConfigurationError
from .engine import ConfirmEngine, ask
from .prompts import render_option_box, render_prompt
from .readers import InputReader, LineReader, ReadError, SingleCharReader
from .types import (
    Bounded,
    ConfirmResult,
    Decision,
    DefaultAnswer,
    PromptConfig,
    ReaderMode,
    Unlimited,
)

__all__ = [
    # Running a confirmation
    "ConfirmEngine",
    "ConfirmResult",
    "ask",
    # Configuration
    "Bounded",
    "ConfigurationError",
    "DefaultAnswer",
    "PromptConfig",
    "ReaderMode",
    "Unlimited",
    # Building blocks
    "Decision",
    "InputReader",
    "LineReader",
    "ReadError",
    "SingleCharReader",
    "classify_answer",
    "render_option_box",
    "render_prompt",
    # Version
    "__version__",
]
