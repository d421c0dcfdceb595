"""The confirmation loop.

ConfirmEngine asks its question until it gets a definitive answer or runs
out of retries. The first prompt is always issued. Every answer that sends
the loop around again is reported on stderr before the next prompt.

The engine returns a ``ConfirmResult``; mapping it to an exit code is left
to the caller.
"""
from __future__ import annotations

import itertools
import logging
from typing import Any, Iterable

from rich.console import Console

from .answers import classify_answer
from .display import Diagnostics, make_console
from .prompts import render_prompt
from .readers import InputReader, ReadError, make_reader
from .types import ConfirmResult, Decided, Empty, ParseOutcome, PromptConfig, ReadFailure

logger = logging.getLogger(__name__)

RETRY_EXCEEDED_MESSAGE = "Retry count exceeded.  Aborting..."


class ConfirmEngine:
    """Run the prompt/read/classify loop for one ``PromptConfig``."""

    def __init__(
        self,
        config: PromptConfig,
        reader: InputReader | None = None,
        *,
        stdout: Console | None = None,
        stderr: Console | None = None,
    ):
        self.config = config
        self.reader = reader or make_reader(config.reader_mode, stdout or make_console())
        self.diagnostics = Diagnostics(stderr)
        self.prompt = render_prompt(config.prompt, config.default_answer, config.full_words)

    def _attempts(self) -> Iterable[int]:
        limit = self.config.retry.max_prompts
        if limit is None:
            return itertools.count(1)
        return range(1, limit + 1)

    def ask_once(self) -> ParseOutcome:
        """Prompt once and classify the answer, applying the default to blank input."""
        try:
            raw = self.reader.read(self.prompt)
        except ReadError as e:
            return ReadFailure(error=e)

        outcome = classify_answer(raw, full_words=self.config.full_words)
        if isinstance(outcome, Empty):
            default = self.config.default_answer.decision
            if default is not None:
                return Decided(default)
        return outcome

    def run(self) -> ConfirmResult:
        attempts = 0
        for attempts in self._attempts():
            outcome = self.ask_once()
            logger.debug("Attempt %d: %r", attempts, outcome)
            if isinstance(outcome, Decided):
                return ConfirmResult(decision=outcome.decision, attempts=attempts)
            self.diagnostics.report(outcome.message)

        logger.debug("No answer after %d prompts", attempts)
        self.diagnostics.report(RETRY_EXCEEDED_MESSAGE)
        return ConfirmResult(decision=None, attempts=attempts)


def ask(prompt: str = "Continue?", **options: Any) -> bool:
    """Ask a yes/no question on the terminal and return True for yes.

    ``options`` are the remaining ``PromptConfig`` fields. Running out of
    retries counts as no.
    """
    config = PromptConfig(prompt=prompt, **options)
    return ConfirmEngine(config).run().confirmed
