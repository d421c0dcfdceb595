"""Configuration parsing for confirm.

Turns command-line words and environment variables into the typed values
``PromptConfig`` is built from. Every parser raises ``ConfigurationError``
on bad input so the CLI can reject it before any prompt is shown.
"""
from __future__ import annotations

from typing import Mapping, Optional

from .answers import is_full_word
from .types import Bounded, Decision, DefaultAnswer, RetryPolicy, Unlimited

ENV_ASSUME_VAR = "CONFIRM_ASSUME"


class ConfigurationError(ValueError):
    """A configuration value could not be parsed."""


def parse_default_answer(word: str) -> DefaultAnswer:
    """Parse ``yes``, ``no`` or ``retry`` (case-insensitive)."""
    lowered = word.strip().lower()
    if not is_full_word(lowered) and lowered != DefaultAnswer.NONE.value:
        raise ConfigurationError(
            f"Invalid choice, choose either yes, no or retry, found: {word}"
        )
    return DefaultAnswer(lowered)


def parse_ask_count(value: str | int) -> RetryPolicy:
    """Parse the number of times to re-ask after the first prompt.

    0 asks until answered. A positive count N allows N more prompts after
    the first one.
    """
    try:
        count = int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(
            f"Ask count must be a non-negative integer, found: {value}"
        ) from None
    if count < 0:
        raise ConfigurationError(f"Ask count must be a non-negative integer, found: {value}")
    if count == 0:
        return Unlimited()
    return Bounded(count=count)


def assumed_decision(environ: Mapping[str, str]) -> Optional[Decision]:
    """Return the answer forced through ``CONFIRM_ASSUME``, if any."""
    raw = environ.get(ENV_ASSUME_VAR, "").strip().lower()
    if not raw:
        return None
    try:
        return Decision(raw)
    except ValueError:
        raise ConfigurationError(
            f"{ENV_ASSUME_VAR} must be 'yes' or 'no', found: {environ[ENV_ASSUME_VAR]}"
        ) from None
