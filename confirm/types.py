"""Type definitions and data models for confirm.

Configuration values are frozen pydantic models, built once at startup and
read by the loop. Per-read values (parse outcomes, loop results) are frozen
dataclasses produced fresh on every iteration.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


# ---------------------------------------------------------------------------
# Answers
# ---------------------------------------------------------------------------


class Decision(str, Enum):
    """A definitive answer to the question."""

    YES = "yes"
    NO = "no"


class DefaultAnswer(str, Enum):
    """Answer substituted for an empty response.

    ``NONE`` is spelled ``retry`` on the command line: an empty response asks
    the question again.
    """

    YES = "yes"
    NO = "no"
    NONE = "retry"

    @property
    def decision(self) -> Optional[Decision]:
        if self is DefaultAnswer.YES:
            return Decision.YES
        if self is DefaultAnswer.NO:
            return Decision.NO
        return None


class ReaderMode(str, Enum):
    SINGLE_CHAR = "single_char"
    LINE_BUFFERED = "line_buffered"


# ---------------------------------------------------------------------------
# Retry policies
# ---------------------------------------------------------------------------


class Unlimited(BaseModel):
    """Ask until a definitive answer is given."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["unlimited"] = "unlimited"

    @property
    def max_prompts(self) -> Optional[int]:
        return None


class Bounded(BaseModel):
    """Ask at most ``count`` more times after the first prompt."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["bounded"] = "bounded"
    count: int = Field(ge=1, description="Additional prompts allowed after the first")

    @property
    def max_prompts(self) -> Optional[int]:
        return self.count + 1


RetryPolicy = Annotated[Union[Unlimited, Bounded], Field(discriminator="kind")]


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


def _default_retry() -> Bounded:
    return Bounded(count=3)


class PromptConfig(BaseModel):
    """Everything one invocation needs to ask its question."""

    model_config = ConfigDict(frozen=True)

    prompt: str = Field(default="Continue?", description="Question shown before the option box")
    default_answer: DefaultAnswer = DefaultAnswer.NONE
    reader_mode: ReaderMode = ReaderMode.LINE_BUFFERED
    retry: RetryPolicy = Field(default_factory=_default_retry)
    full_words: bool = Field(
        default=False,
        description="Require 'yes' or 'no' spelled out instead of single letters",
    )

    @model_validator(mode="after")
    def _check_reader_mode(self) -> "PromptConfig":
        if self.full_words and self.reader_mode is ReaderMode.SINGLE_CHAR:
            raise ValueError("full-word answers cannot be read one keystroke at a time")
        return self


# ---------------------------------------------------------------------------
# Parse outcomes
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Decided:
    decision: Decision


@dataclass(frozen=True, slots=True)
class Empty:
    message: str = "An answer is required"


@dataclass(frozen=True, slots=True)
class Invalid:
    """Text that is neither yes nor no."""

    text: str
    message: str


@dataclass(frozen=True, slots=True)
class ReadFailure:
    error: Exception

    @property
    def message(self) -> str:
        return f"Error while reading user input: {self.error}"


ParseOutcome = Union[Decided, Empty, Invalid, ReadFailure]


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ConfirmResult:
    """Terminal state of one confirmation loop.

    ``decision`` is None when the retry budget ran out before a definitive
    answer was given.
    """

    decision: Optional[Decision]
    attempts: int

    @property
    def exhausted(self) -> bool:
        return self.decision is None

    @property
    def confirmed(self) -> bool:
        return self.decision is Decision.YES
