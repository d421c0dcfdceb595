"""Classification of raw user input into parse outcomes."""
from __future__ import annotations

from .types import Decided, Decision, Empty, Invalid, ParseOutcome

_WORDS = {
    "yes": Decision.YES,
    "no": Decision.NO,
}
_LETTERS = {
    "y": Decision.YES,
    "n": Decision.NO,
}


def is_full_word(text: str) -> bool:
    return text.lower() in _WORDS


def classify_answer(text: str, *, full_words: bool = False) -> ParseOutcome:
    """Classify one token of user input.

    Empty input is reported as ``Empty`` so the caller can substitute its
    configured default. With ``full_words`` set, single letters are rejected.
    """
    response = text.strip()
    if not response:
        return Empty()

    lowered = response.lower()
    if lowered in _WORDS:
        return Decided(_WORDS[lowered])
    if full_words:
        return Invalid(text=response, message="Please type yes or no")
    if lowered in _LETTERS:
        return Decided(_LETTERS[lowered])
    return Invalid(
        text=response,
        message=f"Unrecognized answer '{response}', please type y or n",
    )
