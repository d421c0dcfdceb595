"""Prompt rendering: the question followed by its option box.

"Continue?" becomes "Continue? [y/n]: ". The letter or word for the default
answer is upper-cased. The question text itself is never altered.
"""
from __future__ import annotations

from .types import DefaultAnswer

_OPTION_BOXES = {
    (True, DefaultAnswer.YES): "[YES/no]",
    (True, DefaultAnswer.NO): "[yes/NO]",
    (True, DefaultAnswer.NONE): "[yes/no]",
    (False, DefaultAnswer.YES): "[Y/n]",
    (False, DefaultAnswer.NO): "[y/N]",
    (False, DefaultAnswer.NONE): "[y/n]",
}


def render_option_box(default: DefaultAnswer, full_words: bool = False) -> str:
    return _OPTION_BOXES[(full_words, default)]


def render_prompt(text: str, default: DefaultAnswer, full_words: bool = False) -> str:
    """Return the full prompt string, ready to be written before a read."""
    return f"{text} {render_option_box(default, full_words)}: "
