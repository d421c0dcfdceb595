"""Shared test fixtures for the confirm test suite.

Engines are driven by a scripted reader instead of a terminal, and consoles
write into ``io.StringIO`` buffers so output can be asserted on.
"""
import io

import pytest

from confirm.display import make_console
from confirm.readers import InputReader, ReadError


class ScriptedReader(InputReader):
    """Reader that replays a fixed list of answers.

    Items that are exceptions are raised as ``ReadError`` instead of being
    returned. Once the script runs out, every read fails with end of input.
    """

    def __init__(self, answers, console=None):
        super().__init__(console or make_console(file=io.StringIO()))
        self.answers = list(answers)
        self.prompts = []

    def read(self, prompt):
        self._write_prompt(prompt)
        self.prompts.append(prompt)
        if not self.answers:
            raise ReadError("end of input")
        answer = self.answers.pop(0)
        if isinstance(answer, Exception):
            raise ReadError(str(answer)) from answer
        return answer


@pytest.fixture
def stdout_buffer():
    return io.StringIO()


@pytest.fixture
def stderr_buffer():
    return io.StringIO()


@pytest.fixture
def stdout_console(stdout_buffer):
    return make_console(file=stdout_buffer)


@pytest.fixture
def stderr_console(stderr_buffer):
    return make_console(file=stderr_buffer)


@pytest.fixture
def scripted_reader(stdout_console):
    """Factory building a ScriptedReader that writes prompts to stdout_buffer."""

    def _make(*answers):
        return ScriptedReader(answers, console=stdout_console)

    return _make
