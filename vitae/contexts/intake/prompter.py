"""
Blocking prompt loop with per-field validation.

Lines are read through a LineSource so the loop can be driven by real stdin
or by canned answers in tests.
"""

import sys
from typing import Callable, Iterable, Iterator, Optional, Pattern

import typer
from typing_extensions import Protocol

from vitae.contexts.intake.logger import log_field_rejected
from vitae.contexts.intake.patterns import is_valid


class StreamClosedError(EOFError):
    """Raised when the input stream has no more lines to give."""


class LineSource(Protocol):
    """Anything that can hand out one line of user input at a time."""

    def read_line(self) -> str:
        """Return the next raw line; raise StreamClosedError at end of input."""
        ...


class StdinSource:
    """Reads answers from standard input."""

    def __init__(self, stream=None):
        self.stream = stream

    def read_line(self) -> str:
        # sys.stdin is looked up on every read
        stream = self.stream if self.stream is not None else sys.stdin
        line = stream.readline()
        if line == "":
            raise StreamClosedError("standard input closed")
        return line


class ScriptedSource:
    """
    Serves a fixed sequence of answers.

    Example:
        >>> source = ScriptedSource(["Ada Lovelace", "female"])
        >>> source.read_line()
        'Ada Lovelace'
    """

    def __init__(self, lines: Iterable[str]):
        self._lines: Iterator[str] = iter(lines)
        self.consumed = 0

    def read_line(self) -> str:
        try:
            line = next(self._lines)
        except StopIteration:
            raise StreamClosedError(f"script exhausted after {self.consumed} lines") from None
        self.consumed += 1
        return line


def prompt_for_input(
    prompt: str,
    pattern: Optional[Pattern[str]] = None,
    error_message: str = "",
    source: Optional[LineSource] = None,
    echo: Callable[[str], None] = typer.echo,
) -> str:
    """
    Prompt until the answer satisfies pattern.

    The answer is stripped of leading/trailing whitespace before validation
    and the stripped value is what gets returned. There is no retry limit.

    Args:
        prompt: Text shown before each read
        pattern: Compiled full-match pattern (None = accept anything)
        error_message: Text shown after a rejected answer
        source: Where answers come from (default: stdin)
        echo: Output function for prompts and error messages

    Returns:
        The stripped answer

    Raises:
        StreamClosedError: If the source runs out of input
    """
    if source is None:
        source = StdinSource()

    while True:
        echo(prompt)
        answer = source.read_line().strip()
        if is_valid(answer, pattern):
            return answer
        log_field_rejected(prompt, answer)
        echo(error_message)
