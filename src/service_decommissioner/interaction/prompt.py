"""
Operator interaction.

Every component that needs an answer from the operator receives a
PromptProvider explicitly. There is no module level prompt handle.

Answers are stripped of surrounding whitespace. An empty answer falls back to
the default, when one is given.

interaction_session acquires a provider and guarantees close is called on
every exit path, including early aborts and exceptions.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Callable, Protocol, TextIO


class PromptProvider(Protocol):
    """
    Minimal prompt interface.

    ask
    Show question and return the stripped answer, or default when empty.

    close
    Release the underlying terminal or stream.
    """

    def ask(self, question: str, default: str = "") -> str:
        """Ask one question and return the answer."""

    def close(self) -> None:
        """Release resources held by the provider."""


def format_question(question: str, default: str = "") -> str:
    suffix = f" [{default}]" if default else ""
    return f"{question}{suffix}: "


class ConsolePrompt:
    """
    Prompt provider bound to a terminal.

    read_line defaults to input. End of input is treated as an empty answer.
    """

    def __init__(
        self,
        output: TextIO | None = None,
        read_line: Callable[[], str] | None = None,
    ) -> None:
        self._output = output or sys.stdout
        self._read_line = read_line or input
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def ask(self, question: str, default: str = "") -> str:
        if self._closed:
            raise RuntimeError("prompt provider is closed")

        self._output.write(format_question(question, default))
        self._output.flush()
        try:
            answer = self._read_line()
        except EOFError:
            answer = ""
        return answer.strip() or default

    def close(self) -> None:
        self._closed = True


@dataclass
class ScriptedPrompt:
    """
    Prompt provider that replays prepared answers.

    Used by tests and non interactive callers. Once answers run out every
    further question gets an empty answer. questions records what was asked.
    """

    answers: list[str] = field(default_factory=list)
    questions: list[str] = field(default_factory=list)
    closed: bool = False

    def ask(self, question: str, default: str = "") -> str:
        self.questions.append(question)
        answer = self.answers.pop(0) if self.answers else ""
        return answer.strip() or default

    def close(self) -> None:
        self.closed = True


@contextmanager
def interaction_session(provider: PromptProvider) -> Iterator[PromptProvider]:
    """Yield provider and close it when the block exits."""
    try:
        yield provider
    finally:
        provider.close()
