"""Interactive questions asked when arguments are missing."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import TextIO

from .errors import PromptAborted

__all__ = ["ConsolePrompter", "Prompter"]


class Prompter(ABC):
    """Source of answers for the questions the pipeline needs to ask."""

    @abstractmethod
    def select(self, message: str, choices: Sequence[str]) -> str:
        """Ask the user to pick exactly one entry of ``choices``."""

    @abstractmethod
    def text(self, message: str) -> str:
        """Ask the user for a free text answer."""


class ConsolePrompter(Prompter):
    """Ask questions on a terminal using ``input``."""

    def __init__(
        self,
        *,
        reader: Callable[[str], str] = input,
        stream: TextIO | None = None,
    ) -> None:
        self._reader = reader
        self._stream = stream or sys.stdout

    def _ask(self, label: str) -> str:
        try:
            return self._reader(label).strip()
        except (EOFError, KeyboardInterrupt) as exc:
            raise PromptAborted("prompt cancelled by user") from exc

    def select(self, message: str, choices: Sequence[str]) -> str:
        if not choices:
            raise ValueError("choices must not be empty")

        self._stream.write(f"? {message}\n")
        for index, choice in enumerate(choices, start=1):
            self._stream.write(f"  {index}) {choice}\n")
        self._stream.flush()

        while True:
            answer = self._ask(f"  Answer [1-{len(choices)}]: ")
            if answer in choices:
                return answer
            if answer.isdecimal() and 1 <= int(answer) <= len(choices):
                return choices[int(answer) - 1]
            self._stream.write(f"  Please pick a number between 1 and {len(choices)}.\n")

    def text(self, message: str) -> str:
        return self._ask(f"? {message} ")
