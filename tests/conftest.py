from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from scaffolder.prompts import Prompter  # noqa: E402


class ScriptedPrompter(Prompter):
    """Answer questions from a fixed script and record what was asked."""

    def __init__(self, *answers: str) -> None:
        self.answers = list(answers)
        self.asked: list[tuple[str, str, tuple[str, ...]]] = []

    def select(self, message: str, choices: Sequence[str]) -> str:
        self.asked.append(("select", message, tuple(choices)))
        return self.answers.pop(0)

    def text(self, message: str) -> str:
        self.asked.append(("text", message, ()))
        return self.answers.pop(0)


@pytest.fixture()
def scripted_prompter():
    return ScriptedPrompter


@pytest.fixture()
def project(tmp_path: Path) -> Path:
    """A project root configured for kebab-case folders."""

    (tmp_path / "scaffold.toml").write_text('scaffoldPattern = "kebab-case"\n', encoding="utf-8")
    return tmp_path
