from __future__ import annotations

import io
import sys
from collections.abc import Iterable
from pathlib import Path

import pytest

# Ensure "src" is on sys.path for imports in tests
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from rich.console import Console  # noqa: E402


class ScriptedInput:
    """Feeds canned lines to a presenter; raises EOFError once exhausted."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = list(lines)
        self.consumed = 0

    def __call__(self, _prompt: str = "") -> str:
        if self.consumed >= len(self._lines):
            raise EOFError
        line = self._lines[self.consumed]
        self.consumed += 1
        return line


@pytest.fixture
def plain_console() -> Console:
    return Console(file=io.StringIO(), force_terminal=False, color_system=None, width=100)


@pytest.fixture(autouse=True)
def _no_spin_delay(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DECISION_WHEEL_SPIN_DELAY", "0")


@pytest.fixture
def scripted():
    return ScriptedInput
