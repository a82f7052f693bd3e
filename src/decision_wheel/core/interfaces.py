from __future__ import annotations

from typing import Protocol

from .models import OptionSet, SelectionResult
from .report import WheelReport


class Presenter(Protocol):
    def start_session(self) -> None: ...

    def read_count(self, low: int, high: int) -> str:
        """Return one raw line answering the option-count prompt."""
        ...

    def reject_count(self, raw: str, low: int, high: int) -> None: ...

    def start_options(self, count: int) -> None: ...

    def read_option(self, position: int, retry: bool) -> str: ...

    def reject_option(self, position: int) -> None: ...

    def options_collected(self, options: OptionSet) -> None: ...

    def start_spin(self) -> None: ...

    def show_rotation(self, step: int, label: str) -> None: ...

    def show_selection(self, options: OptionSet, result: SelectionResult) -> None: ...

    def show_report(self, options: OptionSet, result: SelectionResult, report: WheelReport) -> None: ...

    def end_session(self) -> None: ...
