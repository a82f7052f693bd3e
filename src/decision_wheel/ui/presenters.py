from __future__ import annotations

from typing import Callable

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..core.interfaces import Presenter
from ..core.models import OptionSet, SelectionResult
from ..core.report import DISTRIBUTION_NAME, GENERATOR_NAME, WheelReport, fmt_pct

TITLE = "DECISION WHEEL"


class RichPresenter(Presenter):
    def __init__(
        self,
        *,
        no_color: bool = False,
        console: Console | None = None,
        input_fn: Callable[[str], str] = input,
    ):
        if console is not None:
            self.console = console
        # Default: color ON (forced), unless explicitly disabled via --no-color.
        elif no_color:
            self.console = Console(force_terminal=False, color_system=None)
        else:
            self.console = Console(force_terminal=True, color_system="auto")
        self._input_fn = input_fn

    def start_session(self) -> None:
        intro = (
            "[bold]Spin the wheel to settle a decision.[/]\n"
            "Method: uniform pseudo-random selection\n"
            "Enter 2-10 options, one per line."
        )
        self.console.print(Panel(intro, title=TITLE, border_style="bold cyan", expand=False))
        self.console.print()
        self.console.rule("PHASE 1: OPTION COLLECTION")

    # --- collection ---
    def read_count(self, low: int, high: int) -> str:
        return self._ask(f"Number of options (minimum: {low}, maximum: {high}): ")

    def reject_count(self, raw: str, low: int, high: int) -> None:
        shown = raw.strip() or "empty input"
        self.console.print(
            Text.assemble(
                ("Invalid count", "red"),
                f" ({shown}). Please enter a whole number from {low} to {high}.",
            )
        )

    def start_options(self, count: int) -> None:
        self.console.print()
        self.console.print(f"Enter {count} options (press Enter after each one):")

    def read_option(self, position: int, retry: bool) -> str:
        if retry:
            return self._ask("Please enter valid option text: ")
        return self._ask(f"Option {position}: ")

    def reject_option(self, position: int) -> None:
        self.console.print(f"[red]Empty input[/] for option {position}.")

    def options_collected(self, options: OptionSet) -> None:
        self.console.print()
        self.console.print("[green]Option collection complete.[/]")
        self.console.print(f"Total options processed: {len(options)}")
        self.console.print()

    # --- spin ---
    def start_spin(self) -> None:
        self.console.rule("PHASE 2: WHEEL SPIN")
        self.console.print("[dim]Spinning the wheel...[/]")

    def show_rotation(self, step: int, label: str) -> None:
        self.console.print(Text.assemble(f"Rotation {step}: ", label), soft_wrap=True)

    def show_selection(self, options: OptionSet, result: SelectionResult) -> None:
        self.console.print()
        self.console.rule("[bold green]SELECTION RESULT[/]", style="green")
        # Labels stay on one line so the winner reads exactly as typed.
        self.console.print(Text.assemble("SELECTED OPTION: ", (result.label, "bold green")), soft_wrap=True)
        self.console.print(f"Selection index: {result.position} of {len(options)}")
        self.console.rule(style="green")
        self.console.print()

    # --- report ---
    def show_report(self, options: OptionSet, result: SelectionResult, report: WheelReport) -> None:
        self.console.rule("PHASE 3: WHEEL")
        self.console.print(f"Total sectors: {report.count}")
        self.console.print(f"Sector angle: {report.sector_angle:.2f} degrees")

        wheel = Table(show_header=True, header_style="bold blue", box=box.ASCII)
        wheel.add_column("#", justify="right", no_wrap=True)
        wheel.add_column("Option", overflow="fold")
        wheel.add_column("", no_wrap=True)
        for i, label in enumerate(options):
            marker = "<-- SELECTED" if i == result.index else ""
            style = "bold green" if i == result.index else None
            wheel.add_row(str(i + 1), Text(label), marker, style=style)
        self.console.print(wheel)
        self.console.print()

        self.console.rule("PHASE 4: STATISTICS")
        stats = Table(show_header=False, box=box.SIMPLE)
        stats.add_column(style="bold cyan", no_wrap=True)
        stats.add_column(no_wrap=True)
        stats.add_row("Individual option probability:", fmt_pct(report.probability_pct))
        stats.add_row("Cumulative probability:", fmt_pct(report.cumulative_pct))
        stats.add_row("Distribution:", DISTRIBUTION_NAME)
        stats.add_row("Generator:", GENERATOR_NAME)
        stats.add_row("Selected option length:", f"{report.selected_length} characters")
        stats.add_row("Option count:", f"{report.count} choices")
        stats.add_row("Decision complexity:", report.complexity)
        self.console.print(stats)
        self.console.print(f"[dim]{report.complexity}: {report.recommendation}.[/]")
        self.console.print()

    def end_session(self) -> None:
        self.console.print(Panel("Decision made. Good luck!", title="DONE", border_style="cyan", expand=False))

    # --- helpers ---
    def _ask(self, prompt: str) -> str:
        self.console.print(prompt, end="")
        return self._input_fn("")
