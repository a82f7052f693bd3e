from __future__ import annotations

from dataclasses import dataclass

from .models import OptionSet, SelectionResult

FULL_TURN_DEGREES = 360.0
CUMULATIVE_PCT = 100.0

# Upper bounds (inclusive) of each complexity band; anything above is HIGH.
LOW_MAX_OPTIONS = 3
MODERATE_MAX_OPTIONS = 6

DISTRIBUTION_NAME = "Uniform"
GENERATOR_NAME = "Mersenne Twister (Python random.Random)"

_RECOMMENDATIONS = {
    "LOW": "Limited option set provides clear alternatives",
    "MODERATE": "Balanced option set for effective decision-making",
    "HIGH": "Extensive option set may benefit from preliminary filtering",
}


@dataclass(frozen=True)
class WheelReport:
    count: int
    probability_pct: float
    cumulative_pct: float
    sector_angle: float
    complexity: str
    recommendation: str
    selected_length: int


def option_probability(count: int) -> float:
    """Per-option selection chance in percent, rounded to two decimals."""

    if count <= 0:
        raise ValueError("count must be positive")
    return round(100.0 / count, 2)


def sector_angle(count: int) -> float:
    if count <= 0:
        raise ValueError("count must be positive")
    return FULL_TURN_DEGREES / count


def complexity_label(count: int) -> str:
    if count <= LOW_MAX_OPTIONS:
        return "LOW"
    if count <= MODERATE_MAX_OPTIONS:
        return "MODERATE"
    return "HIGH"


def recommendation_for(label: str) -> str:
    return _RECOMMENDATIONS[label]


def build_report(options: OptionSet, result: SelectionResult) -> WheelReport:
    count = len(options)
    complexity = complexity_label(count)
    return WheelReport(
        count=count,
        probability_pct=option_probability(count),
        cumulative_pct=CUMULATIVE_PCT,
        sector_angle=sector_angle(count),
        complexity=complexity,
        recommendation=recommendation_for(complexity),
        selected_length=len(result.label),
    )


def fmt_pct(value: float) -> str:
    return f"{value:.2f}%"
