"""Runtime settings for the wheel animation.

Only the cosmetic spin is configurable; the draw itself never is. Values come
from environment variables and can be temporarily overridden in tests via a
context manager::

    from decision_wheel.core import settings

    with settings.override(spin_delay=0.0):
        ...

``DECISION_WHEEL_SPIN_DELAY`` is the total pause in seconds across all
rotations (clamped to ``[0, MAX_SPIN_DELAY]``). ``DECISION_WHEEL_ROTATIONS``
is the number of intermediate picks shown before the result.
"""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Final

logger = logging.getLogger(__name__)

SPIN_DELAY_ENV: Final = "DECISION_WHEEL_SPIN_DELAY"
ROTATIONS_ENV: Final = "DECISION_WHEEL_ROTATIONS"

DEFAULT_SPIN_DELAY: Final = 0.75
MAX_SPIN_DELAY: Final = 1.0
DEFAULT_ROTATIONS: Final = 5
MIN_ROTATIONS: Final = 1
MAX_ROTATIONS: Final = 10


@dataclass(frozen=True)
class WheelSettings:
    spin_delay: float = DEFAULT_SPIN_DELAY
    rotations: int = DEFAULT_ROTATIONS

    @property
    def step_delay(self) -> float:
        return self.spin_delay / self.rotations


def clamp_delay(value: float) -> float:
    return min(max(value, 0.0), MAX_SPIN_DELAY)


def clamp_rotations(value: int) -> int:
    return min(max(value, MIN_ROTATIONS), MAX_ROTATIONS)


def _parse_float(raw: str | None, name: str) -> float | None:
    if raw is None or not raw.strip():
        return None
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r; expected a number of seconds", name, raw)
        return None


def _parse_int(raw: str | None, name: str) -> int | None:
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r; expected an integer", name, raw)
        return None


_OVERRIDE_STACK: list[dict[str, float | int]] = []


def load_settings(*, spin_delay: float | None = None, rotations: int | None = None) -> WheelSettings:
    """Resolve settings: explicit arguments, then overrides, then environment."""

    current = WheelSettings()
    env_delay = _parse_float(os.getenv(SPIN_DELAY_ENV), SPIN_DELAY_ENV)
    if env_delay is not None:
        current = replace(current, spin_delay=env_delay)
    env_rotations = _parse_int(os.getenv(ROTATIONS_ENV), ROTATIONS_ENV)
    if env_rotations is not None:
        current = replace(current, rotations=env_rotations)

    for values in _OVERRIDE_STACK:
        current = replace(current, **values)

    if spin_delay is not None:
        current = replace(current, spin_delay=spin_delay)
    if rotations is not None:
        current = replace(current, rotations=rotations)

    return WheelSettings(
        spin_delay=clamp_delay(float(current.spin_delay)),
        rotations=clamp_rotations(int(current.rotations)),
    )


@contextmanager
def override(*, spin_delay: float | None = None, rotations: int | None = None):
    """Temporarily override settings within the context. Overrides stack."""

    values: dict[str, float | int] = {}
    if spin_delay is not None:
        values["spin_delay"] = spin_delay
    if rotations is not None:
        values["rotations"] = rotations
    _OVERRIDE_STACK.append(values)
    try:
        yield
    finally:
        _OVERRIDE_STACK.pop()
