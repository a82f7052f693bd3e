from __future__ import annotations

import logging
import random
import secrets
import time
from typing import Callable

from .core.engine_core import run_core
from .core.models import SelectionResult
from .core.settings import load_settings
from .ui.presenters import RichPresenter

logger = logging.getLogger(__name__)


def run_play(
    seed: int | None = None,
    no_color: bool = False,
    spin_delay: float | None = None,
    rotations: int | None = None,
    _input_fn: Callable[[str], str] = input,
    _sleep: Callable[[float], None] = time.sleep,
    _console=None,
) -> SelectionResult:
    presenter = RichPresenter(no_color=no_color, console=_console, input_fn=_input_fn)
    settings = load_settings(spin_delay=spin_delay, rotations=rotations)
    # Choose a random seed when none is provided for varied sessions
    actual_seed = seed if seed is not None else secrets.randbits(32)
    logger.debug(
        "Starting session (seed=%d, rotations=%d, spin_delay=%.2fs)",
        actual_seed,
        settings.rotations,
        settings.spin_delay,
    )
    return run_core(presenter, rng=random.Random(actual_seed), settings=settings, sleep=_sleep)
