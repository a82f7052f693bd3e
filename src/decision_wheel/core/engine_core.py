from __future__ import annotations

import logging
import random
import time
from typing import Callable

from .collection import collect_options
from .interfaces import Presenter
from .models import SelectionResult
from .report import build_report
from .selection import select_random, spin_frames
from .settings import WheelSettings

logger = logging.getLogger(__name__)


def run_core(
    presenter: Presenter,
    *,
    rng: random.Random,
    settings: WheelSettings,
    sleep: Callable[[float], None] = time.sleep,
) -> SelectionResult:
    presenter.start_session()
    options = collect_options(presenter)

    presenter.start_spin()
    for step, frame in enumerate(spin_frames(options, rng, settings.rotations), 1):
        presenter.show_rotation(step, frame.label)
        if settings.step_delay > 0:
            sleep(settings.step_delay)

    result = select_random(options, rng)
    logger.debug("Selected option %d of %d", result.position, len(options))
    presenter.show_selection(options, result)
    presenter.show_report(options, result, build_report(options, result))
    presenter.end_session()
    return result
