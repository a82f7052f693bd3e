from __future__ import annotations

import random
from collections.abc import Iterator

from .models import OptionSet, SelectionResult


def select_random(options: OptionSet, rng: random.Random) -> SelectionResult:
    """Pick one option uniformly; every index has probability 1/len(options)."""

    index = rng.randrange(len(options))
    return SelectionResult(index=index, label=options[index])


def spin_frames(options: OptionSet, rng: random.Random, rotations: int) -> Iterator[SelectionResult]:
    # Each frame is an independent draw shown for effect only.
    for _ in range(rotations):
        yield select_random(options, rng)
