from __future__ import annotations

import random

import pytest

from decision_wheel.core.engine_core import run_core
from decision_wheel.core.settings import WheelSettings
from decision_wheel.ui.presenters import RichPresenter


class _SleepRecorder:
    def __init__(self) -> None:
        self.calls: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


def test_run_core_returns_member_with_matching_position(plain_console, scripted):
    labels = ["Pizza", "Sushi", "Tacos"]
    presenter = RichPresenter(console=plain_console, input_fn=scripted(["3", *labels]))
    settings = WheelSettings(spin_delay=0.0)
    result = run_core(presenter, rng=random.Random(5), settings=settings, sleep=_SleepRecorder())

    assert result.label in labels
    assert labels.index(result.label) + 1 == result.position
    assert f"Selection index: {result.position} of 3" in plain_console.file.getvalue()


def test_final_pick_is_drawn_after_rotation_frames(plain_console, scripted):
    labels = ["a", "b", "c", "d", "e", "f"]
    rotations = 4
    presenter = RichPresenter(console=plain_console, input_fn=scripted(["6", *labels]))
    result = run_core(
        presenter,
        rng=random.Random(77),
        settings=WheelSettings(spin_delay=0.0, rotations=rotations),
        sleep=_SleepRecorder(),
    )

    mirror = random.Random(77)
    frames = [mirror.randrange(6) for _ in range(rotations)]
    assert result.index == mirror.randrange(6)
    out = plain_console.file.getvalue()
    for step, index in enumerate(frames, 1):
        assert f"Rotation {step}: {labels[index]}" in out


def test_spin_pause_is_bounded(plain_console, scripted):
    sleep = _SleepRecorder()
    presenter = RichPresenter(console=plain_console, input_fn=scripted(["2", "yes", "no"]))
    run_core(presenter, rng=random.Random(1), settings=WheelSettings(spin_delay=1.0, rotations=5), sleep=sleep)

    assert len(sleep.calls) == 5
    assert sum(sleep.calls) == pytest.approx(1.0)


def test_zero_delay_never_sleeps(plain_console, scripted):
    sleep = _SleepRecorder()
    presenter = RichPresenter(console=plain_console, input_fn=scripted(["2", "yes", "no"]))
    run_core(presenter, rng=random.Random(1), settings=WheelSettings(spin_delay=0.0), sleep=sleep)

    assert sleep.calls == []
