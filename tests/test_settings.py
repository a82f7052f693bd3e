from __future__ import annotations

import pytest

from decision_wheel.core import settings


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    monkeypatch.delenv(settings.SPIN_DELAY_ENV, raising=False)
    monkeypatch.delenv(settings.ROTATIONS_ENV, raising=False)
    return monkeypatch


def test_defaults_without_env(clean_env):
    loaded = settings.load_settings()
    assert loaded.spin_delay == settings.DEFAULT_SPIN_DELAY
    assert loaded.rotations == settings.DEFAULT_ROTATIONS
    assert loaded.spin_delay <= settings.MAX_SPIN_DELAY


def test_env_values_are_read_and_clamped(clean_env):
    clean_env.setenv(settings.SPIN_DELAY_ENV, "5")
    clean_env.setenv(settings.ROTATIONS_ENV, "3")
    loaded = settings.load_settings()
    assert loaded.spin_delay == settings.MAX_SPIN_DELAY
    assert loaded.rotations == 3


def test_unparseable_env_falls_back_to_defaults(clean_env, caplog):
    clean_env.setenv(settings.SPIN_DELAY_ENV, "slow")
    clean_env.setenv(settings.ROTATIONS_ENV, "many")
    with caplog.at_level("WARNING", logger="decision_wheel.core.settings"):
        loaded = settings.load_settings()
    assert loaded == settings.WheelSettings()
    assert settings.SPIN_DELAY_ENV in caplog.text
    assert settings.ROTATIONS_ENV in caplog.text


def test_override_stack_and_explicit_arguments(clean_env):
    clean_env.setenv(settings.ROTATIONS_ENV, "4")
    with settings.override(spin_delay=0.2):
        assert settings.load_settings().spin_delay == pytest.approx(0.2)
        with settings.override(rotations=2):
            assert settings.load_settings().rotations == 2
        assert settings.load_settings().rotations == 4
        assert settings.load_settings(rotations=7).rotations == 7
    assert settings.load_settings().spin_delay == settings.DEFAULT_SPIN_DELAY


def test_rotations_are_clamped(clean_env):
    assert settings.load_settings(rotations=0).rotations == settings.MIN_ROTATIONS
    assert settings.load_settings(rotations=99).rotations == settings.MAX_ROTATIONS


def test_negative_delay_clamps_to_zero(clean_env):
    loaded = settings.load_settings(spin_delay=-1.0)
    assert loaded.spin_delay == 0.0
    assert loaded.step_delay == 0.0
