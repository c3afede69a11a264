"""Tests for AnalysisConfig."""

from __future__ import annotations

import dataclasses
import json

import numpy as np
import pytest

from spectrum_analyzer.errors import InvalidArgument
from spectrum_analyzer.models.config import AnalysisConfig
from spectrum_analyzer.models.waveforms import SAMPLE_RATE_HZ, SignalType


def _cfg(**kw) -> AnalysisConfig:
    base = dict(n=256, signal_type=SignalType.SINE, scale_factor=1.0, min_frequency=0.0, max_frequency=100.0)
    base.update(kw)
    return AnalysisConfig(**base)


def test_config_defaults() -> None:
    c = _cfg()
    assert c.display_phase is False
    assert c.sample_rate_hz == SAMPLE_RATE_HZ
    assert c.nyquist_hz == SAMPLE_RATE_HZ / 2
    assert c.bin_spacing_hz == pytest.approx(SAMPLE_RATE_HZ / 256)


def test_config_normalizes_selector_and_numbers() -> None:
    c = _cfg(n=np.int32(8), signal_type="square", min_frequency=1, max_frequency=np.float32(2.0))
    assert c.signal_type is SignalType.SQUARE
    assert type(c.n) is int
    assert type(c.min_frequency) is float
    assert type(c.max_frequency) is float


def test_config_frozen() -> None:
    c = _cfg()
    with pytest.raises(dataclasses.FrozenInstanceError):
        c.n = 3  # type: ignore[misc]


def test_config_replace_revalidates() -> None:
    c = _cfg()
    c2 = dataclasses.replace(c, max_frequency=200.0)
    assert c2.max_frequency == 200.0
    assert c2.n == 256
    with pytest.raises(InvalidArgument):
        dataclasses.replace(c, min_frequency=500.0)


def test_equal_bounds_allowed() -> None:
    c = _cfg(min_frequency=50.0, max_frequency=50.0)
    assert c.min_frequency == c.max_frequency


@pytest.mark.parametrize(
    "kw",
    [
        {"n": 0},
        {"n": -4},
        {"n": 4.0},
        {"n": True},
        {"signal_type": 17},
        {"signal_type": "noise"},
        {"min_frequency": 10.0, "max_frequency": 5.0},
        {"scale_factor": float("inf")},
        {"scale_factor": "2"},
        {"max_frequency": float("nan")},
        {"sample_rate_hz": 0.0},
        {"sample_rate_hz": -1.0},
    ],
)
def test_config_rejects(kw) -> None:
    with pytest.raises(InvalidArgument):
        _cfg(**kw)


def test_create_positional() -> None:
    c = AnalysisConfig.create(64, 1, 0.5, 10.0, 20.0, True, sample_rate_hz=2000.0)
    assert c.signal_type is SignalType.SINE
    assert c.display_phase is True
    assert c.sample_rate_hz == 2000.0


def test_dict_roundtrip_through_json() -> None:
    c = _cfg(signal_type=SignalType.TRIANGLE, display_phase=True)
    d = json.loads(json.dumps(c.to_dict()))
    assert d["signal_type"] == "triangle"
    assert AnalysisConfig.from_dict(d) == c
