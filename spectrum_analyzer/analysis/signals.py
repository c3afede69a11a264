"""Synthetic time-domain test signals.

Every waveform is real-valued: the imaginary part of each generated sample is 0.
Sample ``i`` is evaluated at ``t = i / sample_rate_hz``.
"""

from __future__ import annotations

from numbers import Integral
from typing import Callable, Dict

import numpy as np

from spectrum_analyzer.errors import InvalidArgument
from spectrum_analyzer.models.buffer import SAMPLE_DTYPE
from spectrum_analyzer.models.waveforms import (
    DEFAULT_SIGNAL_SETTINGS,
    SignalSettings,
    SignalType,
    SignalTypeLike,
    resolve_signal_type,
)


def _sine(t: np.ndarray, s: SignalSettings) -> np.ndarray:
    return s.amplitude * np.sin(2.0 * np.pi * s.frequency_hz * t)


def _cosine(t: np.ndarray, s: SignalSettings) -> np.ndarray:
    return s.amplitude * np.cos(2.0 * np.pi * s.frequency_hz * t)


def _square(t: np.ndarray, s: SignalSettings) -> np.ndarray:
    # High on the first half of each period (sine >= 0), low on the second.
    return np.where(np.sin(2.0 * np.pi * s.frequency_hz * t) >= 0.0, s.amplitude, -s.amplitude)


def _sawtooth(t: np.ndarray, s: SignalSettings) -> np.ndarray:
    # Rises from -A to A over one period, zero at t = 0.
    cycles = s.frequency_hz * t
    return s.amplitude * 2.0 * (cycles - np.floor(cycles + 0.5))


def _triangle(t: np.ndarray, s: SignalSettings) -> np.ndarray:
    # Starts at -A, peaks at +A mid-period.
    cycles = s.frequency_hz * t
    return s.amplitude * (2.0 * np.abs(2.0 * (cycles - np.floor(cycles + 0.5))) - 1.0)


def _impulse(t: np.ndarray, s: SignalSettings) -> np.ndarray:
    x = np.zeros_like(t)
    if x.size:
        x[0] = s.amplitude
    return x


_WAVEFORMS: Dict[SignalType, Callable[[np.ndarray, SignalSettings], np.ndarray]] = {
    SignalType.SINE: _sine,
    SignalType.SQUARE: _square,
    SignalType.TRIANGLE: _triangle,
    SignalType.SAWTOOTH: _sawtooth,
    SignalType.COSINE: _cosine,
    SignalType.IMPULSE: _impulse,
}


def sample_times(n: int, sample_rate_hz: float) -> np.ndarray:
    """Time stamps ``i / sample_rate_hz`` for ``i`` in ``[0, n)``."""
    return np.arange(n, dtype=np.float64) / float(sample_rate_hz)


def generate_input_data(
    n: int,
    signal_type: SignalTypeLike,
    *,
    settings: SignalSettings = DEFAULT_SIGNAL_SETTINGS,
) -> np.ndarray:
    """Generate ``n`` complex samples of the selected waveform.

    Parameters
    ----------
    n:
        Number of samples, must be > 0.
    signal_type:
        :class:`SignalType` member, integer code (``1`` is sine) or name.
    settings:
        Synthesis constants. The module defaults are the fixed configuration of
        the generator; override only for alternate test rigs.

    Returns
    -------
    np.ndarray
        ``complex64`` array of shape ``(n,)`` with zero imaginary part.

    Raises
    ------
    InvalidArgument
        If ``n`` is not a positive integer or ``signal_type`` is unknown.
    """
    if isinstance(n, bool) or not isinstance(n, Integral):
        raise InvalidArgument(f"n must be an integer, got {n!r}")
    if n <= 0:
        raise InvalidArgument(f"n must be > 0, got {n}")
    kind = resolve_signal_type(signal_type)
    if settings.sample_rate_hz <= 0.0:
        raise InvalidArgument(f"sample_rate_hz must be > 0, got {settings.sample_rate_hz}")

    t = sample_times(int(n), settings.sample_rate_hz)
    real = _WAVEFORMS[kind](t, settings)

    out = np.zeros(int(n), dtype=SAMPLE_DTYPE)
    out.real = real
    return out
