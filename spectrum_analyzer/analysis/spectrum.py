"""Polar decomposition of complex frequency-domain samples.

Functions
---------
calculate_magnitude
    ``sqrt(re^2 + im^2)`` per sample (float64 intermediate), float32.
calculate_phase
    ``atan2(im, re)`` per sample, float32, in ``(-pi, pi]``.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from spectrum_analyzer.models.buffer import VALUE_DTYPE, as_sample_buffer

_NEG_PI = np.float32(-np.pi)
_POS_PI = np.float32(np.pi)


def calculate_magnitude(samples: Any) -> np.ndarray:
    """Magnitude of each complex sample.

    Parameters
    ----------
    samples:
        Anything accepted by :func:`~spectrum_analyzer.models.buffer.as_sample_buffer`.

    Returns
    -------
    np.ndarray
        float32 array of the same length, index-aligned with ``samples``.
        Finite inputs give finite, non-negative outputs; NaN/Inf propagate
        per IEEE-754.
    """
    x = as_sample_buffer(samples)
    # float64 keeps the squares of finite float32 values finite
    mag = np.hypot(x.real.astype(np.float64), x.imag.astype(np.float64))
    return mag.astype(VALUE_DTYPE)


def calculate_phase(samples: Any) -> np.ndarray:
    r"""Phase angle of each complex sample in radians.

    Returns
    -------
    np.ndarray
        float32 array in :math:`(-\pi, \pi]`, same length as ``samples``.

    Notes
    -----
    - ``(0, 0)`` maps to exactly ``0.0`` (``atan2(0, 0)``); it is not an error.
    - A negative-zero imaginary part on the negative real axis would give
      :math:`-\pi`; it is folded to :math:`+\pi`.
    """
    x = as_sample_buffer(samples)
    phase = np.arctan2(x.imag, x.real).astype(VALUE_DTYPE, copy=False)
    phase[phase == _NEG_PI] = _POS_PI
    return phase
