from __future__ import annotations

from typing import Any

import numpy as np

from spectrum_analyzer.errors import InvalidArgument

SAMPLE_DTYPE = np.complex64
VALUE_DTYPE = np.float32


def as_sample_buffer(samples: Any) -> np.ndarray:
    """Coerce ``samples`` into a 1-D ``complex64`` sample buffer.

    Accepted inputs
    ---------------
    - complex array-like of shape ``(N,)``
    - real array-like of shape ``(N, 2)`` holding ``(real, imag)`` pairs,
      e.g. ``[(1, 0), (0, 1)]``
    - real array-like of shape ``(N,)`` (imaginary part set to 0)

    The result never aliases a complex64 input: a fresh array is returned.
    """
    try:
        x = np.asarray(samples)
    except (TypeError, ValueError) as e:
        raise InvalidArgument(f"Cannot interpret samples as an array: {e}") from e

    if np.iscomplexobj(x):
        if x.ndim != 1:
            raise InvalidArgument(f"Complex samples must be 1D, got shape {x.shape}")
        return x.astype(SAMPLE_DTYPE, copy=True)

    if x.dtype == object or not np.issubdtype(x.dtype, np.number):
        raise InvalidArgument(f"Samples must be numeric, got dtype {x.dtype}")

    if x.ndim == 1:
        return x.astype(SAMPLE_DTYPE)
    if x.ndim == 2 and x.shape[1] == 2:
        out = np.empty(x.shape[0], dtype=SAMPLE_DTYPE)
        out.real = x[:, 0]
        out.imag = x[:, 1]
        return out
    raise InvalidArgument(f"Samples must be 1D complex or (N, 2) real/imag pairs, got shape {x.shape}")
