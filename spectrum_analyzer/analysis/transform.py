"""Forward DFT providers.

The analysis core never computes the transform itself; it calls an object
satisfying :class:`TransformProvider`. The provider may offload the work (e.g.
to a device), but the call is blocking from the caller's point of view.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import numpy as np

from spectrum_analyzer.errors import InvalidArgument, TransformFailure
from spectrum_analyzer.models.buffer import SAMPLE_DTYPE


@runtime_checkable
class TransformProvider(Protocol):
    """Computes the unnormalized forward DFT of a 1-D complex64 buffer.

    Implementations must return a buffer of the same length. Failures should be
    raised as exceptions; the orchestrator turns them into :class:`TransformFailure`.
    """

    def forward_transform(self, buffer: np.ndarray) -> np.ndarray:
        ...


class NumpyFFTProvider:
    """Host-side provider backed by :func:`numpy.fft.fft`.

    Parameters
    ----------
    inplace:
        If True, the spectrum is written back into the buffer handed over and
        that same array is returned. Otherwise a new array is returned and the
        input is left untouched.
    """

    def __init__(self, *, inplace: bool = False) -> None:
        self.inplace = bool(inplace)

    def __repr__(self) -> str:
        return f"NumpyFFTProvider(inplace={self.inplace})"

    def forward_transform(self, buffer: np.ndarray) -> np.ndarray:
        x = np.asarray(buffer)
        if x.ndim != 1:
            raise InvalidArgument(f"buffer must be 1D, got shape {x.shape}")
        if x.size == 0:
            raise TransformFailure("cannot plan a transform of an empty buffer")

        if self.inplace and (x.dtype != SAMPLE_DTYPE or not x.flags.writeable):
            raise InvalidArgument("in-place transform requires a writeable complex64 buffer")

        spec = np.fft.fft(x).astype(SAMPLE_DTYPE, copy=False)
        if self.inplace:
            x[...] = spec
            return x
        return spec
